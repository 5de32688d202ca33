"""
Modèle de données d'un document EPUB décodé.

Toutes les structures sont immuables une fois construites: le conteneur
produit des descripteurs en lecture seule, puis le parseur de package
construit de nouvelles valeurs ``Rootfile`` complètes.
"""

import posixpath
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class RootfileDescriptor:
    """Entrée ``rootfile`` telle que déclarée dans container.xml."""

    full_path: str
    media_type: str = ""


@dataclass(frozen=True)
class Container:
    rootfiles: Tuple[RootfileDescriptor, ...] = ()


# --- Métadonnées ---


@dataclass(frozen=True)
class Creator:
    name: str = ""
    role: str = ""
    file_as: str = ""


@dataclass(frozen=True)
class Contributor:
    name: str = ""
    role: str = ""


@dataclass(frozen=True)
class Identifier:
    """Un ``dc:identifier``; ``value`` est le texte de l'élément."""

    value: str = ""
    id: str = ""
    scheme: str = ""


@dataclass(frozen=True)
class MetaEntry:
    """Entrée ``meta`` libre (EPUB2 ``name``/``content`` ou EPUB3 ``property``)."""

    name: str = ""
    content: str = ""
    property: str = ""
    refines: str = ""


@dataclass(frozen=True)
class Metadata:
    title: str = ""
    creator: Creator = field(default_factory=Creator)
    identifiers: Tuple[Identifier, ...] = ()
    date: str = ""
    publisher: str = ""
    description: str = ""
    contributor: Contributor = field(default_factory=Contributor)
    subject: str = ""
    language: str = ""
    meta: Tuple[MetaEntry, ...] = ()

    def get_meta(self, name: str) -> Optional[str]:
        """Retourne le contenu de la première entrée ``meta`` portant ce nom."""
        for entry in self.meta:
            if entry.name == name:
                return entry.content
        return None


# --- Manifest / Spine / Guide ---


@dataclass(frozen=True)
class ManifestItem:
    id: str
    href: str
    media_type: str = ""
    properties: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Manifest:
    """Catalogue id -> item, dans l'ordre du document."""

    items: Dict[str, ManifestItem] = field(default_factory=dict)

    def get(self, item_id: str) -> Optional[ManifestItem]:
        return self.items.get(item_id)

    def __getitem__(self, item_id: str) -> ManifestItem:
        return self.items[item_id]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self.items

    def __iter__(self) -> Iterator[ManifestItem]:
        return iter(self.items.values())

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class SpineItemref:
    idref: str
    linear: bool = True


@dataclass(frozen=True)
class Spine:
    toc: str = ""
    itemrefs: Tuple[SpineItemref, ...] = ()

    @property
    def idrefs(self) -> List[str]:
        return [ref.idref for ref in self.itemrefs]

    def __len__(self) -> int:
        return len(self.itemrefs)


@dataclass(frozen=True)
class GuideReference:
    href: str = ""
    title: str = ""
    type: str = ""


@dataclass(frozen=True)
class Guide:
    references: Tuple[GuideReference, ...] = ()


@dataclass(frozen=True)
class Package:
    version: str = ""
    unique_identifier: str = ""
    metadata: Metadata = field(default_factory=Metadata)
    manifest: Manifest = field(default_factory=Manifest)
    spine: Spine = field(default_factory=Spine)
    guide: Optional[Guide] = None


@dataclass(frozen=True)
class Rootfile:
    """Rootfile résolu: descripteur du conteneur plus son package décodé."""

    full_path: str
    media_type: str
    package: Package

    @property
    def base_dir(self) -> str:
        return posixpath.dirname(self.full_path)
