"""
Module de décodage des documents package (OPF).

Responsabilité unique: transformer chaque rootfile déclaré par le
conteneur en une valeur ``Rootfile`` complète (metadata, manifest, spine,
guide optionnel).
"""

import logging
from typing import Dict, List, Optional

from lxml import etree

from ..errors import BadRootfileError, EntryNotFoundError, MalformedPackageError
from .archive import ArchiveIndex, LogSink
from .models import (
    Container,
    Contributor,
    Creator,
    Guide,
    GuideReference,
    Identifier,
    Manifest,
    ManifestItem,
    MetaEntry,
    Metadata,
    Package,
    Rootfile,
    RootfileDescriptor,
    Spine,
    SpineItemref,
)
from .xml_utils import attr, child_text, children, first_child, local_name, parse_xml, text

logger = logging.getLogger(__name__)


class PackageFormatError(ValueError):
    """Document OPF bien formé mais structurellement invalide."""


# --- Décodage des sous-structures ---


def _decode_metadata(element: Optional[etree._Element]) -> Metadata:
    creator = first_child(element, "creator")
    contributor = first_child(element, "contributor")

    identifiers = tuple(
        Identifier(value=text(ident), id=attr(ident, "id"), scheme=attr(ident, "scheme"))
        for ident in children(element, "identifier")
    )

    meta = []
    for entry in children(element, "meta"):
        content = entry.get("content")
        meta.append(
            MetaEntry(
                name=attr(entry, "name"),
                content=content if content is not None else text(entry),
                property=attr(entry, "property"),
                refines=attr(entry, "refines"),
            )
        )

    return Metadata(
        title=child_text(element, "title"),
        creator=Creator(
            name=text(creator),
            role=attr(creator, "role"),
            file_as=attr(creator, "file-as"),
        ),
        identifiers=identifiers,
        date=child_text(element, "date"),
        publisher=child_text(element, "publisher"),
        description=child_text(element, "description"),
        contributor=Contributor(name=text(contributor), role=attr(contributor, "role")),
        subject=child_text(element, "subject"),
        language=child_text(element, "language"),
        meta=tuple(meta),
    )


def _decode_manifest(element: Optional[etree._Element]) -> Manifest:
    items: Dict[str, ManifestItem] = {}
    for item in children(element, "item"):
        item_id = attr(item, "id")
        if not item_id:
            raise PackageFormatError(f"manifest item without id (href '{attr(item, 'href')}')")
        if item_id in items:
            raise PackageFormatError(f"duplicate manifest id '{item_id}'")
        items[item_id] = ManifestItem(
            id=item_id,
            href=attr(item, "href"),
            media_type=attr(item, "media-type"),
            properties=tuple(attr(item, "properties").split()),
        )
    return Manifest(items=items)


def _decode_spine(element: Optional[etree._Element]) -> Spine:
    itemrefs = tuple(
        SpineItemref(idref=attr(ref, "idref"), linear=attr(ref, "linear") != "no")
        for ref in children(element, "itemref")
    )
    return Spine(toc=attr(element, "toc"), itemrefs=itemrefs)


def _decode_guide(element: Optional[etree._Element]) -> Optional[Guide]:
    if element is None:
        return None
    references: List[GuideReference] = [
        GuideReference(href=attr(ref, "href"), title=attr(ref, "title"), type=attr(ref, "type"))
        for ref in children(element, "reference")
    ]
    return Guide(references=tuple(references))


def decode_package(data: bytes) -> Package:
    """
    Décode le XML d'un document package.

    Raises:
        etree.XMLSyntaxError: Si le document est mal formé
        PackageFormatError: Si la racine n'est pas ``package`` ou si des ids
            du manifest sont manquants ou dupliqués
    """
    root = parse_xml(data)
    if local_name(root) != "package":
        raise PackageFormatError(f"expected element <package> but have <{local_name(root)}>")

    return Package(
        version=attr(root, "version"),
        unique_identifier=attr(root, "unique-identifier"),
        metadata=_decode_metadata(first_child(root, "metadata")),
        manifest=_decode_manifest(first_child(root, "manifest")),
        spine=_decode_spine(first_child(root, "spine")),
        guide=_decode_guide(first_child(root, "guide")),
    )


# --- Étape du pipeline ---


def parse_package(
    archive: ArchiveIndex,
    descriptor: RootfileDescriptor,
    log: Optional[LogSink] = None,
) -> Rootfile:
    """
    Lit et décode le package référencé par un descripteur de rootfile.

    Args:
        archive: Archive ouverte
        descriptor: Rootfile déclaré dans container.xml
        log: Logger optionnel recevant les événements de trace

    Returns:
        Nouveau Rootfile portant le package décodé

    Raises:
        BadRootfileError: Si ``full_path`` n'existe pas dans l'archive
        MalformedPackageError: Si le document ne peut pas être décodé
    """
    log = log or logger
    path = descriptor.full_path
    try:
        data = archive.read_all(path)
    except EntryNotFoundError:
        log.debug("not an epub (bad root file %s)", path)
        raise BadRootfileError(archive.name, path) from None

    try:
        package = decode_package(data)
    except (etree.XMLSyntaxError, PackageFormatError) as e:
        log.debug("cannot parse (bad root file %s): %s", path, e)
        raise MalformedPackageError(archive.name, f"cannot parse {path}: {e}", path=path) from e

    log.debug(
        "package %s: %d manifest item(s), %d itemref(s)",
        path,
        len(package.manifest),
        len(package.spine),
    )
    return Rootfile(full_path=path, media_type=descriptor.media_type, package=package)


def parse_packages(
    archive: ArchiveIndex, container: Container, log: Optional[LogSink] = None
) -> List[Rootfile]:
    """Décode tous les rootfiles; le premier échec interrompt l'ensemble."""
    return [parse_package(archive, descriptor, log) for descriptor in container.rootfiles]
