"""
Module façade: document EPUB ouvert et validé.

Compose les étapes du pipeline (archive, mimetype, conteneur, packages,
intégrité) et expose les requêtes sur le résultat. Aucun document partiel
n'est jamais retourné: la première erreur interrompt l'ouverture et
l'archive est refermée.
"""

import logging
import zipfile
import zlib
from typing import List, Optional, Tuple

from ..errors import ArchiveReadError
from .archive import ArchiveIndex, LogSink, Source, source_name
from .container import parse_container
from .cover_finder import find_cover_item
from .integrity import resolve_href, validate_package
from .metadata_extractors import find_canonical_isbn, find_isbn
from .mimetype import validate_mimetype
from .models import Container, ManifestItem, Package, Rootfile
from .package import parse_packages

logger = logging.getLogger(__name__)

# Erreurs de lecture/décompression remontées par zipfile pendant les étapes
# (RuntimeError: entrée chiffrée détectée par ZipFile.open)
_READ_ERRORS = (
    OSError,
    EOFError,
    zipfile.BadZipFile,
    zlib.error,
    NotImplementedError,
    RuntimeError,
)


class ArchiveLoggerAdapter(logging.LoggerAdapter):
    """Préfixe chaque événement par le nom logique de l'archive."""

    def process(self, msg, kwargs):
        return f"{self.extra['file']}: {msg}", kwargs


class EpubDocument:
    """
    Document EPUB ouvert, validé et interrogeable.

    Toutes les données sont calculées à l'ouverture puis jamais modifiées;
    seule la fermeture de l'archive change l'état de l'objet.

    Usage:
        with EpubDocument.open("book.epub") as doc:
            print(doc.package.metadata.title, doc.get_isbn())
    """

    def __init__(self, archive: ArchiveIndex, container: Container, rootfiles: List[Rootfile]):
        self._archive = archive
        self._container = container
        self._rootfiles: Tuple[Rootfile, ...] = tuple(rootfiles)

    @classmethod
    def open(cls, source: Source, log: Optional[LogSink] = None) -> "EpubDocument":
        """
        Ouvre et valide un fichier EPUB.

        Args:
            source: Chemin du fichier ou flux binaire seekable
            log: Logger optionnel recevant les événements du pipeline

        Returns:
            EpubDocument complet

        Raises:
            EpubError: La première erreur rencontrée (voir ``core.errors``)
        """
        name = source_name(source)
        adapter = ArchiveLoggerAdapter(log or logger, {"file": name})

        archive = ArchiveIndex.open(source, adapter)
        try:
            try:
                validate_mimetype(archive, adapter)
                container = parse_container(archive, adapter)
                rootfiles = parse_packages(archive, container, adapter)
                for rootfile in rootfiles:
                    validate_package(archive, rootfile, adapter)
            except _READ_ERRORS as e:
                adapter.debug("read failure: %s", e)
                raise ArchiveReadError(name, f"read: {e}") from e
        except BaseException:
            archive.close()
            raise

        first = rootfiles[0]
        adapter.info("opened epub (rootfile %s, media-type %s)", first.full_path, first.media_type)
        return cls(archive, container, rootfiles)

    # --- Accès à l'arbre ---

    @property
    def name(self) -> str:
        return self._archive.name

    @property
    def archive(self) -> ArchiveIndex:
        return self._archive

    @property
    def container(self) -> Container:
        return self._container

    @property
    def rootfiles(self) -> Tuple[Rootfile, ...]:
        return self._rootfiles

    @property
    def rootfile(self) -> Rootfile:
        """Premier rootfile, celui consulté par les requêtes."""
        return self._rootfiles[0]

    @property
    def package(self) -> Package:
        return self.rootfile.package

    @property
    def closed(self) -> bool:
        return self._archive.closed

    # --- Requêtes ---

    def get_isbn(self) -> Optional[str]:
        """
        ISBN déclaré par le premier rootfile.

        Returns:
            Attribut ``id`` (ou à défaut le texte) du premier identifiant de
            schéma ``ISBN``; None si aucun. Les autres rootfiles ne sont pas
            consultés.
        """
        return find_isbn(self.package.metadata)

    def get_canonical_isbn(self) -> Optional[str]:
        """ISBN validé et canonique (isbnlib), ou None."""
        return find_canonical_isbn(self.package.metadata)

    def get_cover(self) -> Optional[str]:
        """
        Chemin dans l'archive de l'image de couverture déclarée.

        Returns:
            Chemin résolu de l'item de couverture, ou None si aucune
            couverture n'est déclarée
        """
        item = find_cover_item(self.package)
        if item is None:
            return None
        return self.resolve_href(item.href)

    def resolve_href(self, href: str) -> str:
        """Résout un href du premier package en nom d'entrée de l'archive."""
        return resolve_href(self.rootfile.base_dir, href)

    def spine_items(self) -> List[ManifestItem]:
        """Items du manifest dans l'ordre de lecture du spine."""
        manifest = self.package.manifest
        return [manifest[idref] for idref in self.package.spine.idrefs]

    # --- Cycle de vie ---

    def close(self) -> None:
        """Libère l'archive. Un second appel est sans effet."""
        self._archive.close()

    def __enter__(self) -> "EpubDocument":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<EpubDocument {self.name!r} rootfiles={len(self._rootfiles)}>"


def open_epub(source: Source, log: Optional[LogSink] = None) -> EpubDocument:
    """Raccourci pour ``EpubDocument.open``."""
    return EpubDocument.open(source, log)
