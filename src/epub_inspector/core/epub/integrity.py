"""
Module de validation référentielle.

Responsabilité unique: vérifier la cohérence interne d'un package bien
formé: manifest vs entrées de l'archive, spine vs manifest.
Le guide n'est pas vérifié.
"""

import logging
import posixpath
from typing import Optional
from urllib.parse import unquote, urlsplit

from ...config import REMOTE_SCHEMES
from ..errors import BadItemrefError, BadManifestError, NoItemrefError
from .archive import ArchiveIndex, LogSink
from .models import Rootfile

logger = logging.getLogger(__name__)


def is_remote(href: str) -> bool:
    """Vrai pour une ressource distante (schéma de ``REMOTE_SCHEMES``)."""
    return urlsplit(href).scheme.lower() in REMOTE_SCHEMES


def resolve_href(base_dir: str, href: str) -> str:
    """
    Résout un href du manifest en nom d'entrée de l'archive.

    Le fragment est ignoré, les séquences ``%XX`` sont décodées et le chemin
    est normalisé relativement au dossier du rootfile.

    Examples:
        >>> resolve_href("OEBPS", "text/ch%201.xhtml#p1")
        'OEBPS/text/ch 1.xhtml'
        >>> resolve_href("OEBPS", "../cover.jpg")
        'cover.jpg'
    """
    path = unquote(href.split("#", 1)[0])
    return posixpath.normpath(posixpath.join(base_dir, path))


def validate_package(
    archive: ArchiveIndex, rootfile: Rootfile, log: Optional[LogSink] = None
) -> None:
    """
    Vérifie l'intégrité référentielle d'un rootfile décodé.

    Ordre des vérifications:
    1. Chaque href du manifest désigne une entrée de l'archive
    2. Chaque idref du spine désigne un id du manifest
    3. Le spine contient au moins un itemref

    Raises:
        BadManifestError: href absent de l'archive
        BadItemrefError: idref absent du manifest
        NoItemrefError: spine vide
    """
    log = log or logger
    package = rootfile.package

    for item in package.manifest:
        if is_remote(item.href):
            log.debug("skipping remote manifest item %s", item.href)
            continue
        if resolve_href(rootfile.base_dir, item.href) not in archive:
            log.debug("manifest references non-existent item %s", item.href)
            raise BadManifestError(archive.name, rootfile.full_path, item.href)

    for itemref in package.spine.itemrefs:
        if itemref.idref not in package.manifest:
            log.debug("itemref references non-existent item %s", itemref.idref)
            raise BadItemrefError(archive.name, rootfile.full_path, itemref.idref)

    if not package.spine.itemrefs:
        log.debug("no itemrefs found in spine")
        raise NoItemrefError(archive.name, rootfile.full_path)
