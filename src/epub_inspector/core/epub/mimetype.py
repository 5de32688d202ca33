"""
Module de vérification du mimetype.

Responsabilité unique: vérifier que l'entrée ``mimetype`` existe et contient
exactement ``application/epub+zip``.
"""

import logging
from typing import Optional

from ...config import EPUB_MIMETYPE, MIMETYPE_PATH
from ..errors import EntryNotFoundError, InvalidMimetypeError, MissingMimetypeError
from .archive import ArchiveIndex, LogSink

logger = logging.getLogger(__name__)


def validate_mimetype(archive: ArchiveIndex, log: Optional[LogSink] = None) -> None:
    """
    Vérifie le marqueur mimetype de l'archive.

    La comparaison se fait octet par octet, sans suppression des espaces:
    un saut de ligne final suffit à invalider le fichier.

    Raises:
        MissingMimetypeError: Si l'entrée est absente
        InvalidMimetypeError: Si le contenu diffère
    """
    log = log or logger
    try:
        mimetype = archive.read_all(MIMETYPE_PATH)
    except EntryNotFoundError:
        log.debug("not an epub (no mimetype)")
        raise MissingMimetypeError(archive.name) from None

    if mimetype != EPUB_MIMETYPE:
        log.debug("not an epub (invalid mimetype %r)", mimetype)
        raise InvalidMimetypeError(archive.name, mimetype)
