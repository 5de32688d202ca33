"""
Module d'extracteurs de métadonnées.

Responsabilité unique: Fournir les extracteurs d'identifiants (ISBN
déclaré, ISBN canonique validé).
"""

import logging
from typing import Iterator, Optional

from isbnlib import canonical, is_isbn10, is_isbn13

from ...config import ISBN_RE, ISBN_SCHEME
from .models import Metadata

logger = logging.getLogger(__name__)


def find_isbn(metadata: Metadata) -> Optional[str]:
    """
    Retourne l'ISBN déclaré dans les identifiants.

    Le premier identifiant dont ``scheme`` vaut exactement ``ISBN`` est
    retenu: son attribut ``id`` s'il est non vide, sinon son texte.

    Args:
        metadata: Métadonnées du package

    Returns:
        ISBN tel que déclaré, ou None si aucun identifiant ISBN
    """
    for identifier in metadata.identifiers:
        if identifier.scheme == ISBN_SCHEME:
            if identifier.id:
                return identifier.id
            return identifier.value
    return None


def _isbn_candidates(metadata: Metadata) -> Iterator[str]:
    # Identifiants typés ISBN d'abord, puis tous les autres
    for identifier in metadata.identifiers:
        if identifier.scheme == ISBN_SCHEME:
            yield identifier.id
            yield identifier.value
    for identifier in metadata.identifiers:
        if identifier.scheme != ISBN_SCHEME:
            yield identifier.value


def find_canonical_isbn(metadata: Metadata) -> Optional[str]:
    """
    Recherche un ISBN valide parmi les identifiants.

    Chaque candidat doit correspondre à ``ISBN_RE`` et passer la validation
    de clé d'isbnlib (ISBN-10 ou ISBN-13). Le préfixe éventuel
    (``ISBN-13:``, ``ISBN-10:``) est ignoré.

    Returns:
        ISBN canonique (chiffres seuls) ou None
    """
    for candidate in _isbn_candidates(metadata):
        if not candidate:
            continue
        m = ISBN_RE.search(candidate)
        if not m:
            continue
        raw = m.group("number")
        if is_isbn10(raw) or is_isbn13(raw):
            isbn = canonical(raw)
            logger.debug("Canonical ISBN found: %s", isbn)
            return isbn
    return None
