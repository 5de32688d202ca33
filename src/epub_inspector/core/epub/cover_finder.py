"""
Module de recherche de couverture EPUB.

Responsabilité unique: Implémenter différentes stratégies pour trouver
l'item du manifest déclaré comme image de couverture.

Pattern: Strategy Pattern pour les différentes méthodes de recherche.
Aucune heuristique sur les noms de fichiers: une couverture non déclarée
n'est pas trouvée.
"""

import logging
from typing import Optional

from ...config import COVER_IMAGE_PROPERTY, COVER_META_NAME
from .models import ManifestItem, Package

logger = logging.getLogger(__name__)


def _find_cover_by_property(package: Package) -> Optional[ManifestItem]:
    """
    Stratégie 1 (EPUB3): item du manifest portant la propriété ``cover-image``.

    Args:
        package: Package décodé

    Returns:
        Item de couverture ou None
    """
    for item in package.manifest:
        if COVER_IMAGE_PROPERTY in item.properties:
            logger.debug("Cover found via manifest property: %s", item.id)
            return item
    return None


def _find_cover_by_opf(package: Package) -> Optional[ManifestItem]:
    """
    Stratégie 2 (EPUB2): ``<meta name="cover" content="ID"/>`` dans les métadonnées.

    Args:
        package: Package décodé

    Returns:
        Item de couverture ou None si l'id ne désigne aucun item
    """
    cover_id = package.metadata.get_meta(COVER_META_NAME)
    if cover_id:
        item = package.manifest.get(cover_id)
        if item is None:
            logger.debug("Cover meta names unknown manifest id: %s", cover_id)
        else:
            logger.debug("Cover found via OPF metadata: %s", cover_id)
        return item
    return None


def find_cover_item(package: Package) -> Optional[ManifestItem]:
    """
    Cherche l'item de couverture en appliquant les stratégies dans l'ordre:
    1. Propriété ``cover-image`` du manifest
    2. Métadonnée OPF ``cover``

    Returns:
        Item de couverture ou None si aucune couverture n'est déclarée
    """
    return _find_cover_by_property(package) or _find_cover_by_opf(package)
