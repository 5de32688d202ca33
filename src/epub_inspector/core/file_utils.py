"""
Logique pour les opérations sur le système de fichiers.
"""

import logging
import os
from typing import List

from ..config import SUPPORTED_EXT

logger = logging.getLogger(__name__)


def is_epub_path(path: str) -> bool:
    """Vrai si l'extension du fichier est une extension EPUB supportée."""
    return path.lower().endswith(SUPPORTED_EXT)


def find_epubs_in_folder(folder: str) -> List[str]:
    """Trouve tous les fichiers EPUB dans un dossier et ses sous-dossiers (ordre trié)."""
    files = []
    for root, dirs, filenames in os.walk(folder):
        dirs.sort()
        for f in sorted(filenames):
            if is_epub_path(f):
                files.append(os.path.join(root, f))
    logger.info("Found %d epub(s) in folder %s", len(files), folder)
    return files
