"""
Configuration et constantes pour EPUB Inspector
"""

import os
import re

# ---------- Chemins fixes de l'archive ----------
MIMETYPE_PATH = "mimetype"
EPUB_MIMETYPE = b"application/epub+zip"
CONTAINER_PATH = "META-INF/container.xml"

# ---------- Extensions supportées ----------
SUPPORTED_EXT = (".epub",)

# ---------- Métadonnées ----------
ISBN_SCHEME = "ISBN"
COVER_META_NAME = "cover"
COVER_IMAGE_PROPERTY = "cover-image"

# ---------- Ressources distantes ----------
REMOTE_SCHEMES = ("http", "https", "data", "mailto")

# ---------- Expressions régulières ----------
# Le groupe "number" exclut le préfixe "ISBN-13:" / "ISBN-10:"
ISBN_RE = re.compile(
    r"(?:ISBN(?:-1[03])?:?\s*)?(?P<number>(?:97[89][ -]?)?[0-9][0-9 -]{8,}[0-9Xx])"
)

# ---------- Configuration logging ----------
LOG_DIR = os.getenv("EPUB_INSPECTOR_LOG_DIR", "logs")
LOG_FILE = "epub_inspector.log"
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 5
LOG_ENCODING = "utf-8"


# ---------- Initialisation des dossiers ----------
def ensure_directories():
    """Crée les dossiers nécessaires s'ils n'existent pas."""
    os.makedirs(LOG_DIR, exist_ok=True)
