"""
Module EPUB - Ouverture et validation des fichiers EPUB.

Ce module fournit le pipeline de validation (archive, mimetype,
conteneur, packages, intégrité référentielle) et la façade
``EpubDocument`` qui le compose.
"""

from .archive import ArchiveEntry, ArchiveIndex
from .document import EpubDocument, open_epub
from .models import (
    Container,
    Guide,
    GuideReference,
    Identifier,
    Manifest,
    ManifestItem,
    Metadata,
    Package,
    Rootfile,
    RootfileDescriptor,
    Spine,
    SpineItemref,
)

__all__ = [
    "ArchiveEntry",
    "ArchiveIndex",
    "Container",
    "EpubDocument",
    "Guide",
    "GuideReference",
    "Identifier",
    "Manifest",
    "ManifestItem",
    "Metadata",
    "Package",
    "Rootfile",
    "RootfileDescriptor",
    "Spine",
    "SpineItemref",
    "open_epub",
]
