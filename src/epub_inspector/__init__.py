"""
EPUB Inspector - ouverture, validation et interrogation de fichiers EPUB.
"""

import logging

from .core.epub import EpubDocument, open_epub
from .core.errors import (
    ArchiveReadError,
    BadItemrefError,
    BadManifestError,
    BadRootfileError,
    ContainerError,
    EntryNotFoundError,
    EpubError,
    IntegrityError,
    InvalidMimetypeError,
    MalformedContainerError,
    MalformedPackageError,
    MimetypeError,
    MissingContainerError,
    MissingMimetypeError,
    NoItemrefError,
    NoRootfileError,
    NotAnArchiveError,
    PackageError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArchiveReadError",
    "BadItemrefError",
    "BadManifestError",
    "BadRootfileError",
    "ContainerError",
    "EntryNotFoundError",
    "EpubDocument",
    "EpubError",
    "IntegrityError",
    "InvalidMimetypeError",
    "MalformedContainerError",
    "MalformedPackageError",
    "MimetypeError",
    "MissingContainerError",
    "MissingMimetypeError",
    "NoItemrefError",
    "NoRootfileError",
    "NotAnArchiveError",
    "PackageError",
    "open_epub",
]
