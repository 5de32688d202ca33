"""
Hiérarchie des erreurs levées lors de l'ouverture d'un EPUB.

Chaque erreur porte le nom logique de l'archive (``source``) et, quand
c'est pertinent, le chemin de l'entrée fautive (``path``).
"""

from typing import Optional


class EpubError(Exception):
    """Erreur de base pour toute archive EPUB rejetée."""

    kind = "EpubError"

    def __init__(self, source: str, message: str, path: Optional[str] = None):
        self.source = source
        self.path = path
        self.message = message
        super().__init__(f"epub: {source}: {message}")


# --- Couche archive ---


class ArchiveReadError(EpubError):
    """L'archive ne peut pas être ouverte ou lue (erreur d'E/S)."""

    kind = "IOError"


class NotAnArchiveError(EpubError):
    """Le fichier n'est pas une archive ZIP valide."""

    kind = "NotAnArchive"


class EntryNotFoundError(EpubError):
    """L'entrée demandée n'existe pas dans l'archive."""

    kind = "NotFound"

    def __init__(self, source: str, path: str):
        super().__init__(source, f"file '{path}' missing", path=path)


# --- Mimetype ---


class MimetypeError(EpubError):
    pass


class MissingMimetypeError(MimetypeError):
    kind = "MissingMimetype"

    def __init__(self, source: str):
        super().__init__(source, "not an epub (no mimetype)", path="mimetype")


class InvalidMimetypeError(MimetypeError):
    kind = "InvalidMimetype"

    def __init__(self, source: str, actual: bytes):
        # Octets bruts conservés; le message les affiche décodés
        self.actual = actual
        text = actual.decode("utf-8", errors="replace")
        super().__init__(source, f"invalid mimetype '{text}'", path="mimetype")


# --- Container ---


class ContainerError(EpubError):
    pass


class MissingContainerError(ContainerError):
    kind = "MissingContainer"

    def __init__(self, source: str, path: str):
        super().__init__(source, "not an epub (no container)", path=path)


class MalformedContainerError(ContainerError):
    kind = "MalformedContainer"


class NoRootfileError(ContainerError):
    kind = "NoRootfile"

    def __init__(self, source: str, path: str):
        super().__init__(source, "no rootfile", path=path)


# --- Package ---


class PackageError(EpubError):
    pass


class BadRootfileError(PackageError):
    """container.xml référence un rootfile absent de l'archive."""

    kind = "BadRootfile"

    def __init__(self, source: str, path: str):
        super().__init__(source, f"container references non-existent rootfile '{path}'", path=path)


class MalformedPackageError(PackageError):
    kind = "MalformedPackage"


# --- Intégrité référentielle ---


class IntegrityError(EpubError):
    pass


class BadManifestError(IntegrityError):
    """Le manifest référence un fichier absent de l'archive."""

    kind = "BadManifest"

    def __init__(self, source: str, path: str, href: str):
        self.href = href
        super().__init__(source, f"manifest references non-existent item '{href}'", path=path)


class BadItemrefError(IntegrityError):
    """Un itemref du spine référence un id absent du manifest."""

    kind = "BadItemref"

    def __init__(self, source: str, path: str, idref: str):
        self.idref = idref
        super().__init__(source, f"itemref references non-existent item '{idref}'", path=path)


class NoItemrefError(IntegrityError):
    """Le spine ne contient aucun itemref."""

    kind = "NoItemref"

    def __init__(self, source: str, path: str):
        super().__init__(source, "no itemrefs found in spine", path=path)
