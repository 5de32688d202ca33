from dataclasses import dataclass, field
from typing import List


@dataclass
class EpubReport:
    """Résultat de l'inspection d'un fichier EPUB."""

    path: str
    filename: str

    # Statut de la validation
    valid: bool = False
    error_kind: str | None = None
    error: str | None = None

    # Métadonnées lues depuis le premier rootfile
    title: str | None = None
    authors: List[str] = field(default_factory=list)
    language: str | None = None
    isbn: str | None = None
    canonical_isbn: str | None = None
    cover: str | None = None

    # Structure
    rootfile: str | None = None
    rootfile_count: int = 0
    manifest_count: int = 0
    spine_length: int = 0
