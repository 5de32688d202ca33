"""
Service d'inspection EPUB.

Service réutilisable qui ouvre, valide et résume des fichiers EPUB.
Il est utilisé par le mode CLI pour traiter un fichier ou un dossier.
"""

import logging
import os
from typing import List, Optional

from .epub import EpubDocument
from .epub.archive import LogSink
from .errors import EpubError
from .file_utils import find_epubs_in_folder
from .models import EpubReport

logger = logging.getLogger(__name__)


class InspectorService:
    """
    Service d'inspection EPUB.

    Fournit les opérations de haut niveau:
    - Ouverture et validation d'un fichier
    - Construction d'un rapport résumant métadonnées et structure
    - Traitement d'un dossier entier
    """

    def __init__(self, log: Optional[LogSink] = None):
        """Initialise le service avec un logger optionnel pour le pipeline."""
        self.log = log
        logger.debug("InspectorService initialized")

    def inspect_epub(self, epub_path: str) -> EpubReport:
        """
        Ouvre et valide un fichier EPUB puis construit son rapport.

        Les défauts structurels ne sont pas propagés: ils sont enregistrés
        dans le rapport (``valid=False``, ``error_kind``, ``error``).

        Args:
            epub_path: Chemin vers le fichier EPUB

        Returns:
            Rapport d'inspection
        """
        report = EpubReport(path=epub_path, filename=os.path.basename(epub_path))
        logger.info("Inspecting EPUB: %s", epub_path)

        try:
            with EpubDocument.open(epub_path, self.log) as doc:
                self._fill_report(report, doc)
        except EpubError as e:
            report.error_kind = e.kind
            report.error = str(e)
            logger.warning("Invalid EPUB %s: %s", epub_path, e)
            return report

        report.valid = True
        logger.info("Valid EPUB: %s", report.filename)
        return report

    @staticmethod
    def _fill_report(report: EpubReport, doc: EpubDocument) -> None:
        metadata = doc.package.metadata
        report.title = metadata.title or None
        report.authors = [metadata.creator.name] if metadata.creator.name else []
        report.language = metadata.language or None
        report.isbn = doc.get_isbn()
        report.canonical_isbn = doc.get_canonical_isbn()
        report.cover = doc.get_cover()
        report.rootfile = doc.rootfile.full_path
        report.rootfile_count = len(doc.rootfiles)
        report.manifest_count = len(doc.package.manifest)
        report.spine_length = len(doc.package.spine)

    def inspect_folder(self, folder_path: str) -> List[EpubReport]:
        """
        Inspecte tous les fichiers EPUB d'un dossier.

        Args:
            folder_path: Chemin vers le dossier

        Returns:
            Liste des rapports, un par fichier trouvé
        """
        logger.info("Inspecting folder: %s", folder_path)
        files = find_epubs_in_folder(folder_path)

        reports = [self.inspect_epub(epub_path) for epub_path in files]

        invalid = sum(1 for r in reports if not r.valid)
        logger.info("Inspected %d files (%d invalid)", len(reports), invalid)
        return reports
