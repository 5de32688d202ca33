"""
Logique pour le mode ligne de commande.

Utilise InspectorService pour réutiliser la logique d'inspection.
"""

import logging
import os
from typing import List

from .core.inspector_service import InspectorService
from .core.models import EpubReport

logger = logging.getLogger(__name__)


def cli_inspect(path: str) -> List[EpubReport]:
    """
    Inspecte un fichier EPUB ou un dossier entier en mode CLI.

    Args:
        path: Chemin vers un fichier EPUB ou un dossier

    Returns:
        Liste des rapports d'inspection
    """
    logger.info("CLI mode - inspecting: %s", path)

    service = InspectorService()
    if os.path.isdir(path):
        reports = service.inspect_folder(path)
    else:
        reports = [service.inspect_epub(path)]

    logger.info("CLI mode - inspected %d files", len(reports))
    return reports


def print_report_summary(reports: List[EpubReport]):
    """Affiche un résumé des rapports d'inspection."""
    print("\n=== Résumé de l'inspection ===")
    print(f"Fichiers inspectés: {len(reports)}")

    valid = sum(1 for r in reports if r.valid)
    print(f"Valides: {valid}")
    print(f"Invalides: {len(reports) - valid}")

    for report in reports:
        print(f"\n{report.filename}:")

        if not report.valid:
            print(f"  Erreur [{report.error_kind}]: {report.error}")
            continue

        print(f"  Titre: {report.title or '-'}")
        if report.authors:
            print(f"  Auteurs: {', '.join(report.authors)}")
        print(f"  Langue: {report.language or '-'}")
        print(f"  ISBN: {report.isbn or '-'}")
        if report.canonical_isbn and report.canonical_isbn != report.isbn:
            print(f"  ISBN canonique: {report.canonical_isbn}")
        print(f"  Couverture: {report.cover or '-'}")
        print(
            f"  Rootfile: {report.rootfile} "
            f"({report.manifest_count} items, spine de {report.spine_length})"
        )
        if report.rootfile_count > 1:
            print(f"  Rootfiles déclarés: {report.rootfile_count}")
