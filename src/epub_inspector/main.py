"""
Point d'entrée principal pour EPUB Inspector
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from . import config

USAGE = """Usage: python -m epub_inspector <path> [--verbose]
  path: Fichier EPUB ou dossier contenant des fichiers EPUB
  --verbose: Affiche les événements de trace du pipeline"""


def setup_logging(verbose: bool = False):
    """Configure le système de logging."""
    config.ensure_directories()
    logger = logging.getLogger("epub_inspector")
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Handler pour fichier avec rotation
    logfile = os.path.join(config.LOG_DIR, config.LOG_FILE)
    handler = RotatingFileHandler(
        logfile,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding=config.LOG_ENCODING,
    )
    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Handler pour console
    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console)

    return logger


def run_cli(argv: List[str]) -> int:
    """Lance le mode ligne de commande."""
    logger = logging.getLogger("epub_inspector")

    args = [a for a in argv if not a.startswith("--")]
    if len(args) != 1:
        print(USAGE)
        return 2

    path = args[0]
    if not os.path.exists(path):
        print(f"Error: {path} does not exist")
        return 2

    from .cli import cli_inspect, print_report_summary

    reports = cli_inspect(path)
    print_report_summary(reports)

    if all(r.valid for r in reports):
        return 0
    logger.info("CLI mode - some files are invalid")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entrée principal."""
    if argv is None:
        argv = sys.argv[1:]

    setup_logging(verbose="--verbose" in argv)
    logger = logging.getLogger("epub_inspector")
    logger.info("Starting EPUB Inspector CLI mode")

    try:
        return run_cli(argv)
    except Exception as e:
        logger.exception("Error in CLI mode")
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
