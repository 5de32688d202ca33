"""
Point d'entrée ``python -m epub_inspector`` et script ``epub-inspector``.
"""

import sys


def cli() -> int:
    """Lance ``main.main`` et retourne son code de sortie (0, 1 ou 2)."""
    from .main import main

    try:
        return main()
    except SystemExit as se:
        return se.code if isinstance(se.code, int) else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(cli())
