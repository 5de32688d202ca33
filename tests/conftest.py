"""
Configuration globale pour pytest.

Fournit des fixtures réutilisables pour tous les tests, dont un
constructeur d'archives EPUB synthétiques.
"""

import logging
import zipfile
from pathlib import Path
from typing import Dict, Optional

import pytest

MIMETYPE = b"application/epub+zip"

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{opf_path}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""

OPF_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="2.0" unique-identifier="BookId">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:opf="http://www.idpf.org/2007/opf">
    {metadata}
  </metadata>
  <manifest>
    {manifest}
  </manifest>
  <spine toc="ncx">
    {spine}
  </spine>
  {guide}
</package>
"""

DEFAULT_METADATA = """<dc:title>Test Book</dc:title>
    <dc:creator opf:role="aut" opf:file-as="Author, Test">Test Author</dc:creator>
    <dc:identifier opf:scheme="ISBN">9780306406157</dc:identifier>
    <dc:language>en</dc:language>"""

DEFAULT_MANIFEST = '<item id="chapter1" href="chapter1.xhtml" media-type="application/xhtml+xml"/>'

DEFAULT_SPINE = '<itemref idref="chapter1"/>'

CHAPTER = b"<html xmlns='http://www.w3.org/1999/xhtml'><body><p>Hello</p></body></html>"


def make_opf(
    metadata: str = DEFAULT_METADATA,
    manifest: str = DEFAULT_MANIFEST,
    spine: str = DEFAULT_SPINE,
    guide: str = "",
) -> str:
    """Construit un document package à partir de fragments XML."""
    return OPF_TEMPLATE.format(metadata=metadata, manifest=manifest, spine=spine, guide=guide)


def write_epub(
    path: Path,
    mimetype: Optional[bytes] = MIMETYPE,
    container: Optional[str] = "default",
    opf: Optional[str] = "default",
    opf_path: str = "OEBPS/content.opf",
    files: Optional[Dict[str, bytes]] = None,
) -> Path:
    """
    Écrit une archive EPUB synthétique.

    ``None`` omet la partie correspondante; ``"default"`` utilise la valeur
    minimale valide. Par défaut ``files`` contient le chapitre référencé par
    le manifest par défaut.
    """
    if files is None:
        files = {"OEBPS/chapter1.xhtml": CHAPTER}

    with zipfile.ZipFile(path, "w") as zf:
        if mimetype is not None:
            zf.writestr("mimetype", mimetype, compress_type=zipfile.ZIP_STORED)
        if container is not None:
            if container == "default":
                container = CONTAINER_XML.format(opf_path=opf_path)
            zf.writestr("META-INF/container.xml", container)
        if opf is not None:
            if opf == "default":
                opf = make_opf()
            zf.writestr(opf_path, opf)
        for name, data in files.items():
            zf.writestr(name, data, compress_type=zipfile.ZIP_DEFLATED)
    return path


@pytest.fixture
def make_epub(tmp_path):
    """Retourne une fabrique d'archives EPUB dans un répertoire temporaire."""

    def _make(name: str = "book.epub", **kwargs) -> Path:
        return write_epub(tmp_path / name, **kwargs)

    return _make


@pytest.fixture
def opf_builder():
    """Retourne le constructeur de documents package."""
    return make_opf


@pytest.fixture
def valid_epub(make_epub) -> Path:
    """Archive EPUB minimale valide."""
    return make_epub()


@pytest.fixture
def text_file(tmp_path) -> Path:
    """Fichier texte arbitraire (pas une archive)."""
    path = tmp_path / "fstab"
    path.write_text("/dev/sda1 / ext4 defaults 0 1\n")
    return path


@pytest.fixture
def isolated_logging(tmp_path, monkeypatch):
    """Redirige les logs dans un dossier temporaire et nettoie les handlers."""
    from epub_inspector import config

    monkeypatch.setattr(config, "LOG_DIR", str(tmp_path / "logs"))
    yield
    logger = logging.getLogger("epub_inspector")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(logging.NullHandler())


@pytest.fixture
def encrypted_epub(make_epub) -> Path:
    """Archive dont l'entrée ``mimetype`` porte le drapeau de chiffrement."""
    path = make_epub("encrypted.epub")
    data = bytearray(path.read_bytes())
    central = data.find(b"PK\x01\x02")
    # Bit 0 des general purpose flags (en-tête local puis central)
    data[6] |= 0x01
    data[central + 8] |= 0x01
    path.write_bytes(bytes(data))
    return path


@pytest.fixture
def unsupported_version_epub(make_epub) -> Path:
    """Archive dont le répertoire central exige la version ZIP 9.9."""
    path = make_epub("version.epub")
    data = bytearray(path.read_bytes())
    central = data.find(b"PK\x01\x02")
    data[central + 6] = 99
    path.write_bytes(bytes(data))
    return path
