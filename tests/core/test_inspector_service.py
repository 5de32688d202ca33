"""
Tests pour le module core.inspector_service.
"""

from unittest.mock import patch

from epub_inspector.core.file_utils import find_epubs_in_folder, is_epub_path
from epub_inspector.core.inspector_service import InspectorService
from epub_inspector.core.models import EpubReport


class TestInspectorServiceInit:
    """Tests pour l'initialisation du service."""

    def test_service_initialization(self):
        """Test création du service."""
        service = InspectorService()
        assert service.log is None


class TestInspectEpub:
    """Tests pour inspect_epub."""

    def test_valid_epub_report(self, valid_epub):
        """Test rapport d'un EPUB valide."""
        report = InspectorService().inspect_epub(str(valid_epub))

        assert isinstance(report, EpubReport)
        assert report.valid is True
        assert report.error is None
        assert report.filename == "book.epub"
        assert report.title == "Test Book"
        assert report.authors == ["Test Author"]
        assert report.language == "en"
        assert report.isbn == "9780306406157"
        assert report.canonical_isbn == "9780306406157"
        assert report.cover is None
        assert report.rootfile == "OEBPS/content.opf"
        assert report.rootfile_count == 1
        assert report.manifest_count == 1
        assert report.spine_length == 1

    def test_invalid_epub_report(self, make_epub):
        """Test qu'un défaut structurel est enregistré sans être propagé."""
        path = make_epub(mimetype=None)

        report = InspectorService().inspect_epub(str(path))

        assert report.valid is False
        assert report.error_kind == "MissingMimetype"
        assert "no mimetype" in report.error
        assert report.title is None

    def test_not_an_archive_report(self, text_file):
        """Test rapport d'un fichier qui n'est pas une archive."""
        report = InspectorService().inspect_epub(str(text_file))

        assert report.valid is False
        assert report.error_kind == "NotAnArchive"


class TestInspectFolder:
    """Tests pour inspect_folder."""

    def test_inspect_folder(self, make_epub, tmp_path):
        """Test inspection d'un dossier avec fichiers valides et invalides."""
        make_epub("a.epub")
        make_epub("b.epub", container=None)

        reports = InspectorService().inspect_folder(str(tmp_path))

        assert [r.filename for r in reports] == ["a.epub", "b.epub"]
        assert [r.valid for r in reports] == [True, False]
        assert reports[1].error_kind == "MissingContainer"

    def test_damaged_archives_do_not_abort_folder(
        self, make_epub, encrypted_epub, unsupported_version_epub, tmp_path
    ):
        """Test qu'une archive chiffrée ou de version inconnue est rapportée."""
        make_epub("a.epub")

        reports = InspectorService().inspect_folder(str(tmp_path))

        by_name = {r.filename: r for r in reports}
        assert len(reports) == 3
        assert by_name["a.epub"].valid is True
        assert by_name["encrypted.epub"].error_kind == "IOError"
        assert by_name["version.epub"].error_kind == "NotAnArchive"

    @patch("epub_inspector.core.inspector_service.find_epubs_in_folder")
    def test_inspect_empty_folder(self, mock_find):
        """Test dossier sans EPUB."""
        mock_find.return_value = []

        reports = InspectorService().inspect_folder("/fake/folder")

        assert reports == []
        mock_find.assert_called_once_with("/fake/folder")


class TestFileUtils:
    """Tests pour core.file_utils."""

    def test_is_epub_path(self):
        """Test détection de l'extension."""
        assert is_epub_path("Book.EPUB")
        assert not is_epub_path("book.pdf")

    def test_find_epubs_recursively(self, tmp_path):
        """Test recherche récursive et triée."""
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "z.epub").write_bytes(b"")
        (tmp_path / "a.epub").write_bytes(b"")
        (tmp_path / "notes.txt").write_text("x")

        files = find_epubs_in_folder(str(tmp_path))

        assert [f.replace(str(tmp_path), "") for f in files] == [
            "/a.epub",
            "/sub/z.epub",
        ]
