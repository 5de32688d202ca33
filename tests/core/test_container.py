"""
Tests pour le module core.epub.container.
"""

import pytest

from epub_inspector.core.epub.archive import ArchiveIndex
from epub_inspector.core.epub.container import decode_container, parse_container
from epub_inspector.core.errors import (
    MalformedContainerError,
    MissingContainerError,
    NoRootfileError,
)


class TestDecodeContainer:
    """Tests pour decode_container."""

    def test_namespaced_container(self):
        """Test décodage d'un conteneur avec namespace."""
        data = b"""<?xml version="1.0"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="OEBPS/content.opf" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>"""

        container = decode_container(data)

        assert len(container.rootfiles) == 1
        assert container.rootfiles[0].full_path == "OEBPS/content.opf"
        assert container.rootfiles[0].media_type == "application/oebps-package+xml"

    def test_container_without_namespace(self):
        """Test décodage d'un conteneur sans namespace."""
        data = b'<container><rootfiles><rootfile full-path="a.opf"/></rootfiles></container>'

        container = decode_container(data)

        assert [r.full_path for r in container.rootfiles] == ["a.opf"]
        assert container.rootfiles[0].media_type == ""

    def test_unknown_elements_and_attributes_ignored(self):
        """Test tolérance aux éléments et attributs inconnus."""
        data = b"""<container xmlns="urn:oasis:names:tc:opendocument:xmlns:container"
                              xmlns:x="urn:example:extension">
  <x:signatures/>
  <rootfiles x:flag="1">
    <rootfile full-path="a.opf" media-type="application/oebps-package+xml" x:extra="y"/>
    <link href="whatever"/>
  </rootfiles>
  <links/>
</container>"""

        container = decode_container(data)

        assert [r.full_path for r in container.rootfiles] == ["a.opf"]

    def test_multiple_rootfiles_keep_order(self):
        """Test que l'ordre des rootfiles est préservé."""
        data = b"""<container><rootfiles>
  <rootfile full-path="first.opf" media-type="application/oebps-package+xml"/>
  <rootfile full-path="second.opf" media-type="application/oebps-package+xml"/>
</rootfiles></container>"""

        container = decode_container(data)

        assert [r.full_path for r in container.rootfiles] == ["first.opf", "second.opf"]


class TestParseContainer:
    """Tests pour parse_container."""

    def test_missing_container(self, make_epub):
        """Test archive sans META-INF/container.xml."""
        path = make_epub(container=None)

        with ArchiveIndex.open(path) as archive:
            with pytest.raises(MissingContainerError) as exc_info:
                parse_container(archive)

        assert exc_info.value.path == "META-INF/container.xml"

    def test_malformed_container(self, make_epub):
        """Test conteneur XML mal formé."""
        path = make_epub(container="<container><rootfiles>")

        with ArchiveIndex.open(path) as archive:
            with pytest.raises(MalformedContainerError) as exc_info:
                parse_container(archive)

        assert exc_info.value.__cause__ is not None

    @pytest.mark.parametrize(
        "xml",
        [
            "<container/>",
            "<container><rootfiles/></container>",
            "<container><rootfile full-path='a.opf'/></container>",
        ],
    )
    def test_no_rootfile(self, make_epub, xml):
        """Test conteneur sans aucun rootfile."""
        path = make_epub(container=xml)

        with ArchiveIndex.open(path) as archive:
            with pytest.raises(NoRootfileError):
                parse_container(archive)

    def test_valid_container(self, valid_epub):
        """Test conteneur valide."""
        with ArchiveIndex.open(valid_epub) as archive:
            container = parse_container(archive)

        assert container.rootfiles[0].full_path == "OEBPS/content.opf"
