"""Tests for bookmarks and hyperlinks."""

import pytest

from wordml_tree.paragraph import HYPERLINK_STYLE, Bookmark, Hyperlink
from wordml_tree.run import TextRun
from wordml_tree.tree import XmlSerializer


class TestBookmark:
    """Test bookmark triples."""

    def test_parts(self) -> None:
        """Test the start, text and end parts."""
        bookmark = Bookmark("intro", "Introduction", bookmark_id=3)

        assert bookmark.start.tag == "w:bookmarkStart"
        assert bookmark.start.attributes == {"w:id": 3, "w:name": "intro"}
        assert isinstance(bookmark.text, TextRun)
        assert bookmark.text.text == "Introduction"
        assert bookmark.end.attributes == {"w:id": 3}

    def test_markers_render(self) -> None:
        """Test the markers serialize as empty elements."""
        bookmark = Bookmark("intro", "x", bookmark_id=0)
        serializer = XmlSerializer()

        assert serializer.to_xml(bookmark.start) == '<w:bookmarkStart w:id="0" w:name="intro"/>'
        assert serializer.to_xml(bookmark.end) == '<w:bookmarkEnd w:id="0"/>'

    def test_validation(self) -> None:
        """Test name and id validation."""
        with pytest.raises(ValueError, match="Bookmark name cannot be empty"):
            Bookmark("", "text", 1)
        with pytest.raises(ValueError, match="bookmark id must be >= 0"):
            Bookmark("name", "text", -1)

    def test_name_characters_checked_at_construction(self) -> None:
        """Test names XML cannot carry fail before any node is built."""
        with pytest.raises(ValueError, match="Character U\\+0001 is not allowed"):
            Bookmark("bad\x01name", "text", 1)
        with pytest.raises(ValueError, match="Character U\\+DC00 is not allowed"):
            Bookmark("bad\udc00", "text", 1)


class TestHyperlink:
    """Test hyperlinks."""

    def test_external_link(self) -> None:
        """Test links to a relationship id."""
        link = Hyperlink("Docs", relationship_id="rId7")

        assert link.link_id == "rId7"
        assert XmlSerializer().to_xml(link) == (
            '<w:hyperlink r:id="rId7" w:history="1">'
            '<w:r><w:rPr><w:rStyle w:val="Hyperlink"/></w:rPr>'
            '<w:t xml:space="preserve">Docs</w:t></w:r>'
            '</w:hyperlink>'
        )

    def test_internal_link(self) -> None:
        """Test links to a bookmark anchor."""
        link = Hyperlink("Back to top", anchor="top")

        assert link.get_attribute("w:anchor") == "top"
        assert link.link_id is None
        assert link.run.find("w:rStyle").get_attribute("w:val") == HYPERLINK_STYLE

    @pytest.mark.parametrize("kwargs", [{}, {"relationship_id": "rId1", "anchor": "top"}])
    def test_requires_exactly_one_target(self, kwargs) -> None:
        """Test a link needs one target, not zero or two."""
        with pytest.raises(ValueError, match="exactly one of relationship_id or anchor"):
            Hyperlink("text", **kwargs)

    def test_empty_target(self) -> None:
        """Test blank targets are rejected."""
        with pytest.raises(ValueError, match="Hyperlink target cannot be empty"):
            Hyperlink("text", anchor=" ")

    @pytest.mark.parametrize(
        "kwargs", [{"relationship_id": "rId\x0b1"}, {"anchor": "top\ud800"}]
    )
    def test_target_characters_checked_at_construction(self, kwargs) -> None:
        """Test illegal characters in either target are rejected up front."""
        with pytest.raises(ValueError, match="is not allowed in XML 1.0"):
            Hyperlink("text", **kwargs)
