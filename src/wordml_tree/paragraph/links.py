"""Bookmarks and hyperlinks.

Bookmark and relationship ids are supplied by the caller; nothing here
allocates identifiers.
"""

from typing import Optional

from wordml_tree.run.run import TextRun
from wordml_tree.shared.validation import require_int, require_text
from wordml_tree.tree.node import LeafNode, XmlComponent
from wordml_tree.tree.serializer import check_xml_characters

HYPERLINK_STYLE = "Hyperlink"


class BookmarkStart(LeafNode):
    def __init__(self, name: str, bookmark_id: int) -> None:
        super().__init__(tag="w:bookmarkStart", attributes={"w:id": bookmark_id, "w:name": name})
        self._seal()


class BookmarkEnd(LeafNode):
    def __init__(self, bookmark_id: int) -> None:
        super().__init__(tag="w:bookmarkEnd", attributes={"w:id": bookmark_id})
        self._seal()


class Bookmark:
    """A named range: start marker, text run and end marker.

    The three parts are inserted into a paragraph as consecutive siblings,
    in that order.
    """

    def __init__(self, name: str, text: str, bookmark_id: int) -> None:
        require_text("Bookmark name", name)
        check_xml_characters(name)
        require_int("bookmark id", bookmark_id, minimum=0)
        self.name = name
        self.bookmark_id = bookmark_id
        self.start = BookmarkStart(name, bookmark_id)
        self.text = TextRun(text)
        self.end = BookmarkEnd(bookmark_id)


class Hyperlink(XmlComponent):
    """Link to an external target (by relationship id) or an internal bookmark.

    Exactly one of ``relationship_id`` and ``anchor`` must be given.
    """

    def __init__(
        self,
        text: str,
        relationship_id: Optional[str] = None,
        anchor: Optional[str] = None
    ) -> None:
        if (relationship_id is None) == (anchor is None):
            raise ValueError("Hyperlink needs exactly one of relationship_id or anchor")
        target = relationship_id if relationship_id is not None else anchor
        if not isinstance(target, str) or not target.strip():
            raise ValueError("Hyperlink target cannot be empty")
        check_xml_characters(target)

        run = TextRun(text).style(HYPERLINK_STYLE)
        super().__init__("w:hyperlink")
        if relationship_id is not None:
            self.set_attribute("r:id", relationship_id)
        else:
            self.set_attribute("w:anchor", anchor)
        self.set_attribute("w:history", 1)
        self.add_child(run)
        self.run = run

    @property
    def link_id(self) -> Optional[str]:
        return self.get_attribute("r:id")
