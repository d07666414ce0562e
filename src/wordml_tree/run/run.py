"""Run builders and run-level leaf nodes.

A run (``w:r``) is a stretch of content sharing one set of character
properties. Its ``w:rPr`` is always the first child and is dropped from the
output while it is empty.
"""

import re
from enum import Enum
from typing import List, Optional, Union

from wordml_tree.shared.validation import coerce_enum, require_int, require_text
from wordml_tree.tree.aggregator import PropertyAggregator
from wordml_tree.tree.node import LeafNode, XmlComponent, XmlNode
from wordml_tree.tree.serializer import check_xml_characters

_HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")


class UnderlineType(Enum):
    """Underline styles (``w:u``)."""

    SINGLE = "single"
    WORDS = "words"
    DOUBLE = "double"
    THICK = "thick"
    DOTTED = "dotted"
    DASH = "dash"
    DOT_DASH = "dotDash"
    WAVE = "wave"
    NONE = "none"


class VerticalAlignType(Enum):
    """Superscript and subscript positioning."""

    BASELINE = "baseline"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"


class BreakType(Enum):
    """Kinds of manual break (``w:br``)."""

    PAGE = "page"
    COLUMN = "column"
    TEXT_WRAPPING = "textWrapping"


class FieldCharType(Enum):
    """Field character positions."""

    BEGIN = "begin"
    SEPARATE = "separate"
    END = "end"


class RunProperties(PropertyAggregator):
    """Character formatting of one run (``w:rPr``)."""

    def __init__(self) -> None:
        super().__init__("w:rPr")


class _RunToggle(LeafNode):
    def __init__(self, tag: str) -> None:
        super().__init__(tag=tag)
        self._seal()


class _RunValue(LeafNode):
    def __init__(self, tag: str, value: Union[str, int, Enum]) -> None:
        super().__init__(tag=tag, attributes={"w:val": value})
        self._seal()


class Underline(LeafNode):
    def __init__(
        self,
        underline_type: Union[UnderlineType, str] = UnderlineType.SINGLE,
        color: Optional[str] = None
    ) -> None:
        attributes = {"w:val": coerce_enum(UnderlineType, underline_type, "underline type")}
        if color is not None:
            attributes["w:color"] = validate_color(color)
        super().__init__(tag="w:u", attributes=attributes)
        self._seal()


class RunFonts(LeafNode):
    """Font family applied to every script range."""

    def __init__(self, name: str) -> None:
        require_text("Font name", name)
        super().__init__(
            tag="w:rFonts",
            attributes={"w:ascii": name, "w:cs": name, "w:eastAsia": name, "w:hAnsi": name},
        )
        self._seal()


def validate_color(color: str) -> str:
    """Accept ``auto`` or six hex digits, normalised to upper case."""
    if color == "auto":
        return color
    if not isinstance(color, str) or not _HEX_COLOR.match(color.lstrip("#")):
        raise ValueError(f"Color must be 'auto' or six hex digits, got {color!r}")
    return color.lstrip("#").upper()


class Text(LeafNode):
    """Literal text (``w:t``); whitespace is always preserved."""

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Text must be a str, got {type(text).__name__}")
        check_xml_characters(text)
        super().__init__(tag="w:t", attributes={"xml:space": "preserve"}, children=[text])
        self._seal()


class Tab(_RunToggle):
    def __init__(self) -> None:
        super().__init__("w:tab")


class Break(LeafNode):
    """Line break, or page/column break when a type is given."""

    def __init__(self, break_type: Optional[Union[BreakType, str]] = None) -> None:
        attributes = {}
        if break_type is not None:
            attributes["w:type"] = coerce_enum(BreakType, break_type, "break type")
        super().__init__(tag="w:br", attributes=attributes)
        self._seal()


class FieldChar(LeafNode):
    def __init__(self, char_type: Union[FieldCharType, str], dirty: bool = False) -> None:
        attributes = {"w:fldCharType": coerce_enum(FieldCharType, char_type, "field char type")}
        if dirty:
            attributes["w:dirty"] = True
        super().__init__(tag="w:fldChar", attributes=attributes)
        self._seal()


class InstructionText(LeafNode):
    """Field instruction such as ``SEQ Figure``."""

    def __init__(self, instruction: str) -> None:
        check_xml_characters(instruction)
        super().__init__(
            tag="w:instrText", attributes={"xml:space": "preserve"}, children=[instruction]
        )
        self._seal()


class Run(XmlComponent):
    """Run of content with chainable character formatting."""

    def __init__(self) -> None:
        super().__init__("w:r")
        self.properties = RunProperties()
        self.add_child(self.properties)

    @property
    def run_properties(self) -> RunProperties:
        return self.properties

    def _push(self, *nodes: XmlNode) -> "Run":
        for node in nodes:
            self.properties.push_property(node)
        return self

    def bold(self) -> "Run":
        return self._push(_RunToggle("w:b"), _RunToggle("w:bCs"))

    def italics(self) -> "Run":
        return self._push(_RunToggle("w:i"), _RunToggle("w:iCs"))

    def underline(
        self,
        underline_type: Union[UnderlineType, str] = UnderlineType.SINGLE,
        color: Optional[str] = None
    ) -> "Run":
        return self._push(Underline(underline_type, color))

    def color(self, color: str) -> "Run":
        return self._push(_RunValue("w:color", validate_color(color)))

    def size(self, half_points: int) -> "Run":
        """Font size in half-points (24 is 12pt)."""
        require_int("font size", half_points, minimum=1)
        return self._push(_RunValue("w:sz", half_points), _RunValue("w:szCs", half_points))

    def font(self, name: str) -> "Run":
        return self._push(RunFonts(name))

    def style(self, style_id: str) -> "Run":
        require_text("Run style id", style_id)
        return self._push(_RunValue("w:rStyle", style_id))

    def strike(self) -> "Run":
        return self._push(_RunToggle("w:strike"))

    def double_strike(self) -> "Run":
        return self._push(_RunToggle("w:dstrike"))

    def all_caps(self) -> "Run":
        return self._push(_RunToggle("w:caps"))

    def small_caps(self) -> "Run":
        return self._push(_RunToggle("w:smallCaps"))

    def superscript(self) -> "Run":
        return self._push(_RunValue("w:vertAlign", VerticalAlignType.SUPERSCRIPT))

    def subscript(self) -> "Run":
        return self._push(_RunValue("w:vertAlign", VerticalAlignType.SUBSCRIPT))

    def tab(self) -> "Run":
        self.add_child(Tab())
        return self

    def break_(self, break_type: Optional[Union[BreakType, str]] = None) -> "Run":
        self.add_child(Break(break_type))
        return self


class TextRun(Run):
    """Run holding a single piece of text."""

    def __init__(self, text: str) -> None:
        content = Text(text)
        super().__init__()
        self.add_child(content)

    @property
    def text(self) -> str:
        return "".join(child.text_content for child in self.find_children("w:t"))


class PageBreak(Run):
    """Run containing a page break."""

    def __init__(self) -> None:
        super().__init__()
        self.add_child(Break(BreakType.PAGE))


class SequentialIdentifier(Run):
    """``SEQ`` field that numbers captions such as figures or tables."""

    def __init__(self, identifier: str) -> None:
        if not isinstance(identifier, str) or not identifier or any(c.isspace() for c in identifier):
            raise ValueError(f"Sequence identifier must be a non-empty word, got {identifier!r}")
        nodes: List[XmlNode] = [
            FieldChar(FieldCharType.BEGIN, dirty=True),
            InstructionText(f"SEQ {identifier}"),
            FieldChar(FieldCharType.SEPARATE, dirty=True),
            FieldChar(FieldCharType.END, dirty=True),
        ]
        super().__init__()
        for node in nodes:
            self.add_child(node)
