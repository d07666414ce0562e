"""Leaf property nodes for paragraph formatting.

Each class builds one ``w:pPr`` child with its attributes fixed at
construction. Inputs are validated before anything is built, so an invalid
value raises here and never reaches a tree.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from wordml_tree.shared.validation import coerce_enum, require_int
from wordml_tree.tree.node import LeafNode, XmlComponent


# Right margin of an A4 page with default margins, in twips.
MAX_RIGHT_TAB_POSITION = 9026

MAX_OUTLINE_LEVEL = 9


class AlignmentType(Enum):
    """Paragraph justification values (``w:jc``)."""

    START = "start"
    END = "end"
    CENTER = "center"
    BOTH = "both"
    DISTRIBUTE = "distribute"
    LEFT = "left"
    RIGHT = "right"


class LineRuleType(Enum):
    """Interpretation of the ``w:line`` spacing value."""

    AUTO = "auto"
    EXACT = "exact"
    AT_LEAST = "atLeast"


class TabStopType(Enum):
    """Tab stop alignment kinds."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    BAR = "bar"
    CLEAR = "clear"
    DECIMAL = "decimal"
    END = "end"
    NUM = "num"
    START = "start"


class LeaderType(Enum):
    """Fill characters drawn up to a tab stop."""

    DOT = "dot"
    HYPHEN = "hyphen"
    MIDDLE_DOT = "middleDot"
    NONE = "none"
    UNDERSCORE = "underscore"


class Alignment(LeafNode):
    """Paragraph alignment."""

    def __init__(self, alignment: Union[AlignmentType, str]) -> None:
        value = coerce_enum(AlignmentType, alignment, "alignment")
        super().__init__(tag="w:jc", attributes={"w:val": value})
        self._seal()


class Style(LeafNode):
    """Reference to a paragraph style by id."""

    def __init__(self, style_id: Union[str, Enum]) -> None:
        if isinstance(style_id, str):
            if not style_id.strip():
                raise ValueError("Style id cannot be empty")
        elif not isinstance(style_id, Enum):
            raise TypeError(f"Style id must be a str or Enum, got {type(style_id).__name__}")
        super().__init__(tag="w:pStyle", attributes={"w:val": style_id})
        self._seal()


@dataclass(frozen=True)
class SpacingProperties:
    """Spacing around and between lines of a paragraph, in twips."""

    before: Optional[int] = None
    after: Optional[int] = None
    line: Optional[int] = None
    line_rule: Optional[Union[LineRuleType, str]] = None

    def __post_init__(self) -> None:
        """Validate spacing values."""
        for name in ("before", "after"):
            value = getattr(self, name)
            if value is not None:
                require_int(f"spacing {name}", value, minimum=0)
        if self.line is not None:
            require_int("spacing line", self.line, minimum=1)
        if self.line_rule is not None:
            object.__setattr__(
                self, "line_rule", coerce_enum(LineRuleType, self.line_rule, "line rule")
            )


class Spacing(LeafNode):
    """Paragraph spacing (``w:spacing``); unset values are left out."""

    def __init__(self, properties: SpacingProperties) -> None:
        attributes = {}
        if properties.before is not None:
            attributes["w:before"] = properties.before
        if properties.after is not None:
            attributes["w:after"] = properties.after
        if properties.line is not None:
            attributes["w:line"] = properties.line
        if properties.line_rule is not None:
            attributes["w:lineRule"] = properties.line_rule
        super().__init__(tag="w:spacing", attributes=attributes)
        self._seal()


class ContextualSpacing(LeafNode):
    """Ignore spacing between paragraphs of the same style."""

    def __init__(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise TypeError("Contextual spacing value must be a bool")
        super().__init__(tag="w:contextualSpacing", attributes={"w:val": 1 if value else 0})
        self._seal()


@dataclass(frozen=True)
class IndentProperties:
    """Paragraph indentation, in twips.

    ``hanging`` and ``first_line`` are mutually exclusive.
    """

    left: Optional[int] = None
    right: Optional[int] = None
    start: Optional[int] = None
    end: Optional[int] = None
    hanging: Optional[int] = None
    first_line: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate indentation values."""
        for name in ("left", "right", "start", "end"):
            value = getattr(self, name)
            if value is not None:
                require_int(f"indent {name}", value)
        for name in ("hanging", "first_line"):
            value = getattr(self, name)
            if value is not None:
                require_int(f"indent {name}", value, minimum=0)
        if self.hanging is not None and self.first_line is not None:
            raise ValueError("Indent cannot set both hanging and first_line")


class Indent(LeafNode):
    """Paragraph indentation (``w:ind``)."""

    _ATTRIBUTE_NAMES = (
        ("left", "w:left"),
        ("right", "w:right"),
        ("start", "w:start"),
        ("end", "w:end"),
        ("hanging", "w:hanging"),
        ("first_line", "w:firstLine"),
    )

    def __init__(self, properties: IndentProperties) -> None:
        attributes = {
            xml_name: getattr(properties, field_name)
            for field_name, xml_name in self._ATTRIBUTE_NAMES
            if getattr(properties, field_name) is not None
        }
        super().__init__(tag="w:ind", attributes=attributes)
        self._seal()


class _Toggle(LeafNode):
    """Empty element whose presence switches a property on."""

    TAG = ""

    def __init__(self) -> None:
        super().__init__(tag=self.TAG)
        self._seal()


class KeepNext(_Toggle):
    """Keep the paragraph on the same page as the next one."""

    TAG = "w:keepNext"


class KeepLines(_Toggle):
    """Keep all lines of the paragraph on one page."""

    TAG = "w:keepLines"


class PageBreakBefore(_Toggle):
    """Start the paragraph on a new page."""

    TAG = "w:pageBreakBefore"


class Bidirectional(_Toggle):
    """Right-to-left paragraph layout."""

    TAG = "w:bidi"


class OutlineLevel(LeafNode):
    """Outline level used by tables of contents (0 to 9)."""

    def __init__(self, level: int) -> None:
        require_int("outline level", level, minimum=0, maximum=MAX_OUTLINE_LEVEL)
        super().__init__(tag="w:outlineLvl", attributes={"w:val": level})
        self._seal()


class BorderSide(LeafNode):
    """One edge of a paragraph border."""

    SIDES = ("top", "bottom", "left", "right", "between")

    def __init__(
        self,
        side: str,
        color: str = "auto",
        space: int = 1,
        value: str = "single",
        size: int = 6
    ) -> None:
        if side not in self.SIDES:
            raise ValueError(f"Invalid border side {side!r}; expected one of: {', '.join(self.SIDES)}")
        require_int("border space", space, minimum=0)
        require_int("border size", size, minimum=0)
        if not value:
            raise ValueError("Border value cannot be empty")
        super().__init__(
            tag=f"w:{side}",
            attributes={"w:color": color, "w:space": space, "w:val": value, "w:sz": size},
        )
        self._seal()


class ThematicBreak(LeafNode):
    """Horizontal rule drawn as a single bottom border."""

    def __init__(self) -> None:
        super().__init__(tag="w:pBdr", children=[BorderSide("bottom")])
        self._seal()


class Border(XmlComponent):
    """Paragraph border built edge by edge; omitted from output when empty."""

    ignore_if_empty = True

    def __init__(self) -> None:
        super().__init__("w:pBdr")

    def _add_side(self, side: str, color: str, space: int, value: str, size: int) -> "Border":
        self.add_child(BorderSide(side, color, space, value, size))
        return self

    def add_top_border(self, color: str = "auto", space: int = 1,
                       value: str = "single", size: int = 6) -> "Border":
        return self._add_side("top", color, space, value, size)

    def add_bottom_border(self, color: str = "auto", space: int = 1,
                          value: str = "single", size: int = 6) -> "Border":
        return self._add_side("bottom", color, space, value, size)

    def add_left_border(self, color: str = "auto", space: int = 1,
                        value: str = "single", size: int = 6) -> "Border":
        return self._add_side("left", color, space, value, size)

    def add_right_border(self, color: str = "auto", space: int = 1,
                         value: str = "single", size: int = 6) -> "Border":
        return self._add_side("right", color, space, value, size)


class TabStop(LeafNode):
    """A single tab stop, wrapped in its own ``w:tabs`` element.

    Several tab stops may coexist in one properties node.
    """

    def __init__(
        self,
        tab_type: Union[TabStopType, str],
        position: int,
        leader: Optional[Union[LeaderType, str]] = None
    ) -> None:
        kind = coerce_enum(TabStopType, tab_type, "tab stop type")
        require_int("tab stop position", position, minimum=0)
        attributes = {"w:val": kind, "w:pos": position}
        if leader is not None:
            attributes["w:leader"] = coerce_enum(LeaderType, leader, "leader")
        # The inner w:tab is sealed too, so the whole subtree stays fixed.
        item = _TabStopItem(attributes)
        super().__init__(tag="w:tabs", children=[item])
        self._seal()

    @property
    def item(self) -> LeafNode:
        """The ``w:tab`` element carrying the stop's attributes."""
        return self.element_children[0]


class _TabStopItem(LeafNode):
    def __init__(self, attributes: dict) -> None:
        super().__init__(tag="w:tab", attributes=attributes)
        self._seal()


class LeftTabStop(TabStop):
    def __init__(self, position: int, leader: Optional[Union[LeaderType, str]] = None) -> None:
        super().__init__(TabStopType.LEFT, position, leader)


class RightTabStop(TabStop):
    def __init__(self, position: int, leader: Optional[Union[LeaderType, str]] = None) -> None:
        super().__init__(TabStopType.RIGHT, position, leader)


class CenterTabStop(TabStop):
    def __init__(self, position: int, leader: Optional[Union[LeaderType, str]] = None) -> None:
        super().__init__(TabStopType.CENTER, position, leader)


class MaxRightTabStop(RightTabStop):
    """Right tab stop at the right margin."""

    def __init__(self, leader: Optional[Union[LeaderType, str]] = None) -> None:
        super().__init__(MAX_RIGHT_TAB_POSITION, leader)


class NumberProperties(LeafNode):
    """Numbering reference: list instance id and indent level (``w:numPr``)."""

    def __init__(self, num_id: int, level: int) -> None:
        require_int("numbering id", num_id, minimum=0)
        require_int("indent level", level, minimum=0)
        super().__init__(
            tag="w:numPr",
            children=[_ValueLeaf("w:ilvl", level), _ValueLeaf("w:numId", num_id)],
        )
        self._seal()

    @property
    def num_id(self) -> int:
        return self.find_child("w:numId").get_attribute("w:val")

    @property
    def level(self) -> int:
        return self.find_child("w:ilvl").get_attribute("w:val")


class _ValueLeaf(LeafNode):
    def __init__(self, tag: str, value: Union[int, str]) -> None:
        super().__init__(tag=tag, attributes={"w:val": value})
        self._seal()
