"""Paragraph builder, its properties node and the leaf properties it holds."""

from .formatting import (
    MAX_OUTLINE_LEVEL,
    MAX_RIGHT_TAB_POSITION,
    Alignment,
    AlignmentType,
    Bidirectional,
    Border,
    BorderSide,
    CenterTabStop,
    ContextualSpacing,
    Indent,
    IndentProperties,
    KeepLines,
    KeepNext,
    LeaderType,
    LeftTabStop,
    LineRuleType,
    MaxRightTabStop,
    NumberProperties,
    OutlineLevel,
    PageBreakBefore,
    RightTabStop,
    Spacing,
    SpacingProperties,
    Style,
    TabStop,
    TabStopType,
    ThematicBreak,
)
from .links import HYPERLINK_STYLE, Bookmark, BookmarkEnd, BookmarkStart, Hyperlink
from .paragraph import (
    BULLET_NUM_ID,
    LIST_PARAGRAPH_STYLE,
    HeadingLevel,
    Paragraph,
    ParagraphOptions,
)
from .properties import ParagraphProperties

__all__ = [
    "MAX_OUTLINE_LEVEL",
    "MAX_RIGHT_TAB_POSITION",
    "Alignment",
    "AlignmentType",
    "Bidirectional",
    "Border",
    "BorderSide",
    "CenterTabStop",
    "ContextualSpacing",
    "Indent",
    "IndentProperties",
    "KeepLines",
    "KeepNext",
    "LeaderType",
    "LeftTabStop",
    "LineRuleType",
    "MaxRightTabStop",
    "NumberProperties",
    "OutlineLevel",
    "PageBreakBefore",
    "RightTabStop",
    "Spacing",
    "SpacingProperties",
    "Style",
    "TabStop",
    "TabStopType",
    "ThematicBreak",
    "HYPERLINK_STYLE",
    "Bookmark",
    "BookmarkEnd",
    "BookmarkStart",
    "Hyperlink",
    "BULLET_NUM_ID",
    "LIST_PARAGRAPH_STYLE",
    "HeadingLevel",
    "Paragraph",
    "ParagraphOptions",
    "ParagraphProperties",
]
