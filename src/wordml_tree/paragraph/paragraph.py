"""Paragraph builder (``w:p``).

A paragraph owns one :class:`ParagraphProperties` node, always its first
child, followed by content (runs, hyperlinks, bookmarks) in call order.
Mutators return the paragraph so calls can be chained.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from wordml_tree.footnotes import FootnoteReferenceRun
from wordml_tree.media import Image, PictureRun
from wordml_tree.numbering import Num
from wordml_tree.paragraph.formatting import (
    MAX_OUTLINE_LEVEL,
    Alignment,
    AlignmentType,
    Bidirectional,
    Border,
    CenterTabStop,
    ContextualSpacing,
    Indent,
    IndentProperties,
    KeepLines,
    KeepNext,
    LeaderType,
    LeftTabStop,
    MaxRightTabStop,
    NumberProperties,
    OutlineLevel,
    PageBreakBefore,
    RightTabStop,
    Spacing,
    SpacingProperties,
    Style,
    ThematicBreak,
)
from wordml_tree.paragraph.links import Bookmark, Hyperlink
from wordml_tree.paragraph.properties import ParagraphProperties
from wordml_tree.run import PageBreak, Run, SequentialIdentifier, TextRun
from wordml_tree.shared.validation import coerce_enum, require_int
from wordml_tree.tree.aggregator import PropertyAggregator
from wordml_tree.tree.node import Child, XmlComponent, XmlNode

LIST_PARAGRAPH_STYLE = "ListParagraph"

# Numbering instance conventionally defined for plain bullets.
BULLET_NUM_ID = 1

Leader = Optional[Union[LeaderType, str]]


class HeadingLevel(Enum):
    """Built-in heading style ids."""

    HEADING_1 = "Heading1"
    HEADING_2 = "Heading2"
    HEADING_3 = "Heading3"
    HEADING_4 = "Heading4"
    HEADING_5 = "Heading5"
    HEADING_6 = "Heading6"
    TITLE = "Title"


@dataclass(frozen=True)
class ParagraphOptions:
    """Initial content and formatting of a paragraph.

    Every field is optional. Each option that is set produces one property
    when the paragraph is built; boolean toggles only when true.
    """

    text: Optional[str] = None
    heading_level: Optional[Union[HeadingLevel, str]] = None
    outline_level: Optional[int] = None
    alignment: Optional[Union[AlignmentType, str]] = None
    bidirectional: bool = False
    keep_lines: bool = False
    keep_next: bool = False
    contextual_spacing: Optional[bool] = None
    spacing: Optional[SpacingProperties] = None
    page_break_before: bool = False
    thematic_break: bool = False
    style: Optional[Union[str, Enum]] = None

    def __post_init__(self) -> None:
        """Validate options and normalise enum values."""
        if self.text is not None and not isinstance(self.text, str):
            raise TypeError(f"Paragraph text must be a str, got {type(self.text).__name__}")
        if self.heading_level is not None:
            object.__setattr__(
                self, "heading_level",
                coerce_enum(HeadingLevel, self.heading_level, "heading level")
            )
        if self.outline_level is not None:
            require_int("outline level", self.outline_level, minimum=0, maximum=MAX_OUTLINE_LEVEL)
        if self.alignment is not None:
            object.__setattr__(
                self, "alignment", coerce_enum(AlignmentType, self.alignment, "alignment")
            )
        if self.spacing is not None and not isinstance(self.spacing, SpacingProperties):
            raise TypeError("spacing must be a SpacingProperties instance")

    def build_properties(self) -> List[XmlNode]:
        """Property nodes for the options that are set, in application order."""
        nodes: List[XmlNode] = []
        if self.heading_level is not None:
            nodes.append(Style(self.heading_level))
        if self.outline_level is not None:
            nodes.append(OutlineLevel(self.outline_level))
        if self.alignment is not None:
            nodes.append(Alignment(self.alignment))
        if self.bidirectional:
            nodes.append(Bidirectional())
        if self.keep_lines:
            nodes.append(KeepLines())
        if self.keep_next:
            nodes.append(KeepNext())
        if self.contextual_spacing is not None:
            nodes.append(ContextualSpacing(self.contextual_spacing))
        if self.spacing is not None:
            nodes.append(Spacing(self.spacing))
        if self.page_break_before:
            nodes.append(PageBreakBefore())
        if self.thematic_break:
            nodes.append(ThematicBreak())
        if self.style is not None:
            nodes.append(Style(self.style))
        return nodes


class Paragraph(XmlComponent):
    """Paragraph with chainable formatting and content mutators.

    Build one from plain text with :meth:`from_text`, or from a
    :class:`ParagraphOptions` by passing it to the constructor (or
    :meth:`from_options`). Every mutator constructs the nodes it needs
    before linking any of them, so a rejected argument leaves the
    paragraph unchanged.

    Example:
        >>> paragraph = Paragraph.from_text("Hello").center().heading1()
        >>> [child.tag for child in paragraph.properties.children]
        ['w:jc', 'w:pStyle']
    """

    def __init__(self, options: Optional[ParagraphOptions] = None) -> None:
        options = options if options is not None else ParagraphOptions()
        if not isinstance(options, ParagraphOptions):
            raise TypeError(
                "Paragraph expects ParagraphOptions; use Paragraph.from_text for plain text"
            )
        property_nodes = options.build_properties()
        text_run = TextRun(options.text) if options.text is not None else None

        super().__init__("w:p")
        self.properties = ParagraphProperties()
        XmlNode.add_child(self, self.properties)
        for node in property_nodes:
            self.properties.push_property(node)
        if text_run is not None:
            self.add_child(text_run)

    @classmethod
    def from_text(cls, text: str) -> "Paragraph":
        """Paragraph holding a single text run."""
        return cls(ParagraphOptions(text=text))

    @classmethod
    def from_options(cls, **kwargs) -> "Paragraph":
        """Paragraph built from :class:`ParagraphOptions` keyword arguments."""
        return cls(ParagraphOptions(**kwargs))

    @property
    def paragraph_properties(self) -> ParagraphProperties:
        return self.properties

    @property
    def borders(self) -> Optional[Border]:
        """Border created by the latest :meth:`create_border` call, if any."""
        return self.properties.border

    # Structure

    @staticmethod
    def _check_not_properties(child: Child) -> None:
        if isinstance(child, PropertyAggregator):
            raise TypeError("A paragraph holds exactly one properties node, at index 0")

    def add_child(self, child: Child) -> None:
        self._check_not_properties(child)
        super().add_child(child)

    def insert_child(self, index: int, child: Child) -> None:
        if index < 1:
            raise IndexError("Index 0 is reserved for the paragraph properties")
        self._check_not_properties(child)
        super().insert_child(index, child)

    def remove_child(self, child: Child) -> bool:
        if child is self.properties:
            raise ValueError("Paragraph properties cannot be removed")
        return super().remove_child(child)

    def _push(self, *nodes: XmlNode) -> "Paragraph":
        for node in nodes:
            self.properties.push_property(node)
        return self

    def create_border(self) -> "Paragraph":
        self.properties.create_border()
        return self

    # Content

    @staticmethod
    def _check_content(value: object, expected: type, operation: str) -> None:
        if not isinstance(value, expected):
            raise TypeError(
                f"{operation} expects a {expected.__name__}, got {type(value).__name__}"
            )

    def add_run(self, run: Run) -> "Paragraph":
        self._check_content(run, Run, "add_run")
        self.add_child(run)
        return self

    def add_hyperlink(self, hyperlink: Hyperlink) -> "Paragraph":
        self._check_content(hyperlink, Hyperlink, "add_hyperlink")
        self.add_child(hyperlink)
        return self

    def add_bookmark(self, bookmark: Bookmark) -> "Paragraph":
        """Append the bookmark's start marker, text and end marker, in order."""
        self._check_content(bookmark, Bookmark, "add_bookmark")
        for node in (bookmark.start, bookmark.text, bookmark.end):
            self.add_child(node)
        return self

    def add_run_to_front(self, run: Run) -> "Paragraph":
        """Insert a run directly after the properties node."""
        self._check_content(run, Run, "add_run_to_front")
        self.insert_child(1, run)
        return self

    def create_text_run(self, text: str) -> TextRun:
        """Append a new text run and return it for further formatting."""
        run = TextRun(text)
        self.add_run(run)
        return run

    def add_image(self, image: Image) -> PictureRun:
        run = image.run
        self.add_run(run)
        return run

    def page_break(self) -> "Paragraph":
        self.add_child(PageBreak())
        return self

    def reference_footnote(self, footnote_id: int) -> "Paragraph":
        self.add_child(FootnoteReferenceRun(footnote_id))
        return self

    def add_sequential_identifier(self, identifier: str) -> "Paragraph":
        self.add_child(SequentialIdentifier(identifier))
        return self

    # Styles

    def heading(self, level: Union[HeadingLevel, str]) -> "Paragraph":
        return self._push(Style(coerce_enum(HeadingLevel, level, "heading level")))

    def heading1(self) -> "Paragraph":
        return self.heading(HeadingLevel.HEADING_1)

    def heading2(self) -> "Paragraph":
        return self.heading(HeadingLevel.HEADING_2)

    def heading3(self) -> "Paragraph":
        return self.heading(HeadingLevel.HEADING_3)

    def heading4(self) -> "Paragraph":
        return self.heading(HeadingLevel.HEADING_4)

    def heading5(self) -> "Paragraph":
        return self.heading(HeadingLevel.HEADING_5)

    def heading6(self) -> "Paragraph":
        return self.heading(HeadingLevel.HEADING_6)

    def title(self) -> "Paragraph":
        return self.heading(HeadingLevel.TITLE)

    def style(self, style_id: Union[str, Enum]) -> "Paragraph":
        return self._push(Style(style_id))

    # Alignment

    def center(self) -> "Paragraph":
        return self._push(Alignment(AlignmentType.CENTER))

    def left(self) -> "Paragraph":
        return self._push(Alignment(AlignmentType.LEFT))

    def right(self) -> "Paragraph":
        return self._push(Alignment(AlignmentType.RIGHT))

    def start(self) -> "Paragraph":
        return self._push(Alignment(AlignmentType.START))

    def end(self) -> "Paragraph":
        return self._push(Alignment(AlignmentType.END))

    def distribute(self) -> "Paragraph":
        return self._push(Alignment(AlignmentType.DISTRIBUTE))

    def justified(self) -> "Paragraph":
        return self._push(Alignment(AlignmentType.BOTH))

    # Layout toggles

    def thematic_break(self) -> "Paragraph":
        return self._push(ThematicBreak())

    def page_break_before(self) -> "Paragraph":
        return self._push(PageBreakBefore())

    def keep_next(self) -> "Paragraph":
        return self._push(KeepNext())

    def keep_lines(self) -> "Paragraph":
        return self._push(KeepLines())

    def bidirectional(self) -> "Paragraph":
        return self._push(Bidirectional())

    def outline_level(self, level: int) -> "Paragraph":
        return self._push(OutlineLevel(level))

    def indent(self, properties: IndentProperties) -> "Paragraph":
        return self._push(Indent(properties))

    def spacing(self, properties: SpacingProperties) -> "Paragraph":
        return self._push(Spacing(properties))

    def contextual_spacing(self, value: bool) -> "Paragraph":
        return self._push(ContextualSpacing(value))

    # Tab stops

    def max_right_tab_stop(self, leader: Leader = None) -> "Paragraph":
        return self._push(MaxRightTabStop(leader))

    def left_tab_stop(self, position: int, leader: Leader = None) -> "Paragraph":
        return self._push(LeftTabStop(position, leader))

    def right_tab_stop(self, position: int, leader: Leader = None) -> "Paragraph":
        return self._push(RightTabStop(position, leader))

    def center_tab_stop(self, position: int, leader: Leader = None) -> "Paragraph":
        return self._push(CenterTabStop(position, leader))

    # Numbering

    def bullet(self, indent_level: int = 0) -> "Paragraph":
        return self.set_custom_numbering(BULLET_NUM_ID, indent_level)

    def set_numbering(self, numbering: Num, indent_level: int) -> "Paragraph":
        """Number the paragraph with a numbering instance defined elsewhere."""
        return self.set_custom_numbering(numbering.id, indent_level)

    def set_custom_numbering(self, num_id: int, indent_level: int) -> "Paragraph":
        """Number the paragraph with a raw ``numId``.

        Like :meth:`bullet` and :meth:`set_numbering`, this also applies the
        ``ListParagraph`` style.
        """
        number_properties = NumberProperties(num_id, indent_level)
        return self._push(Style(LIST_PARAGRAPH_STYLE), number_properties)
