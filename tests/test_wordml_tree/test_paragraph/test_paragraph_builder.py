"""Tests for the paragraph builder.

Covers construction from text and options, ordering guarantees, chaining,
numbering helpers and content mutators.
"""

import pytest

from wordml_tree.footnotes import FootnoteReferenceRun
from wordml_tree.media import Image, PictureRun
from wordml_tree.numbering import Num
from wordml_tree.paragraph import (
    BULLET_NUM_ID,
    LIST_PARAGRAPH_STYLE,
    AlignmentType,
    Bookmark,
    HeadingLevel,
    Hyperlink,
    IndentProperties,
    LeaderType,
    Paragraph,
    ParagraphOptions,
    ParagraphProperties,
    SpacingProperties,
)
from wordml_tree.run import PageBreak, SequentialIdentifier, TextRun
from wordml_tree.tree import XmlNode, XmlSerializer


def _property_tags(paragraph: Paragraph):
    return [child.tag for child in paragraph.properties.children]


class TestConstruction:
    """Test the two construction variants."""

    def test_from_text(self) -> None:
        """Test a text paragraph holds properties then one text run."""
        paragraph = Paragraph.from_text("Hello")

        assert paragraph.tag == "w:p"
        assert isinstance(paragraph.children[0], ParagraphProperties)
        assert isinstance(paragraph.children[1], TextRun)
        assert paragraph.children[1].text == "Hello"
        assert len(paragraph.children) == 2

    def test_empty_options(self) -> None:
        """Test a paragraph without options holds only properties."""
        paragraph = Paragraph()

        assert len(paragraph.children) == 1
        assert paragraph.properties.children == []
        assert XmlSerializer().to_xml(paragraph) == "<w:p/>"

    def test_constructor_rejects_plain_string(self) -> None:
        """Test plain text must go through from_text."""
        with pytest.raises(TypeError, match="use Paragraph.from_text"):
            Paragraph("Hello")  # type: ignore

    def test_heading_level_option(self) -> None:
        """Test a heading level option becomes a style reference."""
        paragraph = Paragraph(ParagraphOptions(heading_level=HeadingLevel.HEADING_2))

        style = paragraph.properties.children[0]
        assert style.tag == "w:pStyle"
        assert style.get_attribute("w:val") is HeadingLevel.HEADING_2

    def test_all_options_applied_in_fixed_order(self) -> None:
        """Test every option is applied once, in declared order."""
        paragraph = Paragraph.from_options(
            style="Quote",
            thematic_break=True,
            page_break_before=True,
            spacing=SpacingProperties(after=200),
            contextual_spacing=True,
            keep_next=True,
            keep_lines=True,
            bidirectional=True,
            alignment="center",
            outline_level=1,
            heading_level="Heading1",
            text="Body",
        )

        assert _property_tags(paragraph) == [
            "w:pStyle",
            "w:outlineLvl",
            "w:jc",
            "w:bidi",
            "w:keepLines",
            "w:keepNext",
            "w:contextualSpacing",
            "w:spacing",
            "w:pageBreakBefore",
            "w:pBdr",
            "w:pStyle",
        ]
        assert paragraph.properties.children[0].get_attribute("w:val") is HeadingLevel.HEADING_1
        assert paragraph.properties.children[-1].get_attribute("w:val") == "Quote"
        assert paragraph.children[1].text == "Body"

    def test_false_toggles_are_not_applied(self) -> None:
        """Test boolean options only apply when true."""
        paragraph = Paragraph(ParagraphOptions(keep_next=False, contextual_spacing=False))

        assert _property_tags(paragraph) == ["w:contextualSpacing"]
        assert paragraph.properties.children[0].get_attribute("w:val") == 0

    def test_invalid_options_are_rejected(self) -> None:
        """Test option validation happens before anything is built."""
        with pytest.raises(ValueError, match="Invalid heading level 'Heading9'"):
            ParagraphOptions(heading_level="Heading9")
        with pytest.raises(ValueError, match="outline level must be <= 9"):
            ParagraphOptions(outline_level=12)
        with pytest.raises(TypeError, match="spacing must be a SpacingProperties"):
            ParagraphOptions(spacing={"before": 10})  # type: ignore
        with pytest.raises(TypeError, match="Paragraph text must be a str"):
            ParagraphOptions(text=5)  # type: ignore


class TestOrderingInvariants:
    """Test structural guarantees of the paragraph."""

    def test_properties_stay_first(self) -> None:
        """Test properties remain the first child whatever the call order."""
        paragraph = Paragraph.from_text("a")
        paragraph.add_run(TextRun("b")).center().add_run_to_front(TextRun("c")).heading1()
        paragraph.page_break().keep_next()

        assert paragraph.children[0] is paragraph.properties
        assert all(not isinstance(child, ParagraphProperties) for child in paragraph.children[1:])

    @pytest.mark.parametrize("prior_runs", [0, 1, 5])
    def test_add_run_to_front_inserts_at_index_one(self, prior_runs: int) -> None:
        """Test front insertion lands right after the properties node."""
        paragraph = Paragraph()
        for index in range(prior_runs):
            paragraph.add_run(TextRun(str(index)))
        front = TextRun("front")

        paragraph.add_run_to_front(front)

        assert paragraph.children[1] is front
        assert len(paragraph.children) == prior_runs + 2

    def test_content_keeps_call_order(self) -> None:
        """Test runs and hyperlinks appear in the order they were added."""
        first, link, last = TextRun("1"), Hyperlink("2", anchor="top"), TextRun("3")

        paragraph = Paragraph().add_run(first).add_hyperlink(link).add_run(last)

        assert paragraph.children[1:] == [first, link, last]

    def test_bookmark_triple_is_contiguous(self) -> None:
        """Test start, text and end are consecutive and ordered."""
        bookmark = Bookmark("anchor", "target", bookmark_id=7)

        paragraph = Paragraph.from_text("before").add_bookmark(bookmark).add_run(TextRun("after"))

        position = paragraph.index_of(bookmark.start)
        triple = paragraph.children[position:position + 3]
        assert [node.tag for node in triple] == ["w:bookmarkStart", "w:r", "w:bookmarkEnd"]
        assert triple[1].text_content == "target"
        assert triple[0].get_attribute("w:id") == triple[2].get_attribute("w:id") == 7


class TestContentGuards:
    """Test the paragraph only accepts content it knows how to order."""

    @pytest.mark.parametrize("method", ["add_run", "add_run_to_front"])
    @pytest.mark.parametrize(
        "value",
        ["raw", 3, ParagraphProperties(), Hyperlink("x", anchor="top")],
        ids=["str", "int", "properties", "hyperlink"],
    )
    def test_run_mutators_reject_non_runs(self, method: str, value) -> None:
        """Test only runs are accepted by the run mutators."""
        paragraph = Paragraph.from_text("a")
        before = list(paragraph.children)

        with pytest.raises(TypeError, match=f"{method} expects a Run"):
            getattr(paragraph, method)(value)

        assert paragraph.children == before

    def test_own_properties_cannot_move_to_front(self) -> None:
        """Test the properties node cannot be pushed behind content."""
        paragraph = Paragraph.from_text("a")

        with pytest.raises(TypeError):
            paragraph.add_run_to_front(paragraph.properties)  # type: ignore

        assert paragraph.children[0] is paragraph.properties
        assert paragraph.children[1].tag == "w:r"

    @pytest.mark.parametrize("value", ["raw", TextRun("x"), ParagraphProperties()])
    def test_add_hyperlink_rejects_non_hyperlinks(self, value) -> None:
        """Test only hyperlinks are accepted by add_hyperlink."""
        paragraph = Paragraph()

        with pytest.raises(TypeError, match="add_hyperlink expects a Hyperlink"):
            paragraph.add_hyperlink(value)

        assert paragraph.children == [paragraph.properties]

    def test_add_bookmark_rejects_non_bookmarks(self) -> None:
        """Test add_bookmark needs a Bookmark."""
        with pytest.raises(TypeError, match="add_bookmark expects a Bookmark"):
            Paragraph().add_bookmark(TextRun("x"))  # type: ignore

    def test_generic_mutators_keep_single_properties_node(self) -> None:
        """Test node-level mutators cannot add, displace or remove properties."""
        paragraph = Paragraph.from_text("a")
        body = XmlNode(tag="w:body")

        with pytest.raises(TypeError, match="exactly one properties node"):
            paragraph.add_child(ParagraphProperties())
        with pytest.raises(IndexError, match="reserved for the paragraph properties"):
            paragraph.insert_child(0, TextRun("b"))
        with pytest.raises(ValueError, match="cannot be removed"):
            paragraph.remove_child(paragraph.properties)
        with pytest.raises(ValueError, match="cannot be removed"):
            body.add_child(paragraph.properties)

        assert paragraph.children[0] is paragraph.properties
        assert len(paragraph.find_children("w:pPr")) == 1
        assert body.children == []
        assert paragraph.properties.parent is paragraph

    def test_runs_move_between_paragraphs(self) -> None:
        """Test a run added to a second paragraph leaves the first."""
        run = TextRun("moved")
        first = Paragraph().add_run(run)
        second = Paragraph().add_run(run)

        assert first.children == [first.properties]
        assert second.children == [second.properties, run]


class TestChaining:
    """Test fluent mutators."""

    def test_every_mutator_returns_the_paragraph(self) -> None:
        """Test chaining across all paragraph-returning mutators."""
        paragraph = Paragraph()

        chained = (
            paragraph
            .heading1().heading2().heading3().heading4().heading5().heading6().title()
            .heading(HeadingLevel.TITLE)
            .center().left().right().start().end().distribute().justified()
            .thematic_break().page_break_before().keep_next().keep_lines()
            .bidirectional().outline_level(2)
            .indent(IndentProperties(left=720))
            .spacing(SpacingProperties(before=100))
            .contextual_spacing(True)
            .max_right_tab_stop().left_tab_stop(100).right_tab_stop(200, LeaderType.DOT)
            .center_tab_stop(300)
            .bullet().set_numbering(Num(4, 0), 1).set_custom_numbering(5, 2)
            .style("Quote").create_border()
            .add_run(TextRun("x")).add_hyperlink(Hyperlink("y", relationship_id="rId3"))
            .add_bookmark(Bookmark("b", "z", 1)).add_run_to_front(TextRun("w"))
            .page_break().reference_footnote(1).add_sequential_identifier("Figure")
        )

        assert chained is paragraph

    def test_chain_equals_sequential_calls(self) -> None:
        """Test chained and sequential calls build the same tree."""
        chained = Paragraph.from_text("Hi").center().heading1().keep_next()
        sequential = Paragraph.from_text("Hi")
        sequential.center()
        sequential.heading1()
        sequential.keep_next()

        serializer = XmlSerializer()
        assert serializer.to_xml(chained) == serializer.to_xml(sequential)

    def test_hello_center_heading_example(self) -> None:
        """Test the canonical text, center, heading example."""
        paragraph = Paragraph.from_text("Hello").center().heading1()

        alignment, style = paragraph.properties.children
        assert alignment.tag == "w:jc"
        assert alignment.get_attribute("w:val") is AlignmentType.CENTER
        assert style.tag == "w:pStyle"
        assert style.get_attribute("w:val") is HeadingLevel.HEADING_1
        assert paragraph.children[1].text_content == "Hello"
        assert XmlSerializer().to_xml(paragraph) == (
            '<w:p>'
            '<w:pPr><w:jc w:val="center"/><w:pStyle w:val="Heading1"/></w:pPr>'
            '<w:r><w:t xml:space="preserve">Hello</w:t></w:r>'
            '</w:p>'
        )


class TestNumbering:
    """Test list numbering helpers."""

    def test_bullet_pushes_style_and_numbering(self) -> None:
        """Test bullet(2) appends ListParagraph then numPr with id 1, level 2."""
        paragraph = Paragraph().bullet(2)

        style, numbering = paragraph.properties.children
        assert style.get_attribute("w:val") == LIST_PARAGRAPH_STYLE
        assert numbering.tag == "w:numPr"
        assert numbering.num_id == BULLET_NUM_ID == 1
        assert numbering.level == 2

    def test_bullet_default_level(self) -> None:
        """Test bullets default to level 0."""
        assert Paragraph().bullet().properties.children[1].level == 0

    def test_set_numbering_uses_num_id(self) -> None:
        """Test the numbering instance id is referenced."""
        paragraph = Paragraph().set_numbering(Num(num_id=6, abstract_num_id=2), 3)

        assert paragraph.properties.children[1].num_id == 6
        assert paragraph.properties.children[1].level == 3

    def test_custom_numbering_also_sets_list_style(self) -> None:
        """Test all numbering helpers pair the style with the reference."""
        paragraph = Paragraph().set_custom_numbering(9, 0)

        assert _property_tags(paragraph) == ["w:pStyle", "w:numPr"]

    def test_repeated_numbering_is_kept(self) -> None:
        """Test duplicate numbering properties accumulate."""
        paragraph = Paragraph().bullet(0).bullet(1)

        assert _property_tags(paragraph) == ["w:pStyle", "w:numPr", "w:pStyle", "w:numPr"]

    def test_invalid_level_leaves_paragraph_unchanged(self) -> None:
        """Test a rejected call does not add half of its properties."""
        paragraph = Paragraph()

        with pytest.raises(ValueError, match="indent level must be >= 0"):
            paragraph.bullet(-1)

        assert paragraph.properties.children == []


class TestContent:
    """Test content-producing helpers."""

    def test_create_text_run_returns_linked_run(self) -> None:
        """Test the returned run can still be formatted in place."""
        paragraph = Paragraph()

        run = paragraph.create_text_run("bold").bold()

        assert isinstance(run, TextRun)
        assert run.parent is paragraph
        assert paragraph.find("w:b") is not None

    def test_add_image_returns_picture_run(self) -> None:
        """Test images are added as picture runs."""
        image = Image.from_pixels("rId5", 100, 50, drawing_id=1)
        paragraph = Paragraph()

        run = paragraph.add_image(image)

        assert isinstance(run, PictureRun)
        assert paragraph.children[1] is run
        assert paragraph.find("a:blip").get_attribute("r:embed") == "rId5"

    def test_page_break_footnote_and_sequence(self) -> None:
        """Test content mutators append their runs."""
        paragraph = Paragraph().page_break().reference_footnote(2).add_sequential_identifier("Table")

        kinds = [type(child) for child in paragraph.children[1:]]
        assert kinds == [PageBreak, FootnoteReferenceRun, SequentialIdentifier]

    def test_invalid_footnote_id(self) -> None:
        """Test separator footnote ids are rejected."""
        with pytest.raises(ValueError, match="footnote id must be >= 1"):
            Paragraph().reference_footnote(0)

    def test_borders_accessor(self) -> None:
        """Test the border created through the paragraph is exposed."""
        paragraph = Paragraph()
        assert paragraph.borders is None

        paragraph.create_border()
        paragraph.borders.add_left_border()

        assert paragraph.borders.children[0].tag == "w:left"
        assert paragraph.paragraph_properties is paragraph.properties

    def test_max_right_tab_stop_leader(self) -> None:
        """Test tab stops keep their leader."""
        paragraph = Paragraph().max_right_tab_stop(LeaderType.DOT)

        tab = paragraph.find("w:tab")
        assert tab.get_attribute("w:pos") == 9026
        assert tab.get_attribute("w:leader") is LeaderType.DOT
