"""Runs that reference a footnote by id."""

from wordml_tree.run.run import Run
from wordml_tree.shared.validation import require_int
from wordml_tree.tree.node import LeafNode

FOOTNOTE_REFERENCE_STYLE = "FootnoteReference"

# Ids -1 and 0 belong to the separator footnotes.
MIN_FOOTNOTE_ID = 1


class FootnoteReference(LeafNode):
    def __init__(self, footnote_id: int) -> None:
        super().__init__(tag="w:footnoteReference", attributes={"w:id": footnote_id})
        self._seal()


class FootnoteReferenceRun(Run):
    """Superscript marker pointing at footnote ``footnote_id``."""

    def __init__(self, footnote_id: int) -> None:
        require_int("footnote id", footnote_id, minimum=MIN_FOOTNOTE_ID)
        reference = FootnoteReference(footnote_id)
        super().__init__()
        self.style(FOOTNOTE_REFERENCE_STYLE)
        self.add_child(reference)
        self.footnote_id = footnote_id
