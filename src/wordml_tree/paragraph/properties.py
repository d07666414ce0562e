"""Paragraph properties (``w:pPr``)."""

from typing import Optional

from wordml_tree.paragraph.formatting import Border
from wordml_tree.tree.aggregator import PropertyAggregator


class ParagraphProperties(PropertyAggregator):
    """Formatting toggles of one paragraph, in the order they were set."""

    def __init__(self) -> None:
        super().__init__("w:pPr")
        self.border: Optional[Border] = None

    def create_border(self) -> Border:
        """Append a new, empty border element and make it the current one."""
        border = Border()
        self.push_property(border)
        self.border = border
        return border
