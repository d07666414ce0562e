"""Numbering instances referenced by numbered paragraphs."""

from dataclasses import dataclass

from wordml_tree.shared.validation import require_int
from wordml_tree.tree.node import LeafNode, XmlNode

# numId 0 is reserved by the format to mean "no numbering".
MIN_NUM_ID = 1


@dataclass(frozen=True)
class Num:
    """A concrete numbering instance bound to an abstract definition.

    Paragraphs only read ``id``; the definition itself lives in the
    numbering part, which is built elsewhere.
    """

    num_id: int
    abstract_num_id: int

    def __post_init__(self) -> None:
        """Validate numbering identifiers."""
        require_int("num_id", self.num_id, minimum=MIN_NUM_ID)
        require_int("abstract_num_id", self.abstract_num_id, minimum=0)

    @property
    def id(self) -> int:
        return self.num_id

    def to_node(self) -> XmlNode:
        """Build the ``w:num`` element for the numbering part."""
        abstract_ref = _AbstractNumReference(self.abstract_num_id)
        return XmlNode(
            tag="w:num",
            attributes={"w:numId": self.num_id},
            children=[abstract_ref],
        )


class _AbstractNumReference(LeafNode):
    def __init__(self, abstract_num_id: int) -> None:
        super().__init__(tag="w:abstractNumId", attributes={"w:val": abstract_num_id})
        self._seal()
