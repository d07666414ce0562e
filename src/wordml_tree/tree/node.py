"""Element tree primitives for WordprocessingML generation.

An :class:`XmlNode` is a tagged element with insertion-ordered attributes and
an ordered list of children. Children are either further nodes or terminal
leaf values (text or numbers). Structural validity of a subtree is the job of
the builder that owns it; the node itself only guarantees ordering, parent
links and well-typed content.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union

LeafValue = Union[str, int, float]
AttributeValue = Union[str, int, float, bool, Enum]
Child = Union["XmlNode", LeafValue]


def _check_leaf_value(value: Any) -> None:
    # bool is an int subclass but has no meaningful text form as content
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise TypeError(
            f"Child must be an XmlNode, str, int or float, got {type(value).__name__}"
        )


@dataclass(eq=False)
class XmlNode:
    """Represents a single element in the document tree.

    Children keep the order in which they were added; only
    :meth:`insert_child` places a child anywhere but the end.
    """

    tag: str
    attributes: Dict[str, AttributeValue] = field(default_factory=dict)
    children: List[Child] = field(default_factory=list)
    parent: Optional["XmlNode"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate the tag and establish parent-child relationships."""
        if not self.tag:
            raise ValueError("Element tag cannot be empty")
        for name, value in self.attributes.items():
            self._check_attribute(name, value)
        children, self.children = self.children, []
        for child in children:
            self._adopt(child)
            self.children.append(child)

    @property
    def local_name(self) -> str:
        """Get local tag name without namespace prefix."""
        if ":" in self.tag:
            return self.tag.split(":", 1)[1]
        return self.tag

    @property
    def namespace_prefix(self) -> Optional[str]:
        """Get namespace prefix if present."""
        if ":" in self.tag:
            return self.tag.split(":", 1)[0]
        return None

    @property
    def element_children(self) -> List["XmlNode"]:
        """Direct children that are nodes, skipping leaf values."""
        return [child for child in self.children if isinstance(child, XmlNode)]

    @property
    def is_empty(self) -> bool:
        """True when the node has neither attributes nor children."""
        return not self.attributes and not self.children

    @property
    def text_content(self) -> str:
        """Concatenate all leaf values of this subtree in document order."""
        parts: List[str] = []
        for child in self.children:
            if isinstance(child, XmlNode):
                parts.append(child.text_content)
            else:
                parts.append(str(child))
        return "".join(parts)

    def add_child(self, child: Child) -> None:
        """Append a child to the end of the children sequence.

        A node that already belongs to another parent is moved: it is
        detached from its previous parent first.

        Raises:
            TypeError: If child is neither a node nor a leaf value
        """
        self._adopt(child)
        self.children.append(child)

    def insert_child(self, index: int, child: Child) -> None:
        """Insert child at a specific index.

        Raises:
            IndexError: If index is outside ``0..len(children)``
            TypeError: If child is neither a node nor a leaf value
        """
        if not (0 <= index <= len(self.children)):
            raise IndexError("Child index out of range")
        self._adopt(child)
        self.children.insert(index, child)

    def remove_child(self, child: Child) -> bool:
        """Remove a child and clear its parent relationship."""
        for position, existing in enumerate(self.children):
            if existing is child:
                del self.children[position]
                if isinstance(child, XmlNode):
                    child.parent = None
                return True
        return False

    def index_of(self, child: Child) -> int:
        """Return the position of child among the children (identity match)."""
        for position, existing in enumerate(self.children):
            if existing is child:
                return position
        raise ValueError(f"{child!r} is not a child of <{self.tag}>")

    def _adopt(self, child: Child) -> None:
        if isinstance(child, XmlNode):
            if child is self:
                raise ValueError("Element cannot be its own child")
            if child.parent is not None:
                child.parent.remove_child(child)
            child.parent = self
        else:
            _check_leaf_value(child)

    def get_attribute(
        self, name: str, default: Optional[AttributeValue] = None
    ) -> Optional[AttributeValue]:
        """Get attribute value with optional default."""
        return self.attributes.get(name, default)

    def set_attribute(self, name: str, value: AttributeValue) -> None:
        """Set attribute value, overwriting in place if already present."""
        self._check_attribute(name, value)
        self.attributes[name] = value

    def has_attribute(self, name: str) -> bool:
        """Check if element has specific attribute."""
        return name in self.attributes

    @staticmethod
    def _check_attribute(name: Any, value: Any) -> None:
        if not isinstance(name, str) or not name:
            raise TypeError("Attribute name must be a non-empty string")
        if not isinstance(value, (str, int, float, bool, Enum)):
            raise TypeError(
                f"Attribute {name} must be str, int, float, bool or Enum, "
                f"got {type(value).__name__}"
            )

    def find_child(self, tag: str) -> Optional["XmlNode"]:
        """Find first direct child with matching tag name."""
        for child in self.element_children:
            if child.tag == tag:
                return child
        return None

    def find_children(self, tag: str) -> List["XmlNode"]:
        """Find all direct children with matching tag name."""
        return [child for child in self.element_children if child.tag == tag]

    def find(self, tag: str) -> Optional["XmlNode"]:
        """Find first descendant with matching tag name in document order."""
        return next((node for node in self.iter() if node is not self and node.tag == tag), None)

    def find_all(self, tag: str) -> List["XmlNode"]:
        """Find all descendants with matching tag name in document order."""
        return [node for node in self.iter() if node is not self and node.tag == tag]

    def iter(self) -> Iterator["XmlNode"]:
        """Iterate over this node and its descendants, depth-first pre-order."""
        stack: List[XmlNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.element_children))

    def get_path(self) -> str:
        """Get XPath-like path to this element."""
        if self.parent is None:
            return f"/{self.tag}"

        parent_path = self.parent.get_path()
        siblings = self.parent.find_children(self.tag)
        if len(siblings) > 1:
            position = next(i for i, sibling in enumerate(siblings) if sibling is self) + 1
            return f"{parent_path}/{self.tag}[{position}]"

        return f"{parent_path}/{self.tag}"

    def get_depth(self) -> int:
        """Get depth of this element in the tree (root = 0)."""
        if self.parent is None:
            return 0
        return self.parent.get_depth() + 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to a plain dictionary, keeping child order."""
        result: Dict[str, Any] = {"tag": self.tag}

        if self.attributes:
            result["attributes"] = {
                name: value.value if isinstance(value, Enum) else value
                for name, value in self.attributes.items()
            }

        if self.children:
            result["children"] = [
                child.to_dict() if isinstance(child, XmlNode) else child
                for child in self.children
            ]

        return result


class LeafNode(XmlNode):
    """Single-purpose node whose content is fixed at construction.

    Subclasses build their attributes and children in ``__init__`` and then
    call :meth:`_seal`; afterwards every structural mutator raises.
    """

    _sealed: bool = False

    def _seal(self) -> None:
        self._sealed = True

    def _check_mutable(self) -> None:
        if self._sealed:
            raise TypeError(f"<{self.tag}> is immutable once constructed")

    def add_child(self, child: Child) -> None:
        self._check_mutable()
        super().add_child(child)

    def insert_child(self, index: int, child: Child) -> None:
        self._check_mutable()
        super().insert_child(index, child)

    def remove_child(self, child: Child) -> bool:
        self._check_mutable()
        return super().remove_child(child)

    def set_attribute(self, name: str, value: AttributeValue) -> None:
        self._check_mutable()
        super().set_attribute(name, value)


class XmlComponent(XmlNode):
    """Base class for builders that own a node subtree.

    A component is the root node of the subtree it builds, so it can be
    added to any other node as a child and still be mutated through its
    own API afterwards.
    """

    #: Drop this node from serialized output when it has no content.
    ignore_if_empty: bool = False

    def __init__(self, tag: str) -> None:
        super().__init__(tag=tag)

    @property
    def root(self) -> XmlNode:
        """The node this component builds (the component itself)."""
        return self
