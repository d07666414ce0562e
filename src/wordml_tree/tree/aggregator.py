"""Property aggregator base class.

An aggregator is the always-first child of its owning builder. It only
appends: repeated property kinds are kept in the tree in call order and the
consuming application applies the last one.
"""

from wordml_tree.tree.node import XmlComponent, XmlNode


class PropertyAggregator(XmlComponent):
    """Collects leaf property nodes in insertion order."""

    ignore_if_empty = True

    def push_property(self, node: XmlNode) -> "PropertyAggregator":
        """Append a leaf property node and return the aggregator."""
        self.add_child(node)
        return self
