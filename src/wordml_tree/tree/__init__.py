"""Element tree layer: nodes, namespaces and serialization.

Provides the node primitives every document-part builder composes against
and the serializer that renders a finished tree.
"""

from .namespaces import WORDML_NAMESPACES, collect_prefixes, namespace_declarations
from .aggregator import PropertyAggregator
from .node import LeafNode, XmlComponent, XmlNode
from .serializer import (
    SerializationResult,
    XmlSerializer,
    check_xml_characters,
    escape_attribute,
    escape_text,
    format_value,
)

__all__ = [
    "WORDML_NAMESPACES",
    "collect_prefixes",
    "namespace_declarations",
    "PropertyAggregator",
    "LeafNode",
    "XmlComponent",
    "XmlNode",
    "SerializationResult",
    "XmlSerializer",
    "check_xml_characters",
    "escape_attribute",
    "escape_text",
    "format_value",
]
