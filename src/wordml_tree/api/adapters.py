"""Integration with lxml.

Converts node trees to ``lxml.etree`` elements and checks serializer output
with lxml's parser. lxml is imported when an operation runs, and failures
are reported on a :class:`ConversionResult` rather than raised.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from wordml_tree.shared import (
    DiagnosticEntry,
    DiagnosticSeverity,
    SerializationConfig,
    get_logger,
)
from wordml_tree.tree.namespaces import (
    WORDML_NAMESPACES,
    collect_prefixes,
    namespace_declarations,
)
from wordml_tree.tree.node import XmlNode
from wordml_tree.tree.serializer import XmlSerializer, format_value

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

_XMLNS_PREFIX = "xmlns:"


@dataclass
class AdapterMetadata:
    """Metadata about an integration adapter."""

    name: str
    version: str
    target_library: str
    supported_versions: List[str]
    description: str
    author: str = "wordml-tree"


@dataclass
class ConversionResult:
    """Result of a conversion operation."""

    success: bool
    converted_data: Any
    original_data: Any
    conversion_time_ms: float
    errors: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)


def _qualify(name: str, namespaces: Dict[str, str]) -> str:
    """Turn a ``prefix:local`` name into lxml's ``{uri}local`` form."""
    if ":" not in name:
        return name
    prefix, local = name.split(":", 1)
    if prefix == "xml":
        return f"{{{XML_NAMESPACE}}}{local}"
    if prefix not in namespaces:
        raise KeyError(f"No namespace URI registered for prefix '{prefix}'")
    return f"{{{namespaces[prefix]}}}{local}"


class LxmlAdapter:
    """Adapter producing ``lxml.etree`` elements from node trees.

    Empty components are dropped by the same rules the serializer applies,
    so the converted element matches the serialized XML.
    """

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        config: Optional[SerializationConfig] = None
    ) -> None:
        """Initialize the adapter.

        Args:
            correlation_id: Optional correlation ID for request tracking
            config: Serialization configuration deciding which empty
                components are dropped
        """
        self.correlation_id = correlation_id
        self._logger = get_logger(__name__, correlation_id, self.__class__.__name__)
        self._serializer = XmlSerializer(correlation_id=correlation_id, config=config)

    @property
    def metadata(self) -> AdapterMetadata:
        """Get adapter metadata."""
        return AdapterMetadata(
            name="lxml",
            version="1.0.0",
            target_library="lxml",
            supported_versions=["4.9+"],
            description="Conversion of node trees to lxml.etree elements",
        )

    def is_available(self) -> bool:
        """Check if lxml is available."""
        try:
            import lxml.etree  # noqa: F401
            return True
        except ImportError:
            return False

    def to_target(self, root: XmlNode) -> ConversionResult:
        """Convert a node tree to an ``lxml.etree`` element.

        Args:
            root: Root of the tree to convert

        Returns:
            ConversionResult containing the lxml element
        """
        start_time = time.time()

        try:
            import lxml.etree as ET
        except ImportError as e:
            return self._create_error_result(f"lxml is not available: {e}", root, start_time)

        try:
            if self._serializer.is_omitted(root):
                return self._create_error_result(
                    f"<{root.tag}> is empty and omitted from output", root, start_time
                )
            declarations = namespace_declarations(collect_prefixes(root))
            nsmap = {
                name[len(_XMLNS_PREFIX):]: uri for name, uri in declarations.items()
            }
            lxml_root = self._convert_element_to_lxml(
                root, ET, dict(WORDML_NAMESPACES), None, nsmap
            )
        except (ET.LxmlError, KeyError, TypeError, ValueError) as e:
            return self._create_error_result(f"Failed to convert to lxml: {e}", root, start_time)

        processing_time = (time.time() - start_time) * 1000
        self._logger.debug(
            "Converted tree to lxml",
            extra={"root_tag": root.tag, "processing_time_ms": processing_time}
        )
        return ConversionResult(
            success=True,
            converted_data=lxml_root,
            original_data=root,
            conversion_time_ms=processing_time,
            metadata={
                "lxml_version": ET.LXML_VERSION,
                "element_count": sum(1 for _ in lxml_root.iter()),
            }
        )

    def check_well_formed(self, xml: str) -> ConversionResult:
        """Parse serialized XML with lxml.

        Prefixed names must be declared, so output checked here is expected
        to come from a configuration with ``declare_namespaces`` enabled.

        Args:
            xml: Serializer output

        Returns:
            ConversionResult containing the parsed root element
        """
        start_time = time.time()

        try:
            import lxml.etree as ET
        except ImportError as e:
            return self._create_error_result(f"lxml is not available: {e}", xml, start_time)

        try:
            parsed = ET.fromstring(xml.encode("utf-8"))
        except ET.XMLSyntaxError as e:
            return self._create_error_result(f"XML is not well-formed: {e}", xml, start_time)

        return ConversionResult(
            success=True,
            converted_data=parsed,
            original_data=xml,
            conversion_time_ms=(time.time() - start_time) * 1000,
            metadata={"root_tag": parsed.tag},
        )

    def _convert_element_to_lxml(
        self,
        element: XmlNode,
        ET: Any,
        namespaces: Dict[str, str],
        parent: Any,
        nsmap: Optional[Dict[str, str]] = None
    ) -> Any:
        """Convert one node and its subtree."""
        scoped = dict(namespaces)
        declared = {
            name[len(_XMLNS_PREFIX):]: str(value)
            for name, value in element.attributes.items()
            if name.startswith(_XMLNS_PREFIX)
        }
        scoped.update(declared)
        element_nsmap = {**(nsmap or {}), **declared} or None

        tag = _qualify(element.tag, scoped)
        if parent is None:
            lxml_element = ET.Element(tag, nsmap=element_nsmap)
        else:
            lxml_element = ET.SubElement(parent, tag, nsmap=element_nsmap)

        for name, value in element.attributes.items():
            if name.startswith(_XMLNS_PREFIX):
                continue
            lxml_element.set(_qualify(name, scoped), format_value(value))

        # Leaf text goes to .text before the first child element, else to the
        # tail of the preceding child.
        last_child = None
        for child in element.children:
            if isinstance(child, XmlNode):
                if self._serializer.is_omitted(child):
                    continue
                last_child = self._convert_element_to_lxml(child, ET, scoped, lxml_element)
            elif last_child is None:
                lxml_element.text = (lxml_element.text or "") + format_value(child)
            else:
                last_child.tail = (last_child.tail or "") + format_value(child)

        return lxml_element

    def _create_error_result(
        self,
        error_message: str,
        original_data: Any,
        start_time: float
    ) -> ConversionResult:
        """Create a ConversionResult for error conditions."""
        self._logger.error(error_message, exc_info=False)
        return ConversionResult(
            success=False,
            converted_data=None,
            original_data=original_data,
            conversion_time_ms=(time.time() - start_time) * 1000,
            errors=[error_message],
            diagnostics=[
                DiagnosticEntry(
                    severity=DiagnosticSeverity.ERROR,
                    message=error_message,
                    component=self.__class__.__name__,
                    correlation_id=self.correlation_id
                )
            ]
        )
