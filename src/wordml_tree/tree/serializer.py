"""Serialization of node trees to XML, dictionaries and JSON.

The serializer walks a tree depth-first in stored child order. It never
mutates the tree and keeps no state between calls, so serializing the same
unmodified tree twice yields identical output. Identifiers such as bookmark
or relationship ids must already be present on the nodes.
"""

import json
import re
import time
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from wordml_tree.shared import (
    DiagnosticEntry,
    DiagnosticSeverity,
    OutputFormat,
    PerformanceMetrics,
    SerializationConfig,
    get_logger,
)
from wordml_tree.tree.namespaces import collect_prefixes, namespace_declarations
from wordml_tree.tree.node import AttributeValue, LeafValue, XmlNode

# Property children that may legitimately repeat inside a properties node.
REPEATABLE_PROPERTY_TAGS = frozenset({"w:tabs"})

_ILLEGAL_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def format_value(value: Union[AttributeValue, LeafValue]) -> str:
    """Convert an attribute or leaf scalar to its wire string."""
    if isinstance(value, Enum):
        return format_value(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def check_xml_characters(text: str) -> None:
    """Raise ValueError if text holds a character XML 1.0 cannot represent."""
    match = _ILLEGAL_XML_CHARS.search(text)
    if match:
        raise ValueError(
            f"Character U+{ord(match.group()):04X} is not allowed in XML 1.0 content"
        )


def escape_text(text: str) -> str:
    """Escape XML text content.

    Raises:
        ValueError: If text contains characters XML 1.0 cannot represent
    """
    check_xml_characters(text)
    return (text
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;'))


def escape_attribute(value: str) -> str:
    """Escape an XML attribute value for use inside double quotes."""
    check_xml_characters(value)
    return (value
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;')
            .replace('\t', '&#9;')
            .replace('\n', '&#10;')
            .replace('\r', '&#13;'))


@dataclass
class SerializationResult:
    """Result of a serialization operation."""

    success: bool = True
    output: Union[str, Dict[str, Any]] = ""
    format_used: OutputFormat = OutputFormat.XML_STRING
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)
    performance: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    correlation_id: Optional[str] = None

    @property
    def processing_time_ms(self) -> float:
        """Get processing time in milliseconds."""
        return self.performance.processing_time_ms

    @property
    def output_size_bytes(self) -> int:
        """Size of the textual output encoded as UTF-8."""
        return self.performance.output_size_bytes

    def has_errors(self) -> bool:
        """Check if result contains any error diagnostics."""
        return any(diag.severity == DiagnosticSeverity.ERROR for diag in self.diagnostics)


class XmlSerializer:
    """Serializer for node trees.

    Supports compact and indented XML, a tag-keyed dictionary form and JSON.
    Components flagged ``ignore_if_empty`` are dropped from the output when
    they carry no content and the configuration asks for it.
    """

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        config: Optional[SerializationConfig] = None
    ) -> None:
        """Initialize serializer.

        Args:
            correlation_id: Optional correlation ID for request tracking
            config: Optional serialization configuration
        """
        self.correlation_id = correlation_id
        self.config = config or SerializationConfig()
        self.logger = get_logger(__name__, correlation_id, "serializer")

    def serialize(
        self,
        root: XmlNode,
        output_format: OutputFormat = OutputFormat.XML_STRING
    ) -> SerializationResult:
        """Serialize a tree to the requested format.

        Failures (for example an undeclarable namespace prefix or an illegal
        character in text) are reported on the result instead of raised.

        Args:
            root: Root node of the tree to serialize
            output_format: Desired output format

        Returns:
            SerializationResult with output, diagnostics and metrics
        """
        start_time = time.time()
        result = SerializationResult(
            format_used=output_format,
            correlation_id=self.correlation_id,
        )

        try:
            if output_format == OutputFormat.XML_STRING:
                result.output = self.to_xml(root)
            elif output_format == OutputFormat.XML_PRETTY:
                result.output = self.to_xml(root, pretty=True)
            elif output_format == OutputFormat.DICTIONARY:
                result.output = self.to_dict(root)
            else:
                result.output = self.to_json(
                    root, pretty=output_format == OutputFormat.JSON_PRETTY
                )
            if isinstance(result.output, str):
                result.performance.output_size_bytes = len(result.output.encode("utf-8"))
        except (KeyError, TypeError, ValueError) as e:
            result.success = False
            result.output = ""
            result.diagnostics.append(self._diagnostic(
                DiagnosticSeverity.ERROR,
                f"Serialization failed: {e}",
                path=root.get_path(),
            ))
            self.logger.error(
                "Serialization failed",
                extra={"root_tag": root.tag, "format": output_format.value},
            )

        if self.config.report_duplicate_properties:
            result.diagnostics.extend(self._duplicate_property_diagnostics(root))

        self._finalize_result(result, root, start_time)
        return result

    def to_xml(self, root: XmlNode, pretty: bool = False) -> str:
        """Render a tree as an XML string.

        Raises:
            KeyError: If namespace declaration is on and a prefix is unknown
            ValueError: If text contains characters XML 1.0 cannot represent
        """
        xml_parts: List[str] = []

        if self.config.xml_declaration:
            declaration = f'<?xml version="1.0" encoding="{self.config.xml_encoding}"'
            if self.config.standalone is not None:
                standalone_value = "yes" if self.config.standalone else "no"
                declaration += f' standalone="{standalone_value}"'
            declaration += '?>'
            xml_parts.append(declaration)

        extra_attributes: Dict[str, AttributeValue] = {}
        if self.config.declare_namespaces:
            extra_attributes.update(namespace_declarations(collect_prefixes(root)))

        if not self.is_omitted(root):
            xml_parts.append(
                self._format_element_xml(root, 0, pretty, extra_attributes)
            )

        return '\n'.join(xml_parts)

    def _format_element_xml(
        self,
        element: XmlNode,
        indent_level: int,
        pretty: bool,
        extra_attributes: Optional[Dict[str, AttributeValue]] = None
    ) -> str:
        """Format single element as XML string."""
        indent = self.config.xml_indent * indent_level if pretty else ""

        tag_parts = [element.tag]
        attributes = dict(extra_attributes or {})
        attributes.update(element.attributes)
        for name, value in attributes.items():
            tag_parts.append(f'{name}="{escape_attribute(format_value(value))}"')

        children = [
            child for child in element.children
            if not (isinstance(child, XmlNode) and self.is_omitted(child))
        ]

        if not children:
            return f"{indent}<{' '.join(tag_parts)}/>"

        opening_tag = f"{indent}<{' '.join(tag_parts)}>"
        closing_tag = f"</{element.tag}>"

        # Mixed content is never re-indented; whitespace there is significant.
        mixed = any(not isinstance(child, XmlNode) for child in children)
        child_pretty = pretty and not mixed

        content_parts = []
        for child in children:
            if isinstance(child, XmlNode):
                content_parts.append(self._format_element_xml(
                    child, indent_level + 1 if child_pretty else 0, child_pretty
                ))
            else:
                content_parts.append(escape_text(format_value(child)))

        if child_pretty:
            children_xml = '\n'.join(content_parts)
            return f"{opening_tag}\n{children_xml}\n{indent}{closing_tag}"
        return f"{opening_tag}{''.join(content_parts)}{closing_tag}"

    def to_dict(self, root: XmlNode) -> Dict[str, Any]:
        """Render a tree as a tag-keyed dictionary.

        Repeated sibling tags collapse into a list in document order.
        """
        if self.is_omitted(root):
            return {}
        return {root.tag: self._format_element_dict(root)}

    def _format_element_dict(self, element: XmlNode) -> Dict[str, Any]:
        """Format element as simple dictionary."""
        element_dict: Dict[str, Any] = {}
        prefix = self.config.dict_attribute_prefix

        for name, value in element.attributes.items():
            element_dict[f"{prefix}{name}"] = format_value(value)

        text_parts = []
        for child in element.children:
            if not isinstance(child, XmlNode):
                text_parts.append(format_value(child))
                continue
            if self.is_omitted(child):
                continue

            child_dict = self._format_element_dict(child)

            # Handle multiple children with same tag
            if child.tag in element_dict:
                if not isinstance(element_dict[child.tag], list):
                    element_dict[child.tag] = [element_dict[child.tag]]
                element_dict[child.tag].append(child_dict)
            else:
                element_dict[child.tag] = child_dict

        if text_parts:
            element_dict[self.config.dict_text_key] = "".join(text_parts)

        return element_dict

    def to_json(self, root: XmlNode, pretty: bool = False) -> str:
        """Render a tree as JSON via its dictionary form."""
        indent = (self.config.json_indent or 2) if pretty else self.config.json_indent
        separators = None if indent is not None else (',', ':')
        return json.dumps(
            self.to_dict(root),
            indent=indent,
            separators=separators,
            ensure_ascii=self.config.json_ensure_ascii,
            sort_keys=self.config.json_sort_keys,
        )

    def is_omitted(self, element: XmlNode) -> bool:
        """True for empty ``ignore_if_empty`` components when omission is on."""
        if not self.config.omit_empty_components:
            return False
        if not getattr(element, "ignore_if_empty", False) or element.attributes:
            return False
        return all(
            isinstance(child, XmlNode) and self.is_omitted(child)
            for child in element.children
        )

    def _duplicate_property_diagnostics(self, root: XmlNode) -> List[DiagnosticEntry]:
        """Report singular properties set more than once in a ``*Pr`` node."""
        diagnostics = []
        for node in root.iter():
            if not node.local_name.endswith("Pr"):
                continue
            counts = Counter(child.tag for child in node.element_children)
            for tag, count in counts.items():
                if count > 1 and tag not in REPEATABLE_PROPERTY_TAGS:
                    diagnostics.append(self._diagnostic(
                        DiagnosticSeverity.INFO,
                        f"Property <{tag}> appears {count} times in <{node.tag}>; "
                        "the last occurrence takes effect",
                        path=node.get_path(),
                        details={"tag": tag, "count": count},
                    ))
        return diagnostics

    def _diagnostic(
        self,
        severity: DiagnosticSeverity,
        message: str,
        path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> DiagnosticEntry:
        return DiagnosticEntry(
            severity=severity,
            message=message,
            component="serializer",
            path=path,
            details=details,
            correlation_id=self.correlation_id,
        )

    def _finalize_result(
        self, result: SerializationResult, root: XmlNode, start_time: float
    ) -> None:
        """Calculate final serialization metrics."""
        written = [node for node in root.iter() if not self.is_omitted(node)]
        result.performance.elements_written = len(written)
        result.performance.attributes_written = sum(len(node.attributes) for node in written)
        result.performance.processing_time_ms = (time.time() - start_time) * 1000

        self.logger.debug(
            "Serialization finished",
            extra={
                "root_tag": root.tag,
                "format": result.format_used.value,
                "success": result.success,
                "elements_written": result.performance.elements_written,
                "diagnostics_count": len(result.diagnostics),
            }
        )
