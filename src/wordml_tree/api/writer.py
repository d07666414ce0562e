"""Writer API with progressive disclosure for node trees.

Level 1 is a set of module functions that render a tree with default or
supplied settings. Level 2 is :class:`DocumentWriter`, a configured writer
that can be reused across many trees and keeps usage statistics.
"""

import time
from typing import Any, Dict, Optional

from wordml_tree.shared import (
    DiagnosticSeverity,
    OutputFormat,
    WriterConfig,
    configure_logging,
    get_logger,
)
from wordml_tree.tree.node import XmlNode
from wordml_tree.tree.serializer import SerializationResult, XmlSerializer

MS_PER_SECOND = 1000  # Milliseconds per second conversion


def serialize(
    node: XmlNode,
    config: Optional[WriterConfig] = None,
    pretty: bool = False
) -> str:
    """Render a tree as an XML string.

    Args:
        node: Root of the tree, usually a builder such as a paragraph
        config: Optional writer configuration; only its serialization
            section is used
        pretty: Indent element-only content

    Returns:
        The XML text

    Raises:
        KeyError: If namespace declaration is on and a prefix is unknown
        ValueError: If text contains characters XML 1.0 cannot represent

    Examples:
        >>> from wordml_tree import Paragraph
        >>> serialize(Paragraph.from_text("Hi"))
        '<w:p><w:r><w:t xml:space="preserve">Hi</w:t></w:r></w:p>'
    """
    config = config or WriterConfig()
    return XmlSerializer(config=config.serialization).to_xml(node, pretty=pretty)


def to_dict(node: XmlNode, config: Optional[WriterConfig] = None) -> Dict[str, Any]:
    """Render a tree as a tag-keyed dictionary."""
    config = config or WriterConfig()
    return XmlSerializer(config=config.serialization).to_dict(node)


def to_json(
    node: XmlNode,
    config: Optional[WriterConfig] = None,
    pretty: bool = False
) -> str:
    """Render a tree as JSON."""
    config = config or WriterConfig()
    return XmlSerializer(config=config.serialization).to_json(node, pretty=pretty)


def write(
    node: XmlNode,
    config: Optional[WriterConfig] = None,
    correlation_id: Optional[str] = None
) -> SerializationResult:
    """Serialize a tree in the configured output format.

    Unlike :func:`serialize`, failures are reported on the result rather
    than raised, together with diagnostics and timing.

    Args:
        node: Root of the tree
        config: Writer configuration (defaults to :meth:`WriterConfig` defaults)
        correlation_id: Optional correlation ID for request tracking

    Returns:
        SerializationResult with the output and diagnostics
    """
    return DocumentWriter(config=config, correlation_id=correlation_id).write(node)


class DocumentWriter:
    """Configured writer for repeated serialization.

    Attributes:
        config: Current writer configuration
        correlation_id: Correlation ID for request tracking

    Examples:
        >>> writer = DocumentWriter(WriterConfig.readable())
        >>> result = writer.write(paragraph)
        >>> result.success
        True
    """

    def __init__(
        self,
        config: Optional[WriterConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the writer.

        Args:
            config: Writer configuration (defaults to WriterConfig())
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or WriterConfig()
        self.correlation_id = (
            correlation_id if self.config.logging.enable_correlation_tracking else None
        )
        configure_logging(self.config.logging.logging_level)
        self.logger = get_logger(__name__, self.correlation_id, "document_writer")
        self._serializer = XmlSerializer(
            correlation_id=self.correlation_id,
            config=self.config.serialization,
        )

        self._write_count = 0
        self._successful_writes = 0
        self._total_processing_time = 0.0

    def write(
        self,
        node: XmlNode,
        output_format: Optional[OutputFormat] = None
    ) -> SerializationResult:
        """Serialize a tree.

        Args:
            node: Root of the tree
            output_format: Optional override of the configured output format

        Returns:
            SerializationResult with the output and diagnostics
        """
        start_time = time.time()
        effective_format = output_format or self.config.output_format

        result = self._serializer.serialize(node, effective_format)

        processing_time = (time.time() - start_time) * MS_PER_SECOND
        self._write_count += 1
        self._total_processing_time += processing_time
        if result.success:
            self._successful_writes += 1

        if self.config.logging.log_serialization_summary:
            self.logger.info(
                "Write completed",
                extra={
                    "root_tag": node.tag,
                    "format": effective_format.value,
                    "success": result.success,
                    "output_size_bytes": result.output_size_bytes,
                    "info_count": sum(
                        1 for diag in result.diagnostics
                        if diag.severity == DiagnosticSeverity.INFO
                    ),
                    "processing_time_ms": processing_time,
                }
            )

        return result

    def reconfigure(self, config: WriterConfig) -> None:
        """Replace the configuration used by later writes."""
        self.config = config
        configure_logging(config.logging.logging_level)
        self._serializer = XmlSerializer(
            correlation_id=self.correlation_id,
            config=config.serialization,
        )
        self.logger.info("Writer reconfigured", extra={"config_name": config.name})

    @property
    def statistics(self) -> Dict[str, Any]:
        """Usage statistics since creation or the last reset."""
        return {
            "total_writes": self._write_count,
            "successful_writes": self._successful_writes,
            "success_rate": (
                self._successful_writes / self._write_count
                if self._write_count > 0 else 0.0
            ),
            "total_processing_time_ms": self._total_processing_time,
            "correlation_id": self.correlation_id,
        }

    def reset_statistics(self) -> None:
        """Reset writer usage statistics."""
        self._write_count = 0
        self._successful_writes = 0
        self._total_processing_time = 0.0
