"""Shared utilities for WordprocessingML tree generation.

This module provides configuration objects, result types, logging and unit
helpers used across the node, builder and serializer layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    LoggingConfig,
    OutputFormat,
    SerializationConfig,
    WriterConfig,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)
from .result import (
    DiagnosticEntry,
    DiagnosticSeverity,
    PerformanceMetrics,
    filter_diagnostics,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "LoggingConfig",
    "OutputFormat",
    "SerializationConfig",
    "WriterConfig",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "DiagnosticEntry",
    "DiagnosticSeverity",
    "PerformanceMetrics",
    "filter_diagnostics",
]
