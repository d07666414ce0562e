"""Result objects and diagnostic types for tree serialization.

This module defines the diagnostics and metrics attached to serializer and
adapter results.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    DEBUG = auto()      # Debug-level information
    INFO = auto()       # Informational messages
    WARNING = auto()    # Suspicious but legal tree shapes
    ERROR = auto()      # Operation could not complete


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with context information."""

    severity: DiagnosticSeverity
    message: str
    component: str
    path: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.component:
            raise ValueError("Diagnostic component cannot be empty")


@dataclass
class PerformanceMetrics:
    """Performance metrics for serialization operations."""

    processing_time_ms: float = 0.0
    elements_written: int = 0
    attributes_written: int = 0
    output_size_bytes: int = 0

    @property
    def elements_per_second(self) -> float:
        """Calculate elements written per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.elements_written * 1000.0) / self.processing_time_ms

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary format."""
        return {
            "processing_time_ms": self.processing_time_ms,
            "elements_written": self.elements_written,
            "attributes_written": self.attributes_written,
            "output_size_bytes": self.output_size_bytes,
            "elements_per_second": self.elements_per_second,
        }


def filter_diagnostics(
    diagnostics: List[DiagnosticEntry],
    severity: DiagnosticSeverity
) -> List[DiagnosticEntry]:
    """Return the diagnostics of one severity, preserving order."""
    return [diag for diag in diagnostics if diag.severity == severity]
