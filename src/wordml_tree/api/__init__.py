"""Public writer API and library adapters."""

from .adapters import AdapterMetadata, ConversionResult, LxmlAdapter
from .writer import DocumentWriter, serialize, to_dict, to_json, write

__all__ = [
    "DocumentWriter",
    "serialize",
    "to_dict",
    "to_json",
    "write",
    "AdapterMetadata",
    "ConversionResult",
    "LxmlAdapter",
]
