"""WordprocessingML tree builder.

Builds in-memory ``w:`` element trees through chainable builders and
serializes them deterministically.

Progressive API Disclosure:
- Level 1: Simple functions - serialize(), to_dict(), to_json(), write()
- Level 2: Configured writer - DocumentWriter class
- Builders: Paragraph, runs, hyperlinks, bookmarks and leaf properties
"""

__version__ = "0.1.0"
__author__ = "wordml-tree contributors"

# Progressive API disclosure - Level 1: Simple functions
# Progressive API disclosure - Level 2: Configured writer
from .api import DocumentWriter, LxmlAdapter, serialize, to_dict, to_json, write

# Builders
from .paragraph import (
    AlignmentType,
    Bookmark,
    HeadingLevel,
    Hyperlink,
    IndentProperties,
    LeaderType,
    Paragraph,
    ParagraphOptions,
    SpacingProperties,
)
from .run import Run, TextRun

# Configuration classes for advanced usage
from .shared.config import OutputFormat, SerializationConfig, WriterConfig

# Core tree and result objects
from .tree import SerializationResult, XmlComponent, XmlNode, XmlSerializer

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple functions
    "serialize",
    "to_dict",
    "to_json",
    "write",

    # Level 2: Configured writer and adapters
    "DocumentWriter",
    "LxmlAdapter",

    # Builders
    "AlignmentType",
    "Bookmark",
    "HeadingLevel",
    "Hyperlink",
    "IndentProperties",
    "LeaderType",
    "Paragraph",
    "ParagraphOptions",
    "SpacingProperties",
    "Run",
    "TextRun",

    # Configuration
    "OutputFormat",
    "SerializationConfig",
    "WriterConfig",

    # Tree and results
    "SerializationResult",
    "XmlComponent",
    "XmlNode",
    "XmlSerializer",
]
