"""Runs: stretches of paragraph content sharing character formatting."""

from .run import (
    Break,
    BreakType,
    FieldChar,
    FieldCharType,
    InstructionText,
    PageBreak,
    Run,
    RunFonts,
    RunProperties,
    SequentialIdentifier,
    Tab,
    Text,
    TextRun,
    Underline,
    UnderlineType,
    VerticalAlignType,
    validate_color,
)

__all__ = [
    "Break",
    "BreakType",
    "FieldChar",
    "FieldCharType",
    "InstructionText",
    "PageBreak",
    "Run",
    "RunFonts",
    "RunProperties",
    "SequentialIdentifier",
    "Tab",
    "Text",
    "TextRun",
    "Underline",
    "UnderlineType",
    "VerticalAlignType",
    "validate_color",
]
