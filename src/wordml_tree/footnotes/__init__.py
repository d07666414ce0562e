"""Footnote references placed inside paragraphs."""

from .reference_run import (
    FOOTNOTE_REFERENCE_STYLE,
    MIN_FOOTNOTE_ID,
    FootnoteReference,
    FootnoteReferenceRun,
)

__all__ = [
    "FOOTNOTE_REFERENCE_STYLE",
    "MIN_FOOTNOTE_ID",
    "FootnoteReference",
    "FootnoteReferenceRun",
]
