"""Numbering references for list paragraphs."""

from .num import MIN_NUM_ID, Num

__all__ = [
    "MIN_NUM_ID",
    "Num",
]
