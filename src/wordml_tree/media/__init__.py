"""Inline media placed inside paragraphs."""

from .image import PICTURE_URI, Image, PictureRun, build_drawing

__all__ = [
    "PICTURE_URI",
    "Image",
    "PictureRun",
    "build_drawing",
]
