"""Unit conversion helpers for WordprocessingML measurements."""

EMU_PER_INCH = 914400
EMU_PER_PIXEL = 9525
TWIPS_PER_POINT = 20
TWIPS_PER_INCH = 1440
POINTS_PER_INCH = 72


def pixels_to_emu(value: float) -> int:
    """Convert 96-dpi pixels to English Metric Units."""
    return int(round(value * EMU_PER_PIXEL))


def emu_to_points(value: int) -> float:
    """Convert English Metric Units to typographic points."""
    return (value / EMU_PER_INCH) * POINTS_PER_INCH


def points_to_twips(value: float) -> int:
    """Convert points to twips (1/20th of a point)."""
    return int(round(value * TWIPS_PER_POINT))


def inches_to_twips(value: float) -> int:
    """Convert inches to twips."""
    return int(round(value * TWIPS_PER_INCH))


def points_to_half_points(value: float) -> int:
    """Convert a font size in points to the half-point unit used by w:sz."""
    return int(round(value * 2))
