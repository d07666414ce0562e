"""Tests for argument validation helpers."""

from enum import Enum

import pytest

from wordml_tree.shared.validation import coerce_enum, require_int, require_text


class _Shade(Enum):
    LIGHT = "light"
    DARK = "dark"


class TestValidationHelpers:
    """Test argument validation helpers."""

    def test_coerce_enum_accepts_member_and_value(self) -> None:
        """Test both members and their string values are accepted."""
        assert coerce_enum(_Shade, _Shade.DARK, "shade") is _Shade.DARK
        assert coerce_enum(_Shade, "light", "shade") is _Shade.LIGHT

    def test_coerce_enum_lists_allowed_values(self) -> None:
        """Test the error names the allowed values."""
        with pytest.raises(ValueError, match="Invalid shade 'grey'; expected one of: light, dark"):
            coerce_enum(_Shade, "grey", "shade")

    def test_require_int_bounds(self) -> None:
        """Test inclusive bounds."""
        assert require_int("level", 0, minimum=0, maximum=9) == 0
        assert require_int("level", 9, minimum=0, maximum=9) == 9

        with pytest.raises(ValueError, match="level must be >= 0, got -1"):
            require_int("level", -1, minimum=0)
        with pytest.raises(ValueError, match="level must be <= 9, got 10"):
            require_int("level", 10, maximum=9)

    @pytest.mark.parametrize("value", [True, 1.0, "1", None])
    def test_require_int_rejects_non_int(self, value) -> None:
        """Test bools, floats and strings are rejected."""
        with pytest.raises(TypeError, match="level must be an int"):
            require_int("level", value)

    def test_require_text(self) -> None:
        """Test blank strings are rejected."""
        assert require_text("name", "x") == "x"
        with pytest.raises(ValueError, match="name cannot be empty"):
            require_text("name", "   ")
