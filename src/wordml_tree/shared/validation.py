"""Argument validation helpers shared by leaf node constructors."""

from enum import Enum
from typing import Optional, Type, TypeVar, Union

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: Type[E], value: Union[E, str], name: str) -> E:
    """Return value as a member of enum_cls, accepting the member's string value.

    Raises:
        ValueError: If value names no member of enum_cls
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(member.value) for member in enum_cls)
        raise ValueError(f"Invalid {name} {value!r}; expected one of: {allowed}") from None


def require_int(
    name: str,
    value: object,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None
) -> int:
    """Validate that value is an int within the inclusive bounds.

    Raises:
        TypeError: If value is not an int (bool is rejected)
        ValueError: If value falls outside the bounds
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise ValueError(f"{name} must be <= {maximum}, got {value}")
    return value


def require_text(name: str, value: object) -> str:
    """Validate that value is a string with at least one non-space character."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} cannot be empty")
    return value
