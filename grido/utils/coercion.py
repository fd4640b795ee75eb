"""
Type coercion helpers for settings and request parameters.
"""

from typing import Any


def coerce_int(value: Any, default: int = 0) -> int:
    """
    Coerce a value to an integer.

    Args:
        value: The value to coerce.
        default: Default value if coercion fails.

    Returns:
        The coerced integer or default.

    Examples:
        >>> coerce_int("204")
        204
        >>> coerce_int(None, default=10)
        10
    """
    if value is None:
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def coerce_bool(value: Any, default: bool = False) -> bool:
    """
    Coerce a value to a boolean.

    Examples:
        >>> coerce_bool("off")
        False
        >>> coerce_bool(None, default=True)
        True
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes", "on")
    try:
        return bool(value)
    except (ValueError, TypeError):
        return default

