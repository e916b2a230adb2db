# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion utilities for Argweave argument parsing.

Functions:
- coerce_int: Convert decimal integer text to an int.
- coerce_bool: Convert flag text to a bool ("true"/"1" only).
- coerce_value: Convert token text to the Python value for an `ArgKind`.
- format_value: Render a stored value the way help text shows it.
"""
import re
from typing import Any

from argweave.parser.arg_kind import ArgKind

_INT_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


def coerce_int(value: str) -> int:
    """
    Convert decimal integer text to an int.

    Surrounding whitespace and a leading sign are allowed. Digit separators,
    other bases and trailing text are not.

    Raises:
        ValueError: If `value` is not decimal integer text.
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not an integer")
    return int(value)


def coerce_bool(value: str) -> bool:
    """Exactly "true" or "1" is True; everything else is False."""
    return value in ("true", "1")


def coerce_value(value: str, kind: ArgKind) -> Any:
    """
    Convert token text to the stored value for `kind`.

    Args:
        value (str): Raw token text.
        kind (ArgKind): Target kind.

    Returns:
        Any: The converted value.

    Raises:
        ValueError: If an INT token is not integer text.
    """
    if kind is ArgKind.INT:
        return coerce_int(value)
    if kind is ArgKind.BOOL:
        return coerce_bool(value)
    return value


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
