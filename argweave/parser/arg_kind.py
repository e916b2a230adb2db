# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgKind`, the closed set of value kinds an argument can hold.

The kind is chosen once, when an argument is registered, and decides the
Python type of its stored values, the zero value returned before anything
is stored, and how raw token text is converted.

Supports alias coercion for config-friendly values.

Example:
    ArgKind("int")    → ArgKind.INT
    ArgKind("flag")   → ArgKind.BOOL
    ArgKind.from_type(str) → ArgKind.STRING
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ArgKind(Enum):
    """
    Element kind of an argument.

    Members:
        STRING: Any text, stored verbatim.
        INT: Decimal integer text.
        BOOL: Presence flag; "true" and "1" are true, anything else false.

    Aliases:
        - "str" → "string"
        - "integer" → "int"
        - "flag", "boolean" → "bool"
    """

    STRING = "string"
    INT = "int"
    BOOL = "bool"

    @classmethod
    def choices(cls) -> list[ArgKind]:
        """Return a list of all argument kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "integer": "int",
            "flag": "bool",
            "boolean": "bool",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @classmethod
    def from_type(cls, python_type: type) -> ArgKind:
        """Map `str`, `int` or `bool` to the matching kind."""
        for member in cls:
            if member.python_type is python_type:
                return member
        raise ValueError(f"Unsupported argument type: {python_type!r}")

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]

    @property
    def zero_value(self) -> Any:
        return self.python_type()

    def accepts(self, value: Any) -> bool:
        """Return True if `value` is a valid stored value for this kind."""
        if self is ArgKind.INT:
            return isinstance(value, int) and not isinstance(value, bool)
        return isinstance(value, self.python_type)

    def __str__(self) -> str:
        return self.value


_PYTHON_TYPES: dict[ArgKind, type] = {
    ArgKind.STRING: str,
    ArgKind.INT: int,
    ArgKind.BOOL: bool,
}
