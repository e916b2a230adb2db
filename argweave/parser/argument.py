# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Argument`, the descriptor `ArgParser` keeps for each declared argument.

An `Argument` pairs metadata (names, description, kind, positional and
multi-value settings, default) with the `ValueCell` that stores what the
parser, a default, or a caller assigns to it.

Key Attributes:
- `long_name`: Unique, read-only registry key (`--name`)
- `short_name`: Optional single character (`-n`)
- `kind`: `ArgKind` deciding value type and text conversion
- `positional`: Filled from bare tokens in registration order
- `multi_value` / `min_values`: Keeps every value; enforces a floor count
- `default`: Value applied at configuration time
- `initialized`: True once any value has been stored

Arguments should be created through `ArgParser.add_argument()` and its typed
shortcuts rather than directly.
"""
from __future__ import annotations

from typing import Any

from argweave.exceptions import ConfigurationError, ValueFormatError
from argweave.parser.arg_kind import ArgKind
from argweave.parser.utils import coerce_value, format_value
from argweave.parser.value_cell import ValueCell, ValueSlot


class Argument:
    """
    Represents one declared command-line argument.

    Attributes:
        short_name (str | None): Single-character name, if any.
        description (str): Help text.
        kind (ArgKind): Element kind of the stored values.
        positional (bool): True if bare tokens may fill this argument.
        min_values (int | None): Minimum element count for multi-value
            arguments; None means no minimum is enforced.
        has_default (bool): True once `set_default()` was called.
        default (Any): The default value, when `has_default` is True.
        initialized (bool): True once a value has been stored.
        cell (ValueCell): Value storage.
    """

    def __init__(
        self,
        long_name: str,
        kind: ArgKind,
        short_name: str | None = None,
        description: str = "",
    ) -> None:
        self._long_name: str = long_name
        self.kind: ArgKind = kind
        self.short_name: str | None = short_name
        self.description: str = description
        self.positional: bool = False
        self.min_values: int | None = None
        self.has_default: bool = False
        self.default: Any = None
        self.initialized: bool = False
        self.cell: ValueCell = ValueCell(kind)

    @property
    def long_name(self) -> str:
        return self._long_name

    @property
    def multi_value(self) -> bool:
        return self.cell.multi_value

    def set_multi_value(self, min_values: int | None = None) -> None:
        self.cell.multi_value = True
        self.min_values = min_values

    def set_default(self, value: Any) -> None:
        """
        Apply a default value.

        The argument is marked initialized immediately. For a multi-value
        argument the default is stored `min_values` times (not at all when no
        minimum is set); otherwise it becomes the single value.

        Raises:
            ConfigurationError: If `value` does not match the argument's kind.
        """
        if not self.kind.accepts(value):
            raise ConfigurationError(
                f"Default {value!r} for '{self.long_name}' is not a valid "
                f"{self.kind} value"
            )
        self.has_default = True
        self.initialized = True
        self.default = value
        if self.multi_value:
            for _ in range(self.min_values or 0):
                self.cell.append(value)
        else:
            self.cell.set_single(value)

    def bind_value(self, slot: ValueSlot) -> None:
        """
        Route single-value writes to `slot`.

        Raises:
            ConfigurationError: If the slot's declared kind, or its current
                value, does not match this argument's kind.
        """
        if not isinstance(slot, ValueSlot):
            raise ConfigurationError(
                f"Expected a ValueSlot for '{self.long_name}', "
                f"got {type(slot).__name__}"
            )
        if slot.kind is not None and slot.kind is not self.kind:
            raise ConfigurationError(
                f"Cannot store {self.kind} argument '{self.long_name}' into a "
                f"{slot.kind} slot"
            )
        if slot.value is not None and not self.kind.accepts(slot.value):
            raise ConfigurationError(
                f"Cannot store {self.kind} argument '{self.long_name}' into a slot "
                f"holding {type(slot.value).__name__}"
            )
        self.cell.bind_value(slot)

    def bind_values(self, values: list[Any]) -> None:
        """
        Route multi-value writes to `values`.

        A list carries no element type, so only its current elements are
        checked; an empty list binds to any kind.

        Raises:
            ConfigurationError: If `values` is not a list, or holds an element
                of another kind.
        """
        if not isinstance(values, list):
            raise ConfigurationError(
                f"Expected a list for '{self.long_name}', got {type(values).__name__}"
            )
        if not all(self.kind.accepts(value) for value in values):
            raise ConfigurationError(
                f"Cannot store {self.kind} argument '{self.long_name}' into a list "
                "holding values of another type"
            )
        self.cell.bind_values(values)

    def add_value(self, value: Any) -> None:
        """Store an already-converted value and mark the argument initialized."""
        self.initialized = True
        self.cell.append(value)

    def parse_value(self, text: str) -> None:
        """
        Convert token text to this argument's kind and store it.

        Raises:
            ValueFormatError: If the text cannot be converted.
        """
        try:
            value = coerce_value(text, self.kind)
        except ValueError as error:
            raise ValueFormatError(
                self.long_name,
                text,
                f"Invalid value for '{self.long_name}': {error}",
            ) from error
        self.add_value(value)

    def get(self, index: int = 0) -> Any:
        return self.cell.get(index)

    def value_count(self) -> int:
        """Number of stored elements; 0 or 1 for single-value arguments."""
        if self.multi_value:
            return self.cell.count()
        return int(self.initialized)

    def has_enough_values(self) -> bool:
        if not self.multi_value or self.min_values is None:
            return True
        return self.value_count() >= self.min_values

    def get_names_text(self) -> str:
        """Get the `-s, --long` text used in help output."""
        short = f"-{self.short_name}, " if self.short_name else ""
        return f"{short}--{self.long_name}"

    def get_qualifiers(self) -> list[str]:
        """Get the bracketed qualifiers used in help output."""
        qualifiers = []
        if self.multi_value:
            if self.min_values is not None and self.min_values > 0:
                qualifiers.append(f"[MultiValue, min args = {self.min_values}]")
            else:
                qualifiers.append("[MultiValue]")
        if self.positional:
            qualifiers.append("[Positional]")
        if self.has_default:
            qualifiers.append(f"[default = {format_value(self.default)}]")
        return qualifiers

    def __repr__(self) -> str:
        return (
            f"Argument(long_name={self.long_name!r}, short_name={self.short_name!r}, "
            f"kind={self.kind}, positional={self.positional}, "
            f"multi_value={self.multi_value}, min_values={self.min_values}, "
            f"initialized={self.initialized})"
        )
