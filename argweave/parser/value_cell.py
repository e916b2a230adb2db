# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Per-argument value storage.

A `ValueCell` holds the value(s) of one argument. By default it owns its
storage: a single value and a list for multi-value arguments. Callers may bind
their own storage instead, a `ValueSlot` for single values or a plain `list`
for multi-value arguments. Once bound, all writes and reads go through the
caller's object; values stored before binding are kept but no longer visible.

Reading a cell that never received a value returns the kind's zero value
("", 0 or False). Whether an argument has been given a value is tracked by the
owning `Argument`, not by the cell.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from argweave.exceptions import MultiValueIndexError
from argweave.parser.arg_kind import ArgKind


@dataclass
class ValueSlot:
    """
    Caller-owned holder for a single argument value.

    `kind` declares what the slot may hold. A slot without a kind is checked
    against its current value only, so an empty, untyped slot binds to any
    argument.

    Example:
        port = ValueSlot(0)
        parser.add_int_argument("port").store_value(port)
        parser.parse(["--port=8080"])
        port.value  # 8080
    """

    value: Any = None
    kind: ArgKind | None = None


class ValueCell:
    """Typed storage for the value or values of one argument."""

    def __init__(self, kind: ArgKind) -> None:
        self.kind: ArgKind = kind
        self.multi_value: bool = False
        self._value: Any = kind.zero_value
        self._values: list[Any] = []
        self._slot: ValueSlot | None = None
        self._external_values: list[Any] | None = None

    @property
    def sequence(self) -> list[Any]:
        """The list multi-value writes currently go to."""
        if self._external_values is not None:
            return self._external_values
        return self._values

    @property
    def has_external_value(self) -> bool:
        return self._slot is not None

    @property
    def has_external_values(self) -> bool:
        return self._external_values is not None

    def bind_value(self, slot: ValueSlot) -> None:
        self._slot = slot

    def bind_values(self, values: list[Any]) -> None:
        self._external_values = values

    def set_single(self, value: Any) -> None:
        self._value = value
        if self._slot is not None:
            self._slot.value = value

    def append(self, value: Any) -> None:
        if self.multi_value:
            self.sequence.append(value)
        else:
            self.set_single(value)

    def get(self, index: int = 0) -> Any:
        """
        Return the stored value.

        For a multi-value cell with at least one stored element, `index`
        selects the element. Otherwise the single value is returned.

        Raises:
            MultiValueIndexError: If `index` is outside a populated sequence.
        """
        sequence = self.sequence
        if self.multi_value and sequence:
            if 0 <= index < len(sequence):
                return sequence[index]
            raise MultiValueIndexError(
                f"Index {index} out of range for multi-value argument "
                f"with {len(sequence)} value(s)"
            )
        if self._slot is not None:
            if self._slot.value is None:
                return self.kind.zero_value
            return self._slot.value
        return self._value

    def values(self) -> list[Any]:
        """Return a copy of the stored sequence."""
        return list(self.sequence)

    def count(self) -> int:
        return len(self.sequence)

    def __repr__(self) -> str:
        if self.multi_value:
            return f"ValueCell(kind={self.kind}, values={self.sequence!r})"
        return f"ValueCell(kind={self.kind}, value={self.get()!r})"
