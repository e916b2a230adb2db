# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `ArgumentRegistry`, the configuration surface of Argweave.

The registry owns every declared `Argument` in a single insertion-ordered map
keyed by long name. A second map keyed by short name points at the same
objects. Iteration order is registration order, which fixes the order of
positional filling, validation and help output.

Configuration is a fluent chain: `add_argument()` registers an argument and
makes it the target of the modifier calls that follow it.

Example:
    registry = ArgumentRegistry()
    (
        registry.add_int_argument("n", "count", description="How many")
        .set_default(3)
        .add_string_argument("files")
        .set_multi_value(1)
        .set_positional()
    )
"""
from __future__ import annotations

from typing import Any, Iterator

from argweave.exceptions import ArgumentNotFoundError, ConfigurationError
from argweave.logger import logger
from argweave.parser.arg_kind import ArgKind
from argweave.parser.argument import Argument
from argweave.parser.value_cell import ValueSlot

_FORBIDDEN_NAME_CHARS = ("=",)


class ArgumentRegistry:
    """
    Owns argument descriptors and the fluent configuration API.

    Features:
    - Registration under long and optional short names.
    - Fluent modifiers applied to the last added argument.
    - Type-checked defaults and external storage binding.
    - Optional dedicated help trigger.
    """

    def __init__(self) -> None:
        self._arguments: dict[str, Argument] = {}
        self._short_map: dict[str, Argument] = {}
        self._last: Argument | None = None
        self.help_short: str | None = None
        self.help_long: str | None = None
        self.help_description: str = ""

    def _resolve_kind(self, kind: ArgKind | str | type) -> ArgKind:
        if isinstance(kind, ArgKind):
            return kind
        try:
            if isinstance(kind, type):
                return ArgKind.from_type(kind)
            if isinstance(kind, str):
                return ArgKind(kind)
        except ValueError as error:
            raise ConfigurationError(str(error)) from error
        raise ConfigurationError(f"Unsupported argument kind: {kind!r}")

    def _split_names(self, names: tuple[str, ...]) -> tuple[str | None, str]:
        if len(names) == 1:
            short_name, long_name = None, names[0]
        elif len(names) == 2:
            short_name, long_name = names
        else:
            raise ConfigurationError(
                "Expected (long_name) or (short_name, long_name), "
                f"got {len(names)} names"
            )
        self._validate_long_name(long_name)
        if short_name is not None:
            self._validate_short_name(short_name)
        return short_name, long_name

    def _validate_long_name(self, long_name: Any) -> None:
        if not isinstance(long_name, str) or not long_name:
            raise ConfigurationError("Long name must be a non-empty string")
        if long_name.startswith("-"):
            raise ConfigurationError(
                f"Long name '{long_name}' must be given without leading dashes"
            )
        if any(char in long_name for char in _FORBIDDEN_NAME_CHARS) or any(
            char.isspace() for char in long_name
        ):
            raise ConfigurationError(
                f"Long name '{long_name}' must not contain '=' or whitespace"
            )
        if long_name in self._arguments:
            raise ConfigurationError(f"Argument '--{long_name}' is already defined")

    def _validate_short_name(self, short_name: Any) -> None:
        if not isinstance(short_name, str) or len(short_name) != 1:
            raise ConfigurationError(
                f"Short name {short_name!r} must be a single character"
            )
        if short_name in ("-", "=") or short_name.isspace():
            raise ConfigurationError(f"Short name {short_name!r} is not allowed")
        if short_name in self._short_map:
            existing = self._short_map[short_name]
            raise ConfigurationError(
                f"Short name '-{short_name}' is already used by "
                f"'--{existing.long_name}'"
            )

    def _require_last(self) -> Argument:
        if self._last is None:
            raise ConfigurationError("no argument configured")
        return self._last

    def add_argument(
        self,
        kind: ArgKind | str | type,
        *names: str,
        description: str = "",
    ) -> ArgumentRegistry:
        """
        Register a new argument and make it the target of following modifiers.

        Args:
            kind (ArgKind | str | type): `ArgKind`, a kind alias such as "int",
                or one of `str`, `int`, `bool`.
            *names (str): `long_name`, or `short_name, long_name`.
            description (str): Help text.

        Raises:
            ConfigurationError: On an unsupported kind, invalid names, or a
                name that is already registered.
        """
        arg_kind = self._resolve_kind(kind)
        short_name, long_name = self._split_names(names)
        argument = Argument(
            long_name, arg_kind, short_name=short_name, description=description
        )
        self._arguments[long_name] = argument
        if short_name is not None:
            self._short_map[short_name] = argument
        self._last = argument
        logger.debug("Registered %r", argument)
        return self

    def add_string_argument(
        self, *names: str, description: str = ""
    ) -> ArgumentRegistry:
        return self.add_argument(ArgKind.STRING, *names, description=description)

    def add_int_argument(self, *names: str, description: str = "") -> ArgumentRegistry:
        return self.add_argument(ArgKind.INT, *names, description=description)

    def add_flag(self, *names: str, description: str = "") -> ArgumentRegistry:
        return self.add_argument(ArgKind.BOOL, *names, description=description)

    def set_default(self, value: Any) -> ArgumentRegistry:
        """Apply a default to the last added argument."""
        self._require_last().set_default(value)
        return self

    def set_positional(self, value: bool = True) -> ArgumentRegistry:
        """Let bare tokens fill the last added argument."""
        self._require_last().positional = value
        return self

    def set_multi_value(self, min_values: int | None = None) -> ArgumentRegistry:
        """Make the last added argument keep every value it receives."""
        argument = self._require_last()
        if min_values is not None and (
            not isinstance(min_values, int) or isinstance(min_values, bool)
        ):
            raise ConfigurationError(
                f"min_values must be an int or None, got {type(min_values).__name__}"
            )
        argument.set_multi_value(min_values)
        return self

    def store_value(self, slot: ValueSlot) -> ArgumentRegistry:
        """Write the last added argument's single value through to `slot`."""
        self._require_last().bind_value(slot)
        return self

    def store_values(self, values: list[Any]) -> ArgumentRegistry:
        """Write the last added argument's values through to `values`."""
        self._require_last().bind_values(values)
        return self

    default = set_default
    positional = set_positional
    multi_value = set_multi_value

    def add_help(
        self, short_name: str, long_name: str, description: str = ""
    ) -> ArgumentRegistry:
        """
        Register the dedicated help trigger.

        The trigger is registered as a string argument so that it occupies
        its names like any other argument, but its value is never used.
        """
        if self.help_enabled:
            raise ConfigurationError(
                f"Help is already configured as '--{self.help_long}'"
            )
        self.add_argument(
            ArgKind.STRING, short_name, long_name, description=description
        )
        self.help_short = short_name
        self.help_long = long_name
        self.help_description = description
        return self

    @property
    def help_enabled(self) -> bool:
        return self.help_long is not None

    def is_help_argument(self, argument: Argument) -> bool:
        return self.help_enabled and argument.long_name == self.help_long

    @property
    def arguments(self) -> tuple[Argument, ...]:
        return tuple(self._arguments.values())

    def positional_arguments(self) -> list[Argument]:
        return [
            argument for argument in self._arguments.values() if argument.positional
        ]

    def find_long(self, long_name: str) -> Argument | None:
        return self._arguments.get(long_name)

    def find_short(self, short_name: str) -> Argument | None:
        return self._short_map.get(short_name)

    def get_argument(self, name: str) -> Argument:
        """
        Return the argument registered under a long name or a short name.

        Long names are looked up first, so a one-character long name shadows
        an identical short name.

        Raises:
            ArgumentNotFoundError: If no argument uses `name`.
        """
        argument = self._arguments.get(name)
        if argument is None and len(name) == 1:
            argument = self._short_map.get(name)
        if argument is None:
            raise ArgumentNotFoundError(name)
        return argument

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name in self._arguments or (len(name) == 1 and name in self._short_map)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._arguments.values())

    def __len__(self) -> int:
        return len(self._arguments)
