# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgParser`, the parsing engine of Argweave.

`ArgParser` extends the fluent `ArgumentRegistry` configuration surface with a
single-pass tokenizer, typed value retrieval, validation and help rendering.

Token grammar (left to right, one pass):
- `--name`, `--name=value`: long form. Flags store True; other kinds take
  the `=value` or the next bare token.
- `-abc`, `-c value`, `-c=value`: a cluster of short names. Flags store
  True; a non-flag last in the cluster takes the next whole token; a
  non-flag followed by `=` takes the rest of the token.
- Anything else is a bare token: the pending long-form value if one is
  awaited, else the next positional argument in registration order. A
  multi-value positional keeps absorbing bare tokens.

Failure modes:
- Unknown names and malformed integers raise immediately and abort the parse.
- Missing values and too few multi-value elements only make `parse()` return
  False; `last_report` says which arguments failed.
- The help trigger stops parsing at once and `parse()` returns True without
  validating anything.

Example Usage:
    parser = ArgParser("deploy")
    parser.add_help("h", "help", "Deploy a service")
    parser.add_string_argument("service").set_positional()
    parser.add_int_argument("p", "port").set_default(8080)
    parser.add_flag("v", "verbose")

    if parser.parse(["web", "-vp", "9000"]):
        parser.get_string("service")  # "web"
        parser.get_int("p")           # 9000
"""
from __future__ import annotations

import sys
from typing import Any, Sequence

from rich.console import Console

from argweave.console import console as default_console
from argweave.exceptions import ArgumentTypeError, UnknownArgumentError
from argweave.logger import logger
from argweave.parser.arg_kind import ArgKind
from argweave.parser.argument import Argument
from argweave.parser.help_formatter import HelpFormatter
from argweave.parser.parser_types import ParseReport
from argweave.parser.registry import ArgumentRegistry
from argweave.signals import HelpSignal
from argweave.utils import get_program_invocation


class ArgParser(ArgumentRegistry):
    """
    Declarative command-line argument parser.

    Features:
    - String, integer and flag arguments with long and short names.
    - Positional and multi-value arguments with minimum counts.
    - Defaults and caller-owned storage.
    - POSIX-style short flag clusters (`-abc`).
    - Soft validation with a per-parse report.
    - Plain and Rich help rendering.

    Repeated calls to `parse()` reuse the same storage: single values are
    overwritten, multi-value sequences keep growing.
    """

    def __init__(self, name: str | None = None, console: Console | None = None) -> None:
        super().__init__()
        self.name: str = name or get_program_invocation()
        self.console: Console = console or default_console
        self.last_report: ParseReport = ParseReport()
        self._help_requested: bool = False

    def _is_help_name(self, name: str, short: bool = False) -> bool:
        if not self.help_enabled:
            return False
        return name == (self.help_short if short else self.help_long)

    def _handle_long(self, token: str) -> Argument | None:
        """Handle a `--name[=value]` token; return the argument awaiting a value."""
        name, has_value, value = token[2:].partition("=")
        if self._is_help_name(name):
            raise HelpSignal()
        argument = self.find_long(name)
        if argument is None:
            raise UnknownArgumentError(f"--{name}")
        if has_value:
            argument.parse_value(value)
            return None
        if argument.kind is ArgKind.BOOL:
            argument.add_value(True)
            return None
        return argument

    def _handle_short_cluster(self, tokens: list[str], index: int) -> int:
        """Handle a `-abc` token; return the index of the last consumed token."""
        token = tokens[index]
        position = 1
        while position < len(token):
            char = token[position]
            if self._is_help_name(char, short=True):
                raise HelpSignal()
            argument = self.find_short(char)
            if argument is None:
                raise UnknownArgumentError(f"-{char}")
            if argument.kind is ArgKind.BOOL:
                argument.add_value(True)
            elif position == len(token) - 1:
                if index + 1 < len(tokens):
                    index += 1
                    argument.parse_value(tokens[index])
                else:
                    logger.debug("No value left for '-%s'", char)
            elif token[position + 1] == "=":
                argument.parse_value(token[position + 2 :])
                break
            position += 1
        return index

    def parse(self, tokens: Sequence[str] | None = None) -> bool:
        """
        Parse a list of tokens into the registered arguments.

        Args:
            tokens (Sequence[str] | None): Raw tokens, without the program name.

        Returns:
            bool: True if every argument is valid or help was requested.

        Raises:
            UnknownArgumentError: If a token names an unregistered argument.
            ValueFormatError: If a value cannot be converted to its kind.
        """
        token_list = list(tokens) if tokens is not None else []
        report = ParseReport()
        self.last_report = report
        self._help_requested = False
        logger.debug("Parsing %d token(s): %s", len(token_list), token_list)

        positional_args = self.positional_arguments()
        positional_index = 0
        awaiting: Argument | None = None

        index = 0
        try:
            while index < len(token_list):
                token = token_list[index]
                if token.startswith("--"):
                    awaiting = self._handle_long(token)
                elif token.startswith("-") and len(token) > 1:
                    index = self._handle_short_cluster(token_list, index)
                    awaiting = None
                elif awaiting is not None:
                    awaiting.parse_value(token)
                    awaiting = None
                elif positional_index < len(positional_args):
                    argument = positional_args[positional_index]
                    argument.parse_value(token)
                    if not argument.multi_value:
                        positional_index += 1
                else:
                    logger.warning("Ignoring unexpected token %r", token)
                    report.unused_tokens.append(token)
                index += 1
        except HelpSignal:
            logger.debug("Help requested at token %d", index)
            self._help_requested = True
            report.help_requested = True
            return True

        return self._validate(report)

    def parse_argv(self, argv: Sequence[str] | None = None) -> bool:
        """Parse a platform-style argv; `argv[0]` is the program name and is skipped."""
        if argv is None:
            argv = sys.argv
        return self.parse(list(argv)[1:])

    def _validate(self, report: ParseReport) -> bool:
        for argument in self:
            if not argument.has_enough_values():
                report.insufficient.append(argument.long_name)

        for argument in self:
            if argument.kind is ArgKind.BOOL or self.is_help_argument(argument):
                continue
            if not argument.initialized:
                report.uninitialized.append(argument.long_name)

        if not report.ok:
            logger.info("Validation failed: %s", report.describe())
        return report.ok

    def check_multi_values(self) -> bool:
        """Return True if every multi-value argument has its minimum count."""
        return all(argument.has_enough_values() for argument in self)

    def check_values(self) -> bool:
        """Return True if every non-flag, non-help argument holds a value."""
        return all(
            argument.initialized
            for argument in self
            if argument.kind is not ArgKind.BOOL and not self.is_help_argument(argument)
        )

    def _get_typed_argument(
        self, name: str, kind: ArgKind | str | type | None
    ) -> Argument:
        argument = self.get_argument(name)
        if kind is not None:
            expected = self._resolve_kind(kind)
            if argument.kind is not expected:
                raise ArgumentTypeError(
                    f"Argument '{argument.long_name}' holds {argument.kind} values, "
                    f"not {expected}"
                )
        return argument

    def get_value(
        self, name: str, kind: ArgKind | str | type | None = None, index: int = 0
    ) -> Any:
        """
        Return the value stored for `name`.

        Args:
            name (str): Long name, or a single-character short name.
            kind (ArgKind | str | type | None): Expected kind, checked if given.
            index (int): Element index for multi-value arguments.

        Raises:
            ArgumentNotFoundError: If `name` is not registered.
            ArgumentTypeError: If `kind` does not match the argument.
            MultiValueIndexError: If `index` is out of range.
        """
        return self._get_typed_argument(name, kind).get(index)

    def get_int(self, name: str, index: int = 0) -> int:
        return self.get_value(name, ArgKind.INT, index)

    def get_string(self, name: str, index: int = 0) -> str:
        return self.get_value(name, ArgKind.STRING, index)

    def get_flag(self, name: str, index: int = 0) -> bool:
        return self.get_value(name, ArgKind.BOOL, index)

    def get_values(
        self, name: str, kind: ArgKind | str | type | None = None
    ) -> list[Any]:
        """
        Return a copy of every value stored for an argument.

        A single-value argument yields a one-element list once it holds a
        value and an empty list before that.
        """
        argument = self._get_typed_argument(name, kind)
        if argument.multi_value:
            return argument.cell.values()
        return [argument.get()] if argument.initialized else []

    def is_initialized(self, name: str) -> bool:
        return self.get_argument(name).initialized

    def is_help_requested(self) -> bool:
        """Return True if the last parse stopped on the help trigger."""
        return self._help_requested

    def render_help(self) -> str:
        return HelpFormatter(self, self.name).render_help()

    def print_help(self, console: Console | None = None) -> None:
        HelpFormatter(self, self.name).print_help(console or self.console)

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        positional = sum(argument.positional for argument in self)
        multi_value = sum(argument.multi_value for argument in self)
        return (
            f"ArgParser(name={self.name!r}, args={len(self)}, "
            f"short={len(self._short_map)}, positional={positional}, "
            f"multi_value={multi_value})"
        )

    def __repr__(self) -> str:
        return str(self)
