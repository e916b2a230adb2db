# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders an `ArgumentRegistry` as help text.

`render_help()` returns plain text, one line per argument in registration
order, and is byte-identical across calls on an unmodified registry.
`print_help()` prints the same content through a Rich console with styling.

Format:
    <program name>
    <help description>          (only when the help trigger has one)

    -s, --long,  description [MultiValue, min args = N] [Positional] [default = v]
"""
from __future__ import annotations

from rich.console import Console
from rich.text import Text

from argweave.console import console as default_console
from argweave.parser.argument import Argument
from argweave.parser.registry import ArgumentRegistry


class HelpFormatter:
    """Formats the arguments of a registry for display."""

    def __init__(self, registry: ArgumentRegistry, program: str) -> None:
        self.registry = registry
        self.program = program

    def format_argument(self, argument: Argument) -> str:
        line = f"{argument.get_names_text()},  {argument.description}"
        qualifiers = argument.get_qualifiers()
        if qualifiers:
            line = f"{line} {' '.join(qualifiers)}"
        return line

    def render_help(self) -> str:
        lines = [self.program]
        if self.registry.help_description:
            lines.append(self.registry.help_description)
            lines.append("")
        lines.extend(self.format_argument(argument) for argument in self.registry)
        return "\n".join(lines) + "\n"

    def print_help(self, console: Console | None = None) -> None:
        console = console or default_console
        console.print(Text(self.program, style="argweave.program"))
        if self.registry.help_description:
            console.print(
                Text(self.registry.help_description, style="argweave.description")
            )
            console.print()
        for argument in self.registry:
            line = Text()
            line.append(argument.get_names_text(), style="argweave.names")
            line.append(f",  {argument.description}")
            for qualifier in argument.get_qualifiers():
                line.append(" ")
                line.append(qualifier, style="argweave.qualifier")
            console.print(line)
