"""
Argweave CLI Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Checks a token list against a declarative parser definition:

    argweave deploy.yaml web -vp 9000
"""
from __future__ import annotations

import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from argweave.config import loader
from argweave.console import console
from argweave.exceptions import ArgweaveError
from argweave.parser.arg_parser import ArgParser
from argweave.parser.utils import format_value
from argweave.utils import setup_logging
from argweave.version import __version__

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def get_root_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="argweave",
        description="Parse tokens against an Argweave parser definition.",
        epilog="Tokens after the config path are passed to the loaded parser as-is.",
    )
    parser.add_argument("config", help="Path to a YAML or TOML parser definition.")
    parser.add_argument("tokens", nargs=REMAINDER, help="Tokens to parse.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Console log format (defaults to ARGWEAVE_LOG_MODE or auto-detect).",
    )
    parser.add_argument(
        "--version", action="version", version=f"argweave {__version__}"
    )
    return parser


def render_values(parser: ArgParser) -> Table:
    table = Table(title=parser.name, show_lines=False)
    table.add_column("Argument", style="argweave.names")
    table.add_column("Kind")
    table.add_column("Value")
    for argument in parser:
        if parser.is_help_argument(argument):
            continue
        if argument.multi_value:
            value = ", ".join(format_value(item) for item in argument.cell.values())
            value = f"[{value}]"
        else:
            value = format_value(argument.get())
        table.add_row(argument.get_names_text(), str(argument.kind), value)
    return table


def run(args: Namespace) -> int:
    try:
        parser = loader(args.config)
        valid = parser.parse(args.tokens)
    except (ArgweaveError, ValueError, FileNotFoundError) as error:
        console.print(
            f"[argweave.error]error:[/] {escape(str(error))}", highlight=False
        )
        return EXIT_ERROR

    if parser.is_help_requested():
        parser.print_help(console)
        return EXIT_OK

    console.print(render_values(parser))
    if not valid:
        console.print(
            f"[argweave.error]invalid:[/] {escape(parser.last_report.describe())}",
            highlight=False,
        )
        return EXIT_INVALID
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        log_filename=None,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
