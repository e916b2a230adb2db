"""
Argweave CLI Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arg_kind import ArgKind
from .arg_parser import ArgParser
from .argument import Argument
from .help_formatter import HelpFormatter
from .parser_types import ParseReport
from .registry import ArgumentRegistry
from .value_cell import ValueCell, ValueSlot

__all__ = [
    "ArgKind",
    "ArgParser",
    "Argument",
    "ArgumentRegistry",
    "HelpFormatter",
    "ParseReport",
    "ValueCell",
    "ValueSlot",
]
