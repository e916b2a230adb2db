"""
Argweave CLI Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgumentNotFoundError,
    ArgumentTypeError,
    ArgweaveError,
    ConfigurationError,
    MultiValueIndexError,
    UnknownArgumentError,
    ValueFormatError,
)
from .parser import ArgKind, ArgParser, Argument, ParseReport, ValueSlot
from .version import __version__

logger = logging.getLogger("argweave")


__all__ = [
    "ArgParser",
    "ArgKind",
    "Argument",
    "ParseReport",
    "ValueSlot",
    "ArgweaveError",
    "ConfigurationError",
    "UnknownArgumentError",
    "ValueFormatError",
    "ArgumentNotFoundError",
    "ArgumentTypeError",
    "MultiValueIndexError",
    "__version__",
]
