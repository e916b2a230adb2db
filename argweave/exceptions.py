# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argweave.

Configuration and retrieval errors propagate straight to the caller. Parse-time
errors (`UnknownArgumentError`, `ValueFormatError`) abort the whole parse.
Missing values and short multi-value counts are not exceptions at all; they
only make `ArgParser.parse()` return False.

Exception Hierarchy:
- ArgweaveError
    ├── ConfigurationError
    ├── UnknownArgumentError
    ├── ValueFormatError (ValueError)
    ├── ArgumentNotFoundError (KeyError)
    ├── ArgumentTypeError (TypeError)
    └── MultiValueIndexError (IndexError)
"""


class ArgweaveError(Exception):
    """Base exception for Argweave."""


class ConfigurationError(ArgweaveError):
    """Raised when the configuration API is misused."""


class UnknownArgumentError(ArgweaveError):
    """Raised when a token names an argument that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown argument: {name}")


class ValueFormatError(ArgweaveError, ValueError):
    """Raised when a token cannot be converted to the argument's kind."""

    def __init__(self, argument: str, value: str, message: str = ""):
        self.argument = argument
        self.value = value
        super().__init__(
            message or f"Invalid value {value!r} for argument '{argument}'"
        )


class ArgumentNotFoundError(ArgweaveError, KeyError):
    """Raised when a value is requested for an unregistered name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Argument not found: {name}")

    def __str__(self) -> str:
        return str(self.args[0])


class ArgumentTypeError(ArgweaveError, TypeError):
    """Raised when a value is requested with the wrong kind."""


class MultiValueIndexError(ArgweaveError, IndexError):
    """Raised when indexing past the end of a multi-value argument."""
