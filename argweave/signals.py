# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by the Argweave parser.

These signals interrupt token processing without being treated as
traditional exceptions. They inherit from `FlowSignal`, a subclass of
`BaseException`, so that they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: The help trigger was seen; stop parsing and report success.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Argweave.

    These are not errors. They are used to unwind the token loop.
    """


class HelpSignal(FlowSignal):
    """Raised when the help trigger is encountered during parsing."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
