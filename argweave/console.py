# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argweave output."""
from rich.console import Console
from rich.theme import Theme

ARGWEAVE_THEME = Theme(
    {
        "argweave.program": "bold",
        "argweave.description": "dim",
        "argweave.names": "cyan",
        "argweave.qualifier": "magenta",
        "argweave.error": "bold red",
        "argweave.success": "green",
    }
)

console = Console(theme=ARGWEAVE_THEME)
