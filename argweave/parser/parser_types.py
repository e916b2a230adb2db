# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result models for `ArgParser.parse()`.

`parse()` itself only returns a bool. The `ParseReport` kept on the parser as
`last_report` records why a parse was not valid: which multi-value arguments
fell short of their minimum, which arguments never received a value, and
which bare tokens had nowhere to go.
"""
from dataclasses import dataclass, field


@dataclass
class ParseReport:
    """Outcome of the most recent parse."""

    help_requested: bool = False
    insufficient: list[str] = field(default_factory=list)
    uninitialized: list[str] = field(default_factory=list)
    unused_tokens: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        if self.help_requested:
            return True
        return not self.insufficient and not self.uninitialized

    def describe(self) -> str:
        """Return a one-line summary of the validation failures."""
        problems = []
        if self.insufficient:
            problems.append(f"too few values for: {', '.join(self.insufficient)}")
        if self.uninitialized:
            problems.append(f"missing values for: {', '.join(self.uninitialized)}")
        return "; ".join(problems)
