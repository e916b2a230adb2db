# Argweave CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for declarative Argweave parser definitions.

A definition names the program, an optional help trigger and a list of
arguments:

    name: deploy
    help:
      short: h
      long: help
      description: Deploy a service
    arguments:
      - long: service
        kind: string
        positional: true
      - short: p
        long: port
        kind: int
        default: 8080
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from argweave.logger import logger
from argweave.parser.arg_kind import ArgKind
from argweave.parser.arg_parser import ArgParser


class RawArgument(BaseModel):
    """Raw argument model for Argweave configuration."""

    long: str
    short: str | None = None
    kind: ArgKind = ArgKind.STRING
    description: str = ""
    positional: bool = False
    multi_value: bool = False
    min_values: int | None = None
    default: Any = None

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgKind:
        if isinstance(value, ArgKind):
            return value
        if not isinstance(value, str):
            raise ValueError(f"kind must be a string, got {type(value).__name__}")
        return ArgKind(value)

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError(f"short must be a single character, got {value!r}")
        return value

    @model_validator(mode="after")
    def validate_default(self) -> RawArgument:
        if self.default is not None and not self.kind.accepts(self.default):
            raise ValueError(
                f"default {self.default!r} for '{self.long}' is not a valid "
                f"{self.kind} value"
            )
        if self.min_values is not None and not self.multi_value:
            raise ValueError(f"min_values for '{self.long}' requires multi_value")
        return self


class RawHelp(BaseModel):
    """Help trigger model for Argweave configuration."""

    short: str = "h"
    long: str = "help"
    description: str = ""


class ParserConfig(BaseModel):
    """Argweave parser configuration model."""

    name: str = "argweave"
    help: RawHelp | None = None
    arguments: list[RawArgument] = Field(default_factory=list)

    def to_parser(self) -> ArgParser:
        parser = ArgParser(self.name)
        if self.help:
            parser.add_help(self.help.short, self.help.long, self.help.description)
        for raw in self.arguments:
            names = (raw.short, raw.long) if raw.short else (raw.long,)
            parser.add_argument(raw.kind, *names, description=raw.description)
            if raw.multi_value:
                parser.set_multi_value(raw.min_values)
            if raw.positional:
                parser.set_positional()
            if raw.default is not None:
                parser.set_default(raw.default)
        return parser


def loader(file_path: Path | str) -> ArgParser:
    """
    Load an Argweave parser definition from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the definition file.

    Returns:
        ArgParser: A configured parser.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported, the file does not parse, or
            the content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            try:
                raw_config = yaml.safe_load(config_file)
            except yaml.YAMLError as error:
                raise ValueError(f"Invalid YAML in {path}: {error}") from error
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with a list of arguments.\n"
            "Example:\n"
            "name: 'deploy'\n"
            "arguments:\n"
            "  - long: 'service'\n"
            "    kind: 'string'\n"
            "    positional: true"
        )

    logger.debug("Loaded parser definition from %s", path)
    return ParserConfig.model_validate(raw_config).to_parser()
