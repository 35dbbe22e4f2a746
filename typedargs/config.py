# typedargs — typed command-line argument engine — MIT Licensed
"""config.py
Declarative parser definitions loaded from YAML or TOML files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from typedargs.logger import logger
from typedargs.parser import ArgumentKind, ArgumentParser

Scalar = Union[bool, int, float, str]


class RawArgument(BaseModel):
    """Raw argument model for a typedargs configuration file."""

    aliases: list[str]
    help: str = ""
    kind: ArgumentKind = ArgumentKind.STR
    default: Scalar | list[Scalar] | None = None
    required: bool = False
    metavar: str = ""
    choices: list[Scalar] | None = None
    nargs: int | str | None = None

    @field_validator("aliases", mode="before")
    @classmethod
    def validate_aliases(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgumentKind:
        return ArgumentKind.from_type(value)


class ParserConfig(BaseModel):
    """typedargs parser configuration model."""

    prog: str = ""
    description: str = ""
    epilog: str = ""
    arguments: list[RawArgument] = Field(default_factory=list)

    def to_parser(self) -> ArgumentParser:
        parser = ArgumentParser(
            prog=self.prog,
            description=self.description,
            epilog=self.epilog,
        )
        for raw_argument in self.arguments:
            parser.add_argument(
                *raw_argument.aliases,
                help=raw_argument.help,
                kind=raw_argument.kind,
                default=raw_argument.default,
                required=raw_argument.required,
                metavar=raw_argument.metavar,
                choices=raw_argument.choices,
                nargs=raw_argument.nargs,
            )
        return parser


def loader(file_path: Path | str) -> ArgumentParser:
    """
    Load an ArgumentParser definition from a YAML or TOML file.

    The file should contain a dictionary with a list of arguments.

    Each argument should be defined as a dictionary with at least:
    - aliases: a list of aliases (or a single positional name)

    and optionally `help`, `kind`, `default`, `required`, `metavar`,
    `choices` and `nargs`, with the same meaning as in `add_argument()`.

    Args:
        file_path (str): Path to the config file (YAML or TOML).

    Returns:
        ArgumentParser: A parser with all configured arguments registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or its content is invalid.
        InvalidSpecification, DuplicateAlias: If an argument cannot be registered.
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
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of arguments.\n"
            "Example:\n"
            "prog: 'example'\n"
            "arguments:\n"
            "  - aliases: ['-v', '--verbose']\n"
            "    kind: 'bool'"
        )

    config = ParserConfig.model_validate(raw_config)
    logger.debug("Loaded %d argument(s) from %s", len(config.arguments), path)
    return config.to_parser()
