# typedargs — typed command-line argument engine — MIT Licensed
"""
Defines the `Argument` dataclass used by `ArgumentParser` to represent
one registered command-line parameter in a structured, introspectable format.

Each `Argument` describes a single input: its aliases, the canonical key it is
stored under, its value kind, multiplicity, default, choices and help text.

Arguments should be created using `ArgumentParser.add_argument()` or declared
in a YAML/TOML file loaded by `typedargs.config.loader`, which performs all
validation before the dataclass is built.

Key Attributes:
- `aliases`: One or more surface forms (e.g. `-o`, `--output`), or one positional name
- `key`: Canonical key derived from the longest alias, used for storage and lookup
- `kind`: `ArgumentKind` the raw tokens are coerced to
- `nargs`: `Nargs` multiplicity rule
- `default`: Raw default token(s), coerced lazily at parse time
- `choices`: Permitted raw forms, if restricted
- `positional`: Whether this argument is matched by position (no dashed alias)

Used By:
- `ArgumentParser` registration, scanning and defaulting
- `HelpRenderer` for usage and help text
"""
from dataclasses import dataclass, field
from typing import Any

from typedargs.parser.argument_kind import ArgumentKind
from typedargs.parser.nargs import Nargs, NargsRule


@dataclass
class Argument:
    """
    Represents a command-line argument.

    Attributes:
        aliases (tuple[str, ...]): Surface forms for the argument, in declaration order.
        key (str): The canonical key values are stored under.
        kind (ArgumentKind): The kind tokens are coerced to.
        nargs (Nargs): How many tokens one occurrence consumes.
        default (str | tuple[str, ...] | None): Raw default token, or raw tokens for
            list-shaped arguments.
        choices (list[str]): Permitted raw forms; empty means unrestricted.
        required (bool): True if the argument must be present after parsing.
        help (str): Help text for the argument.
        metavar (str): Display label for the value placeholder.
        positional (bool): True if no alias starts with a dash.
        choice_values (tuple): `choices` coerced to `kind`, compared against values.
    """

    aliases: tuple[str, ...]
    key: str
    kind: ArgumentKind = ArgumentKind.STR
    nargs: Nargs = field(default_factory=Nargs.single)
    default: str | tuple[str, ...] | None = None
    choices: list[str] = field(default_factory=list)
    required: bool = False
    help: str = ""
    metavar: str = ""
    positional: bool = False
    choice_values: tuple[Any, ...] = field(default=(), repr=False, compare=False)

    @property
    def is_flag(self) -> bool:
        """True for an optional BOOL with implicit nargs: present means True, no tokens."""
        return (
            self.kind == ArgumentKind.BOOL
            and self.nargs.rule == NargsRule.SINGLE
            and not self.positional
        )

    @property
    def is_list(self) -> bool:
        return self.nargs.is_list

    def get_positional_text(self) -> str:
        """Get the positional text for the argument."""
        text = ""
        if self.positional:
            if self.choices:
                text = f"{{{','.join(self.choices)}}}"
            else:
                text = self.metavar or self.key
        return text

    def get_choice_text(self) -> str:
        """Get the value placeholder text for the argument, shaped by nargs."""
        if self.is_flag:
            return ""
        if self.choices:
            choice_text = f"{{{','.join(self.choices)}}}"
        elif self.metavar:
            choice_text = self.metavar
        elif self.positional:
            choice_text = self.key
        else:
            choice_text = self.key.upper()

        rule = self.nargs.rule
        if rule == NargsRule.ZERO_OR_ONE:
            choice_text = f"[{choice_text}]"
        elif rule == NargsRule.ZERO_OR_MORE:
            choice_text = f"[{choice_text} ...]"
        elif rule == NargsRule.ONE_OR_MORE:
            choice_text = f"{choice_text} [{choice_text} ...]"
        elif rule == NargsRule.EXACTLY:
            assert self.nargs.count is not None
            choice_text = " ".join([choice_text] * self.nargs.count)
        return choice_text
