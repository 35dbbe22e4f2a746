# typedargs — typed command-line argument engine — MIT Licensed
"""
Multiplicity rules (`nargs`) for arguments.

A `Nargs` value says how many tokens one occurrence of an argument consumes:

- `Nargs.single()`      implicit default: one token, or none for a BOOL flag
- `Nargs.exactly(n)`    exactly n tokens, n >= 1           (`nargs=2`, `"2"`)
- `Nargs.zero_or_more()` greedy, zero allowed              (`"*"`)
- `Nargs.one_or_more()` greedy, at least one               (`"+"`)
- `Nargs.zero_or_one()` at most one                        (`"?"`)

Every rule other than SINGLE produces a list-shaped value, even when it holds
zero or one element.

`Nargs.parse()` is the only way user input becomes a rule, and it raises
`InvalidSpecification` for anything it does not recognize so malformed declarations
are rejected at registration time.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from typedargs.exceptions import InvalidSpecification


class NargsRule(Enum):
    """The shape of a multiplicity rule."""

    SINGLE = "single"
    EXACTLY = "exactly"
    ZERO_OR_MORE = "*"
    ONE_OR_MORE = "+"
    ZERO_OR_ONE = "?"


@dataclass(frozen=True)
class Nargs:
    """A multiplicity rule. `count` is only set for EXACTLY."""

    rule: NargsRule = NargsRule.SINGLE
    count: int | None = None

    @classmethod
    def single(cls) -> Nargs:
        return cls(NargsRule.SINGLE)

    @classmethod
    def exactly(cls, count: int) -> Nargs:
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidSpecification(f"nargs must be a positive integer, got {count!r}")
        return cls(NargsRule.EXACTLY, count)

    @classmethod
    def zero_or_more(cls) -> Nargs:
        return cls(NargsRule.ZERO_OR_MORE)

    @classmethod
    def one_or_more(cls) -> Nargs:
        return cls(NargsRule.ONE_OR_MORE)

    @classmethod
    def zero_or_one(cls) -> Nargs:
        return cls(NargsRule.ZERO_OR_ONE)

    @classmethod
    def parse(cls, nargs: Any) -> Nargs:
        """
        Convert a user-facing nargs value into a `Nargs` rule.

        Args:
            nargs: `None` or `""` for the implicit default, `"*"`, `"+"`, `"?"`,
                a positive int, or a positive int written as decimal text.

        Returns:
            Nargs: The parsed rule.

        Raises:
            InvalidSpecification: If `nargs` is not one of the recognized forms.
        """
        if isinstance(nargs, Nargs):
            return nargs
        if nargs is None:
            return cls.single()
        if isinstance(nargs, bool):
            raise InvalidSpecification(f"Invalid nargs value: {nargs!r}")
        if isinstance(nargs, int):
            return cls.exactly(nargs)
        if not isinstance(nargs, str):
            raise InvalidSpecification(
                f"nargs must be an int or one of '*', '+', '?', got {type(nargs).__name__}"
            )
        text = nargs.strip()
        if text == "":
            return cls.single()
        if text == "*":
            return cls.zero_or_more()
        if text == "+":
            return cls.one_or_more()
        if text == "?":
            return cls.zero_or_one()
        if text.isascii() and text.isdigit():
            return cls.exactly(int(text))
        raise InvalidSpecification(f"Invalid nargs value: {nargs!r}")

    @property
    def is_list(self) -> bool:
        """True if values consumed under this rule are stored as a list."""
        return self.rule != NargsRule.SINGLE

    @property
    def is_greedy(self) -> bool:
        return self.rule in (NargsRule.ZERO_OR_MORE, NargsRule.ONE_OR_MORE)

    @property
    def min_values(self) -> int:
        """Fewest tokens an occurrence must consume (ignoring the BOOL flag case)."""
        if self.rule == NargsRule.EXACTLY:
            assert self.count is not None
            return self.count
        if self.rule in (NargsRule.SINGLE, NargsRule.ONE_OR_MORE):
            return 1
        return 0

    @property
    def max_values(self) -> int | None:
        """Most tokens an occurrence may consume; None means unbounded."""
        if self.rule == NargsRule.EXACTLY:
            return self.count
        if self.rule in (NargsRule.SINGLE, NargsRule.ZERO_OR_ONE):
            return 1
        return None

    def __str__(self) -> str:
        if self.rule == NargsRule.SINGLE:
            return ""
        if self.rule == NargsRule.EXACTLY:
            return str(self.count)
        return self.rule.value
