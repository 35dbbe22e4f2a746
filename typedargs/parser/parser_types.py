# typedargs — typed command-line argument engine — MIT Licensed
"""
Outcome and state models for `ArgumentParser.parse()`.

Contents:
- `ParseStatus`: The three terminal outcomes of a parse.
- `ParseResult`: What `parse()` returns: the status, the value store and,
  for failures, the `ParserError` that ended the parse.
- `ParserState`: Transient cursor and bookkeeping for one parse call.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from typedargs.exceptions import ParserError
from typedargs.parser.value_store import ValueStore


class ParseStatus(Enum):
    """
    Terminal outcome of a parse.

    The values follow the common convention: 0 for success, a positive code for
    help, a negative code for failure.
    """

    SUCCESS = 0
    HELP_REQUESTED = 1
    FAILED = -1

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome."""
        return {
            ParseStatus.SUCCESS: 0,
            ParseStatus.HELP_REQUESTED: 0,
            ParseStatus.FAILED: 2,
        }[self]


@dataclass
class ParseResult:
    """The outcome of one `parse()` call."""

    status: ParseStatus
    values: ValueStore = field(default_factory=ValueStore)
    error: ParserError | None = None

    @property
    def ok(self) -> bool:
        return self.status == ParseStatus.SUCCESS

    @property
    def help_requested(self) -> bool:
        return self.status == ParseStatus.HELP_REQUESTED

    @property
    def failed(self) -> bool:
        return self.status == ParseStatus.FAILED

    @property
    def reason(self) -> str | None:
        """The failure reason code, e.g. 'unknown_argument'."""
        return self.error.reason if self.error else None

    @property
    def exit_code(self) -> int:
        return self.status.exit_code

    def __bool__(self) -> bool:
        return self.ok


@dataclass
class ParserState:
    """Tracks the token cursor and consumed arguments during one parse."""

    tokens: list[str]
    position: int = 0
    positional_index: int = 0
    store: ValueStore = field(default_factory=ValueStore)
    satisfied: set[str] = field(default_factory=set)

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.tokens)

    def peek(self) -> str:
        return self.tokens[self.position]

    def mark_satisfied(self, key: str) -> None:
        self.satisfied.add(key)
