# typedargs — typed command-line argument engine — MIT Licensed
"""
Defines `ParsedValue`, the tagged value stored for every parsed argument.

A `ParsedValue` records its `ArgumentKind` and whether it is a scalar or a list,
so typed retrieval can check the tag instead of trusting the caller. An absent
value (an optional argument that was never supplied and has no default) keeps
its tag but holds `None`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from typedargs.parser.argument_kind import ArgumentKind


@dataclass(frozen=True)
class ParsedValue:
    """A scalar or list value tagged with its kind."""

    kind: ArgumentKind
    value: Any
    is_list: bool = False

    @classmethod
    def scalar(cls, kind: ArgumentKind, value: Any) -> ParsedValue:
        return cls(kind, value)

    @classmethod
    def list_of(cls, kind: ArgumentKind, values: Iterable[Any]) -> ParsedValue:
        return cls(kind, tuple(values), is_list=True)

    @classmethod
    def absent(cls, kind: ArgumentKind, is_list: bool = False) -> ParsedValue:
        return cls(kind, None, is_list=is_list)

    @property
    def is_absent(self) -> bool:
        return self.value is None

    def matches(self, kind: ArgumentKind, is_list: bool) -> bool:
        """True if this value carries the given kind and shape."""
        return self.kind == kind and self.is_list == is_list

    def to_python(self) -> Any:
        """Return the plain Python value; lists are returned as fresh lists."""
        if self.is_list and self.value is not None:
            return list(self.value)
        return self.value

    def __str__(self) -> str:
        if self.is_absent:
            return "<absent>"
        if self.is_list:
            return f"[{', '.join(str(item) for item in self.value)}]"
        return str(self.value)
