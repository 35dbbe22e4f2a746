# typedargs — typed command-line argument engine — MIT Licensed
"""
Provides `ValueStore`, the mapping from canonical key to `ParsedValue`
populated by one successful parse.

Retrieval is typed: callers name the kind they expect, either as an
`ArgumentKind` or as the builtin `bool`, `int`, `float` or `str`, and the store
checks it against the stored tag and shape.

Typical Usage:
    store.get("count", int)              -> 4
    store.get_list("files", str)         -> ["a.txt", "b.txt"]
    store.get_with_default("level", 1)   -> stored int, or 1
    store.get_str("output")              -> "result.txt"

Errors:
- `UnknownArgument` for a key that is not in the store.
- `MissingValue` for a key whose argument was never supplied and has no default.
- `TypeMismatch` when the stored kind or shape differs from the requested one.

`get_with_default()` never raises; every failure above yields the fallback.
"""
from __future__ import annotations

from typing import Any, Iterator

from typedargs.exceptions import MissingValue, TypeMismatch, UnknownArgument
from typedargs.parser.argument_kind import ArgumentKind
from typedargs.parser.parsed_value import ParsedValue


def _infer_kind(sample: Any) -> ArgumentKind | None:
    if sample is None:
        return None
    try:
        return ArgumentKind.from_type(type(sample))
    except ValueError:
        return None


class ValueStore:
    """Typed storage for parsed argument values, keyed by canonical key."""

    def __init__(self) -> None:
        self._values: dict[str, ParsedValue] = {}

    def put(self, key: str, value: ParsedValue) -> None:
        """Store a value, replacing any earlier value for the key."""
        self._values[key] = value

    def has(self, key: str) -> bool:
        """True if the key holds a value (absent markers do not count)."""
        parsed = self._values.get(key)
        return parsed is not None and not parsed.is_absent

    def keys(self) -> set[str]:
        """All canonical keys in the store, including absent ones."""
        return set(self._values)

    def get_parsed(self, key: str) -> ParsedValue:
        """Return the raw `ParsedValue` stored for a key."""
        try:
            return self._values[key]
        except KeyError:
            raise UnknownArgument(f"No argument stored under '{key}'", key=key) from None

    def _lookup(self, key: str, kind: Any, is_list: bool) -> ParsedValue:
        try:
            expected = ArgumentKind.from_type(kind)
        except ValueError as error:
            raise TypeMismatch(
                f"Cannot read argument '{key}' as {kind!r}: {error}", key=key
            ) from error
        parsed = self.get_parsed(key)
        if not parsed.matches(expected, is_list):
            wanted = f"list of {expected}" if is_list else str(expected)
            stored = f"list of {parsed.kind}" if parsed.is_list else str(parsed.kind)
            raise TypeMismatch(
                f"Argument '{key}' holds a {stored}, not a {wanted}", key=key
            )
        if parsed.is_absent:
            raise MissingValue(f"Argument '{key}' was not supplied", key=key)
        return parsed

    def get(self, key: str, kind: Any) -> Any:
        """
        Return the scalar value stored for `key`.

        Args:
            key (str): Canonical key.
            kind: Expected `ArgumentKind` or builtin type.

        Raises:
            UnknownArgument: The key is not in the store.
            MissingValue: The argument was never supplied and has no default.
            TypeMismatch: The stored value is a list or of a different kind.
        """
        return self._lookup(key, kind, is_list=False).to_python()

    def get_list(self, key: str, kind: Any) -> list[Any]:
        """Return the list stored for `key`; same errors as `get()`."""
        return self._lookup(key, kind, is_list=True).to_python()

    def get_with_default(self, key: str, fallback: Any, kind: Any = None) -> Any:
        """
        Return the value stored for `key`, or `fallback` on any failure.

        The expected shape is a list when `fallback` is a list. The expected kind
        is `kind` if given, otherwise it is inferred from `fallback` (or its first
        element); when it cannot be inferred, any kind of the right shape is accepted.
        """
        is_list = isinstance(fallback, list)
        if kind is None:
            sample = (fallback[0] if fallback else None) if is_list else fallback
            expected = _infer_kind(sample)
        else:
            try:
                expected = ArgumentKind.from_type(kind)
            except ValueError:
                return fallback
        parsed = self._values.get(key)
        if parsed is None or parsed.is_absent or parsed.is_list != is_list:
            return fallback
        if expected is not None and parsed.kind != expected:
            return fallback
        return parsed.to_python()

    def get_bool(self, key: str) -> bool:
        return self.get(key, ArgumentKind.BOOL)

    def get_int(self, key: str) -> int:
        return self.get(key, ArgumentKind.INT)

    def get_float(self, key: str) -> float:
        return self.get(key, ArgumentKind.FLOAT)

    def get_str(self, key: str) -> str:
        return self.get(key, ArgumentKind.STR)

    def as_dict(self) -> dict[str, Any]:
        """Plain `{key: value}` view; absent values map to None."""
        return {key: parsed.to_python() for key, parsed in self._values.items()}

    def items(self) -> Iterator[tuple[str, ParsedValue]]:
        return iter(self._values.items())

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueStore):
            return False
        return self._values == other._values

    def __repr__(self) -> str:
        return f"ValueStore({', '.join(f'{k}={v}' for k, v in self._values.items())})"
