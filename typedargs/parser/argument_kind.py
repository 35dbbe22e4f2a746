# typedargs — typed command-line argument engine — MIT Licensed
"""
Defines `ArgumentKind`, the enum of value kinds an argument can be declared with.

The kind is fixed at registration and drives both token coercion and the
negative-number disambiguation used while scanning. It also tags every stored
`ParsedValue` so typed retrieval can fail loudly on a mismatch.

Supports alias coercion for config-friendly spellings and Python builtin types.

Exports:
    - ArgumentKind: Enum of BOOL, INT, FLOAT and STR.

Example:
    ArgumentKind("int")      → ArgumentKind.INT
    ArgumentKind("integer")  → ArgumentKind.INT (via alias)
    ArgumentKind.from_type(float) → ArgumentKind.FLOAT
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ArgumentKind(Enum):
    """
    The value kind of an argument.

    Members:
        BOOL: True/False. As a flag with implicit nargs it takes no tokens.
        INT: Signed 64-bit integer.
        FLOAT: Double precision float.
        STR: Text, stored unchanged.

    Aliases:
        - "boolean" → "bool"
        - "integer" → "int"
        - "double" → "float"
        - "string", "text" → "str"
    """

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"

    @classmethod
    def choices(cls) -> list[ArgumentKind]:
        """Return a list of all argument kinds."""
        return list(cls)

    @classmethod
    def from_type(cls, python_type: Any) -> ArgumentKind:
        """Map a Python builtin type or kind-like value to an ArgumentKind."""
        if isinstance(python_type, ArgumentKind):
            return python_type
        if isinstance(python_type, str):
            return cls(python_type)
        for builtin, kind in (
            (bool, cls.BOOL),
            (int, cls.INT),
            (float, cls.FLOAT),
            (str, cls.STR),
        ):
            if python_type is builtin:
                return kind
        raise ValueError(f"Unsupported argument kind: {python_type!r}")

    @property
    def python_type(self) -> type:
        """The Python type values of this kind are stored as."""
        return {
            ArgumentKind.BOOL: bool,
            ArgumentKind.INT: int,
            ArgumentKind.FLOAT: float,
            ArgumentKind.STR: str,
        }[self]

    @property
    def is_numeric(self) -> bool:
        return self in (ArgumentKind.INT, ArgumentKind.FLOAT)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "boolean": "bool",
            "integer": "int",
            "double": "float",
            "string": "str",
            "text": "str",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the argument kind."""
        return self.value
