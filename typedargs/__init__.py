"""
typedargs

Copyright (c) 2025 typedargs contributors.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    DuplicateAlias,
    InvalidChoice,
    InvalidSpecification,
    MissingRequiredArgument,
    MissingValue,
    ParserError,
    TypeMismatch,
    UnknownArgument,
)
from .logger import logger
from .parser import (
    Argument,
    ArgumentKind,
    ArgumentParser,
    Nargs,
    ParsedValue,
    ParseResult,
    ParseStatus,
    ValueStore,
)

__all__ = [
    "Argument",
    "ArgumentKind",
    "ArgumentParser",
    "DuplicateAlias",
    "InvalidChoice",
    "InvalidSpecification",
    "MissingRequiredArgument",
    "MissingValue",
    "Nargs",
    "ParsedValue",
    "ParseResult",
    "ParseStatus",
    "ParserError",
    "TypeMismatch",
    "UnknownArgument",
    "ValueStore",
    "logger",
]
