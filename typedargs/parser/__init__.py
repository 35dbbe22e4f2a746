"""
typedargs

Copyright (c) 2025 typedargs contributors.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument
from .argument_kind import ArgumentKind
from .argument_parser import ArgumentParser
from .help import HelpRenderer
from .nargs import Nargs, NargsRule
from .parsed_value import ParsedValue
from .parser_types import ParseResult, ParseStatus
from .value_store import ValueStore

__all__ = [
    "Argument",
    "ArgumentKind",
    "ArgumentParser",
    "HelpRenderer",
    "Nargs",
    "NargsRule",
    "ParsedValue",
    "ParseResult",
    "ParseStatus",
    "ValueStore",
]
