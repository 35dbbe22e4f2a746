# typedargs — typed command-line argument engine — MIT Licensed
"""
Defines all custom exception classes used by typedargs.

Registration errors are raised directly from `ArgumentParser.add_argument()`.
Parse-time errors are raised inside the engine and converted into a failed
`ParseResult` at the `parse()` boundary, so callers never see them escape
from `parse()`. Accessor errors are raised from the value store getters.

All exceptions inherit from `ParserError`, the base exception for the package.

Exception Hierarchy:
- ParserError
    ├── InvalidSpecification      (registration)
    ├── DuplicateAlias            (registration)
    ├── UnknownArgument           (parse, accessor)
    ├── MissingValue              (parse, accessor)
    ├── TypeMismatch              (parse, accessor)
    ├── InvalidChoice             (parse)
    └── MissingRequiredArgument   (parse)
"""


class ParserError(Exception):
    """Base exception for the argument engine.

    Attributes:
        key (str | None): The canonical key or raw token the error is about.
        reason (str): Stable identifier for the failure category.
    """

    reason: str = "parser_error"

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class InvalidSpecification(ParserError):
    """Raised when an argument declaration is malformed (bad nargs, aliases, choices)."""

    reason = "invalid_specification"


class DuplicateAlias(ParserError):
    """Raised when an alias or canonical key is already owned by another argument."""

    reason = "duplicate_alias"


class UnknownArgument(ParserError):
    """Raised for unregistered options, excess positionals, or unknown keys."""

    reason = "unknown_argument"


class MissingValue(ParserError):
    """Raised when an argument does not receive the values its nargs demands."""

    reason = "missing_value"


class TypeMismatch(ParserError):
    """Raised when a token cannot be coerced, or a stored value is read as the wrong kind."""

    reason = "type_mismatch"


class InvalidChoice(ParserError):
    """Raised when a value is not one of the declared choices."""

    reason = "invalid_choice"


class MissingRequiredArgument(ParserError):
    """Raised when a required argument has no value after scanning."""

    reason = "missing_required_argument"
