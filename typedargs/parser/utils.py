# typedargs — typed command-line argument engine — MIT Licensed
"""
Contains token classification, value coercion and alias utilities for typedargs.

Functions:
- coerce_bool: Strictly convert a token to a boolean.
- coerce_value: Convert a raw token to the Python value of an `ArgumentKind`.
- check_choice: Validate a coerced value against an argument's choices.
- is_negative_number: True if a token is a negative numeric literal.
- is_option_like: Classify a token as an option or a value, given the kind of
  the argument currently consuming tokens.
- canonical_key: Derive the storage key from a set of aliases.
- validate_aliases: Reject malformed alias sets at registration time.
"""
import re
from typing import Any, Iterable, Sequence

from typedargs.exceptions import InvalidChoice, InvalidSpecification, TypeMismatch
from typedargs.parser.argument import Argument
from typedargs.parser.argument_kind import ArgumentKind

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_NEGATIVE_NUMBER_PATTERN = re.compile(
    r"-(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

TRUE_TOKENS = frozenset({"true", "1", "yes", "on"})
FALSE_TOKENS = frozenset({"false", "0", "no", "off"})


def coerce_bool(value: str) -> bool:
    """
    Convert a token to a boolean.

    Accepts 'true'/'false', '1'/'0', 'yes'/'no' and 'on'/'off' in any case.
    Surrounding whitespace is not stripped.

    Args:
        value (str): The raw token.

    Returns:
        bool: Parsed boolean result.

    Raises:
        TypeMismatch: If the token is not a recognized boolean spelling.
    """
    normalized = value.lower()
    if normalized in TRUE_TOKENS:
        return True
    if normalized in FALSE_TOKENS:
        return False
    raise TypeMismatch(f"'{value}' is not a valid boolean")


def coerce_value(value: str, kind: ArgumentKind) -> Any:
    """
    Convert a raw token to the value of the given kind.

    Integers accept an optional sign followed by decimal digits and must fit in
    64 bits. Floats accept Python float literals without surrounding whitespace
    or digit separators. Strings are returned unchanged.

    Args:
        value (str): The raw token.
        kind (ArgumentKind): The target kind.

    Returns:
        Any: The coerced value.

    Raises:
        TypeMismatch: If the token cannot be read as `kind`.
    """
    if kind == ArgumentKind.STR:
        return value
    if kind == ArgumentKind.BOOL:
        return coerce_bool(value)
    if kind == ArgumentKind.INT:
        if not _INT_PATTERN.fullmatch(value):
            raise TypeMismatch(f"'{value}' is not a valid integer")
        number = int(value)
        if not INT_MIN <= number <= INT_MAX:
            raise TypeMismatch(f"'{value}' is out of range for a 64-bit integer")
        return number
    if kind == ArgumentKind.FLOAT:
        if not value or value != value.strip() or "_" in value:
            raise TypeMismatch(f"'{value}' is not a valid float")
        try:
            return float(value)
        except ValueError:
            raise TypeMismatch(f"'{value}' is not a valid float") from None
    raise TypeMismatch(f"Unsupported kind: {kind!r}")


def normalize_choices(
    choices: Iterable[Any] | None, kind: ArgumentKind
) -> tuple[list[str], tuple[Any, ...]]:
    """
    Validate declared choices and coerce them to `kind`.

    Returns:
        tuple: The raw choices as text and their coerced values.

    Raises:
        InvalidSpecification: If choices are not a sequence of coercible tokens.
    """
    if choices is None:
        return [], ()
    if isinstance(choices, (str, dict)):
        raise InvalidSpecification("choices must be a list, tuple or set of values")
    try:
        raw_choices = [str(choice) for choice in choices]
    except TypeError:
        raise InvalidSpecification(
            "choices must be iterable (like list, tuple, or set)"
        ) from None
    values = []
    for choice in raw_choices:
        try:
            values.append(coerce_value(choice, kind))
        except TypeMismatch as error:
            raise InvalidSpecification(
                f"Invalid choice {choice!r}: not coercible to {kind}: {error}"
            ) from error
    return raw_choices, tuple(values)


def check_choice(value: Any, raw: str, argument: Argument) -> None:
    """
    Validate a coerced value against the declared choices.

    Strings are compared by their raw token. Other kinds compare coerced values,
    which is the same as comparing canonical decimal forms.

    Raises:
        InvalidChoice: If the value is not permitted.
    """
    if not argument.choices:
        return
    if isinstance(value, str):
        allowed = raw in argument.choices
    else:
        allowed = value in argument.choice_values
    if not allowed:
        raise InvalidChoice(
            f"Invalid value for '{argument.key}': '{raw}' must be one of "
            f"{{{', '.join(argument.choices)}}}",
            key=argument.key,
        )


def is_negative_number(token: str) -> bool:
    """True if the token is a negative integer or float literal like `-42` or `-3.14`."""
    return bool(_NEGATIVE_NUMBER_PATTERN.fullmatch(token))


def is_option_like(token: str, kind: ArgumentKind | None = None) -> bool:
    """
    Classify a token as option-like.

    A token is option-like if it starts with a dash and is longer than a bare `-`,
    unless `kind` (the kind of the argument that would consume the token) is
    numeric and the token is a negative number literal.

    Args:
        token (str): The raw token.
        kind (ArgumentKind | None): Kind of the active consumer, if any.

    Returns:
        bool: True if the token should be resolved as an option.
    """
    if len(token) < 2 or not token.startswith("-"):
        return False
    if kind is not None and kind.is_numeric and is_negative_number(token):
        return False
    return True


def strip_alias(alias: str) -> str:
    """Strip leading dashes and map internal dashes to underscores."""
    return alias.lstrip("-").replace("-", "_")


def canonical_key(aliases: Sequence[str]) -> str:
    """
    Derive the canonical key from an argument's aliases.

    The alias with the most characters after stripping leading dashes wins; ties
    go to the earliest declared alias. Internal dashes become underscores.
    """
    longest = max(aliases, key=lambda alias: len(alias.lstrip("-")))
    return strip_alias(longest)


def validate_aliases(aliases: Sequence[Any]) -> tuple[str, ...]:
    """
    Validate the aliases provided for an argument.

    Returns:
        tuple[str, ...]: The aliases, in declaration order.

    Raises:
        InvalidSpecification: If the alias set is empty or malformed.
    """
    if not aliases:
        raise InvalidSpecification("At least one alias is required")
    for alias in aliases:
        if not isinstance(alias, str):
            raise InvalidSpecification(f"Alias {alias!r} must be a string")
        if not alias.strip("-"):
            raise InvalidSpecification(f"Alias '{alias}' must contain a name")
        if any(char.isspace() for char in alias):
            raise InvalidSpecification(f"Alias '{alias}' must not contain whitespace")
        if is_negative_number(alias):
            raise InvalidSpecification(
                f"Alias '{alias}' would be ambiguous with a negative number"
            )
    if len(set(aliases)) != len(aliases):
        raise InvalidSpecification(f"Aliases must be unique: {list(aliases)}")
    dashed = [alias.startswith("-") for alias in aliases]
    if any(dashed) and not all(dashed):
        raise InvalidSpecification(
            "Cannot mix positional names and dashed aliases in one argument"
        )
    if not any(dashed) and len(aliases) > 1:
        raise InvalidSpecification("Positional arguments cannot have multiple names")
    return tuple(aliases)
