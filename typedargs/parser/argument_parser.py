# typedargs — typed command-line argument engine — MIT Licensed
"""
This module implements `ArgumentParser`, the public facade of typedargs. It owns the
argument registry, scans a token sequence, consumes values according to each
argument's `nargs`, coerces and validates them, and exposes the result through a
typed `ValueStore`.

Key Features:
- Declarative argument registration via `add_argument()` / `register()`
- Positional and dashed arguments with any number of aliases
- Canonical keys derived from the longest alias (`--output` → `output`)
- Kinds BOOL, INT, FLOAT and STR with strict coercion
- Multiplicity via nargs: implicit single, `N`, `*`, `+`, `?`
- Negative numbers (`-42`, `-3.14`) accepted as values by numeric arguments
- Choice validation per consumed value
- `-h` / `--help` short-circuit, reported as its own outcome
- Rich-powered help rendering through `HelpRenderer`

Public Interface:
- `add_argument(...)`: Register a new argument.
- `parse(tokens)`: Parse an argv-style sequence into a `ParseResult`.
- `parse_args(args=None)`: Same as `parse()`, defaulting to `sys.argv`.
- `get()`, `get_list()`, `has()`, `get_with_default()`, `keys()`: Typed access
  to the values of the last successful parse.
- `render_help()`: Print help on the Rich console.

Example Usage:
    parser = ArgumentParser("example")
    parser.add_argument("input", kind=str, required=True)
    parser.add_argument("-v", "--verbose", kind=bool)
    parser.add_argument("--count", kind=int, default="10")

    result = parser.parse(["example", "data.txt", "--count", "-3"])

    # result.status == ParseStatus.SUCCESS
    # parser.get("count", int) == -3
"""
from __future__ import annotations

import shlex
import sys
from typing import Any, Iterable, Sequence

from rich.console import Console

from typedargs.console import console
from typedargs.exceptions import (
    DuplicateAlias,
    InvalidSpecification,
    MissingRequiredArgument,
    MissingValue,
    ParserError,
    TypeMismatch,
    UnknownArgument,
)
from typedargs.logger import logger
from typedargs.parser.argument import Argument
from typedargs.parser.argument_kind import ArgumentKind
from typedargs.parser.help import HelpRenderer
from typedargs.parser.nargs import Nargs, NargsRule
from typedargs.parser.parsed_value import ParsedValue
from typedargs.parser.parser_types import ParseResult, ParserState, ParseStatus
from typedargs.parser.utils import (
    canonical_key,
    check_choice,
    coerce_value,
    is_option_like,
    normalize_choices,
    validate_aliases,
)
from typedargs.parser.value_store import ValueStore
from typedargs.signals import HelpSignal

HELP_KEY = "help"


class ArgumentParser:
    """
    Typed command-line argument parser.

    Arguments are registered first, then any number of `parse()` calls may be
    made. Each parse starts from a fresh state and, on success, replaces the
    store the accessors read from. Failed and help-requested parses leave an
    empty store behind.

    Registration and parsing on the same instance must not overlap; the caller
    finishes all `add_argument()` calls before parsing. Separate instances share
    no state and may be used from different threads.
    """

    def __init__(
        self,
        prog: str = "",
        description: str = "",
        epilog: str = "",
    ) -> None:
        """Initialize the ArgumentParser."""
        self.console: Console = console
        self.prog: str = prog
        self.description: str = description
        self.epilog: str = epilog
        self._arguments: list[Argument] = []
        self._positional: list[Argument] = []
        self._alias_map: dict[str, Argument] = {}
        self._key_map: dict[str, Argument] = {}
        self._store: ValueStore = ValueStore()
        self._add_help()

    def _add_help(self) -> None:
        """Add help argument to the parser."""
        self._register_argument(
            Argument(
                aliases=("-h", "--help"),
                key=HELP_KEY,
                kind=ArgumentKind.BOOL,
                help="Show this help message.",
            )
        )

    def _validate_kind(self, kind: Any) -> ArgumentKind:
        try:
            return ArgumentKind.from_type(kind)
        except ValueError as error:
            raise InvalidSpecification(str(error)) from error

    def _validate_default(
        self, default: Any, nargs: Nargs, key: str
    ) -> str | tuple[str, ...] | None:
        """Normalize the raw default; list-shaped defaults become a tuple of tokens."""
        if default is None:
            return None
        if isinstance(default, (list, tuple)):
            if not nargs.is_list:
                raise InvalidSpecification(
                    f"Default for '{key}' must be a single value, got {default!r}"
                )
            return tuple(str(item) for item in default)
        if isinstance(default, bool):
            default = str(default).lower()
        elif not isinstance(default, str):
            default = str(default)
        if nargs.is_list:
            try:
                return tuple(shlex.split(default))
            except ValueError as error:
                raise InvalidSpecification(
                    f"Default {default!r} for '{key}' cannot be split: {error}"
                ) from error
        return default

    def _validate_flag_options(self, argument: Argument) -> None:
        """BOOL flags take no value, so they cannot restrict it with choices."""
        if not argument.is_flag:
            return
        if argument.choices:
            raise InvalidSpecification(
                f"choices cannot be specified for boolean flag '{argument.key}'"
            )

    def _register_argument(self, argument: Argument) -> None:
        for alias in argument.aliases:
            if alias in self._alias_map:
                existing = self._alias_map[alias]
                raise DuplicateAlias(
                    f"Alias '{alias}' is already used by argument '{existing.key}'",
                    key=alias,
                )
        if argument.key in self._key_map:
            raise DuplicateAlias(
                f"Key '{argument.key}' is already defined by "
                f"{', '.join(self._key_map[argument.key].aliases)}",
                key=argument.key,
            )

        for alias in argument.aliases:
            self._alias_map[alias] = argument
        self._key_map[argument.key] = argument
        self._arguments.append(argument)
        if argument.positional:
            self._positional.append(argument)

    def add_argument(
        self,
        *aliases: str,
        help: str = "",
        kind: ArgumentKind | type | str = ArgumentKind.STR,
        default: Any = None,
        required: bool = False,
        metavar: str = "",
        choices: Iterable[Any] | None = None,
        nargs: int | str | Nargs | None = None,
    ) -> Argument:
        """
        Define a new argument for the parser.

        Args:
            *aliases (str): Surface forms (e.g. "-v", "--verbose") or one positional
                name. A single list or tuple of aliases is also accepted.
            help (str): Help text for rendering.
            kind (ArgumentKind | type | str): Value kind, as an `ArgumentKind`, its
                name, or one of `bool`, `int`, `float`, `str`.
            default (Any): Raw default token(s), coerced when the argument is absent.
            required (bool): Whether the argument must be supplied.
            metavar (str): Display label for the value placeholder.
            choices (Iterable | None): Permitted raw values.
            nargs (int | str | Nargs | None): `"*"`, `"+"`, `"?"`, a positive integer,
                or `None`/`""` for the implicit default.

        Returns:
            Argument: The registered argument.

        Raises:
            InvalidSpecification: If nargs, aliases, kind, default or choices are malformed.
            DuplicateAlias: If an alias or the derived key is already registered.
        """
        if len(aliases) == 1 and isinstance(aliases[0], (list, tuple)):
            aliases = tuple(aliases[0])
        aliases = validate_aliases(aliases)
        positional = not aliases[0].startswith("-")
        key = canonical_key(aliases)
        expected_kind = self._validate_kind(kind)
        parsed_nargs = Nargs.parse(nargs)
        raw_default = self._validate_default(default, parsed_nargs, key)
        raw_choices, choice_values = normalize_choices(choices, expected_kind)
        if not isinstance(required, bool):
            raise InvalidSpecification(f"required must be a boolean, got {required!r}")

        argument = Argument(
            aliases=aliases,
            key=key,
            kind=expected_kind,
            nargs=parsed_nargs,
            default=raw_default,
            choices=raw_choices,
            required=required,
            help=help,
            metavar=metavar or "",
            positional=positional,
            choice_values=choice_values,
        )
        self._validate_flag_options(argument)
        self._register_argument(argument)
        logger.debug(
            "Registered argument '%s' (%s, nargs=%r) from %s",
            key,
            expected_kind,
            str(parsed_nargs),
            ", ".join(aliases),
        )
        return argument

    def register(
        self,
        aliases: Sequence[str],
        help_text: str = "",
        kind: ArgumentKind | type | str = ArgumentKind.STR,
        default: Any = None,
        required: bool = False,
        metavar: str = "",
        choices: Iterable[Any] | None = None,
        nargs: int | str | Nargs | None = "",
    ) -> Argument:
        """Register an argument from an alias sequence; see `add_argument()`."""
        return self.add_argument(
            *aliases,
            help=help_text,
            kind=kind,
            default=default,
            required=required,
            metavar=metavar,
            choices=choices,
            nargs=nargs,
        )

    @property
    def arguments(self) -> list[Argument]:
        """Registered arguments in registration order, without the help argument."""
        return [arg for arg in self._arguments if arg.key != HELP_KEY]

    @property
    def help_argument(self) -> Argument:
        return self._key_map[HELP_KEY]

    @property
    def positional_arguments(self) -> list[Argument]:
        return list(self._positional)

    @property
    def optional_arguments(self) -> list[Argument]:
        return [arg for arg in self._arguments if not arg.positional]

    def get_argument(self, key: str) -> Argument | None:
        """
        Return the Argument object for a given canonical key.

        Args:
            key (str): Canonical key of the argument.

        Returns:
            Argument or None: Matching Argument instance, if defined.
        """
        return self._key_map.get(key)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert argument metadata into a serializable list of dicts.

        Returns:
            List of definitions for use in config introspection, documentation, or export.
        """
        defs = []
        for arg in self.arguments:
            defs.append(
                {
                    "aliases": list(arg.aliases),
                    "key": arg.key,
                    "kind": arg.kind.value,
                    "nargs": str(arg.nargs),
                    "default": (
                        list(arg.default) if isinstance(arg.default, tuple) else arg.default
                    ),
                    "choices": list(arg.choices),
                    "required": arg.required,
                    "metavar": arg.metavar,
                    "positional": arg.positional,
                    "help": arg.help,
                }
            )
        return defs

    def _raise_unknown_option(self, token: str) -> None:
        suggestions = [
            alias
            for alias, arg in self._alias_map.items()
            if not arg.positional and alias.startswith(token)
        ]
        if suggestions:
            raise UnknownArgument(
                f"Unrecognized option '{token}'. Did you mean one of: "
                f"{', '.join(suggestions)}?",
                key=token,
            )
        raise UnknownArgument(
            f"Unrecognized option '{token}'. Use --help to see available options.",
            key=token,
        )

    def _next_positional(self, state: ParserState) -> Argument | None:
        if state.positional_index < len(self._positional):
            return self._positional[state.positional_index]
        return None

    def _coerce_token(self, token: str, argument: Argument) -> Any:
        try:
            value = coerce_value(token, argument.kind)
        except TypeMismatch as error:
            raise TypeMismatch(
                f"Invalid value for '{argument.key}': {error}", key=argument.key
            ) from error
        check_choice(value, token, argument)
        return value

    def _raise_missing_value(self, argument: Argument, found: int) -> None:
        nargs = argument.nargs
        if nargs.rule == NargsRule.SINGLE:
            expected = f"a {argument.kind} value"
        elif nargs.rule == NargsRule.EXACTLY:
            expected = f"{nargs.count} values, got {found}"
        else:
            expected = "at least one value"
        raise MissingValue(
            f"Argument '{argument.key}' requires {expected}", key=argument.key
        )

    def _consume_nargs(self, argument: Argument, state: ParserState) -> list[Any]:
        """
        Consume and coerce the values of one occurrence of `argument`.

        Tokens are taken while they are value-like for the argument's kind, up to
        the rule's maximum. Each token is coerced and checked against choices the
        moment it is consumed.
        """
        values: list[Any] = []
        limit = argument.nargs.max_values
        while not state.exhausted and (limit is None or len(values) < limit):
            token = state.peek()
            if is_option_like(token, argument.kind):
                break
            values.append(self._coerce_token(token, argument))
            state.position += 1
        if len(values) < argument.nargs.min_values:
            self._raise_missing_value(argument, len(values))
        return values

    def _consume_occurrence(self, argument: Argument, state: ParserState) -> None:
        if argument.is_flag:
            value = ParsedValue.scalar(ArgumentKind.BOOL, True)
        else:
            values = self._consume_nargs(argument, state)
            if argument.is_list:
                value = ParsedValue.list_of(argument.kind, values)
            else:
                value = ParsedValue.scalar(argument.kind, values[0])
        if argument.key in state.satisfied:
            logger.debug("Argument '%s' given again, replacing earlier value", argument.key)
        state.store.put(argument.key, value)
        state.mark_satisfied(argument.key)

    def _scan(self, state: ParserState) -> None:
        help_aliases = self.help_argument.aliases
        if any(token in help_aliases for token in state.tokens):
            raise HelpSignal()

        while not state.exhausted:
            token = state.peek()
            pending = self._next_positional(state)
            pending_kind = pending.kind if pending else None
            if is_option_like(token, pending_kind):
                argument = self._alias_map.get(token)
                if argument is None or argument.positional:
                    self._raise_unknown_option(token)
                assert argument is not None
                state.position += 1
                self._consume_occurrence(argument, state)
            elif pending is not None:
                self._consume_occurrence(pending, state)
                state.positional_index += 1
            else:
                remaining = state.tokens[state.position :]
                plural = "s" if len(remaining) > 1 else ""
                raise UnknownArgument(
                    f"Unexpected positional argument{plural}: {', '.join(remaining)}",
                    key=token,
                )

    def _validate_required(self, state: ParserState) -> None:
        for argument in self.arguments:
            if (
                argument.required
                and argument.key not in state.satisfied
                and argument.default is None
            ):
                choice_text = argument.get_choice_text()
                help_text = f" help: {argument.help}" if argument.help else ""
                raise MissingRequiredArgument(
                    f"Missing required argument '{argument.key}': {choice_text}{help_text}",
                    key=argument.key,
                )

    def _resolve_default(self, argument: Argument) -> ParsedValue:
        """Coerce the default of an argument that did not appear in the input."""
        if argument.default is None:
            if argument.is_flag:
                return ParsedValue.scalar(ArgumentKind.BOOL, False)
            if argument.is_list:
                return ParsedValue.list_of(argument.kind, [])
            return ParsedValue.absent(argument.kind)

        if argument.is_list:
            assert isinstance(argument.default, tuple)
            tokens = list(argument.default)
            nargs = argument.nargs
            if nargs.rule == NargsRule.EXACTLY and len(tokens) != nargs.count:
                raise MissingValue(
                    f"Default for '{argument.key}' must hold {nargs.count} values, "
                    f"got {len(tokens)}",
                    key=argument.key,
                )
            return ParsedValue.list_of(
                argument.kind, [self._coerce_token(token, argument) for token in tokens]
            )
        assert isinstance(argument.default, str)
        return ParsedValue.scalar(
            argument.kind, self._coerce_token(argument.default, argument)
        )

    def _apply_defaults(self, state: ParserState) -> None:
        for argument in self.arguments:
            if argument.key not in state.satisfied:
                state.store.put(argument.key, self._resolve_default(argument))

    def parse(self, tokens: Sequence[str]) -> ParseResult:
        """
        Parse an argv-style token sequence.

        The first token is the program name and is skipped. The parse runs
        through scanning, required-argument validation and defaulting, and ends
        in exactly one of three outcomes.

        Args:
            tokens (Sequence[str]): The full token sequence, program name first.

        Returns:
            ParseResult: SUCCESS with the populated store, HELP_REQUESTED, or
            FAILED with the `ParserError` that stopped the parse.
        """
        state = ParserState(tokens=list(tokens[1:]))
        try:
            self._scan(state)
            self._validate_required(state)
            self._apply_defaults(state)
        except HelpSignal:
            self._store = ValueStore()
            logger.debug("Help requested, parse stopped")
            return ParseResult(ParseStatus.HELP_REQUESTED, self._store)
        except ParserError as error:
            self._store = ValueStore()
            logger.debug("Parse failed (%s): %s", error.reason, error)
            return ParseResult(ParseStatus.FAILED, self._store, error)

        self._store = state.store
        logger.debug("Parsed %d argument(s): %s", len(state.store), self._store)
        return ParseResult(ParseStatus.SUCCESS, self._store)

    def parse_args(self, args: Sequence[str] | None = None) -> ParseResult:
        """Parse `args`, or `sys.argv` when not given."""
        if args is None:
            args = sys.argv
        return self.parse(args)

    @property
    def values(self) -> ValueStore:
        """The value store of the last successful parse."""
        return self._store

    def get(self, key: str, kind: Any) -> Any:
        return self._store.get(key, kind)

    def get_list(self, key: str, kind: Any) -> list[Any]:
        return self._store.get_list(key, kind)

    def has(self, key: str) -> bool:
        return self._store.has(key)

    def get_with_default(self, key: str, fallback: Any, kind: Any = None) -> Any:
        return self._store.get_with_default(key, fallback, kind)

    def keys(self) -> set[str]:
        return self._store.keys()

    def get_bool(self, key: str) -> bool:
        return self._store.get_bool(key)

    def get_int(self, key: str) -> int:
        return self._store.get_int(key)

    def get_float(self, key: str) -> float:
        return self._store.get_float(key)

    def get_str(self, key: str) -> str:
        return self._store.get_str(key)

    def get_usage(self, plain_text: bool = False) -> str:
        return HelpRenderer(self).get_usage(plain_text)

    def render_help(self) -> None:
        """Print formatted help text for this parser using Rich output."""
        HelpRenderer(self).render()

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        positional = sum(arg.positional for arg in self._arguments)
        required = sum(arg.required for arg in self._arguments)
        return (
            f"ArgumentParser(args={len(self._arguments)}, "
            f"aliases={len(self._alias_map)}, "
            f"positional={positional}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
