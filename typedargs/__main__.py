"""
typedargs

Copyright (c) 2025 typedargs contributors.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from typing import Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from typedargs.config import loader
from typedargs.console import console
from typedargs.parser import ArgumentParser as TypedArgumentParser
from typedargs.parser import ParseResult, ParseStatus
from typedargs.utils import setup_logging


def get_root_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="typedargs",
        description="Parse tokens against a parser defined in a YAML or TOML file.",
        epilog="Tokens after the config path are parsed as the program's arguments.",
    )
    parser.add_argument("config", help="Path to the parser definition file.")
    parser.add_argument(
        "tokens", nargs=REMAINDER, help="Tokens to parse (program name excluded)."
    )
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], default=None, help="Logging output mode."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def build_result_table(parser: TypedArgumentParser, result: ParseResult) -> Table:
    """Table of every stored key with its kind and value."""
    table = Table(title=parser.prog or "typedargs", box=box.SIMPLE)
    table.add_column("key", style="bold")
    table.add_column("kind")
    table.add_column("value")
    for key, parsed in result.values.items():
        kind = f"list[{parsed.kind}]" if parsed.is_list else str(parsed.kind)
        table.add_row(key, kind, escape(str(parsed)))
    return table


def run(args: Namespace) -> int:
    parser = loader(args.config)
    program = parser.prog or "typedargs"
    result = parser.parse([program, *args.tokens])
    if result.status == ParseStatus.HELP_REQUESTED:
        parser.render_help()
    elif result.status == ParseStatus.SUCCESS:
        console.print(build_result_table(parser, result))
    else:
        message = escape(str(result.error))
        console.print(f"[bold red]error[/] ({result.reason}): {message}")
        console.print(parser.get_usage(), style="dim")
    return result.exit_code


def main(argv: Sequence[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
