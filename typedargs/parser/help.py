# typedargs — typed command-line argument engine — MIT Licensed
"""
Rich help and usage rendering for `ArgumentParser`.

`HelpRenderer` only reads the parser's public declarations (`prog`,
`description`, `epilog`, `help_argument`, `positional_arguments`,
`optional_arguments`), so the parsing engine never depends on how help looks.

Example:
    HelpRenderer(parser).render()
    HelpRenderer(parser).get_usage(plain_text=True)
    # "usage: example [-h] [-v] [--count COUNT] input"
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

from typedargs.parser.argument import Argument

if TYPE_CHECKING:
    from typedargs.parser.argument_parser import ArgumentParser

COLUMN_WIDTH = 30


class HelpRenderer:
    """Renders usage and help text for one parser on its Rich console."""

    def __init__(self, parser: ArgumentParser) -> None:
        self.parser = parser
        self.console = parser.console

    def _option_usage(self, arg: Argument) -> str:
        choice_text = arg.get_choice_text()
        text = f"{arg.aliases[0]} {choice_text}" if choice_text else arg.aliases[0]
        return text if arg.required else f"[{text}]"

    def get_options_text(self, plain_text: bool = False) -> str:
        """
        Render all defined arguments as a usage-style string.

        Returns:
            str: A visual description of argument flags and structure.
        """
        options_list = [self._option_usage(arg) for arg in self.parser.optional_arguments]
        options_list.extend(
            arg.get_choice_text() for arg in self.parser.positional_arguments
        )
        text = " ".join(options_list)
        return text if plain_text else escape(text)

    def get_usage(self, plain_text: bool = False) -> str:
        """
        Render the usage string for the parser.

        Returns:
            str: A formatted usage line showing syntax and argument structure.
        """
        options_text = self.get_options_text(plain_text)
        parts = [part for part in (self.parser.prog, options_text) if part]
        return f"usage: {' '.join(parts)}"

    def _describe(self, arg: Argument) -> str:
        help_text = arg.help or ""
        if arg.default is not None and not arg.is_flag:
            default = (
                " ".join(arg.default) if isinstance(arg.default, tuple) else arg.default
            )
            help_text = f"{help_text} (default: {default})".strip()
        if arg.required and not arg.positional:
            help_text = f"{help_text} (required)".strip()
        return escape(help_text)

    def _print_row(self, label: str, description: str) -> None:
        arg_line = f"  {escape(label):<{COLUMN_WIDTH}} "
        if description and len(label) > COLUMN_WIDTH:
            description = f"\n{'':<{COLUMN_WIDTH + 3}}{description}"
        self.console.print(f"{arg_line}{description}")

    def render(self) -> None:
        """
        Print formatted help text using Rich output.

        Includes usage, description, argument groups, and optional epilog.
        """
        self.console.print(f"[bold]{self.get_usage()}[/bold]\n")

        if self.parser.description:
            self.console.print(escape(self.parser.description) + "\n")

        positional = self.parser.positional_arguments
        if positional:
            self.console.print("[bold]positional:[/bold]")
            for arg in positional:
                self._print_row(arg.get_positional_text(), self._describe(arg))

        self.console.print("[bold]options:[/bold]")
        for arg in self.parser.optional_arguments:
            label = ", ".join(arg.aliases)
            choice_text = arg.get_choice_text()
            if choice_text:
                label = f"{label} {choice_text}"
            self._print_row(label, self._describe(arg))

        if self.parser.epilog:
            self.console.print("\n" + escape(self.parser.epilog), style="dim")
