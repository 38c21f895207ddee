"""Click command and group classes that render help with Rich.

Commands can carry usage examples, shown in a panel after the standard
help text together with a table of their options.
"""

from __future__ import annotations

from collections.abc import Sequence
from io import StringIO
from typing import Any

import click
from rich.console import Console

from toolbox.cli.formatting import create_example_panel, create_options_table


class RichHelpFormatter(click.HelpFormatter):
    """Help formatter that appends Rich example panels and option tables."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples: list[tuple[str, str]] = []
        self.options_data: list[tuple[str, str, str, bool]] = []

    def add_examples(self, examples: Sequence[tuple[str, str]]) -> None:
        """Add examples to help output.

        Args:
            examples: (description, command) tuples
        """
        self.examples = list(examples)

    def add_options_table(self, options: Sequence[tuple[str, str, str, bool]]) -> None:
        """Add options table to help output.

        Args:
            options: (name, short_flag, description, required) tuples
        """
        self.options_data = list(options)

    def getvalue(self) -> str:
        """Get formatted help text with Rich components."""
        base_output = super().getvalue()

        output_buffer = StringIO()
        console = Console(file=output_buffer, width=80, force_terminal=True)
        console.print(base_output, soft_wrap=True, markup=False, highlight=False)

        if self.options_data:
            console.print()
            console.print(create_options_table(self.options_data))

        if self.examples:
            console.print()
            console.print(create_example_panel("Examples", self.examples))

        return output_buffer.getvalue()


def _options_rows(
    command: click.Command, ctx: click.Context
) -> list[tuple[str, str, str, bool]]:
    rows: list[tuple[str, str, str, bool]] = []
    for param in command.get_params(ctx):
        if isinstance(param, click.Option):
            names = sorted(param.opts, key=len, reverse=True)
            long_name = names[0] if names else ""
            short_flag = names[1] if len(names) > 1 else ""
            rows.append((long_name, short_flag, param.help or "", param.required))
    return rows


def _rich_help(
    command: click.Command, ctx: click.Context, examples: Sequence[tuple[str, str]]
) -> str:
    """Render help for a command or group, with examples appended."""
    formatter = RichHelpFormatter(width=80)
    command.format_help(ctx, formatter)
    if not isinstance(command, click.Group):
        rows = _options_rows(command, ctx)
        if rows:
            formatter.add_options_table(rows)
    if examples:
        formatter.add_examples(examples)
    return formatter.getvalue()


class RichCommand(click.Command):
    """Click command whose help includes an options table and examples."""

    def __init__(
        self, *args: Any, examples: Sequence[tuple[str, str]] = (), **kwargs: Any
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = list(examples)

    def get_help(self, ctx: click.Context) -> str:
        return _rich_help(self, ctx, self.examples)


class RichGroup(click.Group):
    """Click group that renders its help through ``RichHelpFormatter``."""

    command_class = RichCommand

    def __init__(
        self, *args: Any, examples: Sequence[tuple[str, str]] = (), **kwargs: Any
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = list(examples)

    def get_help(self, ctx: click.Context) -> str:
        return _rich_help(self, ctx, self.examples)
