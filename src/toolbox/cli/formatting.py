"""Rich formatting helpers for CLI output.

Panels for error/warning/success messages, the example and option blocks
used in command help, and a tree view of generated files.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

PANEL_WIDTH = 78


def syntax_highlight_bash(code: str) -> Syntax:
    """Highlight a shell command line."""
    return Syntax(
        code,
        "bash",
        theme="monokai",
        background_color="default",
        word_wrap=True,
    )


def create_example_panel(title: str, examples: Sequence[tuple[str, str]]) -> Panel:
    """Create panel with command examples.

    Args:
        title: Panel title
        examples: Sequence of (description, command) tuples

    Returns:
        Panel containing the examples
    """
    table = Table.grid(padding=(0, 0))
    table.add_column()
    for i, (description, code) in enumerate(examples):
        table.add_row(Text(f"{description}:", style="bold cyan"))
        table.add_row(syntax_highlight_bash(code))
        if i < len(examples) - 1:
            table.add_row("")

    return Panel(
        table,
        title=title,
        border_style="blue",
        width=PANEL_WIDTH,
        expand=False,
    )


def create_options_table(options: Sequence[tuple[str, str, str, bool]]) -> Table:
    """Create table showing command options.

    Args:
        options: Sequence of (option_name, short_flag, description, required) tuples

    Returns:
        Table with formatted options
    """
    table = Table(
        title="Options",
        border_style="blue",
        width=PANEL_WIDTH,
        show_header=True,
    )

    table.add_column("Option", style="cyan", width=20)
    table.add_column("Short", style="cyan", width=8)
    table.add_column("Description", width=36)
    table.add_column("Required", width=10)

    for option_name, short_flag, description, required in options:
        table.add_row(
            option_name,
            short_flag or "-",
            description,
            Text("Yes" if required else "No", style="red" if required else "dim"),
        )

    return table


def _panel(kind: str, color: str, content: str) -> Panel:
    return Panel(
        content,
        title=f"[bold {color}]{kind}[/bold {color}]",
        border_style=color,
        width=PANEL_WIDTH,
        expand=False,
    )


def format_error(message: str, context: str | None = None) -> Panel:
    """Create formatted error panel.

    Args:
        message: Error message (plain text)
        context: Optional hint for resolution

    Returns:
        Panel with error formatting
    """
    content = f"[bold red]{escape(message)}[/bold red]"
    if context:
        content += f"\n\n[dim]{escape(context)}[/dim]"
    return _panel("Error", "red", content)


def format_warning(message: str, context: str | None = None) -> Panel:
    """Create formatted warning panel."""
    content = f"[bold yellow]{escape(message)}[/bold yellow]"
    if context:
        content += f"\n\n[dim]{escape(context)}[/dim]"
    return _panel("Warning", "yellow", content)


def format_success(message: str, details: str | None = None) -> Panel:
    """Create formatted success panel."""
    content = f"[bold green]✓ {escape(message)}[/bold green]"
    if details:
        content += f"\n\n[dim]{escape(details)}[/dim]"
    return _panel("Success", "green", content)


def build_file_tree(files: Sequence[Path], root: Path) -> Tree:
    """Build a Rich Tree of generated files.

    Args:
        files: Paths of the written files
        root: Directory the tree is rooted at; files outside it are skipped

    Returns:
        Rich Tree object for display
    """
    tree = Tree(f"[bold]{escape(root.name or str(root))}/[/bold]")
    nodes: dict[tuple[str, ...], Tree] = {}

    for f in sorted(files):
        try:
            rel = f.relative_to(root)
        except ValueError:
            continue

        parts = rel.parts
        parent = tree
        for i, part in enumerate(parts[:-1]):
            key = parts[: i + 1]
            if key not in nodes:
                nodes[key] = parent.add(f"[blue]{escape(part)}/[/blue]")
            parent = nodes[key]

        fname = parts[-1]
        if fname.endswith(".py"):
            parent.add(f"[green]{escape(fname)}[/green]")
        else:
            parent.add(f"[yellow]{escape(fname)}[/yellow]")

    return tree
