"""Rich styles shared by every screen."""

from __future__ import annotations

from rich.markup import escape

TITLE = "bold #FAFAFA on #7D56F4"
SELECTED = "color(170)"
HELP = "color(241)"
ERROR = "bold color(196)"
SUCCESS = "bold color(46)"
INPUT = "color(33) on color(240)"

CURSOR = "█"


def styled(style: str, text: str) -> str:
    """Wrap already-safe markup text in a style tag."""
    return f"[{style}]{text}[/]"


def title(text: str) -> str:
    return styled(TITLE, f" {escape(text)} ")


def menu_lines(choices: list[str] | tuple[str, ...], cursor: int) -> list[str]:
    """One line per choice, the selected one marked with ``>``."""
    lines = []
    for index, choice in enumerate(choices):
        if index == cursor:
            lines.append(styled(SELECTED, f"> {escape(choice)}"))
        else:
            lines.append(f"  {escape(choice)}")
    return lines
