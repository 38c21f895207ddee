"""Effects a screen asks the navigation controller to perform."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from toolbox.generator.types import ToolSpec

if TYPE_CHECKING:
    from toolbox.tui.screens import Screen


@dataclass(frozen=True)
class Push:
    """Put a new screen on top of the stack."""

    screen: Screen


@dataclass(frozen=True)
class Pop:
    """Leave the current screen."""


@dataclass(frozen=True)
class Quit:
    """End the session."""


@dataclass(frozen=True)
class Generate:
    """Scaffold ``spec`` and report the outcome back to the wizard."""

    spec: ToolSpec


Effect = Union[Push, Pop, Quit, Generate]
