"""Navigation controller: owns the screen stack and runs effects."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rich.markup import escape
from typing_extensions import assert_never

from toolbox.context import AppContext
from toolbox.generator.errors import GeneratorError
from toolbox.generator.scaffolder import Scaffolder
from toolbox.generator.types import ScaffoldResult, ToolSpec
from toolbox.tui import wizard
from toolbox.tui.effects import Effect, Generate, Pop, Push, Quit
from toolbox.tui.keys import KeyPress
from toolbox.tui.screens import (
    GOODBYE,
    GeneratorWizard,
    MainMenu,
    Screen,
    render_screen,
    update_screen,
)


class NavigationController:
    """Routes input to the top screen and applies the effect it returns.

    The stack always has the main menu at the bottom. Every generator
    failure is caught here and shown in the wizard, so nothing raised by
    scaffolding escapes ``handle``.
    """

    def __init__(
        self, scaffolder: Scaffolder, logger: logging.Logger | None = None
    ) -> None:
        self.scaffolder = scaffolder
        self.logger = logger or logging.getLogger(__name__)
        self._stack: list[Screen] = [MainMenu.initial()]
        self._running = True

    @classmethod
    def from_context(cls, context: AppContext) -> NavigationController:
        return cls(context.scaffolder(), logger=context.logger.getChild("tui"))

    @property
    def running(self) -> bool:
        return self._running

    @property
    def stack(self) -> tuple[Screen, ...]:
        return tuple(self._stack)

    @property
    def top(self) -> Screen:
        return self._stack[-1]

    def handle(self, key: KeyPress) -> str:
        """Process one key press and return the new frame."""
        if not self._running:
            return self.frame()

        screen, effect = update_screen(self.top, key)
        self._stack[-1] = screen
        if effect is not None:
            self._apply(effect)
        return self.frame()

    def feed(self, keys: Iterable[KeyPress]) -> str:
        """Process key presses in order; returns the last frame."""
        for key in keys:
            self.handle(key)
        return self.frame()

    def frame(self) -> str:
        if not self._running:
            return f"\n{escape(GOODBYE)}\n"
        return render_screen(self.top)

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, Push):
            self.logger.debug("Entering %s", effect.screen.kind)
            self._stack.append(effect.screen)
        elif isinstance(effect, Pop):
            if len(self._stack) > 1:
                left = self._stack.pop()
                self.logger.debug("Leaving %s", left.kind)
        elif isinstance(effect, Quit):
            self.logger.debug("Session ended")
            self._running = False
            self._stack[1:] = []
        elif isinstance(effect, Generate):
            self._generate(effect.spec)
        else:
            assert_never(effect)

    def _generate(self, spec: ToolSpec) -> None:
        screen = self.top
        if not isinstance(screen, GeneratorWizard):
            raise RuntimeError(f"Generate requested from {screen.kind} screen")

        outcome: ScaffoldResult | GeneratorError
        try:
            outcome = self.scaffolder.scaffold(spec)
        except GeneratorError as e:
            self.logger.error(
                "Error generating %s tool '%s': %s", spec.tool_type.value, spec.name, e
            )
            outcome = e

        state = wizard.resolve_generation(screen.state, outcome)
        self._stack[-1] = GeneratorWizard(state=state)
