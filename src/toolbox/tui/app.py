"""Textual driver for the session engine.

Turns terminal key and paste events into ``KeyPress`` values for the
navigation controller and shows each frame it returns.
"""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from toolbox.context import AppContext
from toolbox.tui.controller import NavigationController
from toolbox.tui.keys import KeyPress


class ToolboxApp(App):  # type: ignore
    """Full-screen toolbox session."""

    CSS = """
    Screen {
        background: $surface;
    }

    #frame {
        padding: 1 2;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "session_quit", "Quit", show=False, priority=True),
    ]

    TITLE = "Toolbox TUI"

    def __init__(
        self,
        controller: NavigationController,
        initial_theme: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize app.

        Args:
            controller: Session engine driven by this app
            initial_theme: Textual theme to apply on mount, if available
            **kwargs: Additional App arguments
        """
        super().__init__(**kwargs)
        self.controller = controller
        self.initial_theme = initial_theme

    def compose(self) -> ComposeResult:
        """Compose the single frame widget."""
        yield Static(Text.from_markup(self.controller.frame()), id="frame")

    def on_mount(self) -> None:
        if self.initial_theme and self.initial_theme in self.available_themes:
            self.theme = self.initial_theme

    def on_key(self, event: events.Key) -> None:
        """Forward a key press to the controller."""
        event.stop()
        event.prevent_default()
        text = event.character if event.is_printable and event.character else ""
        self.send_key(KeyPress(key=event.key, text=text))

    def on_paste(self, event: events.Paste) -> None:
        """Forward pasted text as a single insert."""
        event.stop()
        if event.text:
            self.send_key(KeyPress.paste(event.text))

    def action_session_quit(self) -> None:
        self.send_key(KeyPress.named("ctrl+c"))

    def send_key(self, key: KeyPress) -> None:
        frame = self.controller.handle(key)
        if not self.controller.running:
            self.exit(frame)
            return
        self.query_one("#frame", Static).update(Text.from_markup(frame))


def launch_tui(context: AppContext) -> None:
    """Run the interactive session until the user quits."""
    controller = NavigationController.from_context(context)
    app = ToolboxApp(controller, initial_theme=context.config.tui.theme)
    context.logger.info("Starting TUI session")
    frame = app.run(mouse=context.config.tui.mouse_events)
    if frame:
        context.console.print(Text.from_markup(frame))
