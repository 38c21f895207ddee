"""Integration tests driving the Textual app with a pilot."""

from pathlib import Path

import pytest
from rich.text import Text
from textual import events
from textual.widgets import Static

from toolbox.tui.app import ToolboxApp
from toolbox.tui.controller import NavigationController
from toolbox.tui.screens import GOODBYE, MENU_ITEMS, TOOL_GENERATOR, GeneratorWizard
from toolbox.tui.wizard import WizardStep


def frame_text(app: ToolboxApp) -> str:
    """Plain text currently shown by the frame widget."""
    renderable = app.query_one("#frame", Static).renderable
    assert isinstance(renderable, Text)
    return renderable.plain


def open_generator_keys() -> list[str]:
    return ["down"] * MENU_ITEMS.index(TOOL_GENERATOR) + ["enter"]


@pytest.mark.integration
class TestToolboxApp:
    """Keys and pastes reach the controller and frames reach the screen."""

    @pytest.mark.asyncio
    async def test_initial_frame(self, controller: NavigationController) -> None:
        app = ToolboxApp(controller)
        async with app.run_test():
            assert "Toolbox TUI" in frame_text(app)
            assert "> File Operations" in frame_text(app)

    @pytest.mark.asyncio
    async def test_navigation_updates_frame(
        self, controller: NavigationController
    ) -> None:
        app = ToolboxApp(controller)
        async with app.run_test() as pilot:
            await pilot.press("j", "enter")
            await pilot.pause()
            assert "Network Tools" in frame_text(app)
            assert "Press 'b' or 'esc' to go back" in frame_text(app)

            await pilot.press("b")
            await pilot.pause()
            assert "> Network Tools" in frame_text(app)
            assert "Press q to quit, enter to select." in frame_text(app)

    @pytest.mark.asyncio
    async def test_generate_tool(
        self, controller: NavigationController, output_root: Path
    ) -> None:
        app = ToolboxApp(controller)
        async with app.run_test() as pilot:
            await pilot.press(*open_generator_keys())
            await pilot.press("enter")
            await pilot.press(*"pinger")
            await pilot.press("enter")
            await pilot.press(*"pings")
            await pilot.press("enter")
            await pilot.pause()

            shown = frame_text(app)
            assert "Successfully generated CLI tool: pinger" in shown
            assert "main.py" in shown
            assert shown == Text.from_markup(controller.frame()).plain

        assert (output_root / "cli" / "pinger" / "main.py").is_file()

    @pytest.mark.asyncio
    async def test_paste_is_single_insert(
        self, controller: NavigationController
    ) -> None:
        app = ToolboxApp(controller)
        async with app.run_test() as pilot:
            await pilot.press(*open_generator_keys())
            await pilot.press("enter")
            app.post_message(events.Paste("q-tool"))
            await pilot.pause()

            top = controller.top
            assert isinstance(top, GeneratorWizard)
            assert top.state.step is WizardStep.NAME_INPUT
            assert top.state.buffer == "q-tool"
            assert controller.running

    @pytest.mark.asyncio
    async def test_q_exits_with_goodbye(self, controller: NavigationController) -> None:
        app = ToolboxApp(controller)
        async with app.run_test() as pilot:
            await pilot.press("q")

        assert not controller.running
        assert app.return_value is not None
        assert GOODBYE in app.return_value

    @pytest.mark.asyncio
    async def test_session_quit_action(self, controller: NavigationController) -> None:
        app = ToolboxApp(controller)
        async with app.run_test() as pilot:
            await pilot.press(*open_generator_keys())
            await pilot.press("enter")
            app.action_session_quit()

        assert not controller.running
        assert len(controller.stack) == 1
