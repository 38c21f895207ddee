"""Screen variants of the session.

``Screen`` is a closed union; ``update_screen`` and ``render_screen`` are
the only dispatch points and both are exhaustive over it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal, Union

from rich.markup import escape
from typing_extensions import assert_never

from toolbox.tui import styles, wizard
from toolbox.tui.effects import Effect, Pop, Push, Quit
from toolbox.tui.keys import Action, KeyPress, menu_action
from toolbox.tui.wizard import WizardState

APP_TITLE = "Toolbox TUI"
GOODBYE = "Thanks for using Toolbox TUI!"
TOOL_GENERATOR = "🛠️  Tool Generator"
EXIT = "Exit"

MENU_HELP = "Press q to quit, enter to select."
FEATURE_HELP = "Press 'b' or 'esc' to go back, 'q' to quit."


@dataclass(frozen=True)
class Feature:
    """Static description of a feature area that is not implemented yet."""

    title: str
    intro: str
    heading: str
    items: tuple[str, ...]


FEATURES: tuple[Feature, ...] = (
    Feature(
        title="File Operations",
        intro="This is where file operations would be implemented.",
        heading="Features could include:",
        items=(
            "File hash calculation",
            "File size analysis",
            "Directory tree view",
            "File search",
        ),
    ),
    Feature(
        title="Network Tools",
        intro="Network utilities would be implemented here.",
        heading="Features could include:",
        items=("Ping tool", "Port scanner", "Network interface info", "DNS lookup"),
    ),
    Feature(
        title="System Information",
        intro="System information would be displayed here.",
        heading="Information could include:",
        items=(
            "OS and version",
            "CPU information",
            "Memory usage",
            "Disk usage",
            "Running processes",
        ),
    ),
    Feature(
        title="String Utilities",
        intro="String manipulation tools would be here.",
        heading="Operations could include:",
        items=(
            "Case conversions",
            "String reversal",
            "Text encoding/decoding",
            "Regular expression testing",
        ),
    ),
    Feature(
        title="Random Generators",
        intro="Random generation tools would be here.",
        heading="Generators could include:",
        items=("Random strings", "UUIDs", "Passwords", "Random numbers"),
    ),
    Feature(
        title="Configuration",
        intro="Configuration settings would be here.",
        heading="Settings could include:",
        items=(
            "Theme selection",
            "Default output formats",
            "Logging preferences",
            "Key bindings",
        ),
    ),
)

MENU_ITEMS: tuple[str, ...] = tuple(f.title for f in FEATURES) + (TOOL_GENERATOR, EXIT)


@dataclass(frozen=True)
class MainMenu:
    cursor: int = 0
    kind: Literal["main_menu"] = field(default="main_menu", init=False)

    @classmethod
    def initial(cls) -> MainMenu:
        return cls()


@dataclass(frozen=True)
class FeatureScreen:
    feature: Feature
    kind: Literal["feature"] = field(default="feature", init=False)

    @classmethod
    def initial(cls, feature: Feature) -> FeatureScreen:
        return cls(feature=feature)


@dataclass(frozen=True)
class GeneratorWizard:
    state: WizardState = field(default_factory=wizard.initial_state)
    kind: Literal["generator_wizard"] = field(default="generator_wizard", init=False)

    @classmethod
    def initial(cls) -> GeneratorWizard:
        return cls()


Screen = Union[MainMenu, FeatureScreen, GeneratorWizard]


def _update_main_menu(menu: MainMenu, key: KeyPress) -> tuple[Screen, Effect | None]:
    action = menu_action(key)
    if action is Action.QUIT:
        return menu, Quit()
    if action is Action.UP:
        return replace(menu, cursor=max(0, menu.cursor - 1)), None
    if action is Action.DOWN:
        return replace(menu, cursor=min(len(MENU_ITEMS) - 1, menu.cursor + 1)), None
    if action is not Action.CONFIRM:
        return menu, None

    choice = MENU_ITEMS[menu.cursor]
    if choice == EXIT:
        return menu, Quit()
    if choice == TOOL_GENERATOR:
        return menu, Push(GeneratorWizard.initial())
    return menu, Push(FeatureScreen.initial(FEATURES[menu.cursor]))


def _update_feature(screen: FeatureScreen, key: KeyPress) -> tuple[Screen, Effect | None]:
    action = menu_action(key)
    if action is Action.QUIT:
        return screen, Quit()
    if action is Action.BACK:
        return screen, Pop()
    return screen, None


def update_screen(screen: Screen, key: KeyPress) -> tuple[Screen, Effect | None]:
    """Route a key press to a screen.

    Returns:
        The screen's next value and the effect it requests, if any.
    """
    if isinstance(screen, MainMenu):
        return _update_main_menu(screen, key)
    elif isinstance(screen, FeatureScreen):
        return _update_feature(screen, key)
    elif isinstance(screen, GeneratorWizard):
        state, effect = wizard.update(screen.state, key)
        return replace(screen, state=state), effect
    else:
        assert_never(screen)


def _render_main_menu(menu: MainMenu) -> str:
    lines = [styles.title(APP_TITLE), ""]
    lines.extend(styles.menu_lines(MENU_ITEMS, menu.cursor))
    lines.append("")
    lines.append(styles.styled(styles.HELP, MENU_HELP))
    return "\n".join(lines) + "\n"


def _render_feature(screen: FeatureScreen) -> str:
    feature = screen.feature
    lines = [styles.title(feature.title), ""]
    lines.append(escape(feature.intro))
    lines.append(escape(feature.heading))
    lines.extend(f"  • {escape(item)}" for item in feature.items)
    lines.append("")
    lines.append(styles.styled(styles.HELP, escape(FEATURE_HELP)))
    return "\n".join(lines) + "\n"


def render_screen(screen: Screen) -> str:
    """Render a screen as Rich markup."""
    if isinstance(screen, MainMenu):
        return _render_main_menu(screen)
    elif isinstance(screen, FeatureScreen):
        return _render_feature(screen)
    elif isinstance(screen, GeneratorWizard):
        return wizard.render(screen.state)
    else:
        assert_never(screen)
