"""Input events and the two keymaps the session engine interprets them with.

Menu-style screens map keys to navigation actions; text-entry steps treat
almost every key as literal text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    """Abstract intent of a key press after keymap lookup."""

    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    BACK = "back"
    RETRY = "retry"
    QUIT = "quit"
    DELETE = "delete"
    INSERT = "insert"


@dataclass(frozen=True)
class KeyPress:
    """A single input event.

    ``key`` is the terminal key name (``up``, ``enter``, ``ctrl+c``, ``a``...)
    and ``text`` the printable payload, which is empty for control keys and
    holds the whole string for a paste.
    """

    key: str
    text: str = ""

    @classmethod
    def char(cls, ch: str) -> KeyPress:
        """Key press for a single printable character."""
        return cls(key="space" if ch == " " else ch, text=ch)

    @classmethod
    def named(cls, key: str) -> KeyPress:
        """Key press for a non-printable key such as ``enter``."""
        return cls(key=key)

    @classmethod
    def paste(cls, text: str) -> KeyPress:
        """Event carrying pasted text."""
        return cls(key="paste", text=text)

    @classmethod
    def from_text(cls, text: str) -> list[KeyPress]:
        """One key press per character, as if ``text`` was typed."""
        return [cls.char(ch) for ch in text]


MENU_KEYMAP: dict[str, Action] = {
    "up": Action.UP,
    "k": Action.UP,
    "down": Action.DOWN,
    "j": Action.DOWN,
    "enter": Action.CONFIRM,
    "space": Action.CONFIRM,
    "escape": Action.BACK,
    "b": Action.BACK,
    "r": Action.RETRY,
    "q": Action.QUIT,
    "ctrl+c": Action.QUIT,
}

TEXT_KEYMAP: dict[str, Action] = {
    "enter": Action.CONFIRM,
    "escape": Action.BACK,
    "backspace": Action.DELETE,
    "ctrl+h": Action.DELETE,
    "ctrl+c": Action.QUIT,
}


def menu_action(key: KeyPress) -> Action | None:
    """Interpret a key on a menu-style screen; unmapped keys are ignored."""
    return MENU_KEYMAP.get(key.key)


def printable(text: str) -> str:
    """Strip control characters from event text."""
    return "".join(ch for ch in text if ch.isprintable())


def text_action(key: KeyPress) -> Action | None:
    """Interpret a key during text entry.

    Anything outside the keymap that carries printable text is an insert.
    """
    action = TEXT_KEYMAP.get(key.key)
    if action is not None:
        return action
    if printable(key.text):
        return Action.INSERT
    return None
