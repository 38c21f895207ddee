"""Exceptions raised by tool generation.

Every failure of a generation attempt is a ``GeneratorError`` so callers
(the wizard boundary in the navigation controller, the ``generate`` CLI
command) can catch one type and surface the message.
"""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for all tool generation failures."""

    pass


class ValidationError(GeneratorError):
    """Raised when a tool name or description is empty or malformed."""

    def __init__(self, message: str, field: str = "") -> None:
        super().__init__(message)
        self.field = field


class NameCollisionError(GeneratorError):
    """Raised when a generated file would replace an existing file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"file already exists: {path}")
        self.path = path


class FilesystemError(GeneratorError):
    """Raised when a directory or file cannot be created.

    The underlying OS message is kept verbatim in the exception text.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TemplateError(GeneratorError):
    """Raised when the built-in template set is inconsistent.

    This is a defect in the templates themselves, never a consequence of
    user input.
    """

    pass
