"""Validation rules for tool names and descriptions."""

from __future__ import annotations

import re
from typing import Any

from questionary import ValidationError as PromptValidationError
from questionary import Validator

from toolbox.generator.errors import ValidationError

# Lowercase letters, digits and hyphens only
TOOL_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")

EMPTY_NAME_MESSAGE = "Tool name cannot be empty"
INVALID_NAME_MESSAGE = (
    "Invalid tool name: use lowercase letters, numbers, and hyphens only"
)
EMPTY_DESCRIPTION_MESSAGE = "Tool description cannot be empty"


def is_valid_tool_name(name: str) -> bool:
    """Check whether ``name`` is a usable tool slug."""
    return bool(name) and TOOL_NAME_PATTERN.fullmatch(name) is not None


def validate_tool_name(name: str) -> str:
    """Validate a tool name and return it trimmed.

    Args:
        name: Raw name as typed by the user.

    Returns:
        The trimmed name.

    Raises:
        ValidationError: If the name is empty or not a slug.
    """
    name = name.strip()
    if not name:
        raise ValidationError(EMPTY_NAME_MESSAGE, field="name")
    if not is_valid_tool_name(name):
        raise ValidationError(INVALID_NAME_MESSAGE, field="name")
    return name


def validate_description(description: str) -> str:
    """Validate a tool description and return it normalized.

    Runs of whitespace (including newlines from pasted text) collapse to a
    single space so the description fits on one line in generated files.

    Raises:
        ValidationError: If the description is blank.
    """
    normalized = " ".join(description.split())
    if not normalized:
        raise ValidationError(EMPTY_DESCRIPTION_MESSAGE, field="description")
    return normalized


class ToolNameValidator(Validator):
    """questionary validator for tool names on the ``generate`` command."""

    def validate(self, document: Any) -> None:
        """Validate tool name input.

        Raises:
            PromptValidationError: If the name is empty or not a slug.
        """
        try:
            validate_tool_name(document.text)
        except ValidationError as e:
            raise PromptValidationError(
                message=str(e),
                cursor_position=len(document.text),
            )


class DescriptionValidator(Validator):
    """questionary validator for tool descriptions."""

    def validate(self, document: Any) -> None:
        try:
            validate_description(document.text)
        except ValidationError as e:
            raise PromptValidationError(
                message=str(e),
                cursor_position=len(document.text),
            )
