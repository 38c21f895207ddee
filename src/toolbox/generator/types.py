"""Data model for tool generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from toolbox.generator.validation import (
    INVALID_NAME_MESSAGE,
    is_valid_tool_name,
    validate_description,
    validate_tool_name,
)


class ToolType(str, Enum):
    """Kinds of tool skeleton the generator can produce."""

    CLI = "CLI"
    TUI = "TUI"
    WEB = "Web"

    @property
    def label(self) -> str:
        """Menu label, e.g. ``"CLI Tool"``."""
        return f"{self.value} Tool"

    @property
    def dir_name(self) -> str:
        """Directory key under the output root, e.g. ``"cli"``."""
        return self.value.lower()

    @classmethod
    def parse(cls, value: str) -> ToolType:
        """Parse a tool type name case-insensitively."""
        for tool_type in cls:
            if tool_type.value.lower() == value.strip().lower():
                return tool_type
        valid = [t.value.lower() for t in cls]
        raise ValueError(f"Invalid tool type '{value}'. Valid: {valid}")


class ToolSpec(BaseModel):
    """A fully collected, validated request to generate one tool.

    Frozen once built; the scaffolder consumes it as-is.
    """

    tool_type: ToolType = Field(..., description="Kind of skeleton to render")
    name: str = Field(..., description="Slug used for the directory and app name")
    description: str = Field(..., description="One-line human description")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure the name is a slug."""
        if not is_valid_tool_name(v):
            raise ValueError(INVALID_NAME_MESSAGE)
        return v

    @field_validator("description")
    @classmethod
    def normalize_description(cls, v: str) -> str:
        """Collapse whitespace and reject blank descriptions."""
        normalized = " ".join(v.split())
        if not normalized:
            raise ValueError("Tool description cannot be empty")
        return normalized

    @classmethod
    def create(cls, tool_type: ToolType, name: str, description: str) -> ToolSpec:
        """Build a spec from raw user input.

        Raises:
            ValidationError: (the generator's, not pydantic's) if the name or
                description is rejected.
        """
        return cls(
            tool_type=tool_type,
            name=validate_tool_name(name),
            description=validate_description(description),
        )


@dataclass(frozen=True)
class GeneratedArtifact:
    """One rendered file, relative to the tool's destination directory."""

    path: Path
    content: str


@dataclass(frozen=True)
class ScaffoldResult:
    """What a successful scaffold wrote."""

    destination: Path
    paths: tuple[Path, ...]
