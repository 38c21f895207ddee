"""Tool generation: data model, validation, template rendering, scaffolding."""

from toolbox.generator.errors import (
    FilesystemError,
    GeneratorError,
    NameCollisionError,
    TemplateError,
    ValidationError,
)
from toolbox.generator.renderer import TemplateRenderer
from toolbox.generator.scaffolder import Scaffolder
from toolbox.generator.types import (
    GeneratedArtifact,
    ScaffoldResult,
    ToolSpec,
    ToolType,
)
from toolbox.generator.validation import (
    is_valid_tool_name,
    validate_description,
    validate_tool_name,
)

__all__ = [
    "FilesystemError",
    "GeneratedArtifact",
    "GeneratorError",
    "NameCollisionError",
    "ScaffoldResult",
    "Scaffolder",
    "TemplateError",
    "TemplateRenderer",
    "ToolSpec",
    "ToolType",
    "ValidationError",
    "is_valid_tool_name",
    "validate_description",
    "validate_tool_name",
]
