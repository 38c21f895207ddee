"""Template rendering for tool skeletons.

Selects the fixed template set for a ``ToolSpec``'s type and substitutes the
tool's name, description and name-derived identifiers into it. There is no
branching inside templates; all variation comes from the substitution
context.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape
from jinja2 import TemplateError as JinjaTemplateError

from toolbox.generator.errors import TemplateError
from toolbox.generator.templates import TEMPLATES
from toolbox.generator.types import GeneratedArtifact, ToolSpec, ToolType

# ToolType -> (template name, artifact path relative to the tool directory)
TEMPLATE_SETS: dict[ToolType, tuple[tuple[str, Path], ...]] = {
    ToolType.CLI: (("cli/main.py", Path("main.py")),),
    ToolType.TUI: (("tui/main.py", Path("main.py")),),
    ToolType.WEB: (
        ("web/main.py", Path("main.py")),
        ("web/templates/index.html", Path("templates") / "index.html"),
        ("web/static/style.css", Path("static") / "style.css"),
    ),
}


def class_name_for(name: str) -> str:
    """PascalCase form of a tool slug, e.g. ``file-hasher`` -> ``FileHasher``."""
    class_name = "".join(part.capitalize() for part in name.split("-") if part)
    if not class_name[:1].isalpha():
        class_name = f"Tool{class_name}"
    return class_name


class TemplateRenderer:
    """Renders the built-in skeleton templates for a ``ToolSpec``."""

    def __init__(self, templates: dict[str, str] | None = None) -> None:
        """Initialize renderer.

        Args:
            templates: Template name -> source mapping. Defaults to the
                built-in set; tests pass their own to exercise failures.
        """
        self.env = Environment(
            loader=DictLoader(templates if templates is not None else TEMPLATES),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def build_context(self, spec: ToolSpec) -> dict[str, Any]:
        """Build the substitution context for a spec."""
        return {
            "tool_name": spec.name,
            "tool_type": spec.tool_type.value,
            "description": spec.description,
            "description_literal": repr(spec.description),
            "class_name": class_name_for(spec.name),
        }

    def render(self, spec: ToolSpec) -> tuple[GeneratedArtifact, ...]:
        """Render every artifact for the spec's tool type.

        Returns:
            Artifacts in template-set order; the primary source file first.

        Raises:
            TemplateError: If a template is missing, malformed, or refers to
                an unknown variable.
        """
        context = self.build_context(spec)
        artifacts: list[GeneratedArtifact] = []

        for template_name, relative_path in TEMPLATE_SETS[spec.tool_type]:
            try:
                template = self.env.get_template(template_name)
                content = template.render(**context)
            except JinjaTemplateError as e:
                raise TemplateError(
                    f"template '{template_name}' is invalid: {e}"
                ) from e
            artifacts.append(GeneratedArtifact(path=relative_path, content=content))

        return tuple(artifacts)
