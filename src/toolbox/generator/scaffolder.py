"""Filesystem scaffolding for generated tools.

Writes the rendered artifacts for a ``ToolSpec`` under
``<root>/<tool type>/<name>/``, never replacing a file that already exists.
"""

from __future__ import annotations

import logging
from pathlib import Path

from toolbox.generator.errors import FilesystemError, NameCollisionError
from toolbox.generator.renderer import TemplateRenderer
from toolbox.generator.types import GeneratedArtifact, ScaffoldResult, ToolSpec

# Owner rwx, group rx
DIRECTORY_MODE = 0o750


class Scaffolder:
    """Creates a tool's directory and writes its rendered files.

    Holds no state between calls; the only side effect of ``scaffold`` is the
    filesystem mutation under the computed destination directory.
    """

    def __init__(
        self,
        root: Path,
        renderer: TemplateRenderer | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize scaffolder.

        Args:
            root: Directory under which ``<type>/<name>/`` destinations live.
            renderer: Template renderer (defaults to the built-in templates).
            logger: Logger for diagnostics.
        """
        self.root = Path(root)
        self.renderer = renderer or TemplateRenderer()
        self.logger = logger or logging.getLogger(__name__)

    def destination_for(self, spec: ToolSpec) -> Path:
        """Directory the spec's files are written to."""
        return self.root / spec.tool_type.dir_name / spec.name

    def scaffold(self, spec: ToolSpec) -> ScaffoldResult:
        """Render and write every artifact for ``spec``.

        All artifact paths are checked for collisions before the first write,
        so a collision leaves the filesystem untouched.

        Raises:
            NameCollisionError: If any target file already exists.
            FilesystemError: If a directory or file cannot be created.
            TemplateError: If the built-in templates are inconsistent.
        """
        artifacts = self.renderer.render(spec)
        destination = self.destination_for(spec)

        for artifact in artifacts:
            target = destination / artifact.path
            if target.exists():
                self.logger.warning("Refusing to overwrite %s", target)
                raise NameCollisionError(target)

        self._make_dir(destination)

        written: list[Path] = []
        for artifact in artifacts:
            written.append(self._write(destination, artifact))

        self.logger.info(
            "Generated %s tool '%s' in %s (%d files)",
            spec.tool_type.value,
            spec.name,
            destination,
            len(written),
        )
        return ScaffoldResult(destination=destination, paths=tuple(written))

    def _make_dir(self, path: Path) -> None:
        try:
            path.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(
                f"failed to create directory {path}: {e.strerror or e}", path=path
            ) from e

    def _write(self, destination: Path, artifact: GeneratedArtifact) -> Path:
        target = destination / artifact.path
        if target.parent != destination:
            self._make_dir(target.parent)

        try:
            # "x" fails if another writer created the file since the check
            with open(target, "x", encoding="utf-8") as f:
                f.write(artifact.content)
        except FileExistsError as e:
            raise NameCollisionError(target) from e
        except OSError as e:
            raise FilesystemError(
                f"failed to write {target}: {e.strerror or e}", path=target
            ) from e

        self.logger.debug("Wrote %s (%d bytes)", target, len(artifact.content))
        return target
