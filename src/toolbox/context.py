"""Explicit dependencies shared by the CLI, the session engine and the TUI."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.console import Console

from toolbox.config import APP_NAME, ToolboxConfig
from toolbox.generator.scaffolder import Scaffolder
from toolbox.logger import configure_logging


@dataclass
class AppContext:
    """Config, logger and console built once at startup and passed down."""

    config: ToolboxConfig
    logger: logging.Logger
    console: Console = field(default_factory=Console)

    def scaffolder(self) -> Scaffolder:
        """Scaffolder rooted at the configured output directory."""
        return Scaffolder(
            self.config.generator.output_path,
            logger=self.logger.getChild("generator"),
        )


def build_context(
    config: ToolboxConfig,
    log_override: str | None = None,
    handler: logging.Handler | None = None,
    console: Console | None = None,
) -> AppContext:
    """Configure logging from ``config`` and bundle the result.

    Args:
        config: Loaded configuration
        log_override: Level forced by ``--verbose``/``--debug``
        handler: Log handler to use instead of the configured output
        console: Console for user-facing output

    Returns:
        AppContext ready to hand to commands
    """
    logger = configure_logging(
        level=log_override or config.log_level,
        output=config.log_file,
        fmt=config.log_format,
        name=APP_NAME,
        handler=handler,
    )
    return AppContext(config=config, logger=logger, console=console or Console())
