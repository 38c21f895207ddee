"""Logging setup for toolbox and generated tools.

Console output goes through Rich's ``RichHandler``; file output uses a plain
``FileHandler``. Either can emit JSON lines instead of text.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

CONSOLE_OUTPUTS = ("", "stdout", "stderr")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Formats records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def parse_level(level: str) -> int:
    """Convert a level name to a ``logging`` level; unknown names mean info."""
    return LEVELS.get(level.strip().lower(), logging.INFO)


def writes_to_terminal(output: str) -> bool:
    """Whether a log output setting targets the terminal rather than a file."""
    return output in CONSOLE_OUTPUTS


def _build_handler(output: str, fmt: str) -> logging.Handler:
    handler: logging.Handler
    if writes_to_terminal(output):
        stream = sys.stderr if output == "stderr" else sys.stdout
        if fmt == "json":
            handler = logging.StreamHandler(stream)
            handler.setFormatter(JsonFormatter())
        else:
            handler = RichHandler(
                console=Console(file=stream),
                show_path=False,
                rich_tracebacks=True,
            )
            handler.setFormatter(logging.Formatter("%(message)s"))
        return handler

    log_path = Path(output)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    return handler


def configure_logging(
    level: str = "info",
    output: str = "",
    fmt: str = "text",
    name: str = "toolbox",
    handler: logging.Handler | None = None,
) -> logging.Logger:
    """Configure and return the named logger.

    Calling again for the same name replaces the previous handlers.

    Args:
        level: debug, info, warn or error
        output: "", "stdout", "stderr" or a file path (appended to)
        fmt: "text" or "json"
        name: Logger name
        handler: Use this handler instead of building one from output/fmt

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    logger.addHandler(handler or _build_handler(output, fmt))
    logger.setLevel(parse_level(level))
    logger.propagate = False
    return logger
