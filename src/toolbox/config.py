"""Configuration schema and loading for toolbox.

Config is a YAML file validated with Pydantic models, optionally overridden
by environment variables.

Example ``configs/config.yaml``:

    log_level: info
    log_file: ""          # "", "stdout", "stderr" or a file path
    log_format: text      # or json

    generator:
      output_root: cmd

    tui:
      theme: textual-dark
      mouse_events: true

Environment overrides use ``<APP>_<KEY>`` with nested keys joined by ``_``,
e.g. ``TOOLBOX_LOG_LEVEL=debug`` or ``TOOLBOX_GENERATOR_OUTPUT_ROOT=tools``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

APP_NAME = "toolbox"

LOG_LEVELS = ("debug", "info", "warn", "error")
LOG_FORMATS = ("text", "json")

CONFIG_FILENAMES = ["config.yaml", "config.yml"]


class ConfigError(Exception):
    """Raised when a config file cannot be read or fails validation."""

    pass


class GeneratorConfig(BaseModel):
    """Tool generator settings."""

    output_root: str = "cmd"  # Generated tools land in <output_root>/<type>/<name>/

    model_config = {"frozen": True}

    @property
    def output_path(self) -> Path:
        """Get output_root as Path."""
        return Path(self.output_root)


class TUIConfig(BaseModel):
    """Terminal UI settings."""

    theme: str = "textual-dark"
    mouse_events: bool = True

    model_config = {"frozen": True}


class ToolboxConfig(BaseModel):
    """Root configuration for toolbox and the tools it generates."""

    log_level: str = "info"
    log_file: str = ""
    log_format: str = "text"
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    tui: TUIConfig = Field(default_factory=TUIConfig)

    model_config = {"frozen": True}

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Validate and normalize log level."""
        level = str(v).strip().lower()
        if level == "warning":
            level = "warn"
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level '{v}'. Valid: {list(LOG_LEVELS)}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: Any) -> str:
        """Validate log format."""
        fmt = str(v).strip().lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"Invalid log_format '{v}'. Valid: {list(LOG_FORMATS)}")
        return fmt

    @classmethod
    def from_yaml(cls, content: str) -> ToolboxConfig:
        """Parse config from YAML string."""
        data = yaml.safe_load(content) or {}
        if not isinstance(data, dict):
            raise ConfigError("Config must be a YAML mapping")
        return cls.model_validate(data)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        return yaml.safe_dump(self.model_dump(), sort_keys=False)


def config_search_paths(app_name: str = APP_NAME) -> list[Path]:
    """Directories searched for a config file, in priority order."""
    return [
        Path("configs"),
        Path.home() / ".config" / app_name,
        Path("/etc") / app_name,
        Path("."),
    ]


def find_config(
    app_name: str = APP_NAME, search_paths: list[Path] | None = None
) -> Path | None:
    """
    Find a config file.

    Args:
        app_name: Application name used in the per-user and system paths
        search_paths: Directories to search instead of the defaults

    Returns:
        Path to the first config file found, or None
    """
    for directory in search_paths or config_search_paths(app_name):
        for filename in CONFIG_FILENAMES:
            config_path = directory / filename
            if config_path.is_file():
                return config_path
    return None


def _env_overrides(
    model: type[BaseModel], prefix: str, environ: Mapping[str, str]
) -> dict[str, Any]:
    """Collect ``PREFIX_FIELD`` environment values for a model, recursively."""
    overrides: dict[str, Any] = {}
    for field_name, field_info in model.model_fields.items():
        key = f"{prefix}_{field_name}".upper()
        annotation = field_info.annotation
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            nested = _env_overrides(annotation, key, environ)
            if nested:
                overrides[field_name] = nested
        elif key in environ:
            overrides[field_name] = environ[key]
    return overrides


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    path: Path | str | None = None,
    app_name: str = APP_NAME,
    environ: Mapping[str, str] | None = None,
) -> ToolboxConfig:
    """
    Load configuration.

    If path is not provided, searches the standard locations; when no file
    exists the defaults are used. Environment overrides apply in both cases.

    Args:
        path: Explicit path to config file
        app_name: Application name (search paths and env prefix)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Parsed ToolboxConfig

    Raises:
        ConfigError: If the file is unreadable or the config is invalid
    """
    if environ is None:
        environ = os.environ

    if path is None:
        path = find_config(app_name)
    else:
        path = Path(path)

    data: dict[str, Any] = {}
    if path is not None:
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error reading config file {path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file {path} must contain a YAML mapping")
        data = loaded

    env_prefix = app_name.replace("-", "_")
    data = _merge(data, _env_overrides(ToolboxConfig, env_prefix, environ))

    try:
        return ToolboxConfig.model_validate(data)
    except ValidationError as e:
        source = path if path is not None else "environment"
        raise ConfigError(f"Invalid configuration ({source}): {e}") from e


def write_default_config(path: Path | str) -> Path:
    """Write a starter config file with default values.

    Raises:
        FileExistsError: If the file already exists
    """
    path = Path(path)
    if path.exists():
        raise FileExistsError(f"{path} already exists")

    path.parent.mkdir(parents=True, exist_ok=True)
    content = "# toolbox configuration\n\n" + ToolboxConfig().to_yaml()
    path.write_text(content, encoding="utf-8")
    return path
