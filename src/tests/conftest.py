"""Shared fixtures for toolbox tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from toolbox.generator.scaffolder import Scaffolder
from toolbox.generator.types import ToolSpec, ToolType
from toolbox.tui.controller import NavigationController


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Empty directory generated tools are written under."""
    root = tmp_path / "cmd"
    root.mkdir()
    return root


@pytest.fixture
def scaffolder(output_root: Path) -> Scaffolder:
    return Scaffolder(output_root, logger=logging.getLogger("toolbox.tests"))


@pytest.fixture
def controller(scaffolder: Scaffolder) -> NavigationController:
    return NavigationController(scaffolder)


@pytest.fixture
def cli_spec() -> ToolSpec:
    return ToolSpec.create(ToolType.CLI, "pinger", "Pings a host")
