# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for comparable-version tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project with a versions file configured."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[project]
name = "test-project"
version = "1.0.0"

[tool.comparable-version]
descending = true
versions-file = "versions.txt"
"""
    )

    versions = project_dir / "versions.txt"
    versions.write_text(
        """# release history
1.0
1.0-rc-1

1.1-SNAPSHOT
1.0.1
"""
    )

    yield project_dir
