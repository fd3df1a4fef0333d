# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

TOOL_NAME = "comparable-version"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class VersionConfig:
    """Configuration read from ``[tool.comparable-version]``.

    Attributes:
        project_dir: Directory containing pyproject.toml
        descending: Sort newest first by default
        versions_file: File with one version per line, used when the
            command line names no versions
    """

    project_dir: Path
    descending: bool = False
    versions_file: Optional[Path] = None

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "VersionConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            VersionConfig instance

        Raises:
            ConfigError: If the file is invalid or a setting has the wrong type
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "VersionConfig":
        """Create VersionConfig from a parsed pyproject.toml dictionary."""
        tool = pyproject.get("tool", {}).get(TOOL_NAME, {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool.{TOOL_NAME}] must be a table")

        descending = tool.get("descending", False)
        if not isinstance(descending, bool):
            raise ConfigError(f"tool.{TOOL_NAME}.descending must be a boolean")

        versions_file = None
        raw_file = tool.get("versions-file")
        if raw_file is not None:
            if not isinstance(raw_file, str) or not raw_file:
                raise ConfigError(f"tool.{TOOL_NAME}.versions-file must be a non-empty string")
            versions_file = project_dir / raw_file

        return cls(
            project_dir=project_dir,
            descending=descending,
            versions_file=versions_file,
        )

    def read_versions(self) -> list[str]:
        """Read versions from the configured versions file.

        Blank lines and lines starting with ``#`` are skipped.

        Raises:
            ConfigError: If no versions file is configured
            FileNotFoundError: If the versions file doesn't exist
        """
        if self.versions_file is None:
            raise ConfigError(f"No versions given and tool.{TOOL_NAME}.versions-file is not set")
        if not self.versions_file.exists():
            raise FileNotFoundError(f"Versions file not found: {self.versions_file}")

        versions = []
        for line in self.versions_file.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                versions.append(line)
        return versions


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory containing pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        if (current / "pyproject.toml").exists():
            return current
        if current == current.parent:
            return None
        current = current.parent


def load_config(project_dir: Optional[str | Path] = None) -> VersionConfig:
    """Load configuration for the given or discovered project directory.

    Without a pyproject.toml the defaults are returned.

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    root = find_project_root(project_dir)
    if root is None:
        logger.debug("No pyproject.toml found, using default configuration")
        return VersionConfig(project_dir=Path(project_dir or Path.cwd()))

    logger.debug("Loading configuration from %s", root / "pyproject.toml")
    return VersionConfig.from_pyproject(root)
