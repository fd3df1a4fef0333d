# SPDX-License-Identifier: MIT
"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from comparable_version.config import (
    ConfigError,
    VersionConfig,
    find_project_root,
    load_config,
)


class TestVersionConfig:
    """Tests for VersionConfig."""

    def test_from_pyproject(self, temp_project: Path) -> None:
        """Test loading settings from pyproject.toml."""
        config = VersionConfig.from_pyproject(temp_project)

        assert config.project_dir == temp_project
        assert config.descending is True
        assert config.versions_file == temp_project / "versions.txt"

    def test_defaults_without_tool_table(self, tmp_path: Path) -> None:
        """Test that a pyproject.toml without our table gives defaults."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "other"\n')

        config = VersionConfig.from_pyproject(tmp_path)

        assert config.descending is False
        assert config.versions_file is None

    def test_missing_pyproject(self, tmp_path: Path) -> None:
        """Test that a missing pyproject.toml raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            VersionConfig.from_pyproject(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test that broken TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[tool.comparable-version\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            VersionConfig.from_pyproject(tmp_path)

    def test_wrong_descending_type(self, tmp_path: Path) -> None:
        """Test that a non-boolean descending setting is rejected."""
        with pytest.raises(ConfigError, match="descending"):
            VersionConfig.from_pyproject_dict(
                {"tool": {"comparable-version": {"descending": "yes"}}}, tmp_path
            )

    def test_wrong_versions_file_type(self, tmp_path: Path) -> None:
        """Test that a non-string versions-file setting is rejected."""
        with pytest.raises(ConfigError, match="versions-file"):
            VersionConfig.from_pyproject_dict(
                {"tool": {"comparable-version": {"versions-file": 3}}}, tmp_path
            )

    def test_tool_not_a_table(self, tmp_path: Path) -> None:
        """Test that a scalar tool entry is rejected."""
        with pytest.raises(ConfigError, match="table"):
            VersionConfig.from_pyproject_dict({"tool": {"comparable-version": 1}}, tmp_path)

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        """Test that unrelated settings are ignored."""
        config = VersionConfig.from_pyproject_dict(
            {"tool": {"comparable-version": {"colour": "blue"}}}, tmp_path
        )
        assert config.descending is False


class TestReadVersions:
    """Tests for reading the versions file."""

    def test_read_versions(self, temp_project: Path) -> None:
        """Test that comments and blank lines are skipped."""
        config = VersionConfig.from_pyproject(temp_project)

        assert config.read_versions() == ["1.0", "1.0-rc-1", "1.1-SNAPSHOT", "1.0.1"]

    def test_not_configured(self, tmp_path: Path) -> None:
        """Test reading without a configured file."""
        config = VersionConfig(project_dir=tmp_path)

        with pytest.raises(ConfigError, match="versions-file"):
            config.read_versions()

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test reading a configured file that does not exist."""
        config = VersionConfig(project_dir=tmp_path, versions_file=tmp_path / "nope.txt")

        with pytest.raises(FileNotFoundError):
            config.read_versions()


class TestProjectDiscovery:
    """Tests for locating the project root."""

    def test_find_from_subdirectory(self, temp_project: Path) -> None:
        """Test walking up to the directory holding pyproject.toml."""
        nested = temp_project / "a" / "b"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == temp_project.resolve()

    def test_load_config_from_subdirectory(self, temp_project: Path) -> None:
        """Test that configuration is found from a nested directory."""
        nested = temp_project / "src"
        nested.mkdir()

        config = load_config(nested)

        assert config.descending is True
        assert config.project_dir == temp_project.resolve()
