# SPDX-License-Identifier: MIT
"""Integration test: order the release history of a sample project.

This test verifies the configured workflow end to end:
- pyproject.toml discovery through ``-C``
- Reading the configured versions file
- Maven ordering of qualifiers, service packs and release aliases
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from comparable_version import max_version, sort_versions
from comparable_version.cli import cli
from comparable_version.config import load_config

EXPECTED_ORDER = [
    "2.0-alpha-1",
    "2.0-alpha-2",
    "2.0-beta-1",
    "2.0-M1",
    "2.0-RC1",
    "2.0-cr2",
    "2.0",
    "2.0-sp1",
    "2.0.1",
    "2.1-SNAPSHOT",
    "2.1.0-GA",
    "2.1.1-jre",
    "2.10",
]


class TestSampleProjectHistory:
    """Integration tests for ordering the sample project's releases."""

    @pytest.fixture
    def sample_project_dir(self) -> Path:
        """Get the sample project directory."""
        return Path(__file__).parent / "sample_project"

    def test_library_ordering(self, sample_project_dir: Path):
        """Test sorting the configured releases through the library API."""
        releases = load_config(sample_project_dir).read_versions()

        assert sorted(releases) != EXPECTED_ORDER
        assert sort_versions(releases) == EXPECTED_ORDER
        assert max_version(releases) == "2.10"

    def test_cli_ordering(self, sample_project_dir: Path):
        """Test sorting the configured releases through the CLI."""
        result = CliRunner().invoke(cli, ["-C", str(sample_project_dir), "sort"])

        assert result.exit_code == 0
        assert result.output.splitlines() == EXPECTED_ORDER

    def test_cli_newest_first(self, sample_project_dir: Path):
        """Test the --desc override of the configured order."""
        result = CliRunner().invoke(cli, ["-C", str(sample_project_dir), "sort", "--desc"])

        assert result.exit_code == 0
        assert result.output.splitlines() == list(reversed(EXPECTED_ORDER))
