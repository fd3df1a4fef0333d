# SPDX-License-Identifier: MIT
"""CLI entry point for the comparable-version command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .compare import compare_versions, max_version, sort_versions
from .config import ConfigError, VersionConfig, load_config
from .version import ComparableVersion

RELATIONS = {-1: "<", 0: "==", 1: ">"}


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[VersionConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> VersionConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def versions_or_configured(self, versions: tuple[str, ...]) -> list[str]:
        """Return the given versions, falling back to the configured file.

        Exits with status 1 if the configuration cannot supply any.
        """
        if versions:
            return list(versions)
        try:
            configured = self.load_config().read_versions()
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)
        if not configured:
            echo_error("No versions to compare")
            raise SystemExit(1)
        return configured


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


@click.group()
@click.version_option(package_name="comparable-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse and order free-form version identifiers.

    \b
    Examples:
        comparable-version parse 1.0-SNAPSHOT
        comparable-version compare 1.0-rc-1 1.0
        comparable-version sort 1.0 1.0-alpha-1 1.0-sp
        comparable-version show 1.0 1.0.0 1.0.1
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("versions", nargs=-1, required=True)
def parse(versions: tuple[str, ...]) -> None:
    """Print the canonical form of each VERSION."""
    for version in versions:
        click.echo(f"{version} -> {ComparableVersion(version).canonical}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Print how VERSION1 relates to VERSION2."""
    relation = RELATIONS[compare_versions(version1, version2)]
    click.echo(f"{version1} {relation} {version2}")


@cli.command(name="sort")
@click.argument("versions", nargs=-1)
@click.option(
    "--desc/--asc",
    "descending",
    default=None,
    help="Newest first (default from configuration, else oldest first).",
)
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], descending: Optional[bool]) -> None:
    """Print VERSIONS from oldest to newest, one per line."""
    candidates = ctx.versions_or_configured(versions)
    if descending is None:
        try:
            descending = ctx.load_config().descending
        except ConfigError as e:
            echo_error(str(e))
            raise SystemExit(1)
    for version in sort_versions(candidates, reverse=descending):
        click.echo(version)


@cli.command(name="max")
@click.argument("versions", nargs=-1)
@pass_context
def max_command(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print the newest of VERSIONS."""
    candidates = ctx.versions_or_configured(versions)
    click.echo(max_version(candidates))


@cli.command()
@click.argument("versions", nargs=-1, required=True)
def show(versions: tuple[str, ...]) -> None:
    """Display VERSIONS in canonical form and compare each to the previous one."""
    click.echo("Display parameters in canonical form and comparison result:")
    previous: Optional[ComparableVersion] = None
    for number, version in enumerate(versions, start=1):
        current = ComparableVersion(version)
        if previous is not None:
            relation = RELATIONS[previous.compare_to(current)]
            click.echo(f"   {previous} {relation} {version}")
        click.echo(f"{number}. {version} == {current.canonical}")
        previous = current


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
