# SPDX-License-Identifier: MIT
"""CLI entry point for the versiontheca command."""

from __future__ import annotations

import logging
import sys

import click

from versiontheca import Versiontheca, VersionthecaError, create_trait

logger = logging.getLogger("versiontheca")


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.dialect: str = "debian"
        self.verbose: bool = False

    def create_version(self, version: str = "") -> Versiontheca:
        """Parse a version using the selected dialect."""
        return Versiontheca(create_trait(self.dialect), version)


pass_context = click.make_pass_decorator(Context, ensure=True)


def configure_logging(verbose: bool) -> None:
    """Send versiontheca log messages to stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="versiontheca")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option("-b", "--basic", "dialect", flag_value="basic", help="Read versions as basic versions.")
@click.option(
    "-d",
    "--debian",
    "dialect",
    flag_value="debian",
    default=True,
    help="Read versions as Debian versions (default).",
)
@click.option("-F", "--decimal", "dialect", flag_value="decimal", help="Read versions as decimal numbers.")
@click.option("-r", "--rpm", "dialect", flag_value="rpm", help="Read versions as RPM versions.")
@click.option("--roman", "dialect", flag_value="roman", help="Read versions with Roman numerals.")
@click.option("--unicode", "dialect", flag_value="unicode", help="Read versions as Unicode versions.")
@pass_context
def cli(ctx: Context, verbose: bool, dialect: str) -> None:
    """Canonicalize, compare and increment version strings.

    \b
    Examples:
        versiontheca compare 1.0~rc1 lt 1.0
        versiontheca --rpm canonicalize 1:2.0.0-1
        versiontheca --basic next 2 1.3.2
        versiontheca previous --format 9.9 1 1.0
    """
    ctx.verbose = verbose
    ctx.dialect = dialect
    configure_logging(verbose)


# Import and register commands
from .commands import canonicalize, compare, step

cli.add_command(canonicalize.canonicalize)
cli.add_command(canonicalize.validate)
cli.add_command(compare.compare)
cli.add_command(step.next_version)
cli.add_command(step.previous_version)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except VersionthecaError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
