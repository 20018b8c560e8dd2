# SPDX-License-Identifier: MIT
"""Canonicalize and validate versions."""

from __future__ import annotations

import click

from ..main import Context, echo_error, echo_info, pass_context


def _check_versions(ctx: Context, versions: tuple[str, ...], display: bool) -> None:
    errors = 0
    for version in versions:
        v = ctx.create_version(version)
        if not v.is_valid():
            echo_error(f'version "{version}" is not considered valid: {v.last_error}')
            errors += 1
        elif display:
            echo_info(v.get_version())

    if errors:
        raise SystemExit(1)


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def canonicalize(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print versions in their canonical form.

    \b
    Examples:
        versiontheca canonicalize 1.2.0      # prints 1.2
        versiontheca --rpm canonicalize 0:3  # prints 3.0
    """
    _check_versions(ctx, versions, display=True)


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that versions are valid.

    Exits with 1 if any of the versions is invalid.
    """
    _check_versions(ctx, versions, display=False)
