# SPDX-License-Identifier: MIT
"""Compute next and previous versions."""

from __future__ import annotations

from typing import Optional

import click

from versiontheca import MAX_PARTS

from ..main import Context, echo_error, echo_info, pass_context


def _step(
    ctx: Context,
    direction: str,
    level: int,
    versions: tuple[str, ...],
    format: Optional[str],
) -> None:
    template = None
    if format:
        template = ctx.create_version(format)
        if not template.is_valid():
            echo_error(f'format version "{format}" is not valid.')
            raise SystemExit(1)

    errors = 0
    for version in versions:
        v = ctx.create_version(version)
        if not v.is_valid():
            echo_error(f'version "{version}" is not valid.')
            errors += 1
            continue

        if template is not None:
            v.set_format(template)
        # levels are 1 based on the command line
        step = v.next if direction == "next" else v.previous
        if step(level - 1):
            echo_info(v.get_version())
        else:
            echo_error(f'could not compute {direction} version for "{version}": {v.last_error}')
            errors += 1

    if errors:
        raise SystemExit(1)


_level = click.argument("level", type=click.IntRange(1, MAX_PARTS))
_versions = click.argument("versions", nargs=-1, required=True)
_format = click.option(
    "--format",
    "-f",
    help="Version defining the largest value of each part, such as 9.9.99.",
)


@click.command(name="next")
@_level
@_versions
@_format
@pass_context
def next_version(ctx: Context, level: int, versions: tuple[str, ...], format: Optional[str]) -> None:
    """Increment versions at LEVEL (1 is the major version).

    \b
    Examples:
        versiontheca --basic next 1 1.3.2       # prints 2.0
        versiontheca --basic next 3 1.3.2       # prints 1.3.3
        versiontheca next -f 9.9 2 1.9          # prints 2.0
    """
    _step(ctx, "next", level, versions, format)


@click.command(name="previous")
@_level
@_versions
@_format
@pass_context
def previous_version(
    ctx: Context, level: int, versions: tuple[str, ...], format: Optional[str]
) -> None:
    """Decrement versions at LEVEL (1 is the major version).

    \b
    Examples:
        versiontheca --basic previous 3 1.3.2   # prints 1.3.1
        versiontheca previous -f 9.9 2 2.0      # prints 1.9
    """
    _step(ctx, "previous", level, versions, format)
