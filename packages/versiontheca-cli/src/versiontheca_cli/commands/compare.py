# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import operator
from typing import Any, Callable

import click

from ..main import Context, echo_error, pass_context

OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "=": operator.eq,
    "eq": operator.eq,
    "!=": operator.ne,
    "<>": operator.ne,
    "ne": operator.ne,
    "<": operator.lt,
    "lt": operator.lt,
    "<=": operator.le,
    "le": operator.le,
    ">": operator.gt,
    "gt": operator.gt,
    ">=": operator.ge,
    "ge": operator.ge,
}


@click.command()
@click.argument("version1")
@click.argument("op", metavar="OPERATOR", type=click.Choice(list(OPERATORS)))
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, op: str, version2: str) -> None:
    """Compare VERSION1 against VERSION2.

    Exits with 0 when the comparison holds and 1 otherwise. OPERATOR is one
    of ==, !=, <, <=, >, >= or their eq, ne, lt, le, gt, ge names.

    \b
    Examples:
        versiontheca compare 1.0~rc1 lt 1.0
        versiontheca --rpm compare 1.1q '>' 1.1f
    """
    lhs = ctx.create_version(version1)
    if not lhs.is_valid():
        echo_error(f'invalid left hand side version "{version1}": {lhs.last_error}')
        raise SystemExit(1)

    rhs = ctx.create_version(version2)
    if not rhs.is_valid():
        echo_error(f'invalid right hand side version "{version2}": {rhs.last_error}')
        raise SystemExit(1)

    if not OPERATORS[op](lhs, rhs):
        raise SystemExit(1)
