# SPDX-License-Identifier: MIT
"""RPM package versions.

Format: ``[epoch:]version[-release]``, for example ``1:2.0.1^git3-4``.
Periods and plus signs separate parts; parts may include letters and the
``~``, ``^`` and ``_`` characters. In comparisons the tilde sorts first,
the caret last and the underscore is ignored.
"""

from __future__ import annotations

from itertools import zip_longest

from .debian import is_ascii_letter
from .part import Part
from .sections import SectionedTrait


def _build_order() -> dict[str, int]:
    order = {"~": 1, "\0": 2, "+": 3}
    for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz":
        order[c] = len(order) + 1
    order["^"] = 255
    return order


RPM_ORDER = _build_order()


def _order(c: str) -> int:
    # characters outside of the table only show up in versions of other
    # dialects; they sort after the letters, before the caret
    return RPM_ORDER.get(c, 128)


def compare_rpm_strings(lhs: str, rhs: str) -> int:
    """Compare two RPM string parts.

    Underscores are skipped on both sides, then characters are compared
    using the RPM order: "~", end of string, "+", "A" to "Z", "a" to "z"
    and finally "^".

    Examples:
        >>> compare_rpm_strings("rc_", "rc")
        0
        >>> compare_rpm_strings("~pre", "")
        -1
        >>> compare_rpm_strings("^post", "")
        1
    """
    lhs = lhs.replace("_", "")
    rhs = rhs.replace("_", "")
    for a, b in zip_longest(lhs, rhs, fillvalue="\0"):
        r = _order(a) - _order(b)
        if r != 0:
            return -1 if r < 0 else 1
    return 0


class Rpm(SectionedTrait):
    """Dialect for RPM package versions."""

    name = "rpm"
    label = "RPM"

    def is_separator(self, c: str) -> bool:
        return c in ".+"

    def is_valid_upstream_character(self, c: str) -> bool:
        return is_ascii_letter(c) or c in "~^_"

    def compare_phase(self, lhs: list[Part], rhs: list[Part]) -> int:
        empty = Part("")
        for a, b in zip_longest(lhs, rhs, fillvalue=empty):
            if a.is_integer and b.is_integer:
                if a.integer != b.integer:
                    return -1 if a.integer < b.integer else 1
            elif not a.is_integer and not b.is_integer:
                r = compare_rpm_strings(a.string, b.string)
                if r != 0:
                    return r
            elif a.is_integer:
                if a.integer != 0 or b.string != "":
                    return 1
            elif b.integer != 0 or a.string != "":
                return -1
        return 0
