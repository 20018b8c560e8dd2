# SPDX-License-Identifier: MIT
"""Debian package versions.

Format: ``[epoch:]upstream[-revision]``, for example ``2:1.4.3~rc1-2``.
The upstream version must start with a digit and may include letters and
the characters ``+``, ``~``, ``:`` and ``-``. Comparison follows dpkg: the
tilde sorts before everything, even the end of the string, so
``1.0~rc1`` comes before ``1.0``.
"""

from __future__ import annotations

from itertools import zip_longest

from .exceptions import InvalidVersionError
from .part import Part
from .sections import SectionedTrait


def is_ascii_letter(c: str) -> bool:
    return "A" <= c <= "Z" or "a" <= c <= "z"


def _build_order() -> tuple[int, ...]:
    # "~" < end of string < letters < everything else
    order = []
    for code in range(256):
        c = chr(code)
        if c == "~":
            order.append(-1)
        elif code == 0:
            order.append(0)
        elif is_ascii_letter(c):
            order.append(code)
        else:
            order.append(code + 256)
    return tuple(order)


DEBIAN_ORDER = _build_order()


def _order(c: str) -> int:
    code = ord(c)
    if code < len(DEBIAN_ORDER):
        return DEBIAN_ORDER[code]
    return code + 256


def compare_debian_strings(lhs: str, rhs: str) -> int:
    """Compare two non-digit runs using the dpkg character order.

    Examples:
        >>> compare_debian_strings("~rc", "")
        -1
        >>> compare_debian_strings("rc", "+rc")
        -1
    """
    for a, b in zip_longest(lhs, rhs, fillvalue="\0"):
        r = _order(a) - _order(b)
        if r != 0:
            return -1 if r < 0 else 1
    return 0


def _pairs(parts: list[Part]) -> list[tuple[str, int]]:
    # dpkg compares alternating non-digit and digit runs; separators are
    # ignored so that "1.2" and "1.2.0" are equal
    pairs: list[tuple[str, int]] = []
    text = None
    for part in parts:
        if part.is_integer:
            pairs.append((text or "", part.integer))
            text = None
        else:
            if text is not None:
                pairs.append((text, 0))
            text = part.string
    if text is not None:
        pairs.append((text, 0))
    return pairs


class Debian(SectionedTrait):
    """Dialect for Debian package versions."""

    name = "debian"
    label = "Debian"
    position_error = "invalid ':' and/or '-' positions in \"{version}\"."

    def is_valid_upstream_character(self, c: str) -> bool:
        return is_ascii_letter(c) or c in "+~:-"

    def is_valid_revision_character(self, c: str) -> bool:
        return is_ascii_letter(c) or c in "+~"

    def check_upstream(self, version: str, first: Part) -> None:
        if not first.is_integer:
            raise InvalidVersionError(
                version, f'a debian version must always start with a number "{version}".'
            )

    def show_epoch(self) -> bool:
        # an upstream colon would otherwise be read back as the epoch
        if super().show_epoch():
            return True
        start, end = self.upstream_window()
        return any(not part.is_integer and ":" in part.string for part in self._parts[start:end])

    def compare_phase(self, lhs: list[Part], rhs: list[Part]) -> int:
        for (lhs_text, lhs_number), (rhs_text, rhs_number) in zip_longest(
            _pairs(lhs), _pairs(rhs), fillvalue=("", 0)
        ):
            r = compare_debian_strings(lhs_text, rhs_text)
            if r != 0:
                return r
            if lhs_number != rhs_number:
                return -1 if lhs_number < rhs_number else 1
        return 0
