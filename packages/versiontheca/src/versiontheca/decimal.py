# SPDX-License-Identifier: MIT
"""Decimal versions such as ``1.05`` or ``3``.

A decimal version is a number: the second part is a fraction, so its digits
matter. ``1.05`` renders back as ``1.05`` and :meth:`Decimal.to_double`
returns ``1.05``.
"""

from __future__ import annotations

import math
from typing import Optional

from .exceptions import InvalidVersionError, VersionLimitError
from .trait import Trait, is_ascii_digit


class Decimal(Trait):
    """Dialect for one or two integers separated by a period."""

    name = "decimal"

    def is_valid_character(self, c: str) -> bool:
        return is_ascii_digit(c)

    def parse(self, version: str) -> None:
        super().parse(version)
        parts = list(self)
        if len(parts) > 2 or any(not part.is_integer for part in parts) or (
            len(parts) == 2 and parts[1].separator != "."
        ):
            self.clear()
            raise InvalidVersionError(
                version,
                "decimal versions must be one or two integers separated by a period (.).",
            )

    def to_string(self) -> str:
        """Return the version with its fraction padded to its original width.

        Examples:
            >>> d = Decimal()
            >>> d.parse("3")
            >>> d.to_string()
            '3.0'
            >>> d.parse("3.050")
            >>> d.to_string()
            '3.050'
        """
        if self.empty():
            return super().to_string()
        major = self[0].integer
        if self.size() < 2:
            return f"{major}.0"
        minor = self[1]
        return f"{major}.{minor.integer:0{max(1, minor.width)}d}"

    def to_double(self) -> float:
        """Return the version as a floating point number, NaN if empty."""
        if self.empty():
            return math.nan
        result = float(self[0].integer)
        if self.size() >= 2:
            minor = self[1]
            result += minor.integer * 10.0 ** -max(1, minor.width)
        return result

    def check_position_limit(self, pos: int) -> None:
        if pos > 1:
            raise VersionLimitError(
                self.to_string() if not self.empty() else "",
                "decimal versions only support positions 0 and 1.",
            )

    def next(self, pos: int, format: Optional[Trait] = None) -> None:
        self._check_position("next", pos)
        self.check_position_limit(pos)
        super().next(pos, format)

    def previous(self, pos: int, format: Optional[Trait] = None) -> None:
        self._check_position("previous", pos)
        self.check_position_limit(pos)
        super().previous(pos, format)
