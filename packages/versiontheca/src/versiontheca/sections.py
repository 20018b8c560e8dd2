# SPDX-License-Identifier: MIT
"""Shared grammar of package manager versions.

Debian and RPM versions are made of three sections::

    [epoch:]upstream[-revision]

The epoch is everything before the first colon and the revision everything
after the last dash. Both are optional. The epoch is saved as an integer
part of kind ":" and each revision part gets the kind "-", so the upstream
parts are the ones without a kind. :meth:`next` and :meth:`previous` only
ever touch the upstream parts.
"""

from __future__ import annotations

import logging
from typing import Optional

from .constants import KIND_EPOCH, KIND_REVISION
from .exceptions import InvalidVersionError, VersionLimitError
from .part import Part
from .trait import Trait

logger = logging.getLogger(__name__)


class SectionedTrait(Trait):
    """Base class of the dialects with an epoch and a revision."""

    # Name used in error messages
    label = "package"

    # Message raised when the ':' or '-' delimiters are misplaced
    position_error = "position of ':' and/or '-' is invalid in \"{version}\"."

    def __init__(self) -> None:
        super().__init__()
        self._in_revision = False

    def is_valid_upstream_character(self, c: str) -> bool:
        raise NotImplementedError

    def is_valid_revision_character(self, c: str) -> bool:
        return self.is_valid_upstream_character(c)

    def is_valid_character(self, c: str) -> bool:
        if self._in_revision:
            return self.is_valid_revision_character(c)
        return self.is_valid_upstream_character(c)

    def check_upstream(self, version: str, first: Part) -> None:
        """Validate the first upstream part, hook for dialects."""

    def parse(self, version: str) -> None:
        """Parse the epoch, upstream and revision sections of ``version``.

        Raises:
            InvalidVersionError: If a section is invalid or the delimiters
                are misplaced
        """
        self.clear()
        if not version:
            raise InvalidVersionError(
                version, "an empty input string cannot represent a valid version."
            )

        colon = version.find(":")
        dash = version.rfind("-")
        if colon == 0 or dash == 0 or (colon != -1 and dash != -1 and colon >= dash):
            raise InvalidVersionError(version, self.position_error.format(version=version))

        separator = None
        upstream_start = 0
        if colon != -1:
            epoch = Part(kind=KIND_EPOCH)
            epoch.set_value(version[:colon])
            if not epoch.is_integer:
                raise InvalidVersionError(version, "epoch must be a valid integer.")
            self.append(epoch)
            separator = ":"
            upstream_start = colon + 1

        upstream_end = dash if dash != -1 else len(version)
        first = self.size()
        self.parse_value(version[upstream_start:upstream_end], separator)
        self.check_upstream(version, self[first])

        if dash != -1:
            first = self.size()
            self._in_revision = True
            try:
                self.parse_value(version[dash + 1 :], "-")
            finally:
                self._in_revision = False
            for part in self._parts[first:]:
                part.set_kind(KIND_REVISION)

    def upstream_window(self) -> tuple[int, int]:
        """Return the range of the upstream parts.

        Raises:
            VersionLimitError: If the version has no parts
        """
        if self.empty():
            raise VersionLimitError(
                "", f"no parts in this {self.label} version; cannot compute upstream start/end."
            )
        start = 1 if self[0].kind == KIND_EPOCH else 0
        end = start
        while end < self.size() and self[end].kind != KIND_REVISION:
            end += 1
        return start, end

    def epoch(self) -> int:
        """Return the epoch, 0 when the version does not define one."""
        if not self.empty() and self[0].kind == KIND_EPOCH:
            return self[0].integer
        return 0

    def show_epoch(self) -> bool:
        return self.epoch() != 0

    def is_trailing_zero(self, part: Part) -> bool:
        # "A" sorts after the end of the string in both package orders
        return part.is_integer and part.integer == 0

    def to_string(self) -> str:
        """Return the canonical form of this version.

        The epoch is shown only when needed, the upstream section keeps at
        least two parts and the revision is copied as is.
        """
        if self.empty():
            return super().to_string()

        start, end = self.upstream_window()
        count = end
        while count > start + 2 and self.is_trailing_zero(self[count - 1]):
            count -= 1

        result: list[str] = []
        if start == 1 and self.show_epoch():
            result.append(f"{self.epoch()}:")
        for idx in range(start, count):
            part = self[idx]
            if idx != start and part.separator is not None:
                result.append(part.separator)
            result.append(self.part_to_string(part))
        if count - start == 1:
            result.append(".0")

        for idx in range(end, self.size()):
            part = self[idx]
            if part.separator is not None:
                result.append(part.separator)
            result.append(self.part_to_string(part))
        return "".join(result)

    def phase_parts(self, kind: Optional[str]) -> list[Part]:
        return [part for part in self if part.kind == kind]

    def compare(self, rhs: Trait) -> int:
        if not isinstance(rhs, type(self)):
            logger.debug(
                "comparing %s version with %s version using the generic rules",
                self.name,
                rhs.name,
            )
            return super().compare(rhs)

        self._check_not_empty(rhs)
        lhs_epoch = self.epoch()
        rhs_epoch = rhs.epoch()
        if lhs_epoch != rhs_epoch:
            return -1 if lhs_epoch < rhs_epoch else 1

        for kind in (None, KIND_REVISION):
            r = self.compare_phase(self.phase_parts(kind), rhs.phase_parts(kind))
            if r != 0:
                return r
        return 0

    def compare_phase(self, lhs: list[Part], rhs: list[Part]) -> int:
        raise NotImplementedError
