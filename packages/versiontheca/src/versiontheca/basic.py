# SPDX-License-Identifier: MIT
"""Basic versions: integers separated by periods, such as ``1.2.3``."""

from __future__ import annotations

from .exceptions import InvalidVersionError
from .trait import Trait


class Basic(Trait):
    """Dialect accepting only period separated integers."""

    name = "basic"

    def parse(self, version: str) -> None:
        super().parse(version)
        if any(not part.is_integer for part in self):
            self.clear()
            raise InvalidVersionError(
                version, "basic versions only support integers separated by periods (.)."
            )
