# SPDX-License-Identifier: MIT
"""Unicode versions.

The most permissive dialect: any printable Unicode character other than the
period is accepted as string content, so ``3A3:1.2-pre55`` or ``1.été``
are valid versions.
"""

from __future__ import annotations

from .trait import Trait


class Unicode(Trait):
    """Dialect accepting every valid Unicode character."""

    name = "unicode"
