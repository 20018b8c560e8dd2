# SPDX-License-Identifier: MIT
"""Version handle.

:class:`Versiontheca` wraps one dialect object and tracks whether the version
it holds is valid. Data errors raised by the dialect are caught here: the
handle becomes invalid, its parts are cleared and the error is kept in
:attr:`Versiontheca.error` for the caller to inspect.
"""

from __future__ import annotations

import logging
from typing import Optional

from .basic import Basic
from .exceptions import InvalidVersionError, VersionError
from .part import Part
from .trait import Trait

logger = logging.getLogger(__name__)


class Versiontheca:
    """A version of any dialect.

    Args:
        trait: The dialect object to use, a :class:`Basic` one if None
        version: Version to parse, nothing is parsed if empty

    Examples:
        >>> from versiontheca import Debian
        >>> v = Versiontheca(Debian(), "1:2.3.0-4")
        >>> v.get_version()
        '1:2.3-4'
        >>> v < Versiontheca(Debian(), "1:2.3.1")
        True
    """

    def __init__(self, trait: Optional[Trait] = None, version: str = ""):
        self._trait: Trait = trait if trait is not None else Basic()
        self._format: Optional[Trait] = None
        self._valid = False
        self.error: Optional[VersionError] = None
        if version:
            self.set_version(version)

    @property
    def last_error(self) -> str:
        """Return the message of the last error, empty if none."""
        return self.error.message if self.error is not None else ""

    def _fail(self, error: VersionError) -> bool:
        logger.debug("%s version %r is now invalid: %s", self._trait.name, error.version, error)
        self.error = error
        self._valid = False
        self._trait.clear()
        return False

    def get_trait(self) -> Trait:
        return self._trait

    def set_format(self, format: Versiontheca) -> None:
        """Use ``format`` as the template of next() and previous().

        The format's dialect object is borrowed, never modified.
        """
        self._format = format._trait

    def set_version(self, version: str) -> bool:
        """Parse ``version``, replacing the current one.

        Returns:
            True if the version is valid
        """
        self.error = None
        try:
            self._trait.parse(version)
        except VersionError as e:
            return self._fail(e)
        self._valid = True
        return True

    def get_version(self) -> str:
        """Return the canonical form of the version, empty when there is none."""
        try:
            return self._trait.to_string()
        except VersionError as e:
            self.error = e
            return ""

    def __str__(self) -> str:
        return self.get_version()

    def __repr__(self) -> str:
        return f"Versiontheca({type(self._trait).__name__}(), {self.get_version()!r})"

    def is_valid(self) -> bool:
        return self._valid

    def size(self) -> int:
        return self._trait.size()

    def next(self, pos: int) -> bool:
        """Increment the version at position ``pos``.

        Returns:
            True on success; on failure the version becomes invalid

        Raises:
            InvalidParameterError: If ``pos`` is not between 0 and 24
        """
        try:
            self._trait.next(pos, self._format)
        except VersionError as e:
            return self._fail(e)
        self._valid = True
        return True

    def previous(self, pos: int) -> bool:
        """Decrement the version at position ``pos``.

        Returns:
            True on success; on failure the version becomes invalid

        Raises:
            InvalidParameterError: If ``pos`` is not between 0 and 24
        """
        try:
            self._trait.previous(pos, self._format)
        except VersionError as e:
            return self._fail(e)
        self._valid = True
        return True

    # Convenience accessors for the first four upstream parts

    def _upstream(self) -> tuple[int, int]:
        if self._trait.empty():
            return 0, 0
        return self._trait.upstream_window()

    def _get_integer(self, pos: int) -> int:
        start, end = self._upstream()
        if start + pos < end and self._trait[start + pos].is_integer:
            return self._trait[start + pos].integer
        return 0

    def _set_integer(self, pos: int, value: int) -> None:
        self._trait.check_position_limit(pos)
        start, end = self._upstream()
        while end <= start + pos:
            self._trait.insert(end, Part(separator="." if end > start else None))
            end += 1
        self._trait[start + pos].set_integer(value)
        self._valid = True

    def get_major(self) -> int:
        return self._get_integer(0)

    def get_minor(self) -> int:
        return self._get_integer(1)

    def get_patch(self) -> int:
        return self._get_integer(2)

    def get_build(self) -> int:
        return self._get_integer(3)

    # Setters raise VersionLimitError, leaving the version as is, when the
    # dialect has no room for the field

    def set_major(self, value: int) -> None:
        self._set_integer(0, value)

    def set_minor(self, value: int) -> None:
        self._set_integer(1, value)

    def set_patch(self, value: int) -> None:
        self._set_integer(2, value)

    def set_build(self, value: int) -> None:
        self._set_integer(3, value)

    # Comparison

    def compare(self, other: Versiontheca) -> int:
        """Compare two versions, possibly of different dialects.

        Returns:
            -1, 0 or 1 as this version sorts before, equal to or after ``other``

        Raises:
            InvalidVersionError: If either version is not valid
        """
        if not self._valid or not other._valid:
            raise InvalidVersionError("", "one or both of the input versions are not valid.")
        return self._trait.compare(other._trait)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Versiontheca):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Versiontheca):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: Versiontheca) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Versiontheca) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Versiontheca) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Versiontheca) -> bool:
        return self.compare(other) >= 0

    __hash__ = None  # type: ignore[assignment]
