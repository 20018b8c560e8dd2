# SPDX-License-Identifier: MIT
"""Exceptions raised by versiontheca.

Two families exist. :class:`VersionError` and its subclasses describe bad
data (a version that does not parse, a counter that cannot go any further);
the :class:`~versiontheca.handle.Versiontheca` handle catches those and marks
itself invalid. Everything else signals a caller bug and always propagates.
"""

from __future__ import annotations


class VersionthecaError(Exception):
    """Base class of all versiontheca errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class VersionError(VersionthecaError):
    """Raised when a version cannot be parsed or computed."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


class InvalidVersionError(VersionError):
    """Raised when a version string does not follow its dialect's grammar."""


class VersionLimitError(VersionError):
    """Raised when next() or previous() runs out of room."""


class EmptyVersionError(VersionError):
    """Raised when an operation requires parts but the version has none."""


class InvalidParameterError(VersionthecaError, ValueError):
    """Raised when a function is called with an out of contract argument."""


class WrongTypeError(VersionthecaError, TypeError):
    """Raised when reading a part as the type it does not hold."""


class VersionthecaLogicError(VersionthecaError):
    """Raised when an internal invariant is broken."""
