# SPDX-License-Identifier: MIT
"""Parse, canonicalize, compare and increment version strings.

Six dialects are supported: basic (``1.2.3``), decimal (``1.05``), Debian
(``2:1.4~rc1-3``), RPM (``1:2.0^git3-4``), Roman numerals (``II.IV``) and a
permissive Unicode dialect.

Example:
    >>> from versiontheca import Versiontheca, Debian, create_trait
    >>> 
    >>> v = Versiontheca(Debian(), "1.0~rc1")
    >>> v < Versiontheca(Debian(), "1.0")
    True
    >>> 
    >>> v = Versiontheca(create_trait("basic"), "1.3.2")
    >>> v.next(0)
    True
    >>> v.get_version()
    '2.0'
"""

__version__ = "0.1.0"

from .constants import MAX_INTEGER, MAX_PARTS
from .part import Part
from .trait import Trait
from .basic import Basic
from .decimal import Decimal
from .debian import Debian, compare_debian_strings
from .rpm import Rpm, compare_rpm_strings
from .roman import Roman, from_roman_number, to_roman_number
from .unicode import Unicode
from .handle import Versiontheca
from .exceptions import (
    VersionthecaError,
    VersionError,
    InvalidVersionError,
    VersionLimitError,
    EmptyVersionError,
    InvalidParameterError,
    WrongTypeError,
    VersionthecaLogicError,
)

DIALECTS: dict[str, type[Trait]] = {
    trait.name: trait for trait in (Basic, Debian, Decimal, Roman, Rpm, Unicode)
}


def create_trait(name: str) -> Trait:
    """Create a dialect object from its name.

    Raises:
        InvalidParameterError: If the name is not one of :data:`DIALECTS`
    """
    try:
        return DIALECTS[name]()
    except KeyError:
        raise InvalidParameterError(f'unknown version dialect "{name}".') from None


__all__ = [
    # Limits
    "MAX_INTEGER",
    "MAX_PARTS",
    # Model
    "Part",
    "Trait",
    "Versiontheca",
    # Dialects
    "Basic",
    "Decimal",
    "Debian",
    "Rpm",
    "Roman",
    "Unicode",
    "DIALECTS",
    "create_trait",
    # Helpers
    "compare_debian_strings",
    "compare_rpm_strings",
    "from_roman_number",
    "to_roman_number",
    # Errors
    "VersionthecaError",
    "VersionError",
    "InvalidVersionError",
    "VersionLimitError",
    "EmptyVersionError",
    "InvalidParameterError",
    "WrongTypeError",
    "VersionthecaLogicError",
]
