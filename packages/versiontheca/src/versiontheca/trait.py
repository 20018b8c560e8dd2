# SPDX-License-Identifier: MIT
"""Generic version dialect.

A :class:`Trait` holds the parts of one version and knows how to parse,
render, compare and step them. The base class implements the generic rules
used as is by the Unicode dialect; other dialects override the character
set, the separators and whichever of the parse, render and compare steps
their grammar changes.

Example:
    >>> t = Trait()
    >>> t.parse("1.2.0")
    >>> t.to_string()
    '1.2'
    >>> t.next(0)
    >>> t.to_string()
    '2.0'
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator, Optional

from .constants import MAX_PARTS, STRING_FLOOR
from .exceptions import (
    EmptyVersionError,
    InvalidParameterError,
    InvalidVersionError,
    VersionLimitError,
    VersionthecaLogicError,
)
from .part import Part


def is_valid_unicode(c: str) -> bool:
    """Check that a character is a printable Unicode scalar value.

    Control characters and surrogate halves are refused.
    """
    code = ord(c)
    if code < 0x20 or 0x7F <= code <= 0x9F:
        return False
    return not 0xD800 <= code <= 0xDFFF


def is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


class Trait:
    """An ordered list of version parts and the rules that apply to them.

    At most :data:`~versiontheca.constants.MAX_PARTS` parts are held; any
    operation that would go over that limit raises
    :class:`InvalidParameterError`.
    """

    name = "unicode"

    def __init__(self) -> None:
        self._parts: list[Part] = []

    # ------------------------------------------------------------------
    # Sequence of parts
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._parts)

    def __getitem__(self, idx: int) -> Part:
        return self._parts[idx]

    def __iter__(self) -> Iterator[Part]:
        return iter(self._parts)

    def size(self) -> int:
        return len(self._parts)

    def empty(self) -> bool:
        return not self._parts

    def at(self, idx: int) -> Part:
        return self._parts[idx]

    def clear(self) -> None:
        self._parts.clear()

    def append(self, part: Part) -> None:
        if len(self._parts) >= MAX_PARTS:
            raise InvalidParameterError(
                "trying to append more parts when maximum was already reached."
            )
        self._parts.append(part)

    def insert(self, idx: int, part: Part) -> None:
        if len(self._parts) >= MAX_PARTS:
            raise InvalidParameterError(
                "trying to insert more parts when maximum was already reached."
            )
        self._parts.insert(idx, part)

    def erase(self, idx: int) -> None:
        if not 0 <= idx < len(self._parts):
            raise InvalidParameterError("trying to erase a non-existent part.")
        del self._parts[idx]

    def resize(self, size: int) -> None:
        """Truncate the version or extend it with zero parts."""
        if size < 0:
            raise InvalidParameterError("requested a negative number of parts.")
        if size > MAX_PARTS:
            raise InvalidParameterError("requested too many parts.")
        del self._parts[size:]
        while len(self._parts) < size:
            self._parts.append(Part(separator="." if self._parts else None))

    def upstream_window(self) -> tuple[int, int]:
        """Return the ``[start, end)`` range that next() and previous() act on."""
        return 0, len(self._parts)

    def check_position_limit(self, pos: int) -> None:
        """Raise :class:`VersionLimitError` if no part can exist at ``pos``."""

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def is_valid_character(self, c: str) -> bool:
        return is_valid_unicode(c) and c != "."

    def is_separator(self, c: str) -> bool:
        return c == "."

    def parse(self, version: str) -> None:
        """Parse a version string, replacing the current parts.

        Raises:
            InvalidVersionError: If the string is not a valid version
            InvalidParameterError: If the string has more than 25 parts
        """
        self.clear()
        if not version:
            raise InvalidVersionError(
                version, "an empty input string cannot represent a valid version."
            )
        self.parse_value(version)

    def parse_value(self, value: str, separator: Optional[str] = None) -> None:
        """Tokenize one section of a version and append its parts.

        The section is split on :meth:`is_separator`. Within a token, each
        run of ASCII digits becomes an integer part and each run of other
        characters becomes a string part. The first part created from a
        token gets the separator found in front of that token; the very
        first one gets ``separator``.

        Raises:
            InvalidVersionError: On an empty token, an unexpected character
                or an integer that does not fit in 32 bits
        """
        for c in value:
            if 0xD800 <= ord(c) <= 0xDFFF:
                raise InvalidVersionError(
                    value,
                    f"input string includes an invalid code \\U{ord(c):06X} not representing"
                    " a valid UTF-8 character.",
                )

        token: list[str] = []
        for c in value:
            if self.is_separator(c):
                self._parse_token(value, "".join(token), separator)
                separator = c
                token = []
            else:
                token.append(c)
        self._parse_token(value, "".join(token), separator)

    def _parse_token(self, value: str, token: str, separator: Optional[str]) -> None:
        if not token:
            raise InvalidVersionError(value, "a version value cannot be an empty string.")

        pos = 0
        while pos < len(token):
            start = pos
            part = Part()
            if is_ascii_digit(token[pos]):
                while pos < len(token) and is_ascii_digit(token[pos]):
                    pos += 1
                part.set_value(token[start:pos])
            else:
                while pos < len(token) and not is_ascii_digit(token[pos]):
                    c = token[pos]
                    if not self.is_valid_character(c):
                        raise InvalidVersionError(
                            value, f"found unexpected character: \\U{ord(c):06X} in input."
                        )
                    pos += 1
                part.set_string(token[start:pos])
            if start == 0:
                part.set_separator(separator)
            self.append(part)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def part_to_string(self, part: Part) -> str:
        return part.to_string()

    def is_trailing_zero(self, part: Part) -> bool:
        """Return True if :meth:`compare` sees ``part`` as a missing part."""
        return part.is_zero()

    def to_string(self) -> str:
        """Return the canonical form of this version.

        Trailing zero parts are dropped, keeping at least one part. A lone
        part is followed by ".0", unless the dropped second part was a
        string: that one is kept as is, so "1.A" stays "1.A" and "2AA"
        stays "2AA".

        Raises:
            EmptyVersionError: If the version has no parts
        """
        if not self._parts:
            raise EmptyVersionError("", "no parts to output.")

        count = len(self._parts)
        while count > 1 and self.is_trailing_zero(self._parts[count - 1]):
            count -= 1
        if count == 1 and len(self._parts) >= 2 and not self._parts[1].is_integer:
            count = 2

        result: list[str] = []
        for idx, part in enumerate(self._parts[:count]):
            if part.separator is not None:
                if idx == 0:
                    raise VersionthecaLogicError(
                        "the very first part should not have a separator defined (it is not supported)."
                    )
                result.append(part.separator)
            result.append(self.part_to_string(part))

        if count == 1:
            result.append(".0")
        return "".join(result)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[str(part) for part in self._parts]!r})"

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _check_not_empty(self, rhs: Trait) -> None:
        if not self._parts or rhs is None or not rhs._parts:
            raise EmptyVersionError("", "one or both of the input versions are empty.")

    def compare(self, rhs: Trait) -> int:
        """Compare two versions part by part.

        A part missing on one side loses against a non-zero part and ties
        with a zero part, so "1.2" and "1.2.0.0" are equal.

        Returns:
            -1, 0 or 1 as this version sorts before, equal to or after ``rhs``

        Raises:
            EmptyVersionError: If either version has no parts
        """
        self._check_not_empty(rhs)

        lhs_parts = self._parts
        rhs_parts = rhs._parts
        for idx in range(max(len(lhs_parts), len(rhs_parts))):
            if idx >= len(lhs_parts):
                if not rhs_parts[idx].is_zero():
                    return -1
            elif idx >= len(rhs_parts):
                if not lhs_parts[idx].is_zero():
                    return 1
            else:
                r = lhs_parts[idx].compare(rhs_parts[idx])
                if r != 0:
                    return r
        return 0

    # ------------------------------------------------------------------
    # Next and previous
    # ------------------------------------------------------------------

    def get_format_part(
        self, format: Optional[Trait], pos: int, integer: bool, length: int = 1
    ) -> Part:
        """Return the largest value allowed at ``pos``.

        ``pos`` is relative to the start of the format's upstream window.
        When the format has no part there, the absolute maximum is used: the
        largest 32 bit integer, or a string of ``length`` "z" letters.
        """
        if format is not None and not format.empty():
            start, end = format.upstream_window()
            if start + pos < end:
                return replace(format[start + pos])

        maximum = Part()
        if integer:
            maximum.set_to_max_integer()
            if pos != 0:
                maximum.set_separator(".")
        else:
            maximum.set_to_max_string(length)
        return maximum

    def _check_position(self, function: str, pos: int) -> None:
        if pos < 0:
            raise InvalidParameterError(
                f"position calling {function}() cannot be a negative number."
            )
        if pos >= MAX_PARTS:
            raise InvalidParameterError(
                f"position calling {function}() cannot be more than {MAX_PARTS}."
            )

    @staticmethod
    def _length(part: Part) -> int:
        return 1 if part.is_integer else len(part.string)

    def next(self, pos: int, format: Optional[Trait] = None) -> None:
        """Increment the part at ``pos``, dropping every part after it.

        Missing parts are first added as zeroes (or "A" strings when the
        format holds a string there). A part already at its maximum is
        dropped and the increment carries to the part before it.

        Raises:
            InvalidParameterError: If ``pos`` is negative or 25 or more
            VersionLimitError: If the carry goes past the first part
        """
        self._check_position("next", pos)
        start, end = self.upstream_window()
        before = self.to_string() if self._parts else ""

        idx = start + pos
        while end <= idx:
            f = self.get_format_part(format, end - start, True)
            if f.is_integer:
                part = Part(separator=f.separator)
            else:
                part = Part(STRING_FLOOR * len(f.string), separator=f.separator)
            self.insert(end, part)
            end += 1

        while True:
            part = self._parts[idx]
            ceiling = self.get_format_part(format, idx - start, part.is_integer, self._length(part))
            if part.compare(ceiling) != 0 and part.next():
                break
            if idx == start:
                raise VersionLimitError(
                    before, "maximum limit reached; cannot increment version any further."
                )
            self.erase(idx)
            end -= 1
            idx -= 1

        # "1.9" becomes "2.0", not "2"
        if idx == start and idx + 1 < end and self._parts[idx + 1].is_integer:
            self._parts[idx + 1].set_integer(0)
            idx += 1

        while end > idx + 1:
            end -= 1
            self.erase(end)

    def previous(self, pos: int, format: Optional[Trait] = None) -> None:
        """Decrement the part at ``pos``.

        A part already at zero is replaced by the format's maximum and the
        decrement borrows from the part before it. Trailing zeroes created
        by the decrement itself are removed, down to two parts.

        Raises:
            InvalidParameterError: If ``pos`` is negative or 25 or more
            VersionLimitError: If the borrow goes past the first part
        """
        self._check_position("previous", pos)
        start, end = self.upstream_window()
        before = self.to_string() if self._parts else ""

        idx = start + pos
        while end <= idx:
            self.insert(end, Part(separator="." if end > start else None))
            end += 1

        while True:
            part = self._parts[idx]
            if not part.is_zero() and part.previous():
                break
            if idx == start:
                raise VersionLimitError(
                    before, "minimum limit reached; cannot decrement version any further."
                )
            self._parts[idx] = self.get_format_part(
                format, idx - start, part.is_integer, self._length(part)
            )
            idx -= 1

        while idx > start + 1 and self._parts[idx].is_zero() and idx + 1 == end:
            self.erase(idx)
            end -= 1
            idx -= 1
