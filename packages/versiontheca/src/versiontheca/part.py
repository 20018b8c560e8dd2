# SPDX-License-Identifier: MIT
"""A single component of a version.

A version such as ``1.3b2`` is made of parts: the integers ``1``, ``3`` and
``2`` and the string ``b``. Each part remembers the separator found in front
of it (``.`` for the ``3`` above, nothing for ``b``), an optional one letter
kind used by some dialects (epoch, revision, Roman numeral) and, for
integers, the number of digits it was written with.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .constants import MAX_INTEGER, STRING_CEILING, STRING_FLOOR
from .exceptions import InvalidParameterError, InvalidVersionError, WrongTypeError


def is_valid_separator(separator: Optional[str]) -> bool:
    """Check whether a character can be used to separate two parts.

    Control characters and UTF-16 surrogates are refused.

    Examples:
        >>> is_valid_separator(".")
        True
        >>> is_valid_separator("\\t")
        False
    """
    if separator is None:
        return True
    if len(separator) != 1:
        return False
    code = ord(separator)
    if code < 0x20 or 0x7F <= code <= 0x9F:
        return False
    return not 0xD800 <= code <= 0xDFFF


@dataclass(slots=True, eq=False)
class Part:
    """One integer or string component of a version.

    Attributes:
        value: The integer (0 to 4294967295) or the string of this part
        separator: The character that preceded this part, None if none
        kind: Dialect specific tag (":" epoch, "-" revision, "R" Roman numeral)
        width: Number of digits the integer was written with

    Equality, like ordering, goes through :meth:`compare`: the separator,
    kind and width do not take part in it.
    """

    value: Union[int, str] = 0
    separator: Optional[str] = None
    kind: Optional[str] = None
    width: int = 0

    @property
    def is_integer(self) -> bool:
        """Return True if this part holds an integer."""
        return isinstance(self.value, int)

    @property
    def integer(self) -> int:
        """Return the integer of this part.

        Raises:
            WrongTypeError: If the part holds a string
        """
        if not isinstance(self.value, int):
            raise WrongTypeError("this part is not an integer.")
        return self.value

    @property
    def string(self) -> str:
        """Return the string of this part.

        Raises:
            WrongTypeError: If the part holds an integer
        """
        if isinstance(self.value, int):
            raise WrongTypeError("this part is not a string.")
        return self.value

    def set_value(self, text: str) -> None:
        """Set the part from a piece of version text.

        Text made of ASCII digits only becomes an integer and its length is
        saved as the width. Anything else is saved as a string.

        Raises:
            InvalidVersionError: If the digits do not fit in 32 bits
        """
        if text == "" or (text.isascii() and text.isdigit()):
            number = int(text or "0")
            if number > MAX_INTEGER:
                raise InvalidVersionError(text, "integer too large for a valid version.")
            self.value = number
            self.set_width(len(text))
        else:
            self.value = text

    def set_integer(self, value: int) -> None:
        if not 0 <= value <= MAX_INTEGER:
            raise InvalidParameterError(f"integer {value} is out of range for a version part.")
        self.value = value

    def set_string(self, value: str) -> None:
        self.value = value

    def set_separator(self, separator: Optional[str]) -> None:
        """Set the separator found in front of this part.

        Raises:
            InvalidParameterError: If the separator is a control character or
                a surrogate
        """
        if not is_valid_separator(separator):
            raise InvalidParameterError(
                "separator cannot be a control other than NUL or a surrogate."
            )
        self.separator = separator

    def set_kind(self, kind: Optional[str]) -> None:
        """Tag this part with a one character dialect kind, or None.

        Raises:
            InvalidParameterError: If ``kind`` is not a single character
        """
        if kind is not None and len(kind) != 1:
            raise InvalidParameterError("a part kind must be exactly one character.")
        self.kind = kind

    def set_width(self, width: int) -> None:
        if width < 0:
            raise InvalidParameterError(f"part width cannot be negative, got {width}.")
        self.width = width

    def set_to_max_integer(self) -> None:
        self.value = MAX_INTEGER

    def set_to_max_string(self, length: int = 1) -> None:
        self.value = STRING_CEILING * max(1, length)

    def is_zero(self) -> bool:
        """Return True for the integer 0 or a string of "A" letters only."""
        if isinstance(self.value, int):
            return self.value == 0
        return all(c == STRING_FLOOR for c in self.value)

    def next(self) -> bool:
        """Increment this part by one.

        Integers count up to 4294967295. Strings count like an odometer
        over the letters, read right to left, going through "A" to "Z" then
        "a" to "z"; characters other than ASCII letters are skipped.

        Returns:
            False, leaving the part untouched, when no larger value exists
        """
        if isinstance(self.value, int):
            if self.value >= MAX_INTEGER:
                return False
            self.value += 1
            return True

        chars = list(self.value)
        for idx in range(len(chars) - 1, -1, -1):
            c = chars[idx]
            if "A" <= c <= "Y" or "a" <= c <= "y":
                chars[idx] = chr(ord(c) + 1)
            elif c == "Z":
                chars[idx] = "a"
            elif c == "z":
                # carry
                chars[idx] = "A"
                continue
            else:
                continue
            self.value = "".join(chars)
            return True
        return False

    def previous(self) -> bool:
        """Decrement this part by one.

        The mirror of :meth:`next`: integers stop at 0 and strings stop
        when every letter is already "A".

        Returns:
            False, leaving the part untouched, when no smaller value exists
        """
        if isinstance(self.value, int):
            if self.value <= 0:
                return False
            self.value -= 1
            return True

        chars = list(self.value)
        for idx in range(len(chars) - 1, -1, -1):
            c = chars[idx]
            if "B" <= c <= "Z" or "b" <= c <= "z":
                chars[idx] = chr(ord(c) - 1)
            elif c == "a":
                chars[idx] = "Z"
            elif c == "A":
                # borrow
                chars[idx] = "z"
                continue
            else:
                continue
            self.value = "".join(chars)
            return True
        return False

    def compare(self, other: Part) -> int:
        """Compare two parts.

        Two integers compare numerically. In every other case the text
        forms are compared, so the string "10" sorts before the integer 2.

        Returns:
            -1, 0 or 1 as this part sorts before, equal to or after ``other``
        """
        if isinstance(self.value, int) and isinstance(other.value, int):
            a: Union[int, str] = self.value
            b: Union[int, str] = other.value
        else:
            a = self.to_string()
            b = other.to_string()
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def to_string(self) -> str:
        if isinstance(self.value, int):
            return str(self.value)
        return self.value

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Part):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: Part) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Part) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Part) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Part) -> bool:
        return self.compare(other) >= 0
