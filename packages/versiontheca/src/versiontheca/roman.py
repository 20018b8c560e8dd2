# SPDX-License-Identifier: MIT
"""Roman numeral versions such as ``III.XII``.

Parts written as Roman numerals are converted to integers on parsing so they
compare numerically, and converted back when rendering. Conversion of
integers to numerals supports 1 to 3999.
"""

from __future__ import annotations

from .constants import KIND_ROMAN, MAX_ROMAN
from .part import Part
from .trait import Trait

ROMAN_DIGITS = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_THOUSANDS = ("", "M", "MM", "MMM")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_UNITS = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")


def from_roman_number(value: str) -> int:
    """Convert a Roman numeral to an integer.

    Letters are case insensitive. The numeral is read right to left: a
    letter smaller than the one on its right is subtracted and so are the
    letters equal to it that follow; any other letter is added. Non
    standard numerals are therefore accepted ("IIII" is 4, "IC" is 99).

    Args:
        value: The numeral to convert

    Returns:
        The value of the numeral, or 0 if ``value`` is empty or includes a
        letter that is not a Roman digit

    Examples:
        >>> from_roman_number("MCMXCIV")
        1994
        >>> from_roman_number("xlix")
        49
        >>> from_roman_number("1.0")
        0
    """
    numbers: list[int] = []
    for c in value.upper():
        digit = ROMAN_DIGITS.get(c)
        if digit is None:
            return 0
        numbers.append(digit)
    if not numbers:
        return 0

    result = numbers[-1]
    subtract = False
    for idx in range(len(numbers) - 2, -1, -1):
        if numbers[idx] == numbers[idx + 1]:
            if subtract:
                result -= numbers[idx]
            else:
                result += numbers[idx]
        elif numbers[idx] < numbers[idx + 1]:
            result -= numbers[idx]
            subtract = True
        else:
            result += numbers[idx]
            subtract = False
    return result


def to_roman_number(value: int) -> str:
    """Convert an integer to its canonical Roman numeral.

    Returns:
        The uppercase numeral, or an empty string when ``value`` is not
        between 1 and 3999

    Examples:
        >>> to_roman_number(1994)
        'MCMXCIV'
        >>> to_roman_number(4000)
        ''
    """
    if value <= 0 or value > MAX_ROMAN:
        return ""
    return (
        _THOUSANDS[value // 1000]
        + _HUNDREDS[(value // 100) % 10]
        + _TENS[(value // 10) % 10]
        + _UNITS[value % 10]
    )


class Roman(Trait):
    """Dialect accepting Roman numerals wherever an integer is expected."""

    name = "roman"

    def parse(self, version: str) -> None:
        super().parse(version)

        # numerals beyond MAX_ROMAN could not be written back
        for part in self:
            if not part.is_integer:
                value = from_roman_number(part.string)
                if 1 <= value <= MAX_ROMAN:
                    part.set_integer(value)
                    part.set_kind(KIND_ROMAN)

    def part_to_string(self, part: Part) -> str:
        if part.kind == KIND_ROMAN and part.is_integer:
            numeral = to_roman_number(part.integer)
            if numeral:
                return numeral
        return part.to_string()
