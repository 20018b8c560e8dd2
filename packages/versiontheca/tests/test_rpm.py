# SPDX-License-Identifier: MIT
"""Unit tests for RPM versions."""

import re

import pytest

from versiontheca import (
    Basic,
    InvalidParameterError,
    InvalidVersionError,
    MAX_PARTS,
    Rpm,
    VersionLimitError,
    compare_rpm_strings,
)


def parsed(version: str) -> Rpm:
    t = Rpm()
    t.parse(version)
    return t


class TestRpmParse:
    """Tests for parsing RPM versions."""

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("1.0", "1.0"),
            ("3", "3.0"),
            ("1.0.0", "1.0"),
            ("0:q2.71-z3", "q2.71-z3"),
            ("2.71.3z-rc32.5", "2.71.3z-rc32.5"),
            ("1.1~before", "1.1~before"),
            ("1.1-_rc1", "1.1-_rc1"),
            ("1:1.1", "1:1.1"),
            ("1.2+3", "1.2+3"),
            ("1.0^git3", "1.0^git3"),
            ("1.3A", "1.3A"),
            ("A1A", "A1A"),
            ("1.0A.0", "1.0A"),
        ],
    )
    def test_valid(self, version, expected):
        """Test canonicalization of valid versions."""
        assert parsed(version).to_string() == expected

    @pytest.mark.parametrize("version", ["A1A", "1.3A", "1.0A.0", "1.0^git3.0", "0:q2.71-z3"])
    def test_canonical_is_equal(self, version):
        """Test that the canonical form compares equal to its source."""
        canonical = parsed(version).to_string()
        assert parsed(version).compare(parsed(canonical)) == 0

    def test_plus_is_separator(self):
        """Test that '+' separates parts."""
        t = parsed("1.2+3")
        assert [(p.value, p.separator) for p in t] == [(1, None), (2, "."), (3, "+")]

    @pytest.mark.parametrize(
        "version,code",
        [
            ("--", "00002D"),
            ("1.0#", "000023"),
            ("32:1.2.55-3:7", "00003A"),
        ],
    )
    def test_invalid_characters(self, version, code):
        """Test characters that are not accepted."""
        with pytest.raises(InvalidVersionError, match=re.escape(f"\\U{code}")):
            parsed(version)

    def test_empty_token(self):
        """Test that '+' cannot be left alone."""
        with pytest.raises(InvalidVersionError, match="a version value cannot be an empty string."):
            parsed("+-")

    @pytest.mark.parametrize("version", ["-751", ":1", "1-2:3"])
    def test_misplaced_delimiters(self, version):
        """Test the position of the ':' and '-' delimiters."""
        message = f"position of ':' and/or '-' is invalid in \"{version}\"."
        with pytest.raises(InvalidVersionError, match=re.escape(message)):
            parsed(version)

    def test_epoch_not_integer(self):
        """Test that the epoch is a number."""
        with pytest.raises(InvalidVersionError, match="epoch must be a valid integer."):
            parsed("x:1.0")


class TestRpmCompare:
    """Tests for the RPM comparison rules."""

    @pytest.mark.parametrize(
        "a,b",
        [
            ("1.1-rc1", "1.1-_rc1"),
            ("1.1-rc1", "1.1-rc1_"),
            ("1.2", "1.2.0.0"),
            ("0:1.2", "1.2"),
        ],
    )
    def test_equal(self, a, b):
        """Test versions that are equal."""
        assert parsed(a).compare(parsed(b)) == 0
        assert parsed(b).compare(parsed(a)) == 0

    @pytest.mark.parametrize(
        "lower,higher",
        [
            ("1.1-alpha", "1.1-rc1"),
            ("1.1-rc1", "1.1-rc2"),
            ("1.1~before", "1.1"),
            ("1.1f", "1.1q"),
            ("1.1q", "1.2"),
            ("1.1q", "1.1.5"),
            ("53.2Z", "53.2z"),
            ("53A2z", "53a2z"),
            ("1.0", "1.0^git1"),
            ("1.0^git1", "1.0.1"),
            ("1.0~rc1", "1.0+rc1"),
            ("1.0", "1:0.1"),
        ],
    )
    def test_order(self, lower, higher):
        """Test pairs of versions in increasing order."""
        assert parsed(lower).compare(parsed(higher)) == -1
        assert parsed(higher).compare(parsed(lower)) == 1

    def test_other_dialect(self):
        """Test that a basic version is compared with the generic rules."""
        b = Basic()
        b.parse("1.2.4")
        assert parsed("1.2.5").compare(b) == 1

    def test_string_order(self):
        """Test the RPM character order."""
        assert compare_rpm_strings("~", "") == -1
        assert compare_rpm_strings("", "+") == -1
        assert compare_rpm_strings("+", "A") == -1
        assert compare_rpm_strings("Z", "a") == -1
        assert compare_rpm_strings("z", "^") == -1
        assert compare_rpm_strings("_a_", "a") == 0


class TestRpmNextPrevious:
    """Tests for next() and previous() on RPM versions."""

    def test_string_format(self):
        """Test walking through a format with a letter part."""
        f = parsed("9.9.9z.9")
        t = parsed("1.3.2")

        t.next(4, f)
        assert t.to_string() == "1.3.2A.1"
        for _ in range(8):
            t.next(4, f)
        assert t.to_string() == "1.3.2A.9"
        t.next(4, f)
        assert t.to_string() == "1.3.2B"

        t.previous(4, f)
        assert t.to_string() == "1.3.2A.9"
        for _ in range(8):
            t.previous(4, f)
        assert t.to_string() == "1.3.2A.1"
        t.previous(4, f)
        assert t.to_string() == "1.3.2"
        t.previous(4, f)
        assert t.to_string() == "1.3.1z.9"

    def test_previous_letters(self):
        """Test decrementing a letter part down to nothing."""
        f = parsed("9.9")
        t = parsed("1.3C")
        t.previous(2, f)
        assert t.to_string() == "1.3B"
        t.previous(2, f)
        assert t.to_string() == "1.3"
        t.previous(2, f)
        assert t.to_string() == "1.2.4294967295"

    def test_previous_from_zero_letter(self):
        """Test that "A" borrows and wraps to "z"."""
        f = parsed("9.9")
        t = parsed("1.3A")
        t.previous(2, f)
        assert t.to_string() == "1.2z"
        t.previous(2, f)
        assert t.to_string() == "1.2y"

    def test_epoch_and_release_untouched(self):
        """Test that only the version section changes."""
        t = parsed("5:1.5.3-r5")
        t.previous(4)
        assert t.to_string() == "5:1.5.2.4294967295.4294967295-r5"
        t.next(4)
        assert t.to_string() == "5:1.5.3-r5"

    def test_too_many_parts(self):
        """Test that next() cannot grow a version over the maximum."""
        t = parsed("103:1.2.3.4.5-r5with6many8release9parts")
        assert t.size() == 15
        with pytest.raises(InvalidParameterError, match="trying to insert more parts"):
            t.next(15)
        assert t.size() == MAX_PARTS

    def test_empty(self):
        """Test that an empty version has no upstream version."""
        with pytest.raises(
            VersionLimitError,
            match="no parts in this RPM version; cannot compute upstream start/end.",
        ):
            Rpm().previous(0)
