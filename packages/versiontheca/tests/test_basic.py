# SPDX-License-Identifier: MIT
"""Unit tests for basic versions."""

import pytest

from versiontheca import Basic, InvalidVersionError, VersionLimitError


def parsed(version: str) -> Basic:
    t = Basic()
    t.parse(version)
    return t


class TestBasicParse:
    """Tests for parsing basic versions."""

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("1.0", "1.0"),
            ("3", "3.0"),
            ("1.0.0", "1.0"),
            ("1.2.3", "1.2.3"),
            ("01.002.0003", "1.2.3"),
            ("4294967295.4294967295", "4294967295.4294967295"),
        ],
    )
    def test_valid(self, version, expected):
        """Test canonicalization of valid versions."""
        assert parsed(version).to_string() == expected

    @pytest.mark.parametrize("version", ["1.0a", "a", "1.0-rc1", "1.2.3b"])
    def test_letters(self, version):
        """Test that letters are refused."""
        with pytest.raises(
            InvalidVersionError,
            match=r"basic versions only support integers separated by periods \(\.\)\.",
        ):
            parsed(version)

    def test_letters_clear_parts(self):
        """Test that a failed parse leaves no parts behind."""
        t = Basic()
        with pytest.raises(InvalidVersionError):
            t.parse("1.0a")
        assert t.empty()

    def test_overflow_first(self):
        """Test that an overflow is reported before any letter."""
        with pytest.raises(InvalidVersionError, match="integer too large"):
            parsed("1.4294967296.a")

    def test_empty_token(self):
        """Test that two periods in a row are refused."""
        with pytest.raises(InvalidVersionError, match="a version value cannot be an empty string."):
            parsed("1..2")


class TestBasicCompare:
    """Tests for comparing basic versions."""

    def test_order(self):
        """Test the order of basic versions."""
        assert parsed("1.2").compare(parsed("1.1")) == 1
        assert parsed("1.2").compare(parsed("1.2.0.0")) == 0
        assert parsed("1.2").compare(parsed("1.10")) == -1
        assert parsed("2").compare(parsed("1.99.99")) == 1


class TestBasicNextPrevious:
    """Tests for next() and previous() on basic versions."""

    def test_next_carry(self):
        """Test that the maximum integer carries to the previous part."""
        t = parsed("1.4294967295")
        t.next(1)
        assert t.to_string() == "2.0"

    def test_previous_borrow(self):
        """Test that zero borrows from the previous part."""
        t = parsed("2.0")
        t.previous(1)
        assert t.to_string() == "1.4294967295"

    def test_maximum(self):
        """Test that the largest version cannot be incremented."""
        t = parsed("4294967295.4294967295.4294967295")
        with pytest.raises(VersionLimitError, match="maximum limit reached"):
            t.next(2)
