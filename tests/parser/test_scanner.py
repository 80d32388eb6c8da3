# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the leading-integer scanner."""

import pytest

from ebnfkit.errors import FormatError
from ebnfkit.parser.scanner import INT64_MAX, INT64_MIN, ScanError, is_space, scan_int, trim_space

# ###############
# Accepted Input
# ###############


class TestScanInt:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("0", 0),
            ("42", 42),
            ("007", 7),
            ("+5", 5),
            ("-5", -5),
            ("  12", 12),
            ("\t3", 3),
            ("\v3", 3),
            ("\f3", 3),
            ("\r3", 3),
            ("\xa03", 3),
            ("\u20003", 3),
            ("\u200a3", 3),
            ("\u30003", 3),
        ],
    )
    def test_scans_value(self, source: str, expected: int) -> None:
        assert scan_int(source) == expected

    def test_stops_at_first_non_digit(self) -> None:
        assert scan_int("42abc") == 42
        assert scan_int("1 2") == 1
        assert scan_int("3.5") == 3

    def test_int64_bounds_accepted(self) -> None:
        assert scan_int(str(INT64_MAX)) == INT64_MAX
        assert scan_int(str(INT64_MIN)) == INT64_MIN


# ###############
# Errors
# ###############


class TestScanIntErrors:
    @pytest.mark.parametrize("source", ["", "   ", "+", "-"])
    def test_missing_digits_at_end(self, source: str) -> None:
        with pytest.raises(ScanError, match="unexpected end of input"):
            scan_int(source)

    @pytest.mark.parametrize("source", ["abc", "+x", "--5", ".5"])
    def test_non_digit_reports_expected_integer(self, source: str) -> None:
        with pytest.raises(ScanError, match="expected integer"):
            scan_int(source)

    def test_newline_before_number_rejected(self) -> None:
        with pytest.raises(ScanError, match="unexpected newline"):
            scan_int("\n5")

    def test_overflow_rejected(self) -> None:
        with pytest.raises(ScanError, match="integer overflow"):
            scan_int(str(INT64_MAX + 1))

    def test_error_column_is_one_based(self) -> None:
        with pytest.raises(ScanError) as exc_info:
            scan_int("  x")
        assert exc_info.value.column == 3
        assert str(exc_info.value).startswith("Column 3:")

    def test_scan_error_is_format_error(self) -> None:
        with pytest.raises(FormatError):
            scan_int("nope")


# ###############
# White Space
# ###############


class TestWhiteSpace:
    @pytest.mark.parametrize(
        "ch", [" ", "\t", "\n", "\v", "\f", "\r", "\x85", "\xa0", "\u2000", "\u200a", "\u3000"]
    )
    def test_unicode_white_space(self, ch: str) -> None:
        assert is_space(ch)

    @pytest.mark.parametrize("ch", ["\x1c", "\x1d", "\x1e", "\x1f", "\u200b", "a", ""])
    def test_not_white_space(self, ch: str) -> None:
        assert not is_space(ch)

    def test_trim_space_keeps_ascii_separators(self) -> None:
        assert trim_space("\x1f x \x1c") == "\x1f x \x1c"

    def test_trim_space_strips_both_ends(self) -> None:
        assert trim_space("\xa0\t for \u3000\n") == "for"

    def test_trim_space_of_blank_string_is_empty(self) -> None:
        assert trim_space(" \f\v ") == ""

    def test_newline_after_other_white_space_rejected(self) -> None:
        with pytest.raises(ScanError, match="unexpected newline"):
            scan_int("\f\n5")
