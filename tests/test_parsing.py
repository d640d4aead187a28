"""
Tests for the strict type-specific parsers.
"""

import math
from decimal import Decimal

import pytest

from dtdemo.conversions import ConversionError, to_single
from dtdemo.kinds import PrimitiveKind
from dtdemo.parsing import (
    parse,
    parse_bool,
    parse_char,
    parse_decimal,
    parse_double,
    parse_float,
    parse_int,
    parse_integer,
)


class TestParseInt:
    """Test 32-bit integer parsing."""

    def test_plain_digits(self):
        assert parse_int("123") == 123

    def test_sign_and_whitespace(self):
        """Should accept a sign and ignore surrounding whitespace."""
        assert parse_int(" -42 ") == -42
        assert parse_int("+7") == 7

    @pytest.mark.parametrize("text", ["12.5", "abc", "", "1_000", "0x1F", "1 2"])
    def test_malformed(self, text):
        with pytest.raises(ConversionError):
            parse_int(text)

    def test_overflow(self):
        """Should reject values beyond the 32-bit range."""
        assert parse_int("2147483647") == 2147483647
        with pytest.raises(ConversionError):
            parse_int("2147483648")

    def test_none_is_an_error(self):
        with pytest.raises(ConversionError):
            parse_int(None)

    def test_other_widths(self):
        assert parse_integer("255", PrimitiveKind.BYTE) == 255
        with pytest.raises(ConversionError):
            parse_integer("256", PrimitiveKind.BYTE)
        with pytest.raises(ConversionError):
            parse_integer("1", PrimitiveKind.DOUBLE)


class TestParseReal:
    """Test floating point and decimal parsing."""

    def test_double(self):
        assert parse_double("3.14159") == pytest.approx(3.14159)

    def test_exponent_and_leading_dot(self):
        assert parse_double("1e3") == 1000.0
        assert parse_double(".5") == 0.5

    def test_special_values(self):
        """Should accept Infinity and NaN names."""
        assert parse_double("Infinity") == math.inf
        assert parse_double("-infinity") == -math.inf
        assert math.isnan(parse_double("NaN"))

    @pytest.mark.parametrize("text", ["3,14", "inf", "pi", "1e", "--1"])
    def test_malformed(self, text):
        with pytest.raises(ConversionError):
            parse_double(text)

    def test_float_rounds_to_single(self):
        assert parse_float("3.14159265359") == to_single(3.14159265359)

    def test_decimal_is_exact(self):
        assert parse_decimal("3.14159265359") == Decimal("3.14159265359")


class TestParseBool:
    """Test boolean parsing."""

    def test_true(self):
        assert parse_bool("True") is True

    def test_false(self):
        assert parse_bool("false") is False

    def test_case_and_whitespace(self):
        assert parse_bool("  TRUE ") is True

    @pytest.mark.parametrize("text", ["yes", "1", "", "t"])
    def test_malformed(self, text):
        with pytest.raises(ConversionError):
            parse_bool(text)


def test_parse_char():
    assert parse_char("A") == "A"
    assert parse_char(" ") == " "
    with pytest.raises(ConversionError):
        parse_char("AB")


def test_parse_dispatch():
    assert parse("65535", PrimitiveKind.USHORT) == 65535
    assert parse("hello", PrimitiveKind.STRING) == "hello"
    assert parse("false", PrimitiveKind.BOOL) is False
    with pytest.raises(ConversionError):
        parse("2023-01-01", PrimitiveKind.DATETIME)


class TestAsciiDigitsOnly:
    """Non-ASCII digits are not decimal digits here."""

    @pytest.mark.parametrize("text", ["١٢٣", "１２３"])
    def test_int(self, text):
        with pytest.raises(ConversionError):
            parse_int(text)

    @pytest.mark.parametrize("text", ["١٢٣", "١.٥", "１２３"])
    def test_double(self, text):
        with pytest.raises(ConversionError):
            parse_double(text)
