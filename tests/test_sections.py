"""
Tests for building the demo sections.
"""

from datetime import datetime, timedelta

from dtdemo.conversions import to_single
from dtdemo.sections import (
    EXPLICIT,
    SECTION_HEADERS,
    build_sections,
    format_single,
    whole_days,
)
from dtdemo.values import build_catalog

NOW = datetime(2024, 1, 1, 12, 0, 0)


def _by_title(now=NOW):
    return {s.title: s for s in build_sections(build_catalog(now=now))}


class TestBuildSections:
    """Test section order and content."""

    def test_section_order(self):
        sections = build_sections(build_catalog(now=NOW))
        assert [s.title for s in sections] == list(SECTION_HEADERS)

    def test_every_section_has_lines(self):
        for section in build_sections(build_catalog(now=NOW)):
            assert section.lines

    def test_integer_ranges(self):
        lines = _by_title()["[Integer Types]"].lines
        assert "byte value: 255 (range: 0 to 255)" in lines
        assert "sbyte value: -128 (range: -128 to 127)" in lines

    def test_float_shows_single_precision_digits(self):
        lines = _by_title()["[Floating Point Types]"].lines
        assert lines[0].startswith("float value: 3.1415927 ")
        assert lines[1].startswith("double value: 3.14159265359 ")
        assert lines[2].startswith("decimal value: 3.14159265359 ")

    def test_string_length_counts_characters(self):
        lines = _by_title()["[Characters and Strings]"].lines
        assert "string length: 6 characters" in lines
        assert "U+0041" in lines[0]

    def test_boolean_logic(self):
        lines = _by_title()["[Boolean Type]"].lines
        assert "true AND false: False" in lines
        assert "true OR false: True" in lines
        assert "NOT true: False" in lines

    def test_days_since_fixed_date(self):
        lines = _by_title()["[Date and Time]"].lines
        assert "current date and time: 2024-01-01 12:00:00" in lines
        assert "today's date: 2024-01-01" in lines
        assert "specific date: 2023-01-01 12:00:00" in lines
        assert "days since the specific date: 365" in lines

    def test_implicit_conversions(self):
        lines = _by_title()["[Implicit Conversions]"].lines
        assert lines == (
            "int 100 implicitly converted to long: 100",
            "int 100 implicitly converted to float: 100.0",
            "float 3.1415927 implicitly converted to double: 3.1415927410125732",
        )

    def test_explicit_truncation(self):
        lines = _by_title()[EXPLICIT].lines
        assert "double 3.14159 explicitly converted to int: 3 (fraction truncated)" in lines
        assert "long 9876543210 explicitly converted to int: 1286608618 (high bits lost)" in lines

    def test_both_text_mechanisms_agree(self):
        sections = _by_title()
        converted = [line.split(": ")[-1] for line in sections["[Converter Conversions]"].lines]
        parsed = [line.split(": ")[-1] for line in sections["[Parse Conversions]"].lines]
        assert converted == parsed == ["123", "3.14159", "True"]

    def test_constants(self):
        lines = _by_title()["[Constants]"].lines
        assert lines == (
            "constant PI value: 3.14159",
            "constant APP_NAME value: Data Types Demo",
        )


class TestFormatSingle:
    """Test shortest single precision formatting."""

    def test_pi(self):
        assert format_single(to_single(3.14159265359)) == "3.1415927"

    def test_whole_number(self):
        assert format_single(100.0) == "100.0"

    def test_tenth(self):
        assert format_single(to_single(0.1)) == "0.1"


class TestWholeDays:
    """Days since the fixed date truncate toward zero."""

    def test_less_than_a_day_before_is_zero(self):
        lines = _by_title(datetime(2023, 1, 1, 0, 0, 0))["[Date and Time]"].lines
        assert "days since the specific date: 0" in lines

    def test_more_than_a_day_before_is_negative(self):
        lines = _by_title(datetime(2022, 12, 30, 0, 0, 0))["[Date and Time]"].lines
        assert "days since the specific date: -2" in lines

    def test_whole_days(self):
        assert whole_days(timedelta(hours=-1)) == 0
        assert whole_days(timedelta(days=1, hours=23)) == 1
