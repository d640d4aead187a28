"""
Demo sections: the labelled lines the entry routine prints.

Each section is a header plus a list of human-readable lines. Building the
sections performs every conversion the demo shows, so a malformed literal
fails here, before anything is printed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, List, Tuple

from dtdemo import converter, parsing
from dtdemo.conversions import narrow, to_single, widen
from dtdemo.kinds import PRECISION_DIGITS, PrimitiveKind, integer_range
from dtdemo.values import SampleCatalog

TITLE = "===== Data Types Demo ====="
FOOTER = "===== Demo Complete ====="

INTEGERS = "[Integer Types]"
FLOATS = "[Floating Point Types]"
TEXT = "[Characters and Strings]"
BOOLEANS = "[Boolean Type]"
DATES = "[Date and Time]"
IMPLICIT = "[Implicit Conversions]"
EXPLICIT = "[Explicit Conversions]"
CONVERTER = "[Converter Conversions]"
PARSE = "[Parse Conversions]"
CONSTANTS = "[Constants]"

SECTION_HEADERS = (
    INTEGERS, FLOATS, TEXT, BOOLEANS, DATES,
    IMPLICIT, EXPLICIT, CONVERTER, PARSE, CONSTANTS,
)

NOW_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

# Inputs for the text-to-value demos
NUMBER_TEXT = "123"
DOUBLE_TEXT = "3.14159"
BOOL_TEXT = "True"

# Inputs for the conversion demos
SMALL_INT = 100
PI_DOUBLE = 3.14159
LARGE_LONG = 9876543210


@dataclass(frozen=True)
class Section:
    """A header and the lines printed under it."""

    title: str
    lines: Tuple[str, ...] = ()


def format_single(value: float) -> str:
    """Shortest decimal text that rounds back to the same single precision value."""
    for digits in range(1, 10):
        candidate = float(f"{value:.{digits}g}")
        if to_single(candidate) == value:
            return repr(candidate)
    return repr(value)


def whole_days(span: timedelta) -> int:
    """Whole days in `span`, truncated toward zero (timedelta.days floors)."""
    return math.trunc(span / timedelta(days=1))


def format_value(value: Any, kind: PrimitiveKind) -> str:
    if kind == PrimitiveKind.FLOAT:
        return format_single(value)
    return str(value)


def _integer_section(catalog: SampleCatalog) -> Section:
    lines = []
    for sample in catalog.integers:
        rng = integer_range(sample.kind)
        lines.append(f"{sample.label} value: {sample.value} (range: {rng.describe()})")
    return Section(INTEGERS, tuple(lines))


def _float_section(catalog: SampleCatalog) -> Section:
    lines = [
        f"{s.label} value: {format_value(s.value, s.kind)} "
        f"(precision: {PRECISION_DIGITS[s.kind]} significant digits)"
        for s in catalog.floats
    ]
    return Section(FLOATS, tuple(lines))


def _text_section(catalog: SampleCatalog) -> Section:
    char = catalog.get("char")
    string = catalog.get("string")
    return Section(TEXT, (
        f"char value: {char.value} (Unicode character, code point U+{ord(char.value):04X})",
        f"string value: {string.value} (Unicode string)",
        f"string length: {len(string.value)} characters",
    ))


def _boolean_section(catalog: SampleCatalog) -> Section:
    t = catalog.get("true").value
    f = catalog.get("false").value
    return Section(BOOLEANS, (
        f"true value: {t}",
        f"false value: {f}",
        f"true AND false: {t and f}",
        f"true OR false: {t or f}",
        f"NOT true: {not t}",
    ))


def _date_section(catalog: SampleCatalog) -> Section:
    now: datetime = catalog.get("now").value
    today: datetime = catalog.get("today").value
    specific: datetime = catalog.get("specific").value
    return Section(DATES, (
        f"current date and time: {now.strftime(NOW_FORMAT)}",
        f"today's date: {today.strftime(DATE_FORMAT)}",
        f"specific date: {specific.strftime(NOW_FORMAT)}",
        f"days since the specific date: {whole_days(now - specific)}",
    ))


def _implicit_section(catalog: SampleCatalog) -> Section:
    K = PrimitiveKind
    float_value = catalog.get("float").value
    bigger_long = widen(SMALL_INT, K.INT, K.LONG)
    float_from_int = widen(SMALL_INT, K.INT, K.FLOAT)
    double_from_float = widen(float_value, K.FLOAT, K.DOUBLE)
    return Section(IMPLICIT, (
        f"int {SMALL_INT} implicitly converted to long: {bigger_long}",
        f"int {SMALL_INT} implicitly converted to float: {format_single(float_from_int)}",
        f"float {format_single(float_value)} implicitly converted to double: {double_from_float!r}",
    ))


def _explicit_section() -> Section:
    K = PrimitiveKind
    int_pi = narrow(PI_DOUBLE, K.INT)
    truncated = narrow(LARGE_LONG, K.INT)
    return Section(EXPLICIT, (
        f"double {PI_DOUBLE} explicitly converted to int: {int_pi} (fraction truncated)",
        f"long {LARGE_LONG} explicitly converted to int: {truncated} (high bits lost)",
    ))


def _converter_section() -> Section:
    return Section(CONVERTER, (
        f'string "{NUMBER_TEXT}" converted to int: {converter.to_int32(NUMBER_TEXT)}',
        f'string "{DOUBLE_TEXT}" converted to double: {converter.to_double(DOUBLE_TEXT)}',
        f'string "{BOOL_TEXT}" converted to bool: {converter.to_boolean(BOOL_TEXT)}',
    ))


def _parse_section() -> Section:
    return Section(PARSE, (
        f'string "{NUMBER_TEXT}" parsed as int: {parsing.parse_int(NUMBER_TEXT)}',
        f'string "{DOUBLE_TEXT}" parsed as double: {parsing.parse_double(DOUBLE_TEXT)}',
        f'string "{BOOL_TEXT}" parsed as bool: {parsing.parse_bool(BOOL_TEXT)}',
    ))


def _constant_section(catalog: SampleCatalog) -> Section:
    return Section(CONSTANTS, tuple(
        f"constant {s.label} value: {s.value}" for s in catalog.constants
    ))


def build_sections(catalog: SampleCatalog) -> List[Section]:
    """
    Build every demo section, in print order.

    Args:
        catalog: Sample values from `values.build_catalog`

    Returns:
        Sections ordered as SECTION_HEADERS

    Raises:
        ConversionError: If any demonstrated conversion fails
    """
    return [
        _integer_section(catalog),
        _float_section(catalog),
        _text_section(catalog),
        _boolean_section(catalog),
        _date_section(catalog),
        _implicit_section(catalog),
        _explicit_section(),
        _converter_section(),
        _parse_section(),
        _constant_section(catalog),
    ]
