"""
Type-specific parsers: text -> value, one function per kind.

Parsers are strict:
    - Input must be a str (None is an error, not a default)
    - Surrounding whitespace is ignored
    - Integers are an optional sign followed by decimal digits
    - Doubles accept decimal/exponent notation and Infinity, -Infinity, NaN
    - Booleans are "true" or "false", any letter case

The general converter in `dtdemo.converter` delegates its text inputs here,
so both mechanisms agree on every well-formed string.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict

from dtdemo.conversions import ConversionError, to_single
from dtdemo.kinds import PrimitiveKind, integer_range

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_REAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_REALS = {
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
    "nan": math.nan,
}


def _require_text(text, kind: PrimitiveKind) -> str:
    if not isinstance(text, str):
        raise ConversionError(f"Cannot parse {text!r} as {kind.value}: input is not a string")
    return text.strip()


def parse_integer(text: str, kind: PrimitiveKind) -> int:
    """
    Parse `text` as the fixed-width integer `kind`.

    Raises:
        ConversionError: If the text is not an integer or does not fit the kind
    """
    rng = integer_range(kind)
    if rng is None:
        raise ConversionError(f"{kind.value} is not an integer kind")
    stripped = _require_text(text, kind)
    if not _INTEGER_RE.fullmatch(stripped):
        raise ConversionError(f"Input string {text!r} was not in a correct format for {kind.value}")
    value = int(stripped)
    if not rng.contains(value):
        raise ConversionError(f"Value {stripped} was either too large or too small for {kind.value}")
    return value


def parse_int(text: str) -> int:
    """Parse a 32-bit signed integer."""
    return parse_integer(text, PrimitiveKind.INT)


def parse_double(text: str) -> float:
    """Parse a double-precision floating point number."""
    stripped = _require_text(text, PrimitiveKind.DOUBLE)
    special = _SPECIAL_REALS.get(stripped.lower())
    if special is not None:
        return special
    if not _REAL_RE.fullmatch(stripped):
        raise ConversionError(f"Input string {text!r} was not in a correct format for double")
    return float(stripped)


def parse_float(text: str) -> float:
    """Parse a single-precision floating point number."""
    return to_single(parse_double(text))


def parse_decimal(text: str) -> Decimal:
    stripped = _require_text(text, PrimitiveKind.DECIMAL)
    if not _REAL_RE.fullmatch(stripped):
        raise ConversionError(f"Input string {text!r} was not in a correct format for decimal")
    try:
        return Decimal(stripped)
    except InvalidOperation as e:
        raise ConversionError(f"Input string {text!r} was not in a correct format for decimal") from e


def parse_bool(text: str) -> bool:
    """Parse "true" or "false", ignoring case and surrounding whitespace."""
    stripped = _require_text(text, PrimitiveKind.BOOL).lower()
    if stripped == "true":
        return True
    if stripped == "false":
        return False
    raise ConversionError(f"String {text!r} was not recognized as a valid bool")


def parse_char(text: str) -> str:
    # no stripping: " " is a valid char
    if not isinstance(text, str) or len(text) != 1:
        raise ConversionError(f"String {text!r} must be exactly one character long")
    return text


_PARSERS: Dict[PrimitiveKind, Callable] = {
    PrimitiveKind.FLOAT: parse_float,
    PrimitiveKind.DOUBLE: parse_double,
    PrimitiveKind.DECIMAL: parse_decimal,
    PrimitiveKind.BOOL: parse_bool,
    PrimitiveKind.CHAR: parse_char,
}


def parse(text: str, kind: PrimitiveKind):
    """
    Parse `text` as `kind`.

    Args:
        text: Input string
        kind: Target kind (any kind except DATETIME)

    Returns:
        Parsed value

    Raises:
        ConversionError: On malformed input or an unsupported kind
    """
    if integer_range(kind) is not None:
        value = parse_integer(text, kind)
    elif kind == PrimitiveKind.STRING:
        _require_text(text, kind)
        value = text
    elif kind in _PARSERS:
        value = _PARSERS[kind](text)
    else:
        raise ConversionError(f"No parser for {kind.value}")
    logger.debug("parse %r as %s = %r", text, kind.value, value)
    return value
