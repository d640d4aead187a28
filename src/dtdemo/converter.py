"""
General-purpose converter: any supported value -> any primitive kind.

Unlike the strict parsers, the converter accepts several input types:
    - str:     delegated to `dtdemo.parsing`
    - None:    the kind's default value (0, 0.0, False, "")
    - bool:    1/0 for numbers, "True"/"False" for strings
    - numbers: converted by value; floats round half to even into integers,
               any number becomes a bool by testing for non-zero

Integer results are range-checked. A value that does not fit raises
instead of wrapping; wrapping is what `conversions.narrow` is for.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict

from dtdemo import parsing
from dtdemo.conversions import ConversionError, as_double, to_single
from dtdemo.kinds import CHAR_RANGE, PrimitiveKind, integer_range

logger = logging.getLogger(__name__)

DEFAULTS: Dict[PrimitiveKind, Any] = {
    PrimitiveKind.FLOAT: 0.0,
    PrimitiveKind.DOUBLE: 0.0,
    PrimitiveKind.DECIMAL: Decimal(0),
    PrimitiveKind.BOOL: False,
    PrimitiveKind.CHAR: "\0",
    PrimitiveKind.STRING: "",
}


def default_value(kind: PrimitiveKind) -> Any:
    if integer_range(kind) is not None:
        return 0
    if kind not in DEFAULTS:
        raise ConversionError(f"{kind.value} has no default value")
    return DEFAULTS[kind]


def _round_to_integer(value, kind: PrimitiveKind) -> int:
    if isinstance(value, float) and not math.isfinite(value):
        raise ConversionError(f"{value} cannot be converted to {kind.value}")
    if isinstance(value, Decimal) and not value.is_finite():
        raise ConversionError(f"{value} cannot be converted to {kind.value}")
    # round() on float and Decimal is round-half-even
    n = value if isinstance(value, int) else round(value)
    rng = integer_range(kind)
    if not rng.contains(n):
        raise ConversionError(f"Value {value} was either too large or too small for {kind.value}")
    return n


def _convert_number(value, kind: PrimitiveKind):
    if integer_range(kind) is not None:
        return _round_to_integer(value, kind)
    if kind == PrimitiveKind.FLOAT:
        return to_single(as_double(value, checked=True))
    if kind == PrimitiveKind.DOUBLE:
        return as_double(value, checked=True)
    if kind == PrimitiveKind.DECIMAL:
        if isinstance(value, float) and not math.isfinite(value):
            raise ConversionError(f"{value} cannot be converted to decimal")
        return Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    if kind == PrimitiveKind.BOOL:
        return value != 0
    if kind == PrimitiveKind.STRING:
        return str(value)
    if kind == PrimitiveKind.CHAR:
        if not isinstance(value, int) or not CHAR_RANGE.contains(value):
            raise ConversionError(f"{value!r} cannot be converted to char")
        return chr(value)
    raise ConversionError(f"{type(value).__name__} cannot be converted to {kind.value}")


def convert(value: Any, kind: PrimitiveKind) -> Any:
    """
    Convert `value` to `kind`.

    Args:
        value: str, int, float, Decimal, bool, datetime or None
        kind: Target kind

    Returns:
        The converted value

    Raises:
        ConversionError: On malformed text, out-of-range numbers,
            or input types with no conversion to the kind
    """
    if value is None:
        result = default_value(kind)
    elif isinstance(value, str):
        result = parsing.parse(value, kind)
    elif isinstance(value, bool):
        if kind == PrimitiveKind.STRING:
            result = str(value)
        elif kind == PrimitiveKind.CHAR:
            raise ConversionError("bool cannot be converted to char")
        else:
            result = _convert_number(int(value), kind) if kind != PrimitiveKind.BOOL else value
    elif isinstance(value, (int, float, Decimal)):
        result = _convert_number(value, kind)
    elif isinstance(value, datetime):
        if kind == PrimitiveKind.DATETIME:
            result = value
        elif kind == PrimitiveKind.STRING:
            result = value.isoformat(sep=" ")
        else:
            raise ConversionError(f"datetime cannot be converted to {kind.value}")
    else:
        raise ConversionError(f"{type(value).__name__} cannot be converted to {kind.value}")

    logger.debug("convert %r to %s = %r", value, kind.value, result)
    return result


def to_int32(value: Any) -> int:
    return convert(value, PrimitiveKind.INT)


def to_double(value: Any) -> float:
    return convert(value, PrimitiveKind.DOUBLE)


def to_boolean(value: Any) -> bool:
    return convert(value, PrimitiveKind.BOOL)
