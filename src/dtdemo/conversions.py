"""
Numeric conversions between primitive kinds.

Two directions:
    - widen():  implicit conversion, smaller range -> larger range, never loses magnitude
    - narrow(): explicit conversion, may truncate fractions and drop high bits

Fixed-width behaviour is computed, not inherited from the runtime:
integers wrap in two's complement, FLOAT rounds through IEEE-754 single precision.
"""

from __future__ import annotations

import logging
import math
import struct
from decimal import Decimal, InvalidOperation
from typing import Dict, FrozenSet

from dtdemo.kinds import CHAR_RANGE, FLOATING_KINDS, PrimitiveKind, integer_range

logger = logging.getLogger(__name__)

_K = PrimitiveKind

# Implicit numeric conversions: source -> kinds it widens to without a cast
IMPLICIT_CONVERSIONS: Dict[PrimitiveKind, FrozenSet[PrimitiveKind]] = {
    _K.SBYTE: frozenset({_K.SHORT, _K.INT, _K.LONG}) | FLOATING_KINDS,
    _K.BYTE: frozenset({_K.SHORT, _K.USHORT, _K.INT, _K.UINT, _K.LONG, _K.ULONG}) | FLOATING_KINDS,
    _K.SHORT: frozenset({_K.INT, _K.LONG}) | FLOATING_KINDS,
    _K.USHORT: frozenset({_K.INT, _K.UINT, _K.LONG, _K.ULONG}) | FLOATING_KINDS,
    _K.INT: frozenset({_K.LONG}) | FLOATING_KINDS,
    _K.UINT: frozenset({_K.LONG, _K.ULONG}) | FLOATING_KINDS,
    _K.LONG: FLOATING_KINDS,
    _K.ULONG: FLOATING_KINDS,
    _K.CHAR: frozenset({_K.USHORT, _K.INT, _K.UINT, _K.LONG, _K.ULONG}) | FLOATING_KINDS,
    _K.FLOAT: frozenset({_K.DOUBLE}),
}


class ConversionError(ValueError):
    """Raised when a value cannot be converted to the requested kind."""
    pass


def to_single(value: float) -> float:
    """
    Round a double to the nearest IEEE-754 single precision value.

    Magnitudes beyond the single range become infinities.

    Example:
        to_single(3.14159265359) == 3.1415927410125732
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def as_double(value, checked: bool = False) -> float:
    """
    Convert an int, float or Decimal to a double.

    Integers too large for a double saturate to an infinity,
    or raise ConversionError when `checked`.
    """
    try:
        return float(value)
    except OverflowError as e:
        if checked:
            raise ConversionError(f"{value.bit_length()}-bit integer is outside the double range") from e
        return math.inf if value > 0 else -math.inf


def is_implicit(source: PrimitiveKind, target: PrimitiveKind) -> bool:
    """True if `source` converts to `target` without an explicit cast."""
    return source == target or target in IMPLICIT_CONVERSIONS.get(source, frozenset())


def _check_source(value, source: PrimitiveKind) -> None:
    if source == _K.CHAR:
        if not isinstance(value, str) or len(value) != 1:
            raise ConversionError(f"{value!r} is not a single char")
        return
    rng = integer_range(source)
    if rng is not None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConversionError(f"{value!r} is not a {source.value}")
        if not rng.contains(value):
            raise ConversionError(f"{value} is outside the {source.value} range ({rng.describe()})")
    elif not isinstance(value, (int, float, Decimal)) or isinstance(value, bool):
        raise ConversionError(f"{value!r} is not a {source.value}")


def widen(value, source: PrimitiveKind, target: PrimitiveKind):
    """
    Implicitly convert `value` from `source` to a larger kind.

    Args:
        value: A value of the source kind (a one-character str for CHAR)
        source: Kind the value currently has
        target: Kind to widen to

    Returns:
        The value represented in the target kind

    Raises:
        ConversionError: If the pair is not an implicit conversion,
            or the value does not fit the source kind
    """
    if not is_implicit(source, target):
        raise ConversionError(f"No implicit conversion from {source.value} to {target.value}")
    _check_source(value, source)

    n = ord(value) if source == _K.CHAR else value
    if target == _K.FLOAT:
        result = to_single(float(n))
    elif target == _K.DOUBLE:
        result = float(n)
    elif target == _K.DECIMAL:
        result = Decimal(n)
    elif target == _K.CHAR:
        result = value
    else:
        result = int(n)

    logger.debug("widen %r: %s -> %s = %r", value, source.value, target.value, result)
    return result


def _truncate(value) -> int:
    """Drop the fractional part, rounding toward zero."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ConversionError(f"{value!r} is not a single char")
        return ord(value)
    if isinstance(value, bool):
        raise ConversionError(f"{value!r} is not numeric")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        raise ConversionError(f"{value} has no integer representation")
    if isinstance(value, Decimal) and not value.is_finite():
        raise ConversionError(f"{value} has no integer representation")
    return math.trunc(value)


def _wrap(n: int, bits: int, signed: bool) -> int:
    """Keep the low `bits` bits of n, reading them as two's complement if signed."""
    mask = (1 << bits) - 1
    low = n & mask
    if signed and low >> (bits - 1):
        low -= 1 << bits
    return low


def narrow(value, target: PrimitiveKind, checked: bool = False):
    """
    Explicitly convert `value` to `target`, the way a cast does.

    Rules:
        - Floating and decimal values truncate toward zero first
        - Integer targets keep the low bits in two's complement
        - FLOAT targets round to single precision
        - CHAR targets keep the low 16 bits

    Examples:
        narrow(3.14159, PrimitiveKind.INT) == 3
        narrow(9876543210, PrimitiveKind.INT) == 1286608618
        narrow(300, PrimitiveKind.BYTE) == 44

    Args:
        value: int, float, Decimal, or a one-character str
        target: Kind to convert to
        checked: Raise instead of wrapping when the value does not fit

    Raises:
        ConversionError: On non-numeric input, NaN/infinity to an integer,
            or (when checked) an out-of-range value
    """
    rng = integer_range(target)
    if target == _K.CHAR:
        rng = CHAR_RANGE

    if rng is not None:
        n = _truncate(value)
        if checked and not rng.contains(n):
            raise ConversionError(f"{value} is outside the {target.value} range ({rng.describe()})")
        result = _wrap(n, rng.bits, rng.signed)
        if target == _K.CHAR:
            result = chr(result)
    elif target in FLOATING_KINDS:
        if isinstance(value, str):
            value = _truncate(value)
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise ConversionError(f"{value!r} is not numeric")
        if target == _K.FLOAT:
            double = as_double(value, checked)
            result = to_single(double)
            if checked and math.isinf(result) and math.isfinite(double):
                raise ConversionError(f"{value} is outside the float range")
        elif target == _K.DOUBLE:
            result = as_double(value, checked)
        else:
            try:
                result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
            except InvalidOperation as e:
                raise ConversionError(f"{value!r} cannot be represented as decimal") from e
            if not result.is_finite():
                raise ConversionError(f"{value} cannot be represented as decimal")
    else:
        raise ConversionError(f"{target.value} is not a numeric kind")

    if result != value:
        logger.debug("narrow %r -> %s = %r", value, target.value, result)
    return result
