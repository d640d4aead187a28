"""
Primitive Kinds

Enumerates the primitive data types the demo talks about and the value
ranges of the fixed-width integer kinds.

These are plain descriptors:
    - PrimitiveKind names a type
    - NumericRange describes how many bits an integer kind has
      and whether it is signed

ARCHITECTURAL RULE:
    Nothing in this module converts values.
    Conversion rules live in `dtdemo.conversions`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class PrimitiveKind(Enum):
    """
    Primitive data types shown by the demo.

    Values are the conventional short type names, used as labels
    in the printed output and as keys in the exported catalog.
    """

    # Integers
    BYTE = "byte"
    SBYTE = "sbyte"
    SHORT = "short"
    USHORT = "ushort"
    INT = "int"
    UINT = "uint"
    LONG = "long"
    ULONG = "ulong"

    # Floating point
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"

    # Text
    CHAR = "char"
    STRING = "string"

    # Other
    BOOL = "bool"
    DATETIME = "datetime"


@dataclass(frozen=True)
class NumericRange:
    """
    Value range of a fixed-width integer kind.

    Examples:
        NumericRange(bits=8, signed=False)   ->  0 .. 255
        NumericRange(bits=32, signed=True)   ->  -2147483648 .. 2147483647

    Properties:
        bits: Storage width in bits
        signed: True for two's-complement signed kinds
    """

    bits: int
    signed: bool

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def describe(self) -> str:
        """Human-readable range, with thousands separators."""
        return f"{self.minimum:,} to {self.maximum:,}"


INTEGER_RANGES: Dict[PrimitiveKind, NumericRange] = {
    PrimitiveKind.BYTE: NumericRange(bits=8, signed=False),
    PrimitiveKind.SBYTE: NumericRange(bits=8, signed=True),
    PrimitiveKind.SHORT: NumericRange(bits=16, signed=True),
    PrimitiveKind.USHORT: NumericRange(bits=16, signed=False),
    PrimitiveKind.INT: NumericRange(bits=32, signed=True),
    PrimitiveKind.UINT: NumericRange(bits=32, signed=False),
    PrimitiveKind.LONG: NumericRange(bits=64, signed=True),
    PrimitiveKind.ULONG: NumericRange(bits=64, signed=False),
}

# A char is a UTF-16 code unit
CHAR_RANGE = NumericRange(bits=16, signed=False)

FLOATING_KINDS = frozenset({PrimitiveKind.FLOAT, PrimitiveKind.DOUBLE, PrimitiveKind.DECIMAL})

# Approximate significant decimal digits
PRECISION_DIGITS: Dict[PrimitiveKind, str] = {
    PrimitiveKind.FLOAT: "~7",
    PrimitiveKind.DOUBLE: "~15-16",
    PrimitiveKind.DECIMAL: "28-29",
}


def integer_range(kind: PrimitiveKind) -> Optional[NumericRange]:
    """
    Look up the range of an integer kind.

    Args:
        kind: Any PrimitiveKind

    Returns:
        NumericRange, or None if the kind is not a fixed-width integer
    """
    return INTEGER_RANGES.get(kind)


def is_integer(kind: PrimitiveKind) -> bool:
    return kind in INTEGER_RANGES


def is_numeric(kind: PrimitiveKind) -> bool:
    return kind in INTEGER_RANGES or kind in FLOATING_KINDS
