"""
Sample values shown by the demo.

Every value is declared once here, wrapped in a frozen SampleValue,
and never changed afterwards. The entry routine reads them, prints them,
and lets them go at exit.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Tuple

from dtdemo.conversions import to_single
from dtdemo.kinds import PrimitiveKind

PI = 3.14159
APP_NAME = "Data Types Demo"

FIXED_DATE = datetime(2023, 1, 1, 12, 0, 0)


@dataclass(frozen=True)
class SampleValue:
    """
    One labelled value of a primitive kind.

    Properties:
        label: Name printed before the value (e.g. "byte")
        kind: PrimitiveKind of the value
        value: The value itself
        note: Short explanation printed after the value (optional)
    """

    label: str
    kind: PrimitiveKind
    value: Any
    note: Optional[str] = None


@dataclass(frozen=True)
class SampleCatalog:
    """
    All sample values, grouped the way the demo prints them.

    Properties:
        integers: One value per fixed-width integer kind
        floats: float, double and decimal
        text: A char and a string
        booleans: True and False
        moments: Current instant, today at midnight, a fixed date/time
        constants: PI and APP_NAME
    """

    integers: Tuple[SampleValue, ...] = ()
    floats: Tuple[SampleValue, ...] = ()
    text: Tuple[SampleValue, ...] = ()
    booleans: Tuple[SampleValue, ...] = ()
    moments: Tuple[SampleValue, ...] = ()
    constants: Tuple[SampleValue, ...] = ()

    def get(self, label: str) -> Optional[SampleValue]:
        """
        Retrieve a sample by label.

        Args:
            label: Sample label

        Returns:
            SampleValue or None if not found
        """
        for group in (self.integers, self.floats, self.text, self.booleans, self.moments, self.constants):
            for sample in group:
                if sample.label == label:
                    return sample
        return None


def build_catalog(now: Optional[datetime] = None) -> SampleCatalog:
    """
    Declare every sample value.

    Args:
        now: Clock reading to use for the current instant (defaults to datetime.now())
    """
    if now is None:
        now = datetime.now()
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)

    K = PrimitiveKind
    integers = (
        SampleValue("byte", K.BYTE, 255, "8-bit unsigned"),
        SampleValue("sbyte", K.SBYTE, -128, "8-bit signed"),
        SampleValue("short", K.SHORT, 32767, "16-bit signed"),
        SampleValue("ushort", K.USHORT, 65535, "16-bit unsigned"),
        SampleValue("int", K.INT, 2147483647, "32-bit signed"),
        SampleValue("uint", K.UINT, 4294967295, "32-bit unsigned"),
        SampleValue("long", K.LONG, 9223372036854775807, "64-bit signed"),
        SampleValue("ulong", K.ULONG, 18446744073709551615, "64-bit unsigned"),
    )

    floats = (
        SampleValue("float", K.FLOAT, to_single(3.14159265359), "single precision"),
        SampleValue("double", K.DOUBLE, 3.14159265359, "double precision"),
        SampleValue("decimal", K.DECIMAL, Decimal("3.14159265359"), "high-precision decimal"),
    )

    text = (
        SampleValue("char", K.CHAR, "A", "Unicode character"),
        SampleValue("string", K.STRING, "你好，世界！", "Unicode string"),
    )

    booleans = (
        SampleValue("true", K.BOOL, True),
        SampleValue("false", K.BOOL, False),
    )

    moments = (
        SampleValue("now", K.DATETIME, now, "current date and time"),
        SampleValue("today", K.DATETIME, today, "today's date"),
        SampleValue("specific", K.DATETIME, FIXED_DATE, "fixed date"),
    )

    constants = (
        SampleValue("PI", K.DOUBLE, PI, "constant"),
        SampleValue("APP_NAME", K.STRING, APP_NAME, "constant"),
    )

    return SampleCatalog(
        integers=integers,
        floats=floats,
        text=text,
        booleans=booleans,
        moments=moments,
        constants=constants,
    )
