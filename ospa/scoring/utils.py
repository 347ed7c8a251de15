"""
Decimal Utilities
ospa/scoring/utils.py

Precision-safe point arithmetic. Interview values such as 0.4 are not exact
binary floats, so totals are summed as Decimal and rounded half-up.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

Number = Union[int, float, Decimal]


def to_decimal(value: Number, places: int = 2) -> Decimal:
    """Convert a number to Decimal with explicit precision."""
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )


def sum_points(values: Iterable[Number]) -> Decimal:
    """Exact sum of point values (ints and decimal-literal floats)."""
    return sum((Decimal(str(v)) for v in values), Decimal("0"))


def round_points(value: Number) -> float:
    """Round to 2 decimal places (half-up) and return a plain float."""
    return float(to_decimal(value, 2))
