"""
Rounding helpers shared by the aggregation functions.

Python's round() rounds half to even; dashboard figures round half up
(95.5% -> 96, 4.65 -> 4.7), so aggregates go through these instead.
"""

import math
from typing import Union

Number = Union[int, float]


def round_half_up(value: Number, digits: int = 0) -> Number:
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if digits == 0 else rounded


def percentage(part: Number, whole: Number) -> int:
    """round(part / whole * 100), 0 when whole is not positive"""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)
