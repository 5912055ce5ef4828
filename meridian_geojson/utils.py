"""Coordinate helpers shared by the codec and the geometry types."""

import math

# 7 decimal digits is roughly 1cm at the equator
ROUND_PRECISION = 10_000_000.0
MAX_DOUBLE_TO_ROUND = (2 ** 63 - 1) / ROUND_PRECISION


def trim(value: float) -> float:
    """
    Round a coordinate to 7 decimal digits.

    Values too large to be scaled safely are returned unchanged.
    """
    if value > MAX_DOUBLE_TO_ROUND or value < -MAX_DOUBLE_TO_ROUND:
        return value
    if math.isnan(value) or math.isinf(value):
        return value
    return math.floor(value * ROUND_PRECISION + 0.5) / ROUND_PRECISION
