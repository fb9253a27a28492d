"""Cent rounding used for every schedule figure."""

import math


def round_to_cents(value: float) -> float:
    """Round half-up to two decimals, e.g. ``9.167 -> 9.17``.

    NaN and infinities pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value * 100 + 0.5) / 100
