"""Rounding helpers.

Plans use half-up rounding everywhere (2.5 -> 3), not Python's
round-half-to-even, so that prescriptions are stable at .5 boundaries.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from negative infinity."""
    return math.floor(value + 0.5)


def round_to_step(value: float, step: float) -> float:
    """Round *value* to the nearest multiple of *step* (half-up)."""
    return round_half_up(value / step) * step


def round_to_hundredths(value: float) -> float:
    return round_half_up(value * 100) / 100


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
