"""One-rep-max estimation from sub-maximal sets.

References:
    - Epley (1985): 1RM = w * (1 + r / 30)
    - Brzycki (1993): 1RM = w * 36 / (37 - r)
"""

from __future__ import annotations

from program_engine.math.rounding import clamp, round_half_up
from program_engine.models.enums import (
    ONE_RM_MAX_REPS,
    RPE_MODIFIER_MAX,
    RPE_MODIFIER_MIN,
    RPE_MODIFIER_STEP,
)


def epley(weight: float, reps: float) -> float:
    return weight * (1 + reps / 30)


def brzycki(weight: float, reps: float) -> float:
    return weight * (36 / (37 - reps))


def estimate_1rm(weight: float | None, reps: float | None, rpe: float | None = None) -> int:
    """Estimate a one-rep max as the mean of Epley and Brzycki.

    Reps are clamped to [1, 20], where both formulas stay well-behaved. A
    set left in reserve (RPE below 10) nudges the estimate up by 2% per RPE
    point, bounded to [0.85, 1.1].

    Args:
        weight: Load lifted. Non-positive or missing means no estimate.
        reps: Repetitions completed. Non-positive or missing means no estimate.
        rpe: Optional rating of perceived exertion for the set.

    Returns:
        Rounded estimate, or 0 when the set carries no usable data.
    """
    if not weight or not reps or weight <= 0 or reps <= 0:
        return 0

    r = clamp(reps, 1, ONE_RM_MAX_REPS)
    average = (epley(weight, r) + brzycki(weight, r)) / 2

    if rpe is not None:
        modifier = clamp(1 + (10 - rpe) * RPE_MODIFIER_STEP, RPE_MODIFIER_MIN, RPE_MODIFIER_MAX)
        return round_half_up(average * modifier)
    return round_half_up(average)
