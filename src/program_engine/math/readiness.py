"""Readiness score and readiness factor.

The score condenses a daily check-in into 0-100; the factor turns a
check-in into a bounded multiplier for conditioning volume.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from program_engine.math.rounding import clamp, round_half_up, round_to_hundredths
from program_engine.models.enums import (
    READINESS_AVAILABILITY_WEIGHT,
    READINESS_FACTOR_MAX,
    READINESS_FACTOR_MIN,
    READINESS_FACTOR_STEP,
    READINESS_SCORE_WEIGHT,
    TimeAvailability,
)
from program_engine.models.readiness import ReadinessEntry

NEUTRAL_READINESS_FACTOR = 1.0


def calculate_readiness_score(
    sleep_quality: float,
    energy: float,
    soreness: float,
    stress: float,
    time_availability: TimeAvailability = TimeAvailability.STANDARD,
) -> int:
    """Composite 0-100 readiness score from a daily check-in.

    Sleep and energy contribute 30% each; soreness and stress are inverted
    and contribute 20% each. The result is weighted by how much time the
    athlete has today.

    Args:
        sleep_quality: 1-5, higher is better.
        energy: 1-5, higher is better.
        soreness: 1-5, higher is worse.
        stress: 1-5, higher is worse.
        time_availability: Session length category for today.

    Returns:
        Integer score clamped to [0, 100].
    """
    sleep_n = clamp(sleep_quality, 1, 5) / 5
    energy_n = clamp(energy, 1, 5) / 5
    soreness_n = 1 - clamp(soreness, 1, 5) / 5
    stress_n = 1 - clamp(stress, 1, 5) / 5

    composite = sleep_n * 0.3 + energy_n * 0.3 + soreness_n * 0.2 + stress_n * 0.2
    weighted = composite * READINESS_AVAILABILITY_WEIGHT.get(time_availability, 1.0)
    return round_half_up(clamp(weighted * 100, 0, 100))


def get_readiness_factor(readiness: ReadinessEntry | None) -> float:
    """Bounded multiplier derived from a readiness entry.

    Starts at 1.0 and moves 0.05 per point away from the neutral check-in
    value of 3 for sleep, soreness and (inverted) energy, plus up to 0.1 from
    the composite score. Energy is flipped into a fatigue proxy (6 - energy).

    Returns:
        Factor rounded to 2 decimals and clamped to [0.6, 1.2]; exactly 1.0
        when no readiness entry is available.
    """
    if readiness is None:
        return NEUTRAL_READINESS_FACTOR

    factor = 1.0
    factor += (readiness.sleep_quality - 3) * READINESS_FACTOR_STEP
    factor -= (readiness.soreness - 3) * READINESS_FACTOR_STEP
    fatigue = 6 - readiness.energy
    factor -= (fatigue - 3) * READINESS_FACTOR_STEP
    factor += ((readiness.readiness_score - 50) / 50) * READINESS_SCORE_WEIGHT

    return clamp(round_to_hundredths(factor), READINESS_FACTOR_MIN, READINESS_FACTOR_MAX)


def readiness_trend(entries: Sequence[ReadinessEntry], span: int = 7) -> float | None:
    """Exponentially weighted average of recent readiness scores.

    Args:
        entries: Historical entries, oldest first.
        span: EWMA span in days.

    Returns:
        The most recent EWMA value, or None when there is no history.
    """
    if not entries:
        return None
    series = pd.Series([e.readiness_score for e in entries], dtype=np.float64)
    return float(series.ewm(span=span, adjust=False).mean().iloc[-1])
