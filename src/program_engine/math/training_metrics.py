"""Training summary metrics over generated plan days.

Strength volume weights each prescribed rep by how demanding its movement
pattern is, so a week of deadlifts scores above a week of planks.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from program_engine.math.rounding import round_half_up
from program_engine.models.blocks import ConditioningBlock, StrengthBlock
from program_engine.models.enums import (
    HYBRID_SCORE_MINUTES_WEIGHT,
    HYBRID_SCORE_VOLUME_WEIGHT,
    PATTERN_VOLUME_MULTIPLIER,
)
from program_engine.models.plan import WorkoutPlanDay


@dataclass(frozen=True)
class WeeklyMetrics:
    strength_volume: float
    engine_minutes: int
    hybrid_score: int
    best_day: WorkoutPlanDay | None
    monotony: float


def weekly_strength_volume(days: Sequence[WorkoutPlanDay]) -> float:
    """Sum of prescribed main-lift reps weighted by movement pattern."""
    volume = 0.0
    for day in days:
        for block in day.blocks:
            if not isinstance(block, StrengthBlock) or block.main is None:
                continue
            multiplier = PATTERN_VOLUME_MULTIPLIER.get(block.main.pattern, 1.0)
            reps = sum(s.target_reps or 0 for s in block.main.sets)
            volume += reps * multiplier
    return round(volume, 1)


def weekly_engine_minutes(days: Sequence[WorkoutPlanDay]) -> int:
    return sum(
        block.estimated_duration_minutes
        for day in days
        for block in day.blocks
        if isinstance(block, ConditioningBlock)
    )


def hybrid_score(strength_volume: float, engine_minutes: int) -> int:
    return round_half_up(
        strength_volume * HYBRID_SCORE_VOLUME_WEIGHT
        + engine_minutes * HYBRID_SCORE_MINUTES_WEIGHT
    )


def best_training_day(days: Sequence[WorkoutPlanDay]) -> WorkoutPlanDay | None:
    """Longest planned day; ties go to the earliest."""
    training = [d for d in days if not d.is_rest_day]
    if not training:
        return None
    durations = np.array([d.estimated_duration_minutes for d in training], dtype=np.float64)
    return training[int(np.argmax(durations))]


def duration_monotony(days: Sequence[WorkoutPlanDay]) -> float:
    """Foster monotony (mean / std) of daily planned minutes, rest days as 0.

    Returns 0.0 for fewer than 7 days or perfectly uniform weeks.
    """
    if len(days) < 7:
        return 0.0
    minutes = np.array([d.estimated_duration_minutes for d in days[-7:]], dtype=np.float64)
    std = float(np.std(minutes, ddof=0))
    if std < 1e-6:
        return 0.0
    return float(np.mean(minutes)) / std


def summarize_week(days: Sequence[WorkoutPlanDay]) -> WeeklyMetrics:
    volume = weekly_strength_volume(days)
    minutes = weekly_engine_minutes(days)
    return WeeklyMetrics(
        strength_volume=volume,
        engine_minutes=minutes,
        hybrid_score=hybrid_score(volume, minutes),
        best_day=best_training_day(days),
        monotony=duration_monotony(days),
    )
