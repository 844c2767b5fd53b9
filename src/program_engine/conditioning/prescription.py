"""Conditioning day types and the zone / duration / style table."""

from __future__ import annotations

from dataclasses import dataclass

from program_engine.math.waves import get_intensity_wave
from program_engine.models.enums import (
    CONDITIONING_BASE_MINUTES,
    CONDITIONING_WEEK,
    DAYS_PER_WEEK,
    DELOAD_CONDITIONING_FRACTION,
    ENGINE_DAY_EXTRA_MINUTES,
    MIXED_DAY_EXTRA_MINUTES,
    WAVE_CONDITIONING_EXTRA_MINUTES,
    ConditioningDayType,
    ConditioningStyle,
    TimeAvailability,
    TrainingGoal,
    WaveName,
)

# Goals that run tempo on mixed days and race-specific work on engine days.
_TEMPO_GOALS = frozenset({TrainingGoal.HYBRID, TrainingGoal.HYROX})
_HARD_ENGINE_GOALS = frozenset({TrainingGoal.CONDITIONING, TrainingGoal.HYROX})


@dataclass(frozen=True)
class ConditioningPrescription:
    day_type: ConditioningDayType
    zone: int
    style: ConditioningStyle
    duration_minutes: int
    wave: WaveName


def get_conditioning_day_type(day_index: int) -> ConditioningDayType:
    return CONDITIONING_WEEK[day_index % DAYS_PER_WEEK]


def base_conditioning_minutes(time_availability: TimeAvailability) -> int:
    return CONDITIONING_BASE_MINUTES.get(
        time_availability, CONDITIONING_BASE_MINUTES[TimeAvailability.FULL]
    )


def get_conditioning_prescription(
    day_index: int,
    goal: TrainingGoal,
    time_availability: TimeAvailability,
) -> ConditioningPrescription:
    """Zone, style and duration for a day's conditioning.

    Strength days get short zone 2 work, mixed days add five minutes (tempo
    for hybrid athletes), engine days add ten minutes of intervals. The wave
    then stretches load and peak days and cuts deload days to 60%.

    A HYROX athlete's engine day on a peak wave becomes a race simulation.

    Args:
        day_index: Zero-based day in the plan.
        goal: Athlete's training goal.
        time_availability: Session length category.

    Returns:
        ConditioningPrescription for the day.
    """
    wave = get_intensity_wave(day_index).wave
    day_type = get_conditioning_day_type(day_index)
    base = base_conditioning_minutes(time_availability)

    zone = 2
    style = ConditioningStyle.Z2
    duration = base

    if day_type is ConditioningDayType.MIXED:
        if goal in _TEMPO_GOALS:
            zone, style = 3, ConditioningStyle.TEMPO
        duration = base + MIXED_DAY_EXTRA_MINUTES
    elif day_type is ConditioningDayType.ENGINE:
        zone = 4 if goal in _HARD_ENGINE_GOALS else 3
        style = ConditioningStyle.INTERVALS
        duration = base + ENGINE_DAY_EXTRA_MINUTES
        if goal is TrainingGoal.HYROX and wave is WaveName.PEAK:
            style = ConditioningStyle.RACE_SIMULATION

    if wave is WaveName.DELOAD:
        duration = int(duration * DELOAD_CONDITIONING_FRACTION)
    else:
        duration += WAVE_CONDITIONING_EXTRA_MINUTES.get(wave, 0)

    return ConditioningPrescription(
        day_type=day_type,
        zone=zone,
        style=style,
        duration_minutes=duration,
        wave=wave,
    )
