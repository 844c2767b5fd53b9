"""Intensity wave scheduling and strength rep schemes.

The wave is a four-day undulating cycle (base, load, peak, deload) keyed
purely by the day index, so any day of a plan can be generated on its own.
"""

from __future__ import annotations

from dataclasses import dataclass

from program_engine.models.blocks import SetPrescription
from program_engine.models.enums import (
    REP_SCHEMES,
    WAVE_PERIOD,
    WAVE_TABLE,
    ExperienceLevel,
    WaveName,
)


@dataclass(frozen=True)
class IntensityWave:
    """Wave phase for a day with its target RPE and fraction of 1RM (0.70)."""

    wave: WaveName
    rpe: int
    percent: float

    @property
    def percent_points(self) -> float:
        return round(self.percent * 100, 1)


@dataclass(frozen=True)
class RepScheme:
    sets: int
    reps: int


def get_intensity_wave(day_index: int) -> IntensityWave:
    """Map a day index onto the repeating base/load/peak/deload wave.

    Args:
        day_index: Zero-based day within the plan. Negative indices wrap.

    Returns:
        The IntensityWave for ``day_index % 4``.
    """
    wave, rpe, percent = WAVE_TABLE[day_index % WAVE_PERIOD]
    return IntensityWave(wave=wave, rpe=rpe, percent=percent)


def get_rep_scheme(experience_level: ExperienceLevel, wave: WaveName) -> RepScheme:
    """Fixed sets x reps lookup by experience tier and wave."""
    sets, reps = REP_SCHEMES[experience_level][wave]
    return RepScheme(sets=sets, reps=reps)


def build_strength_sets(
    scheme: RepScheme,
    intensity: IntensityWave,
    one_rep_max: float | None = None,
) -> tuple[SetPrescription, ...]:
    """Expand a rep scheme into identical working sets.

    The percent-of-max target is only attached when the athlete has a known
    1RM for the lift; otherwise the set is regulated by RPE alone.
    """
    percent = intensity.percent_points if one_rep_max else None
    return tuple(
        SetPrescription(
            target_reps=scheme.reps,
            target_rpe=intensity.rpe,
            target_percent_1rm=percent,
        )
        for _ in range(scheme.sets)
    )
