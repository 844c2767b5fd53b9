"""Athlete training profile consumed by the generators."""

from __future__ import annotations

from dataclasses import dataclass

from program_engine.models.enums import (
    AdaptationMode,
    ExperienceLevel,
    TimeAvailability,
    TrainingGoal,
    Units,
)


@dataclass(frozen=True)
class StrengthNumbers:
    """Known one-rep maxes for the four reference lifts, in the profile's units."""

    squat_1rm: float | None = None
    bench_1rm: float | None = None
    deadlift_1rm: float | None = None
    press_1rm: float | None = None


@dataclass(frozen=True)
class TrainingProfile:
    """Everything the engine needs to know about the athlete.

    ``training_days_per_week`` is carried for the storage layer; the weekly
    templates always lay out seven slots with a fixed rest day.
    """

    goal: TrainingGoal = TrainingGoal.GENERAL
    experience_level: ExperienceLevel = ExperienceLevel.BEGINNER
    training_days_per_week: int = 4
    equipment_ids: frozenset[str] = frozenset()
    time_availability: TimeAvailability = TimeAvailability.STANDARD
    adaptation_mode: AdaptationMode = AdaptationMode.AUTOMATIC
    readiness_scaling_enabled: bool = True
    units: Units = Units.METRIC
    strength_numbers: StrengthNumbers | None = None
    user_id: str = "local-user"
