"""Target pace for machine and running conditioning.

Paces are placeholders relative to a 2:00/500m reference until athlete
performance history is available.
"""

from __future__ import annotations

from program_engine.math.rounding import clamp, round_half_up
from program_engine.models.enums import Difficulty, TrainingGoal

BASE_PACE_SECONDS = 120

# Lower multiplier = faster split.
ZONE_PACE_MULTIPLIER: dict[int, float] = {1: 1.2, 2: 1.1, 3: 1.0, 4: 0.92, 5: 0.85}
GOAL_PACE_MULTIPLIER: dict[TrainingGoal, float] = {
    TrainingGoal.STRENGTH: 1.05,
    TrainingGoal.CONDITIONING: 0.95,
}
EXPERIENCE_PACE_MULTIPLIER: dict[Difficulty, float] = {
    Difficulty.BEGINNER: 1.1,
    Difficulty.INTERMEDIATE: 1.0,
    Difficulty.ADVANCED: 0.95,
}

# Exercise id -> split unit.
PACE_UNITS: dict[str, str] = {
    "rower_intervals": "/500m",
    "ski_erg_intervals": "/500m",
    "assault_bike_intervals": "/km",
    "treadmill_run": "/km",
}


def seconds_to_split(seconds: float) -> str:
    """Format seconds as M:SS (115 -> "1:55")."""
    total = round_half_up(seconds)
    return f"{total // 60}:{total % 60:02d}"


def calculate_target_pace(
    zone: int,
    goal: TrainingGoal,
    experience_level: Difficulty,
    exercise_id: str | None,
) -> str | None:
    """Target split for a zone, or None when the exercise has no pace unit."""
    unit = PACE_UNITS.get(exercise_id or "")
    if unit is None:
        return None
    z = int(clamp(zone, 1, 5))
    multiplier = (
        ZONE_PACE_MULTIPLIER[z]
        * GOAL_PACE_MULTIPLIER.get(goal, 1.0)
        * EXPERIENCE_PACE_MULTIPLIER.get(experience_level, 1.0)
    )
    return seconds_to_split(BASE_PACE_SECONDS * multiplier) + unit
