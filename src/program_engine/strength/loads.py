"""One-rep-max lookup and load rounding for main lifts."""

from __future__ import annotations

from program_engine.math.rounding import round_to_step
from program_engine.models.enums import LOAD_ROUNDING, MuscleGroup, Units
from program_engine.models.exercise import ExerciseDefinition
from program_engine.models.profile import StrengthNumbers

# Exercises whose load is prescribed directly off a reference lift.
EXERCISE_REFERENCE_LIFT: dict[str, str] = {
    "back_squat": "squat_1rm",
    "front_squat": "squat_1rm",
    "bench_press": "bench_1rm",
    "db_bench_press": "bench_1rm",
    "deadlift": "deadlift_1rm",
    "sumo_deadlift": "deadlift_1rm",
    "rdl": "deadlift_1rm",
    "overhead_press": "press_1rm",
}

# Otherwise the first primary muscle with a reference lift decides.
MUSCLE_REFERENCE_LIFT: dict[MuscleGroup, str] = {
    MuscleGroup.QUADS: "squat_1rm",
    MuscleGroup.HAMSTRINGS: "deadlift_1rm",
    MuscleGroup.GLUTES: "deadlift_1rm",
    MuscleGroup.BACK: "deadlift_1rm",
    MuscleGroup.CHEST: "bench_1rm",
    MuscleGroup.SHOULDERS: "press_1rm",
}


def lookup_one_rep_max(
    exercise: ExerciseDefinition, strength_numbers: StrengthNumbers | None
) -> float | None:
    """Find the athlete's recorded 1RM relevant to *exercise*.

    Returns None when the athlete has no numbers or none apply; a zero or
    negative recorded value counts as unknown.
    """
    if strength_numbers is None:
        return None

    field_name = EXERCISE_REFERENCE_LIFT.get(exercise.id)
    if field_name is None:
        for muscle in exercise.primary_muscles:
            field_name = MUSCLE_REFERENCE_LIFT.get(muscle)
            if field_name is not None:
                break
    if field_name is None:
        return None

    value = getattr(strength_numbers, field_name)
    return value if value and value > 0 else None


def prescribed_load(one_rep_max: float, percent: float, units: Units) -> float:
    """Working load for a fraction of 1RM, rounded to plate increments.

    Args:
        one_rep_max: Reference 1RM in the athlete's units.
        percent: Fraction of 1RM (0.75).
        units: Metric rounds to 2.5 kg, imperial to 5 lb.
    """
    return round_to_step(one_rep_max * percent, LOAD_ROUNDING[units])
