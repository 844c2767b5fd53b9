"""Built-in exercise library.

Order matters: selection rotates through candidates in catalog order, so
appending is safe but reordering changes every generated plan.
"""

from __future__ import annotations

from program_engine.models.enums import (
    Difficulty,
    ExerciseTag as T,
    Modality,
    MovementPattern as P,
    MuscleGroup as M,
)
from program_engine.models.exercise import ExerciseDefinition

_BEG = Difficulty.BEGINNER
_INT = Difficulty.INTERMEDIATE
_ADV = Difficulty.ADVANCED


def _exercise(
    id: str,
    name: str,
    pattern: P,
    modality: Modality,
    difficulty: Difficulty,
    equipment: tuple[str, ...] = (),
    tags: tuple[T, ...] = (),
    primary: tuple[M, ...] = (),
    secondary: tuple[M, ...] = (),
    description: str = "",
    unilateral: bool = False,
) -> ExerciseDefinition:
    return ExerciseDefinition(
        id=id,
        name=name,
        pattern=pattern,
        modality=modality,
        difficulty=difficulty,
        equipment_ids=frozenset(equipment),
        tags=frozenset(tags),
        primary_muscles=primary,
        secondary_muscles=secondary,
        description=description,
        is_unilateral=unilateral,
    )


_BARBELL = (
    _exercise(
        "back_squat", "Back Squat", P.SQUAT, Modality.BARBELL, _INT, ("barbell",),
        (T.STRENGTH, T.BILATERAL, T.LOWER, T.ANTERIOR_CHAIN),
        (M.QUADS, M.GLUTES), (M.HAMSTRINGS, M.CORE),
        "Bar on upper back, squat to depth and stand.",
    ),
    _exercise(
        "front_squat", "Front Squat", P.SQUAT, Modality.BARBELL, _ADV, ("barbell",),
        (T.STRENGTH, T.BILATERAL, T.LOWER, T.ANTERIOR_CHAIN),
        (M.QUADS,), (M.GLUTES, M.CORE),
        "Bar in front rack, upright torso through the squat.",
    ),
    _exercise(
        "deadlift", "Deadlift", P.HINGE, Modality.BARBELL, _INT, ("barbell",),
        (T.STRENGTH, T.BILATERAL, T.POSTERIOR_CHAIN, T.LOWER),
        (M.HAMSTRINGS, M.GLUTES, M.BACK), (M.QUADS, M.CORE),
        "Pull the bar from the floor to lockout.",
    ),
    _exercise(
        "rdl", "Romanian Deadlift", P.HINGE, Modality.BARBELL, _INT, ("barbell",),
        (T.STRENGTH, T.HYPERTROPHY, T.POSTERIOR_CHAIN, T.LOWER),
        (M.HAMSTRINGS, M.GLUTES), (M.BACK,),
        "Hip hinge from standing with soft knees.",
    ),
    _exercise(
        "sumo_deadlift", "Sumo Deadlift", P.HINGE, Modality.BARBELL, _ADV, ("barbell",),
        (T.STRENGTH, T.BILATERAL, T.POSTERIOR_CHAIN, T.LOWER),
        (M.GLUTES, M.HAMSTRINGS), (M.QUADS, M.BACK),
        "Wide stance deadlift with hands inside the knees.",
    ),
    _exercise(
        "bench_press", "Bench Press", P.HORIZONTAL_PUSH, Modality.BARBELL, _INT, ("barbell",),
        (T.STRENGTH, T.BILATERAL, T.UPPER),
        (M.CHEST,), (M.SHOULDERS, M.ARMS),
        "Press the bar from chest to lockout.",
    ),
    _exercise(
        "incline_bench", "Incline Bench Press", P.HORIZONTAL_PUSH, Modality.BARBELL, _INT,
        ("barbell",),
        (T.STRENGTH, T.HYPERTROPHY, T.UPPER),
        (M.CHEST, M.SHOULDERS), (M.ARMS,),
    ),
    _exercise(
        "overhead_press", "Overhead Press", P.VERTICAL_PUSH, Modality.BARBELL, _ADV, ("barbell",),
        (T.STRENGTH, T.BILATERAL, T.UPPER),
        (M.SHOULDERS,), (M.ARMS, M.CORE),
        "Strict press from the front rack to overhead.",
    ),
    _exercise(
        "bent_over_row", "Bent-Over Row", P.HORIZONTAL_PULL, Modality.BARBELL, _INT, ("barbell",),
        (T.STRENGTH, T.UPPER, T.POSTERIOR_CHAIN),
        (M.BACK,), (M.ARMS,),
    ),
    _exercise(
        "barbell_hip_thrust", "Barbell Hip Thrust", P.HINGE, Modality.BARBELL, _INT, ("barbell",),
        (T.HYPERTROPHY, T.POSTERIOR_CHAIN, T.LOWER),
        (M.GLUTES,), (M.HAMSTRINGS,),
    ),
)

_DUMBBELL = (
    _exercise(
        "db_bench_press", "Dumbbell Bench Press", P.HORIZONTAL_PUSH, Modality.DUMBBELL, _BEG,
        ("dumbbell",),
        (T.STRENGTH, T.HYPERTROPHY, T.UPPER),
        (M.CHEST,), (M.SHOULDERS, M.ARMS),
    ),
    _exercise(
        "db_incline_press", "Dumbbell Incline Press", P.HORIZONTAL_PUSH, Modality.DUMBBELL, _BEG,
        ("dumbbell",),
        (T.HYPERTROPHY, T.UPPER),
        (M.CHEST, M.SHOULDERS), (M.ARMS,),
    ),
    _exercise(
        "db_shoulder_press", "Dumbbell Shoulder Press", P.VERTICAL_PUSH, Modality.DUMBBELL, _BEG,
        ("dumbbell",),
        (T.STRENGTH, T.HYPERTROPHY, T.UPPER),
        (M.SHOULDERS,), (M.ARMS,),
    ),
    _exercise(
        "db_row", "Dumbbell Row", P.HORIZONTAL_PULL, Modality.DUMBBELL, _BEG, ("dumbbell",),
        (T.STRENGTH, T.HYPERTROPHY, T.UPPER),
        (M.BACK,), (M.ARMS,),
    ),
    _exercise(
        "db_split_squat", "Dumbbell Split Squat", P.LUNGE, Modality.DUMBBELL, _BEG, ("dumbbell",),
        (T.STRENGTH, T.UNILATERAL, T.UNILATERAL_LOWER, T.LOWER),
        (M.QUADS, M.GLUTES), (M.HAMSTRINGS,),
        unilateral=True,
    ),
    _exercise(
        "db_walking_lunge", "Dumbbell Walking Lunge", P.LUNGE, Modality.DUMBBELL, _BEG,
        ("dumbbell",),
        (T.UNILATERAL, T.UNILATERAL_LOWER, T.LOWER, T.HYROX),
        (M.QUADS, M.GLUTES), (M.CORE,),
        unilateral=True,
    ),
    _exercise(
        "db_rdl", "Dumbbell Romanian Deadlift", P.HINGE, Modality.DUMBBELL, _BEG, ("dumbbell",),
        (T.STRENGTH, T.HYPERTROPHY, T.POSTERIOR_CHAIN, T.LOWER),
        (M.HAMSTRINGS, M.GLUTES), (M.BACK,),
    ),
    _exercise(
        "db_goblet_squat", "Dumbbell Goblet Squat", P.SQUAT, Modality.DUMBBELL, _BEG,
        ("dumbbell",),
        (T.STRENGTH, T.LOWER, T.ANTERIOR_CHAIN),
        (M.QUADS, M.GLUTES), (M.CORE,),
    ),
    _exercise(
        "db_chest_supported_row", "Chest-Supported Dumbbell Row", P.HORIZONTAL_PULL,
        Modality.DUMBBELL, _BEG, ("dumbbell",),
        (T.HYPERTROPHY, T.UPPER, T.SCAPULAR_STABILITY),
        (M.BACK,), (M.ARMS,),
    ),
    _exercise(
        "db_single_arm_row", "Single-Arm Dumbbell Row", P.UNILATERAL_UPPER, Modality.DUMBBELL,
        _BEG, ("dumbbell",),
        (T.HYPERTROPHY, T.UNILATERAL, T.UNILATERAL_UPPER, T.CORE_ANTI_ROTATION, T.HORIZONTAL_PULL),
        (M.BACK,), (M.ARMS, M.CORE),
        unilateral=True,
    ),
    _exercise(
        "db_overhead_triceps_extension", "Overhead Triceps Extension", P.VERTICAL_PUSH,
        Modality.DUMBBELL, _BEG, ("dumbbell",),
        (T.HYPERTROPHY, T.TRICEPS, T.UPPER),
        (M.ARMS,),
    ),
    _exercise(
        "db_hammer_curl", "Hammer Curl", P.VERTICAL_PULL, Modality.DUMBBELL, _BEG, ("dumbbell",),
        (T.HYPERTROPHY, T.BICEPS, T.GRIP, T.UPPER),
        (M.ARMS,),
    ),
)

_KETTLEBELL = (
    _exercise(
        "kb_swing", "Kettlebell Swing", P.HINGE, Modality.KETTLEBELL, _BEG, ("kettlebell",),
        (T.POWER, T.POSTERIOR_CHAIN, T.HYROX, T.FINISHER),
        (M.GLUTES, M.HAMSTRINGS), (M.CORE, M.BACK),
    ),
    _exercise(
        "kb_goblet_squat", "Kettlebell Goblet Squat", P.SQUAT, Modality.KETTLEBELL, _BEG,
        ("kettlebell",),
        (T.STRENGTH, T.LOWER, T.PRIMER),
        (M.QUADS, M.GLUTES), (M.CORE,),
    ),
    _exercise(
        "kb_deadlift", "Kettlebell Deadlift", P.HINGE, Modality.KETTLEBELL, _BEG, ("kettlebell",),
        (T.STRENGTH, T.POSTERIOR_CHAIN, T.LOWER),
        (M.HAMSTRINGS, M.GLUTES), (M.BACK,),
    ),
    _exercise(
        "kb_clean", "Kettlebell Clean", P.HINGE, Modality.KETTLEBELL, _INT, ("kettlebell",),
        (T.POWER, T.FULL_BODY, T.POSTERIOR_CHAIN),
        (M.FULL_BODY,), (M.GLUTES, M.BACK),
    ),
    _exercise(
        "kb_press", "Kettlebell Press", P.VERTICAL_PUSH, Modality.KETTLEBELL, _INT,
        ("kettlebell",),
        (T.STRENGTH, T.UNILATERAL, T.UNILATERAL_UPPER, T.UPPER, T.SCAPULAR_STABILITY),
        (M.SHOULDERS,), (M.ARMS, M.CORE),
        unilateral=True,
    ),
    _exercise(
        "kb_farmers_carry", "Farmers Carry", P.CARRY, Modality.KETTLEBELL, _BEG, ("kettlebell",),
        (T.CARRY, T.GRIP, T.CORE, T.HYROX, T.FULL_BODY),
        (M.FULL_BODY,), (M.CORE, M.ARMS),
    ),
)

_BODYWEIGHT = (
    _exercise(
        "push_up", "Push-Up", P.HORIZONTAL_PUSH, Modality.BODYWEIGHT, _BEG, (),
        (T.STRENGTH, T.UPPER, T.TRICEPS),
        (M.CHEST,), (M.ARMS, M.CORE),
    ),
    _exercise(
        "pull_up", "Pull-Up", P.VERTICAL_PULL, Modality.BODYWEIGHT, _ADV, (),
        (T.STRENGTH, T.UPPER, T.BICEPS),
        (M.BACK,), (M.ARMS,),
    ),
    _exercise(
        "dips", "Dips", P.VERTICAL_PUSH, Modality.BODYWEIGHT, _ADV, (),
        (T.STRENGTH, T.UPPER, T.TRICEPS),
        (M.CHEST, M.ARMS), (M.SHOULDERS,),
    ),
    _exercise(
        "inverted_row", "Inverted Row", P.HORIZONTAL_PULL, Modality.BODYWEIGHT, _BEG, (),
        (T.STRENGTH, T.UPPER, T.SCAPULAR_STABILITY),
        (M.BACK,), (M.ARMS,),
    ),
    _exercise(
        "reverse_lunge", "Reverse Lunge", P.LUNGE, Modality.BODYWEIGHT, _BEG, (),
        (T.STRENGTH, T.UNILATERAL, T.UNILATERAL_LOWER, T.LOWER),
        (M.QUADS, M.GLUTES), (M.HAMSTRINGS,),
        unilateral=True,
    ),
    _exercise(
        "air_squat", "Air Squat", P.SQUAT, Modality.BODYWEIGHT, _BEG, (),
        (T.WARMUP, T.PRIMER, T.LOWER),
        (M.QUADS,), (M.GLUTES,),
    ),
    _exercise(
        "plank", "Plank", P.CORE, Modality.BODYWEIGHT, _BEG, (),
        (T.CORE, T.CORE_ANTI_EXTENSION),
        (M.CORE,),
    ),
    _exercise(
        "side_plank", "Side Plank", P.CORE, Modality.BODYWEIGHT, _BEG, (),
        (T.CORE, T.CORE_ANTI_ROTATION),
        (M.CORE,),
    ),
    _exercise(
        "dead_bug", "Dead Bug", P.CORE, Modality.BODYWEIGHT, _BEG, (),
        (T.WARMUP, T.CORE, T.CORE_ANTI_EXTENSION),
        (M.CORE,),
    ),
    _exercise(
        "hollow_hold", "Hollow Hold", P.CORE, Modality.BODYWEIGHT, _INT, (),
        (T.CORE, T.CORE_ANTI_EXTENSION),
        (M.CORE,),
    ),
    _exercise(
        "glute_bridge", "Glute Bridge", P.HINGE, Modality.BODYWEIGHT, _BEG, (),
        (T.WARMUP, T.PRIMER, T.POSTERIOR_CHAIN),
        (M.GLUTES,), (M.HAMSTRINGS,),
    ),
    _exercise(
        "worlds_greatest_stretch", "World's Greatest Stretch", P.LUNGE, Modality.BODYWEIGHT,
        _BEG, (),
        (T.WARMUP,),
        (M.FULL_BODY,),
    ),
    _exercise(
        "band_pull_apart", "Band Pull-Apart", P.HORIZONTAL_PULL, Modality.BAND, _BEG, ("band",),
        (T.WARMUP, T.PRIMER, T.SCAPULAR_STABILITY),
        (M.SHOULDERS, M.BACK),
    ),
)

_CONDITIONING = (
    _exercise(
        "ski_erg_intervals", "SkiErg Intervals", P.CONDITIONING, Modality.CARDIO_MACHINE, _BEG,
        ("ski_erg",),
        (T.CONDITIONING, T.HYROX, T.FULL_BODY),
        (M.FULL_BODY,), (M.BACK, M.ARMS),
    ),
    _exercise(
        "rower_intervals", "Rower Intervals", P.CONDITIONING, Modality.CARDIO_MACHINE, _BEG,
        ("rower",),
        (T.CONDITIONING, T.HYROX, T.FULL_BODY),
        (M.FULL_BODY,), (M.BACK, M.QUADS),
    ),
    _exercise(
        "assault_bike_intervals", "Assault Bike Intervals", P.CONDITIONING,
        Modality.CARDIO_MACHINE, _BEG, ("assault_bike", "bike"),
        (T.CONDITIONING, T.FULL_BODY),
        (M.FULL_BODY,), (M.QUADS,),
    ),
    _exercise(
        "treadmill_run", "Treadmill Run", P.LOCOMOTION, Modality.CARDIO_MACHINE, _BEG,
        ("treadmill",),
        (T.CONDITIONING, T.LOCOMOTION, T.HYROX),
        (M.QUADS, M.HAMSTRINGS),
    ),
    _exercise(
        "sled_push", "Sled Push", P.LOCOMOTION, Modality.SLED, _INT, ("sled", "sled_push"),
        (T.CONDITIONING, T.HYROX, T.POWER, T.LOWER),
        (M.QUADS, M.GLUTES), (M.CORE,),
    ),
    _exercise(
        "sled_pull", "Sled Pull", P.LOCOMOTION, Modality.SLED, _INT, ("sled",),
        (T.CONDITIONING, T.HYROX, T.POSTERIOR_CHAIN),
        (M.BACK, M.HAMSTRINGS), (M.ARMS,),
    ),
    _exercise(
        "wall_ball", "Wall Ball", P.SQUAT, Modality.OTHER, _BEG, ("medicine_ball",),
        (T.CONDITIONING, T.HYROX, T.FULL_BODY),
        (M.QUADS, M.SHOULDERS), (M.GLUTES,),
    ),
    _exercise(
        "sandbag_lunge", "Sandbag Lunge", P.LUNGE, Modality.OTHER, _INT, ("sandbag",),
        (T.CONDITIONING, T.HYROX, T.UNILATERAL_LOWER),
        (M.QUADS, M.GLUTES), (M.CORE,),
        unilateral=True,
    ),
    _exercise(
        "burpee_broad_jump", "Burpee Broad Jump", P.LOCOMOTION, Modality.BODYWEIGHT, _INT, (),
        (T.CONDITIONING, T.HYROX, T.FULL_BODY, T.POWER),
        (M.FULL_BODY,),
    ),
)

EXERCISES: tuple[ExerciseDefinition, ...] = (
    _BARBELL + _DUMBBELL + _KETTLEBELL + _BODYWEIGHT + _CONDITIONING
)
