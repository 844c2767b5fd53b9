"""Conditioning block.

Pure-strength athletes get no conditioning. HYROX athletes get a race
simulation on peak engine days and an equipment-matched station template
otherwise. Everyone else gets engine work on the best machine they own.
Durations, rounds and reps scale with the readiness factor.
"""

from __future__ import annotations

from program_engine.blocks.context import BlockContext
from program_engine.conditioning.hyrox import get_hyrox_conditioning_template, scale_hyrox_work
from program_engine.conditioning.hyrox_race import RACE_TITLE, get_hyrox_race_simulation
from program_engine.conditioning.pace import calculate_target_pace
from program_engine.conditioning.prescription import (
    ConditioningPrescription,
    get_conditioning_prescription,
)
from program_engine.math.rounding import round_half_up
from program_engine.models.blocks import ConditioningBlock, ConditioningWork
from program_engine.models.enums import (
    FALLBACK_CONDITIONING_EXERCISE_ID,
    INTERVAL_WORK_REST_SECONDS,
    BlockType,
    ConditioningStyle,
    ExerciseTag,
    TrainingGoal,
)
from program_engine.models.exercise import ExerciseDefinition


def choose_conditioning_exercise(ctx: BlockContext) -> ExerciseDefinition | None:
    """First conditioning exercise using equipment the athlete owns.

    Falls back to any permitted conditioning exercise, then to the
    kettlebell swing.
    """
    equipment = ctx.equipment_ids
    conditioning = ctx.catalog.tagged(ExerciseTag.CONDITIONING)
    for exercise in conditioning:
        if exercise.equipment_ids & equipment:
            return exercise
    for exercise in conditioning:
        if exercise.is_permitted(equipment):
            return exercise
    return ctx.catalog.get(FALLBACK_CONDITIONING_EXERCISE_ID)


def _standard_work(
    ctx: BlockContext, prescription: ConditioningPrescription, factor: float
) -> ConditioningWork:
    exercise = choose_conditioning_exercise(ctx)
    duration = round_half_up(prescription.duration_minutes * factor)

    work_seconds = rest_seconds = rounds = None
    if prescription.style is ConditioningStyle.INTERVALS:
        work_seconds, rest_seconds = INTERVAL_WORK_REST_SECONDS[ctx.profile.time_availability]
        rounds = max(1, (duration * 60) // (work_seconds + rest_seconds))

    exercise_id = exercise.id if exercise else FALLBACK_CONDITIONING_EXERCISE_ID
    name = exercise.name if exercise else "Kettlebell Swing"
    return ConditioningWork(
        style=prescription.style,
        zone=prescription.zone,
        duration_minutes=duration,
        day_type=prescription.day_type,
        wave=prescription.wave,
        exercise_id=exercise_id,
        exercise_name=name,
        work_seconds=work_seconds,
        rest_seconds=rest_seconds,
        rounds=rounds,
        target_pace=calculate_target_pace(
            prescription.zone,
            ctx.profile.goal,
            ctx.profile.experience_level,
            exercise_id,
        ),
        readiness_factor=factor,
        notes=name,
    )


def generate_conditioning_block(ctx: BlockContext) -> ConditioningBlock | None:
    """Build the day's conditioning block, or None for strength athletes."""
    profile = ctx.profile
    if profile.goal is TrainingGoal.STRENGTH:
        return None

    prescription = get_conditioning_prescription(
        ctx.day_index, profile.goal, profile.time_availability
    )
    factor = ctx.readiness_factor
    block_id = ctx.block_id(BlockType.CONDITIONING)

    if profile.goal is TrainingGoal.HYROX:
        if prescription.style is ConditioningStyle.RACE_SIMULATION:
            race = get_hyrox_race_simulation(ctx.equipment_ids, factor, zone=prescription.zone)
            ctx.logger.debug("Race simulation on day %d (factor %.2f)", ctx.day_index, factor)
            return ConditioningBlock(
                id=block_id,
                title=RACE_TITLE,
                estimated_duration_minutes=race.duration_minutes,
                work=race,
            )

        template = get_hyrox_conditioning_template(
            ctx.equipment_ids,
            prescription.day_type,
            prescription.wave,
            profile.time_availability,
            zone=prescription.zone,
        )
        station = scale_hyrox_work(template, factor)
        return ConditioningBlock(
            id=block_id,
            title=f"HYROX – {station.station_name}",
            estimated_duration_minutes=station.duration_minutes,
            work=station,
        )

    work = _standard_work(ctx, prescription, factor)
    ctx.logger.debug(
        "Engine work %s: %s Z%d %d min",
        work.exercise_id, prescription.style.value, work.zone, work.duration_minutes,
    )
    return ConditioningBlock(
        id=block_id,
        title="Engine Work",
        estimated_duration_minutes=work.duration_minutes,
        work=work,
    )
