"""Main-lift block."""

from __future__ import annotations

from program_engine.blocks.context import BlockContext
from program_engine.math.waves import build_strength_sets, get_rep_scheme
from program_engine.models.blocks import StrengthBlock, StrengthPrescription
from program_engine.models.enums import (
    STRENGTH_BASE_MINUTES,
    STRENGTH_MINUTES_PER_SET,
    BlockType,
    MovementPattern,
)
from program_engine.selection.selector import select_exercise
from program_engine.strength.loads import lookup_one_rep_max, prescribed_load

PLACEHOLDER_TITLE = "No Strength Exercise Available"

# Pattern rotation for days without a template override.
DEFAULT_PATTERN_ROTATION: tuple[MovementPattern, ...] = (
    MovementPattern.SQUAT,
    MovementPattern.HINGE,
    MovementPattern.HORIZONTAL_PUSH,
    MovementPattern.HORIZONTAL_PULL,
)


def strength_pattern_for_day(ctx: BlockContext) -> MovementPattern:
    if ctx.pattern_override is not None:
        return ctx.pattern_override
    return DEFAULT_PATTERN_ROTATION[ctx.day_index % len(DEFAULT_PATTERN_ROTATION)]


def generate_strength_block(ctx: BlockContext) -> StrengthBlock:
    """Build the main-lift block for the day.

    Never returns None: when no exercise survives the selector's fallback
    cascade, a zero-minute placeholder block is returned instead so the day
    keeps its shape.
    """
    pattern = strength_pattern_for_day(ctx)
    profile = ctx.profile
    exercise = select_exercise(
        pattern,
        ctx.equipment_ids,
        profile.experience_level,
        ctx.day_index,
        catalog=ctx.catalog,
    )
    block_id = ctx.block_id(BlockType.STRENGTH)

    if exercise is None:
        ctx.logger.warning("No strength exercise for %s on day %d", pattern.value, ctx.day_index)
        return StrengthBlock(
            id=block_id,
            title=PLACEHOLDER_TITLE,
            estimated_duration_minutes=0,
            main=None,
        )

    intensity = ctx.intensity
    scheme = get_rep_scheme(profile.experience_level, intensity.wave)
    one_rm = lookup_one_rep_max(exercise, profile.strength_numbers)
    load = prescribed_load(one_rm, intensity.percent, profile.units) if one_rm else None

    main = StrengthPrescription(
        exercise_id=exercise.id,
        exercise_name=exercise.name,
        pattern=exercise.pattern,
        wave=intensity.wave,
        sets=build_strength_sets(scheme, intensity, one_rm),
        one_rep_max=one_rm,
        prescribed_load=load,
    )
    return StrengthBlock(
        id=block_id,
        title=f"Main Lift – {exercise.name}",
        estimated_duration_minutes=STRENGTH_BASE_MINUTES + STRENGTH_MINUTES_PER_SET * scheme.sets,
        main=main,
    )
