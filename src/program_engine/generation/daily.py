"""Daily workout construction.

Blocks are always assembled in the same order: warm-up, strength,
accessory, conditioning, cooldown. Accessory work only follows a real main
lift, and conditioning is gated by goal and absolute day index.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime, timezone

from program_engine.blocks.accessory import generate_accessory_block
from program_engine.blocks.conditioning import generate_conditioning_block
from program_engine.blocks.context import BlockContext
from program_engine.blocks.cooldown import generate_cooldown_block
from program_engine.blocks.strength import generate_strength_block
from program_engine.blocks.warmup import generate_warmup_block
from program_engine.catalog.catalog import ExerciseCatalog, default_catalog
from program_engine.generation.templates import resolve_focus
from program_engine.models.blocks import ConditioningBlock, StrengthBlock, WorkoutBlock
from program_engine.models.enums import (
    DEFAULT_BLOCK_MINUTES,
    FocusToken,
    TrainingGoal,
)
from program_engine.models.plan import WorkoutPlanDay
from program_engine.models.profile import TrainingProfile
from program_engine.models.readiness import ReadinessEntry

logger = logging.getLogger(__name__)

# Absolute day indices that get conditioning for a general-fitness athlete.
_GENERAL_CONDITIONING_DAYS = frozenset({2, 5})
_STRENGTH_CONDITIONING_DAY = 3


def should_include_conditioning(goal: TrainingGoal, day_index: int) -> bool:
    """Whether the day's conditioning slot is used.

    The test runs on the absolute day index, so in a multi-week run the
    hybrid and HYROX pattern alternates between weeks. Conditioning athletes
    train engine every day, hybrid and HYROX athletes on even indices,
    general athletes on days 2 and 5 and strength athletes on day 3.
    """
    if goal is TrainingGoal.CONDITIONING:
        return True
    if goal in (TrainingGoal.HYBRID, TrainingGoal.HYROX):
        return day_index % 2 == 0
    if goal is TrainingGoal.GENERAL:
        return day_index in _GENERAL_CONDITIONING_DAYS
    return day_index == _STRENGTH_CONDITIONING_DAY


def block_minutes(block: WorkoutBlock) -> int:
    minutes = block.estimated_duration_minutes
    return DEFAULT_BLOCK_MINUTES[block.block_type] if minutes is None else minutes


def total_duration(blocks: tuple[WorkoutBlock, ...]) -> int:
    return sum(block_minutes(b) for b in blocks)


def construct_workout_blocks(ctx: BlockContext) -> tuple[WorkoutBlock, ...]:
    """Assemble the full training-day block list for *ctx*."""
    blocks: list[WorkoutBlock] = []

    warmup = generate_warmup_block(ctx)
    if warmup is not None:
        blocks.append(warmup)

    strength = generate_strength_block(ctx)
    blocks.append(strength)

    if strength.main is not None:
        accessory = generate_accessory_block(ctx, strength.main)
        if accessory is not None:
            blocks.append(accessory)

    if should_include_conditioning(ctx.profile.goal, ctx.day_index):
        conditioning = generate_conditioning_block(ctx)
        if conditioning is not None:
            blocks.append(conditioning)

    blocks.append(generate_cooldown_block(ctx))
    return tuple(blocks)


def construct_conditioning_day(ctx: BlockContext) -> tuple[WorkoutBlock, ...]:
    """Warm-up, conditioning and cooldown only."""
    blocks: list[WorkoutBlock] = []
    warmup = generate_warmup_block(ctx)
    if warmup is not None:
        blocks.append(warmup)
    conditioning = generate_conditioning_block(ctx)
    if conditioning is not None:
        blocks.append(conditioning)
    blocks.append(generate_cooldown_block(ctx))
    return tuple(blocks)


def determine_focus_tags(
    goal: TrainingGoal, blocks: tuple[WorkoutBlock, ...]
) -> tuple[str, ...]:
    has_strength = any(isinstance(b, StrengthBlock) and b.main is not None for b in blocks)
    tags: list[str] = ["strength"] if has_strength else []
    if goal is TrainingGoal.CONDITIONING:
        tags.append("engine")
    elif goal in (TrainingGoal.HYBRID, TrainingGoal.HYROX):
        tags.extend([goal.value, "engine"])
    elif goal is TrainingGoal.STRENGTH:
        tags.append("strength")
    else:
        tags.append("general")
    return tuple(dict.fromkeys(tags))


def generate_daily_workout(
    profile: TrainingProfile,
    day_index: int,
    plan_date: date,
    focus: FocusToken | None = None,
    readiness: ReadinessEntry | None = None,
    catalog: ExerciseCatalog | None = None,
    log: logging.Logger | None = None,
    created_at: datetime | None = None,
) -> WorkoutPlanDay:
    """Generate one day of training.

    Args:
        profile: Athlete profile; its goal drives conditioning and focus tags.
        day_index: Zero-based day within the plan; drives every rotation.
        plan_date: Calendar date of the day.
        focus: Weekly template token. REST yields an empty day, CONDITIONING
            a conditioning-only day, pattern tokens override the main lift.
        readiness: Today's check-in, scales conditioning when present.
        catalog: Exercise catalog, defaults to the built-in one.
        log: Diagnostic logger passed to block generators.
        created_at: Creation timestamp, defaults to now (UTC).

    Returns:
        WorkoutPlanDay with blocks in canonical order.
    """
    log = log or logger
    created = created_at or datetime.now(timezone.utc)
    day_id = f"day-{plan_date.isoformat()}-{day_index}"

    if focus is FocusToken.REST:
        return WorkoutPlanDay(
            id=day_id,
            user_id=profile.user_id,
            date=plan_date,
            day_index=day_index,
            focus_tags=("rest",),
            blocks=(),
            estimated_duration_minutes=0,
            created_at=created,
        )

    resolved = resolve_focus(focus, day_index) if focus is not None else None
    ctx = BlockContext(
        profile=profile,
        day_index=day_index,
        plan_date=plan_date,
        pattern_override=resolved.pattern if resolved else None,
        readiness=readiness,
        catalog=catalog if catalog is not None else default_catalog(),
        logger=log,
    )

    if resolved is not None and resolved.is_conditioning:
        blocks = construct_conditioning_day(ctx)
        focus_tags: tuple[str, ...] = ("engine",)
    else:
        blocks = construct_workout_blocks(ctx)
        focus_tags = determine_focus_tags(profile.goal, blocks)

    adjusted = readiness is not None and any(isinstance(b, ConditioningBlock) for b in blocks)
    day = WorkoutPlanDay(
        id=day_id,
        user_id=profile.user_id,
        date=plan_date,
        day_index=day_index,
        focus_tags=focus_tags,
        blocks=blocks,
        estimated_duration_minutes=total_duration(blocks),
        created_at=created,
        adjusted_for_readiness=adjusted,
    )
    log.debug(
        "Day %d (%s): %s, %d min",
        day_index,
        plan_date.isoformat(),
        [b.block_type.value for b in blocks],
        day.estimated_duration_minutes,
    )
    return day


def with_goal(profile: TrainingProfile, goal: TrainingGoal) -> TrainingProfile:
    return profile if profile.goal is goal else dataclasses.replace(profile, goal=goal)
