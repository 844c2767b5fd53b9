"""Warm-up block: a rotating window over warm-up, primer and bracing drills."""

from __future__ import annotations

from program_engine.blocks.context import BlockContext
from program_engine.models.blocks import WarmupBlock
from program_engine.models.enums import (
    WARMUP_BASE_MINUTES,
    WARMUP_MAX_ITEMS,
    WARMUP_MINUTES_PER_ITEM,
    BlockType,
    ExerciseTag,
)
from program_engine.models.exercise import ExerciseDefinition

WARMUP_POOL_TAGS: tuple[ExerciseTag, ...] = (
    ExerciseTag.WARMUP,
    ExerciseTag.PRIMER,
    ExerciseTag.CORE_ANTI_EXTENSION,
)


def warmup_pool(ctx: BlockContext) -> tuple[ExerciseDefinition, ...]:
    """Permitted warm-up candidates grouped by tag, first occurrence kept."""
    seen: set[str] = set()
    pool: list[ExerciseDefinition] = []
    equipment = ctx.equipment_ids
    for tag in WARMUP_POOL_TAGS:
        for exercise in ctx.catalog.tagged(tag):
            if exercise.id in seen or not exercise.is_permitted(equipment):
                continue
            seen.add(exercise.id)
            pool.append(exercise)
    return tuple(pool)


def generate_warmup_block(ctx: BlockContext) -> WarmupBlock | None:
    pool = warmup_pool(ctx)
    if not pool:
        ctx.logger.debug("No warm-up exercises for equipment %s", sorted(ctx.equipment_ids))
        return None

    count = min(WARMUP_MAX_ITEMS, len(pool))
    chosen = tuple(pool[(ctx.day_index + i) % len(pool)] for i in range(count))
    return WarmupBlock(
        id=ctx.block_id(BlockType.WARMUP),
        title="Warm-Up",
        estimated_duration_minutes=WARMUP_BASE_MINUTES + WARMUP_MINUTES_PER_ITEM * count,
        exercise_ids=tuple(ex.id for ex in chosen),
        items=tuple(ex.name for ex in chosen),
    )
