"""Accessory block: one exercise per template entry, rotated by day."""

from __future__ import annotations

from program_engine.blocks.context import BlockContext
from program_engine.models.blocks import (
    AccessoryBlock,
    AccessoryPrescription,
    SetPrescription,
    StrengthPrescription,
)
from program_engine.models.enums import (
    ACCESSORY_MINUTES_PER_EXERCISE,
    ACCESSORY_RPE,
    BlockType,
)
from program_engine.strength.accessory_progression import (
    get_accessory_template,
    get_accessory_volume,
    matches_template_entry,
)


def generate_accessory_block(
    ctx: BlockContext, main_lift: StrengthPrescription | None = None
) -> AccessoryBlock | None:
    """Pick accessory work that complements the day's main lift.

    Args:
        ctx: Block context for the day.
        main_lift: The day's main lift; selects the template and is never
            repeated as an accessory.

    Returns:
        AccessoryBlock, or None when no template entry finds an exercise.
    """
    template = get_accessory_template(main_lift.pattern if main_lift else None)
    excluded = {main_lift.exercise_id} if main_lift else set()
    volume = get_accessory_volume(ctx.intensity.wave)
    equipment = ctx.equipment_ids

    picks: list[AccessoryPrescription] = []
    for entry in template:
        candidates = [
            ex
            for ex in ctx.catalog
            if ex.id not in excluded
            and ex.is_permitted(equipment)
            and matches_template_entry(ex, entry)
        ]
        if not candidates:
            ctx.logger.debug("No accessory for %r on day %d", entry, ctx.day_index)
            continue
        exercise = candidates[ctx.day_index % len(candidates)]
        excluded.add(exercise.id)
        sets = tuple(
            SetPrescription(target_reps=volume.reps, target_rpe=ACCESSORY_RPE)
            for _ in range(volume.sets)
        )
        picks.append(
            AccessoryPrescription(
                exercise_id=exercise.id,
                exercise_name=exercise.name,
                template_tag=entry,
                sets=sets,
            )
        )

    if not picks:
        return None
    return AccessoryBlock(
        id=ctx.block_id(BlockType.ACCESSORY),
        title="Accessory Work",
        estimated_duration_minutes=ACCESSORY_MINUTES_PER_EXERCISE * len(picks),
        exercises=tuple(picks),
    )
