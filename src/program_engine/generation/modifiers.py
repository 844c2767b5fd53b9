"""Block-level modifiers shared by the microcycle, cycle and adaptation passes.

All modifiers return new blocks; nothing is changed in place.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable

from program_engine.math.rounding import clamp, round_to_step
from program_engine.models.blocks import (
    ConditioningBlock,
    SetPrescription,
    StrengthBlock,
    WorkoutBlock,
)
from program_engine.models.enums import LOAD_ROUNDING, MAX_ZONE, MIN_ZONE, Units
from program_engine.models.plan import WorkoutPlanDay


def conditioning_zone(block: ConditioningBlock) -> int:
    return block.work.zone


def with_conditioning_zone(
    block: ConditioningBlock, zone: int, note: str | None = None
) -> ConditioningBlock:
    """Copy of *block* with its target zone clamped to [1, 5]."""
    changes: dict = {"zone": int(clamp(zone, MIN_ZONE, MAX_ZONE))}
    if note is not None:
        changes["notes"] = note
    return dataclasses.replace(block, work=dataclasses.replace(block.work, **changes))


def map_strength_sets(
    block: StrengthBlock, fn: Callable[[SetPrescription], SetPrescription]
) -> StrengthBlock:
    if block.main is None:
        return block
    main = dataclasses.replace(block.main, sets=tuple(fn(s) for s in block.main.sets))
    return dataclasses.replace(block, main=main)


def map_blocks(
    day: WorkoutPlanDay, fn: Callable[[WorkoutBlock], WorkoutBlock]
) -> WorkoutPlanDay:
    if day.is_rest_day:
        return day
    return dataclasses.replace(day, blocks=tuple(fn(b) for b in day.blocks))


def refresh_prescribed_load(block: StrengthBlock, units: Units) -> StrengthBlock:
    """Recompute the main lift's working load from its (changed) percent target."""
    main = block.main
    if main is None or not main.one_rep_max or not main.sets:
        return block
    percent = main.sets[0].target_percent_1rm
    if percent is None:
        return block
    load = round_to_step(main.one_rep_max * percent / 100, LOAD_ROUNDING[units])
    return dataclasses.replace(block, main=dataclasses.replace(main, prescribed_load=load))
