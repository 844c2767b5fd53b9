"""Same-day readiness adaptation of an already generated plan day.

A low readiness score scales the main lift's percentage, reps and RPE down;
a high score scales them up. Accessory reps move half as much, and
conditioning moves its target zone. The athlete's adaptation mode widens or
narrows the effect.
"""

from __future__ import annotations

import dataclasses
import logging

from program_engine.generation.modifiers import (
    conditioning_zone,
    map_strength_sets,
    refresh_prescribed_load,
    with_conditioning_zone,
)
from program_engine.math.rounding import clamp, round_half_up, round_to_step
from program_engine.models.blocks import (
    AccessoryBlock,
    ConditioningBlock,
    SetPrescription,
    StrengthBlock,
    WorkoutBlock,
)
from program_engine.models.enums import (
    ADAPTATION_MODE_MULTIPLIER,
    PERCENT_ROUNDING_STEP,
    READINESS_SCALER_BANDS,
    READINESS_SCALER_HIGH,
    READINESS_SCALER_NORMAL_CEILING,
    AdaptationMode,
    Units,
)
from program_engine.models.plan import WorkoutPlanDay

logger = logging.getLogger(__name__)

# Sets with this many reps or more are timed or density work and keep their reps.
_MAX_SCALED_REPS = 20


def get_base_scaler(readiness_score: float) -> float:
    for upper, scaler in READINESS_SCALER_BANDS:
        if readiness_score < upper:
            return scaler
    if readiness_score <= READINESS_SCALER_NORMAL_CEILING:
        return 1.0
    return READINESS_SCALER_HIGH


def get_final_scaler(readiness_score: float, adaptation_mode: AdaptationMode) -> float:
    multiplier = ADAPTATION_MODE_MULTIPLIER.get(adaptation_mode, 1.0)
    return get_base_scaler(readiness_score) * multiplier


def _scale_strength_set(s: SetPrescription, scaler: float) -> SetPrescription:
    percent = s.target_percent_1rm
    if percent is not None:
        percent = round_to_step(percent * scaler, PERCENT_ROUNDING_STEP)
    reps = s.target_reps
    if reps is not None and reps < _MAX_SCALED_REPS:
        reps = max(1, round_half_up(reps * scaler))
    rpe = s.target_rpe
    if rpe is not None:
        rpe = round(clamp(rpe * scaler, 1, 10), 1)
    return dataclasses.replace(s, target_percent_1rm=percent, target_reps=reps, target_rpe=rpe)


def _scale_accessory(block: AccessoryBlock, scaler: float) -> AccessoryBlock:
    volume_scaler = (scaler - 1) * 0.5 + 1

    def scale(s: SetPrescription) -> SetPrescription:
        if s.target_reps is None:
            return s
        reps = max(1, round_half_up(s.target_reps * volume_scaler))
        return dataclasses.replace(s, target_reps=reps)

    exercises = tuple(
        dataclasses.replace(ex, sets=tuple(scale(s) for s in ex.sets))
        for ex in block.exercises
    )
    return dataclasses.replace(block, exercises=exercises)


def adjust_block(
    block: WorkoutBlock, scaler: float, units: Units = Units.METRIC
) -> WorkoutBlock:
    if isinstance(block, StrengthBlock):
        scaled = map_strength_sets(block, lambda s: _scale_strength_set(s, scaler))
        return refresh_prescribed_load(scaled, units)
    if isinstance(block, AccessoryBlock):
        return _scale_accessory(block, scaler)
    if isinstance(block, ConditioningBlock):
        zone = round_half_up(clamp(conditioning_zone(block) * scaler, 1, 5))
        return with_conditioning_zone(block, zone)
    return block


def adjust_workout_for_today(
    day: WorkoutPlanDay,
    readiness_score: float,
    adaptation_mode: AdaptationMode = AdaptationMode.AUTOMATIC,
    readiness_scaling_enabled: bool = True,
    units: Units = Units.METRIC,
) -> WorkoutPlanDay:
    """Scale a generated day to today's readiness.

    Args:
        day: A generated plan day.
        readiness_score: Today's 0-100 readiness score.
        adaptation_mode: Conservative (x0.9), automatic (x1.0) or
            aggressive (x1.15) on top of the readiness band.
        readiness_scaling_enabled: When False the day is returned unchanged.
        units: Units for recomputing working loads.

    Returns:
        A new WorkoutPlanDay flagged ``adjusted_for_readiness``.
    """
    if not readiness_scaling_enabled:
        return day

    scaler = get_final_scaler(readiness_score, adaptation_mode)
    blocks = tuple(adjust_block(b, scaler, units) for b in day.blocks)
    logger.debug(
        "Adjusted %s for readiness %s (%s): scaler %.2f",
        day.id, readiness_score, adaptation_mode.value, scaler,
    )
    return dataclasses.replace(day, blocks=blocks, adjusted_for_readiness=True)
