"""Training cycle generation: progressive overload across weeks.

Weeks 0-2 build (x1.00, x1.05, x1.08) and every later week deloads (x0.80).
Main-lift percentages are scaled and rounded to 2.5 points; conditioning
moves one zone down on deload weeks and one zone up above x1.05.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime, timezone

from program_engine.catalog.catalog import ExerciseCatalog
from program_engine.generation.microcycle import generate_microcycle
from program_engine.generation.modifiers import (
    conditioning_zone,
    map_blocks,
    map_strength_sets,
    refresh_prescribed_load,
    with_conditioning_zone,
)
from program_engine.math.rounding import round_to_step
from program_engine.models.blocks import (
    ConditioningBlock,
    SetPrescription,
    StrengthBlock,
    WorkoutBlock,
)
from program_engine.models.enums import (
    CYCLE_DELOAD_MULTIPLIER,
    CYCLE_WEEK_MULTIPLIERS,
    DAYS_PER_WEEK,
    DEFAULT_CYCLE_WEEKS,
    PERCENT_ROUNDING_STEP,
    ZONE_SHIFT_UP_ABOVE,
    Units,
)
from program_engine.models.plan import TrainingCycle, WorkoutPlanDay
from program_engine.models.profile import TrainingProfile
from program_engine.models.readiness import ReadinessEntry

logger = logging.getLogger(__name__)


def cycle_week_multiplier(week_index: int) -> float:
    if 0 <= week_index < len(CYCLE_WEEK_MULTIPLIERS):
        return CYCLE_WEEK_MULTIPLIERS[week_index]
    return CYCLE_DELOAD_MULTIPLIER


def zone_shift(multiplier: float) -> int:
    if multiplier < 1.0:
        return -1
    if multiplier > ZONE_SHIFT_UP_ABOVE:
        return 1
    return 0


def scale_percent(percent: float | None, multiplier: float) -> float | None:
    """Scale a percent-of-1RM target, rounded to the nearest 2.5 points."""
    if percent is None:
        return None
    return round_to_step(percent * multiplier, PERCENT_ROUNDING_STEP)


def _progress_strength(block: StrengthBlock, multiplier: float, units: Units) -> StrengthBlock:
    def scale_set(s: SetPrescription) -> SetPrescription:
        return dataclasses.replace(
            s, target_percent_1rm=scale_percent(s.target_percent_1rm, multiplier)
        )

    return refresh_prescribed_load(map_strength_sets(block, scale_set), units)


def apply_cycle_progression(
    day: WorkoutPlanDay, multiplier: float, units: Units = Units.METRIC
) -> WorkoutPlanDay:
    """Apply one week's progression multiplier to a generated day."""
    shift = zone_shift(multiplier)

    def progress(block: WorkoutBlock) -> WorkoutBlock:
        if isinstance(block, StrengthBlock):
            return _progress_strength(block, multiplier, units)
        if isinstance(block, ConditioningBlock) and shift:
            return with_conditioning_zone(block, conditioning_zone(block) + shift)
        return block

    return map_blocks(day, progress)


def generate_training_cycle(
    profile: TrainingProfile,
    start_date: date,
    weeks: int = DEFAULT_CYCLE_WEEKS,
    readiness: ReadinessEntry | None = None,
    catalog: ExerciseCatalog | None = None,
    log: logging.Logger | None = None,
    created_at: datetime | None = None,
) -> TrainingCycle:
    """Generate a multi-week training cycle with week-over-week progression.

    Args:
        profile: Athlete profile.
        start_date: First day of the cycle.
        weeks: Number of seven-day weeks.
        readiness: Readiness snapshot applied to every day.
        catalog: Exercise catalog, defaults to the built-in one.
        log: Diagnostic logger passed through to the generators.
        created_at: Creation timestamp shared by all days.

    Returns:
        TrainingCycle whose weeks each hold exactly seven days.
    """
    days = generate_microcycle(
        profile,
        start_date,
        weeks=weeks,
        readiness=readiness,
        catalog=catalog,
        log=log,
        created_at=created_at or datetime.now(timezone.utc),
    )

    progressed_weeks: list[tuple[WorkoutPlanDay, ...]] = []
    for week_index in range(weeks):
        multiplier = cycle_week_multiplier(week_index)
        week_days = days[week_index * DAYS_PER_WEEK:(week_index + 1) * DAYS_PER_WEEK]
        progressed_weeks.append(
            tuple(apply_cycle_progression(d, multiplier, profile.units) for d in week_days)
        )

    end_date = days[-1].date if days else start_date
    logger.debug(
        "Training cycle %s: %d weeks, %s to %s",
        start_date.isoformat(), weeks, start_date.isoformat(), end_date.isoformat(),
    )
    return TrainingCycle(
        id=f"cycle-{start_date.isoformat()}",
        start_date=start_date,
        end_date=end_date,
        weeks=tuple(progressed_weeks),
    )
