"""Microcycle generation: the weekly template expanded over six weeks.

The fourth week (index 3) is a technique week: main-lift RPE drops by two
(never below 5) and conditioning drops one zone (never below Z1).
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime, timedelta, timezone

from program_engine.catalog.catalog import ExerciseCatalog
from program_engine.generation.daily import generate_daily_workout, with_goal
from program_engine.generation.modifiers import (
    conditioning_zone,
    map_blocks,
    map_strength_sets,
    with_conditioning_zone,
)
from program_engine.generation.templates import get_weekly_template, goal_for_focus
from program_engine.models.blocks import (
    ConditioningBlock,
    SetPrescription,
    StrengthBlock,
    WorkoutBlock,
)
from program_engine.models.enums import (
    DAYS_PER_WEEK,
    MICROCYCLE_WEEKS,
    TECHNIQUE_NOTE,
    TECHNIQUE_RPE_FLOOR,
    TECHNIQUE_RPE_REDUCTION,
    TECHNIQUE_WEEK_INDEX,
)
from program_engine.models.plan import WorkoutPlanDay
from program_engine.models.profile import TrainingProfile
from program_engine.models.readiness import ReadinessEntry

logger = logging.getLogger(__name__)


def _technique_set(s: SetPrescription) -> SetPrescription:
    if s.target_rpe is None:
        return s
    return dataclasses.replace(
        s, target_rpe=max(TECHNIQUE_RPE_FLOOR, s.target_rpe - TECHNIQUE_RPE_REDUCTION)
    )


def _technique_block(block: WorkoutBlock) -> WorkoutBlock:
    if isinstance(block, StrengthBlock) and block.main is not None:
        reduced = map_strength_sets(block, _technique_set)
        return dataclasses.replace(reduced, title=f"{block.title} (Technique)")
    if isinstance(block, ConditioningBlock):
        return with_conditioning_zone(block, conditioning_zone(block) - 1, note=TECHNIQUE_NOTE)
    return block


def apply_technique_week(day: WorkoutPlanDay) -> WorkoutPlanDay:
    """Reduce intensity of every strength and conditioning block of *day*."""
    return map_blocks(day, _technique_block)


def generate_microcycle(
    profile: TrainingProfile,
    start_date: date,
    weeks: int = MICROCYCLE_WEEKS,
    readiness: ReadinessEntry | None = None,
    catalog: ExerciseCatalog | None = None,
    log: logging.Logger | None = None,
    created_at: datetime | None = None,
) -> tuple[WorkoutPlanDay, ...]:
    """Expand the goal's weekly template into consecutive calendar days.

    Day ``week * 7 + slot`` falls on ``start_date + that many days`` and uses
    that absolute index for every rotation, so no two weeks are identical.

    Args:
        profile: Athlete profile; its goal picks the template.
        start_date: Date of the first day (slot 0 of week 0).
        weeks: Number of weeks to expand.
        readiness: Readiness snapshot applied to every generated day.
        catalog: Exercise catalog, defaults to the built-in one.
        log: Diagnostic logger passed through to the daily generator.
        created_at: Creation timestamp shared by all days.

    Returns:
        ``weeks * 7`` days in calendar order; rest slots have no blocks.
    """
    template = get_weekly_template(profile.goal)
    created = created_at or datetime.now(timezone.utc)
    days: list[WorkoutPlanDay] = []

    for week in range(weeks):
        for slot, token in enumerate(template):
            day_index = week * DAYS_PER_WEEK + slot
            day = generate_daily_workout(
                with_goal(profile, goal_for_focus(profile.goal, token)),
                day_index,
                start_date + timedelta(days=day_index),
                focus=token,
                readiness=readiness,
                catalog=catalog,
                log=log,
                created_at=created,
            )
            if week == TECHNIQUE_WEEK_INDEX:
                day = apply_technique_week(day)
            days.append(day)

    logger.debug(
        "Generated %d-week microcycle for %s starting %s",
        weeks, profile.goal.value, start_date.isoformat(),
    )
    return tuple(days)
