"""Plan containers: a single training day and a multi-week training cycle."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from program_engine.models.blocks import WorkoutBlock
from program_engine.models.enums import BlockType


@dataclass(frozen=True)
class WorkoutPlanDay:
    """One generated day. ``blocks`` is empty exactly on rest days."""

    id: str
    user_id: str
    date: date
    day_index: int
    focus_tags: tuple[str, ...]
    blocks: tuple[WorkoutBlock, ...]
    estimated_duration_minutes: int
    created_at: datetime
    adjusted_for_readiness: bool = False

    @property
    def is_rest_day(self) -> bool:
        return not self.blocks

    def blocks_of_type(self, block_type: BlockType) -> tuple[WorkoutBlock, ...]:
        return tuple(b for b in self.blocks if b.block_type is block_type)


@dataclass(frozen=True)
class TrainingCycle:
    """A run of consecutive seven-day weeks."""

    id: str
    start_date: date
    end_date: date
    weeks: tuple[tuple[WorkoutPlanDay, ...], ...]

    @property
    def days(self) -> tuple[WorkoutPlanDay, ...]:
        return tuple(day for week in self.weeks for day in week)
