"""Completed session logs and personal-record entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class CompletedSet:
    """One logged set. Weight and reps are None for skipped or timed sets."""

    exercise_id: str
    block_id: str
    set_index: int
    weight: float | None = None
    reps: int | None = None
    rpe: float | None = None
    duration_seconds: int | None = None
    completed_at: datetime | None = None


@dataclass(frozen=True)
class WorkoutSessionLog:
    id: str
    user_id: str
    date: date
    completed_sets: tuple[CompletedSet, ...] = ()
    plan_day_id: str | None = None
    notes: str = ""


@dataclass(frozen=True)
class PRRecord:
    """A personal record: best estimated 1RM for an exercise on a date."""

    id: str
    user_id: str
    exercise_id: str
    date: date
    estimated_1rm: float
    change_from_previous: float | None = None
