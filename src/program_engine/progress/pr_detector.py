"""Personal-record detection from a finished session log.

Two qualifying rules exist in practice: a strict "beats the previous best"
check, and a screen-level rule that demands at least a 0.5% improvement.
The margin is a parameter here (``min_improvement_pct``) rather than a
hard-coded choice; 0.0 gives the strict rule.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from program_engine.math.one_rep_max import estimate_1rm
from program_engine.models.session import PRRecord, WorkoutSessionLog

logger = logging.getLogger(__name__)


def best_records(existing_prs: Iterable[PRRecord]) -> dict[str, float]:
    """Best known estimated 1RM per exercise id."""
    best: dict[str, float] = {}
    for pr in existing_prs:
        current = best.get(pr.exercise_id)
        if current is None or pr.estimated_1rm > current:
            best[pr.exercise_id] = pr.estimated_1rm
    return best


def qualifies_as_pr(
    estimate: float, previous_best: float | None, min_improvement_pct: float = 0.0
) -> bool:
    if estimate <= 0:
        return False
    if previous_best is None:
        return True
    return estimate > previous_best * (1 + min_improvement_pct)


def detect_new_prs(
    session: WorkoutSessionLog,
    existing_prs: Iterable[PRRecord] = (),
    min_improvement_pct: float = 0.0,
) -> tuple[PRRecord, ...]:
    """Walk a session's sets and emit a record for every new best.

    Sets are processed in logged order; each new record immediately becomes
    the bar for later sets of the same exercise, so a session can produce
    several records for one lift.

    Args:
        session: Completed session log.
        existing_prs: Previously stored records for the athlete.
        min_improvement_pct: Required margin over the previous best as a
            fraction (0.005 = 0.5%). 0.0 means any strict improvement.

    Returns:
        New PRRecords in set order.
    """
    best = best_records(existing_prs)
    records: list[PRRecord] = []

    for completed in session.completed_sets:
        if not completed.weight or not completed.reps:
            continue
        estimate = estimate_1rm(completed.weight, completed.reps, completed.rpe)
        previous = best.get(completed.exercise_id)
        if not qualifies_as_pr(estimate, previous, min_improvement_pct):
            continue

        change = round(estimate - previous, 1) if previous is not None else None
        records.append(
            PRRecord(
                id=f"{session.id}-{completed.exercise_id}-{completed.set_index}",
                user_id=session.user_id,
                exercise_id=completed.exercise_id,
                date=session.date,
                estimated_1rm=estimate,
                change_from_previous=change,
            )
        )
        best[completed.exercise_id] = estimate
        logger.debug(
            "New PR for %s: %s (previous %s)", completed.exercise_id, estimate, previous
        )

    return tuple(records)
