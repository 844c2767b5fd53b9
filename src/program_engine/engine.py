"""ProgramEngine: the entry point that generates plans and detects records."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import date, datetime, timezone

from program_engine.adaptation.adjust import adjust_workout_for_today
from program_engine.catalog.catalog import ExerciseCatalog, default_catalog
from program_engine.generation.cycle import generate_training_cycle
from program_engine.generation.daily import generate_daily_workout
from program_engine.generation.microcycle import generate_microcycle
from program_engine.math.readiness import get_readiness_factor, readiness_trend
from program_engine.math.training_metrics import WeeklyMetrics, summarize_week
from program_engine.models.enums import DEFAULT_CYCLE_WEEKS, MICROCYCLE_WEEKS, FocusToken
from program_engine.models.plan import TrainingCycle, WorkoutPlanDay
from program_engine.models.profile import TrainingProfile
from program_engine.models.readiness import ReadinessEntry
from program_engine.models.session import PRRecord, WorkoutSessionLog
from program_engine.progress.pr_detector import detect_new_prs

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProgramEngine:
    """Binds a catalog, a logger and a clock to the pure generators.

    Every call is synchronous and deterministic for a given catalog and
    clock; the engine holds no mutable state between calls.

    Usage:
        engine = ProgramEngine()
        cycle = engine.generate_cycle(profile, date(2024, 1, 1))
        today = engine.adjust_for_readiness(cycle.days[0], readiness.readiness_score, profile)
        prs = engine.detect_prs(session, existing_prs)
    """

    def __init__(
        self,
        catalog: ExerciseCatalog | None = None,
        logger: logging.Logger | None = None,
        pr_min_improvement_pct: float = 0.0,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()
        self.logger = logger or logging.getLogger("program_engine")
        self.pr_min_improvement_pct = pr_min_improvement_pct
        self.clock = clock or _utc_now

    def generate_day(
        self,
        profile: TrainingProfile,
        day_index: int,
        plan_date: date,
        focus: FocusToken | None = None,
        readiness: ReadinessEntry | None = None,
    ) -> WorkoutPlanDay:
        """Generate a single day; without *focus* the default rotations apply."""
        return generate_daily_workout(
            profile,
            day_index,
            plan_date,
            focus=focus,
            readiness=readiness,
            catalog=self.catalog,
            log=self.logger,
            created_at=self.clock(),
        )

    def generate_microcycle(
        self,
        profile: TrainingProfile,
        start_date: date,
        weeks: int = MICROCYCLE_WEEKS,
        readiness: ReadinessEntry | None = None,
    ) -> tuple[WorkoutPlanDay, ...]:
        return generate_microcycle(
            profile,
            start_date,
            weeks=weeks,
            readiness=readiness,
            catalog=self.catalog,
            log=self.logger,
            created_at=self.clock(),
        )

    def generate_cycle(
        self,
        profile: TrainingProfile,
        start_date: date,
        weeks: int = DEFAULT_CYCLE_WEEKS,
        readiness: ReadinessEntry | None = None,
    ) -> TrainingCycle:
        """Generate a progressed training cycle of *weeks* seven-day weeks."""
        cycle = generate_training_cycle(
            profile,
            start_date,
            weeks=weeks,
            readiness=readiness,
            catalog=self.catalog,
            log=self.logger,
            created_at=self.clock(),
        )
        logger.info(
            "Generated cycle %s for %s (%s goal, %d weeks)",
            cycle.id, profile.user_id, profile.goal.value, weeks,
        )
        return cycle

    def adjust_for_readiness(
        self, day: WorkoutPlanDay, readiness_score: float, profile: TrainingProfile
    ) -> WorkoutPlanDay:
        """Scale *day* to today's readiness using the profile's adaptation settings."""
        return adjust_workout_for_today(
            day,
            readiness_score,
            adaptation_mode=profile.adaptation_mode,
            readiness_scaling_enabled=profile.readiness_scaling_enabled,
            units=profile.units,
        )

    def detect_prs(
        self, session: WorkoutSessionLog, existing_prs: Iterable[PRRecord] = ()
    ) -> tuple[PRRecord, ...]:
        return detect_new_prs(
            session, existing_prs, min_improvement_pct=self.pr_min_improvement_pct
        )

    def weekly_metrics(self, days: Sequence[WorkoutPlanDay]) -> WeeklyMetrics:
        return summarize_week(days)

    @staticmethod
    def readiness_factor(readiness: ReadinessEntry | None) -> float:
        return get_readiness_factor(readiness)

    @staticmethod
    def readiness_trend(entries: Sequence[ReadinessEntry], span: int = 7) -> float | None:
        """Smoothed readiness over recent check-ins, oldest first."""
        return readiness_trend(entries, span)
