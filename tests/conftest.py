"""Shared test fixtures: athlete profiles, readiness check-ins, dates."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from program_engine.blocks.context import BlockContext
from program_engine.catalog import default_catalog
from program_engine.catalog.catalog import ExerciseCatalog
from program_engine.models.enums import (
    AdaptationMode,
    ExperienceLevel,
    TimeAvailability,
    TrainingGoal,
    Units,
)
from program_engine.models.profile import StrengthNumbers, TrainingProfile
from program_engine.models.readiness import ReadinessEntry


@pytest.fixture
def start_date() -> date:
    """A Monday."""
    return date(2024, 1, 1)


@pytest.fixture
def created_at() -> datetime:
    return datetime(2023, 12, 31, 20, 0, tzinfo=timezone.utc)


@pytest.fixture
def catalog() -> ExerciseCatalog:
    return default_catalog()


@pytest.fixture
def empty_catalog() -> ExerciseCatalog:
    return ExerciseCatalog([])


@pytest.fixture
def bodyweight_beginner() -> TrainingProfile:
    """General-fitness beginner training at home with no equipment."""
    return TrainingProfile(
        goal=TrainingGoal.GENERAL,
        experience_level=ExperienceLevel.BEGINNER,
        training_days_per_week=3,
        equipment_ids=frozenset(),
        time_availability=TimeAvailability.STANDARD,
        user_id="bodyweight-user",
    )


@pytest.fixture
def barbell_lifter() -> TrainingProfile:
    """Intermediate strength athlete with a barbell and known maxes (kg)."""
    return TrainingProfile(
        goal=TrainingGoal.STRENGTH,
        experience_level=ExperienceLevel.INTERMEDIATE,
        training_days_per_week=4,
        equipment_ids=frozenset({"barbell"}),
        time_availability=TimeAvailability.STANDARD,
        units=Units.METRIC,
        strength_numbers=StrengthNumbers(
            squat_1rm=140.0, bench_1rm=100.0, deadlift_1rm=180.0, press_1rm=60.0
        ),
        user_id="lifter",
    )


@pytest.fixture
def hybrid_athlete() -> TrainingProfile:
    return TrainingProfile(
        goal=TrainingGoal.HYBRID,
        experience_level=ExperienceLevel.INTERMEDIATE,
        training_days_per_week=5,
        equipment_ids=frozenset({"barbell", "dumbbell", "rower"}),
        time_availability=TimeAvailability.STANDARD,
        strength_numbers=StrengthNumbers(squat_1rm=120.0, deadlift_1rm=150.0, bench_1rm=90.0),
        user_id="hybrid",
    )


@pytest.fixture
def hyrox_athlete() -> TrainingProfile:
    """HYROX racer with a fully equipped gym."""
    return TrainingProfile(
        goal=TrainingGoal.HYROX,
        experience_level=ExperienceLevel.INTERMEDIATE,
        training_days_per_week=5,
        equipment_ids=frozenset(
            {"barbell", "kettlebell", "sled", "rower", "ski_erg", "medicine_ball", "sandbag"}
        ),
        time_availability=TimeAvailability.STANDARD,
        user_id="hyrox",
    )


@pytest.fixture
def conditioning_athlete() -> TrainingProfile:
    return TrainingProfile(
        goal=TrainingGoal.CONDITIONING,
        experience_level=ExperienceLevel.BEGINNER,
        equipment_ids=frozenset({"rower"}),
        time_availability=TimeAvailability.STANDARD,
        adaptation_mode=AdaptationMode.AUTOMATIC,
        user_id="engine",
    )


@pytest.fixture
def neutral_readiness() -> ReadinessEntry:
    """All inputs at 3: score 52, factor exactly 1.0."""
    return ReadinessEntry.from_inputs(3, 3, 3, 3)


@pytest.fixture
def poor_readiness() -> ReadinessEntry:
    """Bad sleep, no energy, very sore, stressed: score 12, factor 0.62."""
    return ReadinessEntry.from_inputs(1, 1, 5, 5)


@pytest.fixture
def great_readiness() -> ReadinessEntry:
    """Best possible check-in: score 92, factor clamped to 1.2."""
    return ReadinessEntry.from_inputs(5, 5, 1, 1)


@pytest.fixture
def make_context(start_date):
    """Factory for BlockContexts on the fixture start date."""

    def _make(profile: TrainingProfile, day_index: int = 0, **kwargs) -> BlockContext:
        return BlockContext(profile=profile, day_index=day_index, plan_date=start_date, **kwargs)

    return _make
