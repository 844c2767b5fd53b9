"""Tests for plan export and profile/readiness/session decoding."""

from __future__ import annotations

import json
from datetime import date, datetime

import pytest

from program_engine.exceptions import ProfileError
from program_engine.generation.cycle import generate_training_cycle
from program_engine.generation.daily import generate_daily_workout
from program_engine.models.enums import (
    AdaptationMode,
    ExperienceLevel,
    FocusToken,
    TimeAvailability,
    TrainingGoal,
    Units,
)
from program_engine.models.session import PRRecord
from program_engine.progress.pr_detector import detect_new_prs
from program_engine.serialization import (
    block_to_dict,
    cycle_to_dict,
    cycle_to_json_string,
    day_to_dict,
    pr_from_dict,
    pr_to_dict,
    profile_from_dict,
    readiness_from_dict,
    session_from_dict,
)

_DAY = date(2024, 1, 1)
_PAYLOAD_KEYS = {"warmupItems", "strengthMain", "accessory", "conditioning", "cooldownItems"}


class TestDayExport:
    def test_top_level_keys(self, barbell_lifter, created_at) -> None:
        data = day_to_dict(generate_daily_workout(barbell_lifter, 0, _DAY, created_at=created_at))
        assert data["id"] == "day-2024-01-01-0"
        assert data["userId"] == "lifter"
        assert data["date"] == "2024-01-01"
        assert data["dayIndex"] == 0
        assert data["focusTags"] == ["strength"]
        assert data["estimatedDurationMinutes"] == 77
        assert data["adjustedForReadiness"] is False
        assert data["createdAt"] == "2023-12-31T20:00:00+00:00"
        assert [b["type"] for b in data["blocks"]] == [
            "warmup", "strength", "accessory", "cooldown",
        ]

    def test_one_payload_key_per_block(self, hybrid_athlete, created_at) -> None:
        day = generate_daily_workout(hybrid_athlete, 0, _DAY, created_at=created_at)
        for block in day.blocks:
            keys = set(block_to_dict(block)) & _PAYLOAD_KEYS
            assert len(keys) == 1

    def test_strength_main(self, barbell_lifter, created_at) -> None:
        day = generate_daily_workout(barbell_lifter, 0, _DAY, created_at=created_at)
        main = day_to_dict(day)["blocks"][1]["strengthMain"]
        assert main["exerciseId"] == "back_squat"
        assert main["wave"] == "base"
        assert main["prescribedLoad"] == pytest.approx(97.5)
        assert main["sets"][0] == {"targetReps": 8, "targetRpe": 7, "targetPercent1RM": 70.0}

    def test_placeholder_strength_is_null(self, barbell_lifter, empty_catalog, created_at) -> None:
        day = generate_daily_workout(
            barbell_lifter, 0, _DAY, catalog=empty_catalog, created_at=created_at
        )
        assert day_to_dict(day)["blocks"][0]["strengthMain"] is None

    def test_standard_conditioning(self, hybrid_athlete, created_at) -> None:
        day = generate_daily_workout(hybrid_athlete, 2, _DAY, created_at=created_at)
        conditioning = next(
            b["conditioning"] for b in day_to_dict(day)["blocks"] if b["type"] == "conditioning"
        )
        assert conditioning["kind"] == "standard"
        assert conditioning["mode"] == "intervals"
        assert conditioning["targetZone"] == "Z3"
        assert conditioning["rounds"] == 14
        assert conditioning["targetPace"] == "2:00/500m"

    def test_hyrox_race(self, hyrox_athlete, created_at) -> None:
        day = generate_daily_workout(
            hyrox_athlete, 2, _DAY, focus=FocusToken.CONDITIONING, created_at=created_at
        )
        conditioning = day_to_dict(day)["blocks"][1]["conditioning"]
        assert conditioning["kind"] == "hyrox_race"
        assert len(conditioning["stations"]) == 16
        assert conditioning["stations"][0]["isRun"] is True

    def test_rest_day(self, barbell_lifter, created_at) -> None:
        day = generate_daily_workout(
            barbell_lifter, 6, _DAY, focus=FocusToken.REST, created_at=created_at
        )
        data = day_to_dict(day)
        assert data["blocks"] == []
        assert data["focusTags"] == ["rest"]
        assert data["estimatedDurationMinutes"] == 0


class TestCycleExport:
    def test_cycle_dict(self, barbell_lifter, start_date, created_at) -> None:
        data = cycle_to_dict(
            generate_training_cycle(barbell_lifter, start_date, created_at=created_at)
        )
        assert data["id"] == "cycle-2024-01-01"
        assert data["startDate"] == "2024-01-01"
        assert data["endDate"] == "2024-01-28"
        assert [len(week) for week in data["weeks"]] == [7, 7, 7, 7]

    def test_json_string_keeps_unicode(self, barbell_lifter, start_date, created_at) -> None:
        cycle = generate_training_cycle(barbell_lifter, start_date, created_at=created_at)
        text = cycle_to_json_string(cycle)
        assert "Main Lift – " in text
        assert "(Technique)" in text
        assert json.loads(text) == cycle_to_dict(cycle)

    def test_indent(self, barbell_lifter, start_date, created_at) -> None:
        cycle = generate_training_cycle(barbell_lifter, start_date, weeks=1, created_at=created_at)
        assert cycle_to_json_string(cycle, indent=4).startswith('{\n    "id"')


class TestProfileFromDict:
    def test_full_payload(self) -> None:
        profile = profile_from_dict({
            "userId": "u1",
            "goal": "hyrox",
            "experienceLevel": "advanced",
            "trainingDaysPerWeek": 5,
            "equipmentIds": ["sled", "rower"],
            "timeAvailability": "full",
            "adaptationMode": "aggressive",
            "readinessScalingEnabled": False,
            "units": "imperial",
            "strengthNumbers": {"squat1RM": 315, "deadlift1RM": 405},
        })
        assert profile.user_id == "u1"
        assert profile.goal is TrainingGoal.HYROX
        assert profile.experience_level is ExperienceLevel.ADVANCED
        assert profile.training_days_per_week == 5
        assert profile.equipment_ids == frozenset({"sled", "rower"})
        assert profile.time_availability is TimeAvailability.FULL
        assert profile.adaptation_mode is AdaptationMode.AGGRESSIVE
        assert profile.readiness_scaling_enabled is False
        assert profile.units is Units.IMPERIAL
        assert profile.strength_numbers.squat_1rm == 315.0
        assert profile.strength_numbers.deadlift_1rm == 405.0
        assert profile.strength_numbers.bench_1rm is None

    def test_defaults(self) -> None:
        profile = profile_from_dict({})
        assert profile.goal is TrainingGoal.GENERAL
        assert profile.experience_level is ExperienceLevel.BEGINNER
        assert profile.equipment_ids == frozenset()
        assert profile.strength_numbers is None
        assert profile.user_id == "local-user"

    def test_unknown_goal(self) -> None:
        with pytest.raises(ProfileError) as excinfo:
            profile_from_dict({"goal": "marathon"})
        assert excinfo.value.field == "goal"

    def test_bad_strength_numbers(self) -> None:
        with pytest.raises(ProfileError) as excinfo:
            profile_from_dict({"strengthNumbers": {"squat1RM": "heavy"}})
        assert excinfo.value.field == "strengthNumbers"

    def test_not_an_object(self) -> None:
        with pytest.raises(ProfileError):
            profile_from_dict(["hybrid"])


class TestReadinessFromDict:
    def test_score_derived_when_absent(self) -> None:
        entry = readiness_from_dict(
            {"sleepQuality": 3, "energy": 3, "soreness": 3, "stress": 3, "date": "2024-01-01"}
        )
        assert entry.readiness_score == 52
        assert entry.entry_date == date(2024, 1, 1)

    def test_stored_score_kept(self) -> None:
        entry = readiness_from_dict(
            {"sleepQuality": 3, "energy": 3, "soreness": 3, "stress": 3, "readinessScore": 77}
        )
        assert entry.readiness_score == 77
        assert entry.entry_date is None

    def test_missing_input(self) -> None:
        with pytest.raises(ProfileError) as excinfo:
            readiness_from_dict({"sleepQuality": 3})
        assert excinfo.value.field == "readiness"

    def test_non_numeric_stored_score(self) -> None:
        with pytest.raises(ProfileError) as excinfo:
            readiness_from_dict(
                {"sleepQuality": 3, "energy": 3, "soreness": 3, "stress": 3,
                 "readinessScore": "high"}
            )
        assert excinfo.value.field == "readinessScore"


class TestSessionAndRecords:
    def test_session_from_dict(self) -> None:
        session = session_from_dict({
            "id": "s1",
            "userId": "lifter",
            "date": "2024-03-04",
            "planDayId": "day-2024-03-04-0",
            "completedSets": [
                {"exerciseId": "deadlift", "blockId": "b1", "setIndex": 0, "weight": 180,
                 "reps": 3, "completedAt": "2024-03-04T18:30:00"},
                {"exerciseId": "plank", "durationSeconds": 60},
            ],
        })
        assert session.date == date(2024, 3, 4)
        assert session.plan_day_id == "day-2024-03-04-0"
        first, second = session.completed_sets
        assert (first.weight, first.reps) == (180, 3)
        assert first.completed_at == datetime(2024, 3, 4, 18, 30)
        assert second.set_index == 1
        assert second.weight is None

    def test_session_missing_id(self) -> None:
        with pytest.raises(ProfileError):
            session_from_dict({"date": "2024-03-04"})

    def test_bad_date(self) -> None:
        with pytest.raises(ProfileError) as excinfo:
            session_from_dict({"id": "s1", "date": "yesterday"})
        assert excinfo.value.field == "date"

    def test_session_numbers_coerced(self) -> None:
        session = session_from_dict({
            "id": "s1",
            "date": "2024-03-04",
            "completedSets": [
                {"exerciseId": "back_squat", "weight": "100", "reps": "5", "rpe": "8"},
            ],
        })
        (logged,) = session.completed_sets
        assert (logged.weight, logged.reps, logged.rpe) == (100.0, 5, 8.0)
        assert [pr.estimated_1rm for pr in detect_new_prs(session)] == [119]

    def test_session_non_numeric_weight(self) -> None:
        with pytest.raises(ProfileError) as excinfo:
            session_from_dict({
                "id": "s1",
                "date": "2024-03-04",
                "completedSets": [{"exerciseId": "back_squat", "weight": "heavy", "reps": 5}],
            })
        assert excinfo.value.field == "session"

    def test_pr_dict_shape(self) -> None:
        pr = PRRecord(
            id="s1-deadlift-0",
            user_id="lifter",
            exercise_id="deadlift",
            date=date(2024, 3, 4),
            estimated_1rm=361,
            change_from_previous=61.0,
        )
        data = pr_to_dict(pr)
        assert data == {
            "id": "s1-deadlift-0",
            "userId": "lifter",
            "exerciseId": "deadlift",
            "date": "2024-03-04",
            "estimated1RM": 361,
            "changeFromPrevious": 61.0,
        }
        assert pr_from_dict(data) == pr

    def test_pr_missing_estimate(self) -> None:
        with pytest.raises(ProfileError):
            pr_from_dict({"id": "x", "exerciseId": "deadlift", "date": "2024-03-04"})
