"""Tests for same-day readiness adaptation."""

from __future__ import annotations

from datetime import date

import pytest

from program_engine.adaptation.adjust import (
    adjust_workout_for_today,
    get_base_scaler,
    get_final_scaler,
)
from program_engine.generation.daily import generate_daily_workout
from program_engine.models.blocks import AccessoryBlock, ConditioningBlock, StrengthBlock
from program_engine.models.enums import AdaptationMode, FocusToken

_DAY = date(2024, 1, 1)


def _only(day, block_cls):
    matches = [b for b in day.blocks if isinstance(b, block_cls)]
    assert len(matches) == 1
    return matches[0]


@pytest.fixture
def squat_day(barbell_lifter, created_at):
    return generate_daily_workout(barbell_lifter, 0, _DAY, created_at=created_at)


@pytest.fixture
def engine_day(hybrid_athlete, created_at):
    return generate_daily_workout(hybrid_athlete, 2, _DAY, created_at=created_at)


class TestScaler:
    @pytest.mark.parametrize(
        "score, scaler",
        [(0, 0.75), (39, 0.75), (40, 0.9), (59, 0.9), (60, 1.0), (80, 1.0), (81, 1.1), (100, 1.1)],
    )
    def test_base_bands(self, score: float, scaler: float) -> None:
        assert get_base_scaler(score) == pytest.approx(scaler)

    @pytest.mark.parametrize(
        "mode, expected",
        [
            (AdaptationMode.CONSERVATIVE, 0.81),
            (AdaptationMode.AUTOMATIC, 0.9),
            (AdaptationMode.AGGRESSIVE, 1.035),
        ],
    )
    def test_mode_multiplier(self, mode: AdaptationMode, expected: float) -> None:
        assert get_final_scaler(50, mode) == pytest.approx(expected)


class TestAdjustWorkoutForToday:
    def test_low_readiness_strength(self, squat_day) -> None:
        adjusted = adjust_workout_for_today(squat_day, 30)
        main = _only(adjusted, StrengthBlock).main
        assert main.exercise_id == "back_squat"
        for s in main.sets:
            assert s.target_percent_1rm == pytest.approx(52.5)
            assert s.target_reps == 6
            assert s.target_rpe == pytest.approx(5.25, abs=0.05)
        # 140 x 52.5% = 73.5 -> nearest 2.5
        assert main.prescribed_load == pytest.approx(72.5)

    def test_accessory_moves_half_as_much(self, squat_day) -> None:
        adjusted = adjust_workout_for_today(squat_day, 30)
        accessory = _only(adjusted, AccessoryBlock)
        # 10 reps x 0.875 = 8.75 -> 9
        assert all(s.target_reps == 9 for ex in accessory.exercises for s in ex.sets)

    def test_conditioning_zone(self, engine_day) -> None:
        assert _only(engine_day, ConditioningBlock).work.zone == 3
        low = adjust_workout_for_today(engine_day, 30)
        # 3 x 0.75 = 2.25 -> Z2
        assert _only(low, ConditioningBlock).work.zone == 2
        high = adjust_workout_for_today(engine_day, 95, AdaptationMode.AGGRESSIVE)
        # 3 x 1.265 = 3.8 -> Z4
        assert _only(high, ConditioningBlock).work.zone == 4

    def test_zone_clamped(self, engine_day) -> None:
        adjusted = engine_day
        for _ in range(6):
            adjusted = adjust_workout_for_today(adjusted, 95, AdaptationMode.AGGRESSIVE)
        assert _only(adjusted, ConditioningBlock).work.zone == 5

    def test_normal_readiness_keeps_prescription(self, squat_day) -> None:
        adjusted = adjust_workout_for_today(squat_day, 70)
        assert adjusted.blocks == squat_day.blocks
        assert adjusted.adjusted_for_readiness

    def test_high_readiness_increases_load(self, squat_day) -> None:
        adjusted = adjust_workout_for_today(squat_day, 90)
        before = _only(squat_day, StrengthBlock).main
        after = _only(adjusted, StrengthBlock).main
        assert after.sets[0].target_percent_1rm > before.sets[0].target_percent_1rm
        assert after.prescribed_load > before.prescribed_load
        assert after.sets[0].target_reps == 9

    def test_rpe_never_above_ten(self, squat_day) -> None:
        adjusted = squat_day
        for _ in range(5):
            adjusted = adjust_workout_for_today(adjusted, 100, AdaptationMode.AGGRESSIVE)
        assert all(s.target_rpe <= 10 for s in _only(adjusted, StrengthBlock).main.sets)

    def test_disabled_returns_same_day(self, squat_day) -> None:
        assert adjust_workout_for_today(squat_day, 10, readiness_scaling_enabled=False) is squat_day

    def test_flag_set(self, squat_day) -> None:
        assert not squat_day.adjusted_for_readiness
        assert adjust_workout_for_today(squat_day, 30).adjusted_for_readiness

    def test_input_not_mutated(self, squat_day) -> None:
        before = _only(squat_day, StrengthBlock).main.sets
        adjust_workout_for_today(squat_day, 30)
        assert _only(squat_day, StrengthBlock).main.sets == before

    def test_warmup_and_cooldown_unchanged(self, squat_day) -> None:
        adjusted = adjust_workout_for_today(squat_day, 30)
        assert adjusted.blocks[0] == squat_day.blocks[0]
        assert adjusted.blocks[-1] == squat_day.blocks[-1]

    def test_rest_day_has_nothing_to_scale(self, barbell_lifter, created_at) -> None:
        rest = generate_daily_workout(
            barbell_lifter, 6, _DAY, focus=FocusToken.REST, created_at=created_at
        )
        assert adjust_workout_for_today(rest, 20).blocks == ()
