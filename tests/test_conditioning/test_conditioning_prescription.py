"""Tests for conditioning day types, prescriptions and target paces."""

from __future__ import annotations

import pytest

from program_engine.conditioning.pace import calculate_target_pace, seconds_to_split
from program_engine.conditioning.prescription import (
    get_conditioning_day_type,
    get_conditioning_prescription,
)
from program_engine.models.enums import (
    ConditioningDayType,
    ConditioningStyle,
    Difficulty,
    TimeAvailability,
    TrainingGoal,
    WaveName,
)

_STD = TimeAvailability.STANDARD


class TestDayType:
    def test_weekly_pattern(self) -> None:
        assert [get_conditioning_day_type(d) for d in range(7)] == [
            ConditioningDayType.STRENGTH,
            ConditioningDayType.MIXED,
            ConditioningDayType.ENGINE,
            ConditioningDayType.STRENGTH,
            ConditioningDayType.MIXED,
            ConditioningDayType.ENGINE,
            ConditioningDayType.REST,
        ]

    def test_repeats_weekly(self) -> None:
        assert get_conditioning_day_type(9) is get_conditioning_day_type(2)


class TestPrescription:
    def test_strength_day_base(self) -> None:
        p = get_conditioning_prescription(0, TrainingGoal.GENERAL, _STD)
        assert (p.zone, p.style, p.duration_minutes, p.wave) == (
            2, ConditioningStyle.Z2, 12, WaveName.BASE,
        )

    def test_mixed_day_tempo_for_hybrid(self) -> None:
        p = get_conditioning_prescription(1, TrainingGoal.HYBRID, _STD)
        assert (p.zone, p.style) == (3, ConditioningStyle.TEMPO)
        # base 12 + mixed 5 + load wave 3
        assert p.duration_minutes == 20

    def test_mixed_day_zone_two_for_general(self) -> None:
        p = get_conditioning_prescription(1, TrainingGoal.GENERAL, _STD)
        assert (p.zone, p.style) == (2, ConditioningStyle.Z2)

    def test_engine_day_zone_by_goal(self) -> None:
        assert get_conditioning_prescription(2, TrainingGoal.CONDITIONING, _STD).zone == 4
        assert get_conditioning_prescription(2, TrainingGoal.HYBRID, _STD).zone == 3
        assert get_conditioning_prescription(2, TrainingGoal.HYROX, _STD).zone == 4

    def test_engine_day_peak_duration(self) -> None:
        p = get_conditioning_prescription(2, TrainingGoal.HYBRID, _STD)
        assert p.style is ConditioningStyle.INTERVALS
        assert p.duration_minutes == 28

    def test_deload_cuts_to_sixty_percent(self) -> None:
        # Day 3: strength day on a deload wave -> floor(12 * 0.6)
        assert get_conditioning_prescription(3, TrainingGoal.HYBRID, _STD).duration_minutes == 7

    @pytest.mark.parametrize(
        "availability, minutes",
        [
            (TimeAvailability.SHORT, 8),
            (TimeAvailability.STANDARD, 12),
            (TimeAvailability.FULL, 20),
        ],
    )
    def test_base_minutes_by_availability(
        self, availability: TimeAvailability, minutes: int
    ) -> None:
        assert get_conditioning_prescription(
            0, TrainingGoal.GENERAL, availability
        ).duration_minutes == minutes

    def test_hyrox_peak_engine_day_is_race_simulation(self) -> None:
        assert get_conditioning_prescription(
            2, TrainingGoal.HYROX, _STD
        ).style is ConditioningStyle.RACE_SIMULATION
        # Day 5 is an engine day on a load wave.
        assert get_conditioning_prescription(
            5, TrainingGoal.HYROX, _STD
        ).style is ConditioningStyle.INTERVALS


class TestPace:
    def test_split_format(self) -> None:
        assert seconds_to_split(115) == "1:55"
        assert seconds_to_split(60) == "1:00"

    def test_rower_zone_three(self) -> None:
        assert calculate_target_pace(
            3, TrainingGoal.HYBRID, Difficulty.INTERMEDIATE, "rower_intervals"
        ) == "2:00/500m"

    def test_bike_uses_km(self) -> None:
        pace = calculate_target_pace(
            3, TrainingGoal.HYBRID, Difficulty.INTERMEDIATE, "assault_bike_intervals"
        )
        assert pace == "2:00/km"

    def test_higher_zone_is_faster(self) -> None:
        goal, level = TrainingGoal.GENERAL, Difficulty.ADVANCED
        z2 = calculate_target_pace(2, goal, level, "ski_erg_intervals")
        z5 = calculate_target_pace(5, goal, level, "ski_erg_intervals")
        assert z5 < z2

    def test_no_pace_for_non_machine(self) -> None:
        assert calculate_target_pace(
            3, TrainingGoal.HYBRID, Difficulty.BEGINNER, "burpee_broad_jump"
        ) is None
        assert calculate_target_pace(3, TrainingGoal.HYBRID, Difficulty.BEGINNER, None) is None
