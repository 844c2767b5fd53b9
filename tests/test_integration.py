"""End-to-end: profile payload -> ProgramEngine -> training cycle -> JSON.

Covers a HYROX athlete through a full cycle, readiness adaptation on a
generated day, and PR detection from a logged session.
"""

from __future__ import annotations

import json
from datetime import date

from program_engine.engine import ProgramEngine
from program_engine.models.blocks import (
    ConditioningBlock,
    HyroxRaceSimulation,
    HyroxStationWork,
    StrengthBlock,
)
from program_engine.models.enums import TrainingGoal
from program_engine.serialization import (
    cycle_to_json_string,
    profile_from_dict,
    readiness_from_dict,
    session_from_dict,
)

_HYROX_PROFILE = {
    "userId": "athlete-1",
    "goal": "hyrox",
    "experienceLevel": "intermediate",
    "equipmentIds": ["barbell", "kettlebell", "sled", "rower", "ski_erg", "medicine_ball"],
    "strengthNumbers": {"squat1RM": 130, "deadlift1RM": 170, "bench1RM": 90},
}


class TestEndToEndIntegration:
    def test_hyrox_cycle_to_json(self, created_at) -> None:
        profile = profile_from_dict(_HYROX_PROFILE)
        assert profile.goal is TrainingGoal.HYROX

        engine = ProgramEngine(clock=lambda: created_at)
        cycle = engine.generate_cycle(profile, date(2024, 1, 1))

        works = [
            block.work
            for day in cycle.days
            for block in day.blocks
            if isinstance(block, ConditioningBlock)
        ]
        assert any(isinstance(w, HyroxRaceSimulation) for w in works)
        assert any(isinstance(w, HyroxStationWork) for w in works)

        data = json.loads(cycle_to_json_string(cycle))
        assert data["id"] == "cycle-2024-01-01"
        assert len(data["weeks"]) == 4
        for week in data["weeks"]:
            assert week[6]["blocks"] == []
            assert all(day["userId"] == "athlete-1" for day in week)

    def test_readiness_flow(self, created_at) -> None:
        profile = profile_from_dict(_HYROX_PROFILE)
        readiness = readiness_from_dict(
            {"sleepQuality": 1, "energy": 1, "soreness": 5, "stress": 5}
        )
        engine = ProgramEngine(clock=lambda: created_at)

        rested = engine.generate_day(profile, 0, date(2024, 1, 1))
        tired = engine.generate_day(profile, 0, date(2024, 1, 1), readiness=readiness)
        assert tired.adjusted_for_readiness
        assert tired.estimated_duration_minutes < rested.estimated_duration_minutes

        adjusted = engine.adjust_for_readiness(tired, readiness.readiness_score, profile)
        before = next(b for b in tired.blocks if isinstance(b, StrengthBlock)).main
        after = next(b for b in adjusted.blocks if isinstance(b, StrengthBlock)).main
        assert after.prescribed_load < before.prescribed_load

    def test_session_to_prs(self) -> None:
        session = session_from_dict({
            "id": "s-2024-03-04",
            "userId": "athlete-1",
            "date": "2024-03-04",
            "completedSets": [
                {"exerciseId": "back_squat", "setIndex": 0, "weight": 100, "reps": 5},
                {"exerciseId": "back_squat", "setIndex": 1, "weight": 100, "reps": 6},
            ],
        })
        prs = ProgramEngine().detect_prs(session)
        assert [pr.estimated_1rm for pr in prs] == [115, 118]
        assert prs[-1].id == "s-2024-03-04-back_squat-1"
