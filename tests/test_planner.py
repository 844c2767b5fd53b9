"""Tests for the plan generator runner (file I/O and job wiring)."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from planner import generate
from planner.generate import _next_monday, load_inputs, write_cycle
from program_engine.engine import ProgramEngine
from program_engine.exceptions import ProfileError
from program_engine.models.enums import TrainingGoal


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def profile_file(tmp_path: Path) -> Path:
    return _write(
        tmp_path / "profile.json",
        {"goal": "hybrid", "experienceLevel": "intermediate", "equipmentIds": ["barbell"]},
    )


class TestNextMonday:
    def test_monday_moves_a_full_week(self) -> None:
        assert _next_monday(date(2024, 1, 1)) == date(2024, 1, 8)

    def test_midweek(self) -> None:
        assert _next_monday(date(2024, 1, 3)) == date(2024, 1, 8)
        assert _next_monday(date(2024, 1, 7)) == date(2024, 1, 8)


class TestLoadInputs:
    def test_profile_only(self, profile_file: Path) -> None:
        profile, readiness = load_inputs(profile_file)
        assert profile.goal is TrainingGoal.HYBRID
        assert readiness is None

    def test_with_readiness(self, profile_file: Path, tmp_path: Path) -> None:
        readiness_file = _write(
            tmp_path / "readiness.json",
            {"sleepQuality": 5, "energy": 5, "soreness": 1, "stress": 1},
        )
        _, readiness = load_inputs(profile_file, readiness_file)
        assert readiness.readiness_score == 92

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_inputs(tmp_path / "absent.json")

    def test_malformed_json(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        with pytest.raises(ProfileError):
            load_inputs(bad)


class TestWriteCycle:
    def test_writes_named_file(self, profile_file: Path, tmp_path: Path, created_at) -> None:
        profile, _ = load_inputs(profile_file)
        out = tmp_path / "plans"
        path = write_cycle(
            ProgramEngine(clock=lambda: created_at), profile, date(2024, 1, 1), out, weeks=2
        )
        assert path == out / "cycle-2024-01-01.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["endDate"] == "2024-01-14"
        assert len(data["weeks"]) == 2


class TestGenerateJob:
    def test_success(self, monkeypatch, profile_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        monkeypatch.setattr(generate, "PROFILE_PATH", profile_file)
        monkeypatch.setattr(generate, "READINESS_PATH", None)
        monkeypatch.setattr(generate, "OUTPUT_DIR", out)
        monkeypatch.setattr(generate, "CYCLE_WEEKS", 1)
        assert generate.generate_job() == 0
        written = list(out.glob("cycle-*.json"))
        assert len(written) == 1

    def test_missing_profile(self, monkeypatch, tmp_path: Path, caplog) -> None:
        monkeypatch.setattr(generate, "PROFILE_PATH", tmp_path / "absent.json")
        monkeypatch.setattr(generate, "READINESS_PATH", None)
        assert generate.generate_job() == 1
        assert "Input file not found" in caplog.text

    def test_invalid_profile(self, monkeypatch, tmp_path: Path, caplog) -> None:
        monkeypatch.setattr(
            generate, "PROFILE_PATH", _write(tmp_path / "p.json", {"goal": "marathon"})
        )
        monkeypatch.setattr(generate, "READINESS_PATH", None)
        assert generate.generate_job() == 1
        assert "Invalid input (goal)" in caplog.text

    def test_invalid_readiness_score(
        self, monkeypatch, profile_file: Path, tmp_path: Path, caplog
    ) -> None:
        readiness_file = _write(
            tmp_path / "readiness.json",
            {"sleepQuality": 3, "energy": 3, "soreness": 3, "stress": 3,
             "readinessScore": "high"},
        )
        monkeypatch.setattr(generate, "PROFILE_PATH", profile_file)
        monkeypatch.setattr(generate, "READINESS_PATH", readiness_file)
        assert generate.generate_job() == 1
        assert "Invalid input (readinessScore)" in caplog.text
