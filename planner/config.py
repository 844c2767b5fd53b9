"""Environment-variable-based configuration for the plan generator runner."""

from __future__ import annotations

import os
from pathlib import Path

PROFILE_PATH: Path = Path(os.environ.get("PROGRAM_PROFILE", "planner/profiles/my_profile.json"))
READINESS_PATH: Path | None = (
    Path(os.environ["PROGRAM_READINESS"]) if os.environ.get("PROGRAM_READINESS") else None
)
OUTPUT_DIR: Path = Path(os.environ.get("PROGRAM_OUTPUT_DIR", "plans")).expanduser()
CYCLE_WEEKS: int = int(os.environ.get("PROGRAM_CYCLE_WEEKS", "4"))
PR_MIN_IMPROVEMENT_PCT: float = float(os.environ.get("PR_MIN_IMPROVEMENT_PCT", "0.0"))
NIGHTLY_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "21"))
NIGHTLY_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "0"))
