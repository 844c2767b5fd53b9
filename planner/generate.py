"""Plan generator runner: builds a training cycle from a stored profile.

Usage:
    python -m planner.generate --once      # single run (for cron)
    python -m planner.generate --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, timedelta
from pathlib import Path

from program_engine.engine import ProgramEngine
from program_engine.exceptions import ProfileError
from program_engine.models.profile import TrainingProfile
from program_engine.models.readiness import ReadinessEntry
from program_engine.serialization import (
    cycle_to_json_string,
    profile_from_dict,
    readiness_from_dict,
)

from planner.config import (
    CYCLE_WEEKS,
    NIGHTLY_HOUR,
    NIGHTLY_MINUTE,
    OUTPUT_DIR,
    PR_MIN_IMPROVEMENT_PCT,
    PROFILE_PATH,
    READINESS_PATH,
)

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> dict:
    with open(path) as f:
        return json.load(f)


def _next_monday(from_date: date) -> date:
    """Return the date of the next Monday strictly after *from_date*."""
    days_ahead = (7 - from_date.weekday()) % 7
    if days_ahead == 0:
        days_ahead = 7
    return from_date + timedelta(days=days_ahead)


def load_inputs(
    profile_path: Path, readiness_path: Path | None = None
) -> tuple[TrainingProfile, ReadinessEntry | None]:
    """Read and decode the profile and optional readiness check-in.

    Raises:
        FileNotFoundError: A configured file does not exist.
        ProfileError: A file does not decode to a valid payload.
    """
    try:
        profile = profile_from_dict(_load_json(profile_path))
        readiness = readiness_from_dict(_load_json(readiness_path)) if readiness_path else None
    except json.JSONDecodeError as exc:
        raise ProfileError(f"Malformed JSON: {exc}") from exc
    return profile, readiness


def write_cycle(
    engine: ProgramEngine,
    profile: TrainingProfile,
    start_date: date,
    output_dir: Path,
    weeks: int = CYCLE_WEEKS,
    readiness: ReadinessEntry | None = None,
) -> Path:
    """Generate a cycle and write it to ``<output_dir>/<cycle id>.json``."""
    cycle = engine.generate_cycle(profile, start_date, weeks=weeks, readiness=readiness)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{cycle.id}.json"
    path.write_text(cycle_to_json_string(cycle), encoding="utf-8")
    return path


def generate_job() -> int:
    """Execute one run: load the profile, generate next week's cycle, write it."""
    logger.info("Starting plan generation")

    try:
        profile, readiness = load_inputs(PROFILE_PATH, READINESS_PATH)
    except FileNotFoundError as exc:
        logger.error("Input file not found: %s", exc.filename)
        return 1
    except ProfileError as exc:
        logger.error("Invalid input (%s): %s", exc.field or "profile", exc)
        return 1

    engine = ProgramEngine(pr_min_improvement_pct=PR_MIN_IMPROVEMENT_PCT)
    start_date = _next_monday(date.today())
    path = write_cycle(engine, profile, start_date, OUTPUT_DIR, CYCLE_WEEKS, readiness)
    logger.info("Wrote %d-week cycle starting %s to %s", CYCLE_WEEKS, start_date, path)
    return 0


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = argparse.ArgumentParser(description="Training program generator")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args()

    if args.once:
        sys.exit(generate_job())

    from apscheduler.schedulers.blocking import BlockingScheduler

    scheduler = BlockingScheduler()
    scheduler.add_job(
        generate_job,
        "cron",
        hour=NIGHTLY_HOUR,
        minute=NIGHTLY_MINUTE,
        id="generate_job",
    )
    logger.info("Scheduler started, generation at %02d:%02d", NIGHTLY_HOUR, NIGHTLY_MINUTE)
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
