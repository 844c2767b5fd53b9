"""Daily readiness check-in."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from program_engine.models.enums import TimeAvailability


@dataclass(frozen=True)
class ReadinessEntry:
    """Self-reported recovery inputs (1-5 each) and the derived 0-100 score.

    Sleep quality and energy are "higher is better"; soreness and stress are
    "higher is worse".
    """

    sleep_quality: int
    energy: int
    soreness: int
    stress: int
    time_availability: TimeAvailability
    readiness_score: int
    entry_date: date | None = None
    user_id: str = "local-user"

    @classmethod
    def from_inputs(
        cls,
        sleep_quality: int,
        energy: int,
        soreness: int,
        stress: int,
        time_availability: TimeAvailability = TimeAvailability.STANDARD,
        entry_date: date | None = None,
        user_id: str = "local-user",
    ) -> ReadinessEntry:
        """Build an entry, deriving ``readiness_score`` from the raw inputs."""
        # Local import: math.readiness depends on this module for typing.
        from program_engine.math.readiness import calculate_readiness_score

        score = calculate_readiness_score(
            sleep_quality, energy, soreness, stress, time_availability
        )
        return cls(
            sleep_quality=sleep_quality,
            energy=energy,
            soreness=soreness,
            stress=stress,
            time_availability=time_availability,
            readiness_score=score,
            entry_date=entry_date,
            user_id=user_id,
        )
