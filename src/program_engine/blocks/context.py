"""Shared inputs for the block generators."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from program_engine.catalog.catalog import ExerciseCatalog, default_catalog
from program_engine.math.readiness import get_readiness_factor
from program_engine.math.waves import IntensityWave, get_intensity_wave
from program_engine.models.enums import BlockType, MovementPattern
from program_engine.models.profile import TrainingProfile
from program_engine.models.readiness import ReadinessEntry

_package_logger = logging.getLogger("program_engine")


@dataclass(frozen=True)
class BlockContext:
    """Everything a block generator may read. Generators read nothing else.

    ``pattern_override`` is the already-resolved movement pattern for the day
    (from the weekly template); None lets the strength block rotate through
    its default patterns.
    """

    profile: TrainingProfile
    day_index: int
    plan_date: date
    pattern_override: MovementPattern | None = None
    readiness: ReadinessEntry | None = None
    catalog: ExerciseCatalog = field(default_factory=default_catalog)
    logger: logging.Logger = _package_logger

    @property
    def equipment_ids(self) -> frozenset[str]:
        return frozenset(self.profile.equipment_ids)

    @property
    def intensity(self) -> IntensityWave:
        return get_intensity_wave(self.day_index)

    @property
    def readiness_factor(self) -> float:
        return get_readiness_factor(self.readiness)

    def block_id(self, block_type: BlockType) -> str:
        """Deterministic id: same day, same block type, same id."""
        return f"{block_type.value}-{self.plan_date.isoformat()}-{self.day_index}"
