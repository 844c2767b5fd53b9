"""Workout blocks: the five block variants and their payloads.

A ``WorkoutBlock`` is one of five frozen dataclasses; each variant carries
exactly the payload for its type and a class-level ``block_type`` tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from program_engine.models.enums import (
    BlockType,
    ConditioningDayType,
    ConditioningStyle,
    HyroxStationKind,
    MovementPattern,
    WaveName,
)


@dataclass(frozen=True)
class SetPrescription:
    """One prescribed set. ``target_percent_1rm`` is in percentage points (70.0)."""

    target_reps: int | None = None
    target_rpe: float | None = None
    target_percent_1rm: float | None = None
    target_duration_seconds: int | None = None


@dataclass(frozen=True)
class StrengthPrescription:
    """Main lift of the day with its ordered working sets."""

    exercise_id: str
    exercise_name: str
    pattern: MovementPattern
    wave: WaveName
    sets: tuple[SetPrescription, ...]
    one_rep_max: float | None = None
    prescribed_load: float | None = None


@dataclass(frozen=True)
class AccessoryPrescription:
    exercise_id: str
    exercise_name: str
    template_tag: str
    sets: tuple[SetPrescription, ...]


@dataclass(frozen=True)
class ConditioningWork:
    """Generic engine work on a cardio machine or kettlebell."""

    style: ConditioningStyle
    zone: int
    duration_minutes: int
    day_type: ConditioningDayType
    wave: WaveName
    exercise_id: str | None = None
    exercise_name: str = ""
    work_seconds: int | None = None
    rest_seconds: int | None = None
    rounds: int | None = None
    target_pace: str | None = None
    readiness_factor: float = 1.0
    notes: str = ""

    @property
    def target_zone(self) -> str:
        return f"Z{self.zone}"


@dataclass(frozen=True)
class HyroxStationWork:
    """An equipment-conditional HYROX station session.

    Only the fields relevant to ``kind`` are populated: sled sessions carry
    push/pull meters and rounds, wall balls carry reps, machine intervals
    carry work/rest seconds and rounds, burpee broad jumps carry meters per
    rep and rounds.
    """

    kind: HyroxStationKind
    station_name: str
    zone: int
    duration_minutes: int
    wave: WaveName
    rounds: int | None = None
    reps: int | None = None
    push_meters: int | None = None
    pull_meters: int | None = None
    meters_per_rep: int | None = None
    work_seconds: int | None = None
    rest_seconds: int | None = None
    scheme: str = ""
    readiness_factor: float = 1.0
    notes: str = ""


@dataclass(frozen=True)
class HyroxRaceStation:
    """One leg of a race simulation: a run or a functional station."""

    name: str
    is_run: bool = False
    exercise_id: str | None = None
    distance_meters: int | None = None
    reps: int | None = None
    load_kg: float | None = None
    is_substitute: bool = False


@dataclass(frozen=True)
class HyroxRaceSimulation:
    """Full race rehearsal: eight stations, each preceded by a run."""

    stations: tuple[HyroxRaceStation, ...]
    duration_minutes: int
    readiness_factor: float = 1.0
    zone: int = 4
    notes: str = ""

    @property
    def run_count(self) -> int:
        return sum(1 for s in self.stations if s.is_run)


ConditioningPayload = Union[ConditioningWork, HyroxStationWork, HyroxRaceSimulation]


@dataclass(frozen=True)
class WarmupBlock:
    id: str
    title: str
    estimated_duration_minutes: int
    exercise_ids: tuple[str, ...]
    items: tuple[str, ...]

    block_type: ClassVar[BlockType] = BlockType.WARMUP


@dataclass(frozen=True)
class StrengthBlock:
    """Main-lift block. ``main`` is None for the no-exercise placeholder."""

    id: str
    title: str
    estimated_duration_minutes: int
    main: StrengthPrescription | None

    block_type: ClassVar[BlockType] = BlockType.STRENGTH

    @property
    def is_placeholder(self) -> bool:
        return self.main is None


@dataclass(frozen=True)
class AccessoryBlock:
    id: str
    title: str
    estimated_duration_minutes: int
    exercises: tuple[AccessoryPrescription, ...]

    block_type: ClassVar[BlockType] = BlockType.ACCESSORY


@dataclass(frozen=True)
class ConditioningBlock:
    id: str
    title: str
    estimated_duration_minutes: int
    work: ConditioningPayload

    block_type: ClassVar[BlockType] = BlockType.CONDITIONING


@dataclass(frozen=True)
class CooldownBlock:
    id: str
    title: str
    estimated_duration_minutes: int
    items: tuple[str, ...]

    block_type: ClassVar[BlockType] = BlockType.COOLDOWN


WorkoutBlock = Union[WarmupBlock, StrengthBlock, AccessoryBlock, ConditioningBlock, CooldownBlock]
