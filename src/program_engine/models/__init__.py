"""Data models for the program engine."""

from program_engine.models.blocks import (
    AccessoryBlock,
    AccessoryPrescription,
    ConditioningBlock,
    ConditioningWork,
    CooldownBlock,
    HyroxRaceSimulation,
    HyroxRaceStation,
    HyroxStationWork,
    SetPrescription,
    StrengthBlock,
    StrengthPrescription,
    WarmupBlock,
    WorkoutBlock,
)
from program_engine.models.enums import (
    AdaptationMode,
    BlockType,
    Difficulty,
    ExerciseTag,
    ExperienceLevel,
    Modality,
    MovementPattern,
    MuscleGroup,
    TimeAvailability,
    TrainingGoal,
    Units,
    WaveName,
)
from program_engine.models.exercise import ExerciseDefinition
from program_engine.models.plan import TrainingCycle, WorkoutPlanDay
from program_engine.models.profile import StrengthNumbers, TrainingProfile
from program_engine.models.readiness import ReadinessEntry
from program_engine.models.session import CompletedSet, PRRecord, WorkoutSessionLog

__all__ = [
    "AccessoryBlock",
    "AccessoryPrescription",
    "AdaptationMode",
    "BlockType",
    "CompletedSet",
    "ConditioningBlock",
    "ConditioningWork",
    "CooldownBlock",
    "Difficulty",
    "ExerciseDefinition",
    "ExerciseTag",
    "ExperienceLevel",
    "HyroxRaceSimulation",
    "HyroxRaceStation",
    "HyroxStationWork",
    "Modality",
    "MovementPattern",
    "MuscleGroup",
    "PRRecord",
    "ReadinessEntry",
    "SetPrescription",
    "StrengthBlock",
    "StrengthNumbers",
    "StrengthPrescription",
    "TimeAvailability",
    "TrainingCycle",
    "TrainingGoal",
    "TrainingProfile",
    "Units",
    "WarmupBlock",
    "WaveName",
    "WorkoutBlock",
    "WorkoutPlanDay",
    "WorkoutSessionLog",
]
