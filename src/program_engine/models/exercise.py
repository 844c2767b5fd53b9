"""Exercise definition: one immutable entry of the exercise catalog."""

from __future__ import annotations

from dataclasses import dataclass

from program_engine.models.enums import (
    Difficulty,
    ExerciseTag,
    Modality,
    MovementPattern,
    MuscleGroup,
)


@dataclass(frozen=True)
class ExerciseDefinition:
    """Static description of a single exercise.

    ``equipment_ids`` lists alternatives: the exercise can be performed when
    the athlete owns any one of them. An empty set means no equipment needed.
    """

    id: str
    name: str
    pattern: MovementPattern
    modality: Modality
    difficulty: Difficulty
    equipment_ids: frozenset[str] = frozenset()
    tags: frozenset[ExerciseTag] = frozenset()
    primary_muscles: tuple[MuscleGroup, ...] = ()
    secondary_muscles: tuple[MuscleGroup, ...] = ()
    description: str = ""
    is_unilateral: bool = False

    def is_permitted(self, equipment_ids: frozenset[str]) -> bool:
        """True when the athlete's equipment allows this exercise."""
        return not self.equipment_ids or bool(self.equipment_ids & equipment_ids)
