"""Exercise catalog: a flat arena of definitions plus an id -> index map.

Selection code works with integer indices into the arena and never copies
or mutates the definitions themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from functools import lru_cache

from program_engine.exceptions import CatalogError, UnknownExerciseError
from program_engine.models.enums import ExerciseTag
from program_engine.models.exercise import ExerciseDefinition

logger = logging.getLogger(__name__)


class ExerciseCatalog:
    """Read-only exercise library.

    Usage:
        catalog = ExerciseCatalog(EXERCISES)
        idx = catalog.index_of("back_squat")
        squat = catalog.at(idx)
    """

    def __init__(self, exercises: Iterable[ExerciseDefinition]) -> None:
        self._exercises: tuple[ExerciseDefinition, ...] = tuple(exercises)
        self._index: dict[str, int] = {}
        for i, exercise in enumerate(self._exercises):
            if exercise.id in self._index:
                raise CatalogError(f"Duplicate exercise id: {exercise.id!r}")
            self._index[exercise.id] = i
        logger.debug("Exercise catalog built with %d entries", len(self._exercises))

    def __len__(self) -> int:
        return len(self._exercises)

    def __iter__(self) -> Iterator[ExerciseDefinition]:
        return iter(self._exercises)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._index

    @property
    def exercises(self) -> tuple[ExerciseDefinition, ...]:
        return self._exercises

    def at(self, index: int) -> ExerciseDefinition:
        return self._exercises[index]

    def index_of(self, exercise_id: str) -> int | None:
        return self._index.get(exercise_id)

    def get(self, exercise_id: str) -> ExerciseDefinition | None:
        idx = self._index.get(exercise_id)
        return None if idx is None else self._exercises[idx]

    def by_id(self, exercise_id: str) -> ExerciseDefinition:
        """Look up an exercise, raising UnknownExerciseError when absent."""
        idx = self._index.get(exercise_id)
        if idx is None:
            raise UnknownExerciseError(exercise_id)
        return self._exercises[idx]

    def indices(self, predicate: Callable[[ExerciseDefinition], bool]) -> tuple[int, ...]:
        """Indices of every exercise matching *predicate*, in catalog order."""
        return tuple(i for i, ex in enumerate(self._exercises) if predicate(ex))

    def tagged(self, tag: ExerciseTag) -> tuple[ExerciseDefinition, ...]:
        return tuple(ex for ex in self._exercises if tag in ex.tags)


@lru_cache(maxsize=1)
def default_catalog() -> ExerciseCatalog:
    """The built-in catalog, built once per process."""
    from program_engine.catalog.exercises import EXERCISES

    return ExerciseCatalog(EXERCISES)
