"""Custom exception hierarchy for the program engine.

Generators never raise for athlete input; these errors are only raised at
the boundaries, when building a catalog or decoding external data.
"""

from __future__ import annotations


class ProgramEngineError(Exception):
    """Base exception for all program_engine errors."""


class CatalogError(ProgramEngineError):
    """The exercise catalog is malformed (duplicate ids, etc.)."""


class UnknownExerciseError(CatalogError, KeyError):
    """An exercise id was looked up that the catalog does not contain."""

    def __init__(self, exercise_id: str) -> None:
        super().__init__(exercise_id)
        self.exercise_id = exercise_id

    def __str__(self) -> str:
        return f"Unknown exercise id: {self.exercise_id!r}"


class ProfileError(ProgramEngineError):
    """Profile, readiness or session data could not be decoded."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
