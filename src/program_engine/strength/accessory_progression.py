"""Accessory volume and the tag templates that pick accessory work.

Each template entry names either a capability tag or a movement pattern;
an exercise satisfies the entry when it carries that tag or trains that
pattern.
"""

from __future__ import annotations

from program_engine.math.waves import RepScheme
from program_engine.models.enums import (
    ACCESSORY_VOLUME,
    MovementPattern,
    WaveName,
)
from program_engine.models.exercise import ExerciseDefinition

_P = MovementPattern

ACCESSORY_TEMPLATES: dict[MovementPattern, tuple[str, ...]] = {
    _P.SQUAT: ("unilateral_lower", "posterior_chain", "core"),
    _P.HINGE: ("posterior_chain", "unilateral_lower", "core"),
    _P.HORIZONTAL_PUSH: ("horizontal_pull", "triceps", "scapular_stability"),
    _P.HORIZONTAL_PULL: ("horizontal_push", "biceps", "core_anti_rotation"),
    _P.VERTICAL_PUSH: ("vertical_pull", "triceps", "scapular_stability"),
    _P.VERTICAL_PULL: ("vertical_push", "biceps", "core"),
}
DEFAULT_ACCESSORY_TEMPLATE: tuple[str, ...] = ("core", "posterior_chain")


def get_accessory_template(pattern: MovementPattern | None) -> tuple[str, ...]:
    if pattern is None:
        return DEFAULT_ACCESSORY_TEMPLATE
    return ACCESSORY_TEMPLATES.get(pattern, DEFAULT_ACCESSORY_TEMPLATE)


def matches_template_entry(exercise: ExerciseDefinition, entry: str) -> bool:
    return exercise.pattern.value == entry or any(t.value == entry for t in exercise.tags)


def get_accessory_volume(wave: WaveName) -> RepScheme:
    """Accessory sets x reps for the wave: more sets on load/peak, lighter on deload."""
    sets, reps = ACCESSORY_VOLUME[wave]
    return RepScheme(sets=sets, reps=reps)
