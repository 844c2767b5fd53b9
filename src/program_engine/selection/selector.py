"""Exercise selector: pattern + equipment + difficulty -> one exercise.

Selection runs an ordered list of candidate providers and stops at the
first one that returns anything. Each provider is a pure function of
(catalog, pattern, equipment, difficulty) returning catalog indices, so the
fallback policy can be inspected and tested without selecting anything.
Ties are broken by rotating on the day index, never at random.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from program_engine.catalog.catalog import ExerciseCatalog, default_catalog
from program_engine.models.enums import Difficulty, ExerciseTag, MovementPattern
from program_engine.models.exercise import ExerciseDefinition

logger = logging.getLogger(__name__)

CandidateProvider = Callable[
    [ExerciseCatalog, MovementPattern, frozenset[str], Difficulty], tuple[int, ...]
]

_P = MovementPattern

# Patterns tried, in order, when nothing matches the requested pattern.
FALLBACK_PATTERNS: dict[MovementPattern, tuple[MovementPattern, ...]] = {
    _P.SQUAT: (_P.HINGE, _P.LUNGE),
    _P.HINGE: (_P.SQUAT, _P.LUNGE),
    _P.HORIZONTAL_PUSH: (_P.VERTICAL_PUSH,),
    _P.VERTICAL_PUSH: (_P.HORIZONTAL_PUSH,),
    _P.HORIZONTAL_PULL: (_P.VERTICAL_PULL, _P.HINGE),
    _P.VERTICAL_PULL: (_P.HORIZONTAL_PULL, _P.HINGE),
    _P.LUNGE: (_P.SQUAT, _P.HINGE),
    _P.CARRY: (_P.CORE,),
    _P.CORE: (_P.CARRY,),
    _P.UNILATERAL_LOWER: (_P.SQUAT, _P.LUNGE),
    _P.UNILATERAL_UPPER: (_P.HORIZONTAL_PUSH, _P.VERTICAL_PUSH),
    _P.LOCOMOTION: (_P.CONDITIONING,),
    _P.CONDITIONING: (_P.LOCOMOTION,),
}


def narrow_by_difficulty(
    catalog: ExerciseCatalog, indices: Sequence[int], difficulty: Difficulty
) -> tuple[int, ...]:
    """Keep exact-difficulty matches if there are any, else keep everything."""
    exact = tuple(i for i in indices if catalog.at(i).difficulty is difficulty)
    return exact if exact else tuple(indices)


def _strength_for_pattern(
    catalog: ExerciseCatalog,
    pattern: MovementPattern,
    equipment_ids: frozenset[str],
    difficulty: Difficulty,
) -> tuple[int, ...]:
    matches = catalog.indices(
        lambda ex: ex.pattern is pattern
        and ExerciseTag.STRENGTH in ex.tags
        and ex.is_permitted(equipment_ids)
    )
    return narrow_by_difficulty(catalog, matches, difficulty)


def exact_pattern_candidates(
    catalog: ExerciseCatalog,
    pattern: MovementPattern,
    equipment_ids: frozenset[str],
    difficulty: Difficulty,
) -> tuple[int, ...]:
    """Tier 1: strength exercises for the requested pattern."""
    return _strength_for_pattern(catalog, pattern, equipment_ids, difficulty)


def fallback_pattern_candidates(
    catalog: ExerciseCatalog,
    pattern: MovementPattern,
    equipment_ids: frozenset[str],
    difficulty: Difficulty,
) -> tuple[int, ...]:
    """Tier 2: the first related pattern that yields any candidate."""
    for fallback in FALLBACK_PATTERNS.get(pattern, ()):
        found = _strength_for_pattern(catalog, fallback, equipment_ids, difficulty)
        if found:
            return found
    return ()


def any_strength_candidates(
    catalog: ExerciseCatalog,
    pattern: MovementPattern,
    equipment_ids: frozenset[str],
    difficulty: Difficulty,
) -> tuple[int, ...]:
    """Tier 3: any strength exercise the equipment permits, pattern ignored."""
    matches = catalog.indices(
        lambda ex: ExerciseTag.STRENGTH in ex.tags and ex.is_permitted(equipment_ids)
    )
    return narrow_by_difficulty(catalog, matches, difficulty)


DEFAULT_PROVIDERS: tuple[CandidateProvider, ...] = (
    exact_pattern_candidates,
    fallback_pattern_candidates,
    any_strength_candidates,
)


def rotate_pick(candidates: Sequence[int], day_index: int) -> int:
    return candidates[day_index % len(candidates)]


def select_exercise(
    pattern: MovementPattern,
    equipment_ids: frozenset[str],
    difficulty: Difficulty,
    day_index: int,
    catalog: ExerciseCatalog | None = None,
    providers: Sequence[CandidateProvider] = DEFAULT_PROVIDERS,
) -> ExerciseDefinition | None:
    """Resolve a movement pattern into one concrete exercise.

    Args:
        pattern: Desired movement pattern.
        equipment_ids: Equipment the athlete owns.
        difficulty: Preferred difficulty tier (narrowing only, never excluding).
        day_index: Rotation key; the same index always picks the same exercise.
        catalog: Exercise catalog, defaults to the built-in one.
        providers: Candidate providers tried in order.

    Returns:
        The selected exercise, or None when no provider yields a candidate.
    """
    if catalog is None:
        catalog = default_catalog()
    equipment = frozenset(equipment_ids)
    for tier, provider in enumerate(providers, start=1):
        candidates = provider(catalog, pattern, equipment, difficulty)
        if candidates:
            chosen = catalog.at(rotate_pick(candidates, day_index))
            logger.debug(
                "Selected %s for %s (tier %d, %d candidates)",
                chosen.id, pattern.value, tier, len(candidates),
            )
            return chosen
    logger.debug("No exercise available for %s", pattern.value)
    return None
