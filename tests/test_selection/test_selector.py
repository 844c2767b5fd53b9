"""Tests for the exercise selector's tiered fallback and rotation."""

from __future__ import annotations

from program_engine.catalog.catalog import ExerciseCatalog
from program_engine.models.enums import Difficulty, MovementPattern
from program_engine.selection.selector import (
    FALLBACK_PATTERNS,
    any_strength_candidates,
    exact_pattern_candidates,
    fallback_pattern_candidates,
    narrow_by_difficulty,
    select_exercise,
)

_BARBELL = frozenset({"barbell"})
_NONE: frozenset[str] = frozenset()


class TestExactPattern:
    def test_barbell_intermediate_squat(self, catalog) -> None:
        ex = select_exercise(MovementPattern.SQUAT, _BARBELL, Difficulty.INTERMEDIATE, 0, catalog)
        assert ex is not None
        assert ex.id == "back_squat"

    def test_difficulty_narrowing_prefers_exact_tier(self, catalog) -> None:
        ex = select_exercise(MovementPattern.SQUAT, _BARBELL, Difficulty.ADVANCED, 0, catalog)
        assert ex is not None
        assert ex.id == "front_squat"

    def test_rotation_by_day_index(self, catalog) -> None:
        picks = [
            select_exercise(MovementPattern.HINGE, _BARBELL, Difficulty.INTERMEDIATE, d, catalog).id
            for d in range(4)
        ]
        assert picks == ["deadlift", "rdl", "deadlift", "rdl"]

    def test_bodyweight_beginner_push(self, catalog) -> None:
        ex = select_exercise(
            MovementPattern.HORIZONTAL_PUSH, _NONE, Difficulty.BEGINNER, 5, catalog
        )
        assert ex is not None
        assert ex.id == "push_up"

    def test_narrowing_keeps_everything_when_no_exact_tier(self, catalog) -> None:
        # Only advanced dips are available without equipment.
        ex = select_exercise(MovementPattern.VERTICAL_PUSH, _NONE, Difficulty.BEGINNER, 0, catalog)
        assert ex is not None
        assert ex.id == "dips"


class TestFallbackTiers:
    def test_squat_without_equipment_falls_back_to_lunge(self, catalog) -> None:
        assert exact_pattern_candidates(
            catalog, MovementPattern.SQUAT, _NONE, Difficulty.BEGINNER
        ) == ()
        ex = select_exercise(MovementPattern.SQUAT, _NONE, Difficulty.BEGINNER, 0, catalog)
        assert ex is not None
        assert ex.id == "reverse_lunge"

    def test_fallback_candidates_follow_pattern_order(self, catalog) -> None:
        found = fallback_pattern_candidates(
            catalog, MovementPattern.SQUAT, _NONE, Difficulty.BEGINNER
        )
        assert [catalog.at(i).pattern for i in found] == [MovementPattern.LUNGE]

    def test_any_strength_tier(self, catalog) -> None:
        # No strength-tagged carry or core exercise exists without equipment.
        assert exact_pattern_candidates(
            catalog, MovementPattern.CARRY, _NONE, Difficulty.BEGINNER
        ) == ()
        assert fallback_pattern_candidates(
            catalog, MovementPattern.CARRY, _NONE, Difficulty.BEGINNER
        ) == ()
        tier3 = any_strength_candidates(catalog, MovementPattern.CARRY, _NONE, Difficulty.BEGINNER)
        assert [catalog.at(i).id for i in tier3] == ["push_up", "inverted_row", "reverse_lunge"]
        ex = select_exercise(MovementPattern.CARRY, _NONE, Difficulty.BEGINNER, 1, catalog)
        assert ex.id == "inverted_row"

    def test_empty_catalog_returns_none(self, empty_catalog) -> None:
        assert select_exercise(
            MovementPattern.SQUAT, _BARBELL, Difficulty.BEGINNER, 0, empty_catalog
        ) is None

    def test_fallback_table_is_symmetric_for_conditioning(self) -> None:
        assert FALLBACK_PATTERNS[MovementPattern.LOCOMOTION] == (MovementPattern.CONDITIONING,)
        assert FALLBACK_PATTERNS[MovementPattern.CONDITIONING] == (MovementPattern.LOCOMOTION,)

    def test_custom_providers(self, catalog) -> None:
        def only_push_up(cat: ExerciseCatalog, *_args) -> tuple[int, ...]:
            return (cat.index_of("push_up"),)

        ex = select_exercise(
            MovementPattern.HINGE, _BARBELL, Difficulty.ADVANCED, 3, catalog,
            providers=(only_push_up,),
        )
        assert ex.id == "push_up"


class TestDeterminism:
    def test_same_inputs_same_exercise(self, catalog) -> None:
        for day in range(10):
            args = (MovementPattern.HORIZONTAL_PUSH, _BARBELL, Difficulty.INTERMEDIATE, day)
            assert select_exercise(*args, catalog) == select_exercise(*args, catalog)

    def test_default_catalog_used_when_omitted(self, catalog) -> None:
        assert select_exercise(
            MovementPattern.SQUAT, _BARBELL, Difficulty.INTERMEDIATE, 0
        ) == select_exercise(MovementPattern.SQUAT, _BARBELL, Difficulty.INTERMEDIATE, 0, catalog)

    def test_narrow_by_difficulty(self, catalog) -> None:
        squat = catalog.index_of("back_squat")
        front = catalog.index_of("front_squat")
        assert narrow_by_difficulty(catalog, (squat, front), Difficulty.ADVANCED) == (front,)
        assert narrow_by_difficulty(catalog, (squat, front), Difficulty.BEGINNER) == (squat, front)
