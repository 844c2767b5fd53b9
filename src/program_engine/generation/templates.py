"""Weekly focus templates and focus-token resolution.

Each goal has a seven-slot template of focus tokens. Exact tokens map to a
movement pattern directly; composite tokens rotate through four patterns
keyed by the day index so consecutive weeks train different lifts.
"""

from __future__ import annotations

from dataclasses import dataclass

from program_engine.models.enums import FocusToken, MovementPattern, TrainingGoal

_F = FocusToken
_P = MovementPattern

_HYBRID_WEEK: tuple[FocusToken, ...] = (
    _F.SQUAT,
    _F.UPPER_PUSH_PULL,
    _F.CONDITIONING,
    _F.HINGE,
    _F.MIXED_FULL_BODY,
    _F.CONDITIONING,
    _F.REST,
)

WEEKLY_TEMPLATES: dict[TrainingGoal, tuple[FocusToken, ...]] = {
    TrainingGoal.STRENGTH: (
        _F.SQUAT,
        _F.HINGE,
        _F.UPPER_PUSH_PULL,
        _F.SQUAT,
        _F.HINGE,
        _F.UPPER_PUSH_PULL,
        _F.REST,
    ),
    TrainingGoal.HYBRID: _HYBRID_WEEK,
    TrainingGoal.CONDITIONING: (_F.CONDITIONING,) * 6 + (_F.REST,),
    TrainingGoal.GENERAL: _HYBRID_WEEK,
    TrainingGoal.HYROX: _HYBRID_WEEK,
}

COMPOSITE_ROTATIONS: dict[FocusToken, tuple[MovementPattern, ...]] = {
    _F.UPPER_PUSH_PULL: (
        _P.HORIZONTAL_PUSH,
        _P.HORIZONTAL_PULL,
        _P.VERTICAL_PUSH,
        _P.VERTICAL_PULL,
    ),
    _F.MIXED_FULL_BODY: (
        _P.SQUAT,
        _P.HINGE,
        _P.HORIZONTAL_PUSH,
        _P.HORIZONTAL_PULL,
    ),
}

_EXACT_PATTERNS: dict[FocusToken, MovementPattern] = {
    _F.SQUAT: _P.SQUAT,
    _F.HINGE: _P.HINGE,
}


@dataclass(frozen=True)
class ResolvedFocus:
    """A template slot after resolution: a pattern, conditioning, or rest."""

    token: FocusToken
    pattern: MovementPattern | None = None

    @property
    def is_rest(self) -> bool:
        return self.token is FocusToken.REST

    @property
    def is_conditioning(self) -> bool:
        return self.token is FocusToken.CONDITIONING


def get_weekly_template(goal: TrainingGoal) -> tuple[FocusToken, ...]:
    return WEEKLY_TEMPLATES.get(goal, WEEKLY_TEMPLATES[TrainingGoal.HYBRID])


def resolve_focus(token: FocusToken, day_index: int) -> ResolvedFocus:
    """Resolve a focus token to a concrete pattern for *day_index*."""
    if token in _EXACT_PATTERNS:
        return ResolvedFocus(token=token, pattern=_EXACT_PATTERNS[token])
    rotation = COMPOSITE_ROTATIONS.get(token)
    if rotation is not None:
        return ResolvedFocus(token=token, pattern=rotation[day_index % len(rotation)])
    return ResolvedFocus(token=token)


def goal_for_focus(profile_goal: TrainingGoal, token: FocusToken) -> TrainingGoal:
    """The goal a templated day is generated under.

    Lower-body slots train as strength days, upper and full-body slots as
    hybrid days, conditioning slots as conditioning days. HYROX athletes keep
    their goal on conditioning slots so they get station work.
    """
    if token is FocusToken.CONDITIONING:
        if profile_goal is TrainingGoal.HYROX:
            return TrainingGoal.HYROX
        return TrainingGoal.CONDITIONING
    if token in (FocusToken.SQUAT, FocusToken.HINGE):
        return TrainingGoal.STRENGTH
    if token in (FocusToken.UPPER_PUSH_PULL, FocusToken.MIXED_FULL_BODY):
        return TrainingGoal.HYBRID
    return profile_goal
