"""Plan generation: daily workouts, microcycles and training cycles."""

from program_engine.generation.cycle import generate_training_cycle
from program_engine.generation.daily import construct_workout_blocks, generate_daily_workout
from program_engine.generation.microcycle import generate_microcycle
from program_engine.generation.templates import WEEKLY_TEMPLATES, resolve_focus

__all__ = [
    "WEEKLY_TEMPLATES",
    "construct_workout_blocks",
    "generate_daily_workout",
    "generate_microcycle",
    "generate_training_cycle",
    "resolve_focus",
]
