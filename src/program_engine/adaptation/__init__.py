"""Readiness-driven adaptation of generated days."""

from program_engine.adaptation.adjust import adjust_workout_for_today

__all__ = ["adjust_workout_for_today"]
