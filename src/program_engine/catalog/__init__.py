"""Exercise catalog: built-in exercise data and index-based lookup."""

from program_engine.catalog.catalog import ExerciseCatalog, default_catalog
from program_engine.catalog.exercises import EXERCISES

__all__ = ["EXERCISES", "ExerciseCatalog", "default_catalog"]
