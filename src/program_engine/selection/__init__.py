"""Deterministic exercise selection."""

from program_engine.selection.selector import (
    DEFAULT_PROVIDERS,
    FALLBACK_PATTERNS,
    select_exercise,
)

__all__ = ["DEFAULT_PROVIDERS", "FALLBACK_PATTERNS", "select_exercise"]
