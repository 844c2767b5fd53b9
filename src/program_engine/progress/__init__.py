"""Progress tracking: personal-record detection."""

from program_engine.progress.pr_detector import detect_new_prs

__all__ = ["detect_new_prs"]
