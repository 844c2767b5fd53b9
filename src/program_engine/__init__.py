"""Deterministic periodized training program engine."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
