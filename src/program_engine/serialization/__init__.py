"""Serialization of plans and decoding of stored profile payloads."""

from program_engine.serialization.plan_json import (
    block_to_dict,
    cycle_to_dict,
    cycle_to_json_string,
    day_to_dict,
    pr_from_dict,
    pr_to_dict,
    profile_from_dict,
    readiness_from_dict,
    session_from_dict,
)

__all__ = [
    "block_to_dict",
    "cycle_to_dict",
    "cycle_to_json_string",
    "day_to_dict",
    "pr_from_dict",
    "pr_to_dict",
    "profile_from_dict",
    "readiness_from_dict",
    "session_from_dict",
]
