"""JSON serialization for plans, records and profile input.

Plans are exported with camelCase keys, the shape the app's plan store
persists. Profile, readiness and session payloads are decoded from the same
shape. All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from collections.abc import Callable
from datetime import date, datetime
from typing import Any

from program_engine.exceptions import ProfileError
from program_engine.models.blocks import (
    AccessoryBlock,
    ConditioningBlock,
    ConditioningWork,
    CooldownBlock,
    HyroxRaceSimulation,
    HyroxStationWork,
    SetPrescription,
    StrengthBlock,
    WarmupBlock,
    WorkoutBlock,
)
from program_engine.models.enums import (
    AdaptationMode,
    ExperienceLevel,
    TimeAvailability,
    TrainingGoal,
    Units,
)
from program_engine.models.plan import TrainingCycle, WorkoutPlanDay
from program_engine.models.profile import StrengthNumbers, TrainingProfile
from program_engine.models.readiness import ReadinessEntry
from program_engine.models.session import CompletedSet, PRRecord, WorkoutSessionLog

# Profile strength-number keys -> StrengthNumbers fields.
_STRENGTH_KEYS = {
    "squat1RM": "squat_1rm",
    "bench1RM": "bench_1rm",
    "deadlift1RM": "deadlift_1rm",
    "press1RM": "press_1rm",
}


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


def _drop_none(d: dict) -> dict:
    return {k: v for k, v in d.items() if v is not None}


def _set_to_dict(s: SetPrescription) -> dict:
    return _drop_none({
        "targetReps": s.target_reps,
        "targetRpe": s.target_rpe,
        "targetPercent1RM": s.target_percent_1rm,
        "targetDurationSeconds": s.target_duration_seconds,
    })


def _conditioning_to_dict(work: ConditioningWork | HyroxStationWork | HyroxRaceSimulation) -> dict:
    if isinstance(work, HyroxRaceSimulation):
        return {
            "kind": "hyrox_race",
            "zone": work.zone,
            "durationMinutes": work.duration_minutes,
            "readinessFactor": work.readiness_factor,
            "stations": [
                _drop_none({
                    "name": s.name,
                    "isRun": s.is_run,
                    "exerciseId": s.exercise_id,
                    "distanceMeters": s.distance_meters,
                    "reps": s.reps,
                    "loadKg": s.load_kg,
                    "isSubstitute": s.is_substitute,
                })
                for s in work.stations
            ],
            "notes": work.notes,
        }
    if isinstance(work, HyroxStationWork):
        return _drop_none({
            "kind": f"hyrox_{work.kind.value}",
            "station": work.station_name,
            "zone": work.zone,
            "targetZone": f"Z{work.zone}",
            "durationMinutes": work.duration_minutes,
            "wave": work.wave.value,
            "rounds": work.rounds,
            "reps": work.reps,
            "pushMeters": work.push_meters,
            "pullMeters": work.pull_meters,
            "metersPerRep": work.meters_per_rep,
            "workSeconds": work.work_seconds,
            "restSeconds": work.rest_seconds,
            "scheme": work.scheme or None,
            "readinessFactor": work.readiness_factor,
            "notes": work.notes,
        })
    return _drop_none({
        "kind": "standard",
        "mode": work.style.value,
        "zone": work.zone,
        "targetZone": work.target_zone,
        "durationMinutes": work.duration_minutes,
        "exerciseId": work.exercise_id,
        "wave": work.wave.value,
        "dayType": work.day_type.value,
        "workSeconds": work.work_seconds,
        "restSeconds": work.rest_seconds,
        "rounds": work.rounds,
        "targetPace": work.target_pace,
        "readinessFactor": work.readiness_factor,
        "notes": work.notes,
    })


def block_to_dict(block: WorkoutBlock) -> dict:
    """Convert one block to a dict with exactly one payload key for its type."""
    data: dict[str, Any] = {
        "id": block.id,
        "type": block.block_type.value,
        "title": block.title,
        "estimatedDurationMinutes": block.estimated_duration_minutes,
    }
    if isinstance(block, WarmupBlock):
        data["warmupItems"] = list(block.items)
        data["exerciseIds"] = list(block.exercise_ids)
    elif isinstance(block, StrengthBlock):
        main = block.main
        data["strengthMain"] = None if main is None else _drop_none({
            "exerciseId": main.exercise_id,
            "name": main.exercise_name,
            "pattern": main.pattern.value,
            "wave": main.wave.value,
            "sets": [_set_to_dict(s) for s in main.sets],
            "oneRepMax": main.one_rep_max,
            "prescribedLoad": main.prescribed_load,
        })
    elif isinstance(block, AccessoryBlock):
        data["accessory"] = [
            {
                "exerciseId": ex.exercise_id,
                "name": ex.exercise_name,
                "templateTag": ex.template_tag,
                "sets": [_set_to_dict(s) for s in ex.sets],
            }
            for ex in block.exercises
        ]
    elif isinstance(block, ConditioningBlock):
        data["conditioning"] = _conditioning_to_dict(block.work)
    elif isinstance(block, CooldownBlock):
        data["cooldownItems"] = list(block.items)
    return data


def day_to_dict(day: WorkoutPlanDay) -> dict:
    return {
        "id": day.id,
        "userId": day.user_id,
        "date": day.date.isoformat(),
        "dayIndex": day.day_index,
        "focusTags": list(day.focus_tags),
        "blocks": [block_to_dict(b) for b in day.blocks],
        "estimatedDurationMinutes": day.estimated_duration_minutes,
        "adjustedForReadiness": day.adjusted_for_readiness,
        "createdAt": day.created_at.isoformat(),
    }


def cycle_to_dict(cycle: TrainingCycle) -> dict:
    return {
        "id": cycle.id,
        "startDate": cycle.start_date.isoformat(),
        "endDate": cycle.end_date.isoformat(),
        "weeks": [[day_to_dict(d) for d in week] for week in cycle.weeks],
    }


def pr_to_dict(pr: PRRecord) -> dict:
    return {
        "id": pr.id,
        "userId": pr.user_id,
        "exerciseId": pr.exercise_id,
        "date": pr.date.isoformat(),
        "estimated1RM": pr.estimated_1rm,
        "changeFromPrevious": pr.change_from_previous,
    }


def cycle_to_json_string(cycle: TrainingCycle, indent: int = 2) -> str:
    """Serialize a training cycle to a JSON string."""
    return json.dumps(cycle_to_dict(cycle), indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------


def _enum(enum_cls: type, value: Any, field: str, default: Any) -> Any:
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise ProfileError(f"Invalid {field}: {value!r}", field=field) from exc


def _date(value: Any, field: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise ProfileError(f"Invalid {field}: {value!r}", field=field) from exc


def _datetime(value: Any, field: str) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError as exc:
        raise ProfileError(f"Invalid {field}: {value!r}", field=field) from exc


def _optional(value: Any, cast: Callable[[Any], Any]) -> Any:
    return None if value is None else cast(value)


def profile_from_dict(data: dict) -> TrainingProfile:
    """Decode a stored user-preferences payload into a TrainingProfile.

    Raises:
        ProfileError: When a field has an unknown enum value or wrong type.
    """
    if not isinstance(data, dict):
        raise ProfileError("Profile must be a JSON object")

    numbers = data.get("strengthNumbers")
    strength_numbers = None
    if numbers:
        try:
            strength_numbers = StrengthNumbers(**{
                attr: float(numbers[key])
                for key, attr in _STRENGTH_KEYS.items()
                if numbers.get(key) is not None
            })
        except (TypeError, ValueError) as exc:
            raise ProfileError("Invalid strengthNumbers", field="strengthNumbers") from exc

    try:
        days = int(data.get("trainingDaysPerWeek", 4))
    except (TypeError, ValueError) as exc:
        raise ProfileError("Invalid trainingDaysPerWeek", field="trainingDaysPerWeek") from exc

    return TrainingProfile(
        goal=_enum(TrainingGoal, data.get("goal"), "goal", TrainingGoal.GENERAL),
        experience_level=_enum(
            ExperienceLevel, data.get("experienceLevel"), "experienceLevel",
            ExperienceLevel.BEGINNER,
        ),
        training_days_per_week=days,
        equipment_ids=frozenset(data.get("equipmentIds") or ()),
        time_availability=_enum(
            TimeAvailability, data.get("timeAvailability"), "timeAvailability",
            TimeAvailability.STANDARD,
        ),
        adaptation_mode=_enum(
            AdaptationMode, data.get("adaptationMode"), "adaptationMode",
            AdaptationMode.AUTOMATIC,
        ),
        readiness_scaling_enabled=bool(data.get("readinessScalingEnabled", True)),
        units=_enum(Units, data.get("units"), "units", Units.METRIC),
        strength_numbers=strength_numbers,
        user_id=str(data.get("userId", "local-user")),
    )


def readiness_from_dict(data: dict) -> ReadinessEntry:
    """Decode a readiness check-in; the score is derived when absent."""
    try:
        sleep = int(data["sleepQuality"])
        energy = int(data["energy"])
        soreness = int(data["soreness"])
        stress = int(data["stress"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ProfileError(f"Invalid readiness entry: {exc}", field="readiness") from exc

    availability = _enum(
        TimeAvailability, data.get("timeAvailability"), "timeAvailability",
        TimeAvailability.STANDARD,
    )
    entry_date = _date(data["date"], "date") if data.get("date") else None
    user_id = str(data.get("userId", "local-user"))

    if data.get("readinessScore") is None:
        return ReadinessEntry.from_inputs(
            sleep, energy, soreness, stress, availability, entry_date, user_id
        )
    try:
        score = int(data["readinessScore"])
    except (TypeError, ValueError) as exc:
        raise ProfileError(
            f"Invalid readinessScore: {data['readinessScore']!r}", field="readinessScore"
        ) from exc
    return ReadinessEntry(
        sleep_quality=sleep,
        energy=energy,
        soreness=soreness,
        stress=stress,
        time_availability=availability,
        readiness_score=score,
        entry_date=entry_date,
        user_id=user_id,
    )


def session_from_dict(data: dict) -> WorkoutSessionLog:
    try:
        sets = tuple(
            CompletedSet(
                exercise_id=str(s["exerciseId"]),
                block_id=str(s.get("blockId", "")),
                set_index=int(s.get("setIndex", i)),
                weight=_optional(s.get("weight"), float),
                reps=_optional(s.get("reps"), int),
                rpe=_optional(s.get("rpe"), float),
                duration_seconds=_optional(s.get("durationSeconds"), int),
                completed_at=_datetime(s.get("completedAt"), "completedAt"),
            )
            for i, s in enumerate(data.get("completedSets") or ())
        )
        return WorkoutSessionLog(
            id=str(data["id"]),
            user_id=str(data.get("userId", "local-user")),
            date=_date(data["date"], "date"),
            completed_sets=sets,
            plan_day_id=data.get("planDayId"),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ProfileError(f"Invalid session log: {exc}", field="session") from exc


def pr_from_dict(data: dict) -> PRRecord:
    try:
        return PRRecord(
            id=str(data["id"]),
            user_id=str(data.get("userId", "local-user")),
            exercise_id=str(data["exerciseId"]),
            date=_date(data["date"], "date"),
            estimated_1rm=float(data["estimated1RM"]),
            change_from_previous=_optional(data.get("changeFromPrevious"), float),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ProfileError(f"Invalid PR record: {exc}", field="pr") from exc
