"""Full HYROX race simulation.

Eight functional stations, each preceded by a 1 km run. Every distance,
load and rep count scales with the readiness factor. Stations whose
equipment is missing are swapped for a substitute the athlete can do.
"""

from __future__ import annotations

from program_engine.math.rounding import round_half_up
from program_engine.models.blocks import HyroxRaceSimulation, HyroxRaceStation
from program_engine.models.enums import (
    HYROX_RACE_MINUTES,
    HYROX_SLED_EQUIPMENT,
    HYROX_WALL_BALL_KG,
)

RACE_TITLE = "HYROX Race Simulation"


def _scaled(value: float, factor: float) -> int:
    return round_half_up(value * factor)


def _run(factor: float) -> HyroxRaceStation:
    return HyroxRaceStation(
        name="Run",
        is_run=True,
        exercise_id="treadmill_run",
        distance_meters=_scaled(1000, factor),
    )


def _stations(equipment_ids: frozenset[str], f: float) -> tuple[HyroxRaceStation, ...]:
    has_sled = bool(equipment_ids & HYROX_SLED_EQUIPMENT)
    has_ski = "ski_erg" in equipment_ids
    has_rower = "rower" in equipment_ids

    return (
        HyroxRaceStation(
            name="SkiErg" if has_ski else "Kettlebell Swing",
            exercise_id="ski_erg_intervals" if has_ski else "kb_swing",
            distance_meters=_scaled(1000, f),
            is_substitute=not has_ski,
        ),
        HyroxRaceStation(
            name="Sled Push" if has_sled else "Heavy KB March",
            exercise_id="sled_push" if has_sled else "kb_farmers_carry",
            distance_meters=_scaled(50, f),
            load_kg=_scaled(150, f) if has_sled else None,
            is_substitute=not has_sled,
        ),
        HyroxRaceStation(
            name="Sled Pull" if has_sled else "Band-Resisted Row Steps",
            exercise_id="sled_pull" if has_sled else None,
            distance_meters=_scaled(50, f),
            load_kg=_scaled(103, f) if has_sled else None,
            is_substitute=not has_sled,
        ),
        HyroxRaceStation(
            name="Burpee Broad Jumps",
            exercise_id="burpee_broad_jump",
            distance_meters=_scaled(80, f),
        ),
        HyroxRaceStation(
            name="Row" if has_rower else "Burpees",
            exercise_id="rower_intervals" if has_rower else None,
            distance_meters=_scaled(1000, f),
            is_substitute=not has_rower,
        ),
        HyroxRaceStation(
            name="Farmers Carry",
            exercise_id="kb_farmers_carry",
            distance_meters=_scaled(200, f),
            load_kg=2 * _scaled(24, f),
        ),
        HyroxRaceStation(
            name="Sandbag Lunges",
            exercise_id="sandbag_lunge",
            distance_meters=_scaled(100, f),
            load_kg=_scaled(20, f),
        ),
        HyroxRaceStation(
            name="Wall Balls",
            exercise_id="wall_ball",
            reps=_scaled(90, f),
            load_kg=HYROX_WALL_BALL_KG,
        ),
    )


def get_hyrox_race_simulation(
    equipment_ids: frozenset[str],
    readiness_factor: float = 1.0,
    zone: int = 4,
) -> HyroxRaceSimulation:
    """Build the run/station sequence for a full race rehearsal.

    Args:
        equipment_ids: Equipment the athlete owns.
        readiness_factor: Multiplier from the readiness scaler.
        zone: Target zone for the whole effort.

    Returns:
        HyroxRaceSimulation with 16 legs alternating run and station.
    """
    legs: list[HyroxRaceStation] = []
    for station in _stations(frozenset(equipment_ids), readiness_factor):
        legs.append(_run(readiness_factor))
        legs.append(station)

    return HyroxRaceSimulation(
        stations=tuple(legs),
        duration_minutes=_scaled(HYROX_RACE_MINUTES, readiness_factor),
        readiness_factor=readiness_factor,
        zone=zone,
    )
