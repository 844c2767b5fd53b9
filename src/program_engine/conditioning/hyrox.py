"""Equipment-conditional HYROX station templates.

The first template the athlete's equipment supports wins, in order: sled,
wall balls, machine intervals, then burpee broad jumps which need nothing.
"""

from __future__ import annotations

import dataclasses

from program_engine.conditioning.prescription import base_conditioning_minutes
from program_engine.math.rounding import round_half_up
from program_engine.models.blocks import HyroxStationWork
from program_engine.models.enums import (
    HYROX_BURPEE_METERS_PER_REP,
    HYROX_MACHINE_EQUIPMENT,
    HYROX_MACHINE_REST_SECONDS,
    HYROX_MACHINE_WORK_SECONDS,
    HYROX_SLED_EQUIPMENT,
    HYROX_SLED_METERS,
    HYROX_WALL_BALL_EQUIPMENT,
    HYROX_WALL_BALL_REPS_PER_MINUTE,
    HYROX_WAVE_MULTIPLIER,
    ConditioningDayType,
    HyroxStationKind,
    TimeAvailability,
    WaveName,
)


def hyrox_block_minutes(wave: WaveName, time_availability: TimeAvailability) -> int:
    base = base_conditioning_minutes(time_availability)
    return round_half_up(base * HYROX_WAVE_MULTIPLIER.get(wave, 1.0))


def get_hyrox_conditioning_template(
    equipment_ids: frozenset[str],
    day_type: ConditioningDayType,
    wave: WaveName,
    time_availability: TimeAvailability,
    zone: int = 3,
) -> HyroxStationWork:
    """Pick a HYROX station session the athlete can do with their equipment.

    Args:
        equipment_ids: Equipment the athlete owns.
        day_type: Conditioning role of the day (carried through as a note).
        wave: Intensity wave; scales total minutes (load 1.15, peak 1.25,
            deload 0.7).
        time_availability: Session length category (8/12/20 base minutes).
        zone: Target zone for the block.

    Returns:
        Unscaled HyroxStationWork; apply readiness with scale_hyrox_work.
    """
    minutes = hyrox_block_minutes(wave, time_availability)
    common = dict(zone=zone, duration_minutes=minutes, wave=wave, notes=day_type.value)

    if equipment_ids & HYROX_SLED_EQUIPMENT:
        return HyroxStationWork(
            kind=HyroxStationKind.SLED,
            station_name="Sled Push / Pull",
            push_meters=HYROX_SLED_METERS,
            pull_meters=HYROX_SLED_METERS,
            rounds=max(2, minutes // 3),
            **common,
        )

    if equipment_ids & HYROX_WALL_BALL_EQUIPMENT:
        return HyroxStationWork(
            kind=HyroxStationKind.WALL_BALLS,
            station_name="Wall Balls",
            reps=minutes * HYROX_WALL_BALL_REPS_PER_MINUTE,
            scheme="density",
            **common,
        )

    if equipment_ids & HYROX_MACHINE_EQUIPMENT:
        interval = HYROX_MACHINE_WORK_SECONDS + HYROX_MACHINE_REST_SECONDS
        return HyroxStationWork(
            kind=HyroxStationKind.MACHINE_INTERVALS,
            station_name="Row/Bike/Ski HYROX Intervals",
            work_seconds=HYROX_MACHINE_WORK_SECONDS,
            rest_seconds=HYROX_MACHINE_REST_SECONDS,
            rounds=(minutes * 60) // interval,
            **common,
        )

    return HyroxStationWork(
        kind=HyroxStationKind.BURPEE_BROAD_JUMP,
        station_name="Burpee Broad Jumps",
        meters_per_rep=HYROX_BURPEE_METERS_PER_REP,
        rounds=max(3, minutes // 2),
        **common,
    )


def scale_hyrox_work(work: HyroxStationWork, readiness_factor: float) -> HyroxStationWork:
    """Scale duration, rounds (at least 1) and reps by the readiness factor.

    Distances per round stay fixed; only how much work is done changes.
    """
    rounds = work.rounds
    if rounds is not None:
        rounds = max(1, round_half_up(rounds * readiness_factor))
    reps = work.reps
    if reps:
        reps = round_half_up(reps * readiness_factor)
    return dataclasses.replace(
        work,
        duration_minutes=round_half_up(work.duration_minutes * readiness_factor),
        rounds=rounds,
        reps=reps,
        readiness_factor=readiness_factor,
    )
