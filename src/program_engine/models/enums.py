"""Enumerations and programming constants for the program engine.

Enum values are the wire names used when plans are serialized, so they are
plain strings rather than ordinals.
"""

from enum import Enum


class MovementPattern(Enum):
    """Fundamental movement pattern an exercise trains."""

    SQUAT = "squat"
    HINGE = "hinge"
    HORIZONTAL_PUSH = "horizontal_push"
    HORIZONTAL_PULL = "horizontal_pull"
    VERTICAL_PUSH = "vertical_push"
    VERTICAL_PULL = "vertical_pull"
    CARRY = "carry"
    CORE = "core"
    LUNGE = "lunge"
    UNILATERAL_LOWER = "unilateral_lower"
    UNILATERAL_UPPER = "unilateral_upper"
    LOCOMOTION = "locomotion"
    CONDITIONING = "conditioning"


class Modality(Enum):
    """Equipment modality an exercise is performed with."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    KETTLEBELL = "kettlebell"
    MACHINE = "machine"
    CABLE = "cable"
    BODYWEIGHT = "bodyweight"
    CARDIO_MACHINE = "cardio_machine"
    SLED = "sled"
    BAND = "band"
    OTHER = "other"


class Difficulty(Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# Experience level and exercise difficulty share the same three tiers.
ExperienceLevel = Difficulty


class ExerciseTag(Enum):
    """Capability tags used by the selector and accessory templates."""

    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    POWER = "power"
    CONDITIONING = "conditioning"
    HYROX = "hyrox"
    WARMUP = "warmup"
    PRIMER = "primer"
    FINISHER = "finisher"
    UNILATERAL = "unilateral"
    BILATERAL = "bilateral"
    POSTERIOR_CHAIN = "posterior_chain"
    ANTERIOR_CHAIN = "anterior_chain"
    UPPER = "upper"
    LOWER = "lower"
    FULL_BODY = "full_body"
    CORE = "core"
    CORE_ANTI_EXTENSION = "core_anti_extension"
    CORE_ANTI_ROTATION = "core_anti_rotation"
    CARRY = "carry"
    GRIP = "grip"
    UNILATERAL_LOWER = "unilateral_lower"
    UNILATERAL_UPPER = "unilateral_upper"
    LOCOMOTION = "locomotion"
    HORIZONTAL_PUSH = "horizontal_push"
    HORIZONTAL_PULL = "horizontal_pull"
    VERTICAL_PUSH = "vertical_push"
    VERTICAL_PULL = "vertical_pull"
    TRICEPS = "triceps"
    BICEPS = "biceps"
    SCAPULAR_STABILITY = "scapular_stability"


class MuscleGroup(Enum):
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    FULL_BODY = "full_body"


class TrainingGoal(Enum):
    STRENGTH = "strength"
    CONDITIONING = "conditioning"
    HYBRID = "hybrid"
    GENERAL = "general"
    HYROX = "hyrox"


class TimeAvailability(Enum):
    """Session length category chosen by the athlete."""

    SHORT = "short"
    STANDARD = "standard"
    FULL = "full"


class AdaptationMode(Enum):
    """How aggressively readiness adjusts the planned session."""

    CONSERVATIVE = "conservative"
    AUTOMATIC = "automatic"
    AGGRESSIVE = "aggressive"


class Units(Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class WaveName(Enum):
    """Phases of the repeating four-day intensity wave."""

    BASE = "base"
    LOAD = "load"
    PEAK = "peak"
    DELOAD = "deload"


class BlockType(Enum):
    WARMUP = "warmup"
    STRENGTH = "strength"
    ACCESSORY = "accessory"
    CONDITIONING = "conditioning"
    COOLDOWN = "cooldown"


class ConditioningDayType(Enum):
    """Role of a weekday in the conditioning rotation."""

    STRENGTH = "strength_day"
    MIXED = "mixed"
    ENGINE = "engine"
    REST = "rest"


class ConditioningStyle(Enum):
    Z2 = "z2"
    TEMPO = "tempo"
    INTERVALS = "intervals"
    RACE_SIMULATION = "race_simulation"


class HyroxStationKind(Enum):
    """Equipment-conditional HYROX conditioning templates."""

    SLED = "sled"
    WALL_BALLS = "wall_balls"
    MACHINE_INTERVALS = "machine_intervals"
    BURPEE_BROAD_JUMP = "burpee_broad_jump"


class FocusToken(Enum):
    """Weekly template slot contents."""

    SQUAT = "squat"
    HINGE = "hinge"
    UPPER_PUSH_PULL = "upper_push_pull"
    MIXED_FULL_BODY = "mixed_full_body"
    CONDITIONING = "conditioning"
    REST = "rest"


# ---------------------------------------------------------------------------
# Intensity wave: day_index % 4 -> (wave, target RPE, fraction of 1RM)
# ---------------------------------------------------------------------------
WAVE_PERIOD = 4
WAVE_TABLE: tuple[tuple[WaveName, int, float], ...] = (
    (WaveName.BASE, 7, 0.70),
    (WaveName.LOAD, 8, 0.75),
    (WaveName.PEAK, 9, 0.80),
    (WaveName.DELOAD, 6, 0.60),
)

# (sets, reps) per experience tier and wave. Deload always drops sets and raises reps.
REP_SCHEMES: dict[Difficulty, dict[WaveName, tuple[int, int]]] = {
    Difficulty.ADVANCED: {
        WaveName.BASE: (4, 6),
        WaveName.LOAD: (5, 5),
        WaveName.PEAK: (6, 3),
        WaveName.DELOAD: (3, 8),
    },
    Difficulty.INTERMEDIATE: {
        WaveName.BASE: (3, 8),
        WaveName.LOAD: (4, 6),
        WaveName.PEAK: (5, 5),
        WaveName.DELOAD: (2, 10),
    },
    Difficulty.BEGINNER: {
        WaveName.BASE: (3, 10),
        WaveName.LOAD: (3, 10),
        WaveName.PEAK: (3, 8),
        WaveName.DELOAD: (2, 12),
    },
}

# Accessory volume per wave: (sets, reps)
ACCESSORY_VOLUME: dict[WaveName, tuple[int, int]] = {
    WaveName.BASE: (2, 10),
    WaveName.LOAD: (3, 10),
    WaveName.PEAK: (4, 8),
    WaveName.DELOAD: (2, 12),
}
ACCESSORY_RPE = 7
ACCESSORY_MINUTES_PER_EXERCISE = 10

# ---------------------------------------------------------------------------
# Block durations (minutes)
# ---------------------------------------------------------------------------
WARMUP_BASE_MINUTES = 5
WARMUP_MINUTES_PER_ITEM = 2
WARMUP_MAX_ITEMS = 3
STRENGTH_BASE_MINUTES = 25
STRENGTH_MINUTES_PER_SET = 2
COOLDOWN_MINUTES = 5
COOLDOWN_ITEMS: tuple[str, ...] = (
    "3–5 minutes easy movement",
    "Light stretch: quads, hamstrings, glutes",
)

# Used when a block is absent from the day but its slot still counts.
DEFAULT_BLOCK_MINUTES: dict[BlockType, int] = {
    BlockType.WARMUP: 5,
    BlockType.STRENGTH: 25,
    BlockType.ACCESSORY: 15,
    BlockType.CONDITIONING: 20,
    BlockType.COOLDOWN: 5,
}

# ---------------------------------------------------------------------------
# Conditioning
# ---------------------------------------------------------------------------
CONDITIONING_WEEK: tuple[ConditioningDayType, ...] = (
    ConditioningDayType.STRENGTH,
    ConditioningDayType.MIXED,
    ConditioningDayType.ENGINE,
    ConditioningDayType.STRENGTH,
    ConditioningDayType.MIXED,
    ConditioningDayType.ENGINE,
    ConditioningDayType.REST,
)
CONDITIONING_BASE_MINUTES: dict[TimeAvailability, int] = {
    TimeAvailability.SHORT: 8,
    TimeAvailability.STANDARD: 12,
    TimeAvailability.FULL: 20,
}
MIXED_DAY_EXTRA_MINUTES = 5
ENGINE_DAY_EXTRA_MINUTES = 10
WAVE_CONDITIONING_EXTRA_MINUTES: dict[WaveName, int] = {
    WaveName.LOAD: 3,
    WaveName.PEAK: 6,
}
DELOAD_CONDITIONING_FRACTION = 0.6

# Work/rest seconds for generic interval sessions by time availability.
INTERVAL_WORK_REST_SECONDS: dict[TimeAvailability, tuple[int, int]] = {
    TimeAvailability.SHORT: (40, 20),
    TimeAvailability.STANDARD: (60, 60),
    TimeAvailability.FULL: (120, 90),
}
FALLBACK_CONDITIONING_EXERCISE_ID = "kb_swing"

HYROX_WAVE_MULTIPLIER: dict[WaveName, float] = {
    WaveName.BASE: 1.0,
    WaveName.LOAD: 1.15,
    WaveName.PEAK: 1.25,
    WaveName.DELOAD: 0.7,
}
HYROX_SLED_EQUIPMENT = frozenset({"sled", "sled_push"})
HYROX_WALL_BALL_EQUIPMENT = frozenset({"medicine_ball"})
HYROX_MACHINE_EQUIPMENT = frozenset({"rower", "ski_erg", "bike", "assault_bike"})
HYROX_SLED_METERS = 10
HYROX_WALL_BALL_REPS_PER_MINUTE = 12
HYROX_MACHINE_WORK_SECONDS = 60
HYROX_MACHINE_REST_SECONDS = 30
HYROX_BURPEE_METERS_PER_REP = 2
HYROX_RACE_MINUTES = 60
HYROX_WALL_BALL_KG = 6

# ---------------------------------------------------------------------------
# Readiness
# ---------------------------------------------------------------------------
READINESS_FACTOR_MIN = 0.6
READINESS_FACTOR_MAX = 1.2
READINESS_FACTOR_STEP = 0.05
READINESS_SCORE_WEIGHT = 0.1

# Availability weighting of the composite readiness score.
READINESS_AVAILABILITY_WEIGHT: dict[TimeAvailability, float] = {
    TimeAvailability.SHORT: 0.9,
    TimeAvailability.STANDARD: 1.0,
    TimeAvailability.FULL: 1.05,
}

# Readiness score -> session scaler, checked in order (score < bound).
READINESS_SCALER_BANDS: tuple[tuple[float, float], ...] = (
    (40, 0.75),
    (60, 0.9),
)
READINESS_SCALER_NORMAL_CEILING = 80
READINESS_SCALER_HIGH = 1.1
ADAPTATION_MODE_MULTIPLIER: dict[AdaptationMode, float] = {
    AdaptationMode.CONSERVATIVE: 0.9,
    AdaptationMode.AUTOMATIC: 1.0,
    AdaptationMode.AGGRESSIVE: 1.15,
}

# ---------------------------------------------------------------------------
# Microcycle / training cycle
# ---------------------------------------------------------------------------
DAYS_PER_WEEK = 7
MICROCYCLE_WEEKS = 6
TECHNIQUE_WEEK_INDEX = 3
TECHNIQUE_RPE_REDUCTION = 2
TECHNIQUE_RPE_FLOOR = 5
TECHNIQUE_NOTE = "Technique Week – Reduced Intensity"
DEFAULT_CYCLE_WEEKS = 4

CYCLE_WEEK_MULTIPLIERS: tuple[float, ...] = (1.0, 1.05, 1.08)
CYCLE_DELOAD_MULTIPLIER = 0.8
ZONE_SHIFT_UP_ABOVE = 1.05
PERCENT_ROUNDING_STEP = 2.5
MIN_ZONE = 1
MAX_ZONE = 5

# ---------------------------------------------------------------------------
# Loads and 1RM estimation
# ---------------------------------------------------------------------------
LOAD_ROUNDING: dict[Units, float] = {
    Units.METRIC: 2.5,
    Units.IMPERIAL: 5.0,
}
ONE_RM_MAX_REPS = 20
RPE_MODIFIER_STEP = 0.02
RPE_MODIFIER_MIN = 0.85
RPE_MODIFIER_MAX = 1.1

# Screen-level PR check requires this margin; the engine default is strict.
PR_SCREEN_MIN_IMPROVEMENT_PCT = 0.005

# Relative loading per movement pattern for weekly volume scoring.
PATTERN_VOLUME_MULTIPLIER: dict[MovementPattern, float] = {
    MovementPattern.SQUAT: 1.6,
    MovementPattern.HINGE: 1.8,
    MovementPattern.HORIZONTAL_PUSH: 1.3,
    MovementPattern.HORIZONTAL_PULL: 1.4,
    MovementPattern.VERTICAL_PUSH: 1.4,
    MovementPattern.VERTICAL_PULL: 1.5,
    MovementPattern.LUNGE: 1.5,
    MovementPattern.UNILATERAL_LOWER: 1.5,
    MovementPattern.UNILATERAL_UPPER: 1.3,
    MovementPattern.CARRY: 1.2,
    MovementPattern.CORE: 0.5,
    MovementPattern.LOCOMOTION: 0.0,
    MovementPattern.CONDITIONING: 0.0,
}
HYBRID_SCORE_VOLUME_WEIGHT = 2
HYBRID_SCORE_MINUTES_WEIGHT = 3
