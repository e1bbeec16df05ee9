"""Enumerations and programming constants for the plan engine.

Volume caps, rep ranges, and rest intervals follow the landmarks popularised
by Schoenfeld et al. and the RP "maximum recoverable volume" tables.
"""

from enum import Enum


class Goal(str, Enum):
    """Primary training goal chosen in the wizard."""

    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    GENERAL = "general"


class ExperienceLevel(str, Enum):
    """Self-reported training age."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class SplitType(str, Enum):
    """Weekly training split taxonomy."""

    FULL_BODY = "full_body"
    UPPER_LOWER = "upper_lower"
    PUSH_PULL_LEGS = "push_pull_legs"


class MuscleGroup(str, Enum):
    CHEST = "chest"
    FRONT_DELTOID = "front_deltoid"
    SIDE_DELTOID = "side_deltoid"
    REAR_DELTOID = "rear_deltoid"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    FOREARMS = "forearms"
    ABS = "abs"
    OBLIQUES = "obliques"
    QUADS = "quads"
    HIP_FLEXORS = "hip_flexors"
    ADDUCTORS = "adductors"
    UPPER_BACK = "upper_back"
    LATS = "lats"
    LOWER_BACK = "lower_back"
    GLUTES = "glutes"
    HAMSTRINGS = "hamstrings"
    CALVES = "calves"
    TRAPS = "traps"
    NECK = "neck"


class Equipment(str, Enum):
    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    KETTLEBELL = "kettlebell"
    CABLE = "cable"
    MACHINE = "machine"
    PULLUP_BAR = "pullup_bar"
    BENCH = "bench"
    SQUAT_RACK = "squat_rack"
    BODYWEIGHT = "bodyweight"
    BAND = "band"
    EZ_BAR = "ez_bar"
    LANDMINE = "landmine"
    RINGS = "rings"
    AB_WHEEL = "ab_wheel"
    STABILITY_BALL = "stability_ball"
    BOX = "box"


class MovementPattern(str, Enum):
    """Movement patterns. ISOLATION marks single-joint work."""

    HORIZONTAL_PUSH = "horizontal_push"
    HORIZONTAL_PULL = "horizontal_pull"
    VERTICAL_PUSH = "vertical_push"
    VERTICAL_PULL = "vertical_pull"
    SQUAT = "squat"
    HINGE = "hinge"
    LUNGE = "lunge"
    CARRY = "carry"
    ROTATION = "rotation"
    ISOLATION = "isolation"


class Constraint(str, Enum):
    """Physical constraints that rule exercises out."""

    NO_OVERHEAD = "no_overhead"
    NO_JUMPING = "no_jumping"
    NO_HEAVY_SPINAL_LOAD = "no_heavy_spinal_load"
    NO_ROTATION = "no_rotation"
    NO_IMPACT = "no_impact"
    SHOULDER_INJURY = "shoulder_injury"
    KNEE_INJURY = "knee_injury"
    BACK_INJURY = "back_injury"
    WRIST_INJURY = "wrist_injury"


class VariationType(str, Enum):
    REGRESSION = "regression"
    PROGRESSION = "progression"
    ALTERNATIVE = "alternative"


# ---------------------------------------------------------------------------
# Weekly hard-set caps per muscle by experience level
# ---------------------------------------------------------------------------

VOLUME_CAPS: dict[ExperienceLevel, dict[MuscleGroup, int]] = {
    ExperienceLevel.BEGINNER: {
        MuscleGroup.CHEST: 10, MuscleGroup.FRONT_DELTOID: 8,
        MuscleGroup.SIDE_DELTOID: 8, MuscleGroup.REAR_DELTOID: 6,
        MuscleGroup.BICEPS: 8, MuscleGroup.TRICEPS: 8, MuscleGroup.FOREARMS: 4,
        MuscleGroup.ABS: 8, MuscleGroup.OBLIQUES: 4, MuscleGroup.QUADS: 12,
        MuscleGroup.HIP_FLEXORS: 4, MuscleGroup.ADDUCTORS: 4,
        MuscleGroup.UPPER_BACK: 12, MuscleGroup.LATS: 10,
        MuscleGroup.LOWER_BACK: 6, MuscleGroup.GLUTES: 10,
        MuscleGroup.HAMSTRINGS: 10, MuscleGroup.CALVES: 8,
        MuscleGroup.TRAPS: 6, MuscleGroup.NECK: 2,
    },
    ExperienceLevel.INTERMEDIATE: {
        MuscleGroup.CHEST: 14, MuscleGroup.FRONT_DELTOID: 10,
        MuscleGroup.SIDE_DELTOID: 12, MuscleGroup.REAR_DELTOID: 8,
        MuscleGroup.BICEPS: 12, MuscleGroup.TRICEPS: 12, MuscleGroup.FOREARMS: 6,
        MuscleGroup.ABS: 12, MuscleGroup.OBLIQUES: 6, MuscleGroup.QUADS: 16,
        MuscleGroup.HIP_FLEXORS: 6, MuscleGroup.ADDUCTORS: 6,
        MuscleGroup.UPPER_BACK: 16, MuscleGroup.LATS: 14,
        MuscleGroup.LOWER_BACK: 8, MuscleGroup.GLUTES: 14,
        MuscleGroup.HAMSTRINGS: 14, MuscleGroup.CALVES: 12,
        MuscleGroup.TRAPS: 8, MuscleGroup.NECK: 4,
    },
    ExperienceLevel.ADVANCED: {
        MuscleGroup.CHEST: 18, MuscleGroup.FRONT_DELTOID: 12,
        MuscleGroup.SIDE_DELTOID: 16, MuscleGroup.REAR_DELTOID: 10,
        MuscleGroup.BICEPS: 16, MuscleGroup.TRICEPS: 16, MuscleGroup.FOREARMS: 8,
        MuscleGroup.ABS: 16, MuscleGroup.OBLIQUES: 8, MuscleGroup.QUADS: 20,
        MuscleGroup.HIP_FLEXORS: 8, MuscleGroup.ADDUCTORS: 8,
        MuscleGroup.UPPER_BACK: 20, MuscleGroup.LATS: 18,
        MuscleGroup.LOWER_BACK: 10, MuscleGroup.GLUTES: 18,
        MuscleGroup.HAMSTRINGS: 18, MuscleGroup.CALVES: 16,
        MuscleGroup.TRAPS: 10, MuscleGroup.NECK: 6,
    },
}

# Fallback cap for muscles missing from a caps table
DEFAULT_VOLUME_CAP = 10

# ---------------------------------------------------------------------------
# Goal-driven prescription fields
# ---------------------------------------------------------------------------

REP_RANGES: dict[Goal, tuple[int, int]] = {
    Goal.STRENGTH: (3, 6),
    Goal.HYPERTROPHY: (8, 12),
    Goal.GENERAL: (8, 15),
}

REST_SECONDS: dict[Goal, int] = {
    Goal.STRENGTH: 180,
    Goal.HYPERTROPHY: 90,
    Goal.GENERAL: 60,
}

DEFAULT_TARGET_RIR = 2

# No single exercise gets more than this many sets in one session
MAX_SETS_PER_EXERCISE = 4

# Average time per working set including rest, used for duration estimates
MINUTES_PER_SET = 3

# ---------------------------------------------------------------------------
# Wizard input bounds
# ---------------------------------------------------------------------------

MIN_DAYS_PER_WEEK = 2
MAX_DAYS_PER_WEEK = 6
MIN_SESSION_DURATION_MIN = 30
