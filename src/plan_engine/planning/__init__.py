"""Planning stages used by the plan generator."""

from plan_engine.planning.catalog_filter import filter_exercises
from plan_engine.planning.muscle_map import get_muscles_for_day
from plan_engine.planning.progression import DEFAULT_RIR_PROGRESSION, get_rir_progression
from plan_engine.planning.splits import DayStructure, get_workout_day_structure, select_split
from plan_engine.planning.volume import (
    VolumeTracker,
    pair_supersets,
    select_exercises_for_muscle,
    target_sets_for_day,
)

__all__ = [
    "DEFAULT_RIR_PROGRESSION",
    "DayStructure",
    "VolumeTracker",
    "filter_exercises",
    "get_muscles_for_day",
    "get_rir_progression",
    "get_workout_day_structure",
    "pair_supersets",
    "select_exercises_for_muscle",
    "select_split",
    "target_sets_for_day",
]
