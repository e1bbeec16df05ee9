"""Data models for the plan engine."""

from plan_engine.models.enums import (
    Constraint,
    Equipment,
    ExperienceLevel,
    Goal,
    MovementPattern,
    MuscleGroup,
    SplitType,
    VariationType,
)
from plan_engine.models.exercise import Exercise, ExerciseVariation
from plan_engine.models.plan import (
    ExercisePrescription,
    Plan,
    RIRProgression,
    WeeklyVolume,
    WorkoutDay,
)
from plan_engine.models.selections import WizardSelections

__all__ = [
    "Constraint",
    "Equipment",
    "Exercise",
    "ExercisePrescription",
    "ExerciseVariation",
    "ExperienceLevel",
    "Goal",
    "MovementPattern",
    "MuscleGroup",
    "Plan",
    "RIRProgression",
    "SplitType",
    "VariationType",
    "WeeklyVolume",
    "WizardSelections",
    "WorkoutDay",
]
