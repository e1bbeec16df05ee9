"""Shared test fixtures: wizard selections and a small hand-built catalog."""

from __future__ import annotations

from typing import Callable

import pytest

from plan_engine.models.enums import (
    Constraint,
    Equipment,
    ExperienceLevel,
    Goal,
    MovementPattern,
    MuscleGroup,
)
from plan_engine.models.exercise import Exercise
from plan_engine.models.selections import WizardSelections


@pytest.fixture
def make_selections() -> Callable[..., WizardSelections]:
    """Factory for selections; defaults to a valid 3-day hypertrophy setup."""

    def _make(**overrides) -> WizardSelections:
        defaults = {
            "goal": Goal.HYPERTROPHY,
            "experience_level": ExperienceLevel.INTERMEDIATE,
            "equipment": (Equipment.BARBELL, Equipment.DUMBBELL),
            "target_muscles": (MuscleGroup.CHEST, MuscleGroup.TRICEPS),
            "constraints": (),
            "days_per_week": 3,
            "session_duration": 60,
        }
        defaults.update(overrides)
        return WizardSelections(**defaults)

    return _make


@pytest.fixture
def hypertrophy_selections(make_selections) -> WizardSelections:
    """Intermediate, 3 days, barbell + dumbbell, chest and triceps."""
    return make_selections()


@pytest.fixture
def upper_lower_selections(make_selections) -> WizardSelections:
    """Intermediate, 4 days, full gym, a spread of upper and lower muscles."""
    return make_selections(
        equipment=(
            Equipment.BARBELL, Equipment.DUMBBELL, Equipment.BENCH,
            Equipment.CABLE, Equipment.PULLUP_BAR, Equipment.SQUAT_RACK,
        ),
        target_muscles=(
            MuscleGroup.CHEST, MuscleGroup.LATS, MuscleGroup.QUADS,
            MuscleGroup.HAMSTRINGS, MuscleGroup.ABS,
        ),
        days_per_week=4,
    )


@pytest.fixture
def small_catalog() -> tuple[Exercise, ...]:
    """Five-exercise catalog with known equipment and contraindications."""
    return (
        Exercise(
            id="bench-press",
            name="Bench Press",
            primary_muscles=(MuscleGroup.CHEST,),
            patterns=(MovementPattern.HORIZONTAL_PUSH,),
            equipment=(Equipment.BARBELL, Equipment.BENCH),
            contraindications=(Constraint.SHOULDER_INJURY,),
        ),
        Exercise(
            id="cable-fly",
            name="Cable Fly",
            primary_muscles=(MuscleGroup.CHEST,),
            patterns=(MovementPattern.ISOLATION,),
            equipment=(Equipment.CABLE,),
        ),
        Exercise(
            id="push-up",
            name="Push-Up",
            primary_muscles=(MuscleGroup.CHEST, MuscleGroup.TRICEPS),
            patterns=(MovementPattern.HORIZONTAL_PUSH,),
            contraindications=(Constraint.WRIST_INJURY,),
        ),
        Exercise(
            id="pushdown",
            name="Cable Pushdown",
            primary_muscles=(MuscleGroup.TRICEPS,),
            patterns=(MovementPattern.ISOLATION,),
            equipment=(Equipment.CABLE,),
        ),
        Exercise(
            id="goblet-squat",
            name="Goblet Squat",
            primary_muscles=(MuscleGroup.QUADS,),
            patterns=(MovementPattern.SQUAT,),
            equipment=(Equipment.DUMBBELL,),
            contraindications=(Constraint.KNEE_INJURY,),
        ),
    )
