"""Frozen wizard selections — the sole input to a plan generation call."""

from __future__ import annotations

from dataclasses import dataclass, field

from plan_engine.models.enums import (
    Constraint,
    Equipment,
    ExperienceLevel,
    Goal,
    MuscleGroup,
)


@dataclass(frozen=True)
class WizardSelections:
    """Immutable snapshot of everything the user chose in the wizard.

    Owned by the caller and copied verbatim into the generated Plan so the
    plan can be traced back to (and regenerated from) its inputs. ``goal``
    may be None while the wizard is still being filled in; validation
    rejects that before generation.
    """

    goal: Goal | None
    experience_level: ExperienceLevel
    equipment: tuple[Equipment, ...] = field(default_factory=tuple)
    target_muscles: tuple[MuscleGroup, ...] = field(default_factory=tuple)
    constraints: tuple[Constraint, ...] = field(default_factory=tuple)
    days_per_week: int = 3
    session_duration: int = 60  # minutes

    # Personal / trainer context, carried through untouched
    first_name: str = ""
    last_name: str = ""
    personal_goal_note: str = ""
    is_trainer: bool = False
    coach_notes: str = ""
