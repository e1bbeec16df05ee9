"""Plan models: prescriptions, workout days, volume summary, and the Plan root."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from plan_engine.models.enums import MuscleGroup, SplitType
from plan_engine.models.exercise import Exercise
from plan_engine.models.selections import WizardSelections


@dataclass(frozen=True)
class ExercisePrescription:
    """One exercise slot in a workout day.

    Exercises sharing a ``superset_group`` on the same day are performed
    back-to-back.
    """

    exercise: Exercise
    sets: int
    reps: str  # e.g. "8-12"
    rir: int
    rest_seconds: int
    superset_group: int | None = None
    rationale: str = ""


@dataclass(frozen=True)
class WorkoutDay:
    """One training session within the plan."""

    day_index: int  # zero-based
    name: str
    focus_tags: tuple[str, ...]
    exercises: tuple[ExercisePrescription, ...] = field(default_factory=tuple)
    estimated_duration: int = 0  # minutes
    warm_up: tuple[str, ...] = field(default_factory=tuple)
    cool_down: tuple[str, ...] = field(default_factory=tuple)

    @property
    def total_sets(self) -> int:
        return sum(p.sets for p in self.exercises)

    @property
    def exercise_ids(self) -> list[str]:
        return [p.exercise.id for p in self.exercises]


@dataclass(frozen=True)
class WeeklyVolume:
    """Total weekly sets for one target muscle, checked against its cap."""

    muscle_group: MuscleGroup
    sets: int
    is_within_cap: bool


@dataclass(frozen=True)
class RIRProgression:
    """One week of the mesocycle's reps-in-reserve curve."""

    week: int  # 1-indexed
    target_rir: int
    is_deload: bool = False


@dataclass(frozen=True)
class Plan:
    """Output of PlanGenerator.generate(): the root aggregate.

    Downstream features (workout logging, progress review) reference a plan
    by ``id`` and attach their own records keyed by ``(id, day_index)``;
    they never mutate the plan itself.
    """

    id: str
    created_at: datetime
    selections: WizardSelections
    split_type: SplitType
    workout_days: tuple[WorkoutDay, ...] = field(default_factory=tuple)
    weekly_volume: tuple[WeeklyVolume, ...] = field(default_factory=tuple)
    rir_progression: tuple[RIRProgression, ...] = field(default_factory=tuple)
    notes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def total_weekly_sets(self) -> int:
        return sum(d.total_sets for d in self.workout_days)

    def volume_for(self, muscle: MuscleGroup) -> WeeklyVolume | None:
        """Look up the weekly volume entry for a muscle, if it was targeted."""
        for entry in self.weekly_volume:
            if entry.muscle_group == muscle:
                return entry
        return None
