"""Weekly volume allocation and greedy exercise selection.

Volume is tracked per muscle across the whole week. Each day a muscle is
trained it receives an even share of its weekly cap, limited by whatever
budget is left, and that share is filled greedily from the filtered
catalog: compound movements first, at most ``max_sets_per_exercise`` sets
per exercise, never reusing an exercise within the same day.

The cap is soft: it is enforced by a remaining-budget check before each
allocation rather than a clamp afterwards.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace

from plan_engine.models.enums import MAX_SETS_PER_EXERCISE, MuscleGroup
from plan_engine.models.exercise import Exercise
from plan_engine.models.plan import ExercisePrescription

logger = logging.getLogger(__name__)


@dataclass
class VolumeTracker:
    """Running tally of sets assigned to each muscle this week.

    Scoped to a single generation call and discarded afterwards.
    """

    sets: dict[MuscleGroup, int] = field(default_factory=dict)

    @classmethod
    def for_muscles(cls, muscles: Iterable[MuscleGroup]) -> VolumeTracker:
        return cls(sets={m: 0 for m in muscles})

    def get(self, muscle: MuscleGroup) -> int:
        return self.sets.get(muscle, 0)

    def add(self, muscle: MuscleGroup, count: int) -> None:
        self.sets[muscle] = self.get(muscle) + count

    def remaining(self, muscle: MuscleGroup, cap: int) -> int:
        return cap - self.get(muscle)


@dataclass(frozen=True)
class MuscleAllocation:
    """Result of filling one muscle's set target for one day."""

    muscle: MuscleGroup
    target_sets: int
    sets_assigned: int
    prescriptions: tuple[ExercisePrescription, ...] = field(default_factory=tuple)

    @property
    def shortfall(self) -> int:
        return self.target_sets - self.sets_assigned


def target_sets_for_day(cap: int, days_per_week: int, remaining_cap: int) -> int:
    """Per-day set target for a muscle.

    Spreads the weekly cap across roughly half the training days (each
    muscle is hit about every other session), rounding up, and never
    exceeds what is left of the weekly budget.
    """
    training_days = max(1, math.ceil(days_per_week / 2))
    return min(math.ceil(cap / training_days), remaining_cap)


def rank_candidates(exercises: Sequence[Exercise], muscle: MuscleGroup) -> list[Exercise]:
    """Exercises that train ``muscle`` as a primary mover, compound first.

    A stable partition: within each group catalog order is kept.
    """
    candidates = [ex for ex in exercises if muscle in ex.primary_muscles]
    return sorted(candidates, key=lambda ex: ex.is_isolation)


def _rationale(exercise: Exercise, muscle: MuscleGroup) -> str:
    label = muscle.value.replace("_", " ")
    if exercise.is_compound:
        return f"Primary compound movement for {label}."
    return f"Isolation assistance for {label}."


def select_exercises_for_muscle(
    muscle: MuscleGroup,
    available_exercises: Sequence[Exercise],
    target_sets: int,
    used_exercise_ids: set[str],
    reps: str,
    rir: int,
    rest_seconds: int,
    max_sets_per_exercise: int = MAX_SETS_PER_EXERCISE,
) -> MuscleAllocation:
    """Greedily fill ``target_sets`` for one muscle on one day.

    Args:
        muscle: The muscle being trained.
        available_exercises: The equipment/constraint-filtered catalog.
        target_sets: Sets to allocate for this muscle today.
        used_exercise_ids: Exercise ids already placed on this day. Updated
            in place with every exercise selected here.
        reps: Rep range string written on each prescription.
        rir: Target reps in reserve.
        rest_seconds: Rest interval between sets.
        max_sets_per_exercise: Upper bound on sets for one exercise.

    Returns:
        A MuscleAllocation. ``sets_assigned`` can fall short of the target
        when the catalog runs out of distinct exercises.
    """
    prescriptions: list[ExercisePrescription] = []
    sets_assigned = 0

    for exercise in rank_candidates(available_exercises, muscle):
        if sets_assigned >= target_sets:
            break
        if exercise.id in used_exercise_ids:
            continue

        sets_for_exercise = min(max_sets_per_exercise, target_sets - sets_assigned)
        used_exercise_ids.add(exercise.id)
        prescriptions.append(ExercisePrescription(
            exercise=exercise,
            sets=sets_for_exercise,
            reps=reps,
            rir=rir,
            rest_seconds=rest_seconds,
            rationale=_rationale(exercise, muscle),
        ))
        sets_assigned += sets_for_exercise

    if sets_assigned < target_sets:
        logger.debug(
            "Only %d/%d sets found for %s", sets_assigned, target_sets, muscle.value,
        )

    return MuscleAllocation(
        muscle=muscle,
        target_sets=target_sets,
        sets_assigned=sets_assigned,
        prescriptions=tuple(prescriptions),
    )


def pair_supersets(
    prescriptions: Sequence[ExercisePrescription], first_group: int = 1
) -> tuple[tuple[ExercisePrescription, ...], int]:
    """Pair consecutive prescriptions into supersets.

    The first exercise of a pair loses its rest so the partner follows
    immediately; the partner keeps the rest interval. An odd exercise left
    over stays a straight set.

    Returns:
        The regrouped prescriptions and the next unused group number.
    """
    paired: list[ExercisePrescription] = []
    group = first_group
    for start in range(0, len(prescriptions), 2):
        chunk = prescriptions[start:start + 2]
        if len(chunk) < 2:
            paired.extend(chunk)
            break
        lead, partner = chunk
        paired.append(replace(lead, rest_seconds=0, superset_group=group))
        paired.append(replace(
            partner,
            superset_group=group,
            rationale=f"Superset with {lead.exercise.name}; rest after this exercise.",
        ))
        group += 1
    return tuple(paired), group
