"""Reduce the exercise catalog to what the user can safely perform."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from plan_engine.models.enums import Constraint, Equipment
from plan_engine.models.exercise import Exercise


def is_exercise_allowed(
    exercise: Exercise,
    equipment: Iterable[Equipment],
    constraints: Iterable[Constraint],
) -> bool:
    """True when all required equipment is available and nothing is contraindicated."""
    available = set(equipment)
    blocked = set(constraints)
    if not all(item in available for item in exercise.equipment):
        return False
    return not any(c in blocked for c in exercise.contraindications)


def filter_exercises(
    catalog: Sequence[Exercise],
    equipment: Iterable[Equipment],
    constraints: Iterable[Constraint],
) -> list[Exercise]:
    """Filter the catalog by equipment and physical constraints.

    Catalog order is preserved. An exercise that needs no equipment always
    passes the equipment check. An empty result is valid.
    """
    available = frozenset(equipment)
    blocked = frozenset(constraints)
    return [ex for ex in catalog if is_exercise_allowed(ex, available, blocked)]
