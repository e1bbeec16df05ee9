"""Split selection and day-structure templates.

The split is a pure function of training frequency. Each split expands into
an ordered list of day templates whose focus tags drive muscle selection.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from plan_engine.models.enums import SplitType


@dataclass(frozen=True)
class DayStructure:
    """Name and focus tags for one training day before exercises are chosen."""

    name: str
    focus_tags: tuple[str, ...]


# ---------------------------------------------------------------------------
# Fixed day templates
# ---------------------------------------------------------------------------

UPPER_LOWER_DAYS: tuple[DayStructure, ...] = (
    DayStructure("Upper A", ("upper", "push", "pull")),
    DayStructure("Lower A", ("lower", "quads", "hinge")),
    DayStructure("Upper B", ("upper", "push", "pull")),
    DayStructure("Lower B", ("lower", "quads", "hinge")),
)

PUSH_PULL_LEGS_DAYS: tuple[DayStructure, ...] = (
    DayStructure("Push", ("push", "chest", "shoulders", "triceps")),
    DayStructure("Pull", ("pull", "back", "biceps")),
    DayStructure("Legs", ("lower", "quads", "hinge", "calves")),
)


def select_split(days_per_week: int) -> SplitType:
    """Pick the training split for a weekly frequency.

    Never raises: anything at or below 3 is full body, exactly 4 is
    upper/lower, and everything else falls into push/pull/legs.
    """
    if days_per_week <= 3:
        return SplitType.FULL_BODY
    if days_per_week == 4:
        return SplitType.UPPER_LOWER
    return SplitType.PUSH_PULL_LEGS


def get_workout_day_structure(
    split_type: SplitType, days_per_week: int
) -> list[DayStructure]:
    """Expand a split into ``days_per_week`` ordered day templates.

    Args:
        split_type: The split chosen by :func:`select_split`.
        days_per_week: Number of training days.

    Returns:
        Day templates in training order. Templates are truncated to
        ``days_per_week``; a split only ever yields as many days as its
        template holds.
    """
    if split_type == SplitType.FULL_BODY:
        return [
            DayStructure(f"Full Body {string.ascii_uppercase[i]}", ("full_body",))
            for i in range(max(days_per_week, 0))
        ]

    if split_type == SplitType.UPPER_LOWER:
        return list(UPPER_LOWER_DAYS[:max(days_per_week, 0)])

    second_rotation = tuple(
        DayStructure(f"{day.name} 2", day.focus_tags) for day in PUSH_PULL_LEGS_DAYS
    )
    return list((PUSH_PULL_LEGS_DAYS + second_rotation)[:max(days_per_week, 0)])
