"""Warm-up and cool-down suggestions matched to a day's focus.

Each suggestion is tagged with the focus areas it prepares for and the
constraints under which it should be left out. ``general`` items suit any
session.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from plan_engine.models.enums import Constraint, MuscleGroup
from plan_engine.planning.muscle_map import CORE_MUSCLES

MAX_SUGGESTIONS = 3


@dataclass(frozen=True)
class Suggestion:
    text: str
    tags: tuple[str, ...]
    muscles: tuple[MuscleGroup, ...] = field(default_factory=tuple)
    avoid_constraints: tuple[Constraint, ...] = field(default_factory=tuple)


WARM_UP_SUGGESTIONS: tuple[Suggestion, ...] = (
    Suggestion("2-3 min easy cardio (walk, bike, or row)", ("general",)),
    Suggestion("Diaphragmatic breathing + core brace (5 breaths)", ("general",)),
    Suggestion(
        "Arm circles x10/side", ("upper", "push", "pull"),
        avoid_constraints=(Constraint.SHOULDER_INJURY, Constraint.NO_OVERHEAD),
    ),
    Suggestion("Scapular retractions x10", ("upper", "pull")),
    Suggestion(
        "Wall slides x8", ("upper", "push"),
        avoid_constraints=(Constraint.SHOULDER_INJURY, Constraint.NO_OVERHEAD),
    ),
    Suggestion(
        "Cat-cow x6", ("general", "core"),
        avoid_constraints=(Constraint.BACK_INJURY,),
    ),
    Suggestion(
        "Glute bridges x10", ("lower", "hinge"),
        avoid_constraints=(Constraint.BACK_INJURY,),
    ),
    Suggestion(
        "Bodyweight squats x8", ("lower", "quads"),
        avoid_constraints=(Constraint.KNEE_INJURY,),
    ),
    Suggestion(
        "Leg swings x8/side", ("lower",),
        avoid_constraints=(Constraint.KNEE_INJURY,),
    ),
    Suggestion(
        "Dead bug x6/side", ("core",),
        avoid_constraints=(Constraint.BACK_INJURY,),
    ),
)

COOL_DOWN_SUGGESTIONS: tuple[Suggestion, ...] = (
    Suggestion("Slow nasal breathing 1-2 min", ("general",)),
    Suggestion(
        "Doorway chest stretch 20-30s/side", ("upper", "push"),
        avoid_constraints=(Constraint.SHOULDER_INJURY, Constraint.NO_OVERHEAD),
    ),
    Suggestion(
        "Lat stretch on wall 20-30s/side", ("upper", "pull"),
        avoid_constraints=(Constraint.SHOULDER_INJURY, Constraint.NO_OVERHEAD),
    ),
    Suggestion(
        "Child's pose breathing 20-30s", ("general", "core"),
        avoid_constraints=(Constraint.BACK_INJURY, Constraint.NO_OVERHEAD),
    ),
    Suggestion(
        "Figure-4 glute stretch 20-30s/side", ("lower",),
        avoid_constraints=(Constraint.KNEE_INJURY,),
    ),
    Suggestion(
        "Hamstring stretch 20-30s/side", ("lower",),
        avoid_constraints=(Constraint.BACK_INJURY,),
    ),
    Suggestion("Calf stretch 20-30s/side", ("lower",)),
)


def build_suggestions(
    suggestions: Sequence[Suggestion],
    focus_tags: Sequence[str],
    day_muscles: Sequence[MuscleGroup],
    constraints: Sequence[Constraint],
    max_items: int = MAX_SUGGESTIONS,
) -> tuple[str, ...]:
    """Pick up to ``max_items`` suggestions that fit the day.

    Args:
        suggestions: The suggestion table to draw from.
        focus_tags: The day's focus tags.
        day_muscles: Muscles trained that day. Any core muscle adds the
            ``core`` tag.
        constraints: User constraints; matching suggestions are dropped.
        max_items: Maximum number of suggestions returned.

    Returns:
        Suggestion texts in table order, deduplicated.
    """
    blocked = set(constraints)
    tags = set(focus_tags)
    if any(m in CORE_MUSCLES for m in day_muscles):
        tags.add("core")

    picked: list[str] = []
    for suggestion in suggestions:
        if any(c in blocked for c in suggestion.avoid_constraints):
            continue
        matches = (
            "general" in suggestion.tags
            or any(t in tags for t in suggestion.tags)
            or any(m in day_muscles for m in suggestion.muscles)
        )
        if matches and suggestion.text not in picked:
            picked.append(suggestion.text)

    return tuple(picked[:max_items])


def get_warm_up(
    focus_tags: Sequence[str],
    day_muscles: Sequence[MuscleGroup],
    constraints: Sequence[Constraint],
) -> tuple[str, ...]:
    return build_suggestions(WARM_UP_SUGGESTIONS, focus_tags, day_muscles, constraints)


def get_cool_down(
    focus_tags: Sequence[str],
    day_muscles: Sequence[MuscleGroup],
    constraints: Sequence[Constraint],
) -> tuple[str, ...]:
    return build_suggestions(COOL_DOWN_SUGGESTIONS, focus_tags, day_muscles, constraints)
