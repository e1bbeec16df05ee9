"""Resolve a day's focus tags into the muscles it should train."""

from __future__ import annotations

from collections.abc import Sequence

from plan_engine.models.enums import MuscleGroup, SplitType

# ---------------------------------------------------------------------------
# Category -> muscle tables
# ---------------------------------------------------------------------------

UPPER_MUSCLES: tuple[MuscleGroup, ...] = (
    MuscleGroup.CHEST,
    MuscleGroup.FRONT_DELTOID,
    MuscleGroup.SIDE_DELTOID,
    MuscleGroup.REAR_DELTOID,
    MuscleGroup.UPPER_BACK,
    MuscleGroup.LATS,
    MuscleGroup.BICEPS,
    MuscleGroup.TRICEPS,
    MuscleGroup.TRAPS,
)

LOWER_MUSCLES: tuple[MuscleGroup, ...] = (
    MuscleGroup.QUADS,
    MuscleGroup.HAMSTRINGS,
    MuscleGroup.GLUTES,
    MuscleGroup.CALVES,
    MuscleGroup.HIP_FLEXORS,
    MuscleGroup.ADDUCTORS,
)

PUSH_MUSCLES: tuple[MuscleGroup, ...] = (
    MuscleGroup.CHEST,
    MuscleGroup.FRONT_DELTOID,
    MuscleGroup.SIDE_DELTOID,
    MuscleGroup.TRICEPS,
)

PULL_MUSCLES: tuple[MuscleGroup, ...] = (
    MuscleGroup.UPPER_BACK,
    MuscleGroup.LATS,
    MuscleGroup.REAR_DELTOID,
    MuscleGroup.BICEPS,
    MuscleGroup.TRAPS,
    MuscleGroup.FOREARMS,
)

CORE_MUSCLES: tuple[MuscleGroup, ...] = (
    MuscleGroup.ABS,
    MuscleGroup.OBLIQUES,
    MuscleGroup.LOWER_BACK,
)

_CATEGORY_MUSCLES: dict[str, tuple[MuscleGroup, ...]] = {
    "upper": UPPER_MUSCLES,
    "lower": LOWER_MUSCLES,
    "push": PUSH_MUSCLES,
    "pull": PULL_MUSCLES,
}

# Any of these tags pulls core work into the day
_CORE_TRIGGER_TAGS = frozenset(_CATEGORY_MUSCLES)


def get_muscles_for_day(
    focus_tags: Sequence[str],
    target_muscles: Sequence[MuscleGroup],
    split_type: SplitType,
) -> list[MuscleGroup]:
    """Return the target muscles relevant to a day with the given focus tags.

    Full-body splits train every selected muscle every day. Other splits
    union the category tables implied by the tags, add core whenever any
    upper/lower/push/pull tag is present, and keep only muscles the user
    actually selected.
    """
    if split_type == SplitType.FULL_BODY:
        return list(target_muscles)

    tags = set(focus_tags)
    relevant: list[MuscleGroup] = []

    if "full_body" in tags:
        relevant.extend(UPPER_MUSCLES + LOWER_MUSCLES + CORE_MUSCLES)
    else:
        for category, muscles in _CATEGORY_MUSCLES.items():
            if category in tags:
                relevant.extend(muscles)
        if tags & _CORE_TRIGGER_TAGS:
            relevant.extend(CORE_MUSCLES)

    selected = set(target_muscles)
    # dict.fromkeys dedupes while keeping first-seen order
    return [m for m in dict.fromkeys(relevant) if m in selected]
