"""Mesocycle progression: the reps-in-reserve curve attached to every plan.

Three loading weeks drive effort up (RIR 3 -> 2 -> 1), then a deload week
backs off to RIR 4 before the next block.

References:
    Helms et al. (2016). Application of the repetitions in reserve-based
    rating of perceived exertion scale for resistance training.
    Strength Cond J 38(4):42-49.
"""

from __future__ import annotations

from collections.abc import Sequence

from plan_engine.models.plan import RIRProgression

DEFAULT_RIR_PROGRESSION: tuple[RIRProgression, ...] = (
    RIRProgression(week=1, target_rir=3, is_deload=False),
    RIRProgression(week=2, target_rir=2, is_deload=False),
    RIRProgression(week=3, target_rir=1, is_deload=False),
    RIRProgression(week=4, target_rir=4, is_deload=True),
)


def get_rir_progression(
    progression: Sequence[RIRProgression] | None = None,
) -> tuple[RIRProgression, ...]:
    """Return the RIR curve for a plan.

    Args:
        progression: Optional override. Defaults to the 4-week curve.

    Returns:
        The progression as an immutable tuple ordered by week.
    """
    if progression is None:
        return DEFAULT_RIR_PROGRESSION
    return tuple(sorted(progression, key=lambda p: p.week))
