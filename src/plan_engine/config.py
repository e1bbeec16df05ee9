"""Generator policy configuration.

A frozen GeneratorConfig is injected into PlanGenerator. The defaults
reproduce the standard programming policy; callers may override individual
tables (e.g. a coach's own volume caps) without touching module state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from plan_engine.models.enums import (
    DEFAULT_TARGET_RIR,
    DEFAULT_VOLUME_CAP,
    MAX_SETS_PER_EXERCISE,
    MINUTES_PER_SET,
    REP_RANGES,
    REST_SECONDS,
    VOLUME_CAPS,
    ExperienceLevel,
    Goal,
    MuscleGroup,
)
from plan_engine.models.plan import RIRProgression
from plan_engine.planning.progression import DEFAULT_RIR_PROGRESSION


@dataclass(frozen=True)
class GeneratorConfig:
    """Tunable tables and limits for plan generation.

    Attributes:
        volume_caps: Weekly set caps per muscle, keyed by experience level.
        default_volume_cap: Cap used for muscles absent from ``volume_caps``.
        rep_ranges: (min, max) reps per goal.
        rest_seconds: Rest interval per goal.
        target_rir: Reps in reserve written on every prescription.
        max_sets_per_exercise: Upper bound on sets for a single exercise.
        minutes_per_set: Per-set time used for duration estimates.
        rir_progression: The mesocycle RIR curve attached to every plan.
        enforce_session_budget: When True, cap each day's total sets at
            ``session_duration // minutes_per_set``.
        pair_supersets: When True, consecutive exercises for the same muscle
            are paired into supersets: no rest after the first of a pair.
    """

    # Tables are copied per instance so module-level defaults stay untouched
    volume_caps: dict[ExperienceLevel, dict[MuscleGroup, int]] = field(
        default_factory=lambda: {level: dict(caps) for level, caps in VOLUME_CAPS.items()}
    )
    default_volume_cap: int = DEFAULT_VOLUME_CAP
    rep_ranges: dict[Goal, tuple[int, int]] = field(default_factory=lambda: dict(REP_RANGES))
    rest_seconds: dict[Goal, int] = field(default_factory=lambda: dict(REST_SECONDS))
    target_rir: int = DEFAULT_TARGET_RIR
    max_sets_per_exercise: int = MAX_SETS_PER_EXERCISE
    minutes_per_set: int = MINUTES_PER_SET
    rir_progression: tuple[RIRProgression, ...] = DEFAULT_RIR_PROGRESSION
    enforce_session_budget: bool = False
    pair_supersets: bool = False

    def cap_for(self, experience: ExperienceLevel, muscle: MuscleGroup) -> int:
        """Weekly set cap for a muscle, falling back to ``default_volume_cap``."""
        return self.volume_caps.get(experience, {}).get(muscle, self.default_volume_cap)

    def rep_range_for(self, goal: Goal) -> str:
        """Rep range string for a goal, e.g. "8-12"."""
        low, high = self.rep_ranges[goal]
        return f"{low}-{high}"

    def rest_for(self, goal: Goal) -> int:
        return self.rest_seconds[goal]
