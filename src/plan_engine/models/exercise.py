"""Exercise catalog entries, immutable and sourced from the static catalog."""

from __future__ import annotations

from dataclasses import dataclass, field

from plan_engine.models.enums import (
    Constraint,
    Equipment,
    MovementPattern,
    MuscleGroup,
    VariationType,
)


@dataclass(frozen=True)
class ExerciseVariation:
    """A linked regression, progression, or alternative of an exercise."""

    name: str
    description: str
    type: VariationType


@dataclass(frozen=True)
class Exercise:
    """A single catalog exercise.

    The generator only selects and wraps exercises; it never creates or
    mutates them.
    """

    id: str
    name: str
    primary_muscles: tuple[MuscleGroup, ...]
    patterns: tuple[MovementPattern, ...] = field(default_factory=tuple)
    equipment: tuple[Equipment, ...] = field(default_factory=tuple)
    contraindications: tuple[Constraint, ...] = field(default_factory=tuple)
    secondary_muscles: tuple[MuscleGroup, ...] = field(default_factory=tuple)
    cues: tuple[str, ...] = field(default_factory=tuple)
    rationale: str | None = None
    description: str | None = None
    difficulty: str | None = None
    variations: tuple[ExerciseVariation, ...] = field(default_factory=tuple)

    @property
    def is_isolation(self) -> bool:
        return MovementPattern.ISOLATION in self.patterns

    @property
    def is_compound(self) -> bool:
        return not self.is_isolation
