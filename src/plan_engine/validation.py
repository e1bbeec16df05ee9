"""Wizard input validation and plan balance warnings.

Both checks return their findings as data; nothing here raises. The wizard
blocks generation until :func:`validate_wizard_inputs` reports ``valid`` and
shows each error next to the relevant field. Balance warnings are advisory
only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from plan_engine.models.enums import (
    MAX_DAYS_PER_WEEK,
    MIN_DAYS_PER_WEEK,
    MIN_SESSION_DURATION_MIN,
    Equipment,
    Goal,
    MuscleGroup,
)
from plan_engine.models.selections import WizardSelections

ERROR_GOAL = "Please select a training goal"
ERROR_EQUIPMENT = "Please select at least one equipment option"
ERROR_MUSCLES = "Please select at least one muscle group to target"
ERROR_DAYS = (
    f"Please select between {MIN_DAYS_PER_WEEK} and {MAX_DAYS_PER_WEEK} "
    "training days per week"
)
ERROR_DURATION = f"Sessions should be at least {MIN_SESSION_DURATION_MIN} minutes"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)


def validate_wizard_inputs(selections: WizardSelections) -> ValidationResult:
    """Check wizard selections before generation.

    Every violated rule is reported, not just the first.
    """
    errors: list[str] = []

    if not selections.goal:
        errors.append(ERROR_GOAL)
    if len(selections.equipment) == 0:
        errors.append(ERROR_EQUIPMENT)
    if len(selections.target_muscles) == 0:
        errors.append(ERROR_MUSCLES)
    if not MIN_DAYS_PER_WEEK <= selections.days_per_week <= MAX_DAYS_PER_WEEK:
        errors.append(ERROR_DAYS)
    if selections.session_duration < MIN_SESSION_DURATION_MIN:
        errors.append(ERROR_DURATION)

    return ValidationResult(valid=not errors, errors=tuple(errors))


# ---------------------------------------------------------------------------
# Balance warnings
# ---------------------------------------------------------------------------


class WarningType(str, Enum):
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class BalanceWarning:
    id: str
    type: WarningType
    message: str
    context: str = ""


_LEG_MUSCLES = frozenset({
    MuscleGroup.QUADS,
    MuscleGroup.HAMSTRINGS,
    MuscleGroup.GLUTES,
    MuscleGroup.CALVES,
})
_PUSH_MUSCLES = frozenset({
    MuscleGroup.CHEST,
    MuscleGroup.FRONT_DELTOID,
    MuscleGroup.TRICEPS,
})
_PULL_MUSCLES = frozenset({
    MuscleGroup.LATS,
    MuscleGroup.UPPER_BACK,
    MuscleGroup.BICEPS,
    MuscleGroup.REAR_DELTOID,
})


def validate_plan_balance(selections: WizardSelections) -> list[BalanceWarning]:
    """Flag selections that will produce a lopsided or under-dosed plan."""
    warnings: list[BalanceWarning] = []
    targets = set(selections.target_muscles)

    if selections.goal in (Goal.HYPERTROPHY, Goal.STRENGTH) and selections.days_per_week < 3:
        warnings.append(BalanceWarning(
            id="frequency_low",
            type=WarningType.WARNING,
            message="Training frequency is low for your goal",
            context=(
                f"{selections.goal.value.capitalize()} progresses best with at "
                "least 3 sessions per week."
            ),
        ))

    if targets and not targets & _LEG_MUSCLES:
        warnings.append(BalanceWarning(
            id="missing_legs",
            type=WarningType.WARNING,
            message="No leg muscles selected",
            context="Lower-body training supports overall strength and balance.",
        ))

    if targets & _PUSH_MUSCLES and not targets & _PULL_MUSCLES:
        warnings.append(BalanceWarning(
            id="imbalance_push",
            type=WarningType.INFO,
            message="Pushing muscles without pulling muscles",
            context="Add back or biceps work to keep the shoulders balanced.",
        ))

    if selections.goal == Goal.STRENGTH and tuple(selections.equipment) == (Equipment.BODYWEIGHT,):
        warnings.append(BalanceWarning(
            id="equip_strength",
            type=WarningType.INFO,
            message="Bodyweight-only equipment limits strength progression",
            context="External load makes it easier to progress toward heavy sets.",
        ))

    return warnings
