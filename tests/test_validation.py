"""Tests for wizard input validation and balance warnings."""

from __future__ import annotations

import pytest

from plan_engine import validate_plan_balance, validate_wizard_inputs
from plan_engine.models.enums import Equipment, Goal, MuscleGroup
from plan_engine.validation import (
    ERROR_DAYS,
    ERROR_DURATION,
    ERROR_EQUIPMENT,
    ERROR_GOAL,
    ERROR_MUSCLES,
    WarningType,
)


class TestValidateWizardInputs:
    def test_valid_selections(self, hypertrophy_selections) -> None:
        result = validate_wizard_inputs(hypertrophy_selections)
        assert result.valid is True
        assert result.errors == ()

    def test_reports_every_error(self, make_selections) -> None:
        selections = make_selections(
            goal=None, equipment=(), target_muscles=(), days_per_week=7, session_duration=20,
        )
        result = validate_wizard_inputs(selections)
        assert result.valid is False
        assert result.errors == (
            ERROR_GOAL, ERROR_EQUIPMENT, ERROR_MUSCLES, ERROR_DAYS, ERROR_DURATION,
        )

    @pytest.mark.parametrize("days", [1, 7])
    def test_four_errors(self, make_selections, days: int) -> None:
        result = validate_wizard_inputs(
            make_selections(goal=None, equipment=(), target_muscles=(), days_per_week=days)
        )
        assert result.errors == (ERROR_GOAL, ERROR_EQUIPMENT, ERROR_MUSCLES, ERROR_DAYS)

    def test_error_messages(self) -> None:
        assert ERROR_GOAL == "Please select a training goal"
        assert ERROR_DAYS == "Please select between 2 and 6 training days per week"
        assert ERROR_DURATION == "Sessions should be at least 30 minutes"

    @pytest.mark.parametrize("days, valid", [(1, False), (2, True), (6, True), (7, False)])
    def test_days_bounds(self, make_selections, days: int, valid: bool) -> None:
        assert validate_wizard_inputs(make_selections(days_per_week=days)).valid is valid

    @pytest.mark.parametrize("minutes, valid", [(29, False), (30, True), (90, True)])
    def test_duration_bound(self, make_selections, minutes: int, valid: bool) -> None:
        assert validate_wizard_inputs(make_selections(session_duration=minutes)).valid is valid


class TestValidatePlanBalance:
    def test_balanced_selection_has_no_warnings(self, make_selections) -> None:
        selections = make_selections(
            target_muscles=(MuscleGroup.CHEST, MuscleGroup.LATS, MuscleGroup.QUADS),
        )
        assert validate_plan_balance(selections) == []

    def test_low_frequency(self, make_selections) -> None:
        selections = make_selections(
            days_per_week=2,
            target_muscles=(MuscleGroup.CHEST, MuscleGroup.LATS, MuscleGroup.QUADS),
        )
        warnings = validate_plan_balance(selections)
        assert [w.id for w in warnings] == ["frequency_low"]
        assert warnings[0].type == WarningType.WARNING

    def test_low_frequency_ignored_for_general(self, make_selections) -> None:
        selections = make_selections(
            goal=Goal.GENERAL,
            days_per_week=2,
            target_muscles=(MuscleGroup.CHEST, MuscleGroup.LATS, MuscleGroup.QUADS),
        )
        assert validate_plan_balance(selections) == []

    def test_missing_legs_and_push_imbalance(self, hypertrophy_selections) -> None:
        ids = [w.id for w in validate_plan_balance(hypertrophy_selections)]
        assert ids == ["missing_legs", "imbalance_push"]

    def test_bodyweight_strength(self, make_selections) -> None:
        selections = make_selections(
            goal=Goal.STRENGTH,
            equipment=(Equipment.BODYWEIGHT,),
            target_muscles=(MuscleGroup.CHEST, MuscleGroup.LATS, MuscleGroup.QUADS),
        )
        warnings = validate_plan_balance(selections)
        assert [w.id for w in warnings] == ["equip_strength"]
        assert warnings[0].type == WarningType.INFO
