"""Deterministic workout plan generation."""

from plan_engine.config import GeneratorConfig
from plan_engine.engine import PlanGenerator, generate_plan
from plan_engine.validation import (
    BalanceWarning,
    ValidationResult,
    validate_plan_balance,
    validate_wizard_inputs,
)

__all__ = [
    "BalanceWarning",
    "GeneratorConfig",
    "PlanGenerator",
    "ValidationResult",
    "generate_plan",
    "validate_plan_balance",
    "validate_wizard_inputs",
]
