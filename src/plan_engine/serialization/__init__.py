"""Serialization module — plan and selection documents for storage and transport."""

from plan_engine.serialization.plan_json import (
    plan_from_dict,
    plan_to_dict,
    plan_to_json_string,
    selections_from_dict,
    selections_to_dict,
)

__all__ = [
    "plan_from_dict",
    "plan_to_dict",
    "plan_to_json_string",
    "selections_from_dict",
    "selections_to_dict",
]
