"""JSON document serialization for plans, selections, and catalog entries.

Produces the camelCase plan document that the remote plan store persists
and the client reads back. Every function here is pure (no I/O).
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from plan_engine.models.enums import (
    Constraint,
    Equipment,
    ExperienceLevel,
    Goal,
    MovementPattern,
    MuscleGroup,
    SplitType,
    VariationType,
)
from plan_engine.models.exercise import Exercise, ExerciseVariation
from plan_engine.models.plan import (
    ExercisePrescription,
    Plan,
    RIRProgression,
    WeeklyVolume,
    WorkoutDay,
)
from plan_engine.models.selections import WizardSelections

PLAN_SCHEMA_VERSION = 1


# ---------------------------------------------------------------------------
# Exercise
# ---------------------------------------------------------------------------


def exercise_to_dict(exercise: Exercise) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": exercise.id,
        "name": exercise.name,
        "primaryMuscles": [m.value for m in exercise.primary_muscles],
        "secondaryMuscles": [m.value for m in exercise.secondary_muscles],
        "patterns": [p.value for p in exercise.patterns],
        "equipment": [e.value for e in exercise.equipment],
        "contraindications": [c.value for c in exercise.contraindications],
        "cues": list(exercise.cues),
    }
    if exercise.rationale is not None:
        data["rationale"] = exercise.rationale
    if exercise.description is not None:
        data["description"] = exercise.description
    if exercise.difficulty is not None:
        data["difficulty"] = exercise.difficulty
    if exercise.variations:
        data["variations"] = [
            {"name": v.name, "description": v.description, "type": v.type.value}
            for v in exercise.variations
        ]
    return data


def exercise_from_dict(data: dict[str, Any]) -> Exercise:
    """Build an Exercise from its document form.

    Raises:
        KeyError: If ``id``, ``name`` or ``primaryMuscles`` is missing.
        ValueError: If an enum value is not recognised.
    """
    return Exercise(
        id=data["id"],
        name=data["name"],
        primary_muscles=tuple(MuscleGroup(m) for m in data["primaryMuscles"]),
        secondary_muscles=tuple(MuscleGroup(m) for m in data.get("secondaryMuscles", ())),
        patterns=tuple(MovementPattern(p) for p in data.get("patterns", ())),
        equipment=tuple(Equipment(e) for e in data.get("equipment", ())),
        contraindications=tuple(Constraint(c) for c in data.get("contraindications", ())),
        cues=tuple(data.get("cues", ())),
        rationale=data.get("rationale"),
        description=data.get("description"),
        difficulty=data.get("difficulty"),
        variations=tuple(
            ExerciseVariation(
                name=v["name"],
                description=v.get("description", ""),
                type=VariationType(v["type"]),
            )
            for v in data.get("variations", ())
        ),
    )


# ---------------------------------------------------------------------------
# Wizard selections
# ---------------------------------------------------------------------------


def selections_to_dict(selections: WizardSelections) -> dict[str, Any]:
    return {
        "goal": selections.goal.value if selections.goal else None,
        "experienceLevel": selections.experience_level.value,
        "equipment": [e.value for e in selections.equipment],
        "targetMuscles": [m.value for m in selections.target_muscles],
        "constraints": [c.value for c in selections.constraints],
        "daysPerWeek": selections.days_per_week,
        "sessionDuration": selections.session_duration,
        "firstName": selections.first_name,
        "lastName": selections.last_name,
        "personalGoalNote": selections.personal_goal_note,
        "isTrainer": selections.is_trainer,
        "coachNotes": selections.coach_notes,
    }


def selections_from_dict(data: dict[str, Any]) -> WizardSelections:
    """Parse wizard selections from the client's camelCase payload.

    A missing or empty ``goal`` becomes None so validation can report it.

    Raises:
        ValueError: If an enum value is not recognised.
    """
    goal = data.get("goal")
    return WizardSelections(
        goal=Goal(goal) if goal else None,
        experience_level=ExperienceLevel(data.get("experienceLevel", "beginner")),
        equipment=tuple(Equipment(e) for e in data.get("equipment", ())),
        target_muscles=tuple(MuscleGroup(m) for m in data.get("targetMuscles", ())),
        constraints=tuple(Constraint(c) for c in data.get("constraints", ())),
        days_per_week=int(data.get("daysPerWeek", 3)),
        session_duration=int(data.get("sessionDuration", 60)),
        first_name=data.get("firstName", ""),
        last_name=data.get("lastName", ""),
        personal_goal_note=data.get("personalGoalNote", ""),
        is_trainer=bool(data.get("isTrainer", False)),
        coach_notes=data.get("coachNotes", ""),
    )


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------


def _prescription_to_dict(rx: ExercisePrescription) -> dict[str, Any]:
    data: dict[str, Any] = {
        "exercise": exercise_to_dict(rx.exercise),
        "sets": rx.sets,
        "reps": rx.reps,
        "rir": rx.rir,
        "restSeconds": rx.rest_seconds,
    }
    if rx.superset_group is not None:
        data["supersetGroup"] = rx.superset_group
    if rx.rationale:
        data["rationale"] = rx.rationale
    return data


def _day_to_dict(day: WorkoutDay) -> dict[str, Any]:
    data: dict[str, Any] = {
        "dayIndex": day.day_index,
        "name": day.name,
        "focusTags": list(day.focus_tags),
        "exercises": [_prescription_to_dict(rx) for rx in day.exercises],
        "estimatedDuration": day.estimated_duration,
    }
    if day.warm_up:
        data["warmUp"] = list(day.warm_up)
    if day.cool_down:
        data["coolDown"] = list(day.cool_down)
    return data


def plan_to_dict(plan: Plan) -> dict[str, Any]:
    """Convert a Plan to its JSON-compatible document form."""
    return {
        "id": plan.id,
        "createdAt": plan.created_at.isoformat(),
        "schemaVersion": PLAN_SCHEMA_VERSION,
        "selections": selections_to_dict(plan.selections),
        "splitType": plan.split_type.value,
        "workoutDays": [_day_to_dict(d) for d in plan.workout_days],
        "weeklyVolume": [
            {"muscleGroup": v.muscle_group.value, "sets": v.sets, "isWithinCap": v.is_within_cap}
            for v in plan.weekly_volume
        ],
        "rirProgression": [
            {"week": p.week, "targetRIR": p.target_rir, "isDeload": p.is_deload}
            for p in plan.rir_progression
        ],
        "notes": list(plan.notes),
    }


def _parse_created_at(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        # fromisoformat rejects a trailing Z before Python 3.11
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    return datetime.now(timezone.utc)


def plan_from_dict(data: dict[str, Any]) -> Plan:
    """Rebuild a Plan from a stored document.

    Raises:
        KeyError: If a required key is missing.
        ValueError: If an enum value is not recognised.
    """
    days = tuple(
        WorkoutDay(
            day_index=d["dayIndex"],
            name=d["name"],
            focus_tags=tuple(d.get("focusTags", ())),
            exercises=tuple(
                ExercisePrescription(
                    exercise=exercise_from_dict(rx["exercise"]),
                    sets=rx["sets"],
                    reps=rx["reps"],
                    rir=rx["rir"],
                    rest_seconds=rx["restSeconds"],
                    superset_group=rx.get("supersetGroup"),
                    rationale=rx.get("rationale", ""),
                )
                for rx in d.get("exercises", ())
            ),
            estimated_duration=d.get("estimatedDuration", 0),
            warm_up=tuple(d.get("warmUp", ())),
            cool_down=tuple(d.get("coolDown", ())),
        )
        for d in data.get("workoutDays", ())
    )
    return Plan(
        id=data["id"],
        created_at=_parse_created_at(data.get("createdAt")),
        selections=selections_from_dict(data["selections"]),
        split_type=SplitType(data["splitType"]),
        workout_days=days,
        weekly_volume=tuple(
            WeeklyVolume(
                muscle_group=MuscleGroup(v["muscleGroup"]),
                sets=v["sets"],
                is_within_cap=v["isWithinCap"],
            )
            for v in data.get("weeklyVolume", ())
        ),
        rir_progression=tuple(
            RIRProgression(week=p["week"], target_rir=p["targetRIR"], is_deload=p["isDeload"])
            for p in data.get("rirProgression", ())
        ),
        notes=tuple(data.get("notes", ())),
    )


def plan_to_json_string(plan: Plan, indent: int | None = 2) -> str:
    """Serialize a Plan to a JSON string."""
    return json.dumps(plan_to_dict(plan), indent=indent)
