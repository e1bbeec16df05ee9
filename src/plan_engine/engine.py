"""PlanGenerator — the deterministic orchestrator that builds workout plans."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from datetime import datetime, timezone

from plan_engine.catalog import default_catalog
from plan_engine.config import GeneratorConfig
from plan_engine.models.enums import Goal, SplitType
from plan_engine.models.exercise import Exercise
from plan_engine.models.plan import ExercisePrescription, Plan, WeeklyVolume, WorkoutDay
from plan_engine.models.selections import WizardSelections
from plan_engine.planning.catalog_filter import filter_exercises
from plan_engine.planning.muscle_map import get_muscles_for_day
from plan_engine.planning.progression import get_rir_progression
from plan_engine.planning.splits import DayStructure, get_workout_day_structure, select_split
from plan_engine.planning.volume import (
    VolumeTracker,
    pair_supersets,
    select_exercises_for_muscle,
    target_sets_for_day,
)
from plan_engine.planning.warmups import get_cool_down, get_warm_up

logger = logging.getLogger(__name__)


class PlanGenerator:
    """Turns validated wizard selections into a complete Plan.

    Generation is pure apart from the plan id and timestamp: the same
    selections, catalog, and config always yield the same days, volume
    summary, and progression. The generator does not re-validate its
    input; run :func:`plan_engine.validation.validate_wizard_inputs` first.

    Usage:
        generator = PlanGenerator()
        plan = generator.generate(selections)
    """

    def __init__(
        self,
        catalog: Sequence[Exercise] | None = None,
        config: GeneratorConfig | None = None,
    ) -> None:
        self.catalog = tuple(catalog) if catalog is not None else default_catalog()
        self.config = config or GeneratorConfig()

    def generate(self, selections: WizardSelections) -> Plan:
        """Build a plan.

        Pipeline:
        1. Select the split from days per week
        2. Expand the split into day templates
        3. Filter the catalog by equipment and constraints
        4. For each day, map focus tags to target muscles
        5. Allocate sets per muscle against the weekly tally and pick exercises
        6. Attach the RIR progression
        7. Summarise weekly volume and write generation notes

        Args:
            selections: Validated wizard selections.

        Returns:
            A new, immutable Plan.
        """
        split_type = select_split(selections.days_per_week)
        day_structures = get_workout_day_structure(split_type, selections.days_per_week)
        available = filter_exercises(
            self.catalog, selections.equipment, selections.constraints,
        )
        logger.debug(
            "Split %s, %d of %d catalog exercises available",
            split_type.value, len(available), len(self.catalog),
        )

        tracker = VolumeTracker.for_muscles(selections.target_muscles)
        workout_days = tuple(
            self._build_day(day_index, structure, split_type, selections, available, tracker)
            for day_index, structure in enumerate(day_structures)
        )

        plan = Plan(
            id=f"plan_{uuid.uuid4().hex}",
            created_at=datetime.now(timezone.utc),
            selections=selections,
            split_type=split_type,
            workout_days=workout_days,
            weekly_volume=self._summarise_volume(selections, tracker),
            rir_progression=get_rir_progression(self.config.rir_progression),
            notes=self._build_notes(selections, split_type),
        )
        logger.info(
            "Generated plan %s: %s, %d days, %d weekly sets",
            plan.id, split_type.value, len(workout_days), plan.total_weekly_sets,
        )
        return plan

    def _build_day(
        self,
        day_index: int,
        structure: DayStructure,
        split_type: SplitType,
        selections: WizardSelections,
        available: list[Exercise],
        tracker: VolumeTracker,
    ) -> WorkoutDay:
        """Allocate every relevant muscle for one day, updating the tracker."""
        config = self.config
        goal = selections.goal or Goal.GENERAL
        reps = config.rep_range_for(goal)
        rest = config.rest_for(goal)

        day_muscles = get_muscles_for_day(
            structure.focus_tags, selections.target_muscles, split_type,
        )
        used_exercise_ids: set[str] = set()
        exercises: list[ExercisePrescription] = []
        total_sets = 0
        next_superset_group = 1
        session_budget = max(1, selections.session_duration // config.minutes_per_set)

        for muscle in day_muscles:
            cap = config.cap_for(selections.experience_level, muscle)
            remaining = tracker.remaining(muscle, cap)
            if remaining <= 0:
                continue

            target = target_sets_for_day(cap, selections.days_per_week, remaining)
            if config.enforce_session_budget:
                target = min(target, session_budget - total_sets)
                if target <= 0:
                    break

            allocation = select_exercises_for_muscle(
                muscle,
                available,
                target,
                used_exercise_ids,
                reps=reps,
                rir=config.target_rir,
                rest_seconds=rest,
                max_sets_per_exercise=config.max_sets_per_exercise,
            )
            prescriptions = allocation.prescriptions
            if config.pair_supersets:
                prescriptions, next_superset_group = pair_supersets(
                    prescriptions, next_superset_group,
                )
            exercises.extend(prescriptions)
            tracker.add(muscle, allocation.sets_assigned)
            total_sets += allocation.sets_assigned

        return WorkoutDay(
            day_index=day_index,
            name=structure.name,
            focus_tags=structure.focus_tags,
            exercises=tuple(exercises),
            estimated_duration=round(total_sets * config.minutes_per_set),
            warm_up=get_warm_up(structure.focus_tags, day_muscles, selections.constraints),
            cool_down=get_cool_down(structure.focus_tags, day_muscles, selections.constraints),
        )

    def _summarise_volume(
        self, selections: WizardSelections, tracker: VolumeTracker
    ) -> tuple[WeeklyVolume, ...]:
        summary = []
        for muscle in selections.target_muscles:
            cap = self.config.cap_for(selections.experience_level, muscle)
            sets = tracker.get(muscle)
            summary.append(WeeklyVolume(muscle_group=muscle, sets=sets, is_within_cap=sets <= cap))
        return tuple(summary)

    @staticmethod
    def _build_notes(selections: WizardSelections, split_type: SplitType) -> tuple[str, ...]:
        goal = selections.goal.value if selections.goal else "unspecified"
        notes = [
            f"Split: {split_type.value.replace('_', ' ').upper()}",
            f"Goal: {goal.capitalize()}",
            f"Experience: {selections.experience_level.value.capitalize()}",
            f"Days per week: {selections.days_per_week}",
        ]
        if selections.constraints:
            applied = ", ".join(c.value for c in selections.constraints)
            notes.append(f"Constraints applied: {applied}")
        return tuple(notes)


def generate_plan(
    selections: WizardSelections,
    catalog: Sequence[Exercise] | None = None,
    config: GeneratorConfig | None = None,
) -> Plan:
    """Convenience wrapper: ``PlanGenerator(catalog, config).generate(selections)``."""
    return PlanGenerator(catalog=catalog, config=config).generate(selections)
