"""Tests for warm-up and cool-down suggestions."""

from __future__ import annotations

from plan_engine.models.enums import Constraint, MuscleGroup
from plan_engine.planning.warmups import (
    COOL_DOWN_SUGGESTIONS,
    Suggestion,
    build_suggestions,
    get_cool_down,
    get_warm_up,
)


class TestWarmUps:
    def test_general_items_first(self) -> None:
        warm_up = get_warm_up(("upper", "push", "pull"), (MuscleGroup.CHEST,), ())
        assert warm_up == (
            "2-3 min easy cardio (walk, bike, or row)",
            "Diaphragmatic breathing + core brace (5 breaths)",
            "Arm circles x10/side",
        )

    def test_constraints_remove_items(self) -> None:
        warm_up = get_warm_up(
            ("upper", "push", "pull"), (MuscleGroup.CHEST,),
            (Constraint.SHOULDER_INJURY, Constraint.BACK_INJURY),
        )
        assert "Arm circles x10/side" not in warm_up
        assert "Wall slides x8" not in warm_up
        assert "Scapular retractions x10" in warm_up

    def test_at_most_three(self) -> None:
        assert len(get_cool_down(("lower", "quads", "hinge"), (), ())) <= 3

    def test_core_muscle_adds_core_tag(self) -> None:
        table = (
            Suggestion("Dead bug x6/side", ("core",)),
            Suggestion("Leg swings", ("lower",)),
        )
        picked = build_suggestions(table, ("upper",), (MuscleGroup.ABS,), ())
        assert picked == ("Dead bug x6/side",)

    def test_lower_cool_down(self) -> None:
        cool_down = get_cool_down(("lower",), (MuscleGroup.QUADS,), (Constraint.KNEE_INJURY,))
        assert "Figure-4 glute stretch 20-30s/side" not in cool_down
        assert cool_down[0] == COOL_DOWN_SUGGESTIONS[0].text

    def test_deduplicates(self) -> None:
        table = (Suggestion("Breathe", ("general",)), Suggestion("Breathe", ("general",)))
        assert build_suggestions(table, (), (), ()) == ("Breathe",)
