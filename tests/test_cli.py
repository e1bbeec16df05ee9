"""Tests for the generate-plan command."""

from __future__ import annotations

import io
import json

import pytest

from plan_engine.cli import main

SELECTIONS = {
    "goal": "hypertrophy",
    "experienceLevel": "intermediate",
    "equipment": ["barbell", "dumbbell"],
    "targetMuscles": ["chest", "triceps"],
    "daysPerWeek": 3,
    "sessionDuration": 60,
}


@pytest.fixture
def selections_file(tmp_path):
    path = tmp_path / "selections.json"
    path.write_text(json.dumps(SELECTIONS))
    return path


class TestMain:
    def test_prints_plan_json(self, selections_file, capsys) -> None:
        assert main([str(selections_file)]) == 0
        doc = json.loads(capsys.readouterr().out)
        assert doc["splitType"] == "full_body"
        assert [d["name"] for d in doc["workoutDays"]] == [
            "Full Body A", "Full Body B", "Full Body C",
        ]

    def test_reads_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(SELECTIONS)))
        assert main(["-", "--indent", "0"]) == 0
        out = capsys.readouterr().out
        assert json.loads(out)["selections"]["daysPerWeek"] == 3

    def test_validation_errors_exit_1(self, tmp_path, capsys) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({**SELECTIONS, "goal": "", "equipment": []}))
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Please select a training goal" in captured.err
        assert "Please select at least one equipment option" in captured.err

    def test_unreadable_selections_exit_2(self, tmp_path) -> None:
        assert main([str(tmp_path / "missing.json")]) == 2

    def test_unknown_enum_exit_2(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({**SELECTIONS, "goal": "flexibility"}))
        assert main([str(path)]) == 2

    def test_custom_catalog(self, selections_file, tmp_path, capsys) -> None:
        catalog = tmp_path / "catalog.json"
        catalog.write_text(json.dumps([
            {"id": "press", "name": "Press", "primaryMuscles": ["chest"], "equipment": ["barbell"]},
        ]))
        assert main([str(selections_file), "--catalog", str(catalog)]) == 0
        doc = json.loads(capsys.readouterr().out)
        ids = {rx["exercise"]["id"] for d in doc["workoutDays"] for rx in d["exercises"]}
        assert ids == {"press"}

    def test_bad_catalog_exit_2(self, selections_file, tmp_path) -> None:
        catalog = tmp_path / "catalog.json"
        catalog.write_text("[{}]")
        assert main([str(selections_file), "--catalog", str(catalog)]) == 2
