"""Static exercise catalog loading.

The default catalog ships as package data (``data/exercises.json``). A
custom catalog file in the same format can be loaded instead.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

from plan_engine.models.exercise import Exercise
from plan_engine.serialization.plan_json import exercise_from_dict

logger = logging.getLogger(__name__)

_DEFAULT_CATALOG_RESOURCE = "exercises.json"


class CatalogError(Exception):
    """The exercise catalog file is missing or malformed."""


def parse_catalog(entries: list[dict]) -> tuple[Exercise, ...]:
    """Convert raw catalog entries into Exercises.

    Raises:
        CatalogError: On a malformed entry or a duplicate exercise id.
    """
    exercises: list[Exercise] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        try:
            exercise = exercise_from_dict(entry)
        except (KeyError, ValueError, TypeError) as exc:
            raise CatalogError(f"Invalid catalog entry at index {index}: {exc}") from exc
        if exercise.id in seen:
            raise CatalogError(f"Duplicate exercise id in catalog: {exercise.id}")
        if not exercise.primary_muscles:
            raise CatalogError(f"Exercise {exercise.id} has no primary muscles")
        seen.add(exercise.id)
        exercises.append(exercise)
    return tuple(exercises)


def load_catalog(path: Path | str | None = None) -> tuple[Exercise, ...]:
    """Load an exercise catalog.

    Args:
        path: Optional path to a catalog JSON file. Defaults to the bundled
            catalog.

    Returns:
        The catalog as an immutable tuple in file order.

    Raises:
        CatalogError: If the file cannot be read or parsed.
    """
    if path is None:
        return default_catalog()

    try:
        with open(path) as f:
            entries = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Cannot read catalog {path}: {exc}") from exc

    catalog = parse_catalog(entries)
    logger.info("Loaded %d exercises from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> tuple[Exercise, ...]:
    """The bundled catalog, parsed once per process."""
    text = (
        resources.files("plan_engine.data")
        .joinpath(_DEFAULT_CATALOG_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return parse_catalog(json.loads(text))
