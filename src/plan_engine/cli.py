"""Command-line plan generation.

Usage:
    generate-plan selections.json                  # bundled catalog
    generate-plan selections.json --catalog my.json --indent 0
    cat selections.json | generate-plan -
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from plan_engine.catalog import CatalogError, load_catalog
from plan_engine.engine import PlanGenerator
from plan_engine.serialization import plan_to_json_string, selections_from_dict
from plan_engine.validation import validate_plan_balance, validate_wizard_inputs

logger = logging.getLogger(__name__)


def _read_selections(source: str) -> dict:
    if source == "-":
        return json.load(sys.stdin)
    with open(source) as f:
        return json.load(f)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a workout plan from wizard selections")
    parser.add_argument("selections", help="Path to a selections JSON file, or - for stdin")
    parser.add_argument("--catalog", help="Path to a custom exercise catalog JSON file")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        selections = selections_from_dict(_read_selections(args.selections))
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        logger.error("Cannot read selections: %s", exc)
        return 2

    result = validate_wizard_inputs(selections)
    if not result.valid:
        for error in result.errors:
            print(error, file=sys.stderr)
        return 1

    for warning in validate_plan_balance(selections):
        logger.warning("%s: %s", warning.message, warning.context)

    try:
        catalog = load_catalog(args.catalog) if args.catalog else None
    except CatalogError as exc:
        logger.error("%s", exc)
        return 2

    plan = PlanGenerator(catalog=catalog).generate(selections)
    print(plan_to_json_string(plan, indent=args.indent or None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
