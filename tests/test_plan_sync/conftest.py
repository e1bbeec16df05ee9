"""Fixtures for the sync layer: a generated plan and a mocked Supabase client."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from plan_engine.engine import PlanGenerator
from plan_engine.models.plan import Plan


@pytest.fixture
def plan(hypertrophy_selections) -> Plan:
    return PlanGenerator().generate(hypertrophy_selections)


@pytest.fixture
def mock_client():
    """Supabase client whose query builder chains back to itself."""
    client = MagicMock()
    query = client.table.return_value
    for method in ("select", "eq", "order", "limit", "upsert", "delete"):
        getattr(query, method).return_value = query
    query.execute.return_value = MagicMock(data=[])
    return client
