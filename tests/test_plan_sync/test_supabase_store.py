"""Tests for plan_sync.supabase_store — mock-based, no real network calls."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from plan_engine.serialization import plan_to_dict
from plan_sync.exceptions import (
    PlanNotFoundError,
    PlanStoreError,
    PlanStoreNotConfigured,
    PlanStoreRateLimitError,
)
from plan_sync.outbox import OperationType, PendingOperation
from plan_sync.supabase_store import SupabasePlanStore


@pytest.fixture
def sleeps() -> list[float]:
    return []


@pytest.fixture
def store(mock_client, sleeps):
    return SupabasePlanStore(
        user_id="user-1", client=mock_client, sleep=sleeps.append,
    )


def _query(mock_client):
    return mock_client.table.return_value


def _error(status, message="boom"):
    exc = Exception(message)
    exc.status = status
    return exc


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_requires_url_and_key_without_client(self) -> None:
        with pytest.raises(PlanStoreNotConfigured):
            SupabasePlanStore(user_id="user-1")

    def test_creates_client_from_credentials(self) -> None:
        with patch("plan_sync.supabase_store.create_client") as create:
            SupabasePlanStore(user_id="user-1", url="https://x.supabase.co", key="anon")
        create.assert_called_once_with("https://x.supabase.co", "anon")


# ---------------------------------------------------------------------------
# upsert_plan
# ---------------------------------------------------------------------------


class TestUpsertPlan:
    def test_upserts_row_keyed_by_user_and_id(self, store, mock_client, plan) -> None:
        store.upsert_plan(plan)
        mock_client.table.assert_called_with("plans")
        row = _query(mock_client).upsert.call_args.args[0]
        assert row["user_id"] == "user-1"
        assert row["id"] == plan.id
        assert row["plan"] == plan_to_dict(plan)
        assert row["schema_version"] == 1
        assert _query(mock_client).upsert.call_args.kwargs == {"on_conflict": "user_id,id"}

    def test_accepts_plan_document(self, store, mock_client, plan) -> None:
        store.upsert_plan(plan_to_dict(plan))
        assert _query(mock_client).upsert.call_args.args[0]["id"] == plan.id

    def test_document_without_id_rejected(self, store, mock_client) -> None:
        with pytest.raises(PlanStoreError, match="no id"):
            store.upsert_plan({})
        _query(mock_client).upsert.assert_not_called()

    def test_returns_stored_row(self, store, mock_client, plan) -> None:
        _query(mock_client).execute.return_value = MagicMock(data=[{"id": plan.id, "ok": True}])
        assert store.upsert_plan(plan) == {"id": plan.id, "ok": True}


# ---------------------------------------------------------------------------
# get_plan / list_plans / delete_plan
# ---------------------------------------------------------------------------


class TestReadAndDelete:
    def test_get_plan(self, store, mock_client, plan) -> None:
        _query(mock_client).execute.return_value = MagicMock(
            data=[{"id": plan.id, "plan": plan_to_dict(plan)}]
        )
        fetched = store.get_plan(plan.id)
        assert fetched == plan
        _query(mock_client).eq.assert_any_call("id", plan.id)
        _query(mock_client).eq.assert_any_call("user_id", "user-1")

    def test_get_missing_plan_raises(self, store) -> None:
        with pytest.raises(PlanNotFoundError) as info:
            store.get_plan("plan_missing")
        assert info.value.plan_id == "plan_missing"
        assert info.value.status_code == 404

    def test_malformed_row_raises_store_error(self, store, mock_client) -> None:
        _query(mock_client).execute.return_value = MagicMock(
            data=[{"id": "plan_x", "plan": {"id": "plan_x"}}]
        )
        with pytest.raises(PlanStoreError, match="Malformed"):
            store.get_plan("plan_x")

    def test_list_plans_newest_first(self, store, mock_client, plan) -> None:
        _query(mock_client).execute.return_value = MagicMock(
            data=[{"id": plan.id, "plan": plan_to_dict(plan)}]
        )
        plans = store.list_plans(limit=5)
        assert [p.id for p in plans] == [plan.id]
        _query(mock_client).order.assert_called_once_with("updated_at", desc=True)
        _query(mock_client).limit.assert_called_once_with(5)

    def test_delete_plan(self, store, mock_client) -> None:
        store.delete_plan("plan_a")
        _query(mock_client).delete.assert_called_once_with()
        _query(mock_client).eq.assert_any_call("id", "plan_a")


# ---------------------------------------------------------------------------
# apply
# ---------------------------------------------------------------------------


class TestApply:
    def test_save_operation_upserts_payload(self, store, mock_client, plan) -> None:
        op = PendingOperation(
            id="op_1", operation=OperationType.SAVE, plan_id=plan.id, payload=plan_to_dict(plan),
        )
        store.apply(op)
        assert _query(mock_client).upsert.call_args.args[0]["plan"] == op.payload

    def test_delete_operation(self, store, mock_client) -> None:
        store.apply(PendingOperation(id="op_1", operation=OperationType.DELETE, plan_id="plan_a"))
        _query(mock_client).delete.assert_called_once_with()


# ---------------------------------------------------------------------------
# Error handling and retries
# ---------------------------------------------------------------------------


class TestSafeCall:
    def test_non_retryable_error_wrapped(self, store, mock_client, sleeps) -> None:
        _query(mock_client).execute.side_effect = _error(500, "Server error")
        with pytest.raises(PlanStoreError) as info:
            store.delete_plan("plan_a")
        assert info.value.status_code == 500
        assert sleeps == []

    def test_retries_on_rate_limit_then_succeeds(self, store, mock_client, sleeps) -> None:
        _query(mock_client).execute.side_effect = [_error(429), MagicMock(data=[])]
        store.delete_plan("plan_a")
        assert sleeps == [2]

    def test_gives_up_after_max_retries(self, store, mock_client, sleeps) -> None:
        _query(mock_client).execute.side_effect = _error(429)
        with pytest.raises(PlanStoreRateLimitError):
            store.delete_plan("plan_a")
        assert sleeps == [2, 4, 8]

    def test_string_status_code_recognised(self, store, mock_client) -> None:
        exc = Exception("rate limited")
        exc.code = "429"
        _query(mock_client).execute.side_effect = [exc, MagicMock(data=[])]
        store.delete_plan("plan_a")

    def test_rate_limit_error_is_store_error(self) -> None:
        assert issubclass(PlanStoreRateLimitError, PlanStoreError)
