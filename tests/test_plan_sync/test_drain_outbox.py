"""Tests for the outbox drain worker job."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from plan_sync import JsonFileStorage, Outbox

import scheduler.drain_outbox as worker


@pytest.fixture
def outbox_path(tmp_path, monkeypatch):
    path = tmp_path / "outbox.json"
    monkeypatch.setattr(worker, "OUTBOX_PATH", path)
    monkeypatch.setattr(worker, "SUPABASE_URL", "https://x.supabase.co")
    monkeypatch.setattr(worker, "SUPABASE_KEY", "anon")
    monkeypatch.setattr(worker, "PLAN_SYNC_USER_ID", "user-1")
    monkeypatch.setattr(worker, "PLAN_SYNC_TABLE", "plans")
    return path


class TestDrainJob:
    def test_empty_outbox_skips_connect(self, outbox_path) -> None:
        with patch.object(worker, "SupabasePlanStore") as store_cls:
            assert worker.drain_job() is None
        store_cls.assert_not_called()

    def test_flushes_pending_operations(self, outbox_path, plan) -> None:
        Outbox(JsonFileStorage(outbox_path)).enqueue_save(plan)
        with patch.object(worker, "SupabasePlanStore") as store_cls:
            result = worker.drain_job()
        store_cls.assert_called_once_with(
            user_id="user-1", url="https://x.supabase.co", key="anon", table="plans",
        )
        assert len(result.flushed) == 1
        assert len(Outbox(JsonFileStorage(outbox_path))) == 0

    def test_unconfigured_store_keeps_queue(self, outbox_path, monkeypatch, plan) -> None:
        monkeypatch.setattr(worker, "SUPABASE_URL", "")
        Outbox(JsonFileStorage(outbox_path)).enqueue_save(plan)
        assert worker.drain_job() is None
        assert len(Outbox(JsonFileStorage(outbox_path))) == 1
