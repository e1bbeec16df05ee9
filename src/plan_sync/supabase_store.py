"""Supabase-backed plan store.

Plans live in a ``plans`` table keyed by ``(user_id, id)`` with the plan
document in a JSON ``plan`` column. All methods wrap raw supabase calls with
error handling and retry logic.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from supabase import Client, create_client

from plan_engine.models.plan import Plan
from plan_engine.serialization import plan_from_dict, plan_to_dict
from plan_engine.serialization.plan_json import PLAN_SCHEMA_VERSION

from plan_sync.exceptions import (
    PlanNotFoundError,
    PlanStoreError,
    PlanStoreNotConfigured,
    PlanStoreRateLimitError,
)
from plan_sync.outbox import OperationType, PendingOperation

logger = logging.getLogger(__name__)

_DEFAULT_TABLE = "plans"
_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2


def _status_of(exc: Exception) -> int | None:
    """Best-effort HTTP status from a supabase / postgrest / httpx error."""
    for attr in ("status", "status_code", "code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.isdigit():
            return int(value)
    return None


class SupabasePlanStore:
    """Remote persistence for generated plans."""

    def __init__(
        self,
        user_id: str,
        url: str | None = None,
        key: str | None = None,
        table: str = _DEFAULT_TABLE,
        client: Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if client is None:
            if not url or not key:
                raise PlanStoreNotConfigured("Supabase URL and key must be set")
            client = create_client(url, key)
        self._client = client
        self._table = table
        self._user_id = user_id
        self._sleep = sleep

    # ------------------------------------------------------------------
    # Plan operations
    # ------------------------------------------------------------------

    def upsert_plan(self, plan: Plan | dict[str, Any]) -> dict[str, Any]:
        """Insert or replace a plan. Returns the stored row."""
        document = plan_to_dict(plan) if isinstance(plan, Plan) else plan
        if not document.get("id"):
            raise PlanStoreError("Plan document has no id")
        row = {
            "user_id": self._user_id,
            "id": document["id"],
            "plan": document,
            "schema_version": document.get("schemaVersion", PLAN_SCHEMA_VERSION),
        }
        resp = self._safe_call(
            lambda: self._client.table(self._table)
            .upsert(row, on_conflict="user_id,id")
            .execute()
        )
        logger.info("Upserted plan %s", document["id"])
        data = getattr(resp, "data", None) or [row]
        return data[0]

    def get_plan(self, plan_id: str) -> Plan:
        """Fetch one plan by id.

        Raises:
            PlanNotFoundError: If no such plan exists for this user.
        """
        resp = self._safe_call(
            lambda: self._client.table(self._table)
            .select("*")
            .eq("user_id", self._user_id)
            .eq("id", plan_id)
            .limit(1)
            .execute()
        )
        rows = getattr(resp, "data", None) or []
        if not rows:
            raise PlanNotFoundError(plan_id)
        return self._row_to_plan(rows[0])

    def list_plans(self, limit: int = 20) -> list[Plan]:
        """Most recently updated plans first."""
        resp = self._safe_call(
            lambda: self._client.table(self._table)
            .select("*")
            .eq("user_id", self._user_id)
            .order("updated_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._row_to_plan(row) for row in getattr(resp, "data", None) or []]

    def delete_plan(self, plan_id: str) -> None:
        self._safe_call(
            lambda: self._client.table(self._table)
            .delete()
            .eq("user_id", self._user_id)
            .eq("id", plan_id)
            .execute()
        )
        logger.info("Deleted plan %s", plan_id)

    def apply(self, operation: PendingOperation) -> None:
        """Apply a queued outbox operation."""
        if operation.operation == OperationType.SAVE:
            self.upsert_plan(operation.payload)
        elif operation.operation == OperationType.DELETE:
            self.delete_plan(operation.plan_id)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _row_to_plan(row: dict[str, Any]) -> Plan:
        document = dict(row["plan"])
        document["id"] = row.get("id", document.get("id"))
        document.setdefault("createdAt", row.get("created_at"))
        try:
            return plan_from_dict(document)
        except (KeyError, ValueError) as exc:
            raise PlanStoreError(f"Malformed plan row {row.get('id')}: {exc}") from exc

    def _safe_call(self, fn: Callable[[], Any]) -> Any:
        """Call *fn* with retry + exponential backoff on 429."""
        last_exc: Exception | None = None
        for attempt in range(_MAX_RETRIES):
            try:
                return fn()
            except Exception as exc:
                last_exc = exc
                status = _status_of(exc)
                if status == 429:
                    wait = _BASE_BACKOFF_S * (2 ** attempt)
                    logger.warning(
                        "Rate limited (attempt %d/%d), retrying in %ds",
                        attempt + 1,
                        _MAX_RETRIES,
                        wait,
                    )
                    self._sleep(wait)
                    continue
                # Non-retryable error
                raise PlanStoreError(str(exc), status_code=status) from exc

        raise PlanStoreRateLimitError(
            f"Rate limited after {_MAX_RETRIES} retries: {last_exc}"
        )
