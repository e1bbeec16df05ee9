"""Plan persistence and offline sync. All remote store I/O lives here."""

from plan_sync.exceptions import (
    PlanNotFoundError,
    PlanStoreError,
    PlanStoreNotConfigured,
    PlanStoreRateLimitError,
    PlanSyncError,
)
from plan_sync.outbox import DrainResult, OperationType, Outbox, PendingOperation
from plan_sync.storage import InMemoryStorage, JsonFileStorage, OutboxStorage

__all__ = [
    "DrainResult",
    "InMemoryStorage",
    "JsonFileStorage",
    "OperationType",
    "Outbox",
    "OutboxStorage",
    "PendingOperation",
    "PlanNotFoundError",
    "PlanStoreError",
    "PlanStoreNotConfigured",
    "PlanStoreRateLimitError",
    "PlanSyncError",
]
