"""Outbox of plan operations waiting to reach the remote store.

Local changes are applied immediately by the caller and appended here. A
separate :meth:`Outbox.drain` pushes them to the store in order; failures
stay queued with an incremented attempt count. Operations are keyed by plan
id, and once one operation for a plan fails every later operation for that
plan is held back so the remote side never sees them out of order.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Callable, Protocol

from plan_engine.models.plan import Plan
from plan_engine.serialization import plan_to_dict

from plan_sync.exceptions import PlanStoreError
from plan_sync.storage import OutboxStorage

logger = logging.getLogger(__name__)


class OperationType(str, Enum):
    SAVE = "save"
    DELETE = "delete"


@dataclass(frozen=True)
class PendingOperation:
    """One queued change to a remote plan."""

    id: str
    operation: OperationType
    plan_id: str
    payload: dict[str, Any] = field(default_factory=dict)
    timestamp: float = 0.0
    attempts: int = 0

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["operation"] = self.operation.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PendingOperation:
        return cls(
            id=data["id"],
            operation=OperationType(data["operation"]),
            plan_id=data["plan_id"],
            payload=data.get("payload", {}),
            timestamp=data.get("timestamp", 0.0),
            attempts=data.get("attempts", 0),
        )


class OperationSink(Protocol):
    """Anything that can apply a pending operation remotely."""

    def apply(self, operation: PendingOperation) -> None: ...


@dataclass(frozen=True)
class DrainResult:
    flushed: tuple[str, ...] = field(default_factory=tuple)
    failed: tuple[str, ...] = field(default_factory=tuple)
    held_back: tuple[str, ...] = field(default_factory=tuple)

    @property
    def remaining(self) -> int:
        return len(self.failed) + len(self.held_back)


class Outbox:
    """Durable queue of pending plan operations.

    Usage::

        outbox = Outbox(JsonFileStorage("~/.plan_outbox.json"))
        outbox.enqueue_save(plan)
        result = outbox.drain(store)
    """

    def __init__(
        self,
        storage: OutboxStorage,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._storage = storage
        self._clock = clock

    def pending(self) -> list[PendingOperation]:
        return [PendingOperation.from_dict(op) for op in self._storage.load()]

    def __len__(self) -> int:
        return len(self._storage.load())

    def enqueue(
        self,
        operation: OperationType,
        plan_id: str,
        payload: dict[str, Any] | None = None,
    ) -> PendingOperation:
        """Append an operation to the end of the queue and persist it."""
        op = PendingOperation(
            id=f"op_{uuid.uuid4().hex}",
            operation=operation,
            plan_id=plan_id,
            payload=payload or {},
            timestamp=self._clock(),
        )
        with self._storage.transaction():
            queue = self._storage.load()
            queue.append(op.to_dict())
            self._storage.save(queue)
        logger.debug("Queued %s for plan %s", operation.value, plan_id)
        return op

    def enqueue_save(self, plan: Plan) -> PendingOperation:
        return self.enqueue(OperationType.SAVE, plan.id, plan_to_dict(plan))

    def enqueue_delete(self, plan_id: str) -> PendingOperation:
        return self.enqueue(OperationType.DELETE, plan_id)

    def remove(self, operation_id: str) -> None:
        with self._storage.transaction():
            queue = [op for op in self._storage.load() if op["id"] != operation_id]
            self._storage.save(queue)

    def clear(self) -> None:
        with self._storage.transaction():
            self._storage.save([])

    def drain(self, sink: OperationSink) -> DrainResult:
        """Try to flush every queued operation to ``sink`` in order.

        Successful operations are removed. A failing operation is kept with
        ``attempts + 1`` and blocks later operations for the same plan;
        operations for other plans still go through. Progress is written
        back even if the drain is interrupted, and operations enqueued while
        the drain runs are kept.
        """
        flushed: list[str] = []
        failed: list[str] = []
        held_back: list[str] = []
        blocked_plans: set[str] = set()

        try:
            for op in self.pending():
                if op.plan_id in blocked_plans:
                    held_back.append(op.id)
                    continue
                try:
                    sink.apply(op)
                except PlanStoreError as exc:
                    logger.warning(
                        "Failed to %s plan %s (attempt %d): %s",
                        op.operation.value, op.plan_id, op.attempts + 1, exc,
                    )
                except Exception:
                    logger.exception(
                        "Unexpected error applying %s for plan %s (attempt %d)",
                        op.operation.value, op.plan_id, op.attempts + 1,
                    )
                else:
                    flushed.append(op.id)
                    continue
                failed.append(op.id)
                blocked_plans.add(op.plan_id)
        finally:
            self._commit(set(flushed), set(failed))

        if flushed or failed:
            logger.info(
                "Outbox drain: %d flushed, %d failed, %d held back",
                len(flushed), len(failed), len(held_back),
            )
        return DrainResult(
            flushed=tuple(flushed), failed=tuple(failed), held_back=tuple(held_back),
        )

    def _commit(self, flushed: set[str], failed: set[str]) -> None:
        """Merge drain results into the current queue on storage."""
        with self._storage.transaction():
            queue = []
            for op in self._storage.load():
                if op["id"] in flushed:
                    continue
                if op["id"] in failed:
                    op = {**op, "attempts": op.get("attempts", 0) + 1}
                queue.append(op)
            self._storage.save(queue)
