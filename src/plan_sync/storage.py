"""Durable storage adapters for the outbox.

An adapter only knows how to load and save the full list of pending
operations as plain dicts. The Outbox owns all queue semantics and wraps
each read-modify-write in :meth:`OutboxStorage.transaction`.
"""

from __future__ import annotations

import contextlib
import fcntl
import json
import logging
import os
import tempfile
import time
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


class OutboxStorage(ABC):
    """Persistence interface for pending operations."""

    @abstractmethod
    def load(self) -> list[dict]:
        """Return every stored operation in queue order."""
        ...

    @abstractmethod
    def save(self, operations: list[dict]) -> None:
        """Replace the stored queue with ``operations``."""
        ...

    @contextlib.contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold exclusive access for a load/save pair. No-op by default."""
        yield


class InMemoryStorage(OutboxStorage):
    """Non-durable storage, for tests and short-lived processes."""

    def __init__(self, operations: list[dict] | None = None) -> None:
        self._operations = [dict(op) for op in operations or []]

    def load(self) -> list[dict]:
        return [dict(op) for op in self._operations]

    def save(self, operations: list[dict]) -> None:
        self._operations = [dict(op) for op in operations]


class JsonFileStorage(OutboxStorage):
    """Queue persisted as a JSON array on disk.

    Writes go to a temporary file that replaces the target atomically, so
    a crash mid-write never leaves a truncated queue behind. Transactions
    take an exclusive ``flock`` on a sibling ``.lock`` file so the app and
    the drain worker can share one queue file.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    @property
    def lock_path(self) -> Path:
        return self.path.with_name(f".{self.path.name}.lock")

    @contextlib.contextmanager
    def transaction(self) -> Iterator[None]:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.lock_path, "w") as f:
            fcntl.flock(f, fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(f, fcntl.LOCK_UN)

    def load(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            with open(self.path) as f:
                data = json.load(f)
        except json.JSONDecodeError:
            self._quarantine("is not valid JSON")
            return []
        if not isinstance(data, list):
            self._quarantine("does not hold a JSON array")
            return []
        return data

    def save(self, operations: list[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(operations, f)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _quarantine(self, reason: str) -> Path:
        """Move an unreadable queue file aside so the next save cannot erase it."""
        target = self.path.with_name(f"{self.path.name}.corrupt-{int(time.time())}")
        os.replace(self.path, target)
        logger.error("Outbox file %s %s; moved to %s", self.path, reason, target)
        return target
