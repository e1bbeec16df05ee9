"""Custom exception hierarchy for plan persistence and sync."""

from __future__ import annotations


class PlanSyncError(Exception):
    """Base exception for all plan_sync errors."""


class PlanStoreNotConfigured(PlanSyncError):
    """No remote store URL/key was supplied."""


class PlanStoreError(PlanSyncError):
    """A remote plan store call returned an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PlanStoreRateLimitError(PlanStoreError):
    """HTTP 429: too many requests."""

    def __init__(self, message: str = "Rate limited by the plan store") -> None:
        super().__init__(message, status_code=429)


class PlanNotFoundError(PlanStoreError):
    """The requested plan does not exist for this user."""

    def __init__(self, plan_id: str) -> None:
        super().__init__(f"Plan not found: {plan_id}", status_code=404)
        self.plan_id = plan_id
