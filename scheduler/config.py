"""Environment-variable-based configuration for the outbox drain worker."""

from __future__ import annotations

import os
from pathlib import Path

SUPABASE_URL: str = os.environ.get("SUPABASE_URL", "")
SUPABASE_KEY: str = os.environ.get("SUPABASE_KEY", "")
PLAN_SYNC_USER_ID: str = os.environ.get("PLAN_SYNC_USER_ID", "")
PLAN_SYNC_TABLE: str = os.environ.get("PLAN_SYNC_TABLE", "plans")
OUTBOX_PATH: Path = Path(os.environ.get("OUTBOX_PATH", "~/.plan_outbox.json")).expanduser()
DRAIN_INTERVAL_MINUTES: int = int(os.environ.get("OUTBOX_DRAIN_MINUTES", "5"))
