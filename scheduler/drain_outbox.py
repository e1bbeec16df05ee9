"""Outbox drain worker — pushes queued plan changes to Supabase.

Usage:
    python -m scheduler.drain_outbox --once      # single run (for cron)
    python -m scheduler.drain_outbox --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import logging

from plan_sync import JsonFileStorage, Outbox, PlanStoreNotConfigured
from plan_sync.outbox import DrainResult
from plan_sync.supabase_store import SupabasePlanStore

from scheduler.config import (
    DRAIN_INTERVAL_MINUTES,
    OUTBOX_PATH,
    PLAN_SYNC_TABLE,
    PLAN_SYNC_USER_ID,
    SUPABASE_KEY,
    SUPABASE_URL,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def drain_job() -> DrainResult | None:
    """Execute one drain cycle. Returns None when nothing could be attempted."""
    outbox = Outbox(JsonFileStorage(OUTBOX_PATH))
    if not len(outbox):
        logger.info("Outbox empty, nothing to drain")
        return None

    # 1. Connect to Supabase
    try:
        store = SupabasePlanStore(
            user_id=PLAN_SYNC_USER_ID,
            url=SUPABASE_URL,
            key=SUPABASE_KEY,
            table=PLAN_SYNC_TABLE,
        )
    except PlanStoreNotConfigured as exc:
        logger.error("Plan store not configured: %s", exc)
        return None

    # 2. Flush pending operations in order
    result = outbox.drain(store)
    if result.remaining:
        logger.warning("%d operations still pending", result.remaining)
    return result


def main() -> None:
    parser = argparse.ArgumentParser(description="Plan outbox drain worker")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args()

    if args.once:
        drain_job()
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            drain_job,
            "interval",
            minutes=DRAIN_INTERVAL_MINUTES,
            id="drain_outbox",
        )
        logger.info("Scheduler started, draining every %d minutes", DRAIN_INTERVAL_MINUTES)
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
