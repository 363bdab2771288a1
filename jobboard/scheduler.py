"""
Scheduler module for periodic background tasks.
Uses APScheduler's AsyncIOScheduler.

Keeps the job list fresh by re-running the load sequence
(remote → cache → seed) every REFRESH_INTERVAL_MINUTES.
"""

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from jobboard.services.job_store import JobStore

logger = logging.getLogger(__name__)

REFRESH_JOB_ID = "refresh_jobs"


def build_scheduler(store: JobStore, interval_minutes: int) -> AsyncIOScheduler:
    """Create a scheduler with the periodic refresh registered (not started)."""
    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        store.refresh,
        IntervalTrigger(minutes=interval_minutes),
        id=REFRESH_JOB_ID,
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    return scheduler


def start_scheduler(store: JobStore, interval_minutes: int) -> AsyncIOScheduler | None:
    """Start the background refresh. Returns None when disabled (interval <= 0)."""
    if interval_minutes <= 0:
        logger.info("Periodic refresh disabled.")
        return None

    scheduler = build_scheduler(store, interval_minutes)
    scheduler.start()

    job = scheduler.get_job(REFRESH_JOB_ID)
    if job:
        logger.info(f"📅 Scheduler started. Next refresh at: {job.next_run_time}")
    return scheduler


def shutdown_scheduler(scheduler: AsyncIOScheduler | None) -> None:
    """Stop the scheduler if it was started."""
    if scheduler is None:
        return
    scheduler.shutdown(wait=False)
    logger.info("Scheduler shut down.")
