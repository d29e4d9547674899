"""Background scheduling of the periodic reminder jobs."""

from __future__ import annotations

import logging
from datetime import datetime

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from healthcare_pro.application.use_cases.reminders import (
    DailyReminderState,
    run_daily_reminders,
    run_medicine_reminders,
)
from healthcare_pro.config import get_settings
from healthcare_pro.infrastructure.database import SessionLocal
from healthcare_pro.utils import get_app_timezone, now_in_app_naive_datetime

logger = logging.getLogger(__name__)

DAILY_REMINDER_JOB_ID = "daily-appointment-reminder"
MEDICINE_REMINDER_JOB_ID = "medicine-reminder"

_scheduler: BackgroundScheduler | None = None
daily_reminder_state = DailyReminderState()


def get_reminder_scheduler() -> BackgroundScheduler:
    """Return the process-wide reminder scheduler, creating it on first use."""

    global _scheduler
    if _scheduler is None:
        # One worker per job: each loop processes its records sequentially.
        _scheduler = BackgroundScheduler(
            executors={"default": ThreadPoolExecutor(max_workers=2)},
            job_defaults={"coalesce": True, "max_instances": 1},
            timezone=get_app_timezone(),
        )
    return _scheduler


def daily_reminder_tick() -> None:
    """Run one poll of the daily appointment reminder."""

    try:
        run_daily_reminders(
            daily_reminder_state,
            session_factory=SessionLocal,
            now=now_in_app_naive_datetime(),
            target_hour=get_settings().daily_reminder_hour,
        )
    except Exception:
        logger.exception("Daily appointment reminder poll failed")


def medicine_reminder_tick() -> None:
    """Run one poll of the medicine reminder job."""

    session = SessionLocal()
    try:
        run_medicine_reminders(
            session,
            now=now_in_app_naive_datetime(),
            window_minutes=get_settings().medicine_reminder_window_minutes,
        )
    except Exception:
        session.rollback()
        logger.exception("Medicine reminder poll failed")
    finally:
        session.close()


def _register(job_id: str, func, *, minutes: int) -> None:
    scheduler = get_reminder_scheduler()
    if scheduler.get_job(job_id) is not None:
        return
    scheduler.add_job(
        func,
        IntervalTrigger(minutes=minutes),
        id=job_id,
        next_run_time=datetime.now(tz=get_app_timezone()),
    )
    if not scheduler.running:
        scheduler.start()
    logger.info("Scheduled %s every %d minute(s)", job_id, minutes)


def start_daily_reminder_scheduler() -> None:
    """Poll the daily appointment reminder hourly, starting immediately."""

    _register(
        DAILY_REMINDER_JOB_ID,
        daily_reminder_tick,
        minutes=get_settings().daily_reminder_poll_minutes,
    )


def start_medicine_reminder_job() -> None:
    """Poll medicine reminders every few minutes, starting immediately."""

    _register(
        MEDICINE_REMINDER_JOB_ID,
        medicine_reminder_tick,
        minutes=get_settings().medicine_reminder_interval_minutes,
    )


def shutdown_reminder_jobs() -> None:
    """Stop the reminder scheduler and forget its jobs."""

    global _scheduler
    if _scheduler is None:
        return
    if _scheduler.running:
        _scheduler.shutdown(wait=False)
    _scheduler = None


__all__ = [
    "daily_reminder_tick",
    "medicine_reminder_tick",
    "get_reminder_scheduler",
    "shutdown_reminder_jobs",
    "start_daily_reminder_scheduler",
    "start_medicine_reminder_job",
]
