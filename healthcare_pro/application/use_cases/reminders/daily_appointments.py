"""Once-a-day appointment reminder sweep."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from sqlalchemy.orm import Session

from healthcare_pro.application.use_cases.notifications.triggers import (
    trigger_daily_appointment_reminders,
)

logger = logging.getLogger(__name__)


@dataclass
class DailyReminderState:
    """Guard recording the calendar day on which reminders were last sent."""

    last_reminder_date: date | None = None

    def already_sent(self, day: date) -> bool:
        return self.last_reminder_date == day


def run_daily_reminders(
    state: DailyReminderState,
    *,
    session_factory: Callable[[], Session],
    now: datetime,
    target_hour: int,
) -> bool:
    """Send today's reminders if they are due; return ``True`` when a sweep ran.

    The sweep runs at most once per day, during ``target_hour``. The guard is
    set before sending and cleared again when the sweep fails so the next
    poll retries.
    """

    today = now.date()
    if state.already_sent(today):
        return False
    if now.hour != target_hour:
        return False

    state.last_reminder_date = today
    session = session_factory()
    try:
        trigger_daily_appointment_reminders(session, today=today)
    except Exception:
        session.rollback()
        state.last_reminder_date = None
        logger.exception("Daily appointment reminders failed for %s", today.isoformat())
        return False
    finally:
        session.close()

    logger.info("Sent daily appointment reminders for %s", today.isoformat())
    return True


__all__ = ["DailyReminderState", "run_daily_reminders"]
