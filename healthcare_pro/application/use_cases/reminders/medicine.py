"""Medicine reminder polling: due checks, next-fire computation and the sweep."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, time, timedelta

from sqlalchemy.orm import Session

from healthcare_pro.application.use_cases.notifications.triggers import (
    trigger_medicine_reminder,
)
from healthcare_pro.domain.entities import (
    ALL_DAYS_OF_WEEK,
    MedicineReminder,
    resolve_owning_user_id,
)
from healthcare_pro.infrastructure.repositories import MedicineReminderRepository
from healthcare_pro.utils import day_of_week_index, parse_clock_time

logger = logging.getLogger(__name__)

DEFAULT_REMINDER_TIME = time(8, 0)
DEFAULT_WINDOW_MINUTES = 5
LOOKAHEAD_DAYS = 7


def _allowed_days(days_of_week: Iterable[int] | None) -> set[int]:
    if not isinstance(days_of_week, (list, tuple, set, frozenset)):
        return set(ALL_DAYS_OF_WEEK)
    return {int(day) for day in days_of_week}


def compute_next_trigger(
    reminder_time: time | datetime | str | None,
    days_of_week: Iterable[int] | None,
    now: datetime,
) -> datetime | None:
    """Return the first time-of-day occurrence strictly after ``now`` on an allowed day.

    Looks ahead at most seven days; returns ``None`` when no allowed weekday
    is found in that range.
    """

    clock = parse_clock_time(reminder_time, DEFAULT_REMINDER_TIME)
    days = _allowed_days(days_of_week)
    for offset in range(LOOKAHEAD_DAYS + 1):
        candidate = datetime.combine(
            now.date() + timedelta(days=offset), clock, tzinfo=now.tzinfo
        )
        if day_of_week_index(candidate) in days and candidate > now:
            return candidate
    return None


def is_reminder_due(
    reminder: MedicineReminder,
    now: datetime,
    *,
    window_minutes: int = DEFAULT_WINDOW_MINUTES,
) -> bool:
    """Return ``True`` when ``reminder`` should fire during the poll at ``now``.

    Scheduled reminders are due once ``next_trigger`` has passed. Reminders
    that were never scheduled are due on an allowed weekday while ``now`` is
    within ``window_minutes`` after today's reminder time.
    """

    if reminder.next_trigger is not None:
        return reminder.next_trigger <= now

    if day_of_week_index(now) not in _allowed_days(reminder.days_of_week):
        return False
    clock = parse_clock_time(reminder.reminder_time, DEFAULT_REMINDER_TIME)
    reminder_today = datetime.combine(now.date(), clock, tzinfo=now.tzinfo)
    window_end = reminder_today + timedelta(minutes=window_minutes)
    return reminder_today <= now <= window_end


def run_medicine_reminders(
    session: Session,
    *,
    now: datetime,
    window_minutes: int = DEFAULT_WINDOW_MINUTES,
) -> int:
    """Fire every due medicine reminder and reschedule it; return how many fired.

    A failure on one reminder is logged and does not stop the others.
    """

    repository = MedicineReminderRepository(session)
    fired = 0

    for reminder in repository.list_candidates(now):
        medicine = reminder.medicine
        if medicine is None or not medicine.is_active or reminder.patient is None:
            continue

        try:
            if not is_reminder_due(reminder, now, window_minutes=window_minutes):
                continue
            patient_user_id = resolve_owning_user_id(reminder.patient)
            if not patient_user_id:
                logger.debug("Reminder %s has no patient account; skipping", reminder.id)
                continue

            settings = repository.get_settings(reminder.patient_id)
            if settings is not None and settings.notification_enabled is False:
                continue

            trigger_medicine_reminder(
                session,
                patient_user_id=patient_user_id,
                medicine_name=medicine.medicine_name,
                dosage=medicine.dosage,
                reminder_time=reminder.reminder_time,
                reminder_id=reminder.id,
            )
            repository.record_trigger(
                reminder.id,
                triggered_at=now,
                next_trigger=compute_next_trigger(
                    reminder.reminder_time, reminder.days_of_week, now
                ),
            )
        except Exception:
            session.rollback()
            logger.exception("Medicine reminder %s failed", reminder.id)
            continue
        fired += 1

    if fired:
        logger.info("Sent %d medicine reminder(s)", fired)
    return fired


__all__ = [
    "compute_next_trigger",
    "is_reminder_due",
    "run_medicine_reminders",
]
