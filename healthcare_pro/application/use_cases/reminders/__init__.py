"""Periodic reminder sweeps."""

from .daily_appointments import DailyReminderState, run_daily_reminders
from .medicine import compute_next_trigger, is_reminder_due, run_medicine_reminders

__all__ = [
    "DailyReminderState",
    "compute_next_trigger",
    "is_reminder_due",
    "run_daily_reminders",
    "run_medicine_reminders",
]
