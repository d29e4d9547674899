"""Domain entities describing patient medicines and their reminder schedules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time

from .patient import Patient

ALL_DAYS_OF_WEEK = (0, 1, 2, 3, 4, 5, 6)


@dataclass
class Medicine:
    """Medicine a patient takes."""

    id: int | None
    patient_id: int
    medicine_name: str
    dosage: str | None = None
    is_active: bool = True


@dataclass
class MedicineReminder:
    """Recurring reminder to take a medicine.

    ``days_of_week`` numbers weekdays from Sunday (0) to Saturday (6).
    ``next_trigger`` and ``last_triggered`` are naive wall-clock datetimes in the
    application timezone.
    """

    id: int | None
    medicine_id: int
    patient_id: int
    reminder_time: time | str | None
    days_of_week: list[int] = field(default_factory=lambda: list(ALL_DAYS_OF_WEEK))
    is_active: bool = True
    next_trigger: datetime | None = None
    last_triggered: datetime | None = None
    medicine: Medicine | None = None
    patient: Patient | None = None


@dataclass
class PatientReminderSettings:
    """Per-patient switches for reminder delivery."""

    id: int | None
    patient_id: int
    notification_enabled: bool = True


__all__ = [
    "ALL_DAYS_OF_WEEK",
    "Medicine",
    "MedicineReminder",
    "PatientReminderSettings",
]
