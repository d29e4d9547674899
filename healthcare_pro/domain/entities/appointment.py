"""Domain entity representing an appointment between a patient and a doctor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

from .patient import Doctor, Patient

APPOINTMENT_STATUS_SCHEDULED = "scheduled"
APPOINTMENT_STATUS_CONFIRMED = "confirmed"
APPOINTMENT_STATUS_IN_PROGRESS = "in_progress"
APPOINTMENT_STATUS_COMPLETED = "completed"
APPOINTMENT_STATUS_CANCELLED = "cancelled"
APPOINTMENT_STATUS_DECLINED = "declined"

UPCOMING_APPOINTMENT_STATUSES = (
    APPOINTMENT_STATUS_SCHEDULED,
    APPOINTMENT_STATUS_CONFIRMED,
)


@dataclass
class Appointment:
    """Booking of a doctor's time slot by a patient."""

    id: int | None
    patient_id: int
    doctor_id: int
    appointment_date: date
    appointment_time: time | str | None
    status: str = APPOINTMENT_STATUS_SCHEDULED
    reason: str | None = None
    patient: Patient | None = None
    doctor: Doctor | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "Appointment",
    "APPOINTMENT_STATUS_SCHEDULED",
    "APPOINTMENT_STATUS_CONFIRMED",
    "APPOINTMENT_STATUS_IN_PROGRESS",
    "APPOINTMENT_STATUS_COMPLETED",
    "APPOINTMENT_STATUS_CANCELLED",
    "APPOINTMENT_STATUS_DECLINED",
    "UPCOMING_APPOINTMENT_STATUSES",
]
