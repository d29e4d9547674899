"""Notification triggers fired by the periodic reminder jobs."""

from __future__ import annotations

import logging
from datetime import date, datetime, time

from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import (
    NOTIFICATION_TYPE_INFO,
    ROLE_DOCTOR,
    ROLE_PATIENT,
    UPCOMING_APPOINTMENT_STATUSES,
    NotificationDraft,
    resolve_owning_user_id,
)
from healthcare_pro.infrastructure.repositories import AppointmentRepository
from healthcare_pro.utils import format_clock_time

from ..dispatcher import deliver
from ._common import at_time_suffix, doctor_name

logger = logging.getLogger(__name__)

ENTITY_APPOINTMENT = "appointment"
ENTITY_MEDICINE_REMINDER = "medicine_reminder"


def trigger_medicine_reminder(
    session: Session,
    *,
    patient_user_id: int | None,
    medicine_name: str,
    dosage: str | None,
    reminder_time: time | datetime | str | None,
    reminder_id: int | None = None,
) -> None:
    """Remind a patient to take a medicine."""

    dosage_note = f" ({dosage})" if dosage else ""
    time_suffix = at_time_suffix(format_clock_time(reminder_time))
    deliver(
        session,
        patient_user_id,
        NotificationDraft(
            target_role=ROLE_PATIENT,
            title="Medicine Reminder",
            message=f"Time to take {medicine_name}{dosage_note}{time_suffix}.",
            type=NOTIFICATION_TYPE_INFO,
            action_type="medicine_reminder",
            entity_id=reminder_id,
            entity_type=ENTITY_MEDICINE_REMINDER,
        ),
    )


def trigger_daily_appointment_reminders(session: Session, *, today: date) -> None:
    """Send one aggregated reminder per patient and per doctor with visits on ``today``.

    Patients or doctors without a linked user account are skipped.
    """

    appointments = AppointmentRepository(session).list_for_day(
        today, statuses=UPCOMING_APPOINTMENT_STATUSES
    )

    patient_appointments: dict[int, list[tuple[str, str]]] = {}
    doctor_appointment_counts: dict[int, int] = {}

    for appointment in appointments:
        patient_user_id = resolve_owning_user_id(appointment.patient)
        doctor_user_id = resolve_owning_user_id(appointment.doctor)
        if patient_user_id:
            patient_appointments.setdefault(patient_user_id, []).append(
                (
                    doctor_name(appointment.doctor),
                    format_clock_time(appointment.appointment_time),
                )
            )
        else:
            logger.debug("Appointment %s has no patient account; skipping", appointment.id)
        if doctor_user_id:
            doctor_appointment_counts[doctor_user_id] = (
                doctor_appointment_counts.get(doctor_user_id, 0) + 1
            )

    for patient_user_id, entries in patient_appointments.items():
        if len(entries) == 1:
            name, time_str = entries[0]
            message = (
                f"You have an appointment with {name} today{at_time_suffix(time_str)}. "
                "Please be on time."
            )
        else:
            message = (
                f"You have {len(entries)} appointments scheduled for today. "
                "Please be on time."
            )
        deliver(
            session,
            patient_user_id,
            NotificationDraft(
                target_role=ROLE_PATIENT,
                title="Today's Appointment Reminder",
                message=message,
                type=NOTIFICATION_TYPE_INFO,
                action_type="daily_appointment_reminder",
                entity_type=ENTITY_APPOINTMENT,
            ),
        )

    for doctor_user_id, count in doctor_appointment_counts.items():
        noun = "appointment" if count == 1 else "appointments"
        deliver(
            session,
            doctor_user_id,
            NotificationDraft(
                target_role=ROLE_DOCTOR,
                title="Today's Appointments",
                message=f"You have {count} {noun} scheduled for today.",
                type=NOTIFICATION_TYPE_INFO,
                action_type="daily_appointment_reminder",
                entity_type=ENTITY_APPOINTMENT,
            ),
        )

    logger.info(
        "Daily reminders for %s: %d patient(s), %d doctor(s)",
        today.isoformat(),
        len(patient_appointments),
        len(doctor_appointment_counts),
    )


__all__ = ["trigger_daily_appointment_reminders", "trigger_medicine_reminder"]
