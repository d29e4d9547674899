"""Use cases driving the appointment lifecycle.

Every state change is committed first; the matching notification trigger is
then submitted through the :class:`TriggerRunner` so that a notification
failure can never undo or fail the booking itself.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, time

from sqlalchemy.orm import Session

from healthcare_pro.application.use_cases.notifications import TriggerRunner
from healthcare_pro.application.use_cases.notifications.triggers import (
    trigger_appointment_approved,
    trigger_appointment_cancelled,
    trigger_appointment_completed,
    trigger_appointment_created,
    trigger_appointment_declined,
    trigger_appointment_rescheduled,
    trigger_appointment_started,
)
from healthcare_pro.domain.entities import (
    APPOINTMENT_STATUS_CANCELLED,
    APPOINTMENT_STATUS_COMPLETED,
    APPOINTMENT_STATUS_CONFIRMED,
    APPOINTMENT_STATUS_DECLINED,
    APPOINTMENT_STATUS_IN_PROGRESS,
    APPOINTMENT_STATUS_SCHEDULED,
    ROLES,
    Appointment,
)
from healthcare_pro.infrastructure.repositories import (
    AppointmentRepository,
    DoctorRepository,
    PatientRepository,
)

_FINAL_STATUSES = frozenset(
    {APPOINTMENT_STATUS_COMPLETED, APPOINTMENT_STATUS_CANCELLED, APPOINTMENT_STATUS_DECLINED}
)


def _get_appointment(session: Session, appointment_id: int) -> Appointment:
    appointment = AppointmentRepository(session).get(appointment_id)
    if appointment is None:
        raise ValueError("Appointment not found")
    return appointment


def _change_status(
    session: Session,
    appointment_id: int,
    *,
    status: str,
    allowed_from: frozenset[str] | None = None,
) -> Appointment:
    appointment = _get_appointment(session, appointment_id)
    if appointment.status in _FINAL_STATUSES:
        raise ValueError(f"Appointment is already {appointment.status}")
    if allowed_from is not None and appointment.status not in allowed_from:
        raise ValueError(f"Cannot move appointment from {appointment.status} to {status}")
    return AppointmentRepository(session).update(replace(appointment, status=status))


def _submit(events: TriggerRunner, trigger, appointment: Appointment, **extra) -> None:
    events.submit(
        trigger,
        appointment=appointment,
        patient=appointment.patient,
        doctor=appointment.doctor,
        **extra,
    )


def create_appointment(
    session: Session,
    *,
    events: TriggerRunner,
    patient_id: int,
    doctor_id: int,
    appointment_date: date,
    appointment_time: time | str | None = None,
    reason: str | None = None,
) -> Appointment:
    """Book an appointment request awaiting the doctor's approval."""

    if PatientRepository(session).get(patient_id) is None:
        raise ValueError("Patient not found")
    if DoctorRepository(session).get(doctor_id) is None:
        raise ValueError("Doctor not found")

    appointment = AppointmentRepository(session).create(
        Appointment(
            id=None,
            patient_id=patient_id,
            doctor_id=doctor_id,
            appointment_date=appointment_date,
            appointment_time=appointment_time,
            status=APPOINTMENT_STATUS_SCHEDULED,
            reason=reason,
        )
    )
    _submit(events, trigger_appointment_created, appointment)
    return appointment


def approve_appointment(session: Session, appointment_id: int, *, events: TriggerRunner) -> Appointment:
    appointment = _change_status(
        session,
        appointment_id,
        status=APPOINTMENT_STATUS_CONFIRMED,
        allowed_from=frozenset({APPOINTMENT_STATUS_SCHEDULED}),
    )
    _submit(events, trigger_appointment_approved, appointment)
    return appointment


def decline_appointment(session: Session, appointment_id: int, *, events: TriggerRunner) -> Appointment:
    appointment = _change_status(
        session,
        appointment_id,
        status=APPOINTMENT_STATUS_DECLINED,
        allowed_from=frozenset({APPOINTMENT_STATUS_SCHEDULED}),
    )
    _submit(events, trigger_appointment_declined, appointment)
    return appointment


def start_appointment(session: Session, appointment_id: int, *, events: TriggerRunner) -> Appointment:
    appointment = _change_status(
        session,
        appointment_id,
        status=APPOINTMENT_STATUS_IN_PROGRESS,
        allowed_from=frozenset({APPOINTMENT_STATUS_SCHEDULED, APPOINTMENT_STATUS_CONFIRMED}),
    )
    _submit(events, trigger_appointment_started, appointment)
    return appointment


def complete_appointment(session: Session, appointment_id: int, *, events: TriggerRunner) -> Appointment:
    appointment = _change_status(session, appointment_id, status=APPOINTMENT_STATUS_COMPLETED)
    _submit(events, trigger_appointment_completed, appointment)
    return appointment


def cancel_appointment(
    session: Session,
    appointment_id: int,
    *,
    cancelled_by_role: str,
    events: TriggerRunner,
) -> Appointment:
    """Cancel the appointment; only the other party is notified."""

    if cancelled_by_role not in ROLES:
        raise ValueError("Unknown role")
    appointment = _change_status(session, appointment_id, status=APPOINTMENT_STATUS_CANCELLED)
    _submit(
        events,
        trigger_appointment_cancelled,
        appointment,
        cancelled_by_role=cancelled_by_role,
    )
    return appointment


def reschedule_appointment(
    session: Session,
    appointment_id: int,
    *,
    appointment_date: date,
    appointment_time: time | str | None = None,
    events: TriggerRunner,
) -> Appointment:
    appointment = _get_appointment(session, appointment_id)
    if appointment.status in _FINAL_STATUSES:
        raise ValueError(f"Appointment is already {appointment.status}")
    updated = AppointmentRepository(session).update(
        replace(
            appointment,
            appointment_date=appointment_date,
            appointment_time=(
                appointment_time if appointment_time is not None else appointment.appointment_time
            ),
            status=APPOINTMENT_STATUS_SCHEDULED,
        )
    )
    _submit(events, trigger_appointment_rescheduled, updated)
    return updated


__all__ = [
    "approve_appointment",
    "cancel_appointment",
    "complete_appointment",
    "create_appointment",
    "decline_appointment",
    "reschedule_appointment",
    "start_appointment",
]
