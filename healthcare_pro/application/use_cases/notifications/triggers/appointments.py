"""Notification triggers for appointment lifecycle events."""

from __future__ import annotations

from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import (
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    NOTIFICATION_TYPE_WARNING,
    ROLE_DOCTOR,
    ROLE_PATIENT,
    Appointment,
    Doctor,
    NotificationDraft,
    Patient,
    resolve_owning_user_id,
)
from healthcare_pro.utils import format_clock_time, format_short_date

from ..dispatcher import deliver
from ._common import at_time_suffix, doctor_name

ENTITY_APPOINTMENT = "appointment"


def _draft(
    appointment: Appointment,
    *,
    target_role: str,
    title: str,
    message: str,
    type: str,
    action_type: str,
) -> NotificationDraft:
    return NotificationDraft(
        target_role=target_role,
        title=title,
        message=message,
        type=type,
        action_type=action_type,
        entity_id=appointment.id,
        entity_type=ENTITY_APPOINTMENT,
    )


def trigger_appointment_created(
    session: Session,
    *,
    appointment: Appointment,
    patient: Patient | None,
    doctor: Doctor | None,
) -> None:
    """Confirm the request to the patient and ask the doctor to act on it."""

    date_str = format_short_date(appointment.appointment_date)
    when = f"{date_str}{at_time_suffix(format_clock_time(appointment.appointment_time))}"

    deliver(
        session,
        resolve_owning_user_id(patient),
        _draft(
            appointment,
            target_role=ROLE_PATIENT,
            title="Appointment Requested",
            message=(
                f"Your appointment request with {doctor_name(doctor)} on {when} "
                "has been submitted. Awaiting doctor approval."
            ),
            type=NOTIFICATION_TYPE_INFO,
            action_type="appointment_created",
        ),
    )
    deliver(
        session,
        resolve_owning_user_id(doctor),
        _draft(
            appointment,
            target_role=ROLE_DOCTOR,
            title="New Appointment Request",
            message=(
                f"You have a new appointment request for {when}. "
                "Please approve or decline."
            ),
            type=NOTIFICATION_TYPE_INFO,
            action_type="appointment_request_received",
        ),
    )


def trigger_appointment_approved(
    session: Session,
    *,
    appointment: Appointment,
    patient: Patient | None,
    doctor: Doctor | None,
) -> None:
    date_str = format_short_date(appointment.appointment_date)
    deliver(
        session,
        resolve_owning_user_id(patient),
        _draft(
            appointment,
            target_role=ROLE_PATIENT,
            title="Appointment Approved",
            message=f"Your appointment with {doctor_name(doctor)} on {date_str} has been approved.",
            type=NOTIFICATION_TYPE_SUCCESS,
            action_type="appointment_approved",
        ),
    )


def trigger_appointment_declined(
    session: Session,
    *,
    appointment: Appointment,
    patient: Patient | None,
    doctor: Doctor | None,
) -> None:
    date_str = format_short_date(appointment.appointment_date)
    deliver(
        session,
        resolve_owning_user_id(patient),
        _draft(
            appointment,
            target_role=ROLE_PATIENT,
            title="Appointment Declined",
            message=f"Your appointment with {doctor_name(doctor)} on {date_str} was declined.",
            type=NOTIFICATION_TYPE_WARNING,
            action_type="appointment_declined",
        ),
    )


def trigger_appointment_cancelled(
    session: Session,
    *,
    appointment: Appointment,
    patient: Patient | None,
    doctor: Doctor | None,
    cancelled_by_role: str | None,
) -> None:
    """Tell the party that did not cancel; the canceller is not notified."""

    date_str = format_short_date(appointment.appointment_date)

    if cancelled_by_role != ROLE_PATIENT:
        deliver(
            session,
            resolve_owning_user_id(patient),
            _draft(
                appointment,
                target_role=ROLE_PATIENT,
                title="Appointment Cancelled",
                message=f"Your appointment on {date_str} has been cancelled.",
                type=NOTIFICATION_TYPE_WARNING,
                action_type="appointment_cancelled",
            ),
        )
    if cancelled_by_role != ROLE_DOCTOR:
        deliver(
            session,
            resolve_owning_user_id(doctor),
            _draft(
                appointment,
                target_role=ROLE_DOCTOR,
                title="Appointment Cancelled",
                message=f"An appointment on {date_str} has been cancelled.",
                type=NOTIFICATION_TYPE_WARNING,
                action_type="appointment_cancelled",
            ),
        )


def trigger_appointment_rescheduled(
    session: Session,
    *,
    appointment: Appointment,
    patient: Patient | None,
    doctor: Doctor | None,
) -> None:
    date_str = format_short_date(appointment.appointment_date)
    deliver(
        session,
        resolve_owning_user_id(patient),
        _draft(
            appointment,
            target_role=ROLE_PATIENT,
            title="Appointment Rescheduled",
            message=(
                f"Your appointment with {doctor_name(doctor)} has been rescheduled to {date_str}."
            ),
            type=NOTIFICATION_TYPE_INFO,
            action_type="appointment_rescheduled",
        ),
    )
    deliver(
        session,
        resolve_owning_user_id(doctor),
        _draft(
            appointment,
            target_role=ROLE_DOCTOR,
            title="Appointment Rescheduled",
            message=f"An appointment has been rescheduled to {date_str}.",
            type=NOTIFICATION_TYPE_INFO,
            action_type="appointment_rescheduled",
        ),
    )


def trigger_appointment_started(
    session: Session,
    *,
    appointment: Appointment,
    patient: Patient | None,
    doctor: Doctor | None,
) -> None:
    time_suffix = at_time_suffix(format_clock_time(appointment.appointment_time))
    deliver(
        session,
        resolve_owning_user_id(patient),
        _draft(
            appointment,
            target_role=ROLE_PATIENT,
            title="Appointment Started",
            message=(
                f"Your appointment with {doctor_name(doctor)} has started{time_suffix}. "
                "The doctor is now seeing you."
            ),
            type=NOTIFICATION_TYPE_INFO,
            action_type="appointment_started",
        ),
    )
    deliver(
        session,
        resolve_owning_user_id(doctor),
        _draft(
            appointment,
            target_role=ROLE_DOCTOR,
            title="Appointment In Progress",
            message="Your appointment is now in progress.",
            type=NOTIFICATION_TYPE_INFO,
            action_type="appointment_started",
        ),
    )


def trigger_appointment_completed(
    session: Session,
    *,
    appointment: Appointment,
    patient: Patient | None,
    doctor: Doctor | None,
) -> None:
    deliver(
        session,
        resolve_owning_user_id(patient),
        _draft(
            appointment,
            target_role=ROLE_PATIENT,
            title="Appointment Completed",
            message=(
                f"Your appointment with {doctor_name(doctor)} has been completed. "
                "You can view your prescription in your dashboard."
            ),
            type=NOTIFICATION_TYPE_SUCCESS,
            action_type="appointment_completed",
        ),
    )
    deliver(
        session,
        resolve_owning_user_id(doctor),
        _draft(
            appointment,
            target_role=ROLE_DOCTOR,
            title="Appointment Completed",
            message="Appointment has been marked as completed.",
            type=NOTIFICATION_TYPE_SUCCESS,
            action_type="appointment_completed",
        ),
    )


__all__ = [
    "trigger_appointment_approved",
    "trigger_appointment_cancelled",
    "trigger_appointment_completed",
    "trigger_appointment_created",
    "trigger_appointment_declined",
    "trigger_appointment_rescheduled",
    "trigger_appointment_started",
]
