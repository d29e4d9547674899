"""Catalog of notification triggers, one per domain event."""

from .accounts import (
    trigger_doctor_verification_request,
    trigger_doctor_verified,
    trigger_new_user_registration,
    trigger_user_deactivated,
    trigger_welcome_doctor,
    trigger_welcome_patient,
)
from .appointments import (
    trigger_appointment_approved,
    trigger_appointment_cancelled,
    trigger_appointment_completed,
    trigger_appointment_created,
    trigger_appointment_declined,
    trigger_appointment_rescheduled,
    trigger_appointment_started,
)
from .clinical import (
    trigger_doctor_rating_received,
    trigger_doctor_rating_received_admin,
    trigger_lab_order_created,
    trigger_lab_order_created_admin,
    trigger_lab_results_ready,
    trigger_prescription_created,
    trigger_prescription_lab_results_ready,
)
from .reminders import trigger_daily_appointment_reminders, trigger_medicine_reminder

__all__ = [
    "trigger_appointment_approved",
    "trigger_appointment_cancelled",
    "trigger_appointment_completed",
    "trigger_appointment_created",
    "trigger_appointment_declined",
    "trigger_appointment_rescheduled",
    "trigger_appointment_started",
    "trigger_daily_appointment_reminders",
    "trigger_doctor_rating_received",
    "trigger_doctor_rating_received_admin",
    "trigger_doctor_verification_request",
    "trigger_doctor_verified",
    "trigger_lab_order_created",
    "trigger_lab_order_created_admin",
    "trigger_lab_results_ready",
    "trigger_medicine_reminder",
    "trigger_new_user_registration",
    "trigger_prescription_created",
    "trigger_prescription_lab_results_ready",
    "trigger_user_deactivated",
    "trigger_welcome_doctor",
    "trigger_welcome_patient",
]
