"""Aggregate application use cases."""

from .appointments import (
    approve_appointment,
    cancel_appointment,
    complete_appointment,
    create_appointment,
    decline_appointment,
    reschedule_appointment,
    start_appointment,
)
from .clinical import (
    confirm_prescription_lab_results,
    create_lab_order,
    create_prescription,
    mark_lab_results_ready,
    rate_doctor,
)
from .users import deactivate_user, register_user, set_doctor_verification

__all__ = [
    "approve_appointment",
    "cancel_appointment",
    "complete_appointment",
    "confirm_prescription_lab_results",
    "create_appointment",
    "create_lab_order",
    "create_prescription",
    "deactivate_user",
    "decline_appointment",
    "mark_lab_results_ready",
    "rate_doctor",
    "register_user",
    "reschedule_appointment",
    "set_doctor_verification",
    "start_appointment",
]
