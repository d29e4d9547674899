"""Notification triggers for prescriptions, lab orders and doctor ratings."""

from __future__ import annotations

from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import (
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    ROLE_ADMIN,
    ROLE_DOCTOR,
    ROLE_PATIENT,
    Doctor,
    DoctorRating,
    LabTestOrder,
    NotificationDraft,
    Patient,
    Prescription,
    resolve_owning_user_id,
)

from ..dispatcher import deliver, list_admin_user_ids
from ._common import doctor_name

ENTITY_PRESCRIPTION = "prescription"
ENTITY_LAB_ORDER = "lab_order"
ENTITY_RATING = "rating"


def trigger_prescription_created(
    session: Session,
    *,
    prescription: Prescription,
    patient: Patient | None,
    doctor: Doctor | None,
) -> None:
    deliver(
        session,
        resolve_owning_user_id(patient),
        NotificationDraft(
            target_role=ROLE_PATIENT,
            title="Prescription Ready",
            message=(
                f"Your prescription from {doctor_name(doctor)} is ready. "
                "View details in your dashboard."
            ),
            type=NOTIFICATION_TYPE_SUCCESS,
            action_type="prescription_created",
            entity_id=prescription.id,
            entity_type=ENTITY_PRESCRIPTION,
        ),
    )


def trigger_lab_order_created(
    session: Session, *, order: LabTestOrder, patient: Patient | None
) -> None:
    deliver(
        session,
        resolve_owning_user_id(patient),
        NotificationDraft(
            target_role=ROLE_PATIENT,
            title="Lab Test Order Placed",
            message=(
                f"Your lab test order #{order.id} has been placed. "
                "Complete payment to proceed."
            ),
            type=NOTIFICATION_TYPE_INFO,
            action_type="lab_order_created",
            entity_id=order.id,
            entity_type=ENTITY_LAB_ORDER,
        ),
    )


def trigger_lab_order_created_admin(session: Session, *, order: LabTestOrder) -> None:
    """Ask the administrators to process the samples of a new order."""

    admin_ids = list_admin_user_ids(session)
    if not admin_ids:
        return
    deliver(
        session,
        admin_ids,
        NotificationDraft(
            target_role=ROLE_ADMIN,
            title="New Lab Test Order",
            message=(
                f"New lab test order #{order.id} has been placed. "
                "Process samples and update status."
            ),
            type=NOTIFICATION_TYPE_INFO,
            action_type="lab_order_created",
            entity_id=order.id,
            entity_type=ENTITY_LAB_ORDER,
        ),
    )


def trigger_lab_results_ready(
    session: Session, *, order: LabTestOrder, patient: Patient | None
) -> None:
    deliver(
        session,
        resolve_owning_user_id(patient),
        NotificationDraft(
            target_role=ROLE_PATIENT,
            title="Lab Results Ready",
            message=f"Your lab test results for order #{order.id} are now available for review.",
            type=NOTIFICATION_TYPE_SUCCESS,
            action_type="lab_results_ready",
            entity_id=order.id,
            entity_type=ENTITY_LAB_ORDER,
        ),
    )


def trigger_prescription_lab_results_ready(
    session: Session,
    *,
    prescription: Prescription | None,
    patient: Patient | None,
    test_name: str | None = None,
) -> None:
    """Announce results of tests ordered as part of a prescription."""

    deliver(
        session,
        resolve_owning_user_id(patient),
        NotificationDraft(
            target_role=ROLE_PATIENT,
            title="Lab Results Ready",
            message=(
                f"Your lab test results for {test_name or 'prescription tests'} "
                "are now available for review."
            ),
            type=NOTIFICATION_TYPE_SUCCESS,
            action_type="lab_results_ready",
            entity_id=prescription.id if prescription is not None else None,
            entity_type=ENTITY_PRESCRIPTION,
        ),
    )


def trigger_doctor_rating_received(
    session: Session, *, rating: DoctorRating, doctor: Doctor | None
) -> None:
    doctor_user_id = resolve_owning_user_id(doctor)
    if not doctor_user_id:
        return
    review_note = " A review was also submitted." if rating.review else ""
    deliver(
        session,
        doctor_user_id,
        NotificationDraft(
            target_role=ROLE_DOCTOR,
            title="New Rating Received",
            message=f"You received a {rating.rating}-star rating.{review_note}",
            type=NOTIFICATION_TYPE_INFO,
            action_type="rating_received",
            entity_id=rating.id,
            entity_type=ENTITY_RATING,
        ),
    )


def trigger_doctor_rating_received_admin(session: Session, *, rating: DoctorRating) -> None:
    admin_ids = list_admin_user_ids(session)
    if not admin_ids:
        return
    deliver(
        session,
        admin_ids,
        NotificationDraft(
            target_role=ROLE_ADMIN,
            title="New Doctor Rating",
            message="A new doctor rating has been submitted. Review for moderation if needed.",
            type=NOTIFICATION_TYPE_INFO,
            action_type="rating_submitted",
            entity_id=rating.id,
            entity_type=ENTITY_RATING,
        ),
    )


__all__ = [
    "trigger_doctor_rating_received",
    "trigger_doctor_rating_received_admin",
    "trigger_lab_order_created",
    "trigger_lab_order_created_admin",
    "trigger_lab_results_ready",
    "trigger_prescription_created",
    "trigger_prescription_lab_results_ready",
]
