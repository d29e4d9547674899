"""Notification triggers for registrations and administrative account actions."""

from __future__ import annotations

from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import (
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    NOTIFICATION_TYPE_WARNING,
    ROLE_ADMIN,
    ROLE_DOCTOR,
    ROLE_PATIENT,
    Doctor,
    NotificationDraft,
    User,
    resolve_owning_user_id,
)

from ..dispatcher import deliver, list_admin_user_ids

ENTITY_USER = "user"
ENTITY_DOCTOR = "doctor"


def trigger_new_user_registration(session: Session, *, user: User) -> None:
    """Tell the administrators that a patient or doctor signed up."""

    admin_ids = list_admin_user_ids(session)
    if not admin_ids:
        return
    role_label = ROLE_DOCTOR if user.has_role(ROLE_DOCTOR) else ROLE_PATIENT
    deliver(
        session,
        admin_ids,
        NotificationDraft(
            target_role=ROLE_ADMIN,
            title=f"New {role_label.capitalize()} Registered",
            message=f"{user.display_name()} has registered as a {role_label}.",
            type=NOTIFICATION_TYPE_INFO,
            action_type="user_registered",
            entity_id=user.id,
            entity_type=ENTITY_USER,
        ),
    )


def trigger_user_deactivated(session: Session, *, user: User) -> None:
    admin_ids = list_admin_user_ids(session)
    if not admin_ids:
        return
    deliver(
        session,
        admin_ids,
        NotificationDraft(
            target_role=ROLE_ADMIN,
            title="User Deactivated",
            message=f"User {user.display_name()} ({user.role}) has been deactivated.",
            type=NOTIFICATION_TYPE_WARNING,
            action_type="user_deactivated",
            entity_id=user.id,
            entity_type=ENTITY_USER,
        ),
    )


def trigger_doctor_verification_request(session: Session) -> None:
    admin_ids = list_admin_user_ids(session)
    if not admin_ids:
        return
    deliver(
        session,
        admin_ids,
        NotificationDraft(
            target_role=ROLE_ADMIN,
            title="New Doctor Verification Request",
            message="A new doctor has requested verification. Review in the admin dashboard.",
            type=NOTIFICATION_TYPE_INFO,
            action_type="doctor_verification_request",
        ),
    )


def trigger_doctor_verified(session: Session, *, doctor: Doctor, is_verified: bool) -> None:
    """Tell the doctor that their verification was granted or reverted."""

    doctor_user_id = resolve_owning_user_id(doctor)
    if not doctor_user_id:
        return
    if is_verified:
        draft = NotificationDraft(
            target_role=ROLE_DOCTOR,
            title="Account Verified",
            message=(
                "Your doctor account has been verified. "
                "You can now receive appointment requests."
            ),
            type=NOTIFICATION_TYPE_SUCCESS,
            action_type="doctor_verification_changed",
            entity_id=doctor.id,
            entity_type=ENTITY_DOCTOR,
        )
    else:
        draft = NotificationDraft(
            target_role=ROLE_DOCTOR,
            title="Verification Reverted",
            message="Your doctor verification has been reverted. Contact admin for details.",
            type=NOTIFICATION_TYPE_WARNING,
            action_type="doctor_verification_changed",
            entity_id=doctor.id,
            entity_type=ENTITY_DOCTOR,
        )
    deliver(session, doctor_user_id, draft)


def trigger_welcome_patient(session: Session, *, user: User) -> None:
    deliver(
        session,
        user.id,
        NotificationDraft(
            target_role=ROLE_PATIENT,
            title="Welcome to HealthCare Pro!",
            message=(
                "Thank you for joining. Your account has been created. "
                "Book appointments and manage your health easily."
            ),
            type=NOTIFICATION_TYPE_SUCCESS,
            action_type="user_registered",
        ),
    )


def trigger_welcome_doctor(session: Session, *, user: User) -> None:
    deliver(
        session,
        user.id,
        NotificationDraft(
            target_role=ROLE_DOCTOR,
            title="Welcome, Doctor!",
            message=(
                "Your account has been created. Complete your profile and submit "
                "for verification to start receiving appointments."
            ),
            type=NOTIFICATION_TYPE_SUCCESS,
            action_type="user_registered",
        ),
    )


__all__ = [
    "trigger_doctor_verification_request",
    "trigger_doctor_verified",
    "trigger_new_user_registration",
    "trigger_user_deactivated",
    "trigger_welcome_doctor",
    "trigger_welcome_patient",
]
