"""Use case for self-registration of patients and doctors."""

from sqlalchemy.orm import Session

from healthcare_pro.application.use_cases.notifications import TriggerRunner
from healthcare_pro.application.use_cases.notifications.triggers import (
    trigger_doctor_verification_request,
    trigger_new_user_registration,
    trigger_welcome_doctor,
    trigger_welcome_patient,
)
from healthcare_pro.domain.entities import ROLE_DOCTOR, Doctor, Patient, User
from healthcare_pro.infrastructure.repositories import (
    DoctorRepository,
    PatientRepository,
    UserRepository,
)
from healthcare_pro.infrastructure.security import get_password_hash

from .validators import ensure_registration_role, normalize_email


def register_user(
    session: Session,
    *,
    events: TriggerRunner,
    email: str,
    password: str,
    first_name: str | None = None,
    last_name: str | None = None,
    role: str | None = None,
    department: str | None = None,
) -> User:
    """Create the account and its role profile, then announce the registration."""

    email = normalize_email(email)
    role = ensure_registration_role(role)
    if not password:
        raise ValueError("A password is required")

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ValueError("User already exists with this email")

    user = repository.create(
        User(
            id=None,
            email=email,
            first_name=first_name,
            last_name=last_name,
            role=role,
            is_active=True,
            password=get_password_hash(password),
        )
    )
    if role == ROLE_DOCTOR:
        DoctorRepository(session).create(
            Doctor(id=None, user_id=user.id, department=department)
        )
    else:
        PatientRepository(session).create(Patient(id=None, user_id=user.id))

    events.submit(trigger_new_user_registration, user=user)
    if role == ROLE_DOCTOR:
        events.submit(trigger_welcome_doctor, user=user)
        events.submit(trigger_doctor_verification_request)
    else:
        events.submit(trigger_welcome_patient, user=user)
    return user
