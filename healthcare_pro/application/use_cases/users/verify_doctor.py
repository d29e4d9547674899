"""Use case for granting or reverting a doctor's verification."""

from sqlalchemy.orm import Session

from healthcare_pro.application.use_cases.notifications import TriggerRunner
from healthcare_pro.application.use_cases.notifications.triggers import (
    trigger_doctor_verified,
)
from healthcare_pro.domain.entities import Doctor
from healthcare_pro.infrastructure.repositories import DoctorRepository


def set_doctor_verification(
    session: Session, doctor_id: int, *, is_verified: bool, events: TriggerRunner
) -> Doctor:
    doctor = DoctorRepository(session).set_verified(doctor_id, is_verified)
    events.submit(trigger_doctor_verified, doctor=doctor, is_verified=is_verified)
    return doctor
