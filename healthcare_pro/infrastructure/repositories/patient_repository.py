"""Persistence layer for patient and doctor profiles."""

from __future__ import annotations

from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import Doctor, Patient
from healthcare_pro.infrastructure.models import DoctorModel, PatientModel

from .user_repository import user_to_entity


def patient_to_entity(model: PatientModel | None) -> Patient | None:
    if model is None:
        return None
    return Patient(
        id=model.id,
        user_id=model.user_id,
        user=user_to_entity(model.user) if model.user is not None else None,
    )


def doctor_to_entity(model: DoctorModel | None) -> Doctor | None:
    if model is None:
        return None
    return Doctor(
        id=model.id,
        user_id=model.user_id,
        user=user_to_entity(model.user) if model.user is not None else None,
        is_verified=bool(model.is_verified),
        department=model.department,
    )


class PatientRepository:
    """Provide read and create operations for patient profiles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, patient_id: int) -> Patient | None:
        return patient_to_entity(self.session.get(PatientModel, patient_id))

    def get_by_user_id(self, user_id: int) -> Patient | None:
        model = self.session.query(PatientModel).filter_by(user_id=user_id).first()
        return patient_to_entity(model)

    def create(self, patient: Patient) -> Patient:
        model = PatientModel(user_id=patient.user_id)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return patient_to_entity(model)


class DoctorRepository:
    """Provide read, create and verification operations for doctor profiles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, doctor_id: int) -> Doctor | None:
        return doctor_to_entity(self.session.get(DoctorModel, doctor_id))

    def get_by_user_id(self, user_id: int) -> Doctor | None:
        model = self.session.query(DoctorModel).filter_by(user_id=user_id).first()
        return doctor_to_entity(model)

    def create(self, doctor: Doctor) -> Doctor:
        model = DoctorModel(
            user_id=doctor.user_id,
            is_verified=doctor.is_verified,
            department=doctor.department,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return doctor_to_entity(model)

    def set_verified(self, doctor_id: int, is_verified: bool) -> Doctor:
        model = self.session.get(DoctorModel, doctor_id)
        if model is None:
            msg = f"Doctor with id {doctor_id} not found"
            raise ValueError(msg)
        model.is_verified = is_verified
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return doctor_to_entity(model)


__all__ = [
    "DoctorRepository",
    "PatientRepository",
    "doctor_to_entity",
    "patient_to_entity",
]
