"""Persistence layer for prescriptions, lab test orders and doctor ratings."""

from __future__ import annotations

from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import DoctorRating, LabTestOrder, Prescription
from healthcare_pro.infrastructure.models import (
    DoctorRatingModel,
    LabTestOrderModel,
    PrescriptionModel,
)


class PrescriptionRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, prescription_id: int) -> Prescription | None:
        model = self.session.get(PrescriptionModel, prescription_id)
        return self._to_entity(model) if model else None

    def create(self, prescription: Prescription) -> Prescription:
        model = PrescriptionModel(
            patient_id=prescription.patient_id,
            doctor_id=prescription.doctor_id,
            appointment_id=prescription.appointment_id,
            notes=prescription.notes,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: PrescriptionModel) -> Prescription:
        return Prescription(
            id=model.id,
            patient_id=model.patient_id,
            doctor_id=model.doctor_id,
            appointment_id=model.appointment_id,
            notes=model.notes,
            created_at=model.created_at,
        )


class LabTestOrderRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, order_id: int) -> LabTestOrder | None:
        model = self.session.get(LabTestOrderModel, order_id)
        return self._to_entity(model) if model else None

    def create(self, order: LabTestOrder) -> LabTestOrder:
        model = LabTestOrderModel(patient_id=order.patient_id, status=order.status)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(self, order_id: int, status: str) -> LabTestOrder:
        model = self.session.get(LabTestOrderModel, order_id)
        if model is None:
            msg = f"Lab test order with id {order_id} not found"
            raise ValueError(msg)
        model.status = status
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: LabTestOrderModel) -> LabTestOrder:
        return LabTestOrder(
            id=model.id,
            patient_id=model.patient_id,
            status=model.status,
            created_at=model.created_at,
        )


class DoctorRatingRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, rating: DoctorRating) -> DoctorRating:
        model = DoctorRatingModel(
            doctor_id=rating.doctor_id,
            patient_id=rating.patient_id,
            rating=rating.rating,
            review=rating.review,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return DoctorRating(
            id=model.id,
            doctor_id=model.doctor_id,
            patient_id=model.patient_id,
            rating=model.rating,
            review=model.review,
            created_at=model.created_at,
        )


__all__ = ["DoctorRatingRepository", "LabTestOrderRepository", "PrescriptionRepository"]
