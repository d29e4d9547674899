"""Persistence layer for appointments."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import Appointment
from healthcare_pro.infrastructure.models import AppointmentModel
from healthcare_pro.utils import parse_clock_time

from .patient_repository import doctor_to_entity, patient_to_entity


class AppointmentRepository:
    """Provide CRUD operations for :class:`Appointment` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, appointment_id: int) -> Appointment | None:
        model = self.session.get(AppointmentModel, appointment_id)
        return self._to_entity(model) if model else None

    def list_for_day(self, day: date, *, statuses: Sequence[str]) -> list[Appointment]:
        """Return the appointments on ``day`` whose status is one of ``statuses``."""

        query = (
            self.session.query(AppointmentModel)
            .filter(AppointmentModel.appointment_date == day)
            .filter(AppointmentModel.status.in_(list(statuses)))
            .order_by(AppointmentModel.appointment_time, AppointmentModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, appointment: Appointment) -> Appointment:
        model = AppointmentModel()
        self._apply_entity_to_model(model, appointment)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, appointment: Appointment) -> Appointment:
        model = self.session.get(AppointmentModel, appointment.id) if appointment.id else None
        if model is None:
            msg = f"Appointment with id {appointment.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, appointment)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: AppointmentModel, appointment: Appointment) -> None:
        model.patient_id = appointment.patient_id
        model.doctor_id = appointment.doctor_id
        model.appointment_date = appointment.appointment_date
        model.appointment_time = parse_clock_time(appointment.appointment_time)
        model.status = appointment.status
        model.reason = appointment.reason

    @staticmethod
    def _to_entity(model: AppointmentModel) -> Appointment:
        return Appointment(
            id=model.id,
            patient_id=model.patient_id,
            doctor_id=model.doctor_id,
            appointment_date=model.appointment_date,
            appointment_time=model.appointment_time,
            status=model.status,
            reason=model.reason,
            patient=patient_to_entity(model.patient),
            doctor=doctor_to_entity(model.doctor),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["AppointmentRepository"]
