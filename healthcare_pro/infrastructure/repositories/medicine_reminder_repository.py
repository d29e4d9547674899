"""Persistence layer for medicines, medicine reminders and reminder settings."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import (
    ALL_DAYS_OF_WEEK,
    Medicine,
    MedicineReminder,
    PatientReminderSettings,
)
from healthcare_pro.infrastructure.models import (
    MedicineModel,
    MedicineReminderModel,
    PatientReminderSettingsModel,
)
from healthcare_pro.utils import parse_clock_time

from .patient_repository import patient_to_entity


class MedicineReminderRepository:
    """Provide the queries and updates used by the medicine reminder job."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create_medicine(self, medicine: Medicine) -> Medicine:
        model = MedicineModel(
            patient_id=medicine.patient_id,
            medicine_name=medicine.medicine_name,
            dosage=medicine.dosage,
            is_active=medicine.is_active,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._medicine_to_entity(model)

    def create(self, reminder: MedicineReminder) -> MedicineReminder:
        reminder_time = parse_clock_time(reminder.reminder_time)
        if reminder_time is None:
            msg = f"Invalid reminder time {reminder.reminder_time!r}"
            raise ValueError(msg)
        model = MedicineReminderModel(
            medicine_id=reminder.medicine_id,
            patient_id=reminder.patient_id,
            reminder_time=reminder_time,
            days_of_week=list(reminder.days_of_week),
            is_active=reminder.is_active,
            next_trigger=reminder.next_trigger,
            last_triggered=reminder.last_triggered,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, reminder_id: int) -> MedicineReminder | None:
        model = self.session.get(MedicineReminderModel, reminder_id)
        return self._to_entity(model) if model else None

    def list_candidates(self, now: datetime) -> list[MedicineReminder]:
        """Return active reminders of active medicines that are due or unscheduled."""

        query = (
            self.session.query(MedicineReminderModel)
            .join(MedicineModel, MedicineReminderModel.medicine_id == MedicineModel.id)
            .filter(MedicineReminderModel.is_active.is_(True))
            .filter(MedicineModel.is_active.is_(True))
            .filter(
                or_(
                    MedicineReminderModel.next_trigger <= now,
                    MedicineReminderModel.next_trigger.is_(None),
                )
            )
            .order_by(MedicineReminderModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def record_trigger(
        self, reminder_id: int, *, triggered_at: datetime, next_trigger: datetime | None
    ) -> None:
        model = self.session.get(MedicineReminderModel, reminder_id)
        if model is None:
            msg = f"Medicine reminder with id {reminder_id} not found"
            raise ValueError(msg)
        model.last_triggered = triggered_at
        model.next_trigger = next_trigger
        self.session.add(model)
        self.session.commit()

    def get_settings(self, patient_id: int) -> PatientReminderSettings | None:
        model = (
            self.session.query(PatientReminderSettingsModel)
            .filter_by(patient_id=patient_id)
            .first()
        )
        if model is None:
            return None
        return PatientReminderSettings(
            id=model.id,
            patient_id=model.patient_id,
            notification_enabled=bool(model.notification_enabled),
        )

    def save_settings(self, settings: PatientReminderSettings) -> PatientReminderSettings:
        model = (
            self.session.query(PatientReminderSettingsModel)
            .filter_by(patient_id=settings.patient_id)
            .first()
        ) or PatientReminderSettingsModel(patient_id=settings.patient_id)
        model.notification_enabled = settings.notification_enabled
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return PatientReminderSettings(
            id=model.id,
            patient_id=model.patient_id,
            notification_enabled=bool(model.notification_enabled),
        )

    @staticmethod
    def _medicine_to_entity(model: MedicineModel) -> Medicine:
        return Medicine(
            id=model.id,
            patient_id=model.patient_id,
            medicine_name=model.medicine_name,
            dosage=model.dosage,
            is_active=bool(model.is_active),
        )

    @classmethod
    def _to_entity(cls, model: MedicineReminderModel) -> MedicineReminder:
        days = model.days_of_week
        return MedicineReminder(
            id=model.id,
            medicine_id=model.medicine_id,
            patient_id=model.patient_id,
            reminder_time=model.reminder_time,
            days_of_week=list(days) if isinstance(days, list) else list(ALL_DAYS_OF_WEEK),
            is_active=bool(model.is_active),
            next_trigger=model.next_trigger,
            last_triggered=model.last_triggered,
            medicine=cls._medicine_to_entity(model.medicine) if model.medicine else None,
            patient=patient_to_entity(model.patient),
        )


__all__ = ["MedicineReminderRepository"]
