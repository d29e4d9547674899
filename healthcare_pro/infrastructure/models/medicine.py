"""SQLAlchemy models for medicines, medicine reminders and reminder settings."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Time
from sqlalchemy.orm import relationship

from healthcare_pro.infrastructure.database import Base


class MedicineModel(Base):
    """Database representation of a medicine taken by a patient."""

    __tablename__ = "medicines"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)
    medicine_name = Column(String(120), nullable=False)
    dosage = Column(String(60), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)


class MedicineReminderModel(Base):
    """Database representation of a recurring medicine reminder."""

    __tablename__ = "medicine_reminders"

    id = Column(Integer, primary_key=True, index=True)
    medicine_id = Column(Integer, ForeignKey("medicines.id"), nullable=False, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)
    reminder_time = Column(Time, nullable=False)
    days_of_week = Column(JSON, nullable=False, default=lambda: [0, 1, 2, 3, 4, 5, 6])
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    next_trigger = Column(DateTime, nullable=True, index=True)
    last_triggered = Column(DateTime, nullable=True)

    medicine = relationship("MedicineModel", lazy="joined")
    patient = relationship("PatientModel", lazy="joined")


class PatientReminderSettingsModel(Base):
    """Database representation of the reminder switches of a patient."""

    __tablename__ = "patient_reminder_settings"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(
        Integer, ForeignKey("patients.id"), nullable=False, unique=True, index=True
    )
    notification_enabled = Column(Boolean, nullable=False, default=True)


__all__ = ["MedicineModel", "MedicineReminderModel", "PatientReminderSettingsModel"]
