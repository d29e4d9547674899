"""SQLAlchemy model for appointments."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text, Time, func
from sqlalchemy.orm import relationship

from healthcare_pro.infrastructure.database import Base


class AppointmentModel(Base):
    """Database representation of a booked appointment."""

    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.id"), nullable=False, index=True)
    appointment_date = Column(Date, nullable=False, index=True)
    appointment_time = Column(Time, nullable=True)
    status = Column(String(20), nullable=False, default="scheduled", index=True)
    reason = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())

    patient = relationship("PatientModel", lazy="joined")
    doctor = relationship("DoctorModel", lazy="joined")


__all__ = ["AppointmentModel"]
