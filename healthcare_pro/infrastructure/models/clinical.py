"""SQLAlchemy models for prescriptions, lab test orders and doctor ratings."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from healthcare_pro.infrastructure.database import Base


class PrescriptionModel(Base):
    """Database representation of a prescription."""

    __tablename__ = "prescriptions"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.id"), nullable=False, index=True)
    appointment_id = Column(Integer, ForeignKey("appointments.id"), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class LabTestOrderModel(Base):
    """Database representation of a lab test order."""

    __tablename__ = "lab_test_orders"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)
    status = Column(String(30), nullable=False, default="pending")
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class DoctorRatingModel(Base):
    """Database representation of a doctor rating."""

    __tablename__ = "doctor_ratings"

    id = Column(Integer, primary_key=True, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.id"), nullable=False, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    review = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["DoctorRatingModel", "LabTestOrderModel", "PrescriptionModel"]
