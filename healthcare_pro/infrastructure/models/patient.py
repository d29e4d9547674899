"""SQLAlchemy models for patient and doctor profiles."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from healthcare_pro.infrastructure.database import Base


class PatientModel(Base):
    """Database representation of a patient profile."""

    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )

    user = relationship("UserModel", lazy="joined")


class DoctorModel(Base):
    """Database representation of a doctor profile."""

    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True
    )
    is_verified = Column(Boolean, nullable=False, default=False)
    department = Column(String(100), nullable=True)

    user = relationship("UserModel", lazy="joined")


__all__ = ["DoctorModel", "PatientModel"]
