"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from healthcare_pro.infrastructure.database import Base


class UserModel(Base):
    """Database representation of an account holder."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=True)
    first_name = Column(String(60), nullable=True)
    last_name = Column(String(60), nullable=True)
    role = Column(String(20), nullable=False, default="patient", index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())


__all__ = ["UserModel"]
