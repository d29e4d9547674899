"""Repository implementations for infrastructure layer."""

from .appointment_repository import AppointmentRepository
from .clinical_repository import (
    DoctorRatingRepository,
    LabTestOrderRepository,
    PrescriptionRepository,
)
from .medicine_reminder_repository import MedicineReminderRepository
from .notification_repository import NotificationRepository
from .patient_repository import DoctorRepository, PatientRepository
from .user_repository import UserRepository

__all__ = [
    "AppointmentRepository",
    "DoctorRatingRepository",
    "DoctorRepository",
    "LabTestOrderRepository",
    "MedicineReminderRepository",
    "NotificationRepository",
    "PatientRepository",
    "PrescriptionRepository",
    "UserRepository",
]
