"""ORM models used by the application infrastructure."""

from .user import UserModel
from .patient import DoctorModel, PatientModel
from .appointment import AppointmentModel
from .clinical import DoctorRatingModel, LabTestOrderModel, PrescriptionModel
from .medicine import MedicineModel, MedicineReminderModel, PatientReminderSettingsModel
from .notification import NotificationModel

__all__ = [
    "UserModel",
    "PatientModel",
    "DoctorModel",
    "AppointmentModel",
    "PrescriptionModel",
    "LabTestOrderModel",
    "DoctorRatingModel",
    "MedicineModel",
    "MedicineReminderModel",
    "PatientReminderSettingsModel",
    "NotificationModel",
]
