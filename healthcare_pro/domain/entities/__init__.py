"""Domain entities exposed by the application."""

from .appointment import (
    APPOINTMENT_STATUS_CANCELLED,
    APPOINTMENT_STATUS_COMPLETED,
    APPOINTMENT_STATUS_CONFIRMED,
    APPOINTMENT_STATUS_DECLINED,
    APPOINTMENT_STATUS_IN_PROGRESS,
    APPOINTMENT_STATUS_SCHEDULED,
    UPCOMING_APPOINTMENT_STATUSES,
    Appointment,
)
from .clinical import (
    LAB_ORDER_STATUS_PENDING,
    LAB_ORDER_STATUS_RESULTS_READY,
    DoctorRating,
    LabTestOrder,
    Prescription,
)
from .medicine import (
    ALL_DAYS_OF_WEEK,
    Medicine,
    MedicineReminder,
    PatientReminderSettings,
)
from .notification import (
    NOTIFICATION_TYPE_ERROR,
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    NOTIFICATION_TYPE_WARNING,
    NOTIFICATION_TYPES,
    Notification,
    NotificationDraft,
    NotificationPage,
)
from .owning_user import HasOwningUser, resolve_owning_user_id
from .patient import Doctor, Patient
from .user import ROLE_ADMIN, ROLE_DOCTOR, ROLE_PATIENT, ROLES, User

__all__ = [
    "Appointment",
    "APPOINTMENT_STATUS_SCHEDULED",
    "APPOINTMENT_STATUS_CONFIRMED",
    "APPOINTMENT_STATUS_IN_PROGRESS",
    "APPOINTMENT_STATUS_COMPLETED",
    "APPOINTMENT_STATUS_CANCELLED",
    "APPOINTMENT_STATUS_DECLINED",
    "UPCOMING_APPOINTMENT_STATUSES",
    "DoctorRating",
    "LabTestOrder",
    "Prescription",
    "LAB_ORDER_STATUS_PENDING",
    "LAB_ORDER_STATUS_RESULTS_READY",
    "ALL_DAYS_OF_WEEK",
    "Medicine",
    "MedicineReminder",
    "PatientReminderSettings",
    "Notification",
    "NotificationDraft",
    "NotificationPage",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_INFO",
    "NOTIFICATION_TYPE_SUCCESS",
    "NOTIFICATION_TYPE_WARNING",
    "NOTIFICATION_TYPE_ERROR",
    "HasOwningUser",
    "resolve_owning_user_id",
    "Doctor",
    "Patient",
    "User",
    "ROLES",
    "ROLE_ADMIN",
    "ROLE_DOCTOR",
    "ROLE_PATIENT",
]
