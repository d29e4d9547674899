"""Domain entities for prescriptions, lab test orders and doctor ratings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

LAB_ORDER_STATUS_PENDING = "pending"
LAB_ORDER_STATUS_RESULTS_READY = "results_ready"


@dataclass
class Prescription:
    """Prescription issued by a doctor, usually at the end of an appointment."""

    id: int | None
    patient_id: int
    doctor_id: int
    appointment_id: int | None = None
    notes: str | None = None
    created_at: datetime | None = None


@dataclass
class LabTestOrder:
    """Order of one or more lab tests placed for a patient."""

    id: int | None
    patient_id: int
    status: str = LAB_ORDER_STATUS_PENDING
    created_at: datetime | None = None


@dataclass
class DoctorRating:
    """Star rating (and optional review) left by a patient for a doctor."""

    id: int | None
    doctor_id: int
    patient_id: int
    rating: int
    review: str | None = None
    created_at: datetime | None = None


__all__ = [
    "DoctorRating",
    "LabTestOrder",
    "Prescription",
    "LAB_ORDER_STATUS_PENDING",
    "LAB_ORDER_STATUS_RESULTS_READY",
]
