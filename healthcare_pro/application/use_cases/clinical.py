"""Use cases for prescriptions, lab test orders and doctor ratings."""

from __future__ import annotations

from sqlalchemy.orm import Session

from healthcare_pro.application.use_cases.notifications import TriggerRunner
from healthcare_pro.application.use_cases.notifications.triggers import (
    trigger_doctor_rating_received,
    trigger_doctor_rating_received_admin,
    trigger_lab_order_created,
    trigger_lab_order_created_admin,
    trigger_lab_results_ready,
    trigger_prescription_created,
    trigger_prescription_lab_results_ready,
)
from healthcare_pro.domain.entities import (
    LAB_ORDER_STATUS_PENDING,
    LAB_ORDER_STATUS_RESULTS_READY,
    Doctor,
    DoctorRating,
    LabTestOrder,
    Patient,
    Prescription,
)
from healthcare_pro.infrastructure.repositories import (
    DoctorRatingRepository,
    DoctorRepository,
    LabTestOrderRepository,
    PatientRepository,
    PrescriptionRepository,
)


def _require_patient(session: Session, patient_id: int) -> Patient:
    patient = PatientRepository(session).get(patient_id)
    if patient is None:
        raise ValueError("Patient not found")
    return patient


def _require_doctor(session: Session, doctor_id: int) -> Doctor:
    doctor = DoctorRepository(session).get(doctor_id)
    if doctor is None:
        raise ValueError("Doctor not found")
    return doctor


def create_prescription(
    session: Session,
    *,
    events: TriggerRunner,
    patient_id: int,
    doctor_id: int,
    appointment_id: int | None = None,
    notes: str | None = None,
) -> Prescription:
    patient = _require_patient(session, patient_id)
    doctor = _require_doctor(session, doctor_id)
    prescription = PrescriptionRepository(session).create(
        Prescription(
            id=None,
            patient_id=patient_id,
            doctor_id=doctor_id,
            appointment_id=appointment_id,
            notes=notes,
        )
    )
    events.submit(
        trigger_prescription_created,
        prescription=prescription,
        patient=patient,
        doctor=doctor,
    )
    return prescription


def confirm_prescription_lab_results(
    session: Session,
    prescription_id: int,
    *,
    events: TriggerRunner,
    test_name: str | None = None,
) -> Prescription:
    """Announce that the results of tests requested on a prescription are in."""

    prescription = PrescriptionRepository(session).get(prescription_id)
    if prescription is None:
        raise ValueError("Prescription not found")
    patient = _require_patient(session, prescription.patient_id)
    events.submit(
        trigger_prescription_lab_results_ready,
        prescription=prescription,
        patient=patient,
        test_name=test_name,
    )
    return prescription


def create_lab_order(session: Session, *, events: TriggerRunner, patient_id: int) -> LabTestOrder:
    patient = _require_patient(session, patient_id)
    order = LabTestOrderRepository(session).create(
        LabTestOrder(id=None, patient_id=patient_id, status=LAB_ORDER_STATUS_PENDING)
    )
    events.submit(trigger_lab_order_created, order=order, patient=patient)
    events.submit(trigger_lab_order_created_admin, order=order)
    return order


def mark_lab_results_ready(session: Session, order_id: int, *, events: TriggerRunner) -> LabTestOrder:
    repository = LabTestOrderRepository(session)
    if repository.get(order_id) is None:
        raise ValueError("Lab test order not found")
    order = repository.update_status(order_id, LAB_ORDER_STATUS_RESULTS_READY)
    patient = PatientRepository(session).get(order.patient_id)
    events.submit(trigger_lab_results_ready, order=order, patient=patient)
    return order


def rate_doctor(
    session: Session,
    *,
    events: TriggerRunner,
    doctor_id: int,
    patient_id: int,
    rating: int,
    review: str | None = None,
) -> DoctorRating:
    if not 1 <= rating <= 5:
        raise ValueError("Rating must be between 1 and 5")
    doctor = _require_doctor(session, doctor_id)
    _require_patient(session, patient_id)
    saved = DoctorRatingRepository(session).create(
        DoctorRating(
            id=None,
            doctor_id=doctor_id,
            patient_id=patient_id,
            rating=rating,
            review=review,
        )
    )
    events.submit(trigger_doctor_rating_received, rating=saved, doctor=doctor)
    events.submit(trigger_doctor_rating_received_admin, rating=saved)
    return saved


__all__ = [
    "confirm_prescription_lab_results",
    "create_lab_order",
    "create_prescription",
    "mark_lab_results_ready",
    "rate_doctor",
]
