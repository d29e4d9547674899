"""Tests for the domain use cases that announce their changes."""

from __future__ import annotations

from datetime import date, time

import pytest

from healthcare_pro.application.use_cases import (
    approve_appointment,
    cancel_appointment,
    complete_appointment,
    confirm_prescription_lab_results,
    create_appointment,
    create_lab_order,
    create_prescription,
    deactivate_user,
    decline_appointment,
    mark_lab_results_ready,
    rate_doctor,
    register_user,
    reschedule_appointment,
    set_doctor_verification,
    start_appointment,
)
from healthcare_pro.application.use_cases import appointments as appointment_use_cases
from healthcare_pro.infrastructure.repositories import (
    AppointmentRepository,
    NotificationRepository,
    UserRepository,
)


def _actions(session, user_id):
    return [n.action_type for n in NotificationRepository(session).list_for_user(user_id).items]


def test_register_patient_welcomes_and_alerts_admins(session, events, make_admin) -> None:
    admin = make_admin()

    user = register_user(
        session,
        events=events,
        email=" New.Patient@Example.com ",
        password="s3cret!",
        first_name="New",
        last_name="Patient",
    )

    assert user.email == "new.patient@example.com"
    assert user.role == "patient"
    assert user.password != "s3cret!"
    assert _actions(session, user.id) == ["user_registered"]
    [admin_note] = NotificationRepository(session).list_for_user(admin.id).items
    assert admin_note.title == "New Patient Registered"


def test_register_doctor_requests_verification(session, events, make_admin) -> None:
    admin = make_admin()

    user = register_user(
        session, events=events, email="doc@example.com", password="pw", role="doctor"
    )

    welcome = NotificationRepository(session).list_for_user(user.id).items
    assert [n.title for n in welcome] == ["Welcome, Doctor!"]
    assert sorted(_actions(session, admin.id)) == [
        "doctor_verification_request",
        "user_registered",
    ]


@pytest.mark.parametrize(
    ("email", "role"),
    [("not-an-email", "patient"), ("ok@example.com", "admin")],
)
def test_register_rejects_invalid_input(session, events, email, role) -> None:
    with pytest.raises(ValueError):
        register_user(session, events=events, email=email, password="pw", role=role)


def test_register_rejects_duplicate_email(session, events, make_user) -> None:
    existing = make_user()

    with pytest.raises(ValueError):
        register_user(session, events=events, email=existing.email, password="pw")


def test_deactivate_user_alerts_admins(session, events, make_admin, make_user) -> None:
    admin = make_admin()
    user = make_user()

    deactivated = deactivate_user(session, user.id, events=events)

    assert deactivated.is_active is False
    assert UserRepository(session).get(user.id).is_active is False
    assert _actions(session, admin.id) == ["user_deactivated"]


def test_doctor_verification_notifies_the_doctor(session, events, make_doctor) -> None:
    doctor = make_doctor()

    verified = set_doctor_verification(session, doctor.id, is_verified=True, events=events)

    assert verified.is_verified is True
    assert _actions(session, doctor.user_id) == ["doctor_verification_changed"]


def _book(session, events, patient, doctor):
    return create_appointment(
        session,
        events=events,
        patient_id=patient.id,
        doctor_id=doctor.id,
        appointment_date=date(2026, 10, 21),
        appointment_time=time(10, 30),
        reason="Checkup",
    )


def test_appointment_lifecycle_notifications(session, events, make_patient, make_doctor) -> None:
    patient = make_patient()
    doctor = make_doctor()

    appointment = _book(session, events, patient, doctor)
    assert appointment.status == "scheduled"
    assert _actions(session, patient.user_id) == ["appointment_created"]
    assert _actions(session, doctor.user_id) == ["appointment_request_received"]

    approve_appointment(session, appointment.id, events=events)
    start_appointment(session, appointment.id, events=events)
    completed = complete_appointment(session, appointment.id, events=events)

    assert completed.status == "completed"
    assert set(_actions(session, patient.user_id)) >= {
        "appointment_created",
        "appointment_approved",
        "appointment_completed",
    }
    with pytest.raises(ValueError):
        cancel_appointment(
            session, appointment.id, cancelled_by_role="patient", events=events
        )


def test_decline_and_reschedule(session, events, make_patient, make_doctor) -> None:
    patient = make_patient()
    doctor = make_doctor()
    first = _book(session, events, patient, doctor)
    second = _book(session, events, patient, doctor)

    declined = decline_appointment(session, first.id, events=events)
    moved = reschedule_appointment(
        session, second.id, appointment_date=date(2026, 10, 23), events=events
    )

    assert declined.status == "declined"
    assert moved.appointment_date == date(2026, 10, 23)
    assert moved.appointment_time == time(10, 30)
    actions = _actions(session, patient.user_id)
    assert "appointment_declined" in actions
    assert "appointment_rescheduled" in actions


def test_cancel_by_doctor_notifies_only_the_patient(
    session, events, make_patient, make_doctor
) -> None:
    patient = make_patient()
    doctor = make_doctor()
    appointment = _book(session, events, patient, doctor)

    cancel_appointment(session, appointment.id, cancelled_by_role="doctor", events=events)

    assert _actions(session, patient.user_id)[0] == "appointment_cancelled"
    assert "appointment_cancelled" not in _actions(session, doctor.user_id)


def test_trigger_failure_does_not_undo_the_booking(
    session, events, trigger_errors, make_patient, make_doctor, monkeypatch
) -> None:
    patient = make_patient()
    doctor = make_doctor()

    def broken_trigger(trigger_session, **kwargs):
        raise RuntimeError("notification store down")

    monkeypatch.setattr(appointment_use_cases, "trigger_appointment_created", broken_trigger)

    appointment = _book(session, events, patient, doctor)

    assert AppointmentRepository(session).get(appointment.id) is not None
    assert [name for name, _ in trigger_errors] == ["broken_trigger"]
    assert _actions(session, patient.user_id) == []


def test_unknown_appointment_raises(session, events) -> None:
    with pytest.raises(ValueError):
        approve_appointment(session, 999, events=events)


def test_clinical_use_cases(session, events, make_patient, make_doctor, make_admin) -> None:
    patient = make_patient()
    doctor = make_doctor()
    admin = make_admin()

    prescription = create_prescription(
        session, events=events, patient_id=patient.id, doctor_id=doctor.id
    )
    confirm_prescription_lab_results(
        session, prescription.id, events=events, test_name="CBC"
    )
    order = create_lab_order(session, events=events, patient_id=patient.id)
    ready = mark_lab_results_ready(session, order.id, events=events)
    rating = rate_doctor(
        session, events=events, doctor_id=doctor.id, patient_id=patient.id, rating=4
    )

    assert ready.status == "results_ready"
    assert rating.rating == 4
    assert sorted(_actions(session, patient.user_id)) == [
        "lab_order_created",
        "lab_results_ready",
        "lab_results_ready",
        "prescription_created",
    ]
    assert _actions(session, doctor.user_id) == ["rating_received"]
    assert sorted(_actions(session, admin.id)) == ["lab_order_created", "rating_submitted"]


def test_rating_must_be_between_one_and_five(session, events, make_patient, make_doctor) -> None:
    patient = make_patient()
    doctor = make_doctor()

    with pytest.raises(ValueError):
        rate_doctor(session, events=events, doctor_id=doctor.id, patient_id=patient.id, rating=6)
