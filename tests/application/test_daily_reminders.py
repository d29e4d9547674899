"""Tests for the once-a-day appointment reminder."""

from __future__ import annotations

from datetime import date, datetime, time

import pytest

from healthcare_pro.application.use_cases.reminders import (
    DailyReminderState,
    run_daily_reminders,
)
from healthcare_pro.application.use_cases.reminders import daily_appointments
from healthcare_pro.domain.entities import Appointment
from healthcare_pro.infrastructure.repositories import (
    AppointmentRepository,
    NotificationRepository,
)

TODAY = date(2026, 10, 19)


@pytest.fixture()
def book(session):
    def _book(patient, doctor, *, at: time | None, day: date = TODAY, status="confirmed"):
        return AppointmentRepository(session).create(
            Appointment(
                id=None,
                patient_id=patient.id,
                doctor_id=doctor.id,
                appointment_date=day,
                appointment_time=at,
                status=status,
            )
        )

    return _book


def _inbox(session, user_id):
    return NotificationRepository(session).list_for_user(user_id).items


def test_reminders_are_aggregated_per_patient_and_doctor(
    session, session_factory, make_patient, make_doctor, book
) -> None:
    single = make_patient()
    busy = make_patient()
    doctor = make_doctor(first_name="Ada", last_name="Lovelace")
    other_doctor = make_doctor()
    book(single, doctor, at=time(9, 15))
    book(busy, doctor, at=time(10, 0), status="scheduled")
    book(busy, other_doctor, at=time(11, 0))
    book(busy, other_doctor, at=time(12, 0), status="cancelled")
    book(single, doctor, at=time(9, 0), day=date(2026, 10, 20))

    sent = run_daily_reminders(
        DailyReminderState(),
        session_factory=session_factory,
        now=datetime(2026, 10, 19, 7, 5),
        target_hour=7,
    )

    assert sent is True
    [single_note] = _inbox(session, single.user_id)
    assert single_note.title == "Today's Appointment Reminder"
    assert single_note.message == (
        "You have an appointment with Ada Lovelace today at 09:15. Please be on time."
    )
    assert single_note.action_type == "daily_appointment_reminder"

    [busy_note] = _inbox(session, busy.user_id)
    assert busy_note.message == "You have 2 appointments scheduled for today. Please be on time."

    [doctor_note] = _inbox(session, doctor.user_id)
    assert doctor_note.title == "Today's Appointments"
    assert doctor_note.message == "You have 2 appointments scheduled for today."
    [other_note] = _inbox(session, other_doctor.user_id)
    assert other_note.message == "You have 1 appointment scheduled for today."


def test_reminders_fire_once_per_day(
    session, session_factory, make_patient, make_doctor, book
) -> None:
    patient = make_patient()
    doctor = make_doctor()
    book(patient, doctor, at=time(9, 0))
    state = DailyReminderState()

    first = run_daily_reminders(
        state, session_factory=session_factory, now=datetime(2026, 10, 19, 7, 0), target_hour=7
    )
    second = run_daily_reminders(
        state, session_factory=session_factory, now=datetime(2026, 10, 19, 7, 59), target_hour=7
    )

    assert (first, second) == (True, False)
    assert state.last_reminder_date == TODAY
    assert len(_inbox(session, patient.user_id)) == 1


def test_nothing_happens_outside_the_target_hour(session_factory) -> None:
    state = DailyReminderState()

    assert not run_daily_reminders(
        state, session_factory=session_factory, now=datetime(2026, 10, 19, 8, 0), target_hour=7
    )
    assert state.last_reminder_date is None


def test_failed_sweep_clears_the_guard(session_factory, monkeypatch, caplog) -> None:
    def broken(session, *, today):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(daily_appointments, "trigger_daily_appointment_reminders", broken)
    state = DailyReminderState()

    sent = run_daily_reminders(
        state, session_factory=session_factory, now=datetime(2026, 10, 19, 7, 0), target_hour=7
    )

    assert sent is False
    assert state.last_reminder_date is None
    assert "Daily appointment reminders failed" in caplog.text


def test_guard_carries_over_from_a_previous_day(session_factory) -> None:
    state = DailyReminderState(last_reminder_date=date(2026, 10, 18))

    assert state.already_sent(date(2026, 10, 18))
    assert run_daily_reminders(
        state, session_factory=session_factory, now=datetime(2026, 10, 19, 7, 30), target_hour=7
    )


def test_next_poll_retries_after_a_failed_sweep(
    session, session_factory, make_patient, make_doctor, book, monkeypatch
) -> None:
    patient = make_patient()
    doctor = make_doctor()
    book(patient, doctor, at=time(9, 0))
    state = DailyReminderState()

    def broken(session, *, today):
        raise RuntimeError("database unavailable")

    with monkeypatch.context() as patched:
        patched.setattr(daily_appointments, "trigger_daily_appointment_reminders", broken)
        assert not run_daily_reminders(
            state, session_factory=session_factory, now=datetime(2026, 10, 19, 7, 0), target_hour=7
        )

    assert _inbox(session, patient.user_id) == []

    retried = run_daily_reminders(
        state, session_factory=session_factory, now=datetime(2026, 10, 19, 7, 5), target_hour=7
    )

    assert retried is True
    assert state.last_reminder_date == TODAY
    [patient_note] = _inbox(session, patient.user_id)
    assert patient_note.action_type == "daily_appointment_reminder"
    [doctor_note] = _inbox(session, doctor.user_id)
    assert doctor_note.message == "You have 1 appointment scheduled for today."
