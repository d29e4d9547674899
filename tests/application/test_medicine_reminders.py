"""Tests for medicine reminder scheduling and the polling sweep."""

from __future__ import annotations

from datetime import datetime, time

import pytest

from healthcare_pro.application.use_cases.reminders import (
    compute_next_trigger,
    is_reminder_due,
    run_medicine_reminders,
)
from healthcare_pro.application.use_cases.reminders import medicine as medicine_job
from healthcare_pro.domain.entities import (
    Medicine,
    MedicineReminder,
    PatientReminderSettings,
)
from healthcare_pro.infrastructure.repositories import (
    MedicineReminderRepository,
    NotificationRepository,
)

MON_WED_FRI = [1, 3, 5]


def _reminder(**overrides) -> MedicineReminder:
    fields = dict(
        id=1,
        medicine_id=1,
        patient_id=1,
        reminder_time=time(8, 0),
        days_of_week=MON_WED_FRI,
    )
    fields.update(overrides)
    return MedicineReminder(**fields)


@pytest.mark.parametrize(
    ("now", "expected"),
    [
        (datetime(2026, 10, 21, 8, 3), True),  # Wednesday, inside the window
        (datetime(2026, 10, 21, 8, 5), True),
        (datetime(2026, 10, 21, 8, 6), False),
        (datetime(2026, 10, 21, 7, 59), False),
        (datetime(2026, 10, 24, 8, 3), False),  # Saturday
    ],
)
def test_unscheduled_reminder_due_window(now, expected) -> None:
    assert is_reminder_due(_reminder(), now) is expected


def test_scheduled_reminder_is_due_once_next_trigger_passes() -> None:
    reminder = _reminder(next_trigger=datetime(2026, 10, 21, 8, 0))

    assert is_reminder_due(reminder, datetime(2026, 10, 21, 7, 59)) is False
    assert is_reminder_due(reminder, datetime(2026, 10, 21, 8, 0)) is True
    assert is_reminder_due(reminder, datetime(2026, 10, 22, 15, 0)) is True


def test_invalid_days_mean_every_day_and_missing_time_means_eight() -> None:
    reminder = _reminder(reminder_time=None, days_of_week=None)

    assert is_reminder_due(reminder, datetime(2026, 10, 24, 8, 2)) is True


def test_next_trigger_skips_to_the_next_allowed_day() -> None:
    sunday_only = compute_next_trigger(time(9, 0), [0], datetime(2026, 10, 19, 10, 0))

    assert sunday_only == datetime(2026, 10, 25, 9, 0)


def test_next_trigger_is_strictly_after_now() -> None:
    assert compute_next_trigger("08:00", MON_WED_FRI, datetime(2026, 10, 21, 7, 0)) == datetime(
        2026, 10, 21, 8, 0
    )
    assert compute_next_trigger("08:00", MON_WED_FRI, datetime(2026, 10, 21, 8, 0)) == datetime(
        2026, 10, 23, 8, 0
    )


def test_next_trigger_same_weekday_a_week_later() -> None:
    assert compute_next_trigger(time(8, 0), [3], datetime(2026, 10, 21, 8, 1)) == datetime(
        2026, 10, 28, 8, 0
    )


def test_next_trigger_without_allowed_days_is_none() -> None:
    assert compute_next_trigger(time(8, 0), [], datetime(2026, 10, 21, 8, 1)) is None


@pytest.fixture()
def medicine_reminder(session, make_patient):
    def _create(*, is_active=True, medicine_active=True, **reminder_fields):
        patient = make_patient()
        repository = MedicineReminderRepository(session)
        medicine = repository.create_medicine(
            Medicine(
                id=None,
                patient_id=patient.id,
                medicine_name="Metformin",
                dosage="500mg",
                is_active=medicine_active,
            )
        )
        fields = dict(reminder_time=time(8, 0), days_of_week=MON_WED_FRI)
        fields.update(reminder_fields)
        reminder = repository.create(
            MedicineReminder(
                id=None,
                medicine_id=medicine.id,
                patient_id=patient.id,
                is_active=is_active,
                **fields,
            )
        )
        return patient, reminder

    return _create


def test_sweep_fires_due_reminders_and_reschedules(session, medicine_reminder) -> None:
    patient, reminder = medicine_reminder()
    now = datetime(2026, 10, 21, 8, 3)

    fired = run_medicine_reminders(session, now=now)

    assert fired == 1
    [note] = NotificationRepository(session).list_for_user(patient.user_id).items
    assert note.message == "Time to take Metformin (500mg) at 08:00."
    stored = MedicineReminderRepository(session).get(reminder.id)
    assert stored.last_triggered == now
    assert stored.next_trigger == datetime(2026, 10, 23, 8, 0)

    assert run_medicine_reminders(session, now=datetime(2026, 10, 21, 8, 8)) == 0


def test_sweep_respects_disabled_notifications(session, medicine_reminder) -> None:
    patient, reminder = medicine_reminder()
    MedicineReminderRepository(session).save_settings(
        PatientReminderSettings(id=None, patient_id=patient.id, notification_enabled=False)
    )

    assert run_medicine_reminders(session, now=datetime(2026, 10, 21, 8, 3)) == 0
    assert NotificationRepository(session).count_unread(patient.user_id) == 0
    assert MedicineReminderRepository(session).get(reminder.id).last_triggered is None


def test_sweep_ignores_inactive_reminders_and_medicines(session, medicine_reminder) -> None:
    medicine_reminder(is_active=False)
    medicine_reminder(medicine_active=False)

    assert run_medicine_reminders(session, now=datetime(2026, 10, 21, 8, 3)) == 0


def test_one_failing_reminder_does_not_stop_the_sweep(
    session, medicine_reminder, monkeypatch
) -> None:
    first_patient, _ = medicine_reminder()
    second_patient, second = medicine_reminder()
    original = medicine_job.trigger_medicine_reminder

    def flaky(trigger_session, **kwargs):
        if kwargs["patient_user_id"] == first_patient.user_id:
            raise RuntimeError("boom")
        return original(trigger_session, **kwargs)

    monkeypatch.setattr(medicine_job, "trigger_medicine_reminder", flaky)

    assert run_medicine_reminders(session, now=datetime(2026, 10, 21, 8, 3)) == 1
    assert NotificationRepository(session).count_unread(second_patient.user_id) == 1
    assert MedicineReminderRepository(session).get(second.id).next_trigger == datetime(
        2026, 10, 23, 8, 0
    )


def test_malformed_weekdays_do_not_stop_the_sweep(session, medicine_reminder, caplog) -> None:
    medicine_reminder(days_of_week=["wed"])
    healthy_patient, healthy = medicine_reminder(days_of_week=[3])

    fired = run_medicine_reminders(session, now=datetime(2026, 10, 21, 8, 3))

    assert fired == 1
    assert NotificationRepository(session).count_unread(healthy_patient.user_id) == 1
    assert MedicineReminderRepository(session).get(healthy.id).last_triggered is not None
    assert "Medicine reminder" in caplog.text


def test_reminder_time_must_be_a_clock_time(session, make_patient) -> None:
    patient = make_patient()
    repository = MedicineReminderRepository(session)
    medicine = repository.create_medicine(
        Medicine(id=None, patient_id=patient.id, medicine_name="Aspirin")
    )

    with pytest.raises(ValueError):
        repository.create(
            MedicineReminder(
                id=None,
                medicine_id=medicine.id,
                patient_id=patient.id,
                reminder_time="soon",
            )
        )
