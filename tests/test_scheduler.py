"""Tests for the reminder job registration."""

from __future__ import annotations

import pytest

from healthcare_pro.infrastructure import scheduler as reminder_scheduler


@pytest.fixture()
def quiet_jobs(monkeypatch):
    monkeypatch.setattr(reminder_scheduler, "daily_reminder_tick", lambda: None)
    monkeypatch.setattr(reminder_scheduler, "medicine_reminder_tick", lambda: None)
    yield
    reminder_scheduler.shutdown_reminder_jobs()


def test_jobs_are_registered_once(quiet_jobs) -> None:
    reminder_scheduler.start_daily_reminder_scheduler()
    reminder_scheduler.start_daily_reminder_scheduler()
    reminder_scheduler.start_medicine_reminder_job()
    reminder_scheduler.start_medicine_reminder_job()

    scheduler = reminder_scheduler.get_reminder_scheduler()
    job_ids = sorted(job.id for job in scheduler.get_jobs())

    assert scheduler.running
    assert job_ids == [
        reminder_scheduler.DAILY_REMINDER_JOB_ID,
        reminder_scheduler.MEDICINE_REMINDER_JOB_ID,
    ]
    medicine_job = scheduler.get_job(reminder_scheduler.MEDICINE_REMINDER_JOB_ID)
    assert medicine_job.trigger.interval.total_seconds() == 300


def test_shutdown_allows_a_fresh_start(quiet_jobs) -> None:
    reminder_scheduler.start_medicine_reminder_job()
    first = reminder_scheduler.get_reminder_scheduler()

    reminder_scheduler.shutdown_reminder_jobs()
    reminder_scheduler.start_medicine_reminder_job()

    assert reminder_scheduler.get_reminder_scheduler() is not first
    assert reminder_scheduler.get_reminder_scheduler().running


def test_medicine_tick_logs_instead_of_raising(monkeypatch, caplog) -> None:
    def broken(session, **kwargs):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(reminder_scheduler, "run_medicine_reminders", broken)

    reminder_scheduler.medicine_reminder_tick()

    assert "Medicine reminder poll failed" in caplog.text
