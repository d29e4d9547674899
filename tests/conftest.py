"""Shared fixtures: an isolated in-memory database and record factories."""

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["REMINDER_JOBS_ENABLED"] = "false"
os.environ["APP_TIMEZONE"] = "UTC"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from healthcare_pro.application.use_cases.notifications import TriggerRunner
from healthcare_pro.config import reset_settings_cache
from healthcare_pro.domain.entities import (
    ROLE_ADMIN,
    ROLE_DOCTOR,
    ROLE_PATIENT,
    Doctor,
    Patient,
    User,
)
from healthcare_pro.infrastructure import models  # noqa: F401  # register tables
from healthcare_pro.infrastructure.database import Base
from healthcare_pro.infrastructure.repositories import (
    DoctorRepository,
    PatientRepository,
    UserRepository,
)


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def trigger_errors() -> list[tuple[str, BaseException]]:
    return []


@pytest.fixture()
def events(session_factory, trigger_errors) -> TriggerRunner:
    """Runner executing triggers inline and collecting their failures."""

    return TriggerRunner(
        session_factory,
        error_sink=lambda name, exc: trigger_errors.append((name, exc)),
    )


@pytest.fixture()
def make_user(session):
    counter = {"value": 0}

    def _make_user(
        role: str = ROLE_PATIENT,
        *,
        first_name: str | None = "Test",
        last_name: str | None = "User",
        email: str | None = None,
        is_active: bool = True,
    ) -> User:
        counter["value"] += 1
        return UserRepository(session).create(
            User(
                id=None,
                email=email or f"{role}{counter['value']}@example.com",
                first_name=first_name,
                last_name=last_name,
                role=role,
                is_active=is_active,
            )
        )

    return _make_user


@pytest.fixture()
def make_patient(session, make_user):
    def _make_patient(**user_fields) -> Patient:
        user = make_user(ROLE_PATIENT, **user_fields)
        return PatientRepository(session).create(Patient(id=None, user_id=user.id))

    return _make_patient


@pytest.fixture()
def make_doctor(session, make_user):
    def _make_doctor(**user_fields) -> Doctor:
        user = make_user(ROLE_DOCTOR, **user_fields)
        return DoctorRepository(session).create(Doctor(id=None, user_id=user.id))

    return _make_doctor


@pytest.fixture()
def make_admin(make_user):
    def _make_admin(**user_fields) -> User:
        return make_user(ROLE_ADMIN, **user_fields)

    return _make_admin
