"""Formatting helpers shared by notification triggers."""

from __future__ import annotations

from healthcare_pro.domain.entities import Doctor

DEFAULT_DOCTOR_NAME = "Doctor"


def doctor_name(doctor: Doctor | None) -> str:
    if doctor is None:
        return DEFAULT_DOCTOR_NAME
    return doctor.display_name(DEFAULT_DOCTOR_NAME)


def at_time_suffix(time_str: str) -> str:
    """Return ``" at HH:MM"`` or an empty string when no time is known."""

    return f" at {time_str}" if time_str else ""


__all__ = ["DEFAULT_DOCTOR_NAME", "at_time_suffix", "doctor_name"]
