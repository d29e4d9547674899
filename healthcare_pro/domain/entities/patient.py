"""Domain entities describing patient and doctor profiles."""

from __future__ import annotations

from dataclasses import dataclass

from .user import User


@dataclass
class Patient:
    """Patient profile, optionally linked to a user account."""

    id: int | None
    user_id: int | None
    user: User | None = None

    def owning_user_id(self) -> int | None:
        if self.user_id:
            return self.user_id
        return self.user.id if self.user is not None else None


@dataclass
class Doctor:
    """Doctor profile, optionally linked to a user account."""

    id: int | None
    user_id: int | None
    user: User | None = None
    is_verified: bool = False
    department: str | None = None

    def owning_user_id(self) -> int | None:
        if self.user_id:
            return self.user_id
        return self.user.id if self.user is not None else None

    def display_name(self, default: str = "Doctor") -> str:
        """Return the doctor's full name or ``default`` when it is unknown."""

        if self.user is None:
            return default
        return self.user.full_name() or default


__all__ = ["Doctor", "Patient"]
