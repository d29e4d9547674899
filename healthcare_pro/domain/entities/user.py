"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

ROLE_PATIENT = "patient"
ROLE_DOCTOR = "doctor"
ROLE_ADMIN = "admin"
ROLES = frozenset({ROLE_PATIENT, ROLE_DOCTOR, ROLE_ADMIN})


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    email: str
    first_name: str | None
    last_name: str | None
    role: str
    is_active: bool = True
    password: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_role(self, role: str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return (self.role or "").lower() == role.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)

    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def display_name(self) -> str:
        """Return the full name, falling back to the email address."""

        return self.full_name() or self.email

    def owning_user_id(self) -> int | None:
        return self.id


__all__ = ["User", "ROLES", "ROLE_ADMIN", "ROLE_DOCTOR", "ROLE_PATIENT"]
