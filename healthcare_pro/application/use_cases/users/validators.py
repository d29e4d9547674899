"""Common validation helpers for user use cases."""

from healthcare_pro.domain.entities import ROLE_DOCTOR, ROLE_PATIENT

SELF_REGISTRATION_ROLES = frozenset({ROLE_PATIENT, ROLE_DOCTOR})


def normalize_email(email: str) -> str:
    """Return a normalized email address or raise ``ValueError``."""

    normalized = email.strip().lower()
    if normalized.count("@") != 1:
        raise ValueError("A valid email address is required")

    local_part, domain = normalized.split("@", 1)
    if not local_part or "." not in domain:
        raise ValueError("A valid email address is required")
    return normalized


def ensure_registration_role(role: str | None) -> str:
    """Return the role a new account registers with (``patient`` by default)."""

    normalized = (role or ROLE_PATIENT).strip().lower()
    if normalized not in SELF_REGISTRATION_ROLES:
        raise ValueError("Role not allowed for registration")
    return normalized
