"""Use cases for managing user accounts."""

from .deactivate_user import deactivate_user
from .register_user import register_user
from .verify_doctor import set_doctor_verification

__all__ = [
    "deactivate_user",
    "register_user",
    "set_doctor_verification",
]
