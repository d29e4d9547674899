"""Capability shared by domain objects that belong to a user account."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasOwningUser(Protocol):
    """Object that can name the user account it is linked to."""

    def owning_user_id(self) -> int | None:
        """Return the linked user id, or ``None`` when no account is linked."""


def resolve_owning_user_id(obj: object | None) -> int | None:
    """Return the owning user id of ``obj`` or ``None`` when it cannot be resolved."""

    if obj is None or not isinstance(obj, HasOwningUser):
        return None
    return obj.owning_user_id() or None


__all__ = ["HasOwningUser", "resolve_owning_user_id"]
