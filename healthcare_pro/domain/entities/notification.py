"""Domain entities representing user notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

NOTIFICATION_TYPE_INFO = "info"
NOTIFICATION_TYPE_SUCCESS = "success"
NOTIFICATION_TYPE_WARNING = "warning"
NOTIFICATION_TYPE_ERROR = "error"
NOTIFICATION_TYPES = frozenset(
    {
        NOTIFICATION_TYPE_INFO,
        NOTIFICATION_TYPE_SUCCESS,
        NOTIFICATION_TYPE_WARNING,
        NOTIFICATION_TYPE_ERROR,
    }
)


@dataclass
class Notification:
    """Information message delivered to a specific user.

    ``target_role`` records the audience the message was written for. It is
    descriptive metadata only; ``user_id`` is the sole ownership binding.
    """

    id: int | None
    user_id: int
    title: str
    message: str
    type: str = NOTIFICATION_TYPE_INFO
    is_read: bool = False
    target_role: str | None = None
    action_type: str | None = None
    entity_id: int | None = None
    entity_type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class NotificationDraft:
    """Audience-specific content of a notification before it has recipients."""

    target_role: str | None
    title: str
    message: str
    type: str = NOTIFICATION_TYPE_INFO
    action_type: str | None = None
    entity_id: int | None = None
    entity_type: str | None = None


@dataclass
class NotificationPage:
    """A window of notifications plus counters for the whole result set."""

    items: list[Notification] = field(default_factory=list)
    total: int = 0
    unread_count: int = 0


__all__ = [
    "Notification",
    "NotificationDraft",
    "NotificationPage",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_INFO",
    "NOTIFICATION_TYPE_SUCCESS",
    "NOTIFICATION_TYPE_WARNING",
    "NOTIFICATION_TYPE_ERROR",
]
