"""Use cases wrapping the notification store."""

from __future__ import annotations

from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import (
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPES,
    Notification,
    NotificationPage,
)
from healthcare_pro.infrastructure.repositories import NotificationRepository


def create_notification(
    session: Session,
    *,
    user_id: int | None,
    title: str,
    message: str,
    type: str = NOTIFICATION_TYPE_INFO,
    target_role: str | None = None,
    action_type: str | None = None,
    entity_id: int | None = None,
    entity_type: str | None = None,
) -> Notification | None:
    """Persist a notification for ``user_id``.

    Returns ``None`` without touching the store when there is no recipient.
    """

    if not user_id:
        return None
    if type not in NOTIFICATION_TYPES:
        msg = f"Unsupported notification type '{type}'"
        raise ValueError(msg)

    notification = Notification(
        id=None,
        user_id=user_id,
        title=title,
        message=message,
        type=type,
        is_read=False,
        target_role=target_role,
        action_type=action_type,
        entity_id=entity_id,
        entity_type=entity_type,
    )
    return NotificationRepository(session).create(notification)


def list_notifications(
    session: Session,
    *,
    user_id: int,
    is_read: bool | None = None,
    target_role: str | None = None,
    action_type: str | None = None,
    skip: int = 0,
    limit: int = 50,
) -> NotificationPage:
    """Return the notifications owned by ``user_id`` matching the filters."""

    return NotificationRepository(session).list_for_user(
        user_id,
        is_read=is_read,
        target_role=target_role,
        action_type=action_type,
        skip=skip,
        limit=limit,
    )


def mark_notification_read(session: Session, *, notification_id: int, user_id: int) -> None:
    if not NotificationRepository(session).mark_as_read(notification_id, user_id=user_id):
        raise ValueError("Notification not found")


def mark_all_notifications_read(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id)


def delete_notification(session: Session, *, notification_id: int, user_id: int) -> None:
    if not NotificationRepository(session).delete(notification_id, user_id=user_id):
        raise ValueError("Notification not found")


__all__ = [
    "create_notification",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
