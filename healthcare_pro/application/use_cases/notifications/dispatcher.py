"""Fan-out of one logical notification into per-recipient rows."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import (
    NOTIFICATION_TYPE_INFO,
    ROLE_ADMIN,
    Notification,
    NotificationDraft,
)
from healthcare_pro.infrastructure.repositories import UserRepository

from .service import create_notification

logger = logging.getLogger(__name__)

Recipients = int | None | Iterable[int | None]


def _normalize_recipients(recipients: Recipients) -> list[int | None]:
    if recipients is None or isinstance(recipients, (int, str)):
        return [recipients]
    return list(recipients)


def deliver(
    session: Session, recipients: Recipients, draft: NotificationDraft
) -> list[Notification]:
    """Write one notification built from ``draft`` for every valid recipient.

    Missing recipients are skipped. A failure while storing the row of one
    recipient is logged and does not stop delivery to the others; nothing is
    retried.
    """

    created: list[Notification] = []
    for user_id in _normalize_recipients(recipients):
        if not user_id:
            continue
        try:
            notification = create_notification(
                session,
                user_id=user_id,
                title=draft.title,
                message=draft.message,
                type=draft.type,
                target_role=draft.target_role,
                action_type=draft.action_type,
                entity_id=draft.entity_id,
                entity_type=draft.entity_type,
            )
        except Exception:
            session.rollback()
            logger.exception(
                "Failed to notify user %s (%s)", user_id, draft.action_type or draft.title
            )
            continue
        if notification is not None:
            created.append(notification)
    return created


def notify_users(
    session: Session,
    recipients: Recipients,
    *,
    title: str,
    message: str,
    type: str = NOTIFICATION_TYPE_INFO,
    target_role: str | None = None,
    action_type: str | None = None,
    entity_id: int | None = None,
    entity_type: str | None = None,
) -> list[Notification]:
    """Create a notification for one or many ``recipients``."""

    draft = NotificationDraft(
        target_role=target_role,
        title=title,
        message=message,
        type=type,
        action_type=action_type,
        entity_id=entity_id,
        entity_type=entity_type,
    )
    return deliver(session, recipients, draft)


def list_admin_user_ids(session: Session) -> list[int]:
    """Return the ids of every active administrator."""

    return UserRepository(session).list_active_ids_by_role(ROLE_ADMIN)


__all__ = ["deliver", "list_admin_user_ids", "notify_users"]
