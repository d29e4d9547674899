"""Persistence helpers for notification entities."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from healthcare_pro.domain.entities import Notification, NotificationPage
from healthcare_pro.infrastructure.models import NotificationModel
from healthcare_pro.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_naive_datetime,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self,
        user_id: int,
        *,
        is_read: bool | None = None,
        target_role: str | None = None,
        action_type: str | None = None,
        skip: int = 0,
        limit: int | None = 50,
    ) -> NotificationPage:
        """Return a page of notifications owned by ``user_id``, newest first.

        ``total`` counts every row matching the filters; ``unread_count`` counts
        the unread rows of the user regardless of the filters.
        """

        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if is_read is not None:
            query = query.filter(NotificationModel.is_read.is_(is_read))
        if target_role:
            query = query.filter(NotificationModel.target_role == target_role)
        if action_type:
            query = query.filter(NotificationModel.action_type == action_type)

        total = query.count()
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        return NotificationPage(
            items=[self._to_entity(model) for model in query.all()],
            total=total,
            unread_count=self.count_unread(user_id),
        )

    def count_unread(self, user_id: int) -> int:
        return (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .scalar()
            or 0
        )

    def create(self, notification: Notification) -> Notification:
        now = now_in_app_naive_datetime()
        model = NotificationModel(
            user_id=notification.user_id,
            title=notification.title,
            message=notification.message,
            type=notification.type,
            is_read=notification.is_read,
            target_role=notification.target_role,
            action_type=notification.action_type,
            entity_id=notification.entity_id,
            entity_type=notification.entity_type,
            created_at=ensure_app_naive_datetime(notification.created_at) or now,
            updated_at=now,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int, *, user_id: int) -> bool:
        """Flag one notification of ``user_id`` as read; ``False`` when it is not theirs."""

        model = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .filter(NotificationModel.user_id == user_id)
            .first()
        )
        if model is None:
            return False
        if not model.is_read:
            model.is_read = True
            model.updated_at = now_in_app_naive_datetime()
            self.session.add(model)
            self.session.commit()
        return True

    def mark_all_as_read(self, user_id: int) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.updated_at: now_in_app_naive_datetime(),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def delete(self, notification_id: int, *, user_id: int) -> bool:
        deleted = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .filter(NotificationModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return bool(deleted)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            message=model.message,
            type=model.type,
            is_read=bool(model.is_read),
            target_role=model.target_role,
            action_type=model.action_type,
            entity_id=model.entity_id,
            entity_type=model.entity_type,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationRepository"]
