"""Tests for the notification store use cases."""

from __future__ import annotations

import pytest

from healthcare_pro.application.use_cases.notifications import (
    create_notification,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from healthcare_pro.domain.entities import ROLE_DOCTOR, ROLE_PATIENT


def test_create_notification_defaults_to_unread_info(session, make_user) -> None:
    user = make_user()

    notification = create_notification(
        session, user_id=user.id, title="Hello", message="World"
    )

    assert notification is not None
    assert notification.id is not None
    assert notification.type == "info"
    assert notification.is_read is False
    assert notification.created_at is not None


def test_create_notification_without_recipient_is_a_no_op(session) -> None:
    assert create_notification(session, user_id=None, title="t", message="m") is None
    assert create_notification(session, user_id=0, title="t", message="m") is None


def test_create_notification_rejects_unknown_type(session, make_user) -> None:
    user = make_user()

    with pytest.raises(ValueError):
        create_notification(session, user_id=user.id, title="t", message="m", type="urgent")


def test_list_notifications_filters_and_counts(session, make_user) -> None:
    user = make_user()
    other = make_user()
    first = create_notification(
        session, user_id=user.id, title="A", message="a", target_role=ROLE_PATIENT,
        action_type="appointment_created",
    )
    create_notification(
        session, user_id=user.id, title="B", message="b", target_role=ROLE_DOCTOR,
        action_type="rating_received",
    )
    latest = create_notification(
        session, user_id=user.id, title="C", message="c", target_role=ROLE_PATIENT,
        action_type="appointment_created",
    )
    create_notification(session, user_id=other.id, title="X", message="x")
    mark_notification_read(session, notification_id=first.id, user_id=user.id)

    page = list_notifications(session, user_id=user.id)
    assert page.total == 3
    assert page.unread_count == 2
    assert page.items[0].id == latest.id

    unread = list_notifications(session, user_id=user.id, is_read=False)
    assert {item.title for item in unread.items} == {"B", "C"}

    by_action = list_notifications(session, user_id=user.id, action_type="appointment_created")
    assert by_action.total == 2
    assert by_action.unread_count == 2

    paged = list_notifications(session, user_id=user.id, skip=1, limit=1)
    assert paged.total == 3
    assert len(paged.items) == 1


def test_mark_and_delete_are_scoped_to_the_owner(session, make_user) -> None:
    owner = make_user()
    intruder = make_user()
    notification = create_notification(session, user_id=owner.id, title="t", message="m")

    with pytest.raises(ValueError):
        mark_notification_read(session, notification_id=notification.id, user_id=intruder.id)
    with pytest.raises(ValueError):
        delete_notification(session, notification_id=notification.id, user_id=intruder.id)

    mark_notification_read(session, notification_id=notification.id, user_id=owner.id)
    assert list_notifications(session, user_id=owner.id).unread_count == 0

    delete_notification(session, notification_id=notification.id, user_id=owner.id)
    assert list_notifications(session, user_id=owner.id).total == 0


def test_mark_all_read_only_touches_the_callers_rows(session, make_user) -> None:
    user = make_user()
    other = make_user()
    for index in range(3):
        create_notification(session, user_id=user.id, title=f"t{index}", message="m")
    create_notification(session, user_id=other.id, title="o", message="m")

    assert mark_all_notifications_read(session, user_id=user.id) == 3
    assert mark_all_notifications_read(session, user_id=user.id) == 0
    assert list_notifications(session, user_id=other.id).unread_count == 1
