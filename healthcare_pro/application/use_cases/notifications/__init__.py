"""Notification store use cases, dispatcher, trigger runner and trigger catalog."""

from .dispatcher import deliver, list_admin_user_ids, notify_users
from .runner import TriggerRunner, log_trigger_error
from .service import (
    create_notification,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)

__all__ = [
    "TriggerRunner",
    "create_notification",
    "delete_notification",
    "deliver",
    "list_admin_user_ids",
    "list_notifications",
    "log_trigger_error",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify_users",
]
