from .notification import (
    NotificationListResponse,
    NotificationRead,
    NotificationReadAllResponse,
)

__all__ = [
    "NotificationListResponse",
    "NotificationRead",
    "NotificationReadAllResponse",
]
