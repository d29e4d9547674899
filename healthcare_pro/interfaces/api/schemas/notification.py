"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    message: str
    type: str
    is_read: bool
    target_role: str | None = None
    action_type: str | None = None
    entity_id: int | None = None
    entity_type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class NotificationListResponse(BaseModel):
    """One page of notifications plus the counters the client badge shows."""

    items: list[NotificationRead] = Field(default_factory=list)
    total: int
    unread_count: int


class NotificationReadAllResponse(BaseModel):
    updated: int


__all__ = ["NotificationListResponse", "NotificationRead", "NotificationReadAllResponse"]
