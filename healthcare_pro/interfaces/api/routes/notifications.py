"""Endpoints polled by the client to read and manage notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from healthcare_pro.application.use_cases.notifications import (
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read as mark_all_notifications_read_uc,
    mark_notification_read as mark_notification_read_uc,
)
from healthcare_pro.domain.entities import User
from healthcare_pro.infrastructure.database import get_db
from healthcare_pro.interfaces.api.dependencies import get_current_active_user
from healthcare_pro.interfaces.api.schemas import (
    NotificationListResponse,
    NotificationRead,
    NotificationReadAllResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
def list_notifications(
    is_read: bool | None = Query(None),
    target_role: str | None = Query(None),
    action_type: str | None = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationListResponse:
    """Return the authenticated user's notifications, newest first."""

    page = list_notifications_uc(
        db,
        user_id=current_user.id,
        is_read=is_read,
        target_role=target_role,
        action_type=action_type,
        skip=skip,
        limit=limit,
    )
    return NotificationListResponse(
        items=[NotificationRead.model_validate(item) for item in page.items],
        total=page.total,
        unread_count=page.unread_count,
    )


@router.put("/read-all", response_model=NotificationReadAllResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationReadAllResponse:
    updated = mark_all_notifications_read_uc(db, user_id=current_user.id)
    return NotificationReadAllResponse(updated=updated)


@router.put("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    try:
        mark_notification_read_uc(db, notification_id=notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Delete a notification owned by the authenticated user."""

    try:
        delete_notification_uc(db, notification_id=notification_id, user_id=current_user.id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
