"""Routes for the caller's notification inbox."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    dismiss_notification as dismiss_notification_uc,
    list_notifications as list_notifications_uc,
    mark_notification_read as mark_notification_read_uc,
)
from app.domain.entities import Caller, Notification
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_caller
from app.interfaces.api.errors import to_http_exception
from app.interfaces.api.schemas import NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        recipient_id=notification.recipient_id,
        type=notification.type,
        status=notification.status,
        title=notification.title,
        message=notification.message,
        metadata=notification.metadata or {},
        read_at=notification.read_at,
        created_at=notification.created_at,
        updated_at=notification.updated_at,
    )


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    status_filter: str | None = Query(default=None, alias="status"),
    notification_type: str | None = Query(default=None, alias="type"),
    limit: int | None = Query(default=50, ge=1, le=200),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> list[NotificationRead]:
    """Return the caller's notifications, newest first."""

    notifications = list_notifications_uc(
        db,
        caller,
        status=status_filter,
        notification_type=notification_type,
        limit=limit,
    )
    return [_notification_to_schema(notification) for notification in notifications]


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_notification_read(
    notification_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> NotificationRead:
    try:
        notification = mark_notification_read_uc(db, caller, notification_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _notification_to_schema(notification)


@router.patch("/{notification_id}/dismiss", response_model=NotificationRead)
def dismiss_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> NotificationRead:
    try:
        notification = dismiss_notification_uc(db, caller, notification_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _notification_to_schema(notification)
