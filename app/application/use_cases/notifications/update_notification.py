"""Use cases for recipients acting on their notifications."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import (
    NOTIFICATION_STATUS_DISMISSED,
    NOTIFICATION_STATUS_READ,
    Caller,
    Notification,
)
from app.domain.errors import Forbidden, NotFound
from app.infrastructure.database import transaction
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def _require_own_notification(
    repository: NotificationRepository, notification_id: int, caller: Caller
) -> Notification:
    notification = repository.get(notification_id)
    if notification is None:
        raise NotFound("Notification not found")
    if notification.recipient_id != caller.user_id:
        raise Forbidden("Only the recipient can change this notification")
    return notification


def mark_notification_read(
    session: Session,
    caller: Caller,
    notification_id: int,
    *,
    now: datetime | None = None,
) -> Notification:
    """Mark the caller's notification as read.

    A dismissed notification keeps its status; only ``read_at`` is recorded.
    """

    repository = NotificationRepository(session)
    with transaction(session):
        notification = _require_own_notification(repository, notification_id, caller)
        status = notification.status
        if status != NOTIFICATION_STATUS_DISMISSED:
            status = NOTIFICATION_STATUS_READ
        updated = repository.update_status(
            notification.id, status, read_at=now or now_in_app_timezone()
        )
    logger.info("User %s read notification %s", caller.user_id, notification_id)
    return updated


def dismiss_notification(
    session: Session,
    caller: Caller,
    notification_id: int,
) -> Notification:
    """Hide the caller's notification from their inbox."""

    repository = NotificationRepository(session)
    with transaction(session):
        notification = _require_own_notification(repository, notification_id, caller)
        updated = repository.update_status(notification.id, NOTIFICATION_STATUS_DISMISSED)
    logger.info("User %s dismissed notification %s", caller.user_id, notification_id)
    return updated


__all__ = ["mark_notification_read", "dismiss_notification"]
