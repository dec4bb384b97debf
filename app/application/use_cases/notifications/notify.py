"""Create notifications as part of the caller's transaction."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import NOTIFICATION_TYPES, Notification, NotificationDraft
from app.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def dispatch_notifications(
    session: Session, drafts: Iterable[NotificationDraft]
) -> list[Notification]:
    """Persist ``drafts`` in ``pending`` status without committing."""

    repository = NotificationRepository(session)
    saved: list[Notification] = []
    for draft in drafts:
        if draft.type not in NOTIFICATION_TYPES:
            raise ValueError(f"Unknown notification type '{draft.type}'")
        notification = repository.create(draft)
        logger.info(
            "Queued %s notification %s for user %s",
            notification.type,
            notification.id,
            notification.recipient_id,
        )
        saved.append(notification)
    return saved


def notify(
    session: Session,
    *,
    recipient_id: int,
    notification_type: str,
    title: str,
    message: str,
    metadata: dict[str, Any] | None = None,
) -> Notification:
    """Create a single notification for ``recipient_id``.

    The notification is flushed but not committed; it becomes durable with
    the state change that triggered it.
    """

    draft = NotificationDraft(
        recipient_id=recipient_id,
        type=notification_type,
        title=title,
        message=message,
        metadata=dict(metadata or {}),
    )
    return dispatch_notifications(session, [draft])[0]


__all__ = ["dispatch_notifications", "notify"]
