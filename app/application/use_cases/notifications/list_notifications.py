"""Use case for listing a user's notifications."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import Caller, Notification
from app.infrastructure.repositories import InterviewRepository, NotificationRepository
from app.utils import retry_read


@retry_read
def list_notifications(
    session: Session,
    caller: Caller,
    *,
    status: str | None = None,
    notification_type: str | None = None,
    limit: int | None = 50,
) -> Sequence[Notification]:
    """Return the caller's notifications, newest first.

    Notifications that reference an interview carry its current
    ``adopter_response`` and ``interview_status`` in their metadata.
    """

    notifications = NotificationRepository(session).list_for_user(
        caller.user_id,
        status=status,
        notification_type=notification_type,
        limit=limit,
    )
    interviews = InterviewRepository(session)
    enriched: list[Notification] = []
    for notification in notifications:
        metadata = notification.metadata or {}
        try:
            interview_id = int(metadata.get("interview_id"))
        except (TypeError, ValueError):
            enriched.append(notification)
            continue
        interview = interviews.get(interview_id)
        if interview is None:
            enriched.append(notification)
            continue
        enriched.append(
            replace(
                notification,
                metadata={
                    **metadata,
                    "adopter_response": interview.adopter_response,
                    "interview_status": interview.status,
                },
            )
        )
    return enriched


__all__ = ["list_notifications"]
