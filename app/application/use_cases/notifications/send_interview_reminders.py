"""Batch use case creating reminders for upcoming interviews."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import (
    ACTIVE_INTERVIEW_STATUSES,
    NOTIFICATION_TYPE_INTERVIEW_REMINDER,
    Notification,
    NotificationDraft,
)
from app.domain.interview_types import get_interview_type
from app.domain.workflow import is_terminal
from app.infrastructure.database import transaction
from app.infrastructure.repositories import (
    InterviewRepository,
    NotificationRepository,
    PetRepository,
    ApplicationRepository,
)
from app.utils import ensure_app_naive_datetime, format_clock, now_in_app_timezone

from .notify import dispatch_notifications

logger = logging.getLogger(__name__)


def send_interview_reminders(
    session: Session,
    *,
    now: datetime | None = None,
    lead_hours: int | None = None,
) -> list[Notification]:
    """Remind adopters of active interviews starting within ``lead_hours``.

    Each interview gets at most one reminder, so running the batch
    repeatedly is safe. Interviews of closed applications are skipped.
    """

    settings = get_settings()
    lead = lead_hours if lead_hours is not None else settings.reminder_lead_hours
    current = ensure_app_naive_datetime(now or now_in_app_timezone())
    horizon = current + timedelta(hours=lead)

    interviews = InterviewRepository(session)
    notifications = NotificationRepository(session)
    applications = ApplicationRepository(session)
    pets = PetRepository(session)

    with transaction(session):
        upcoming = interviews.list(
            start_date=current.date(),
            end_date=horizon.date(),
            statuses=tuple(ACTIVE_INTERVIEW_STATUSES),
        )
        drafts: list[NotificationDraft] = []
        for interview in upcoming:
            starts_at = interview.starts_at()
            if not current < starts_at <= horizon:
                continue
            if notifications.exists_for_interview(
                user_id=interview.adopter_id,
                interview_id=interview.id,
                notification_type=NOTIFICATION_TYPE_INTERVIEW_REMINDER,
            ):
                continue

            application = applications.get(interview.application_id)
            if application is None or is_terminal(application.status):
                continue

            spec = get_interview_type(interview.type)
            pet = pets.get(application.pet_id)
            pet_name = pet.name if pet is not None else "your pet"
            drafts.append(
                NotificationDraft(
                    recipient_id=interview.adopter_id,
                    type=NOTIFICATION_TYPE_INTERVIEW_REMINDER,
                    title=f"Upcoming {spec.label}",
                    message=(
                        f"Reminder: your {spec.label.lower()} for {pet_name} is on "
                        f"{interview.scheduled_date.isoformat()} at "
                        f"{format_clock(interview.scheduled_time)}"
                        + (f" at {interview.location}." if interview.location else ".")
                    ),
                    metadata={
                        "interview_id": interview.id,
                        "application_id": interview.application_id,
                        "pet_name": pet_name,
                        "interview_type": interview.type,
                        "scheduled_date": interview.scheduled_date.isoformat(),
                        "scheduled_time": format_clock(interview.scheduled_time),
                    },
                )
            )
        saved = dispatch_notifications(session, drafts)

    logger.info(
        "Reminder batch at %s created %s reminders from %s upcoming interviews",
        current.isoformat(timespec="minutes"),
        len(saved),
        len(upcoming),
    )
    return saved


__all__ = ["send_interview_reminders"]
