"""Apply the side effects returned by workflow planners."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Notification, WorkflowEffect
from app.domain.errors import InvalidTransition
from app.infrastructure.repositories import ApplicationRepository
from app.application.use_cases.notifications.notify import dispatch_notifications

logger = logging.getLogger(__name__)


def apply_effect(session: Session, effect: WorkflowEffect) -> list[Notification]:
    """Write ``effect`` into the current transaction.

    The application status change is a compare-and-set against the status
    the planner observed. If another writer moved the application in the
    meantime :class:`InvalidTransition` is raised and the caller's
    transaction must be rolled back.
    """

    update = effect.application_update
    if update is not None:
        applied = ApplicationRepository(session).transition_status(
            update.application_id,
            expected_status=update.expected_status,
            target_status=update.target_status,
            reviewed_at=update.reviewed_at,
            reviewer_notes=update.reviewer_notes,
            submitted_at=update.submitted_at,
        )
        if not applied:
            logger.warning(
                "Stale transition of application %s: expected %s, wanted %s",
                update.application_id,
                update.expected_status,
                update.target_status,
            )
            raise InvalidTransition(
                "The application was changed by someone else. Reload and try again.",
                current_status=update.expected_status,
                target_status=update.target_status,
            )
        if update.changes_status:
            logger.info(
                "Application %s moved from %s to %s",
                update.application_id,
                update.expected_status,
                update.target_status,
            )

    return dispatch_notifications(session, effect.notifications)


__all__ = ["apply_effect"]
