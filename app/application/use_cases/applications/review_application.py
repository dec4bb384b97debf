"""Use case for shelter review decisions on an application."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.application.use_cases.effects import apply_effect
from app.application.use_cases.lookups import require_application, require_pet
from app.domain.entities import (
    APPLICATION_STATUS_APPROVED,
    NOTIFICATION_TYPE_GENERAL,
    Application,
    ApplicationStatusUpdate,
    Caller,
    NotificationDraft,
    WorkflowEffect,
)
from app.domain.errors import Forbidden, InvalidTransition
from app.domain.workflow import DECISION_STATUSES, REVIEW_TARGETS, ensure_transition
from app.infrastructure.database import transaction
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def review_application(
    session: Session,
    caller: Caller,
    application_id: int,
    *,
    status: str,
    reviewer_notes: str | None = None,
    now: datetime | None = None,
) -> Application:
    """Move an application along the shelter side of its lifecycle.

    ``status`` is one of ``under_review``, ``pending_approval``,
    ``approved`` or ``rejected``. Decisions stamp ``reviewed_at`` and notify
    the adopter.
    """

    if status not in REVIEW_TARGETS:
        raise InvalidTransition(
            f"'{status}' cannot be set through a review",
            target_status=status,
        )

    with transaction(session):
        application = require_application(session, application_id)
        pet = require_pet(session, application.pet_id)
        if not caller.manages_shelter(pet.shelter_id):
            raise Forbidden("Only the shelter that owns this pet can review the application")
        ensure_transition(application.status, status)

        decided = status in DECISION_STATUSES
        effect = WorkflowEffect(
            application_update=ApplicationStatusUpdate(
                application_id=application.id,
                expected_status=application.status,
                target_status=status,
                reviewed_at=(now or now_in_app_timezone()) if decided else None,
                reviewer_notes=reviewer_notes,
            )
        )
        if decided:
            approved = status == APPLICATION_STATUS_APPROVED
            message = (
                f"Congratulations! Your application for {pet.name} was approved."
                if approved
                else f"Your application for {pet.name} was not approved."
            )
            if reviewer_notes:
                message = f"{message} Notes: {reviewer_notes}"
            effect.notify(
                NotificationDraft(
                    recipient_id=application.adopter_id,
                    type=NOTIFICATION_TYPE_GENERAL,
                    title="Application approved" if approved else "Application rejected",
                    message=message,
                    metadata={
                        "application_id": application.id,
                        "pet_id": pet.id,
                        "pet_name": pet.name,
                        "application_status": status,
                    },
                )
            )
        apply_effect(session, effect)

    logger.info(
        "Shelter %s set application %s to %s", caller.shelter_id, application_id, status
    )
    return require_application(session, application_id)


__all__ = ["review_application"]
