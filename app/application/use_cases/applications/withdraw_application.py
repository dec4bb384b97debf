"""Use case for an adopter withdrawing an application."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.effects import apply_effect
from app.application.use_cases.interviews.booking import locked_calendar
from app.application.use_cases.lookups import (
    require_application,
    require_pet,
    require_shelter,
)
from app.domain.entities import (
    ACTIVE_INTERVIEW_STATUSES,
    APPLICATION_STATUS_DRAFT,
    APPLICATION_STATUS_SUBMITTED,
    APPLICATION_STATUS_WITHDRAWN,
    NOTIFICATION_TYPE_GENERAL,
    Application,
    ApplicationStatusUpdate,
    Caller,
    NotificationDraft,
    WorkflowEffect,
)
from app.domain.scheduling import plan_withdrawal_release
from app.domain.workflow import ensure_transition
from app.infrastructure.repositories import InterviewRepository

from .access import ensure_owning_adopter

logger = logging.getLogger(__name__)


def withdraw_application(
    session: Session, caller: Caller, application_id: int
) -> Application:
    """Withdraw a non-terminal application owned by the caller.

    Interviews still booked for the application are cancelled in the same
    transaction so their slots return to the shelter calendar.
    """

    application = require_application(session, application_id)
    ensure_owning_adopter(caller, application)
    pet = require_pet(session, application.pet_id)

    interviews = InterviewRepository(session)
    with locked_calendar(session, pet.shelter_id):
        application = require_application(session, application_id)
        ensure_transition(application.status, APPLICATION_STATUS_WITHDRAWN)

        released = plan_withdrawal_release(
            interviews.list(
                application_id=application.id,
                statuses=tuple(ACTIVE_INTERVIEW_STATUSES),
            )
        )
        for interview in released:
            interviews.update(interview)

        effect = WorkflowEffect(
            application_update=ApplicationStatusUpdate(
                application_id=application.id,
                expected_status=application.status,
                target_status=APPLICATION_STATUS_WITHDRAWN,
            )
        )
        # The shelter only hears about applications it has started reviewing.
        if application.status not in (APPLICATION_STATUS_DRAFT, APPLICATION_STATUS_SUBMITTED):
            shelter = require_shelter(session, pet.shelter_id)
            message = f"The adopter withdrew their application for {pet.name}."
            if released:
                message = f"{message} {len(released)} booked interview(s) were cancelled."
            effect.notify(
                NotificationDraft(
                    recipient_id=shelter.user_id,
                    type=NOTIFICATION_TYPE_GENERAL,
                    title="Application withdrawn",
                    message=message,
                    metadata={
                        "application_id": application.id,
                        "pet_id": pet.id,
                        "pet_name": pet.name,
                        "previous_status": application.status,
                        "cancelled_interview_ids": [item.id for item in released],
                    },
                )
            )
        apply_effect(session, effect)

    logger.info(
        "Adopter %s withdrew application %s, releasing %s interviews",
        caller.user_id,
        application_id,
        len(released),
    )
    return require_application(session, application_id)


__all__ = ["withdraw_application"]
