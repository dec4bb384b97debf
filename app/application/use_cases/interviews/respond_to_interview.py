"""Use case recording an adopter's answer to an interview."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.application.use_cases.effects import apply_effect
from app.application.use_cases.lookups import (
    require_application,
    require_interview,
    require_pet,
    require_shelter,
)
from app.domain.entities import Caller, Interview
from app.domain.errors import Forbidden
from app.domain.scheduling import plan_response
from app.infrastructure.repositories import InterviewRepository
from app.utils import now_in_app_timezone

from .booking import locked_calendar

logger = logging.getLogger(__name__)


def respond_to_interview(
    session: Session,
    caller: Caller,
    interview_id: int,
    *,
    accepted: bool,
    notes: str | None = None,
    now: datetime | None = None,
) -> Interview:
    """Accept or decline an interview on behalf of the adopter.

    Declining frees the slot and sends the application back to
    ``under_review``; either answer notifies the shelter.
    """

    interview = require_interview(session, interview_id)
    if caller.user_id != interview.adopter_id:
        raise Forbidden("Only the adopter on this application can respond")

    repository = InterviewRepository(session)
    with locked_calendar(session, interview.shelter_id):
        interview = require_interview(session, interview_id)
        application = require_application(session, interview.application_id)
        pet = require_pet(session, application.pet_id)
        shelter = require_shelter(session, pet.shelter_id)
        updated, effect = plan_response(
            caller,
            interview,
            application,
            pet,
            shelter,
            accepted=accepted,
            notes=notes,
            now=now or now_in_app_timezone(),
        )
        saved = repository.update(updated)
        apply_effect(session, effect)

    logger.info(
        "Adopter %s %s interview %s",
        caller.user_id,
        "accepted" if accepted else "declined",
        interview_id,
    )
    return saved


__all__ = ["respond_to_interview"]
