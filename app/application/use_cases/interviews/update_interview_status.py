"""Use cases for shelter-side interview status changes."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.effects import apply_effect
from app.application.use_cases.lookups import require_application, require_interview, require_pet
from app.domain.entities import Caller, Interview
from app.domain.scheduling import ensure_shelter_access, plan_cancel, plan_status_update
from app.infrastructure.repositories import InterviewRepository

from .booking import locked_calendar

logger = logging.getLogger(__name__)


def cancel_interview(
    session: Session,
    caller: Caller,
    interview_id: int,
    *,
    reason: str | None = None,
) -> Interview:
    """Cancel an interview and free its slot.

    The application keeps its status; moving it is a separate review step.
    """

    interview = require_interview(session, interview_id)
    ensure_shelter_access(caller, interview.shelter_id)

    repository = InterviewRepository(session)
    with locked_calendar(session, interview.shelter_id):
        interview = require_interview(session, interview_id)
        pet = require_pet(session, require_application(session, interview.application_id).pet_id)
        updated, effect = plan_cancel(caller, interview, pet, reason=reason)
        saved = repository.update(updated)
        apply_effect(session, effect)

    logger.info("Cancelled interview %s", interview_id)
    return saved


def update_interview_status(
    session: Session,
    caller: Caller,
    interview_id: int,
    *,
    status: str,
    shelter_notes: str | None = None,
) -> Interview:
    """Apply a shelter-side status change such as ``confirmed`` or ``completed``."""

    interview = require_interview(session, interview_id)
    ensure_shelter_access(caller, interview.shelter_id)

    repository = InterviewRepository(session)
    with locked_calendar(session, interview.shelter_id):
        interview = require_interview(session, interview_id)
        pet = require_pet(session, require_application(session, interview.application_id).pet_id)
        previous = interview.status
        updated, effect = plan_status_update(
            caller, interview, pet, status, shelter_notes=shelter_notes
        )
        saved = repository.update(updated)
        apply_effect(session, effect)

    logger.info("Interview %s moved from %s to %s", interview_id, previous, status)
    return saved


__all__ = ["cancel_interview", "update_interview_status"]
