"""Use case for booking an interview on a shelter calendar."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.effects import apply_effect
from app.application.use_cases.lookups import require_application, require_pet
from app.config import get_settings
from app.domain.entities import Caller, Interview
from app.domain.errors import SlotConflict
from app.domain.scheduling import BookingRequest, ensure_shelter_access, plan_interview
from app.infrastructure.repositories import InterviewRepository

from .booking import locked_calendar

logger = logging.getLogger(__name__)


def schedule_interview(
    session: Session,
    caller: Caller,
    *,
    application_id: int,
    request: BookingRequest,
) -> Interview:
    """Book ``request`` for the application and move it to the matching stage.

    Conflicts are checked against the calendar as it stands while the
    shelter lock is held, not against any availability fetched earlier.
    """

    settings = get_settings()
    application = require_application(session, application_id)
    pet = require_pet(session, application.pet_id)
    ensure_shelter_access(caller, pet.shelter_id)

    repository = InterviewRepository(session)
    try:
        with locked_calendar(session, pet.shelter_id):
            application = require_application(session, application_id)
            existing = repository.list_active_for_shelter_on(
                pet.shelter_id, request.scheduled_date
            )
            interview, effect = plan_interview(
                caller,
                application,
                pet,
                request,
                existing,
                default_duration=settings.default_interview_duration_minutes,
            )
            saved = repository.create(interview)
            apply_effect(session, effect.bind_metadata(interview_id=saved.id))
    except SlotConflict as exc:
        logger.warning(
            "Slot conflict booking %s for application %s on %s %s: %s existing",
            request.type,
            application_id,
            request.scheduled_date,
            request.scheduled_time,
            len(exc.conflicts),
        )
        raise

    logger.info(
        "Scheduled %s %s for application %s at shelter %s on %s %s",
        saved.type,
        saved.id,
        application_id,
        saved.shelter_id,
        saved.scheduled_date,
        saved.scheduled_time,
    )
    return saved


__all__ = ["schedule_interview"]
