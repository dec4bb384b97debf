"""Use case for moving an interview to a new slot."""

from __future__ import annotations

import logging
from datetime import date, time

from sqlalchemy.orm import Session

from app.application.use_cases.effects import apply_effect
from app.application.use_cases.lookups import require_interview, require_pet, require_application
from app.config import get_settings
from app.domain.entities import Caller, Interview
from app.domain.errors import SlotConflict
from app.domain.scheduling import ensure_shelter_access, plan_reschedule
from app.infrastructure.repositories import InterviewRepository

from .booking import locked_calendar

logger = logging.getLogger(__name__)


def reschedule_interview(
    session: Session,
    caller: Caller,
    interview_id: int,
    *,
    new_date: date,
    new_time: time,
    notes: str | None = None,
) -> Interview:
    settings = get_settings()
    interview = require_interview(session, interview_id)
    ensure_shelter_access(caller, interview.shelter_id)

    repository = InterviewRepository(session)
    try:
        with locked_calendar(session, interview.shelter_id):
            interview = require_interview(session, interview_id)
            application = require_application(session, interview.application_id)
            pet = require_pet(session, application.pet_id)
            existing = repository.list_active_for_shelter_on(interview.shelter_id, new_date)
            updated, effect = plan_reschedule(
                caller,
                interview,
                pet,
                new_date,
                new_time,
                existing,
                notes=notes,
                default_duration=settings.default_interview_duration_minutes,
            )
            saved = repository.update(updated)
            apply_effect(session, effect)
    except SlotConflict as exc:
        logger.warning(
            "Slot conflict moving interview %s to %s %s: %s existing",
            interview_id,
            new_date,
            new_time,
            len(exc.conflicts),
        )
        raise

    logger.info(
        "Rescheduled interview %s to %s %s", interview_id, saved.scheduled_date, saved.scheduled_time
    )
    return saved


__all__ = ["reschedule_interview"]
