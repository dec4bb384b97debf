"""Use cases for reading interviews."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from sqlalchemy.orm import Session

from app.application.use_cases.lookups import require_interview
from app.domain.entities import ROLE_ADMIN, Caller, Interview
from app.domain.errors import Forbidden
from app.infrastructure.repositories import InterviewRepository


def list_interviews(
    session: Session,
    caller: Caller,
    *,
    start_date: date | None = None,
    end_date: date | None = None,
    status: str | None = None,
    interview_type: str | None = None,
) -> Sequence[Interview]:
    """Shelters see their calendar, adopters their own interviews."""

    filters = {
        "start_date": start_date,
        "end_date": end_date,
        "statuses": [status] if status else None,
        "interview_type": interview_type,
    }
    repository = InterviewRepository(session)
    if caller.is_shelter():
        return repository.list(shelter_id=caller.shelter_id, **filters)
    if caller.is_adopter():
        return repository.list(adopter_id=caller.user_id, **filters)
    if caller.role == ROLE_ADMIN:
        return repository.list(**filters)
    return []


def get_interview(session: Session, caller: Caller, interview_id: int) -> Interview:
    interview = require_interview(session, interview_id)
    if caller.role == ROLE_ADMIN:
        return interview
    if caller.is_adopter() and caller.user_id == interview.adopter_id:
        return interview
    if caller.manages_shelter(interview.shelter_id):
        return interview
    raise Forbidden("You do not have access to this interview")


__all__ = ["list_interviews", "get_interview"]
