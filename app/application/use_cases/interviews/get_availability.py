"""Use case computing free/busy slots for a shelter."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy.orm import Session

from app.application.use_cases.lookups import require_shelter
from app.config import get_settings
from app.domain.availability import Availability, compute_availability
from app.domain.entities import Caller
from app.infrastructure.repositories import InterviewRepository
from app.utils import ensure_app_timezone, now_in_app_timezone, retry_read


@retry_read
def get_availability(
    session: Session,
    caller: Caller,
    *,
    shelter_id: int,
    day: date,
    duration_minutes: int | None = None,
    now: datetime | None = None,
) -> Availability:
    """Return every candidate slot of ``day`` for a booking of ``duration_minutes``.

    Read-only; repeated calls over unchanged bookings give the same result.
    """

    settings = get_settings()
    duration = duration_minutes or settings.default_interview_duration_minutes
    require_shelter(session, shelter_id)
    interviews = InterviewRepository(session).list_active_for_shelter_on(shelter_id, day)
    return compute_availability(
        shelter_id,
        day,
        duration,
        interviews,
        now=ensure_app_timezone(now) if now is not None else now_in_app_timezone(),
        business_start=settings.business_hours_start,
        business_end=settings.business_hours_end,
        interval_minutes=settings.slot_interval_minutes,
        default_duration=settings.default_interview_duration_minutes,
    )


__all__ = ["get_availability"]
