"""Domain entity representing a scheduled shelter engagement."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

from app.utils import add_minutes, combine_local

INTERVIEW_TYPE_INTERVIEW = "interview"
INTERVIEW_TYPE_MEET_GREET = "meet_greet"
INTERVIEW_TYPE_HOME_VISIT = "home_visit"

INTERVIEW_STATUS_SCHEDULED = "scheduled"
INTERVIEW_STATUS_CONFIRMED = "confirmed"
INTERVIEW_STATUS_COMPLETED = "completed"
INTERVIEW_STATUS_CANCELLED = "cancelled"
INTERVIEW_STATUS_RESCHEDULED = "rescheduled"

INTERVIEW_STATUSES = (
    INTERVIEW_STATUS_SCHEDULED,
    INTERVIEW_STATUS_CONFIRMED,
    INTERVIEW_STATUS_COMPLETED,
    INTERVIEW_STATUS_CANCELLED,
    INTERVIEW_STATUS_RESCHEDULED,
)
# A rescheduled interview still holds its (new) slot on the shelter calendar.
ACTIVE_INTERVIEW_STATUSES = frozenset(
    {
        INTERVIEW_STATUS_SCHEDULED,
        INTERVIEW_STATUS_CONFIRMED,
        INTERVIEW_STATUS_RESCHEDULED,
    }
)

# Shelter-side status changes made through ``UpdateStatus``.
INTERVIEW_STATUS_TRANSITIONS: dict[str, frozenset[str]] = {
    INTERVIEW_STATUS_SCHEDULED: frozenset(
        {INTERVIEW_STATUS_CONFIRMED, INTERVIEW_STATUS_COMPLETED, INTERVIEW_STATUS_CANCELLED}
    ),
    INTERVIEW_STATUS_RESCHEDULED: frozenset(
        {INTERVIEW_STATUS_CONFIRMED, INTERVIEW_STATUS_COMPLETED, INTERVIEW_STATUS_CANCELLED}
    ),
    INTERVIEW_STATUS_CONFIRMED: frozenset(
        {INTERVIEW_STATUS_COMPLETED, INTERVIEW_STATUS_CANCELLED}
    ),
    INTERVIEW_STATUS_COMPLETED: frozenset(),
    INTERVIEW_STATUS_CANCELLED: frozenset(),
}


@dataclass
class Interview:
    """Interview, meet-and-greet or home visit tied to one application."""

    id: int | None
    application_id: int
    shelter_id: int
    adopter_id: int
    type: str
    status: str
    scheduled_date: date
    scheduled_time: time
    duration_minutes: int | None
    location: str | None = None
    notes: str | None = None
    shelter_notes: str | None = None
    adopter_response: bool | None = None
    adopter_response_notes: str | None = None
    responded_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_INTERVIEW_STATUSES

    def starts_at(self) -> datetime:
        return combine_local(self.scheduled_date, self.scheduled_time)

    def ends_at(self, default_duration: int = 60) -> datetime:
        return add_minutes(
            self.scheduled_date,
            self.scheduled_time,
            self.duration_minutes or default_duration,
        )


__all__ = [
    "INTERVIEW_TYPE_INTERVIEW",
    "INTERVIEW_TYPE_MEET_GREET",
    "INTERVIEW_TYPE_HOME_VISIT",
    "INTERVIEW_STATUS_SCHEDULED",
    "INTERVIEW_STATUS_CONFIRMED",
    "INTERVIEW_STATUS_COMPLETED",
    "INTERVIEW_STATUS_CANCELLED",
    "INTERVIEW_STATUS_RESCHEDULED",
    "INTERVIEW_STATUSES",
    "ACTIVE_INTERVIEW_STATUSES",
    "INTERVIEW_STATUS_TRANSITIONS",
    "Interview",
]
