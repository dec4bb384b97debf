"""Free/busy computation for a shelter's interview calendar.

Everything here is pure: callers pass in the shelter's existing interviews
and the reference "now", and get back the same answer for the same input.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any, Iterable, Sequence

from app.domain.entities import Interview
from app.utils import add_minutes, combine_local, format_clock

BUSINESS_HOURS_START = time(9, 0)
BUSINESS_HOURS_END = time(19, 30)
SLOT_INTERVAL_MINUTES = 30
DEFAULT_DURATION_MINUTES = 60


@dataclass(frozen=True)
class ConflictDetail:
    """An existing interview that overlaps a requested interval."""

    interview_id: int | None
    type: str
    time: str
    end_time: str
    duration: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "interview_id": self.interview_id,
            "type": self.type,
            "time": self.time,
            "end_time": self.end_time,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class TimeSlot:
    time: str
    available: bool
    conflicts: tuple[ConflictDetail, ...] = ()


@dataclass(frozen=True)
class Availability:
    shelter_id: int
    date: date
    duration_minutes: int
    business_start: str
    business_end: str
    slots: tuple[TimeSlot, ...]

    @property
    def total_slots(self) -> int:
        return len(self.slots)

    @property
    def available_slots(self) -> int:
        return sum(1 for slot in self.slots if slot.available)


def overlaps(
    first_start: datetime,
    first_end: datetime,
    second_start: datetime,
    second_end: datetime,
) -> bool:
    """Half-open interval overlap: touching endpoints do not conflict."""

    return first_start < second_end and first_end > second_start


def generate_slot_times(
    start: time = BUSINESS_HOURS_START,
    end: time = BUSINESS_HOURS_END,
    interval_minutes: int = SLOT_INTERVAL_MINUTES,
) -> list[time]:
    """Return candidate start times from ``start`` to ``end`` inclusive."""

    if interval_minutes <= 0:
        raise ValueError("Slot interval must be a positive number of minutes")

    anchor = date(2000, 1, 1)
    cursor = combine_local(anchor, start)
    boundary = combine_local(anchor, end)
    step = timedelta(minutes=interval_minutes)
    slots: list[time] = []
    while cursor <= boundary:
        slots.append(cursor.time())
        cursor += step
    return slots


def find_conflicts(
    day: date,
    start: time,
    duration_minutes: int,
    interviews: Iterable[Interview],
    *,
    exclude_interview_id: int | None = None,
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> list[ConflictDetail]:
    """Return active interviews on ``day`` overlapping ``[start, start+duration)``."""

    requested_start = combine_local(day, start)
    requested_end = add_minutes(day, start, duration_minutes)

    conflicts: list[ConflictDetail] = []
    for interview in interviews:
        if not interview.is_active or interview.scheduled_date != day:
            continue
        if exclude_interview_id is not None and interview.id == exclude_interview_id:
            continue
        existing_start = interview.starts_at()
        existing_end = interview.ends_at(default_duration)
        if overlaps(requested_start, requested_end, existing_start, existing_end):
            conflicts.append(
                ConflictDetail(
                    interview_id=interview.id,
                    type=interview.type,
                    time=format_clock(existing_start),
                    end_time=format_clock(existing_end),
                    duration=interview.duration_minutes or default_duration,
                )
            )
    return conflicts


def compute_availability(
    shelter_id: int,
    day: date,
    duration_minutes: int,
    interviews: Sequence[Interview],
    *,
    now: datetime | None = None,
    business_start: time = BUSINESS_HOURS_START,
    business_end: time = BUSINESS_HOURS_END,
    interval_minutes: int = SLOT_INTERVAL_MINUTES,
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> Availability:
    """Evaluate every candidate slot of ``day`` for a booking of ``duration_minutes``.

    Slots are not clipped at closing time: a slot starting at the last
    candidate time is offered even if it would end after ``business_end``.
    When ``day`` is the current day, slots that do not start strictly after
    the current minute are dropped.
    """

    if duration_minutes <= 0:
        raise ValueError("Duration must be a positive number of minutes")

    own_interviews = [
        interview for interview in interviews if interview.shelter_id == shelter_id
    ]

    candidates = generate_slot_times(business_start, business_end, interval_minutes)
    if now is not None and now.date() == day:
        current_minute = now.time().replace(second=0, microsecond=0, tzinfo=None)
        candidates = [slot_time for slot_time in candidates if slot_time > current_minute]

    slots: list[TimeSlot] = []
    for slot_time in candidates:
        conflicts = find_conflicts(
            day,
            slot_time,
            duration_minutes,
            own_interviews,
            default_duration=default_duration,
        )
        slots.append(
            TimeSlot(
                time=format_clock(slot_time),
                available=not conflicts,
                conflicts=tuple(conflicts),
            )
        )

    return Availability(
        shelter_id=shelter_id,
        date=day,
        duration_minutes=duration_minutes,
        business_start=format_clock(business_start),
        business_end=format_clock(business_end),
        slots=tuple(slots),
    )


__all__ = [
    "BUSINESS_HOURS_START",
    "BUSINESS_HOURS_END",
    "SLOT_INTERVAL_MINUTES",
    "DEFAULT_DURATION_MINUTES",
    "ConflictDetail",
    "TimeSlot",
    "Availability",
    "overlaps",
    "generate_slot_times",
    "find_conflicts",
    "compute_availability",
]
