"""Tests for free/busy slot computation."""

from __future__ import annotations

from datetime import date, datetime, time

import pytest

from app.domain.availability import (
    compute_availability,
    find_conflicts,
    generate_slot_times,
    overlaps,
)
from app.domain.entities import Interview

DAY = date(2024, 1, 20)
SHELTER_ID = 7


def _interview(
    start: time,
    duration: int | None,
    *,
    interview_id: int = 1,
    status: str = "scheduled",
    shelter_id: int = SHELTER_ID,
    day: date = DAY,
    interview_type: str = "meet_greet",
) -> Interview:
    return Interview(
        id=interview_id,
        application_id=1,
        shelter_id=shelter_id,
        adopter_id=1,
        type=interview_type,
        status=status,
        scheduled_date=day,
        scheduled_time=start,
        duration_minutes=duration,
    )


def test_empty_calendar_offers_every_slot() -> None:
    availability = compute_availability(SHELTER_ID, DAY, 60, [])

    assert availability.total_slots == 22
    assert availability.available_slots == 22
    assert availability.slots[0].time == "09:00"
    assert availability.slots[-1].time == "19:30"
    assert all(slot.available and not slot.conflicts for slot in availability.slots)


def test_late_slots_are_not_clipped_at_closing_time() -> None:
    # A 60 minute booking at 19:30 ends after business hours but is still offered.
    availability = compute_availability(SHELTER_ID, DAY, 60, [])

    assert "19:00" in [slot.time for slot in availability.slots]
    assert availability.slots[-1].time == "19:30"
    assert availability.slots[-1].available


def test_existing_interview_blocks_overlapping_candidates() -> None:
    existing = [_interview(time(10, 0), 45)]

    availability = compute_availability(SHELTER_ID, DAY, 30, existing)

    busy = [slot.time for slot in availability.slots if not slot.available]
    assert busy == ["10:00", "10:30"]
    assert availability.available_slots == availability.total_slots - 2
    conflict = availability.slots[2].conflicts[0]
    assert conflict.type == "meet_greet"
    assert conflict.time == "10:00"
    assert conflict.end_time == "10:45"
    assert conflict.duration == 45


def test_touching_intervals_do_not_conflict() -> None:
    start = datetime(2024, 1, 20, 9, 0)
    end = datetime(2024, 1, 20, 10, 0)
    later_end = datetime(2024, 1, 20, 11, 0)
    assert not overlaps(start, end, end, later_end)
    assert overlaps(start, later_end, end, later_end)


def test_missing_duration_defaults_to_an_hour() -> None:
    existing = [_interview(time(14, 0), None)]

    conflicts = find_conflicts(DAY, time(14, 30), 30, existing)

    assert len(conflicts) == 1
    assert conflicts[0].end_time == "15:00"
    assert conflicts[0].duration == 60
    assert not find_conflicts(DAY, time(15, 0), 30, existing)


def test_inactive_and_foreign_interviews_are_ignored() -> None:
    existing = [
        _interview(time(11, 0), 60, interview_id=1, status="cancelled"),
        _interview(time(11, 0), 60, interview_id=2, status="completed"),
        _interview(time(11, 0), 60, interview_id=3, shelter_id=99),
        _interview(time(11, 0), 60, interview_id=4, day=date(2024, 1, 21)),
    ]

    availability = compute_availability(SHELTER_ID, DAY, 60, existing)

    assert availability.available_slots == 22


def test_confirmed_and_rescheduled_interviews_block_slots() -> None:
    existing = [
        _interview(time(9, 0), 30, interview_id=1, status="confirmed"),
        _interview(time(12, 0), 30, interview_id=2, status="rescheduled"),
    ]

    availability = compute_availability(SHELTER_ID, DAY, 30, existing)

    busy = [slot.time for slot in availability.slots if not slot.available]
    assert busy == ["09:00", "12:00"]


def test_repeated_calls_return_identical_results() -> None:
    existing = [_interview(time(13, 0), 90), _interview(time(16, 30), 30, interview_id=2)]
    now = datetime(2024, 1, 19, 8, 0)

    first = compute_availability(SHELTER_ID, DAY, 45, existing, now=now)
    second = compute_availability(SHELTER_ID, DAY, 45, existing, now=now)

    assert first == second


def test_same_day_drops_slots_not_strictly_after_now() -> None:
    now = datetime(2024, 1, 20, 12, 0, 30)

    availability = compute_availability(SHELTER_ID, DAY, 30, [], now=now)

    assert availability.slots[0].time == "12:30"
    assert availability.total_slots == 15


def test_other_days_ignore_the_current_time() -> None:
    now = datetime(2024, 1, 19, 18, 0)

    availability = compute_availability(SHELTER_ID, DAY, 30, [], now=now)

    assert availability.total_slots == 22


def test_exclude_interview_removes_it_from_conflicts() -> None:
    existing = [_interview(time(10, 0), 60, interview_id=5)]

    assert find_conflicts(DAY, time(10, 0), 60, existing)
    assert not find_conflicts(DAY, time(10, 0), 60, existing, exclude_interview_id=5)


def test_custom_business_window() -> None:
    slots = generate_slot_times(time(10, 0), time(12, 0), 60)
    assert [value.strftime("%H:%M") for value in slots] == ["10:00", "11:00", "12:00"]


@pytest.mark.parametrize("duration", [0, -30])
def test_non_positive_duration_is_rejected(duration: int) -> None:
    with pytest.raises(ValueError):
        compute_availability(SHELTER_ID, DAY, duration, [])
