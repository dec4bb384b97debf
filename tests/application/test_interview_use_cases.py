"""Tests for booking, moving and answering interviews."""

from __future__ import annotations

import threading
from datetime import date, datetime, time, timezone

import pytest

from app.application.use_cases.applications import (
    get_application,
    review_application,
    submit_application,
    withdraw_application,
)
from app.application.use_cases.interviews import (
    cancel_interview,
    get_availability,
    get_interview,
    list_interviews,
    reschedule_interview,
    respond_to_interview,
    schedule_interview,
    update_interview_status,
)
from app.application.use_cases.notifications import send_interview_reminders
from app.domain.errors import (
    Forbidden,
    InvalidTransition,
    NotFound,
    NotPending,
    SlotConflict,
)
from app.domain.scheduling import BookingRequest
from app.infrastructure.database import SessionLocal
from app.infrastructure.repositories import InterviewRepository, NotificationRepository

DAY = date(2031, 3, 14)
BEFORE_DAY = datetime(2031, 3, 10, 8, 0, tzinfo=timezone.utc)


def _reviewed_application(session, catalog, profile, *, adopter=None, pet=None):
    adopter = adopter or catalog.adopter
    pet = pet or catalog.pet
    application = submit_application(session, adopter, pet_id=pet.id, profile=profile)
    return review_application(session, catalog.staff, application.id, status="under_review")


def _request(interview_type: str = "interview", start: time = time(10, 0), **extra) -> BookingRequest:
    return BookingRequest(type=interview_type, scheduled_date=DAY, scheduled_time=start, **extra)


def test_meet_greet_booking_moves_application_and_notifies_adopter(
    session, catalog, full_profile
) -> None:
    application = _reviewed_application(session, catalog, full_profile)

    interview = schedule_interview(
        session,
        catalog.staff,
        application_id=application.id,
        request=_request("meet_greet", time(11, 0)),
    )

    assert interview.id is not None
    assert interview.status == "scheduled"
    assert interview.duration_minutes == 45
    assert interview.location == "Shelter facility"
    assert interview.shelter_id == catalog.shelter.id
    assert interview.adopter_id == catalog.adopter.user_id
    assert get_application(session, catalog.adopter, application.id).status == "meet_greet_scheduled"

    notifications = NotificationRepository(session).list_for_user(catalog.adopter.user_id)
    assert len(notifications) == 1
    assert notifications[0].type == "interview_scheduled"
    assert notifications[0].status == "pending"
    assert notifications[0].metadata["interview_id"] == interview.id
    assert notifications[0].metadata["application_id"] == application.id


def test_conflicting_booking_changes_nothing(session, catalog, full_profile) -> None:
    first = _reviewed_application(session, catalog, full_profile)
    second = _reviewed_application(
        session, catalog, full_profile, adopter=catalog.other_adopter
    )
    schedule_interview(
        session, catalog.staff, application_id=first.id, request=_request("interview", time(10, 0))
    )

    with pytest.raises(SlotConflict) as excinfo:
        schedule_interview(
            session,
            catalog.staff,
            application_id=second.id,
            request=_request("home_visit", time(9, 30)),
        )

    assert excinfo.value.conflicts[0].time == "10:00"
    assert get_application(session, catalog.other_adopter, second.id).status == "under_review"
    assert NotificationRepository(session).list_for_user(catalog.other_adopter.user_id) == []
    assert len(InterviewRepository(session).list(shelter_id=catalog.shelter.id)) == 1


def test_other_shelters_calendars_do_not_conflict(session, catalog, full_profile) -> None:
    mine = _reviewed_application(session, catalog, full_profile)
    foreign = submit_application(
        session, catalog.adopter, pet_id=catalog.other_pet.id, profile=full_profile
    )
    foreign = review_application(session, catalog.other_staff, foreign.id, status="under_review")

    schedule_interview(session, catalog.staff, application_id=mine.id, request=_request())
    booked = schedule_interview(
        session, catalog.other_staff, application_id=foreign.id, request=_request()
    )

    assert booked.shelter_id == catalog.other_shelter.id


def test_only_owning_shelter_can_schedule(session, catalog, full_profile) -> None:
    application = _reviewed_application(session, catalog, full_profile)

    with pytest.raises(Forbidden):
        schedule_interview(
            session, catalog.other_staff, application_id=application.id, request=_request()
        )
    with pytest.raises(Forbidden):
        schedule_interview(
            session, catalog.adopter, application_id=application.id, request=_request()
        )
    with pytest.raises(NotFound):
        schedule_interview(session, catalog.staff, application_id=9999, request=_request())


def test_booking_requires_review_stage(session, catalog, full_profile) -> None:
    application = submit_application(
        session, catalog.adopter, pet_id=catalog.pet.id, profile=full_profile
    )

    with pytest.raises(InvalidTransition):
        schedule_interview(
            session, catalog.staff, application_id=application.id, request=_request()
        )
    assert InterviewRepository(session).list(application_id=application.id) == []


def test_availability_reflects_bookings(session, catalog, full_profile) -> None:
    application = _reviewed_application(session, catalog, full_profile)
    schedule_interview(
        session,
        catalog.staff,
        application_id=application.id,
        request=_request("interview", time(10, 0), duration_minutes=45),
    )

    first = get_availability(
        session, catalog.staff, shelter_id=catalog.shelter.id, day=DAY, duration_minutes=30, now=BEFORE_DAY
    )
    second = get_availability(
        session, catalog.adopter, shelter_id=catalog.shelter.id, day=DAY, duration_minutes=30, now=BEFORE_DAY
    )

    assert first == second
    assert first.total_slots == 22
    assert [slot.time for slot in first.slots if not slot.available] == ["10:00", "10:30"]

    with pytest.raises(NotFound):
        get_availability(session, catalog.staff, shelter_id=9999, day=DAY, now=BEFORE_DAY)


def test_declining_returns_application_to_review(session, catalog, full_profile) -> None:
    application = _reviewed_application(session, catalog, full_profile)
    interview = schedule_interview(
        session,
        catalog.staff,
        application_id=application.id,
        request=_request("home_visit", time(14, 0)),
    )

    answered = respond_to_interview(
        session, catalog.adopter, interview.id, accepted=False, notes="prefer evening"
    )

    assert answered.adopter_response is False
    assert answered.adopter_response_notes == "prefer evening"
    assert answered.responded_at is not None
    assert get_application(session, catalog.adopter, application.id).status == "under_review"
    shelter_inbox = NotificationRepository(session).list_for_user(catalog.shelter.user_id)
    assert len(shelter_inbox) == 1
    assert shelter_inbox[0].type == "interview_response"
    assert shelter_inbox[0].metadata["interview_id"] == interview.id

    with pytest.raises(NotPending):
        respond_to_interview(session, catalog.adopter, interview.id, accepted=True)


def test_declining_while_pending_approval_keeps_application(
    session, catalog, full_profile
) -> None:
    application = _reviewed_application(session, catalog, full_profile)
    interview = schedule_interview(
        session, catalog.staff, application_id=application.id, request=_request()
    )
    review_application(session, catalog.staff, application.id, status="pending_approval")

    answered = respond_to_interview(session, catalog.adopter, interview.id, accepted=False)

    assert answered.adopter_response is False
    assert answered.status == "cancelled"
    assert get_application(session, catalog.adopter, application.id).status == "pending_approval"
    shelter_inbox = NotificationRepository(session).list_for_user(catalog.shelter.user_id)
    assert [item.type for item in shelter_inbox] == ["interview_response"]


def test_withdrawal_releases_booked_interviews(session, catalog, full_profile) -> None:
    application = _reviewed_application(session, catalog, full_profile)
    interview = schedule_interview(
        session, catalog.staff, application_id=application.id, request=_request()
    )

    withdraw_application(session, catalog.adopter, application.id)

    assert get_interview(session, catalog.staff, interview.id).status == "cancelled"
    availability = get_availability(
        session,
        catalog.staff,
        shelter_id=catalog.shelter.id,
        day=DAY,
        duration_minutes=30,
        now=BEFORE_DAY,
    )
    assert availability.available_slots == availability.total_slots
    [notice] = NotificationRepository(session).list_for_user(catalog.shelter.user_id)
    assert notice.metadata["cancelled_interview_ids"] == [interview.id]
    reminders = send_interview_reminders(
        session, now=datetime(2031, 3, 13, 12, 0, tzinfo=timezone.utc), lead_hours=24
    )
    assert reminders == []


def test_accepting_keeps_interview_and_application(session, catalog, full_profile) -> None:
    application = _reviewed_application(session, catalog, full_profile)
    interview = schedule_interview(
        session, catalog.staff, application_id=application.id, request=_request()
    )

    answered = respond_to_interview(session, catalog.adopter, interview.id, accepted=True)

    assert answered.adopter_response is True
    assert answered.status == "scheduled"
    assert get_application(session, catalog.adopter, application.id).status == "interview_scheduled"


def test_only_the_adopter_can_respond(session, catalog, full_profile) -> None:
    application = _reviewed_application(session, catalog, full_profile)
    interview = schedule_interview(
        session, catalog.staff, application_id=application.id, request=_request()
    )

    with pytest.raises(Forbidden):
        respond_to_interview(session, catalog.other_adopter, interview.id, accepted=True)
    with pytest.raises(Forbidden):
        respond_to_interview(session, catalog.staff, interview.id, accepted=True)


def test_reschedule_moves_interview_and_notifies(session, catalog, full_profile) -> None:
    application = _reviewed_application(session, catalog, full_profile)
    interview = schedule_interview(
        session, catalog.staff, application_id=application.id, request=_request()
    )
    respond_to_interview(session, catalog.adopter, interview.id, accepted=True)

    moved = reschedule_interview(
        session, catalog.staff, interview.id, new_date=DAY, new_time=time(10, 15), notes="Vet visit"
    )

    assert moved.status == "rescheduled"
    assert moved.scheduled_time == time(10, 15)
    assert moved.adopter_response is None
    inbox = NotificationRepository(session).list_for_user(catalog.adopter.user_id)
    assert [item.type for item in inbox] == ["interview_scheduled", "interview_scheduled"]


def test_reschedule_into_another_booking_fails(session, catalog, full_profile) -> None:
    first = _reviewed_application(session, catalog, full_profile)
    second = _reviewed_application(
        session, catalog, full_profile, adopter=catalog.other_adopter
    )
    interview = schedule_interview(
        session, catalog.staff, application_id=first.id, request=_request("interview", time(9, 0))
    )
    schedule_interview(
        session, catalog.staff, application_id=second.id, request=_request("interview", time(11, 0))
    )

    with pytest.raises(SlotConflict):
        reschedule_interview(
            session, catalog.staff, interview.id, new_date=DAY, new_time=time(11, 15)
        )
    assert get_interview(session, catalog.staff, interview.id).scheduled_time == time(9, 0)


def test_cancel_frees_the_slot_and_keeps_application(session, catalog, full_profile) -> None:
    application = _reviewed_application(session, catalog, full_profile)
    interview = schedule_interview(
        session, catalog.staff, application_id=application.id, request=_request()
    )

    cancelled = cancel_interview(session, catalog.staff, interview.id, reason="Staff sick")

    assert cancelled.status == "cancelled"
    assert cancelled.shelter_notes == "Staff sick"
    assert get_application(session, catalog.adopter, application.id).status == "interview_scheduled"
    availability = get_availability(
        session, catalog.staff, shelter_id=catalog.shelter.id, day=DAY, now=BEFORE_DAY
    )
    assert availability.available_slots == availability.total_slots

    with pytest.raises(InvalidTransition):
        cancel_interview(session, catalog.staff, interview.id)
    with pytest.raises(Forbidden):
        cancel_interview(session, catalog.other_staff, interview.id)


def test_status_updates(session, catalog, full_profile) -> None:
    application = _reviewed_application(session, catalog, full_profile)
    interview = schedule_interview(
        session, catalog.staff, application_id=application.id, request=_request()
    )

    confirmed = update_interview_status(session, catalog.staff, interview.id, status="confirmed")
    completed = update_interview_status(
        session, catalog.staff, interview.id, status="completed", shelter_notes="Lovely family"
    )

    assert confirmed.status == "confirmed"
    assert completed.status == "completed"
    assert completed.shelter_notes == "Lovely family"
    with pytest.raises(InvalidTransition):
        update_interview_status(session, catalog.staff, interview.id, status="scheduled")


def test_listing_interviews(session, catalog, full_profile) -> None:
    first = _reviewed_application(session, catalog, full_profile)
    second = _reviewed_application(
        session, catalog, full_profile, adopter=catalog.other_adopter
    )
    late = schedule_interview(
        session, catalog.staff, application_id=first.id, request=_request("interview", time(15, 0))
    )
    early = schedule_interview(
        session, catalog.staff, application_id=second.id, request=_request("meet_greet", time(9, 0))
    )
    cancel_interview(session, catalog.staff, late.id)

    assert [item.id for item in list_interviews(session, catalog.staff)] == [early.id, late.id]
    assert [item.id for item in list_interviews(session, catalog.adopter)] == [late.id]
    assert [
        item.id for item in list_interviews(session, catalog.staff, status="cancelled")
    ] == [late.id]
    assert [
        item.id for item in list_interviews(session, catalog.staff, interview_type="meet_greet")
    ] == [early.id]
    assert list_interviews(session, catalog.staff, start_date=date(2031, 3, 15)) == []
    assert list_interviews(session, catalog.other_staff) == []

    with pytest.raises(Forbidden):
        get_interview(session, catalog.other_adopter, late.id)


def test_concurrent_bookings_for_one_slot(catalog, full_profile) -> None:
    attempts = 6
    setup = SessionLocal()
    try:
        application = _reviewed_application(setup, catalog, full_profile)
    finally:
        setup.close()

    barrier = threading.Barrier(attempts)
    outcomes: list[str] = []
    outcomes_lock = threading.Lock()

    def book(offset: int) -> None:
        session = SessionLocal()
        try:
            barrier.wait()
            schedule_interview(
                session,
                catalog.staff,
                application_id=application.id,
                request=_request("interview", time(10, offset * 5)),
            )
            result = "ok"
        except SlotConflict:
            result = "conflict"
        finally:
            session.close()
        with outcomes_lock:
            outcomes.append(result)

    threads = [threading.Thread(target=book, args=(index,)) for index in range(attempts)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=60)

    assert sorted(outcomes) == ["conflict"] * (attempts - 1) + ["ok"]
    check = SessionLocal()
    try:
        booked = InterviewRepository(check).list_active_for_shelter_on(catalog.shelter.id, DAY)
    finally:
        check.close()
    assert len(booked) == 1
