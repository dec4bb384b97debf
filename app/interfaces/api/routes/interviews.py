"""Routes for the shelter interview calendar."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.interviews import (
    cancel_interview as cancel_interview_uc,
    get_availability as get_availability_uc,
    get_interview as get_interview_uc,
    list_interviews as list_interviews_uc,
    reschedule_interview as reschedule_interview_uc,
    respond_to_interview as respond_to_interview_uc,
    schedule_interview as schedule_interview_uc,
    update_interview_status as update_interview_status_uc,
)
from app.domain.entities import Caller
from app.domain.scheduling import BookingRequest
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_caller
from app.interfaces.api.errors import to_http_exception
from app.interfaces.api.schemas import (
    AvailabilityRead,
    InterviewCancel,
    InterviewCreate,
    InterviewRead,
    InterviewReschedule,
    InterviewRespond,
    InterviewStatusUpdate,
)

router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.get("/availability", response_model=AvailabilityRead)
def read_availability(
    shelter_id: int = Query(..., gt=0),
    day: date = Query(..., alias="date"),
    duration: int | None = Query(default=None, gt=0, le=24 * 60),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> AvailabilityRead:
    """Return free and busy slots of a shelter for one day."""

    try:
        availability = get_availability_uc(
            db, caller, shelter_id=shelter_id, day=day, duration_minutes=duration
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return AvailabilityRead.from_availability(availability)


@router.get("/", response_model=list[InterviewRead])
def list_interviews(
    start_date: date | None = None,
    end_date: date | None = None,
    status_filter: str | None = Query(default=None, alias="status"),
    interview_type: str | None = Query(default=None, alias="type"),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> list[InterviewRead]:
    interviews = list_interviews_uc(
        db,
        caller,
        start_date=start_date,
        end_date=end_date,
        status=status_filter,
        interview_type=interview_type,
    )
    return [InterviewRead.from_entity(interview) for interview in interviews]


@router.post("/", response_model=InterviewRead, status_code=status.HTTP_201_CREATED)
def schedule_interview(
    payload: InterviewCreate,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> InterviewRead:
    """Book an interview; a 409 lists the appointments it collides with."""

    request = BookingRequest(
        type=payload.type,
        scheduled_date=payload.scheduled_date,
        scheduled_time=payload.scheduled_time,
        duration_minutes=payload.duration_minutes,
        location=payload.location,
        notes=payload.notes,
    )
    try:
        interview = schedule_interview_uc(
            db, caller, application_id=payload.application_id, request=request
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return InterviewRead.from_entity(interview)


@router.get("/{interview_id}", response_model=InterviewRead)
def read_interview(
    interview_id: int,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> InterviewRead:
    try:
        interview = get_interview_uc(db, caller, interview_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return InterviewRead.from_entity(interview)


@router.patch("/{interview_id}/reschedule", response_model=InterviewRead)
def reschedule_interview(
    interview_id: int,
    payload: InterviewReschedule,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> InterviewRead:
    try:
        interview = reschedule_interview_uc(
            db,
            caller,
            interview_id,
            new_date=payload.scheduled_date,
            new_time=payload.scheduled_time,
            notes=payload.notes,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return InterviewRead.from_entity(interview)


@router.post("/{interview_id}/cancel", response_model=InterviewRead)
def cancel_interview(
    interview_id: int,
    payload: InterviewCancel | None = None,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> InterviewRead:
    reason = payload.reason if payload is not None else None
    try:
        interview = cancel_interview_uc(db, caller, interview_id, reason=reason)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return InterviewRead.from_entity(interview)


@router.patch("/{interview_id}/status", response_model=InterviewRead)
def update_interview_status(
    interview_id: int,
    payload: InterviewStatusUpdate,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> InterviewRead:
    try:
        interview = update_interview_status_uc(
            db,
            caller,
            interview_id,
            status=payload.status,
            shelter_notes=payload.shelter_notes,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return InterviewRead.from_entity(interview)


@router.post("/{interview_id}/respond", response_model=InterviewRead)
def respond_to_interview(
    interview_id: int,
    payload: InterviewRespond,
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_caller),
) -> InterviewRead:
    """Adopter accepts or declines an interview."""

    try:
        interview = respond_to_interview_uc(
            db, caller, interview_id, accepted=payload.accepted, notes=payload.notes
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return InterviewRead.from_entity(interview)
