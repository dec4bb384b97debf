"""Interview scheduling and adopter responses.

Planners validate a requested change against the current state and return
the updated :class:`Interview` together with the :class:`WorkflowEffect`
(application status change and notifications) that must be committed with
it. They never touch the store; the use cases load state, hold the shelter
booking lock and apply the result in one transaction.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, time
from typing import Sequence

from app.domain.availability import DEFAULT_DURATION_MINUTES, find_conflicts
from app.domain.entities import (
    INTERVIEW_STATUS_CANCELLED,
    INTERVIEW_STATUS_CONFIRMED,
    INTERVIEW_STATUS_RESCHEDULED,
    INTERVIEW_STATUS_SCHEDULED,
    INTERVIEW_STATUS_TRANSITIONS,
    NOTIFICATION_TYPE_GENERAL,
    NOTIFICATION_TYPE_INTERVIEW_RESPONSE,
    NOTIFICATION_TYPE_INTERVIEW_SCHEDULED,
    Application,
    ApplicationStatusUpdate,
    Caller,
    Interview,
    NotificationDraft,
    Pet,
    Shelter,
    WorkflowEffect,
)
from app.domain.errors import (
    Forbidden,
    InvalidTransition,
    NotPending,
    SlotConflict,
)
from app.domain.interview_types import get_interview_type
from app.domain.workflow import ensure_transition, status_after_decline
from app.utils import format_clock


@dataclass(frozen=True)
class BookingRequest:
    """Shelter request to book an engagement for an application."""

    type: str
    scheduled_date: date
    scheduled_time: time
    duration_minutes: int | None = None
    location: str | None = None
    notes: str | None = None


def ensure_shelter_access(caller: Caller, shelter_id: int) -> None:
    """Only staff of the shelter owning the pet may manage its interviews."""

    if not caller.manages_shelter(shelter_id):
        raise Forbidden("Only the shelter that owns this pet can manage its interviews")


def plan_interview(
    caller: Caller,
    application: Application,
    pet: Pet,
    request: BookingRequest,
    existing: Sequence[Interview],
    *,
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> tuple[Interview, WorkflowEffect]:
    """Validate a new booking against the shelter calendar and the lifecycle."""

    ensure_shelter_access(caller, pet.shelter_id)
    spec = get_interview_type(request.type)
    ensure_transition(application.status, spec.application_status)

    duration = request.duration_minutes or spec.default_duration_minutes
    location = request.location or spec.default_location

    conflicts = find_conflicts(
        request.scheduled_date,
        request.scheduled_time,
        duration,
        existing,
        default_duration=default_duration,
    )
    if conflicts:
        raise SlotConflict(conflicts)

    interview = Interview(
        id=None,
        application_id=application.id,
        shelter_id=pet.shelter_id,
        adopter_id=application.adopter_id,
        type=spec.key,
        status=INTERVIEW_STATUS_SCHEDULED,
        scheduled_date=request.scheduled_date,
        scheduled_time=request.scheduled_time,
        duration_minutes=duration,
        location=location,
        notes=request.notes,
    )

    effect = WorkflowEffect(
        application_update=ApplicationStatusUpdate(
            application_id=application.id,
            expected_status=application.status,
            target_status=spec.application_status,
        )
    )
    effect.notify(
        NotificationDraft(
            recipient_id=application.adopter_id,
            type=NOTIFICATION_TYPE_INTERVIEW_SCHEDULED,
            title=f"{spec.label} scheduled",
            message=(
                f"Your {spec.label.lower()} for {pet.name} is scheduled on "
                f"{_describe_slot(interview)} at {location}."
            ),
            metadata=_interview_metadata(interview, pet),
        )
    )
    return interview, effect


def plan_reschedule(
    caller: Caller,
    interview: Interview,
    pet: Pet,
    new_date: date,
    new_time: time,
    existing: Sequence[Interview],
    *,
    notes: str | None = None,
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> tuple[Interview, WorkflowEffect]:
    """Move an active interview to a new slot, ignoring its own current slot."""

    ensure_shelter_access(caller, interview.shelter_id)
    if not interview.is_active:
        raise InvalidTransition(
            f"Cannot reschedule an interview that is {interview.status}",
            current_status=interview.status,
            target_status=INTERVIEW_STATUS_RESCHEDULED,
        )

    duration = interview.duration_minutes or default_duration
    conflicts = find_conflicts(
        new_date,
        new_time,
        duration,
        existing,
        exclude_interview_id=interview.id,
        default_duration=default_duration,
    )
    if conflicts:
        raise SlotConflict(conflicts)

    updated = replace(
        interview,
        scheduled_date=new_date,
        scheduled_time=new_time,
        duration_minutes=duration,
        status=INTERVIEW_STATUS_RESCHEDULED,
        shelter_notes=notes if notes is not None else interview.shelter_notes,
        adopter_response=None,
        adopter_response_notes=None,
        responded_at=None,
    )
    spec = get_interview_type(interview.type)
    effect = WorkflowEffect()
    effect.notify(
        NotificationDraft(
            recipient_id=interview.adopter_id,
            type=NOTIFICATION_TYPE_INTERVIEW_SCHEDULED,
            title=f"{spec.label} rescheduled",
            message=(
                f"Your {spec.label.lower()} for {pet.name} has been moved to "
                f"{_describe_slot(updated)}."
            ),
            metadata=_interview_metadata(updated, pet),
        )
    )
    return updated, effect


def plan_cancel(
    caller: Caller,
    interview: Interview,
    pet: Pet,
    *,
    reason: str | None = None,
) -> tuple[Interview, WorkflowEffect]:
    """Cancel an interview. The application status is left for the shelter to adjust."""

    ensure_shelter_access(caller, interview.shelter_id)
    updated = _apply_interview_status(interview, INTERVIEW_STATUS_CANCELLED, reason)
    spec = get_interview_type(interview.type)
    message = f"Your {spec.label.lower()} for {pet.name} on {_describe_slot(interview)} was cancelled."
    if reason:
        message = f"{message} Reason: {reason}"
    effect = WorkflowEffect()
    effect.notify(
        NotificationDraft(
            recipient_id=interview.adopter_id,
            type=NOTIFICATION_TYPE_GENERAL,
            title=f"{spec.label} cancelled",
            message=message,
            metadata=_interview_metadata(updated, pet),
        )
    )
    return updated, effect


def plan_status_update(
    caller: Caller,
    interview: Interview,
    pet: Pet,
    status: str,
    *,
    shelter_notes: str | None = None,
) -> tuple[Interview, WorkflowEffect]:
    """Shelter-side status change such as ``confirmed`` or ``completed``."""

    ensure_shelter_access(caller, interview.shelter_id)
    updated = _apply_interview_status(interview, status, shelter_notes)

    effect = WorkflowEffect()
    if status in (INTERVIEW_STATUS_CONFIRMED, INTERVIEW_STATUS_CANCELLED):
        spec = get_interview_type(interview.type)
        effect.notify(
            NotificationDraft(
                recipient_id=interview.adopter_id,
                type=NOTIFICATION_TYPE_GENERAL,
                title=f"{spec.label} {status}",
                message=(
                    f"Your {spec.label.lower()} for {pet.name} on "
                    f"{_describe_slot(interview)} is now {status}."
                ),
                metadata=_interview_metadata(updated, pet),
            )
        )
    return updated, effect


def plan_response(
    caller: Caller,
    interview: Interview,
    application: Application,
    pet: Pet,
    shelter: Shelter,
    *,
    accepted: bool,
    notes: str | None,
    now: datetime,
) -> tuple[Interview, WorkflowEffect]:
    """Record the adopter's answer to a scheduled interview.

    Accepting only records the answer. Declining also releases the slot and,
    while the application is still in review or at an interview stage,
    returns it to ``under_review``.
    """

    if not caller.is_adopter() or caller.user_id != application.adopter_id:
        raise Forbidden("Only the adopter on this application can respond")
    if interview.adopter_response is not None:
        raise NotPending("A response has already been recorded for this interview")
    if not interview.is_active:
        raise InvalidTransition(
            f"Cannot respond to an interview that is {interview.status}",
            current_status=interview.status,
        )

    effect = WorkflowEffect()
    updated = replace(
        interview,
        adopter_response=accepted,
        adopter_response_notes=notes,
        responded_at=now,
    )
    if not accepted:
        updated = replace(updated, status=INTERVIEW_STATUS_CANCELLED)
        target = status_after_decline(application.status)
        if target is not None:
            effect.application_update = ApplicationStatusUpdate(
                application_id=application.id,
                expected_status=application.status,
                target_status=target,
            )

    spec = get_interview_type(interview.type)
    verb = "accepted" if accepted else "declined"
    message = f"The adopter {verb} the {spec.label.lower()} for {pet.name} on {_describe_slot(interview)}."
    if notes:
        message = f"{message} Notes: {notes}"
    metadata = _interview_metadata(updated, pet)
    metadata["adopter_response"] = accepted
    effect.notify(
        NotificationDraft(
            recipient_id=shelter.user_id,
            type=NOTIFICATION_TYPE_INTERVIEW_RESPONSE,
            title=f"{spec.label} {verb}",
            message=message,
            metadata=metadata,
        )
    )
    return updated, effect


def plan_withdrawal_release(interviews: Sequence[Interview]) -> list[Interview]:
    """Cancel the active interviews of an application the adopter withdrew."""

    return [
        replace(
            interview,
            status=INTERVIEW_STATUS_CANCELLED,
            shelter_notes=interview.shelter_notes or "Application withdrawn by the adopter",
        )
        for interview in interviews
        if interview.is_active
    ]


def _apply_interview_status(
    interview: Interview, status: str, shelter_notes: str | None
) -> Interview:
    allowed = INTERVIEW_STATUS_TRANSITIONS.get(interview.status, frozenset())
    if status not in allowed:
        raise InvalidTransition(
            f"Cannot move interview from {interview.status} to {status}",
            current_status=interview.status,
            target_status=status,
        )
    return replace(
        interview,
        status=status,
        shelter_notes=shelter_notes if shelter_notes is not None else interview.shelter_notes,
    )


def _describe_slot(interview: Interview) -> str:
    return (
        f"{interview.scheduled_date.isoformat()} at {format_clock(interview.scheduled_time)}"
        f" ({interview.duration_minutes or DEFAULT_DURATION_MINUTES} minutes)"
    )


def _interview_metadata(interview: Interview, pet: Pet) -> dict:
    metadata = {
        "application_id": interview.application_id,
        "pet_id": pet.id,
        "pet_name": pet.name,
        "interview_type": interview.type,
        "scheduled_date": interview.scheduled_date.isoformat(),
        "scheduled_time": format_clock(interview.scheduled_time),
        "duration_minutes": interview.duration_minutes,
    }
    if interview.id is not None:
        metadata["interview_id"] = interview.id
    return metadata


__all__ = [
    "BookingRequest",
    "ensure_shelter_access",
    "plan_interview",
    "plan_reschedule",
    "plan_cancel",
    "plan_status_update",
    "plan_response",
    "plan_withdrawal_release",
]
