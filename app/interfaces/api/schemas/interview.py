"""Schemas for interview and availability endpoints."""

from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict, Field

from app.domain.availability import Availability, ConflictDetail
from app.domain.entities import Interview
from app.utils import format_clock


class InterviewCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    application_id: int = Field(..., gt=0)
    type: str
    scheduled_date: date
    scheduled_time: time
    duration_minutes: int | None = Field(default=None, gt=0, le=24 * 60)
    location: str | None = Field(default=None, max_length=255)
    notes: str | None = None


class InterviewReschedule(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scheduled_date: date
    scheduled_time: time
    notes: str | None = None


class InterviewCancel(BaseModel):
    reason: str | None = None


class InterviewStatusUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: str
    shelter_notes: str | None = None


class InterviewRespond(BaseModel):
    model_config = ConfigDict(extra="forbid")

    accepted: bool
    notes: str | None = None


class InterviewRead(BaseModel):
    id: int
    application_id: int
    shelter_id: int
    adopter_id: int
    type: str
    status: str
    scheduled_date: date
    scheduled_time: str
    duration_minutes: int | None = None
    location: str | None = None
    notes: str | None = None
    shelter_notes: str | None = None
    adopter_response: bool | None = None
    adopter_response_notes: str | None = None
    responded_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, interview: Interview) -> "InterviewRead":
        return cls(
            id=interview.id,
            application_id=interview.application_id,
            shelter_id=interview.shelter_id,
            adopter_id=interview.adopter_id,
            type=interview.type,
            status=interview.status,
            scheduled_date=interview.scheduled_date,
            scheduled_time=format_clock(interview.scheduled_time),
            duration_minutes=interview.duration_minutes,
            location=interview.location,
            notes=interview.notes,
            shelter_notes=interview.shelter_notes,
            adopter_response=interview.adopter_response,
            adopter_response_notes=interview.adopter_response_notes,
            responded_at=interview.responded_at,
            created_at=interview.created_at,
            updated_at=interview.updated_at,
        )


class ConflictRead(BaseModel):
    interview_id: int | None = None
    type: str
    time: str
    end_time: str
    duration: int

    @classmethod
    def from_detail(cls, conflict: ConflictDetail) -> "ConflictRead":
        return cls(**conflict.as_dict())


class TimeSlotRead(BaseModel):
    time: str
    available: bool
    conflicts: list[ConflictRead] = Field(default_factory=list)


class AvailabilityRead(BaseModel):
    shelter_id: int
    date: date
    duration_minutes: int
    business_start: str
    business_end: str
    total_slots: int
    available_slots: int
    slots: list[TimeSlotRead]

    @classmethod
    def from_availability(cls, availability: Availability) -> "AvailabilityRead":
        return cls(
            shelter_id=availability.shelter_id,
            date=availability.date,
            duration_minutes=availability.duration_minutes,
            business_start=availability.business_start,
            business_end=availability.business_end,
            total_slots=availability.total_slots,
            available_slots=availability.available_slots,
            slots=[
                TimeSlotRead(
                    time=slot.time,
                    available=slot.available,
                    conflicts=[ConflictRead.from_detail(item) for item in slot.conflicts],
                )
                for slot in availability.slots
            ],
        )


__all__ = [
    "InterviewCreate",
    "InterviewReschedule",
    "InterviewCancel",
    "InterviewStatusUpdate",
    "InterviewRespond",
    "InterviewRead",
    "ConflictRead",
    "TimeSlotRead",
    "AvailabilityRead",
]
