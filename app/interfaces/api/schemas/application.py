"""Schemas for adoption application endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import Application


class ApplicantProfileFields(BaseModel):
    """Questionnaire answers; every field is optional until submission."""

    model_config = ConfigDict(extra="forbid")

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    date_of_birth: str | None = Field(default=None, max_length=20)
    occupation: str | None = Field(default=None, max_length=120)
    housing_type: str | None = None
    own_rent: str | None = None
    address: str | None = None
    landlord_permission: str | None = None
    yard_type: str | None = None
    household_size: int | None = Field(default=None, ge=1)
    previous_pets: str | None = None
    current_pets: str | None = None
    pet_experience: str | None = None
    veterinarian: str | None = None
    work_schedule: str | None = None
    exercise_commitment: str | None = None
    travel_frequency: str | None = None
    pet_preferences: str | None = None
    household_members: str | None = None
    allergies: str | None = None
    children_ages: str | None = None
    references: str | None = None
    emergency_contact: str | None = None
    agreements: list[str] | None = None

    def profile_updates(self) -> dict[str, Any]:
        return self.model_dump(exclude={"pet_id"}, exclude_none=True)


class ApplicationSubmit(ApplicantProfileFields):
    """Payload used both to save a draft and to submit an application."""

    pet_id: int = Field(..., gt=0)


class ApplicationReview(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: str
    reviewer_notes: str | None = None


class ApplicationRead(ApplicantProfileFields):
    model_config = ConfigDict(extra="ignore")

    id: int
    pet_id: int
    adopter_id: int
    status: str
    agreements: list[str] = Field(default_factory=list)
    submitted_at: datetime | None = None
    reviewed_at: datetime | None = None
    reviewer_notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationRead":
        profile = {
            name: getattr(application.profile, name)
            for name in application.profile.field_names()
        }
        return cls(
            id=application.id,
            pet_id=application.pet_id,
            adopter_id=application.adopter_id,
            status=application.status,
            submitted_at=application.submitted_at,
            reviewed_at=application.reviewed_at,
            reviewer_notes=application.reviewer_notes,
            created_at=application.created_at,
            updated_at=application.updated_at,
            **profile,
        )


__all__ = [
    "ApplicantProfileFields",
    "ApplicationSubmit",
    "ApplicationReview",
    "ApplicationRead",
]
