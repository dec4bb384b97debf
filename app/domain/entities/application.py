"""Domain entity representing an adoption application."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any

APPLICATION_STATUS_DRAFT = "draft"
APPLICATION_STATUS_SUBMITTED = "submitted"
APPLICATION_STATUS_UNDER_REVIEW = "under_review"
APPLICATION_STATUS_INTERVIEW_SCHEDULED = "interview_scheduled"
APPLICATION_STATUS_MEET_GREET_SCHEDULED = "meet_greet_scheduled"
APPLICATION_STATUS_HOME_VISIT_SCHEDULED = "home_visit_scheduled"
APPLICATION_STATUS_PENDING_APPROVAL = "pending_approval"
APPLICATION_STATUS_APPROVED = "approved"
APPLICATION_STATUS_REJECTED = "rejected"
APPLICATION_STATUS_WITHDRAWN = "withdrawn"

APPLICATION_STATUSES = (
    APPLICATION_STATUS_DRAFT,
    APPLICATION_STATUS_SUBMITTED,
    APPLICATION_STATUS_UNDER_REVIEW,
    APPLICATION_STATUS_INTERVIEW_SCHEDULED,
    APPLICATION_STATUS_MEET_GREET_SCHEDULED,
    APPLICATION_STATUS_HOME_VISIT_SCHEDULED,
    APPLICATION_STATUS_PENDING_APPROVAL,
    APPLICATION_STATUS_APPROVED,
    APPLICATION_STATUS_REJECTED,
    APPLICATION_STATUS_WITHDRAWN,
)
SCHEDULED_APPLICATION_STATUSES = frozenset(
    {
        APPLICATION_STATUS_INTERVIEW_SCHEDULED,
        APPLICATION_STATUS_MEET_GREET_SCHEDULED,
        APPLICATION_STATUS_HOME_VISIT_SCHEDULED,
    }
)
TERMINAL_APPLICATION_STATUSES = frozenset(
    {
        APPLICATION_STATUS_APPROVED,
        APPLICATION_STATUS_REJECTED,
        APPLICATION_STATUS_WITHDRAWN,
    }
)

REQUIRED_PROFILE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "date_of_birth",
    "occupation",
)


@dataclass
class ApplicantProfile:
    """Personal and lifestyle answers supplied by the adopter."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    date_of_birth: str | None = None
    occupation: str | None = None
    housing_type: str | None = None
    own_rent: str | None = None
    address: str | None = None
    landlord_permission: str | None = None
    yard_type: str | None = None
    household_size: int | None = None
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
    agreements: list[str] = field(default_factory=list)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(item.name for item in fields(cls))

    def missing_required_fields(self) -> list[str]:
        """Return required fields that are empty or whitespace only."""

        missing: list[str] = []
        for name in REQUIRED_PROFILE_FIELDS:
            value = getattr(self, name)
            if value is None or not str(value).strip():
                missing.append(name)
        return missing

    def merged_with(self, updates: dict[str, Any]) -> "ApplicantProfile":
        """Return a copy with the non-``None`` values from ``updates`` applied."""

        values = {name: getattr(self, name) for name in self.field_names()}
        for name, value in updates.items():
            if name in values and value is not None:
                values[name] = value
        return ApplicantProfile(**values)


@dataclass
class Application:
    """One adopter's request to adopt one specific pet."""

    id: int | None
    pet_id: int
    adopter_id: int
    status: str
    profile: ApplicantProfile = field(default_factory=ApplicantProfile)
    submitted_at: datetime | None = None
    reviewed_at: datetime | None = None
    reviewer_notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_APPLICATION_STATUSES


__all__ = [
    "APPLICATION_STATUS_DRAFT",
    "APPLICATION_STATUS_SUBMITTED",
    "APPLICATION_STATUS_UNDER_REVIEW",
    "APPLICATION_STATUS_INTERVIEW_SCHEDULED",
    "APPLICATION_STATUS_MEET_GREET_SCHEDULED",
    "APPLICATION_STATUS_HOME_VISIT_SCHEDULED",
    "APPLICATION_STATUS_PENDING_APPROVAL",
    "APPLICATION_STATUS_APPROVED",
    "APPLICATION_STATUS_REJECTED",
    "APPLICATION_STATUS_WITHDRAWN",
    "APPLICATION_STATUSES",
    "SCHEDULED_APPLICATION_STATUSES",
    "TERMINAL_APPLICATION_STATUSES",
    "REQUIRED_PROFILE_FIELDS",
    "ApplicantProfile",
    "Application",
]
