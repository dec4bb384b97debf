"""Lookup table describing each kind of interview a shelter can book."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities import (
    APPLICATION_STATUS_HOME_VISIT_SCHEDULED,
    APPLICATION_STATUS_INTERVIEW_SCHEDULED,
    APPLICATION_STATUS_MEET_GREET_SCHEDULED,
    INTERVIEW_TYPE_HOME_VISIT,
    INTERVIEW_TYPE_INTERVIEW,
    INTERVIEW_TYPE_MEET_GREET,
)


@dataclass(frozen=True)
class InterviewTypeSpec:
    key: str
    label: str
    description: str
    default_duration_minutes: int
    default_location: str
    application_status: str


INTERVIEW_TYPES: dict[str, InterviewTypeSpec] = {
    INTERVIEW_TYPE_INTERVIEW: InterviewTypeSpec(
        key=INTERVIEW_TYPE_INTERVIEW,
        label="Phone/Video Interview",
        description="Initial screening interview with the applicant",
        default_duration_minutes=30,
        default_location="Video Call (Zoom/Teams)",
        application_status=APPLICATION_STATUS_INTERVIEW_SCHEDULED,
    ),
    INTERVIEW_TYPE_MEET_GREET: InterviewTypeSpec(
        key=INTERVIEW_TYPE_MEET_GREET,
        label="Meet & Greet",
        description="In-person meeting between applicant and pet",
        default_duration_minutes=45,
        default_location="Shelter facility",
        application_status=APPLICATION_STATUS_MEET_GREET_SCHEDULED,
    ),
    INTERVIEW_TYPE_HOME_VISIT: InterviewTypeSpec(
        key=INTERVIEW_TYPE_HOME_VISIT,
        label="Home Visit",
        description="Visit to applicant's home to assess environment",
        default_duration_minutes=90,
        default_location="Applicant's residence",
        application_status=APPLICATION_STATUS_HOME_VISIT_SCHEDULED,
    ),
}


def get_interview_type(key: str) -> InterviewTypeSpec:
    """Return the definition for ``key`` or raise ``ValueError`` for unknown types."""

    try:
        return INTERVIEW_TYPES[key]
    except KeyError as exc:
        valid = ", ".join(sorted(INTERVIEW_TYPES))
        raise ValueError(f"Unknown interview type '{key}'. Expected one of: {valid}") from exc


__all__ = ["InterviewTypeSpec", "INTERVIEW_TYPES", "get_interview_type"]
