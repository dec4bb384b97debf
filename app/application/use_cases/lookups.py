"""Shared loaders raising :class:`NotFound` for missing records."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Application, Interview, Pet, Shelter
from app.domain.errors import NotFound
from app.infrastructure.repositories import (
    ApplicationRepository,
    InterviewRepository,
    PetRepository,
    ShelterRepository,
)


def require_application(session: Session, application_id: int) -> Application:
    application = ApplicationRepository(session).get(application_id)
    if application is None:
        raise NotFound("Application not found")
    return application


def require_interview(session: Session, interview_id: int) -> Interview:
    interview = InterviewRepository(session).get(interview_id)
    if interview is None:
        raise NotFound("Interview not found")
    return interview


def require_pet(session: Session, pet_id: int) -> Pet:
    pet = PetRepository(session).get(pet_id)
    if pet is None:
        raise NotFound("Pet not found")
    return pet


def require_shelter(session: Session, shelter_id: int) -> Shelter:
    shelter = ShelterRepository(session).get(shelter_id)
    if shelter is None:
        raise NotFound("Shelter not found")
    return shelter


__all__ = [
    "require_application",
    "require_interview",
    "require_pet",
    "require_shelter",
]
