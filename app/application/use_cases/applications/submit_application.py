"""Use case for submitting an adoption application."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.application.use_cases.lookups import require_application, require_pet
from app.domain.entities import (
    APPLICATION_STATUS_DRAFT,
    APPLICATION_STATUS_SUBMITTED,
    ApplicantProfile,
    Application,
    Caller,
)
from app.domain.errors import ApplicationIncomplete, DuplicateApplication, PetUnavailable
from app.domain.workflow import ensure_transition
from app.infrastructure.database import transaction
from app.infrastructure.repositories import ApplicationRepository
from app.utils import now_in_app_timezone

from .access import ensure_adopter

logger = logging.getLogger(__name__)


def submit_application(
    session: Session,
    caller: Caller,
    *,
    pet_id: int,
    profile: dict[str, Any],
    now: datetime | None = None,
) -> Application:
    """Submit the caller's application for ``pet_id``.

    An existing draft for the pair is merged with ``profile`` and moved to
    ``submitted``; otherwise a new application is created directly in
    ``submitted``. Any other open application for the pair is a duplicate.
    """

    ensure_adopter(caller)
    repository = ApplicationRepository(session)
    submitted_at = now or now_in_app_timezone()

    with transaction(session):
        pet = require_pet(session, pet_id)
        if not pet.is_available:
            raise PetUnavailable(f"{pet.name} is not available for adoption")

        existing = repository.get_open_for_pair(pet_id=pet_id, adopter_id=caller.user_id)
        if existing is not None and existing.status != APPLICATION_STATUS_DRAFT:
            logger.warning(
                "Duplicate submission for pet %s by adopter %s (application %s is %s)",
                pet_id,
                caller.user_id,
                existing.id,
                existing.status,
            )
            raise DuplicateApplication(
                "You already have an active application for this pet"
            )

        base = existing.profile if existing is not None else ApplicantProfile()
        merged = base.merged_with(profile)
        missing = merged.missing_required_fields()
        if missing:
            raise ApplicationIncomplete(missing)

        if existing is not None:
            ensure_transition(existing.status, APPLICATION_STATUS_SUBMITTED)
            # Claim the draft before touching its answers.
            promoted = repository.transition_status(
                existing.id,
                expected_status=existing.status,
                target_status=APPLICATION_STATUS_SUBMITTED,
                submitted_at=submitted_at,
            )
            if not promoted:
                logger.warning(
                    "Draft %s for pet %s was submitted concurrently by adopter %s",
                    existing.id,
                    pet_id,
                    caller.user_id,
                )
                raise DuplicateApplication(
                    "You already have an active application for this pet"
                )
            repository.update_profile(existing.id, merged)
            application_id = existing.id
        else:
            try:
                created = repository.create(
                    Application(
                        id=None,
                        pet_id=pet_id,
                        adopter_id=caller.user_id,
                        status=APPLICATION_STATUS_SUBMITTED,
                        profile=merged,
                        submitted_at=submitted_at,
                    )
                )
            except IntegrityError as exc:
                logger.warning(
                    "Concurrent submission for pet %s by adopter %s",
                    pet_id,
                    caller.user_id,
                )
                raise DuplicateApplication(
                    "You already have an active application for this pet"
                ) from exc
            application_id = created.id

    logger.info(
        "Adopter %s submitted application %s for pet %s",
        caller.user_id,
        application_id,
        pet_id,
    )
    return require_application(session, application_id)


__all__ = ["submit_application"]
