"""Use case for saving an application as a draft."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.application.use_cases.lookups import require_pet
from app.domain.entities import (
    APPLICATION_STATUS_DRAFT,
    ApplicantProfile,
    Application,
    Caller,
)
from app.domain.errors import DuplicateApplication
from app.infrastructure.database import transaction
from app.infrastructure.repositories import ApplicationRepository

from .access import ensure_adopter

logger = logging.getLogger(__name__)


def save_draft(
    session: Session,
    caller: Caller,
    *,
    pet_id: int,
    profile: dict[str, Any],
) -> Application:
    """Create or update the caller's draft for ``pet_id``.

    Drafts are not validated; required fields are only checked on submit.
    """

    ensure_adopter(caller)
    repository = ApplicationRepository(session)

    with transaction(session):
        require_pet(session, pet_id)
        existing = repository.get_open_for_pair(pet_id=pet_id, adopter_id=caller.user_id)
        if existing is not None and existing.status != APPLICATION_STATUS_DRAFT:
            raise DuplicateApplication(
                "You already have an active application for this pet"
            )

        if existing is not None:
            saved = repository.update_profile(
                existing.id, existing.profile.merged_with(profile)
            )
        else:
            draft = Application(
                id=None,
                pet_id=pet_id,
                adopter_id=caller.user_id,
                status=APPLICATION_STATUS_DRAFT,
                profile=ApplicantProfile().merged_with(profile),
            )
            try:
                saved = repository.create(draft)
            except IntegrityError as exc:
                logger.warning(
                    "Concurrent draft for pet %s by adopter %s", pet_id, caller.user_id
                )
                raise DuplicateApplication(
                    "You already have an active application for this pet"
                ) from exc

    logger.info("Saved draft application %s for pet %s", saved.id, pet_id)
    return saved


__all__ = ["save_draft"]
