"""Use case for listing applications visible to the caller."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import ROLE_ADMIN, Application, Caller
from app.infrastructure.repositories import ApplicationRepository


def list_applications(
    session: Session,
    caller: Caller,
    *,
    status: str | None = None,
    skip: int = 0,
    limit: int = 100,
) -> Sequence[Application]:
    """Adopters see their own applications, shelters those for their pets."""

    repository = ApplicationRepository(session)
    if caller.is_adopter():
        return repository.list(adopter_id=caller.user_id, status=status, skip=skip, limit=limit)
    if caller.is_shelter():
        return repository.list(
            shelter_id=caller.shelter_id, status=status, skip=skip, limit=limit
        )
    if caller.role == ROLE_ADMIN:
        return repository.list(status=status, skip=skip, limit=limit)
    return []


__all__ = ["list_applications"]
