"""Use case for retrieving a single application."""

from sqlalchemy.orm import Session

from app.application.use_cases.lookups import require_application, require_pet
from app.domain.entities import Application, Caller

from .access import ensure_can_view


def get_application(session: Session, caller: Caller, application_id: int) -> Application:
    """Return the application if the caller is one of its two parties."""

    application = require_application(session, application_id)
    pet = require_pet(session, application.pet_id)
    ensure_can_view(caller, application, pet)
    return application


__all__ = ["get_application"]
