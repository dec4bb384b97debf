"""Who may read or act on an application."""

from __future__ import annotations

from app.domain.entities import ROLE_ADMIN, Application, Caller, Pet
from app.domain.errors import Forbidden


def ensure_can_view(caller: Caller, application: Application, pet: Pet) -> None:
    if caller.role == ROLE_ADMIN:
        return
    if caller.is_adopter() and caller.user_id == application.adopter_id:
        return
    if caller.manages_shelter(pet.shelter_id):
        return
    raise Forbidden("You do not have access to this application")


def ensure_owning_adopter(caller: Caller, application: Application) -> None:
    if not caller.is_adopter() or caller.user_id != application.adopter_id:
        raise Forbidden("Only the adopter who owns this application can do that")


def ensure_adopter(caller: Caller) -> None:
    if not caller.is_adopter():
        raise Forbidden("Only adopters can create applications")


__all__ = ["ensure_can_view", "ensure_owning_adopter", "ensure_adopter"]
