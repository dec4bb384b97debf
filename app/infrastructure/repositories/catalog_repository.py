"""Read access to the pet catalog and shelter directory."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Pet, Shelter
from app.infrastructure.models import PetModel, ShelterModel


class PetRepository:
    """Look up pets owned by shelters."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, pet_id: int) -> Pet | None:
        model = self.session.get(PetModel, pet_id)
        if model is None:
            return None
        return self._to_entity(model)

    def create(self, pet: Pet) -> Pet:
        model = PetModel(
            shelter_id=pet.shelter_id,
            name=pet.name,
            status=pet.status,
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: PetModel) -> Pet:
        return Pet(
            id=model.id,
            shelter_id=model.shelter_id,
            name=model.name,
            status=model.status,
        )


class ShelterRepository:
    """Look up shelter profiles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, shelter_id: int) -> Shelter | None:
        model = self.session.get(ShelterModel, shelter_id)
        if model is None:
            return None
        return self._to_entity(model)

    def create(self, shelter: Shelter) -> Shelter:
        model = ShelterModel(user_id=shelter.user_id, name=shelter.name)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ShelterModel) -> Shelter:
        return Shelter(id=model.id, user_id=model.user_id, name=model.name)


__all__ = ["PetRepository", "ShelterRepository"]
