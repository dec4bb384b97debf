"""Read-only views of the pet catalog and shelter profiles."""

from __future__ import annotations

from dataclasses import dataclass

PET_STATUS_AVAILABLE = "available"
PET_STATUS_PENDING = "pending"
PET_STATUS_ADOPTED = "adopted"

PET_STATUSES = (PET_STATUS_AVAILABLE, PET_STATUS_PENDING, PET_STATUS_ADOPTED)


@dataclass(frozen=True)
class Pet:
    id: int
    shelter_id: int
    name: str
    status: str

    @property
    def is_available(self) -> bool:
        return self.status == PET_STATUS_AVAILABLE


@dataclass(frozen=True)
class Shelter:
    id: int
    user_id: int
    name: str


__all__ = [
    "PET_STATUS_AVAILABLE",
    "PET_STATUS_PENDING",
    "PET_STATUS_ADOPTED",
    "PET_STATUSES",
    "Pet",
    "Shelter",
]
