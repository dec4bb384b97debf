"""Identity of the actor performing a workflow operation."""

from __future__ import annotations

from dataclasses import dataclass

ROLE_ADOPTER = "adopter"
ROLE_SHELTER = "shelter"
ROLE_ADMIN = "admin"

ROLES = (ROLE_ADOPTER, ROLE_SHELTER, ROLE_ADMIN)


@dataclass(frozen=True)
class Caller:
    """Explicit caller identity threaded through every use case."""

    user_id: int
    role: str
    shelter_id: int | None = None

    def is_adopter(self) -> bool:
        return self.role == ROLE_ADOPTER

    def is_shelter(self) -> bool:
        return self.role == ROLE_SHELTER and self.shelter_id is not None

    def manages_shelter(self, shelter_id: int | None) -> bool:
        """Return ``True`` when the caller acts on behalf of ``shelter_id``."""

        return self.is_shelter() and shelter_id is not None and self.shelter_id == shelter_id


__all__ = ["ROLE_ADOPTER", "ROLE_SHELTER", "ROLE_ADMIN", "ROLES", "Caller"]
