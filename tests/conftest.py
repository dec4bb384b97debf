"""Shared fixtures: a file-backed SQLite database reset for every test."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import pytest

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["READ_RETRY_DELAY_SECONDS"] = "0"

from app.domain.entities import (  # noqa: E402
    PET_STATUS_ADOPTED,
    PET_STATUS_AVAILABLE,
    ROLE_ADOPTER,
    ROLE_SHELTER,
    Caller,
    Pet,
    Shelter,
)
from app.infrastructure import database  # noqa: E402
from app.infrastructure.repositories import PetRepository, ShelterRepository  # noqa: E402

FULL_PROFILE = {
    "first_name": "Ana",
    "last_name": "Lopez",
    "email": "ana@example.com",
    "phone": "555-0100",
    "date_of_birth": "1990-04-02",
    "occupation": "Nurse",
    "housing_type": "house",
    "own_rent": "own",
    "yard_type": "fenced",
    "household_size": 2,
    "agreements": ["home_visit", "return_policy"],
}


@dataclass
class Catalog:
    shelter: Shelter
    other_shelter: Shelter
    pet: Pet
    second_pet: Pet
    adopted_pet: Pet
    other_pet: Pet
    adopter: Caller
    other_adopter: Caller
    staff: Caller
    other_staff: Caller


@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate every table before each test."""

    from app.infrastructure import models  # noqa: F401

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture()
def session():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def catalog(session) -> Catalog:
    shelters = ShelterRepository(session)
    pets = PetRepository(session)
    shelter = shelters.create(Shelter(id=0, user_id=100, name="Happy Tails"))
    other_shelter = shelters.create(Shelter(id=0, user_id=200, name="Paws Place"))
    pet = pets.create(
        Pet(id=0, shelter_id=shelter.id, name="Luna", status=PET_STATUS_AVAILABLE)
    )
    second_pet = pets.create(
        Pet(id=0, shelter_id=shelter.id, name="Milo", status=PET_STATUS_AVAILABLE)
    )
    adopted_pet = pets.create(
        Pet(id=0, shelter_id=shelter.id, name="Rex", status=PET_STATUS_ADOPTED)
    )
    other_pet = pets.create(
        Pet(id=0, shelter_id=other_shelter.id, name="Nala", status=PET_STATUS_AVAILABLE)
    )
    session.commit()
    return Catalog(
        shelter=shelter,
        other_shelter=other_shelter,
        pet=pet,
        second_pet=second_pet,
        adopted_pet=adopted_pet,
        other_pet=other_pet,
        adopter=Caller(user_id=1, role=ROLE_ADOPTER),
        other_adopter=Caller(user_id=2, role=ROLE_ADOPTER),
        staff=Caller(user_id=100, role=ROLE_SHELTER, shelter_id=shelter.id),
        other_staff=Caller(user_id=200, role=ROLE_SHELTER, shelter_id=other_shelter.id),
    )


@pytest.fixture()
def full_profile() -> dict:
    return dict(FULL_PROFILE)
