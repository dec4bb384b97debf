"""SQLAlchemy models for the shelter directory and pet catalog."""

from sqlalchemy import Column, ForeignKey, Integer, String

from app.infrastructure.database import Base


class ShelterModel(Base):
    """Shelter profile; ``user_id`` is the staff account receiving notifications."""

    __tablename__ = "shelter"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    name = Column(String(120), nullable=False)


class PetModel(Base):
    """Pet listed for adoption by a shelter."""

    __tablename__ = "pet"

    id = Column(Integer, primary_key=True, index=True)
    shelter_id = Column(Integer, ForeignKey("shelter.id"), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    status = Column(String(20), nullable=False, default="available")


__all__ = ["ShelterModel", "PetModel"]
