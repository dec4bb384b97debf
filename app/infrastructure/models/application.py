"""SQLAlchemy model for adoption applications."""

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    text,
)

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime

# Applications in these states no longer block a new one for the same pair.
_RELEASED_STATUSES = "('withdrawn', 'approved', 'rejected')"


class ApplicationModel(Base):
    """Database representation of an adoption application."""

    __tablename__ = "adoption_application"
    __table_args__ = (
        Index(
            "uq_adoption_application_open_pair",
            "pet_id",
            "adopter_id",
            unique=True,
            sqlite_where=text(f"status NOT IN {_RELEASED_STATUSES}"),
            postgresql_where=text(f"status NOT IN {_RELEASED_STATUSES}"),
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    pet_id = Column(Integer, ForeignKey("pet.id"), nullable=False, index=True)
    adopter_id = Column(Integer, nullable=False, index=True)
    status = Column(String(30), nullable=False, default="draft")

    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    date_of_birth = Column(String(20), nullable=True)
    occupation = Column(String(120), nullable=True)
    housing_type = Column(String(50), nullable=True)
    own_rent = Column(String(20), nullable=True)
    address = Column(Text, nullable=True)
    landlord_permission = Column(String(50), nullable=True)
    yard_type = Column(String(50), nullable=True)
    household_size = Column(Integer, nullable=True)
    previous_pets = Column(Text, nullable=True)
    current_pets = Column(Text, nullable=True)
    pet_experience = Column(Text, nullable=True)
    veterinarian = Column(Text, nullable=True)
    work_schedule = Column(Text, nullable=True)
    exercise_commitment = Column(Text, nullable=True)
    travel_frequency = Column(Text, nullable=True)
    pet_preferences = Column(Text, nullable=True)
    household_members = Column(Text, nullable=True)
    allergies = Column(Text, nullable=True)
    children_ages = Column(Text, nullable=True)
    references = Column(Text, nullable=True)
    emergency_contact = Column(Text, nullable=True)
    agreements = Column(JSON, nullable=False, default=list)

    submitted_at = Column(DateTime(), nullable=True)
    reviewed_at = Column(DateTime(), nullable=True)
    reviewer_notes = Column(Text, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["ApplicationModel"]
