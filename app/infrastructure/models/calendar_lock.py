"""Row used to serialize interview bookings per shelter."""

from sqlalchemy import Column, ForeignKey, Integer

from app.infrastructure.database import Base


class ShelterCalendarLockModel(Base):
    """One row per shelter, bumped by every booking transaction."""

    __tablename__ = "shelter_calendar_lock"

    shelter_id = Column(Integer, ForeignKey("shelter.id"), primary_key=True)
    version = Column(Integer, nullable=False, default=0)


__all__ = ["ShelterCalendarLockModel"]
