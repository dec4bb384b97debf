"""SQLAlchemy model for scheduled interviews."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Time,
)

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class InterviewModel(Base):
    """Database representation of an interview, meet & greet or home visit."""

    __tablename__ = "interview"
    __table_args__ = (
        Index("ix_interview_shelter_date", "shelter_id", "scheduled_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(
        Integer, ForeignKey("adoption_application.id"), nullable=False, index=True
    )
    shelter_id = Column(Integer, ForeignKey("shelter.id"), nullable=False)
    adopter_id = Column(Integer, nullable=False, index=True)
    type = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, default="scheduled")
    scheduled_date = Column(Date, nullable=False)
    scheduled_time = Column(Time, nullable=False)
    duration_minutes = Column(Integer, nullable=True)
    location = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    shelter_notes = Column(Text, nullable=True)
    adopter_response = Column(Boolean, nullable=True)
    adopter_response_notes = Column(Text, nullable=True)
    responded_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["InterviewModel"]
