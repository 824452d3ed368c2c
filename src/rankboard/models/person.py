# src/rankboard/models/person.py
"""SQLAlchemy model for rateable people entries."""

from datetime import datetime
from enum import StrEnum

from sqlalchemy import CheckConstraint, DateTime, Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from rankboard.db.session import Base
from rankboard.db.time import utcnow

# Columns the recomputation services may patch.
PERSON_STAT_FIELDS = frozenset({
    "average_rating",
    "total_ratings",
    "total_comments",
    "total_views",
    "facemash_wins",
    "facemash_losses",
})


class PersonCategory(StrEnum):
    """Categories a person entry can be listed under."""

    TEACHER = "teacher"
    STUDENT = "student"
    EMPLOYEE = "employee"
    CELEBRITY = "celebrity"
    OTHER = "other"


class Person(Base):
    """A person that can be rated, commented on and compared.

    The counter columns are derived from the rating, comment and comparison
    ledgers and are only ever written by the recomputation services.
    """

    __tablename__ = "people"
    __table_args__ = (
        CheckConstraint(
            "category IN ('teacher', 'student', 'employee', 'celebrity', 'other')",
            name="ck_people_category",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)

    average_rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_ratings: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_comments: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    facemash_wins: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    facemash_losses: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
