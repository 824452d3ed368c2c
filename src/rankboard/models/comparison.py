# src/rankboard/models/comparison.py
"""Append-only log of FaceMash outcomes."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from rankboard.db.session import Base
from rankboard.db.time import utcnow


class FaceMashComparison(Base):
    """A forced choice between two people; ``winner_id`` was picked."""

    __tablename__ = "facemash_comparisons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    winner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("people.id", ondelete="CASCADE"),
        nullable=False,
    )
    loser_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("people.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Kept for traceability only; repeat comparisons are allowed.
    session_id: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
