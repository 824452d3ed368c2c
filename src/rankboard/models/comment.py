# src/rankboard/models/comment.py
"""Models for comments on people and the votes cast on them."""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from rankboard.db.session import Base
from rankboard.db.time import utcnow

VOTE_UP = "up"
VOTE_DOWN = "down"

# Columns derived from the vote ledger.
COMMENT_STAT_FIELDS = frozenset({"upvotes", "downvotes", "score", "is_buried"})


class Comment(Base):
    """Anonymous comment on a person.

    Vote counts, score and burial are derived from ``comment_votes``.
    """

    __tablename__ = "comments"
    __table_args__ = (Index("ix_comments_person_id", "person_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("people.id", ondelete="CASCADE"),
        nullable=False,
    )
    session_id: Mapped[str] = mapped_column(Text, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)

    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    downvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # upvotes - downvotes
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Sticky: once set it is never cleared.
    is_buried: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )


class CommentVote(Base):
    """Per-session up or down vote on a comment. Immutable."""

    __tablename__ = "comment_votes"
    __table_args__ = (
        CheckConstraint("vote_type IN ('up', 'down')", name="ck_comment_votes_vote_type"),
        # Composite uniqueness prevents duplicate votes from the same session.
        UniqueConstraint("comment_id", "session_id", name="uq_comment_votes_comment_session"),
        Index("ix_comment_votes_comment_id", "comment_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    comment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    )
    session_id: Mapped[str] = mapped_column(Text, nullable=False)
    vote_type: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
