"""Data access helpers for people and their ledgers on SQLAlchemy."""
from __future__ import annotations

from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from rankboard.models import Comment, CommentVote, FaceMashComparison, Person, Rating
from rankboard.models.comment import COMMENT_STAT_FIELDS
from rankboard.models.person import PERSON_STAT_FIELDS

__all__ = ["SqlStorage"]


class SqlStorage:
    """Thin wrapper around a SQLAlchemy session.

    Appends are flushed immediately so that unique-constraint violations
    surface inside the service's critical section rather than at commit.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def _add(self, record: Any) -> Any:
        self.session.add(record)
        self.session.flush()
        return record

    # People

    def add_person(self, person: Person) -> Person:
        return self._add(person)

    def get_person(self, person_id: int) -> Person | None:
        return self.session.get(Person, person_id)

    def list_people(self, category: str | None = None) -> list[Person]:
        stmt = select(Person)
        if category:
            stmt = stmt.where(Person.category == category)
        stmt = stmt.order_by(Person.id)
        return list(self.session.scalars(stmt))

    def update_person_stats(self, person_id: int, **stats: Any) -> Person | None:
        unknown = set(stats) - PERSON_STAT_FIELDS
        if unknown:
            raise KeyError(f"Not a patchable field: {', '.join(sorted(unknown))}")
        person = self.get_person(person_id)
        if person is None:
            return None
        for name, value in stats.items():
            setattr(person, name, value)
        self.session.flush()
        return person

    def increment_person_views(self, person_id: int) -> None:
        self.session.execute(
            update(Person)
            .where(Person.id == person_id)
            .values(total_views=Person.total_views + 1)
            .execution_options(synchronize_session="fetch")
        )

    # Ratings

    def add_rating(self, rating: Rating) -> Rating:
        return self._add(rating)

    def ratings_for_person(self, person_id: int) -> list[Rating]:
        stmt = select(Rating).where(Rating.person_id == person_id).order_by(Rating.id)
        return list(self.session.scalars(stmt))

    def find_rating(self, person_id: int, session_id: str) -> Rating | None:
        stmt = select(Rating).where(
            Rating.person_id == person_id,
            Rating.session_id == session_id,
        )
        return self.session.scalars(stmt).first()

    # Comments

    def add_comment(self, comment: Comment) -> Comment:
        return self._add(comment)

    def get_comment(self, comment_id: int) -> Comment | None:
        return self.session.get(Comment, comment_id)

    def comments_for_person(self, person_id: int) -> list[Comment]:
        stmt = select(Comment).where(Comment.person_id == person_id).order_by(Comment.id)
        return list(self.session.scalars(stmt))

    def update_comment(self, comment_id: int, **fields: Any) -> Comment | None:
        unknown = set(fields) - COMMENT_STAT_FIELDS
        if unknown:
            raise KeyError(f"Not a patchable field: {', '.join(sorted(unknown))}")
        comment = self.get_comment(comment_id)
        if comment is None:
            return None
        for name, value in fields.items():
            setattr(comment, name, value)
        self.session.flush()
        return comment

    # Comment votes

    def add_comment_vote(self, vote: CommentVote) -> CommentVote:
        return self._add(vote)

    def votes_for_comment(self, comment_id: int) -> list[CommentVote]:
        stmt = (
            select(CommentVote)
            .where(CommentVote.comment_id == comment_id)
            .order_by(CommentVote.id)
        )
        return list(self.session.scalars(stmt))

    def find_comment_vote(self, comment_id: int, session_id: str) -> CommentVote | None:
        stmt = select(CommentVote).where(
            CommentVote.comment_id == comment_id,
            CommentVote.session_id == session_id,
        )
        return self.session.scalars(stmt).first()

    # FaceMash

    def add_comparison(self, comparison: FaceMashComparison) -> FaceMashComparison:
        return self._add(comparison)

    def comparisons(self) -> list[FaceMashComparison]:
        stmt = select(FaceMashComparison).order_by(FaceMashComparison.id)
        return list(self.session.scalars(stmt))

    # Stats

    def _count(self, model: type[Any]) -> int:
        return self.session.scalar(select(func.count()).select_from(model)) or 0

    def count_people(self) -> int:
        return self._count(Person)

    def count_ratings(self) -> int:
        return self._count(Rating)

    def count_comments(self) -> int:
        return self._count(Comment)

    # Unit of work

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
