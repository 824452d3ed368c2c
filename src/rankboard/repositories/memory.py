"""Process-local storage backed by dictionaries.

Used for tests and for running the API without a database
(``STORAGE_BACKEND=memory``). Records are transient ORM instances, so the
services and schemas handle them exactly like persisted rows.
"""
from __future__ import annotations

import itertools
import threading
from typing import Any

from rankboard.db.time import utcnow
from rankboard.models import Comment, CommentVote, FaceMashComparison, Person, Rating
from rankboard.models.comment import COMMENT_STAT_FIELDS
from rankboard.models.person import PERSON_STAT_FIELDS

__all__ = ["MemoryStorage"]


def _reject_unknown(fields: dict[str, Any], allowed: frozenset[str]) -> None:
    unknown = set(fields) - allowed
    if unknown:
        raise KeyError(f"Not a patchable field: {', '.join(sorted(unknown))}")


class MemoryStorage:
    """Dictionary-backed implementation of :class:`~rankboard.repositories.base.Storage`."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._people: dict[int, Person] = {}
        self._ratings: dict[int, Rating] = {}
        self._comments: dict[int, Comment] = {}
        self._comment_votes: dict[int, CommentVote] = {}
        self._comparisons: dict[int, FaceMashComparison] = {}

        self._person_ids = itertools.count(start=1)
        self._rating_ids = itertools.count(start=1)
        self._comment_ids = itertools.count(start=1)
        self._comment_vote_ids = itertools.count(start=1)
        self._comparison_ids = itertools.count(start=1)

    def _store(self, table: dict[int, Any], ids: itertools.count, record: Any) -> Any:
        with self._lock:
            record.id = next(ids)
            if record.created_at is None:
                record.created_at = utcnow()
            table[record.id] = record
        return record

    # People

    def add_person(self, person: Person) -> Person:
        return self._store(self._people, self._person_ids, person)

    def get_person(self, person_id: int) -> Person | None:
        return self._people.get(person_id)

    def list_people(self, category: str | None = None) -> list[Person]:
        with self._lock:
            people = list(self._people.values())
        if category:
            people = [p for p in people if p.category == category]
        return people

    def update_person_stats(self, person_id: int, **stats: Any) -> Person | None:
        _reject_unknown(stats, PERSON_STAT_FIELDS)
        with self._lock:
            person = self._people.get(person_id)
            if person is None:
                return None
            for name, value in stats.items():
                setattr(person, name, value)
        return person

    def increment_person_views(self, person_id: int) -> None:
        with self._lock:
            person = self._people.get(person_id)
            if person is not None:
                person.total_views = (person.total_views or 0) + 1

    # Ratings

    def add_rating(self, rating: Rating) -> Rating:
        return self._store(self._ratings, self._rating_ids, rating)

    def ratings_for_person(self, person_id: int) -> list[Rating]:
        with self._lock:
            return [r for r in self._ratings.values() if r.person_id == person_id]

    def find_rating(self, person_id: int, session_id: str) -> Rating | None:
        with self._lock:
            return next(
                (
                    r
                    for r in self._ratings.values()
                    if r.person_id == person_id and r.session_id == session_id
                ),
                None,
            )

    # Comments

    def add_comment(self, comment: Comment) -> Comment:
        return self._store(self._comments, self._comment_ids, comment)

    def get_comment(self, comment_id: int) -> Comment | None:
        return self._comments.get(comment_id)

    def comments_for_person(self, person_id: int) -> list[Comment]:
        with self._lock:
            return [c for c in self._comments.values() if c.person_id == person_id]

    def update_comment(self, comment_id: int, **fields: Any) -> Comment | None:
        _reject_unknown(fields, COMMENT_STAT_FIELDS)
        with self._lock:
            comment = self._comments.get(comment_id)
            if comment is None:
                return None
            for name, value in fields.items():
                setattr(comment, name, value)
        return comment

    # Comment votes

    def add_comment_vote(self, vote: CommentVote) -> CommentVote:
        return self._store(self._comment_votes, self._comment_vote_ids, vote)

    def votes_for_comment(self, comment_id: int) -> list[CommentVote]:
        with self._lock:
            return [v for v in self._comment_votes.values() if v.comment_id == comment_id]

    def find_comment_vote(self, comment_id: int, session_id: str) -> CommentVote | None:
        with self._lock:
            return next(
                (
                    v
                    for v in self._comment_votes.values()
                    if v.comment_id == comment_id and v.session_id == session_id
                ),
                None,
            )

    # FaceMash

    def add_comparison(self, comparison: FaceMashComparison) -> FaceMashComparison:
        return self._store(self._comparisons, self._comparison_ids, comparison)

    def comparisons(self) -> list[FaceMashComparison]:
        with self._lock:
            return list(self._comparisons.values())

    # Stats

    def count_people(self) -> int:
        return len(self._people)

    def count_ratings(self) -> int:
        return len(self._ratings)

    def count_comments(self) -> int:
        return len(self._comments)

    # Unit of work: every write is immediately visible.

    def commit(self) -> None:
        return None

    def rollback(self) -> None:
        return None
