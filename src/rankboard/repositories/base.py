"""Storage contract shared by the in-memory and SQL repositories."""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol

from rankboard.models import Comment, CommentVote, FaceMashComparison, Person, Rating

__all__ = ["Storage", "unit_of_work"]


class Storage(Protocol):
    """Keyed CRUD plus filtered scans over people and their ledgers.

    ``add_*`` methods assign the synthetic id (and ``created_at`` when unset)
    and return the stored record. Scans return records in insertion order.
    """

    # People
    def add_person(self, person: Person) -> Person: ...

    def get_person(self, person_id: int) -> Person | None: ...

    def list_people(self, category: str | None = None) -> list[Person]: ...

    def update_person_stats(self, person_id: int, **stats: Any) -> Person | None: ...

    def increment_person_views(self, person_id: int) -> None: ...

    # Ratings
    def add_rating(self, rating: Rating) -> Rating: ...

    def ratings_for_person(self, person_id: int) -> list[Rating]: ...

    def find_rating(self, person_id: int, session_id: str) -> Rating | None: ...

    # Comments
    def add_comment(self, comment: Comment) -> Comment: ...

    def get_comment(self, comment_id: int) -> Comment | None: ...

    def comments_for_person(self, person_id: int) -> list[Comment]: ...

    def update_comment(self, comment_id: int, **fields: Any) -> Comment | None: ...

    # Comment votes
    def add_comment_vote(self, vote: CommentVote) -> CommentVote: ...

    def votes_for_comment(self, comment_id: int) -> list[CommentVote]: ...

    def find_comment_vote(self, comment_id: int, session_id: str) -> CommentVote | None: ...

    # FaceMash
    def add_comparison(self, comparison: FaceMashComparison) -> FaceMashComparison: ...

    def comparisons(self) -> list[FaceMashComparison]: ...

    # Stats
    def count_people(self) -> int: ...

    def count_ratings(self) -> int: ...

    def count_comments(self) -> int: ...

    # Unit of work
    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@contextmanager
def unit_of_work(storage: Storage) -> Iterator[Storage]:
    """Commit the storage on success, roll it back when the block raises."""
    try:
        yield storage
    except BaseException:
        storage.rollback()
        raise
    storage.commit()
