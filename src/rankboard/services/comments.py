"""Comment ledger: anonymous comments on people and their derived score."""
from __future__ import annotations

import logging
from enum import StrEnum

from rankboard.core.errors import InvalidInputError, NotFoundError
from rankboard.core.settings import settings
from rankboard.db.time import as_naive_utc
from rankboard.models import Comment
from rankboard.repositories.base import Storage, unit_of_work
from rankboard.services.aggregation import next_buried_state, tally_votes
from rankboard.services.locks import person_locks

logger = logging.getLogger(__name__)


class CommentSort(StrEnum):
    """Orderings offered by the comment listing."""

    SCORE = "score"
    NEWEST = "newest"


def post_comment(storage: Storage, person_id: int, session_id: str, text: str) -> Comment:
    """Append a comment and bump the person's comment count.

    A session may comment on the same person any number of times.

    Raises:
        InvalidInputError: If the text is empty or whitespace.
        NotFoundError: If the person does not exist.
    """
    if not text or not text.strip():
        raise InvalidInputError("Comment text must not be empty")

    with person_locks.hold(person_id), unit_of_work(storage):
        if storage.get_person(person_id) is None:
            raise NotFoundError("person", person_id)

        comment = storage.add_comment(
            Comment(
                person_id=person_id,
                session_id=session_id,
                text=text,
                upvotes=0,
                downvotes=0,
                score=0,
                is_buried=False,
            )
        )
        total_comments = len(storage.comments_for_person(person_id))
        storage.update_person_stats(person_id, total_comments=total_comments)

    return comment


def list_comments(
    storage: Storage,
    person_id: int,
    sort_by: str = CommentSort.SCORE,
) -> list[Comment]:
    """Return every comment on a person, buried ones included."""
    comments = storage.comments_for_person(person_id)
    if sort_by == CommentSort.SCORE:
        comments.sort(key=lambda c: c.score or 0, reverse=True)
    elif sort_by == CommentSort.NEWEST:
        comments.sort(key=lambda c: as_naive_utc(c.created_at), reverse=True)
    return comments


def recompute_comment_score(storage: Storage, comment_id: int) -> Comment | None:
    """Rebuild vote counts, score and burial from the comment's vote ledger.

    Callers must hold the comment's lock.
    """
    comment = storage.get_comment(comment_id)
    if comment is None:
        return None

    tally = tally_votes(v.vote_type for v in storage.votes_for_comment(comment_id))
    buried = next_buried_state(tally.score, comment.is_buried, settings.burial_threshold)
    if buried and not comment.is_buried:
        logger.info("Burying comment %s at score %d", comment_id, tally.score)

    return storage.update_comment(
        comment_id,
        upvotes=tally.upvotes,
        downvotes=tally.downvotes,
        score=tally.score,
        is_buried=buried,
    )
