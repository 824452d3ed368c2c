"""Vote ledger: one up or down vote per anonymous session per comment."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from rankboard.core.errors import DuplicateActionError, InvalidInputError, NotFoundError
from rankboard.models import CommentVote
from rankboard.models.comment import VOTE_DOWN, VOTE_UP
from rankboard.repositories.base import Storage, unit_of_work
from rankboard.services.comments import recompute_comment_score
from rankboard.services.locks import comment_locks

logger = logging.getLogger(__name__)

VOTE_TYPES = (VOTE_UP, VOTE_DOWN)


def vote_comment(storage: Storage, comment_id: int, session_id: str, vote_type: str) -> CommentVote:
    """Record a session's vote on a comment and refresh the comment's score.

    Votes cannot be changed or retracted; a second vote from the same session
    is rejected whatever its direction.

    Raises:
        InvalidInputError: If ``vote_type`` is neither ``"up"`` nor ``"down"``.
        NotFoundError: If the comment does not exist.
        DuplicateActionError: If the session already voted on this comment.
    """
    if vote_type not in VOTE_TYPES:
        raise InvalidInputError("Invalid vote type")

    with comment_locks.hold(comment_id), unit_of_work(storage):
        if storage.get_comment(comment_id) is None:
            raise NotFoundError("comment", comment_id)

        if storage.find_comment_vote(comment_id, session_id) is not None:
            logger.warning(
                "Rejected repeat vote on comment %s from session %s", comment_id, session_id
            )
            raise DuplicateActionError(
                "You have already voted on this comment", session_id=session_id
            )

        try:
            vote = storage.add_comment_vote(
                CommentVote(comment_id=comment_id, session_id=session_id, vote_type=vote_type)
            )
        except IntegrityError as err:
            raise DuplicateActionError(
                "You have already voted on this comment", session_id=session_id
            ) from err

        recompute_comment_score(storage, comment_id)

    return vote
