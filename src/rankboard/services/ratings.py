"""Rating ledger: one star rating per anonymous session per person."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from rankboard.core.errors import DuplicateActionError, InvalidInputError, NotFoundError
from rankboard.models import Person, Rating
from rankboard.repositories.base import Storage, unit_of_work
from rankboard.services.aggregation import MAX_RATING, MIN_RATING, summarize_ratings
from rankboard.services.locks import person_locks

logger = logging.getLogger(__name__)


def validate_score(score: object) -> int:
    """Return ``score`` if it is an integer between 1 and 5 inclusive."""
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidInputError("Rating must be an integer")
    if not MIN_RATING <= score <= MAX_RATING:
        raise InvalidInputError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    return score


def recompute_rating_stats(storage: Storage, person_id: int) -> Person | None:
    """Rebuild a person's average and count from the full rating ledger."""
    summary = summarize_ratings(r.rating for r in storage.ratings_for_person(person_id))
    logger.debug(
        "Person %s now averages %s over %d ratings",
        person_id,
        summary.average_rating,
        summary.total_ratings,
    )
    return storage.update_person_stats(
        person_id,
        average_rating=summary.average_rating,
        total_ratings=summary.total_ratings,
    )


def submit_rating(storage: Storage, person_id: int, session_id: str, score: int) -> Rating:
    """Record a session's rating of a person and refresh the person's average.

    The duplicate check, the append and the recomputation run as one unit
    under the person's lock.

    Raises:
        InvalidInputError: If the score is not an integer in 1..5.
        NotFoundError: If the person does not exist.
        DuplicateActionError: If the session already rated this person.
    """
    validate_score(score)

    with person_locks.hold(person_id), unit_of_work(storage):
        if storage.get_person(person_id) is None:
            raise NotFoundError("person", person_id)

        if storage.find_rating(person_id, session_id) is not None:
            logger.warning(
                "Rejected repeat rating of person %s from session %s", person_id, session_id
            )
            raise DuplicateActionError(
                "You have already rated this person", session_id=session_id
            )

        try:
            rating = storage.add_rating(
                Rating(person_id=person_id, session_id=session_id, rating=score)
            )
        except IntegrityError as err:
            # Another process won the race past the scan.
            raise DuplicateActionError(
                "You have already rated this person", session_id=session_id
            ) from err

        recompute_rating_stats(storage, person_id)

    return rating
