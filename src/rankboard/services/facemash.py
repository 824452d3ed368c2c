"""FaceMash: random head-to-head pairs and the comparison ledger."""
from __future__ import annotations

import logging
import random

from rankboard.core.errors import InsufficientSubjectsError, InvalidInputError, NotFoundError
from rankboard.models import FaceMashComparison, Person
from rankboard.repositories.base import Storage, unit_of_work
from rankboard.services.locks import person_locks

logger = logging.getLogger(__name__)

_rng = random.SystemRandom()


def pick_comparison_pair(
    storage: Storage,
    rng: random.Random | None = None,
) -> tuple[Person, Person]:
    """Draw two distinct people uniformly at random.

    ``Random.sample`` draws without replacement with a partial shuffle, so
    every unordered pair is equally likely.

    Raises:
        InsufficientSubjectsError: If fewer than two people exist.
    """
    people = storage.list_people()
    if len(people) < 2:
        raise InsufficientSubjectsError("Not enough people for comparison")
    first, second = (rng or _rng).sample(people, 2)
    return first, second


def record_comparison(
    storage: Storage,
    winner_id: int,
    loser_id: int,
    session_id: str,
) -> FaceMashComparison:
    """Log a comparison and credit the winner with a win and the loser with a loss.

    Sessions may compare the same pair any number of times.

    Raises:
        InvalidInputError: If winner and loser are the same person.
        NotFoundError: If either person does not exist.
    """
    if winner_id == loser_id:
        raise InvalidInputError("A person cannot be compared with themselves")

    with person_locks.hold(winner_id, loser_id), unit_of_work(storage):
        winner = storage.get_person(winner_id)
        if winner is None:
            raise NotFoundError("person", winner_id)
        loser = storage.get_person(loser_id)
        if loser is None:
            raise NotFoundError("person", loser_id)

        comparison = storage.add_comparison(
            FaceMashComparison(winner_id=winner_id, loser_id=loser_id, session_id=session_id)
        )
        storage.update_person_stats(winner_id, facemash_wins=(winner.facemash_wins or 0) + 1)
        storage.update_person_stats(loser_id, facemash_losses=(loser.facemash_losses or 0) + 1)

    logger.debug("Person %s beat person %s", winner_id, loser_id)
    return comparison
