"""Service-level helpers for people entries and leaderboards."""
from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from rankboard.core.errors import InvalidInputError, NotFoundError
from rankboard.core.settings import settings
from rankboard.db.time import as_naive_utc
from rankboard.models import Person, PersonCategory
from rankboard.repositories.base import Storage, unit_of_work
from rankboard.services.locks import person_locks

logger = logging.getLogger(__name__)


class SubjectSort(StrEnum):
    """Orderings offered by the people listing."""

    AVERAGE_RATING = "averageRating"
    NEWEST = "newest"
    MOST_COMMENTS = "mostComments"
    FACEMASH = "faceMash"


# Every ordering is descending; ``sorted`` is stable so ties keep insertion order.
_SORT_KEYS: dict[str, Callable[[Person], Any]] = {
    SubjectSort.AVERAGE_RATING: lambda p: p.average_rating or 0.0,
    SubjectSort.NEWEST: lambda p: as_naive_utc(p.created_at),
    SubjectSort.MOST_COMMENTS: lambda p: p.total_comments or 0,
    SubjectSort.FACEMASH: lambda p: p.facemash_wins or 0,
}


def create_subject(
    storage: Storage,
    *,
    name: str,
    description: str,
    category: str,
    image_url: str,
) -> Person:
    """Create a person with every counter at zero.

    Raises:
        InvalidInputError: If the name is blank or the category is unknown.
    """
    if not name or not name.strip():
        raise InvalidInputError("Name must not be empty")
    try:
        category = PersonCategory(category).value
    except ValueError as err:
        raise InvalidInputError(f"Unknown category: {category!r}") from err

    with unit_of_work(storage):
        person = storage.add_person(
            Person(
                name=name.strip(),
                description=description,
                category=category,
                image_url=image_url,
                average_rating=0.0,
                total_ratings=0,
                total_comments=0,
                total_views=0,
                facemash_wins=0,
                facemash_losses=0,
            )
        )
    logger.info("Created person %s (%s)", person.id, person.category)
    return person


def record_view(storage: Storage, person_id: int) -> None:
    """Count one view of a person; unknown ids are ignored."""
    with person_locks.hold(person_id), unit_of_work(storage):
        storage.increment_person_views(person_id)


def get_subject(storage: Storage, person_id: int) -> Person:
    """Return a person and record the view.

    Raises:
        NotFoundError: If no person has this id.
    """
    if storage.get_person(person_id) is None:
        raise NotFoundError("person", person_id)
    record_view(storage, person_id)
    person = storage.get_person(person_id)
    if person is None:  # pragma: no cover - removed between the two reads
        raise NotFoundError("person", person_id)
    return person


def list_subjects(
    storage: Storage,
    category: str | None = None,
    sort_by: str = SubjectSort.AVERAGE_RATING,
) -> list[Person]:
    """List people, optionally filtered by category.

    Unknown sort keys leave the people in insertion order.
    """
    people = storage.list_people(category or None)
    key = _SORT_KEYS.get(sort_by)
    if key is not None:
        people = sorted(people, key=key, reverse=True)
    return people


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return settings.rankings_default_limit
    if limit < 0:
        raise InvalidInputError("Limit must not be negative")
    return limit


def top_ranked(storage: Storage, limit: int | None = None) -> list[Person]:
    """Return the best-rated people, highest average first."""
    return list_subjects(storage)[: _resolve_limit(limit)]


def worst_ranked(storage: Storage, limit: int | None = None) -> list[Person]:
    """Return people averaging below the worst-rating ceiling, lowest first."""
    ceiling = settings.worst_rating_ceiling
    people = [p for p in list_subjects(storage) if (p.average_rating or 0.0) < ceiling]
    people.sort(key=lambda p: p.average_rating or 0.0)
    return people[: _resolve_limit(limit)]
