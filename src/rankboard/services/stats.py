"""Site-wide counters."""
from __future__ import annotations

from dataclasses import asdict, dataclass

from rankboard.repositories.base import Storage


@dataclass(frozen=True)
class Totals:
    """Real counts over the people store and the rating and comment ledgers."""

    total_people: int
    total_ratings: int
    total_comments: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def totals(storage: Storage) -> Totals:
    """Count people, ratings and comments."""
    return Totals(
        total_people=storage.count_people(),
        total_ratings=storage.count_ratings(),
        total_comments=storage.count_comments(),
    )
