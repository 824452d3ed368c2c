"""Pure rules deriving aggregate fields from ledger contents."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rankboard.models.comment import VOTE_DOWN, VOTE_UP

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class RatingSummary:
    """Mean and count of a person's ratings."""

    average_rating: float
    total_ratings: int


@dataclass(frozen=True)
class VoteTally:
    """Vote counts of a comment; ``score`` is ``upvotes - downvotes``."""

    upvotes: int
    downvotes: int

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes


def summarize_ratings(scores: Iterable[int]) -> RatingSummary:
    """Return the plain arithmetic mean and count of ``scores``.

    The mean is kept at full precision; an empty ledger averages to 0.
    """
    values = list(scores)
    if not values:
        return RatingSummary(average_rating=0.0, total_ratings=0)
    return RatingSummary(average_rating=sum(values) / len(values), total_ratings=len(values))


def tally_votes(vote_types: Iterable[str]) -> VoteTally:
    """Count up and down votes."""
    upvotes = downvotes = 0
    for vote_type in vote_types:
        if vote_type == VOTE_UP:
            upvotes += 1
        elif vote_type == VOTE_DOWN:
            downvotes += 1
    return VoteTally(upvotes=upvotes, downvotes=downvotes)


def next_buried_state(score: int, currently_buried: bool, threshold: int) -> bool:
    """Bury once the score drops below ``threshold``; never un-bury."""
    return bool(currently_buried) or score < threshold
