"""Tests for site-wide counters."""

from rankboard.repositories import Storage
from rankboard.services.comments import post_comment
from rankboard.services.ratings import submit_rating
from rankboard.services.stats import Totals, totals


def test_totals_start_at_zero(storage: Storage) -> None:
    assert totals(storage) == Totals(total_people=0, total_ratings=0, total_comments=0)


def test_totals_count_ledgers(storage: Storage, make_person) -> None:
    a = make_person()
    make_person()
    submit_rating(storage, a.id, "s1", 4)
    submit_rating(storage, a.id, "s2", 2)
    post_comment(storage, a.id, "s1", "nice")

    assert totals(storage).as_dict() == {
        "total_people": 2,
        "total_ratings": 2,
        "total_comments": 1,
    }
