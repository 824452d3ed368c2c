"""Tests for the demo data loader."""

from rankboard.repositories import Storage
from rankboard.scripts.seed import DEMO_PEOPLE, seed


def test_seed_creates_demo_people_once(storage: Storage) -> None:
    created = seed(storage)
    assert [p.name for p in created] == [entry["name"] for entry in DEMO_PEOPLE]
    assert all(p.total_ratings == 0 and p.average_rating == 0.0 for p in created)

    assert seed(storage) == []
    assert storage.count_people() == len(DEMO_PEOPLE)


def test_seed_skips_names_already_present(storage: Storage, make_person) -> None:
    make_person(name=DEMO_PEOPLE[0]["name"])

    created = seed(storage)

    assert DEMO_PEOPLE[0]["name"] not in {p.name for p in created}
    assert len(created) == len(DEMO_PEOPLE) - 1
    assert storage.count_people() == len(DEMO_PEOPLE)
