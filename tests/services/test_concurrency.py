"""Concurrent submissions must neither lose updates nor double-submit."""

from concurrent.futures import ThreadPoolExecutor

from rankboard.core.errors import DuplicateActionError
from rankboard.repositories import MemoryStorage
from rankboard.services.comments import post_comment
from rankboard.services.facemash import record_comparison
from rankboard.services.ratings import submit_rating
from rankboard.services.subjects import create_subject
from rankboard.services.votes import vote_comment


def _person(storage: MemoryStorage, name: str = "P"):
    return create_subject(storage, name=name, description="", category="other", image_url="x")


def _attempt(fn, *args) -> bool:
    try:
        fn(*args)
    except DuplicateActionError:
        return False
    return True


def test_parallel_ratings_keep_exact_mean() -> None:
    storage = MemoryStorage()
    person = _person(storage)
    scores = [(i % 5) + 1 for i in range(200)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda i: submit_rating(storage, person.id, f"s{i}", scores[i]), range(200)))

    current = storage.get_person(person.id)
    assert current.total_ratings == 200
    assert current.average_rating == sum(scores) / 200


def test_parallel_duplicate_ratings_accept_exactly_one() -> None:
    storage = MemoryStorage()
    person = _person(storage)

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(
            pool.map(lambda _: _attempt(submit_rating, storage, person.id, "same", 4), range(50))
        )

    assert results.count(True) == 1
    assert storage.get_person(person.id).total_ratings == 1


def test_parallel_duplicate_votes_accept_exactly_one() -> None:
    storage = MemoryStorage()
    person = _person(storage)
    comment = post_comment(storage, person.id, "author", "text")

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(
            pool.map(lambda _: _attempt(vote_comment, storage, comment.id, "same", "down"), range(50))
        )

    assert results.count(True) == 1
    assert storage.get_comment(comment.id).downvotes == 1


def test_parallel_comparisons_are_all_counted() -> None:
    storage = MemoryStorage()
    a = _person(storage, "A")
    b = _person(storage, "B")

    def compare(i: int) -> None:
        if i % 2:
            record_comparison(storage, a.id, b.id, f"s{i}")
        else:
            record_comparison(storage, b.id, a.id, f"s{i}")

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(compare, range(100)))

    assert storage.get_person(a.id).facemash_wins == 50
    assert storage.get_person(a.id).facemash_losses == 50
    assert storage.get_person(b.id).facemash_wins == 50
    assert storage.get_person(b.id).facemash_losses == 50
