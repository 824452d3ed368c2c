"""Tests for the memory and SQL storage backends."""

import pytest
from sqlalchemy.exc import IntegrityError

from rankboard.models import Comment, CommentVote, Person, Rating
from rankboard.repositories import SqlStorage, Storage


def _person(name: str, category: str = "student") -> Person:
    return Person(
        name=name,
        description="",
        category=category,
        image_url="https://example.com/x.png",
        average_rating=0.0,
        total_ratings=0,
        total_comments=0,
        total_views=0,
        facemash_wins=0,
        facemash_losses=0,
    )


def test_ids_increment_from_one(storage: Storage) -> None:
    first = storage.add_person(_person("a"))
    second = storage.add_person(_person("b"))
    assert (first.id, second.id) == (1, 2)
    assert first.created_at is not None


def test_list_people_keeps_insertion_order_and_filters(storage: Storage) -> None:
    storage.add_person(_person("a", "teacher"))
    storage.add_person(_person("b", "student"))
    storage.add_person(_person("c", "teacher"))

    assert [p.name for p in storage.list_people()] == ["a", "b", "c"]
    assert [p.name for p in storage.list_people("teacher")] == ["a", "c"]
    assert storage.list_people("celebrity") == []


def test_update_person_stats_merges_named_fields(storage: Storage) -> None:
    person = storage.add_person(_person("a"))
    updated = storage.update_person_stats(person.id, average_rating=4.5, total_ratings=2)

    assert updated is not None
    assert updated.average_rating == 4.5
    assert updated.total_ratings == 2
    assert updated.name == "a"


def test_update_person_stats_rejects_other_fields(storage: Storage) -> None:
    person = storage.add_person(_person("a"))
    with pytest.raises(KeyError):
        storage.update_person_stats(person.id, name="renamed")


def test_update_missing_person_returns_none(storage: Storage) -> None:
    assert storage.update_person_stats(404, total_views=1) is None


def test_increment_views(storage: Storage) -> None:
    person = storage.add_person(_person("a"))
    storage.increment_person_views(person.id)
    storage.increment_person_views(person.id)
    storage.increment_person_views(404)

    assert storage.get_person(person.id).total_views == 2


def test_rating_scans(storage: Storage) -> None:
    person = storage.add_person(_person("a"))
    storage.add_rating(Rating(person_id=person.id, session_id="s1", rating=4))
    storage.add_rating(Rating(person_id=person.id, session_id="s2", rating=2))

    assert [r.rating for r in storage.ratings_for_person(person.id)] == [4, 2]
    assert storage.find_rating(person.id, "s2").rating == 2
    assert storage.find_rating(person.id, "s3") is None
    assert storage.count_ratings() == 2


def test_comment_and_vote_scans(storage: Storage) -> None:
    person = storage.add_person(_person("a"))
    comment = storage.add_comment(
        Comment(
            person_id=person.id,
            session_id="s1",
            text="hello",
            upvotes=0,
            downvotes=0,
            score=0,
            is_buried=False,
        )
    )
    storage.add_comment_vote(CommentVote(comment_id=comment.id, session_id="s2", vote_type="up"))

    assert storage.get_comment(comment.id).text == "hello"
    assert [c.id for c in storage.comments_for_person(person.id)] == [comment.id]
    assert storage.find_comment_vote(comment.id, "s2").vote_type == "up"
    assert storage.find_comment_vote(comment.id, "s1") is None
    assert len(storage.votes_for_comment(comment.id)) == 1
    assert storage.count_comments() == 1

    with pytest.raises(KeyError):
        storage.update_comment(comment.id, text="edited")


def test_sql_rejects_duplicate_rating_rows(sql_storage: SqlStorage) -> None:
    person = sql_storage.add_person(_person("a"))
    sql_storage.add_rating(Rating(person_id=person.id, session_id="s1", rating=4))

    with pytest.raises(IntegrityError):
        sql_storage.add_rating(Rating(person_id=person.id, session_id="s1", rating=1))
    sql_storage.rollback()


def test_sql_rejects_duplicate_vote_rows(sql_storage: SqlStorage) -> None:
    person = sql_storage.add_person(_person("a"))
    comment = sql_storage.add_comment(
        Comment(person_id=person.id, session_id="s1", text="x")
    )
    sql_storage.add_comment_vote(CommentVote(comment_id=comment.id, session_id="s2", vote_type="up"))

    with pytest.raises(IntegrityError):
        sql_storage.add_comment_vote(
            CommentVote(comment_id=comment.id, session_id="s2", vote_type="down")
        )
    sql_storage.rollback()
