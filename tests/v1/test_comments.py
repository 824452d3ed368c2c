# mypy: ignore-errors
"""Tests for comment and comment-vote endpoints."""

from fastapi import status


def _person(client) -> int:
    response = client.post(
        "/api/v1/people/",
        json={"name": "X", "description": "", "category": "other", "imageUrl": "x"},
    )
    return response.json()["id"]


def _comment(client, person_id, text="hello", session_id="author"):
    return client.post(
        "/api/v1/comments/",
        json={"personId": person_id, "text": text},
        headers={"X-Session-Id": session_id},
    )


def _vote(client, comment_id, vote_type, session_id):
    return client.post(
        f"/api/v1/comments/{comment_id}/vote",
        json={"voteType": vote_type},
        headers={"X-Session-Id": session_id},
    )


def test_post_comment(client) -> None:
    person_id = _person(client)
    response = _comment(client, person_id)
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["score"] == 0
    assert body["isBuried"] is False
    assert client.get(f"/api/v1/people/{person_id}").json()["totalComments"] == 1


def test_post_blank_comment(client) -> None:
    person_id = _person(client)
    assert _comment(client, person_id, text="  ").status_code == status.HTTP_400_BAD_REQUEST


def test_post_comment_unknown_person(client) -> None:
    assert _comment(client, 77).status_code == status.HTTP_404_NOT_FOUND


def test_burial_through_the_api(client) -> None:
    person_id = _person(client)
    comment_id = _comment(client, person_id).json()["id"]
    for i in range(6):
        assert _vote(client, comment_id, "down", f"s{i}").status_code == status.HTTP_201_CREATED
    _vote(client, comment_id, "up", "s6")

    comments = client.get(f"/api/v1/people/{person_id}/comments").json()
    assert len(comments) == 1
    assert comments[0]["score"] == -5
    assert comments[0]["upvotes"] == 1
    assert comments[0]["downvotes"] == 6
    assert comments[0]["isBuried"] is True


def test_duplicate_vote_conflicts(client) -> None:
    person_id = _person(client)
    comment_id = _comment(client, person_id).json()["id"]
    _vote(client, comment_id, "up", "s1")
    response = _vote(client, comment_id, "down", "s1")
    assert response.status_code == status.HTTP_409_CONFLICT
    assert "already voted" in response.json()["detail"]


def test_invalid_vote_type(client) -> None:
    person_id = _person(client)
    comment_id = _comment(client, person_id).json()["id"]
    response = _vote(client, comment_id, "sideways", "s1")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Invalid vote type"


def test_vote_unknown_comment(client) -> None:
    assert _vote(client, 404, "up", "s1").status_code == status.HTTP_404_NOT_FOUND


def test_comments_sorted_by_score(client) -> None:
    person_id = _person(client)
    first = _comment(client, person_id, text="first").json()["id"]
    second = _comment(client, person_id, text="second").json()["id"]
    _vote(client, second, "up", "s1")

    listed = client.get(
        f"/api/v1/people/{person_id}/comments", params={"sortBy": "score"}
    ).json()
    assert [c["id"] for c in listed] == [second, first]
