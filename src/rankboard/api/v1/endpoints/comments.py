# src/rankboard/api/v1/endpoints/comments.py
"""Comment and comment-vote endpoints for the Rankboard API."""

from fastapi import APIRouter, status

from rankboard.models import Comment, CommentVote
from rankboard.schemas.comment import (
    CommentCreate,
    CommentResponse,
    CommentVoteCreate,
    CommentVoteResponse,
)
from rankboard.services.comments import post_comment
from rankboard.services.votes import vote_comment

from ..dependencies import SessionIdDep, StorageDep

router = APIRouter(prefix="/comments", tags=["comments"])


@router.post("/", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    comment_data: CommentCreate,
    session_id: SessionIdDep,
    storage: StorageDep,
) -> Comment:
    """Post an anonymous comment on a person."""
    return post_comment(storage, comment_data.person_id, session_id, comment_data.text)


@router.post(
    "/{comment_id}/vote",
    response_model=CommentVoteResponse,
    status_code=status.HTTP_201_CREATED,
)
def cast_comment_vote(
    comment_id: int,
    vote_data: CommentVoteCreate,
    session_id: SessionIdDep,
    storage: StorageDep,
) -> CommentVote:
    """Vote a comment up or down once per anonymous session."""
    return vote_comment(storage, comment_id, session_id, vote_data.vote_type)
