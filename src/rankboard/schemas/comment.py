"""Comment and comment vote Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from .common import CamelModel


class CommentCreate(CamelModel):
    """Schema for posting a comment."""

    person_id: int
    text: str = Field(..., max_length=2000)


class CommentResponse(CamelModel):
    """Schema for comment information returned by the API."""

    id: int
    person_id: int
    session_id: str
    text: str
    upvotes: int
    downvotes: int
    score: int
    is_buried: bool
    created_at: datetime


class CommentVoteCreate(CamelModel):
    """Schema for voting on a comment."""

    vote_type: str = Field(..., description="'up' or 'down'")


class CommentVoteResponse(CamelModel):
    """Schema for a stored comment vote."""

    id: int
    comment_id: int
    session_id: str
    vote_type: str
    created_at: datetime
