# src/rankboard/models/__init__.py
"""SQLAlchemy models for the Rankboard application."""

from .comment import Comment, CommentVote
from .comparison import FaceMashComparison
from .person import Person, PersonCategory
from .rating import Rating

__all__ = [
    "Comment", "CommentVote",
    "FaceMashComparison",
    "Person", "PersonCategory",
    "Rating",
]
