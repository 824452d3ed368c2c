# src/rankboard/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import CommentCreate, CommentResponse, CommentVoteCreate, CommentVoteResponse
from .facemash import ComparisonCreate, ComparisonPair, ComparisonResponse
from .person import PersonCreate, PersonResponse
from .rating import RatingCreate, RatingResponse
from .stats import SessionResponse, StatsResponse

__all__ = [
    "CommentCreate", "CommentResponse", "CommentVoteCreate", "CommentVoteResponse",
    "ComparisonCreate", "ComparisonPair", "ComparisonResponse",
    "PersonCreate", "PersonResponse",
    "RatingCreate", "RatingResponse",
    "SessionResponse", "StatsResponse",
]
