"""FaceMash Pydantic schemas."""

from datetime import datetime

from .common import CamelModel
from .person import PersonResponse


class ComparisonPair(CamelModel):
    """Two distinct people to choose between."""

    person1: PersonResponse
    person2: PersonResponse


class ComparisonCreate(CamelModel):
    """Schema for submitting the outcome of a comparison."""

    winner_id: int
    loser_id: int


class ComparisonResponse(CamelModel):
    """Schema for a logged comparison."""

    id: int
    winner_id: int
    loser_id: int
    session_id: str
    created_at: datetime
