"""Rating-related Pydantic schemas."""

from datetime import datetime

from .common import CamelModel


class RatingCreate(CamelModel):
    """Schema for rating a person; the range is checked by the rating ledger."""

    person_id: int
    rating: int


class RatingResponse(CamelModel):
    """Schema for a stored rating."""

    id: int
    person_id: int
    session_id: str
    rating: int
    created_at: datetime
