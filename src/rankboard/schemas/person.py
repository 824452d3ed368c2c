"""Person-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from rankboard.models import PersonCategory

from .common import CamelModel


class PersonCreate(CamelModel):
    """Schema for adding a new person."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., max_length=5000)
    category: PersonCategory
    image_url: str = Field(..., description="Link to the person's picture")


class PersonResponse(CamelModel):
    """Schema for person information returned by the API."""

    id: int
    name: str
    description: str
    category: str
    image_url: str
    average_rating: float
    total_ratings: int
    total_comments: int
    total_views: int
    facemash_wins: int = Field(alias="faceMashWins")
    facemash_losses: int = Field(alias="faceMashLosses")
    created_at: datetime
