# src/rankboard/api/v1/endpoints/ratings.py
"""Rating endpoints for the Rankboard API."""

from fastapi import APIRouter, status

from rankboard.models import Rating
from rankboard.schemas.rating import RatingCreate, RatingResponse
from rankboard.services.ratings import submit_rating

from ..dependencies import SessionIdDep, StorageDep

router = APIRouter(prefix="/ratings", tags=["ratings"])


@router.post("/", response_model=RatingResponse, status_code=status.HTTP_201_CREATED)
def rate_person(
    rating_data: RatingCreate,
    session_id: SessionIdDep,
    storage: StorageDep,
) -> Rating:
    """Rate a person once per anonymous session."""
    return submit_rating(storage, rating_data.person_id, session_id, rating_data.rating)
