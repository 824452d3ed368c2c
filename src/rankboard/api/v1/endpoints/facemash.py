# src/rankboard/api/v1/endpoints/facemash.py
"""FaceMash endpoints for the Rankboard API."""

from fastapi import APIRouter, status

from rankboard.models import FaceMashComparison
from rankboard.schemas.facemash import ComparisonCreate, ComparisonPair, ComparisonResponse
from rankboard.schemas.person import PersonResponse
from rankboard.services.facemash import pick_comparison_pair, record_comparison

from ..dependencies import SessionIdDep, StorageDep

router = APIRouter(prefix="/facemash", tags=["facemash"])


@router.get("/comparison", response_model=ComparisonPair)
def get_comparison(storage: StorageDep) -> ComparisonPair:
    """Draw two distinct people at random."""
    first, second = pick_comparison_pair(storage)
    return ComparisonPair(
        person1=PersonResponse.model_validate(first),
        person2=PersonResponse.model_validate(second),
    )


@router.post("/compare", response_model=ComparisonResponse, status_code=status.HTTP_201_CREATED)
def compare(
    comparison_data: ComparisonCreate,
    session_id: SessionIdDep,
    storage: StorageDep,
) -> FaceMashComparison:
    """Record which of two people won a comparison."""
    return record_comparison(
        storage,
        comparison_data.winner_id,
        comparison_data.loser_id,
        session_id,
    )
