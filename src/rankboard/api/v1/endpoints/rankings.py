# src/rankboard/api/v1/endpoints/rankings.py
"""Leaderboard endpoints for the Rankboard API."""

from typing import Annotated

from fastapi import APIRouter, Query

from rankboard.models import Person
from rankboard.schemas.person import PersonResponse
from rankboard.services.subjects import top_ranked, worst_ranked

from ..dependencies import StorageDep

router = APIRouter(prefix="/rankings", tags=["rankings"])

LimitQuery = Annotated[int | None, Query(ge=0)]


@router.get("/top", response_model=list[PersonResponse])
def get_top(storage: StorageDep, limit: LimitQuery = None) -> list[Person]:
    """Best-rated people first."""
    return top_ranked(storage, limit)


@router.get("/worst", response_model=list[PersonResponse])
def get_worst(storage: StorageDep, limit: LimitQuery = None) -> list[Person]:
    """Poorly rated people, lowest average first."""
    return worst_ranked(storage, limit)
