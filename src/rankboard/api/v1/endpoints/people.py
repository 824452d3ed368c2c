# src/rankboard/api/v1/endpoints/people.py
"""People-related endpoints for the Rankboard API."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from rankboard.models import Comment, Person
from rankboard.schemas.comment import CommentResponse
from rankboard.schemas.person import PersonCreate, PersonResponse
from rankboard.services import comments as comment_service
from rankboard.services import subjects as subject_service
from rankboard.services.comments import CommentSort
from rankboard.services.subjects import SubjectSort

from ..dependencies import StorageDep

router = APIRouter(prefix="/people", tags=["people"])


@router.get("/", response_model=list[PersonResponse])
def list_people(
    storage: StorageDep,
    category: str | None = None,
    sort_by: Annotated[SubjectSort, Query(alias="sortBy")] = SubjectSort.AVERAGE_RATING,
) -> list[Person]:
    """List people, optionally filtered by category."""
    return subject_service.list_subjects(storage, category=category, sort_by=sort_by)


@router.get("/{person_id}", response_model=PersonResponse)
def get_person(person_id: int, storage: StorageDep) -> Person:
    """Get a person by ID and count the view."""
    return subject_service.get_subject(storage, person_id)


@router.post("/", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
def create_person(person_data: PersonCreate, storage: StorageDep) -> Person:
    """Add a new person with empty statistics."""
    return subject_service.create_subject(
        storage,
        name=person_data.name,
        description=person_data.description,
        category=person_data.category,
        image_url=person_data.image_url,
    )


@router.get("/{person_id}/comments", response_model=list[CommentResponse])
def list_person_comments(
    person_id: int,
    storage: StorageDep,
    sort_by: Annotated[CommentSort, Query(alias="sortBy")] = CommentSort.SCORE,
) -> list[Comment]:
    """List every comment on a person, buried comments included."""
    return comment_service.list_comments(storage, person_id, sort_by=sort_by)
