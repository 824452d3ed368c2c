"""Version 1 API endpoints."""

from .endpoints import (
    comments_router,
    facemash_router,
    people_router,
    rankings_router,
    ratings_router,
    system_router,
)

__all__ = [
    "comments_router",
    "facemash_router",
    "people_router",
    "rankings_router",
    "ratings_router",
    "system_router",
]
