# src/rankboard/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .comments import router as comments_router
from .facemash import router as facemash_router
from .people import router as people_router
from .rankings import router as rankings_router
from .ratings import router as ratings_router
from .system import router as system_router

__all__ = [
    "comments_router",
    "facemash_router",
    "people_router",
    "rankings_router",
    "ratings_router",
    "system_router",
]
