# src/rankboard/main.py
"""Main entry point for the Rankboard application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from rankboard.api.errors import register_exception_handlers
from rankboard.api.v1 import (
    comments_router,
    facemash_router,
    people_router,
    rankings_router,
    ratings_router,
    system_router,
)
from rankboard.core.settings import settings

logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)

# Initialize FastAPI app
app = FastAPI(
    title="Rankboard API",
    description="Anonymous people ratings, comments and FaceMash comparisons",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

register_exception_handlers(app)

# Include API routers
app.include_router(people_router, prefix="/api/v1")
app.include_router(ratings_router, prefix="/api/v1")
app.include_router(comments_router, prefix="/api/v1")
app.include_router(facemash_router, prefix="/api/v1")
app.include_router(rankings_router, prefix="/api/v1")
app.include_router(system_router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": "Rankboard API",
        "version": settings.app_version,
        "description": "Anonymous people ratings, comments and FaceMash comparisons",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("rankboard.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
