"""Shared API dependencies for storage access and anonymous sessions."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from rankboard.core.settings import settings
from rankboard.db.session import get_db
from rankboard.repositories import MemoryStorage, SqlStorage, Storage

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]

_memory_storage: MemoryStorage | None = None


def get_memory_storage() -> MemoryStorage:
    """Return the process-wide in-memory store, creating it on first use."""
    global _memory_storage
    if _memory_storage is None:
        _memory_storage = MemoryStorage()
    return _memory_storage


def get_storage(db: SessionDep) -> Storage:
    """Return the storage backend selected by ``STORAGE_BACKEND``.

    The SQL session is only opened lazily, so the memory backend never
    touches the database.
    """
    if settings.storage_backend == "memory":
        return get_memory_storage()
    return SqlStorage(db)


def require_session_id(
    x_session_id: Annotated[str | None, Header()] = None,
) -> str:
    """Return the caller's anonymous session id from ``X-Session-Id``.

    Raises:
        HTTPException: If the header is missing or blank.
    """
    if not x_session_id or not x_session_id.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Session ID required",
        )
    return x_session_id


StorageDep = Annotated[Storage, Depends(get_storage)]
SessionIdDep = Annotated[str, Depends(require_session_id)]
