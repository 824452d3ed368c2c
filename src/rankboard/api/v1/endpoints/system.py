# src/rankboard/api/v1/endpoints/system.py
"""Site statistics and anonymous session endpoints."""

import random
import secrets
import string
from typing import Annotated

from fastapi import APIRouter, Header

from rankboard.schemas.stats import SessionResponse, StatsResponse
from rankboard.services.stats import totals

from ..dependencies import StorageDep

router = APIRouter(tags=["system"])

_SESSION_ALPHABET = string.ascii_lowercase + string.digits


def new_session_id() -> str:
    """Return a fresh opaque session id such as ``user_k3j9x0a2b``."""
    return "user_" + "".join(secrets.choice(_SESSION_ALPHABET) for _ in range(9))


@router.get("/session", response_model=SessionResponse)
def get_session(
    x_session_id: Annotated[str | None, Header()] = None,
) -> SessionResponse:
    """Echo the caller's session id, or issue a new one."""
    return SessionResponse(session_id=x_session_id or new_session_id())


@router.get("/stats", response_model=StatsResponse)
def get_stats(storage: StorageDep) -> StatsResponse:
    """Site-wide counts plus a decorative online-users figure."""
    counts = totals(storage)
    return StatsResponse(
        **counts.as_dict(),
        # Not tracked; shown for flavour only.
        online_users=random.randint(50, 249),
    )
