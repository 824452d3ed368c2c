"""Site statistics and session Pydantic schemas."""

from .common import CamelModel


class StatsResponse(CamelModel):
    """Site-wide counters; ``online_users`` is a display placeholder."""

    total_people: int
    total_ratings: int
    total_comments: int
    online_users: int


class SessionResponse(CamelModel):
    """Anonymous session identifier for the client to store and echo back."""

    session_id: str
