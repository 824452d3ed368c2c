"""Domain errors raised by the rating engine.

Every error is a deterministic outcome of the input and the current ledger
state, so none of them is ever retried by the services.
"""

from __future__ import annotations


class RankboardError(Exception):
    """Base class for all domain errors."""


class NotFoundError(RankboardError, LookupError):
    """A referenced person or comment does not exist."""

    def __init__(self, kind: str, identifier: int) -> None:
        super().__init__(f"{kind.capitalize()} {identifier} not found")
        self.kind = kind
        self.identifier = identifier


class DuplicateActionError(RankboardError):
    """The session already rated this person or voted on this comment."""

    def __init__(self, message: str, *, session_id: str) -> None:
        super().__init__(message)
        self.session_id = session_id


class InsufficientSubjectsError(RankboardError):
    """Fewer than two people exist, so no comparison pair can be drawn."""


class InvalidInputError(RankboardError, ValueError):
    """Malformed score, vote direction, comment text or comparison."""
