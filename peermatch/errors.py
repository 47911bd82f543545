"""
Error types for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

from .config import ENVIRONMENT


class PeerMatchError(Exception):
    """Base class for all matchmaking errors."""


class InvalidInput(PeerMatchError, ValueError):
    """Missing requester, malformed candidate collection or bad service arguments."""


class UserNotFound(InvalidInput):
    """A user id does not exist in the application state."""

    def __init__(self, user_id: str):
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class MalformedCandidateRecord(PeerMatchError):
    """A single candidate's subject data is unusable; the candidate is skipped."""

    def __init__(self, user_id: object, reason: str):
        super().__init__(f"Malformed candidate {user_id!r}: {reason}")
        self.user_id = user_id
        self.reason = reason


class InternalInvariantViolation(PeerMatchError):
    """Vectors built from one vocabulary ended up with different lengths."""


def describe_error(exc: BaseException, environment: str = ENVIRONMENT) -> str:
    """
    User-facing text for an unexpected failure.
    The exception detail is appended only outside production.
    """
    if environment == "production":
        return "Server error"
    return f"Server error: {type(exc).__name__}: {exc}"
