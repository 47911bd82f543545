"""
Data models for the Peer-Tutoring Matchmaking System.
"""

from .subject import SubjectEntry, normalize_subject, clamp_proficiency
from .user import UserProfile
from .match import (
    TheyTeachSubject,
    YouTeachSubject,
    CommonSubjects,
    MatchCandidate,
    MatchResult,
)
from .relation import MatchRelation, MatchNotification, relation_key, utc_now_iso
from .state import AppState

__all__ = [
    "SubjectEntry",
    "normalize_subject",
    "clamp_proficiency",
    "UserProfile",
    "TheyTeachSubject",
    "YouTeachSubject",
    "CommonSubjects",
    "MatchCandidate",
    "MatchResult",
    "MatchRelation",
    "MatchNotification",
    "relation_key",
    "utc_now_iso",
    "AppState",
]
