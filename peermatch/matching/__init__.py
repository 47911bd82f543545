"""
Matching algorithms for the Peer-Tutoring Matchmaking System.
"""

from .vectors import build_vocabulary, vectorize, cosine_similarity
from .scoring import compute_matches, compute_common_subjects, normalize_profile
from .matcher import build_candidate_pool, find_matches_for_user
from .relations import (
    LikeResult,
    Connection,
    PendingRequest,
    current_score,
    like_user,
    reject_user,
    reset_relation,
    is_mutual_match,
    get_connections,
    get_pending_requests,
    pop_notifications,
    remove_user,
)

__all__ = [
    "build_vocabulary",
    "vectorize",
    "cosine_similarity",
    "compute_matches",
    "compute_common_subjects",
    "normalize_profile",
    "build_candidate_pool",
    "find_matches_for_user",
    "LikeResult",
    "Connection",
    "PendingRequest",
    "current_score",
    "like_user",
    "reject_user",
    "reset_relation",
    "is_mutual_match",
    "get_connections",
    "get_pending_requests",
    "pop_notifications",
    "remove_user",
]
