"""
Peer-Tutoring Matchmaking System - Main package.

Users list subjects they can teach and subjects they want to learn. The
matching engine ranks partners by proficiency-weighted cosine similarity in
both directions; likes, rejections and mutual matches are kept in a JSON
state file and driven from a terminal UI.
"""

from .config import (
    STATE_FILE,
    ENVIRONMENT,
    PROFICIENCY_MIN,
    PROFICIENCY_MAX,
    DEFAULT_TEACH_PROFICIENCY,
    DEFAULT_LEARN_PROFICIENCY,
    MATCH_SCORE_THRESHOLD,
    SCORE_DECIMALS,
    STATUS_PENDING,
    STATUS_ACCEPTED,
    STATUS_REJECTED,
)

from .errors import (
    PeerMatchError,
    InvalidInput,
    UserNotFound,
    MalformedCandidateRecord,
    InternalInvariantViolation,
    describe_error,
)

from .models import (
    SubjectEntry,
    UserProfile,
    MatchCandidate,
    MatchResult,
    CommonSubjects,
    MatchRelation,
    MatchNotification,
    AppState,
)

from .matching import (
    compute_matches,
    compute_common_subjects,
    cosine_similarity,
    find_matches_for_user,
    like_user,
    reject_user,
    reset_relation,
    get_connections,
    get_pending_requests,
    pop_notifications,
    remove_user,
)

from .persistence import load_state, save_state, reconcile_state

__all__ = [
    # Config
    "STATE_FILE",
    "ENVIRONMENT",
    "PROFICIENCY_MIN",
    "PROFICIENCY_MAX",
    "DEFAULT_TEACH_PROFICIENCY",
    "DEFAULT_LEARN_PROFICIENCY",
    "MATCH_SCORE_THRESHOLD",
    "SCORE_DECIMALS",
    "STATUS_PENDING",
    "STATUS_ACCEPTED",
    "STATUS_REJECTED",
    # Errors
    "PeerMatchError",
    "InvalidInput",
    "UserNotFound",
    "MalformedCandidateRecord",
    "InternalInvariantViolation",
    "describe_error",
    # Models
    "SubjectEntry",
    "UserProfile",
    "MatchCandidate",
    "MatchResult",
    "CommonSubjects",
    "MatchRelation",
    "MatchNotification",
    "AppState",
    # Matching
    "compute_matches",
    "compute_common_subjects",
    "cosine_similarity",
    "find_matches_for_user",
    "like_user",
    "reject_user",
    "reset_relation",
    "get_connections",
    "get_pending_requests",
    "pop_notifications",
    "remove_user",
    # Persistence
    "load_state",
    "save_state",
    "reconcile_state",
]
