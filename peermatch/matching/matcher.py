"""
Candidate-pool selection for the Peer-Tutoring Matchmaking System.

The scoring engine knows nothing about stored match status. This module is the
caller that loads the requester, restricts the pool and annotates the ranked
result with each candidate's relation status.
"""

from __future__ import annotations

import logging
from typing import List, TYPE_CHECKING

from ..config import STATUS_REJECTED
from ..errors import UserNotFound
from ..models.match import MatchResult
from ..models.user import UserProfile
from .scoring import compute_matches

if TYPE_CHECKING:
    from ..models.state import AppState

logger = logging.getLogger(__name__)


def build_candidate_pool(state: "AppState", user_id: str) -> List[UserProfile]:
    """
    Everyone the user may be proposed:
    - not the user themself
    - profile complete
    - not previously rejected by the user
    """
    rejected = {r.target_id for r in state.relations_from(user_id) if r.status == STATUS_REJECTED}
    pool: List[UserProfile] = []
    for uid, u in state.users.items():
        if uid == user_id or uid in rejected:
            continue
        if not u.is_profile_complete:
            continue
        pool.append(u)
    return pool


def find_matches_for_user(state: "AppState", user_id: str) -> MatchResult:
    """Ranked match suggestions for a stored user, annotated with relation status."""
    user = state.users.get(user_id)
    if user is None:
        raise UserNotFound(user_id)

    pool = build_candidate_pool(state, user_id)
    result = compute_matches(user, pool)

    for m in result:
        rel = state.get_relation(user_id, m.user_id)
        m.status = rel.status if rel else None

    if result.skipped:
        logger.warning("%d stored profiles could not be scored for %s", result.skipped, user_id)
    logger.info("Found %d matches for %s out of %d candidates", len(result), user_id, len(pool))
    return result
