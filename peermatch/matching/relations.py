"""
Match status transitions for the Peer-Tutoring Matchmaking System.

Relations are directed (user -> target) and stored in AppState.relations:
- like:   user -> target becomes "pending" with the current score.
          If target -> user is already pending, both sides become "accepted"
          together and the target gets a match notification.
- reject: user -> target becomes "rejected"; the target is left out of the
          user's future candidate pools until the relation is reset.

Every transition touching both sides is applied inside a single call, before
the caller saves state, so a saved file never holds a half-accepted match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, TYPE_CHECKING

from ..config import STATUS_PENDING, STATUS_ACCEPTED, STATUS_REJECTED
from ..errors import InvalidInput, UserNotFound
from ..models.match import CommonSubjects
from ..models.relation import MatchRelation, MatchNotification, relation_key, utc_now_iso
from ..models.user import UserProfile
from .scoring import compute_matches, compute_common_subjects

if TYPE_CHECKING:
    from ..models.state import AppState

logger = logging.getLogger(__name__)


@dataclass
class LikeResult:
    matched: bool
    message: str
    match_score: float = 0.0


@dataclass
class Connection:
    """An accepted, mutual match as seen from one side."""

    partner: UserProfile
    match_score: float
    matched_at: str
    common_subjects: CommonSubjects = field(default_factory=CommonSubjects)


@dataclass
class PendingRequest:
    """Someone who liked the user and is waiting for an answer."""

    requester: UserProfile
    match_score: float
    requested_at: str


def _require_pair(state: "AppState", user_id: str, target_id: str) -> Tuple[UserProfile, UserProfile]:
    if user_id == target_id:
        raise InvalidInput("A user cannot match with themself.")
    user = state.users.get(user_id)
    if user is None:
        raise UserNotFound(user_id)
    target = state.users.get(target_id)
    if target is None:
        raise UserNotFound(target_id)
    return user, target


def _set_relation(state: "AppState", user_id: str, target_id: str, status: str, score: float, now: str) -> MatchRelation:
    rel = state.get_relation(user_id, target_id)
    if rel is None:
        rel = MatchRelation(user_id=user_id, target_id=target_id)
        state.relations[rel.key] = rel
    rel.status = status
    rel.match_score = float(score)
    rel.updated_at = now
    return rel


def current_score(user: UserProfile, target: UserProfile) -> float:
    """Engine score of `target` for `user`; 0.0 when the target would not be proposed."""
    cand = compute_matches(user, [target]).get(target.user_id)
    return float(cand.match_score) if cand else 0.0


def like_user(state: "AppState", user_id: str, target_id: str) -> LikeResult:
    """Express interest in `target_id`; completes a mutual match when they already liked back."""
    user, target = _require_pair(state, user_id, target_id)
    now = utc_now_iso()
    user.last_active = now

    forward = state.get_relation(user_id, target_id)
    if forward is not None and forward.status == STATUS_ACCEPTED:
        return LikeResult(matched=True, message="You are already connected.", match_score=forward.match_score)

    score = current_score(user, target)
    forward = _set_relation(state, user_id, target_id, STATUS_PENDING, score, now)

    reverse = state.get_relation(target_id, user_id)
    if reverse is not None and reverse.status in (STATUS_PENDING, STATUS_ACCEPTED):
        forward.status = STATUS_ACCEPTED
        reverse.status = STATUS_ACCEPTED
        reverse.updated_at = now
        state.notifications.append(
            MatchNotification(
                recipient_id=target_id,
                from_user_id=user_id,
                from_user_name=user.display_name,
                created_at=now,
            )
        )
        logger.info("Mutual match between %s and %s (score=%.3f)", user_id, target_id, score)
        return LikeResult(matched=True, message="It's a match!", match_score=score)

    logger.info("%s liked %s (score=%.3f)", user_id, target_id, score)
    return LikeResult(matched=False, message="Match request sent", match_score=score)


def _demote_reverse(state: "AppState", user_id: str, target_id: str, now: str) -> None:
    # An accepted match needs both sides; the other side falls back to its own like
    reverse = state.get_relation(target_id, user_id)
    if reverse is not None and reverse.status == STATUS_ACCEPTED:
        reverse.status = STATUS_PENDING
        reverse.updated_at = now


def reject_user(state: "AppState", user_id: str, target_id: str) -> MatchRelation:
    """Reject `target_id`; they stay out of the user's suggestions until reset."""
    user, _ = _require_pair(state, user_id, target_id)
    now = utc_now_iso()
    user.last_active = now

    existing = state.get_relation(user_id, target_id)
    score = existing.match_score if existing is not None else 0.0
    _demote_reverse(state, user_id, target_id, now)
    rel = _set_relation(state, user_id, target_id, STATUS_REJECTED, score, now)
    logger.info("%s rejected %s", user_id, target_id)
    return rel


def reset_relation(state: "AppState", user_id: str, target_id: str) -> bool:
    """Forget the user's relation to `target_id`. Returns False when there was none."""
    _require_pair(state, user_id, target_id)
    rel = state.relations.pop(relation_key(user_id, target_id), None)
    if rel is None:
        return False
    if rel.status == STATUS_ACCEPTED:
        _demote_reverse(state, user_id, target_id, utc_now_iso())
    logger.info("Reset relation %s -> %s (was %s)", user_id, target_id, rel.status)
    return True


def is_mutual_match(state: "AppState", user_id: str, target_id: str) -> bool:
    a = state.get_relation(user_id, target_id)
    b = state.get_relation(target_id, user_id)
    return bool(a and b and a.status == STATUS_ACCEPTED and b.status == STATUS_ACCEPTED)


def get_connections(state: "AppState", user_id: str) -> List[Connection]:
    """Mutual matches of the user, most recent first."""
    user = state.users.get(user_id)
    if user is None:
        raise UserNotFound(user_id)

    connections: List[Connection] = []
    for rel in state.relations_from(user_id):
        partner = state.users.get(rel.target_id)
        if partner is None or not is_mutual_match(state, user_id, rel.target_id):
            continue
        connections.append(
            Connection(
                partner=partner,
                match_score=rel.match_score,
                matched_at=rel.updated_at,
                common_subjects=compute_common_subjects(user, partner),
            )
        )
    connections.sort(key=lambda c: c.matched_at, reverse=True)
    return connections


def get_pending_requests(state: "AppState", user_id: str) -> List[PendingRequest]:
    """Incoming likes the user has not answered (or rejected), highest score first."""
    if user_id not in state.users:
        raise UserNotFound(user_id)

    requests: List[PendingRequest] = []
    for rel in state.relations_to(user_id):
        if rel.status != STATUS_PENDING:
            continue
        requester = state.users.get(rel.user_id)
        if requester is None:
            continue
        answer = state.get_relation(user_id, rel.user_id)
        if answer is not None and answer.status == STATUS_REJECTED:
            continue
        requests.append(PendingRequest(requester=requester, match_score=rel.match_score, requested_at=rel.updated_at))
    requests.sort(key=lambda p: p.match_score, reverse=True)
    return requests


def pop_notifications(state: "AppState", user_id: str) -> List[MatchNotification]:
    """Return and clear the user's notifications, oldest first."""
    mine = [n for n in state.notifications if n.recipient_id == user_id]
    state.notifications = [n for n in state.notifications if n.recipient_id != user_id]
    return mine


def remove_user(state: "AppState", user_id: str) -> Optional[UserProfile]:
    """Delete a user together with every relation and notification involving them."""
    user = state.users.pop(user_id, None)
    if user is None:
        return None
    for k in [k for k, r in state.relations.items() if user_id in (r.user_id, r.target_id)]:
        state.relations.pop(k, None)
    state.notifications = [
        n for n in state.notifications if user_id not in (n.recipient_id, n.from_user_id)
    ]
    return user
