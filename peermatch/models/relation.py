"""
Match relation and notification models for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Dict

from ..config import STATUS_PENDING


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def relation_key(user_id: str, target_id: str) -> str:
    """Key for the directed relation user -> target."""
    return f"{user_id}->{target_id}"


@dataclass
class MatchRelation:
    user_id: str
    target_id: str
    status: str = STATUS_PENDING  # "pending" | "accepted" | "rejected"
    match_score: float = 0.0  # last computed score
    updated_at: str = ""

    @property
    def key(self) -> str:
        return relation_key(self.user_id, self.target_id)

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict) -> "MatchRelation":
        d2 = dict(d)
        d2.setdefault("status", STATUS_PENDING)
        d2.setdefault("match_score", 0.0)
        d2.setdefault("updated_at", "")
        d2["match_score"] = float(d2["match_score"])
        return MatchRelation(**d2)


@dataclass
class MatchNotification:
    recipient_id: str
    from_user_id: str
    from_user_name: str
    kind: str = "match"
    created_at: str = ""

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict) -> "MatchNotification":
        d2 = dict(d)
        d2.setdefault("kind", "match")
        d2.setdefault("created_at", "")
        return MatchNotification(**d2)
