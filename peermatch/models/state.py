"""
Application state model for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .user import UserProfile
from .relation import MatchRelation, MatchNotification, relation_key


@dataclass
class AppState:
    users: Dict[str, UserProfile] = field(default_factory=dict)
    relations: Dict[str, MatchRelation] = field(default_factory=dict)  # key=relation_key
    notifications: List[MatchNotification] = field(default_factory=list)

    def get_relation(self, user_id: str, target_id: str) -> Optional[MatchRelation]:
        return self.relations.get(relation_key(user_id, target_id))

    def relations_from(self, user_id: str) -> List[MatchRelation]:
        return [r for r in self.relations.values() if r.user_id == user_id]

    def relations_to(self, user_id: str) -> List[MatchRelation]:
        return [r for r in self.relations.values() if r.target_id == user_id]

    def to_dict(self) -> Dict:
        return {
            "users": {uid: u.to_dict() for uid, u in self.users.items()},
            "relations": {k: r.to_dict() for k, r in self.relations.items()},
            "notifications": [n.to_dict() for n in self.notifications],
        }

    @staticmethod
    def from_dict(d: Dict) -> "AppState":
        st = AppState()
        for uid, ud in d.get("users", {}).items():
            ud2 = dict(ud)
            ud2.setdefault("user_id", uid)
            st.users[uid] = UserProfile.from_dict(ud2)

        for rd in d.get("relations", {}).values():
            rel = MatchRelation.from_dict(rd)
            # Re-key so a hand-edited file cannot desync keys from contents
            st.relations[rel.key] = rel

        # Back-compat: may not exist
        for nd in d.get("notifications", []):
            st.notifications.append(MatchNotification.from_dict(nd))

        return st
