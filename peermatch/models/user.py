"""
User profile model for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..config import DEFAULT_TEACH_PROFICIENCY, DEFAULT_LEARN_PROFICIENCY
from .subject import SubjectEntry


def _parse_subjects(raw_list, default_proficiency: int) -> List[SubjectEntry]:
    entries: List[SubjectEntry] = []
    for raw in raw_list or []:
        entry = SubjectEntry.from_raw(raw, default_proficiency)
        if entry is not None:
            entries.append(entry)
    return entries


@dataclass
class UserProfile:
    user_id: str
    name: str = ""
    email: str = ""
    bio: str = ""
    subjects_to_teach: List[SubjectEntry] = field(default_factory=list)
    subjects_to_learn: List[SubjectEntry] = field(default_factory=list)
    is_profile_complete: bool = False
    last_active: Optional[str] = None  # ISO-8601 timestamp

    @property
    def display_name(self) -> str:
        return self.name or self.email or "Anonymous"

    def to_dict(self) -> Dict:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "bio": self.bio,
            "subjects_to_teach": [s.to_dict() for s in self.subjects_to_teach],
            "subjects_to_learn": [s.to_dict() for s in self.subjects_to_learn],
            "is_profile_complete": bool(self.is_profile_complete),
            "last_active": self.last_active,
        }

    @staticmethod
    def from_dict(d: Dict) -> "UserProfile":
        return UserProfile(
            user_id=str(d["user_id"]),
            name=d.get("name") or "",
            email=d.get("email") or "",
            bio=d.get("bio") or "",
            subjects_to_teach=_parse_subjects(d.get("subjects_to_teach"), DEFAULT_TEACH_PROFICIENCY),
            subjects_to_learn=_parse_subjects(d.get("subjects_to_learn"), DEFAULT_LEARN_PROFICIENCY),
            # Back-compat: older records predate the flag
            is_profile_complete=bool(d.get("is_profile_complete", False)),
            last_active=d.get("last_active"),
        )
