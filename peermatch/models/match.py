"""
Match result models for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, Iterator, List, Optional


@dataclass(frozen=True)
class TheyTeachSubject:
    """A subject the candidate teaches and the requester wants to learn."""

    subject: str
    their_proficiency: int
    your_target: int


@dataclass(frozen=True)
class YouTeachSubject:
    """A subject the requester teaches and the candidate wants to learn."""

    subject: str
    their_target: int
    your_proficiency: int


@dataclass
class CommonSubjects:
    they_teach: List[TheyTeachSubject] = field(default_factory=list)
    you_teach: List[YouTeachSubject] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.they_teach or self.you_teach)

    def to_dict(self) -> Dict:
        return {
            "they_teach": [asdict(s) for s in self.they_teach],
            "you_teach": [asdict(s) for s in self.you_teach],
        }


@dataclass
class MatchCandidate:
    user_id: str
    name: str
    email: str
    bio: str
    match_score: float  # in [0, 1], rounded
    teach_match: float = 0.0  # candidate teaches what the requester learns
    learn_match: float = 0.0  # requester teaches what the candidate learns
    common_subjects: CommonSubjects = field(default_factory=CommonSubjects)
    last_active: Optional[str] = None
    status: Optional[str] = None  # stored relation status, filled in by the service layer

    def to_dict(self) -> Dict:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "bio": self.bio,
            "match_score": float(self.match_score),
            "teach_match": float(self.teach_match),
            "learn_match": float(self.learn_match),
            "common_subjects": self.common_subjects.to_dict(),
            "last_active": self.last_active,
            "status": self.status,
        }


@dataclass
class MatchResult:
    """Ranked engine output plus the number of candidates skipped as malformed."""

    matches: List[MatchCandidate] = field(default_factory=list)
    skipped: int = 0

    def __iter__(self) -> Iterator[MatchCandidate]:
        return iter(self.matches)

    def __len__(self) -> int:
        return len(self.matches)

    def __getitem__(self, idx: int) -> MatchCandidate:
        return self.matches[idx]

    def get(self, user_id: str) -> Optional[MatchCandidate]:
        for m in self.matches:
            if m.user_id == user_id:
                return m
        return None
