"""
Match scoring engine for the Peer-Tutoring Matchmaking System.

compute_matches() takes one requester and a candidate pool and returns the
candidates worth proposing, ranked by a bidirectional compatibility score:

  teach_match = cos(requester.learn, candidate.teach)   # they can teach you
  learn_match = cos(requester.teach, candidate.learn)   # you can teach them
  match_score = round((teach_match + learn_match) / 2, SCORE_DECIMALS)

A candidate is kept only if it shares at least one subject with the requester
in either direction AND match_score > MATCH_SCORE_THRESHOLD.

The engine is pure: it never mutates its inputs, and all normalization happens
on local copies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..config import (
    DEFAULT_TEACH_PROFICIENCY,
    DEFAULT_LEARN_PROFICIENCY,
    MATCH_SCORE_THRESHOLD,
    SCORE_DECIMALS,
)
from ..errors import InvalidInput, MalformedCandidateRecord, InternalInvariantViolation
from ..models.match import (
    CommonSubjects,
    MatchCandidate,
    MatchResult,
    TheyTeachSubject,
    YouTeachSubject,
)
from ..models.subject import SubjectEntry
from ..models.user import UserProfile
from .vectors import build_vocabulary, cosine_similarity, vectorize

logger = logging.getLogger(__name__)

# Plain records may use either naming style
_FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "user_id": ("user_id", "id", "_id", "userId"),
    "subjects_to_teach": ("subjects_to_teach", "subjectsToTeach"),
    "subjects_to_learn": ("subjects_to_learn", "subjectsToLearn"),
    "last_active": ("last_active", "lastActive"),
}


@dataclass
class _Profile:
    """Normalized, engine-local copy of a user record."""

    user_id: str
    name: str
    email: str
    bio: str
    teach: Dict[str, SubjectEntry] = field(default_factory=dict)  # normalized subject -> entry
    learn: Dict[str, SubjectEntry] = field(default_factory=dict)
    last_active: Optional[str] = None


def _field(record: Any, name: str) -> Any:
    if isinstance(record, UserProfile):
        return getattr(record, name)
    for alias in _FIELD_ALIASES.get(name, (name,)):
        if alias in record:
            return record[alias]
    return None


def _subject_map(user_id: Any, raw_list: Any, default_proficiency: int) -> Dict[str, SubjectEntry]:
    if raw_list is None:
        return {}
    if isinstance(raw_list, (str, bytes, Mapping)) or not isinstance(raw_list, Iterable):
        raise MalformedCandidateRecord(user_id, f"subject list is a {type(raw_list).__name__}")

    subjects: Dict[str, SubjectEntry] = {}
    for raw in raw_list:
        try:
            entry = SubjectEntry.from_raw(raw, default_proficiency)
        except KeyError:
            raise MalformedCandidateRecord(user_id, "subject entry has no 'subject' field")
        except TypeError as e:
            raise MalformedCandidateRecord(user_id, str(e))
        if entry is None:
            continue
        # First listing of a subject wins
        subjects.setdefault(entry.key, entry)
    return subjects


def normalize_profile(record: Any) -> _Profile:
    """
    Copy a UserProfile or plain mapping into an engine-local profile.
    Raises MalformedCandidateRecord when the record cannot be used.
    """
    if not isinstance(record, (UserProfile, Mapping)):
        raise MalformedCandidateRecord(None, f"record is a {type(record).__name__}")

    user_id = _field(record, "user_id")
    if user_id is None or str(user_id).strip() == "":
        raise MalformedCandidateRecord(None, "missing user id")
    user_id = str(user_id)

    teach = _subject_map(user_id, _field(record, "subjects_to_teach"), DEFAULT_TEACH_PROFICIENCY)
    learn = _subject_map(user_id, _field(record, "subjects_to_learn"), DEFAULT_LEARN_PROFICIENCY)

    last_active = _field(record, "last_active")
    return _Profile(
        user_id=user_id,
        name=str(_field(record, "name") or "Anonymous"),
        email=str(_field(record, "email") or ""),
        bio=str(_field(record, "bio") or ""),
        teach=teach,
        learn=learn,
        last_active=str(last_active) if last_active is not None else None,
    )


def _common_subjects(requester: _Profile, candidate: _Profile) -> CommonSubjects:
    they_teach = [
        TheyTeachSubject(
            subject=entry.subject,
            their_proficiency=entry.proficiency,
            your_target=requester.learn[key].proficiency,
        )
        for key, entry in candidate.teach.items()
        if key in requester.learn
    ]
    you_teach = [
        YouTeachSubject(
            subject=entry.subject,
            their_target=entry.proficiency,
            your_proficiency=requester.teach[key].proficiency,
        )
        for key, entry in candidate.learn.items()
        if key in requester.teach
    ]
    return CommonSubjects(they_teach=they_teach, you_teach=you_teach)


def compute_common_subjects(user: Any, partner: Any) -> CommonSubjects:
    """Subjects `partner` teaches that `user` learns, and vice versa."""
    return _common_subjects(normalize_profile(user), normalize_profile(partner))


def _pair_similarity(a: np.ndarray, b: np.ndarray, requester_id: str, candidate_id: str) -> float:
    try:
        return cosine_similarity(a, b)
    except InternalInvariantViolation:
        logger.exception("Scoring %s against %s: treating pair as score 0", requester_id, candidate_id)
        return 0.0


def _activity_timestamp(value: Optional[str]) -> float:
    """Sortable timestamp for a last-active value; 0.0 when absent or unparseable."""
    if not value:
        return 0.0
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp()
    except (TypeError, ValueError, OverflowError, OSError):
        return 0.0


def _validate_pool(candidates: Any) -> None:
    if candidates is None:
        raise InvalidInput("candidates is required")
    if isinstance(candidates, (str, bytes, Mapping)) or not isinstance(candidates, Iterable):
        raise InvalidInput(f"candidates must be a collection of user records, got {type(candidates).__name__}")


def compute_matches(requester: Any, candidates: Any) -> MatchResult:
    """
    Score and rank `candidates` for `requester`.

    Both arguments take UserProfile objects or plain mappings of the same shape.
    Malformed candidates are skipped and counted in MatchResult.skipped; a
    candidate sharing the requester's id is dropped silently.

    Raises InvalidInput when the requester is missing or unusable, or when
    `candidates` is not a collection.
    """
    if requester is None:
        raise InvalidInput("requester is required")
    _validate_pool(candidates)

    try:
        req = normalize_profile(requester)
    except MalformedCandidateRecord as e:
        raise InvalidInput(f"requester record is unusable: {e.reason}") from e

    pool: List[_Profile] = []
    skipped = 0
    for record in candidates:
        try:
            cand = normalize_profile(record)
        except MalformedCandidateRecord as e:
            logger.warning("Skipping candidate: %s", e)
            skipped += 1
            continue
        if cand.user_id == req.user_id:
            continue
        pool.append(cand)

    # 1) Per-call vocabulary over everyone's teach and learn lists
    subject_maps = [req.teach, req.learn]
    for cand in pool:
        subject_maps.append(cand.teach)
        subject_maps.append(cand.learn)
    vocab = build_vocabulary(subject_maps)

    req_learn_vec = vectorize(req.learn, vocab)
    req_teach_vec = vectorize(req.teach, vocab)

    retained: List[MatchCandidate] = []
    for cand in pool:
        # 2) Overlap gate, independent of the score
        common = _common_subjects(req, cand)
        if not common:
            continue

        # 3) Directional similarities and combined score
        teach_match = _pair_similarity(req_learn_vec, vectorize(cand.teach, vocab), req.user_id, cand.user_id)
        learn_match = _pair_similarity(req_teach_vec, vectorize(cand.learn, vocab), req.user_id, cand.user_id)
        score = round((teach_match + learn_match) / 2.0, SCORE_DECIMALS)

        # 4) Threshold
        if score <= MATCH_SCORE_THRESHOLD:
            continue

        retained.append(
            MatchCandidate(
                user_id=cand.user_id,
                name=cand.name,
                email=cand.email,
                bio=cand.bio,
                match_score=score,
                teach_match=teach_match,
                learn_match=learn_match,
                common_subjects=common,
                last_active=cand.last_active,
            )
        )

    # 5) Rank: score desc, then most recently active; sort is stable for full ties
    retained.sort(key=lambda m: (-m.match_score, -_activity_timestamp(m.last_active)))

    logger.debug(
        "Scored %d candidates for %s over %d subjects: %d retained, %d skipped",
        len(pool),
        req.user_id,
        len(vocab),
        len(retained),
        skipped,
    )
    return MatchResult(matches=retained, skipped=skipped)
