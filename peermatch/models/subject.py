"""
Subject entry model for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from ..config import PROFICIENCY_MIN, PROFICIENCY_MAX


def normalize_subject(name: str) -> str:
    """Identity key for a subject: trimmed and lower-cased."""
    return name.strip().lower()


def clamp_proficiency(value: Any, default: int) -> int:
    """
    Coerce a raw proficiency into [PROFICIENCY_MIN, PROFICIENCY_MAX].
    Missing, boolean, non-numeric or non-finite values fall back to `default`
    before clamping.
    """
    if value is None or isinstance(value, bool):
        val = float(default)
    else:
        try:
            val = float(value)
        except (TypeError, ValueError, OverflowError):
            val = float(default)
        if math.isnan(val) or math.isinf(val):
            val = float(default)
    return int(min(max(round(val), PROFICIENCY_MIN), PROFICIENCY_MAX))


@dataclass(frozen=True)
class SubjectEntry:
    subject: str  # display casing
    proficiency: int = PROFICIENCY_MIN

    @property
    def key(self) -> str:
        return normalize_subject(self.subject)

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_raw(raw: Any, default_proficiency: int) -> Optional["SubjectEntry"]:
        """
        Build a clean entry from a stored record.

        Accepts a SubjectEntry, a mapping with "subject"/"proficiency", or a bare
        subject string. Returns None when the subject is empty or not a string.
        Raises KeyError for a mapping with no "subject" key and TypeError for
        any other record shape.
        """
        if isinstance(raw, SubjectEntry):
            name, prof = raw.subject, raw.proficiency
        elif isinstance(raw, str):
            name, prof = raw, None
        elif isinstance(raw, Mapping):
            if "subject" not in raw:
                raise KeyError("subject")
            name, prof = raw["subject"], raw.get("proficiency")
        else:
            raise TypeError(f"unsupported subject entry type: {type(raw).__name__}")

        if not isinstance(name, str) or not name.strip():
            return None
        return SubjectEntry(subject=name.strip(), proficiency=clamp_proficiency(prof, default_proficiency))
