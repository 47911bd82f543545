"""
Configuration constants for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

import os
from typing import List, Tuple

# =====================================================
# State Persistence
# =====================================================

STATE_FILE = os.environ.get("PEERMATCH_STATE_FILE", "peermatch_state.json")

# =====================================================
# Runtime Environment
# =====================================================

# "production" hides error details from users; anything else shows them
ENVIRONMENT = os.environ.get("PEERMATCH_ENV", "development").strip().lower()

LOG_LEVEL = os.environ.get("PEERMATCH_LOG_LEVEL", "WARNING").strip().upper()

# =====================================================
# Proficiency Scale
# =====================================================

PROFICIENCY_MIN: int = 1
PROFICIENCY_MAX: int = 5

# Used when a listed subject carries no usable proficiency
DEFAULT_TEACH_PROFICIENCY: int = 3
DEFAULT_LEARN_PROFICIENCY: int = 1

# =====================================================
# Match Scoring
# =====================================================

# Candidates must score strictly above this to be proposed
MATCH_SCORE_THRESHOLD: float = 0.1
SCORE_DECIMALS: int = 3

# =====================================================
# Match Relations
# =====================================================

STATUS_PENDING = "pending"
STATUS_ACCEPTED = "accepted"
STATUS_REJECTED = "rejected"

RELATION_STATUSES: Tuple[str, ...] = (STATUS_PENDING, STATUS_ACCEPTED, STATUS_REJECTED)

# =====================================================
# Demo Data (bulk generation)
# =====================================================

SAMPLE_SUBJECTS: List[str] = [
    "Mathematics",
    "Physics",
    "Chemistry",
    "Biology",
    "Computer Science",
    "English",
    "History",
    "Economics",
]

# Subjects per list are drawn uniformly from [1, MAX_SUBJECTS_PER_LIST]
MAX_SUBJECTS_PER_LIST: int = 3

# Gaussian defaults on the proficiency scale (clipped to 1..5)
GAUSS_TEACH_MEAN: float = 4.0
GAUSS_TEACH_STD: float = 1.0
GAUSS_LEARN_MEAN: float = 2.0
GAUSS_LEARN_STD: float = 1.0
