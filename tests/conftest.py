"""
Pytest configuration and shared fixtures.
"""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest
from typing import Callable, Dict, Optional

from peermatch.models import AppState, SubjectEntry, UserProfile


def _entries(subjects: Optional[Dict[str, int]]):
    return [SubjectEntry(subject=s, proficiency=p) for s, p in (subjects or {}).items()]


@pytest.fixture
def make_user() -> Callable[..., UserProfile]:
    """Factory for complete user profiles from {subject: proficiency} dicts."""

    def _make(user_id: str, teach: Optional[Dict[str, int]] = None, learn: Optional[Dict[str, int]] = None, **kwargs) -> UserProfile:
        kwargs.setdefault("name", user_id.title())
        kwargs.setdefault("email", f"{user_id}@example.com")
        kwargs.setdefault("is_profile_complete", True)
        return UserProfile(
            user_id=user_id,
            subjects_to_teach=_entries(teach),
            subjects_to_learn=_entries(learn),
            **kwargs,
        )

    return _make


@pytest.fixture
def requester(make_user) -> UserProfile:
    """Teaches Mathematics/Physics, wants Computer Science/English."""
    return make_user(
        "alice",
        teach={"Mathematics": 5, "Physics": 2},
        learn={"Computer Science": 3, "English": 5},
    )


@pytest.fixture
def mirror_candidate(make_user) -> UserProfile:
    """Teaches what the requester learns and learns what the requester teaches."""
    return make_user(
        "bob",
        teach={"Computer Science": 4, "English": 5},
        learn={"Mathematics": 4, "Physics": 5},
    )


@pytest.fixture
def unrelated_candidate(make_user) -> UserProfile:
    return make_user("carol", teach={"History": 4}, learn={"Biology": 2})


@pytest.fixture
def weak_candidate(make_user) -> UserProfile:
    """
    Teaches a single subject the requester wants at level 1 out of a
    learning vector with norm 10, so the combined score is exactly 0.05.
    """
    return make_user("dave", teach={"Art": 3}, learn={"Chemistry": 2})


@pytest.fixture
def wide_learner(make_user) -> UserProfile:
    return make_user(
        "erin",
        teach={"Music": 4},
        learn={"Art": 1, "Biology": 5, "Chemistry": 5, "Geology": 5, "History": 4, "Latin": 2, "Greek": 2},
    )


@pytest.fixture
def state(requester, mirror_candidate, unrelated_candidate) -> AppState:
    st = AppState()
    for u in (requester, mirror_candidate, unrelated_candidate):
        st.users[u.user_id] = u
    return st


@pytest.fixture
def state_file(tmp_path) -> str:
    return str(tmp_path / "peermatch_state.json")
