"""
Admin mode for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, TYPE_CHECKING

from ..config import (
    SAMPLE_SUBJECTS,
    MAX_SUBJECTS_PER_LIST,
    PROFICIENCY_MIN,
    PROFICIENCY_MAX,
    GAUSS_TEACH_MEAN,
    GAUSS_TEACH_STD,
    GAUSS_LEARN_MEAN,
    GAUSS_LEARN_STD,
)
from ..errors import PeerMatchError, describe_error
from ..models.relation import utc_now_iso
from ..models.subject import SubjectEntry
from ..models.user import UserProfile
from ..matching import find_matches_for_user, remove_user
from ..persistence import save_state
from .helpers import input_int_in_range, input_float, input_yes_no, input_subjects, format_subjects

if TYPE_CHECKING:
    from ..models.state import AppState

logger = logging.getLogger(__name__)


def register_new_user(state: "AppState") -> None:
    """Register a new user."""
    print("\n=== Register New User ===")
    user_id = input("Enter user ID: ").strip()
    if not user_id:
        print("User ID cannot be empty.")
        return
    if user_id in state.users:
        print("User with this ID already exists.")
        return

    name = input("Name: ").strip()
    email = input("Email: ").strip()
    bio = input("Short bio: ").strip()

    print()
    teach = input_subjects("teach")
    print()
    learn = input_subjects("learn")

    user = UserProfile(
        user_id=user_id,
        name=name,
        email=email,
        bio=bio,
        subjects_to_teach=teach,
        subjects_to_learn=learn,
        # Only users with something to offer and something to learn are proposed
        is_profile_complete=bool(teach and learn),
        last_active=utc_now_iso(),
    )
    state.users[user_id] = user

    save_state(state)
    print(f"User {user_id} registered.")
    if not user.is_profile_complete:
        print("Note: the profile is incomplete (needs subjects to teach AND learn); it won't be proposed to others.")


def delete_user_by_id(state: "AppState") -> None:
    """Delete a user by ID."""
    print("\n=== Delete User ===")
    user_id = input("Enter user ID to delete: ").strip()
    if remove_user(state, user_id) is None:
        print("No such user.")
        return

    save_state(state)
    print(f"User {user_id} deleted.\n")


def delete_all_users_and_reset(state: "AppState") -> None:
    """Delete all users and reset the system."""
    print("\n!!! WARNING: This deletes ALL users, relations and notifications !!!")
    confirm = input("Type 'YES' to confirm: ").strip()
    if confirm != "YES":
        print("Aborted.")
        return

    state.users.clear()
    state.relations.clear()
    state.notifications.clear()

    save_state(state)
    print("System reset complete.\n")


def sample_gaussian_clipped(mean: float, std: float, rng: Optional[random.Random] = None) -> int:
    """Sample from a Gaussian distribution and clip to the proficiency scale."""
    rng = rng or random
    val = rng.gauss(mean, std)
    val = max(float(PROFICIENCY_MIN), min(float(PROFICIENCY_MAX), val))
    return int(round(val))


def generate_random_users(
    state: "AppState",
    count: int,
    teach_mean: float = GAUSS_TEACH_MEAN,
    teach_std: float = GAUSS_TEACH_STD,
    learn_mean: float = GAUSS_LEARN_MEAN,
    learn_std: float = GAUSS_LEARN_STD,
    rng: Optional[random.Random] = None,
) -> List[UserProfile]:
    """
    Add `count` complete profiles with random subjects from SAMPLE_SUBJECTS.
    A user never teaches and learns the same subject.
    """
    rng = rng or random.Random()

    def unique_user_id(idx: int) -> str:
        base = f"rand_{idx}"
        uid = base
        c = 1
        while uid in state.users:
            c += 1
            uid = f"{base}_{c}"
        return uid

    created: List[UserProfile] = []
    per_list = max(1, min(MAX_SUBJECTS_PER_LIST, len(SAMPLE_SUBJECTS) // 2))
    for i in range(1, count + 1):
        picked = rng.sample(SAMPLE_SUBJECTS, 2 * per_list)
        n_teach = rng.randint(1, per_list)
        n_learn = rng.randint(1, per_list)
        teach = [SubjectEntry(s, sample_gaussian_clipped(teach_mean, teach_std, rng)) for s in picked[:n_teach]]
        learn = [SubjectEntry(s, sample_gaussian_clipped(learn_mean, learn_std, rng)) for s in picked[per_list:per_list + n_learn]]

        uid = unique_user_id(i)
        user = UserProfile(
            user_id=uid,
            name=f"Random User {i}",
            email=f"{uid}@example.com",
            subjects_to_teach=teach,
            subjects_to_learn=learn,
            is_profile_complete=True,
            last_active=utc_now_iso(),
        )
        state.users[uid] = user
        created.append(user)
    return created


def bulk_generate_random_users(state: "AppState") -> None:
    """Generate random users with Gaussian proficiencies."""
    print("\n=== Bulk Generate Random Users (Gaussian) ===")
    n = input_int_in_range("How many users? ", 0, 100000)
    if n == 0:
        print("Nothing to generate.")
        return

    if input_yes_no("Use default Gaussian parameters? (y/n) [y]: "):
        created = generate_random_users(state, n)
    else:
        created = generate_random_users(
            state,
            n,
            teach_mean=input_float(f"Teaching proficiency mean ({PROFICIENCY_MIN}-{PROFICIENCY_MAX}): "),
            teach_std=input_float("Teaching proficiency std: "),
            learn_mean=input_float(f"Learning target mean ({PROFICIENCY_MIN}-{PROFICIENCY_MAX}): "),
            learn_std=input_float("Learning target std: "),
        )

    save_state(state)
    print(f"Generated {len(created)} users.\n")


def show_all_users(state: "AppState") -> None:
    """Show all registered users."""
    print("\n=== All Users ===")
    if not state.users:
        print("No users registered.")
        return

    for u in state.users.values():
        print(f"\nUser ID: {u.user_id}")
        print(f"  Name             : {u.display_name}")
        print(f"  Email            : {u.email}")
        print(f"  Profile complete : {u.is_profile_complete}")
        print(f"  Last active      : {u.last_active}")
        print(f"  Teaches          : {format_subjects(u.subjects_to_teach)}")
        print(f"  Learns           : {format_subjects(u.subjects_to_learn)}")


def show_all_relations(state: "AppState") -> None:
    """Show all stored match relations."""
    print("\n=== Match Relations ===")
    if not state.relations:
        print("No relations.")
        return
    for k, r in sorted(state.relations.items()):
        print(f"{k}: status={r.status} | score={r.match_score:.3f} | updated={r.updated_at}")


def show_matches_for_user(state: "AppState") -> None:
    """Show the ranked match suggestions for a specific user."""
    print("\n=== Show Matches for a Specific User ===")
    user_id = input("Enter user ID: ").strip()
    try:
        result = find_matches_for_user(state, user_id)
    except PeerMatchError as e:
        print(str(e))
        return
    except Exception as e:
        logger.exception("Match lookup failed for %s", user_id)
        print(describe_error(e))
        return

    if not len(result):
        print("No matches above the threshold.")
    else:
        print("partner_id | score | teach | learn | status   | they teach / you teach")
        for m in result:
            they = ", ".join(s.subject for s in m.common_subjects.they_teach) or "-"
            you = ", ".join(s.subject for s in m.common_subjects.you_teach) or "-"
            print(
                f"{m.user_id:10s} | {m.match_score:5.3f} | {m.teach_match:5.3f} | {m.learn_match:5.3f} | "
                f"{(m.status or '-'):8s} | {they} / {you}"
            )
    if result.skipped:
        print(f"({result.skipped} stored profiles were skipped as malformed.)")
