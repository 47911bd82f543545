"""
User mode for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import PeerMatchError, describe_error
from ..matching import (
    find_matches_for_user,
    like_user,
    reject_user,
    get_connections,
    get_pending_requests,
    pop_notifications,
)
from ..models.match import MatchCandidate
from ..persistence import save_state, reconcile_state
from .helpers import input_int_in_range, format_subjects

if TYPE_CHECKING:
    from ..models.user import UserProfile
    from ..models.state import AppState

logger = logging.getLogger(__name__)


def _print_candidate(m: MatchCandidate) -> None:
    print(f"\n{m.name} ({m.user_id})  score={m.match_score:.3f}")
    if m.bio:
        print(f"  Bio: {m.bio}")
    for s in m.common_subjects.they_teach:
        print(f"  They teach {s.subject} (level {s.their_proficiency}); you want level {s.your_target}")
    for s in m.common_subjects.you_teach:
        print(f"  You teach {s.subject} (level {s.your_proficiency}); they want level {s.their_target}")
    if m.status:
        print(f"  (You already marked this person: {m.status})")


def browse_matches(state: "AppState", user: "UserProfile") -> None:
    """Walk through suggestions, liking or rejecting each."""
    try:
        result = find_matches_for_user(state, user.user_id)
    except PeerMatchError as e:
        print(str(e))
        return
    except Exception as e:
        logger.exception("Match lookup failed for %s", user.user_id)
        print(describe_error(e))
        return

    if not len(result):
        print("\nNo matches right now. Try adding more subjects.")
        return

    for m in result:
        _print_candidate(m)
        print("  1) Like   2) Reject   3) Skip   4) Stop browsing")
        choice = input_int_in_range("  Choose (1-4): ", 1, 4)
        if choice == 1:
            outcome = like_user(state, user.user_id, m.user_id)
            print(f"  {outcome.message}")
        elif choice == 2:
            reject_user(state, user.user_id, m.user_id)
            print("  Rejected. They won't be suggested again.")
        elif choice == 4:
            break
        save_state(state)
    save_state(state)


def answer_pending_requests(state: "AppState", user: "UserProfile") -> None:
    """Accept or reject people who liked the user."""
    requests = get_pending_requests(state, user.user_id)
    if not requests:
        print("\nNo pending requests.")
        return

    for req in requests:
        other = req.requester
        print(f"\n{other.display_name} ({other.user_id}) liked you. score={req.match_score:.3f}")
        print(f"  Teaches: {format_subjects(other.subjects_to_teach)}")
        print(f"  Learns : {format_subjects(other.subjects_to_learn)}")
        print("  1) Accept   2) Reject   3) Decide later")
        choice = input_int_in_range("  Choose (1-3): ", 1, 3)
        if choice == 1:
            print(f"  {like_user(state, user.user_id, other.user_id).message}")
        elif choice == 2:
            reject_user(state, user.user_id, other.user_id)
            print("  Rejected.")
        save_state(state)


def show_connections(state: "AppState", user: "UserProfile") -> None:
    """List mutual matches."""
    connections = get_connections(state, user.user_id)
    if not connections:
        print("\nNo connections yet.")
        return
    print("\n=== Your Connections ===")
    for c in connections:
        print(f"\n{c.partner.display_name} ({c.partner.user_id}) <{c.partner.email}>")
        print(f"  Matched at: {c.matched_at} | score={c.match_score:.3f}")
        they = ", ".join(s.subject for s in c.common_subjects.they_teach) or "-"
        you = ", ".join(s.subject for s in c.common_subjects.you_teach) or "-"
        print(f"  They teach you: {they}")
        print(f"  You teach them: {you}")


def show_notifications(state: "AppState", user: "UserProfile") -> None:
    notes = pop_notifications(state, user.user_id)
    if not notes:
        print("\nNo new notifications.")
        return
    for n in notes:
        print(f"\n[{n.created_at}] It's a match with {n.from_user_name} ({n.from_user_id})!")
    save_state(state)


def user_mode(state: "AppState") -> None:
    """Run the user mode interface."""
    print("\n=== User Mode ===")
    user_id = input("Enter your user ID: ").strip()
    user = state.users.get(user_id)
    if not user:
        print("No such user. Please contact the admin to register.")
        return

    while True:
        reconcile_state(state)
        n_notes = sum(1 for n in state.notifications if n.recipient_id == user_id)

        print(f"\n=== Welcome, {user.display_name} ===")
        print("1) Browse matches")
        print("2) Pending requests")
        print("3) My connections")
        print(f"4) Notifications ({n_notes} new)")
        print("5) Exit user mode")
        choice = input_int_in_range("Choose (1-5): ", 1, 5)

        if choice == 1:
            browse_matches(state, user)
        elif choice == 2:
            answer_pending_requests(state, user)
        elif choice == 3:
            show_connections(state, user)
        elif choice == 4:
            show_notifications(state, user)
        else:
            print("Exiting user mode.")
            save_state(state)
            return
