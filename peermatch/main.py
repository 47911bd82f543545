"""
Main entry point for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

import sys

from .log import setup_logging
from .persistence import load_state, save_state, reconcile_state
from .ui import (
    input_int_in_range,
    register_new_user,
    delete_user_by_id,
    delete_all_users_and_reset,
    show_all_users,
    show_all_relations,
    bulk_generate_random_users,
    show_match_graph,
    show_matches_for_user,
    user_mode,
)
from .models.state import AppState


def admin_mode(state: AppState) -> None:
    """Admin mode menu."""
    while True:
        reconcile_state(state)

        print("\n=== Admin Mode ===")
        print(f"(Users: {len(state.users)} | Relations: {len(state.relations)})")
        print("1) Register new user")
        print("2) Delete a user by ID")
        print("3) Delete ALL users and reset")
        print("4) Show all users")
        print("5) Show match relations")
        print("6) Bulk-generate random users (Gaussian)")
        print("7) Show ranked matches for a specific user")
        print("8) Show match graph")
        print("9) Return to main menu")

        choice = input_int_in_range("Choose (1-9): ", 1, 9)

        if choice == 1:
            register_new_user(state)
        elif choice == 2:
            delete_user_by_id(state)
        elif choice == 3:
            delete_all_users_and_reset(state)
        elif choice == 4:
            show_all_users(state)
        elif choice == 5:
            show_all_relations(state)
        elif choice == 6:
            bulk_generate_random_users(state)
        elif choice == 7:
            show_matches_for_user(state)
        elif choice == 8:
            show_match_graph(state)
        else:
            print("Returning to main menu.")
            save_state(state)
            return


def main() -> None:
    """Main entry point."""
    setup_logging()
    state = load_state()

    while True:
        reconcile_state(state)

        print("\n=== Peer-Tutoring Matchmaking System ===")
        print("1) Admin mode")
        print("2) User mode")
        print("3) Exit")
        choice = input_int_in_range("Choose (1-3): ", 1, 3)

        if choice == 1:
            admin_mode(state)
        elif choice == 2:
            user_mode(state)
        else:
            print("Goodbye!")
            save_state(state)
            break


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nInterrupted. Exiting...")
        sys.exit(0)
