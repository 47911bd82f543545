"""
User interface for the Peer-Tutoring Matchmaking System.
"""

from .helpers import input_int_in_range, input_float, input_yes_no, input_subjects, format_subjects
from .admin import (
    register_new_user,
    delete_user_by_id,
    delete_all_users_and_reset,
    sample_gaussian_clipped,
    generate_random_users,
    bulk_generate_random_users,
    show_all_users,
    show_all_relations,
    show_matches_for_user,
)
from .user_mode import (
    browse_matches,
    answer_pending_requests,
    show_connections,
    show_notifications,
    user_mode,
)
from .visualization import build_match_graph, show_match_graph

__all__ = [
    "input_int_in_range",
    "input_float",
    "input_yes_no",
    "input_subjects",
    "format_subjects",
    "register_new_user",
    "delete_user_by_id",
    "delete_all_users_and_reset",
    "sample_gaussian_clipped",
    "generate_random_users",
    "bulk_generate_random_users",
    "show_all_users",
    "show_all_relations",
    "show_matches_for_user",
    "browse_matches",
    "answer_pending_requests",
    "show_connections",
    "show_notifications",
    "user_mode",
    "build_match_graph",
    "show_match_graph",
]
