"""
State persistence for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

import json
import logging
import os
from typing import List, Optional

from ..config import STATE_FILE, STATUS_PENDING, STATUS_ACCEPTED, RELATION_STATUSES
from ..models.state import AppState

logger = logging.getLogger(__name__)


def _backup_unreadable(path: str) -> None:
    # Keep the bad file aside so the next save does not overwrite it
    backup = f"{path}.corrupt"
    try:
        os.replace(path, backup)
    except OSError:
        logger.exception("Could not move unreadable state file %s aside", path)
        return
    logger.warning("Moved unreadable state file to %s; starting with empty state", backup)


def load_state(path: Optional[str] = None) -> AppState:
    """Load application state from file."""
    path = path or STATE_FILE
    if not os.path.exists(path):
        return AppState()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        st = AppState.from_dict(data)
    except (OSError, ValueError, KeyError, TypeError, OverflowError) as e:
        logger.error("Failed to load state from %s: %s", path, e)
        _backup_unreadable(path)
        st = AppState()

    reconcile_state(st)
    return st


def save_state(state: AppState, path: Optional[str] = None) -> None:
    """
    Save application state to file.
    Writes a temp file and swaps it in, so readers see either the old or the new state.
    """
    path = path or STATE_FILE
    data = state.to_dict()
    tmp_path = f"{path}.tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    except OSError:
        logger.exception("Failed to save state to %s", path)
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def reconcile_state(state: AppState) -> None:
    """
    Make state internally consistent:
    - Remove relations referencing missing users or pointing at oneself.
    - Remove relations whose status is not pending/accepted/rejected.
    - An "accepted" relation needs an "accepted" reverse; otherwise demote it to "pending".
    - Remove notifications for missing recipients.
    """
    to_delete: List[str] = []
    for k, r in state.relations.items():
        if r.user_id not in state.users or r.target_id not in state.users or r.user_id == r.target_id:
            to_delete.append(k)
    for k in to_delete:
        state.relations.pop(k, None)
    if to_delete:
        logger.warning("Dropped %d relations referencing missing users", len(to_delete))

    unknown = [k for k, r in state.relations.items() if r.status not in RELATION_STATUSES]
    for k in unknown:
        r = state.relations.pop(k)
        logger.warning("Dropped relation %s -> %s with unknown status %r", r.user_id, r.target_id, r.status)

    for r in state.relations.values():
        if r.status != STATUS_ACCEPTED:
            continue
        reverse = state.get_relation(r.target_id, r.user_id)
        if reverse is None or reverse.status != STATUS_ACCEPTED:
            logger.warning("One-sided acceptance %s -> %s demoted to pending", r.user_id, r.target_id)
            r.status = STATUS_PENDING

    state.notifications = [n for n in state.notifications if n.recipient_id in state.users]
