"""
State persistence for the Peer-Tutoring Matchmaking System.
"""

from .storage import load_state, save_state, reconcile_state

__all__ = ["load_state", "save_state", "reconcile_state"]
