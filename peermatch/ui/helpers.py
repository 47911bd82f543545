"""
Input helpers for the Peer-Tutoring Matchmaking System.
"""

from __future__ import annotations

from typing import List

from ..config import PROFICIENCY_MIN, PROFICIENCY_MAX
from ..models.subject import SubjectEntry, normalize_subject


def input_int_in_range(prompt: str, min_val: int, max_val: int) -> int:
    """Get an integer input within the specified range."""
    while True:
        try:
            s = input(prompt).strip()
            val = int(s)
            if min_val <= val <= max_val:
                return val
            print(f"Please enter an integer between {min_val} and {max_val}.")
        except ValueError:
            print("Invalid input. Please enter an integer.")


def input_float(prompt: str) -> float:
    """Get a float input."""
    while True:
        try:
            return float(input(prompt).strip())
        except ValueError:
            print("Invalid input. Please enter a number.")


def input_yes_no(prompt: str, default: bool = True) -> bool:
    s = input(prompt).strip().lower()
    if not s:
        return default
    return s in ("y", "yes")


def input_subjects(label: str) -> List[SubjectEntry]:
    """
    Read subjects one per line until an empty line.
    Each subject is followed by a proficiency prompt.
    """
    print(f"Enter subjects you want to {label}, one per line (empty line to finish):")
    entries: List[SubjectEntry] = []
    seen = set()
    while True:
        name = input("  Subject: ").strip()
        if not name:
            return entries
        if normalize_subject(name) in seen:
            print("  Already listed.")
            continue
        prof = input_int_in_range(
            f"  Proficiency for {name} ({PROFICIENCY_MIN}-{PROFICIENCY_MAX}): ",
            PROFICIENCY_MIN,
            PROFICIENCY_MAX,
        )
        seen.add(normalize_subject(name))
        entries.append(SubjectEntry(subject=name, proficiency=prof))


def format_subjects(entries: List[SubjectEntry]) -> str:
    if not entries:
        return "(none)"
    return ", ".join(f"{s.subject} ({s.proficiency})" for s in entries)
