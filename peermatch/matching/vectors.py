"""
Subject vocabulary and vectorization for the Peer-Tutoring Matchmaking System.

Subject names are free text, so there is no fixed feature layout: every scoring
call derives its own vocabulary (normalized subject -> vector index) and builds
all vectors against it.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping

import numpy as np

from ..errors import InternalInvariantViolation
from ..models.subject import SubjectEntry

Vocabulary = Dict[str, int]


def build_vocabulary(subject_maps: Iterable[Mapping[str, SubjectEntry]]) -> Vocabulary:
    """Assign an index to every distinct normalized subject, in first-seen order."""
    vocab: Vocabulary = {}
    for subjects in subject_maps:
        for key in subjects:
            if key not in vocab:
                vocab[key] = len(vocab)
    return vocab


def vectorize(subjects: Mapping[str, SubjectEntry], vocab: Vocabulary) -> np.ndarray:
    """
    Proficiency-weighted presence vector over `vocab`.
    Listed subjects carry their (already clamped) proficiency; every other slot is 0.
    """
    vec = np.zeros(len(vocab), dtype=float)
    for key, entry in subjects.items():
        idx = vocab.get(key)
        if idx is not None:
            vec[idx] = float(entry.proficiency)
    return vec


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """
    Cosine of the angle between two equal-length vectors.
    0.0 when either vector has zero norm. Raises InternalInvariantViolation on a
    length mismatch.
    """
    a = np.asarray(a, dtype=float).reshape(-1)
    b = np.asarray(b, dtype=float).reshape(-1)
    if a.shape[0] != b.shape[0]:
        raise InternalInvariantViolation(f"vector length mismatch: {a.shape[0]} != {b.shape[0]}")

    norm_a = float(np.linalg.norm(a))
    norm_b = float(np.linalg.norm(b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    sim = float(a @ b) / (norm_a * norm_b)
    # float error can push parallel vectors a hair past 1
    return float(min(max(sim, -1.0), 1.0))
