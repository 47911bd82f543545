"""
Tests for vocabulary construction, vectorization and cosine similarity.
"""

import numpy as np
import pytest

from peermatch.errors import InternalInvariantViolation
from peermatch.matching.vectors import build_vocabulary, vectorize, cosine_similarity
from peermatch.models import SubjectEntry


def _subjects(**levels):
    return {k: SubjectEntry(k, v) for k, v in levels.items()}


class TestBuildVocabulary:
    """Per-call subject vocabulary."""

    def test_first_seen_order(self):
        vocab = build_vocabulary([_subjects(math=1, physics=2), _subjects(physics=3, art=1)])
        assert vocab == {"math": 0, "physics": 1, "art": 2}

    def test_empty(self):
        assert build_vocabulary([]) == {}
        assert build_vocabulary([{}, {}]) == {}


class TestVectorize:
    """Proficiency-weighted presence vectors."""

    def test_listed_subjects_carry_proficiency(self):
        vocab = {"math": 0, "physics": 1, "art": 2}
        vec = vectorize(_subjects(math=5, art=2), vocab)
        assert vec.tolist() == [5.0, 0.0, 2.0]

    def test_absent_subject_is_zero_not_minimum(self):
        vocab = {"math": 0, "physics": 1}
        vec = vectorize(_subjects(physics=1), vocab)
        assert vec[0] == 0.0
        assert vec[1] == 1.0

    def test_length_matches_vocabulary(self):
        vocab = {"a": 0, "b": 1, "c": 2, "d": 3}
        assert vectorize({}, vocab).shape == (4,)


class TestCosineSimilarity:
    """Cosine similarity edge cases."""

    def test_identical_vectors(self):
        assert cosine_similarity(np.array([3.0, 4.0]), np.array([3.0, 4.0])) == pytest.approx(1.0)

    def test_parallel_vectors_ignore_magnitude(self):
        assert cosine_similarity(np.array([1.0, 2.0]), np.array([2.0, 4.0])) == pytest.approx(1.0)

    def test_orthogonal_vectors(self):
        assert cosine_similarity(np.array([1.0, 0.0]), np.array([0.0, 5.0])) == 0.0

    def test_zero_norm_is_zero(self):
        assert cosine_similarity(np.zeros(3), np.array([1.0, 2.0, 3.0])) == 0.0
        assert cosine_similarity(np.zeros(3), np.zeros(3)) == 0.0

    def test_symmetric(self):
        a = np.array([5.0, 0.0, 2.0, 1.0])
        b = np.array([4.0, 3.0, 0.0, 1.0])
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))

    def test_known_value(self):
        # (3*4 + 5*5) / (sqrt(34) * sqrt(41))
        expected = 37.0 / (np.sqrt(34.0) * np.sqrt(41.0))
        assert cosine_similarity(np.array([3.0, 5.0]), np.array([4.0, 5.0])) == pytest.approx(expected)

    def test_length_mismatch_raises(self):
        with pytest.raises(InternalInvariantViolation):
            cosine_similarity(np.array([1.0, 2.0]), np.array([1.0, 2.0, 3.0]))
