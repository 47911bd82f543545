"""
Tests for candidate pools and match status transitions.
"""

import pytest

from peermatch.config import STATUS_PENDING, STATUS_ACCEPTED, STATUS_REJECTED
from peermatch.errors import InvalidInput, UserNotFound
from peermatch.matching import (
    build_candidate_pool,
    find_matches_for_user,
    like_user,
    reject_user,
    reset_relation,
    is_mutual_match,
    get_connections,
    get_pending_requests,
    pop_notifications,
    remove_user,
)


class TestCandidatePool:
    """Who the engine gets to score."""

    def test_excludes_self_and_incomplete(self, state, make_user):
        state.users["zed"] = make_user("zed", teach={"English": 5}, learn={"Mathematics": 5}, is_profile_complete=False)
        ids = {u.user_id for u in build_candidate_pool(state, "alice")}
        assert ids == {"bob", "carol"}

    def test_excludes_rejected(self, state):
        reject_user(state, "alice", "bob")
        ids = {u.user_id for u in build_candidate_pool(state, "alice")}
        assert "bob" not in ids

    def test_find_matches(self, state):
        result = find_matches_for_user(state, "alice")
        assert [m.user_id for m in result] == ["bob"]
        assert result[0].status is None

    def test_find_matches_annotates_status(self, state):
        like_user(state, "alice", "bob")
        assert find_matches_for_user(state, "alice")[0].status == STATUS_PENDING

    def test_rejected_stays_out_until_reset(self, state):
        reject_user(state, "alice", "bob")
        assert len(find_matches_for_user(state, "alice")) == 0
        assert len(find_matches_for_user(state, "alice")) == 0
        assert reset_relation(state, "alice", "bob") is True
        assert [m.user_id for m in find_matches_for_user(state, "alice")] == ["bob"]

    def test_unknown_user(self, state):
        with pytest.raises(UserNotFound):
            find_matches_for_user(state, "nobody")

    def test_does_not_mutate_stored_profiles(self, state):
        before = {uid: u.to_dict() for uid, u in state.users.items()}
        find_matches_for_user(state, "alice")
        find_matches_for_user(state, "bob")
        assert {uid: u.to_dict() for uid, u in state.users.items()} == before


class TestLike:
    """Likes and mutual matches."""

    def test_first_like_is_pending(self, state):
        outcome = like_user(state, "alice", "bob")
        assert outcome.matched is False
        rel = state.get_relation("alice", "bob")
        assert rel.status == STATUS_PENDING
        assert rel.match_score == outcome.match_score
        assert rel.match_score > 0.9
        assert state.get_relation("bob", "alice") is None
        assert state.notifications == []

    def test_like_back_makes_mutual_match(self, state):
        like_user(state, "alice", "bob")
        outcome = like_user(state, "bob", "alice")
        assert outcome.matched is True
        assert outcome.message == "It's a match!"
        assert state.get_relation("alice", "bob").status == STATUS_ACCEPTED
        assert state.get_relation("bob", "alice").status == STATUS_ACCEPTED
        assert is_mutual_match(state, "alice", "bob")

    def test_mutual_match_notifies_target_once(self, state):
        like_user(state, "alice", "bob")
        like_user(state, "bob", "alice")
        assert [(n.recipient_id, n.from_user_id) for n in state.notifications] == [("alice", "bob")]

    def test_score_is_same_from_both_sides(self, state):
        a = like_user(state, "alice", "bob").match_score
        b = like_user(state, "bob", "alice").match_score
        # Both directions combine the same two cosines
        assert a == pytest.approx(b)

    def test_like_unrelated_user_scores_zero(self, state):
        outcome = like_user(state, "alice", "carol")
        assert outcome.match_score == 0.0
        assert state.get_relation("alice", "carol").status == STATUS_PENDING

    def test_like_again_when_connected(self, state):
        like_user(state, "alice", "bob")
        like_user(state, "bob", "alice")
        outcome = like_user(state, "alice", "bob")
        assert outcome.matched is True
        assert len(state.notifications) == 1
        assert is_mutual_match(state, "alice", "bob")

    def test_like_updates_activity(self, state):
        state.users["alice"].last_active = None
        like_user(state, "alice", "bob")
        assert state.users["alice"].last_active

    def test_like_self_rejected(self, state):
        with pytest.raises(InvalidInput):
            like_user(state, "alice", "alice")

    def test_like_unknown_user(self, state):
        with pytest.raises(UserNotFound):
            like_user(state, "alice", "nobody")
        with pytest.raises(UserNotFound):
            like_user(state, "nobody", "alice")


class TestReject:
    """Rejections and resets."""

    def test_reject_new_relation(self, state):
        rel = reject_user(state, "alice", "carol")
        assert rel.status == STATUS_REJECTED
        assert rel.match_score == 0.0

    def test_reject_keeps_last_score(self, state):
        score = like_user(state, "alice", "bob").match_score
        assert reject_user(state, "alice", "bob").match_score == score

    def test_reject_breaks_mutual_match(self, state):
        like_user(state, "alice", "bob")
        like_user(state, "bob", "alice")
        reject_user(state, "alice", "bob")
        assert state.get_relation("alice", "bob").status == STATUS_REJECTED
        assert state.get_relation("bob", "alice").status == STATUS_PENDING
        assert not is_mutual_match(state, "alice", "bob")

    def test_like_after_reject_allowed(self, state):
        reject_user(state, "bob", "alice")
        like_user(state, "alice", "bob")
        outcome = like_user(state, "bob", "alice")
        assert outcome.matched is True

    def test_reset_missing_relation(self, state):
        assert reset_relation(state, "alice", "bob") is False

    def test_reset_accepted_demotes_other_side(self, state):
        like_user(state, "alice", "bob")
        like_user(state, "bob", "alice")
        assert reset_relation(state, "alice", "bob") is True
        assert state.get_relation("alice", "bob") is None
        assert state.get_relation("bob", "alice").status == STATUS_PENDING


class TestViews:
    """Connections, pending requests and notifications."""

    def test_connections(self, state):
        like_user(state, "alice", "bob")
        like_user(state, "bob", "alice")
        connections = get_connections(state, "alice")
        assert [c.partner.user_id for c in connections] == ["bob"]
        c = connections[0]
        assert {s.subject for s in c.common_subjects.they_teach} == {"Computer Science", "English"}
        assert {s.subject for s in c.common_subjects.you_teach} == {"Mathematics", "Physics"}
        assert c.matched_at

    def test_pending_like_is_not_a_connection(self, state):
        like_user(state, "alice", "bob")
        assert get_connections(state, "alice") == []
        assert get_connections(state, "bob") == []

    def test_connections_most_recent_first(self, state, make_user):
        state.users["dan"] = make_user("dan", teach={"English": 2}, learn={"Physics": 1})
        for other in ("bob", "dan"):
            like_user(state, "alice", other)
            like_user(state, other, "alice")
        state.get_relation("alice", "bob").updated_at = "2030-01-01T00:00:00+00:00"
        state.get_relation("alice", "dan").updated_at = "2020-01-01T00:00:00+00:00"
        assert [c.partner.user_id for c in get_connections(state, "alice")] == ["bob", "dan"]

    def test_pending_requests(self, state):
        like_user(state, "alice", "bob")
        like_user(state, "carol", "bob")
        requests = get_pending_requests(state, "bob")
        assert [r.requester.user_id for r in requests] == ["alice", "carol"]
        assert requests[0].match_score > requests[1].match_score

    def test_rejected_requests_hidden(self, state):
        like_user(state, "alice", "bob")
        reject_user(state, "bob", "alice")
        assert get_pending_requests(state, "bob") == []

    def test_pop_notifications(self, state):
        like_user(state, "alice", "bob")
        like_user(state, "bob", "alice")
        assert pop_notifications(state, "bob") == []
        notes = pop_notifications(state, "alice")
        assert len(notes) == 1
        assert notes[0].from_user_name == "Bob"
        assert pop_notifications(state, "alice") == []

    def test_remove_user(self, state):
        like_user(state, "alice", "bob")
        like_user(state, "bob", "alice")
        assert remove_user(state, "bob").user_id == "bob"
        assert "bob" not in state.users
        assert state.relations == {}
        assert state.notifications == []
        assert remove_user(state, "bob") is None
