"""Tests for result commits, unlocks and the derived series status."""

import pytest

from app.schemas.tournament import (
    MatchResultType,
    MatchStatus,
    SeriesStatus,
    TournamentStatus,
)
from app.services.errors import MatchNotFoundError, ResultError
from app.services.results import commit_result, start_match, unlock_match
from app.services.tournaments import start_season


@pytest.fixture
def three_match_series(build_tournament):
    """Two teams, one series of exactly three matches."""
    tournament = build_tournament(["A", "B"], series_length="3")
    return start_season(tournament, seed=1)


def _series(tournament):
    return tournament.series[0]


def _match_ids(tournament):
    return list(_series(tournament).match_ids)


class TestCommitResult:
    def test_commit_with_winner_derives_result_type(self, three_match_series):
        first = _match_ids(three_match_series)[0]

        updated = commit_result(three_match_series, first, winner_id="B")

        match = next(m for m in updated.matches if m.id == first)
        assert match.status == MatchStatus.COMPLETED
        assert match.result_type == MatchResultType.T2_WIN
        assert match.winner_id == "B"

    def test_commit_with_result_type_sets_winner(self, three_match_series):
        first = _match_ids(three_match_series)[0]

        updated = commit_result(three_match_series, first, result_type=MatchResultType.T1_WIN, notes="Won by 5 wickets")

        match = next(m for m in updated.matches if m.id == first)
        assert match.winner_id == "A"
        assert match.notes == "Won by 5 wickets"

    @pytest.mark.parametrize("result", [
        MatchResultType.DRAW, MatchResultType.TIE, MatchResultType.NO_RESULT, MatchResultType.ABANDONED,
    ])
    def test_non_decided_results_have_no_winner(self, three_match_series, result):
        first = _match_ids(three_match_series)[0]

        updated = commit_result(three_match_series, first, result_type=result)

        match = next(m for m in updated.matches if m.id == first)
        assert match.result_type == result
        assert match.winner_id is None

    def test_commit_without_result_is_rejected(self, three_match_series):
        first = _match_ids(three_match_series)[0]
        with pytest.raises(ResultError):
            commit_result(three_match_series, first)

    def test_winner_not_in_match(self, three_match_series):
        first = _match_ids(three_match_series)[0]
        with pytest.raises(ResultError):
            commit_result(three_match_series, first, winner_id="C")

    def test_winner_contradicting_result(self, three_match_series):
        first = _match_ids(three_match_series)[0]
        with pytest.raises(ResultError):
            commit_result(three_match_series, first, result_type=MatchResultType.T1_WIN, winner_id="B")
        with pytest.raises(ResultError):
            commit_result(three_match_series, first, result_type=MatchResultType.DRAW, winner_id="A")

    def test_unknown_match(self, three_match_series):
        with pytest.raises(MatchNotFoundError):
            commit_result(three_match_series, "nope", winner_id="A")

    def test_input_is_not_mutated(self, three_match_series):
        first = _match_ids(three_match_series)[0]
        before = three_match_series.model_dump()

        commit_result(three_match_series, first, winner_id="A")

        assert three_match_series.model_dump() == before

    def test_rejected_commit_leaves_state(self, three_match_series):
        before = three_match_series.model_dump()
        with pytest.raises(ResultError):
            commit_result(three_match_series, _match_ids(three_match_series)[0])
        assert three_match_series.model_dump() == before

    def test_edit_completed_result_is_logged(self, three_match_series):
        first = _match_ids(three_match_series)[0]

        t = commit_result(three_match_series, first, winner_id="A", edited_by="umpire")
        t = commit_result(t, first, result_type=MatchResultType.DRAW, reason="scorer error")

        assert [(log.old_result, log.new_result) for log in t.logs] == [
            ("NOT_STARTED", "T1_WIN"),
            ("T1_WIN", "DRAW"),
        ]
        assert t.logs[0].edited_by == "umpire"
        assert t.logs[1].edited_by == "ADMIN"
        assert t.logs[1].reason == "scorer error"


class TestSeriesStatusTransitions:
    def test_full_lifecycle(self, three_match_series):
        t = three_match_series
        ids = _match_ids(t)
        assert _series(t).status == SeriesStatus.NOT_STARTED

        t = commit_result(t, ids[0], winner_id="A")
        assert _series(t).status == SeriesStatus.IN_PROGRESS

        t = commit_result(t, ids[1], winner_id="B")
        assert _series(t).status == SeriesStatus.IN_PROGRESS

        t = commit_result(t, ids[2], result_type=MatchResultType.DRAW)
        assert _series(t).status == SeriesStatus.COMPLETED
        assert t.status == TournamentStatus.COMPLETED

        t = unlock_match(t, ids[1])
        assert _series(t).status == SeriesStatus.IN_PROGRESS
        assert t.status == TournamentStatus.ONGOING

    def test_unlock_clears_result(self, three_match_series):
        first = _match_ids(three_match_series)[0]
        t = commit_result(three_match_series, first, winner_id="A", notes="rain delay")

        t = unlock_match(t, first, edited_by="admin", reason="wrong match")

        match = next(m for m in t.matches if m.id == first)
        assert match.status == MatchStatus.NOT_STARTED
        assert match.result_type is None
        assert match.winner_id is None
        assert match.notes is None
        assert t.logs[-1].old_result == "T1_WIN"
        assert t.logs[-1].new_result == "NOT_STARTED"

    def test_unlock_requires_completed_match(self, three_match_series):
        with pytest.raises(ResultError):
            unlock_match(three_match_series, _match_ids(three_match_series)[0])


class TestStartMatch:
    def test_start_marks_in_progress(self, three_match_series):
        first = _match_ids(three_match_series)[0]

        t = start_match(three_match_series, first)

        match = next(m for m in t.matches if m.id == first)
        assert match.status == MatchStatus.IN_PROGRESS
        assert _series(t).status == SeriesStatus.NOT_STARTED
        assert t.logs == []

    def test_start_twice_rejected(self, three_match_series):
        first = _match_ids(three_match_series)[0]
        t = start_match(three_match_series, first)
        with pytest.raises(ResultError):
            start_match(t, first)

    def test_result_after_start(self, three_match_series):
        first = _match_ids(three_match_series)[0]
        t = start_match(three_match_series, first)
        t = commit_result(t, first, winner_id="A")
        assert next(m for m in t.matches if m.id == first).status == MatchStatus.COMPLETED


def test_commit_with_hyphenated_team_ids(build_tournament):
    tournament = start_season(
        build_tournament(["a-b", "c", "a", "b-c"], series_length="1"), seed=1,
    )
    target = next(m for m in tournament.matches if {m.team1_id, m.team2_id} == {"a-b", "c"})
    other = next(m for m in tournament.matches if {m.team1_id, m.team2_id} == {"a", "b-c"})

    updated = commit_result(tournament, target.id, winner_id="c")

    by_id = {m.id: m for m in updated.matches}
    assert len(by_id) == len(updated.matches)
    assert by_id[target.id].winner_id == "c"
    assert by_id[other.id] == other
