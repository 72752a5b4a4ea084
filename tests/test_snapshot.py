# Area: Core Tests
"""Tests for airline_seats._core.snapshot — match snapshot builder."""

import json

from airline_seats import GamePhase
from airline_seats._core.snapshot import build_match_snapshot, seats_remaining
from airline_seats._state import MatchState


def test_snapshot_of_new_match():
    """Snapshot of a fresh match has empty histories for every player."""
    result = build_match_snapshot(MatchState(num_players=3))

    assert result["round"] == 0
    assert result["phase"] == "InitialConditions"
    assert result["phase_code"] == "IC"
    assert result["current_player"] == -1
    assert result["terminal"] is False
    assert len(result["players"]) == 3
    assert result["players"][2]["sold"] == []
    assert result["players"][2]["out_of_seats"] is True


def test_snapshot_with_history():
    """Snapshot reports inventory per player."""
    match = MatchState(
        num_players=2, round=2, phase=GamePhase.PRICE_SETTING, current_player=1,
        c1=-0.26, bought_seats=[10, 5], sold=[[4, 3], [3, 4]], prices=[[50, 55, 60], [50, 50]],
    )

    result = build_match_snapshot(match)

    assert result["players"][0]["seats_remaining"] == 3
    assert result["players"][0]["out_of_seats"] is False
    assert result["players"][0]["prices"] == [50, 55, 60]
    assert result["players"][1]["seats_remaining"] == -2
    assert result["players"][1]["out_of_seats"] is True


def test_snapshot_is_json_serializable(game, play):
    """Snapshots of a played match survive json.dumps."""
    state = play(game.new_initial_state(), stop=lambda s: s.round == 4)

    payload = json.loads(json.dumps(state.snapshot()))

    assert payload["round"] == 4
    assert payload["c1"] == state.match.c1


def test_snapshot_copies_histories():
    """Mutating a snapshot does not touch the match."""
    match = MatchState(num_players=2, round=1, bought_seats=[5, 5], sold=[[1], [2]],
                       prices=[[50], [50]], phase=GamePhase.PRICE_SETTING, current_player=0)

    build_match_snapshot(match)["players"][0]["sold"].append(99)

    assert match.sold[0] == [1]
    assert seats_remaining(match, 1) == 3
