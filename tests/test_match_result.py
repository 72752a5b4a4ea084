# Area: Result Tests
"""Tests for MatchResult and PlayerResult."""

from airline_seats import GamePhase, MatchResult, PlayerResult, TERMINAL_PLAYER_ID
from airline_seats._core.match_result import build_match_result
from airline_seats._state import MatchState


def _finished(bought, sold, prices):
    return MatchState(
        num_players=len(bought),
        round=len(sold[0]),
        phase=GamePhase.PRICE_SETTING,
        current_player=TERMINAL_PLAYER_ID,
        c1=-0.25,
        bought_seats=list(bought),
        sold=[list(s) for s in sold],
        prices=[list(p) for p in prices],
    )


class TestPlayerResult:
    """Tests for per-player accounts."""

    def test_accounts_add_up(self):
        match = _finished([10, 0], [[4, 8, 3], [3, 2, 0]], [[50, 60, 70], [50, 50, 50]])
        result = build_match_result(match)
        first = result.players[0]
        assert first == PlayerResult(
            player=0,
            bought_seats=10,
            seats_sold=15,
            revenue=890.0,
            purchase_cost=500.0,
            late_units=5,
            late_penalty=400.0,
            pnl=-10.0,
        )
        assert first.pnl == first.revenue - first.purchase_cost - first.late_penalty


class TestMatchResult:
    """Tests for winner selection."""

    def test_unique_winner(self):
        match = _finished([10, 0], [[4, 8, 3], [3, 2, 0]], [[50, 60, 70], [50, 50, 50]])
        result = build_match_result(match)
        assert result.winner == 0
        assert result.is_draw is False
        assert result.returns == [-10.0, -150.0]
        assert result.rounds == 3

    def test_tie_is_a_draw(self):
        match = _finished([5, 5], [[5], [5]], [[60], [60]])
        result = build_match_result(match)
        assert result.winner is None
        assert result.is_draw is True

    def test_three_players(self):
        match = _finished([5, 10, 15], [[1], [2], [3]], [[50], [50], [50]])
        result = build_match_result(match)
        assert result.returns == [-200.0, -400.0, -600.0]
        assert result.winner == 0

    def test_state_result(self, game, play):
        state = game.new_initial_state()
        assert state.result() is None
        play(state)
        result = state.result()
        assert isinstance(result, MatchResult)
        assert result.rounds == 10
        assert result.returns == state.returns()
