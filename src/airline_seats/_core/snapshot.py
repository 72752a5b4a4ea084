# Area: Core
"""
airline_seats._core.snapshot — Match snapshot builder
=====================================================

Builds JSON-compatible per-player snapshots of a match.
"""

from .._state import MatchState
from ..types import MatchSnapshot, PlayerSnapshot


def build_match_snapshot(match: MatchState) -> MatchSnapshot:
    """Build serializable whole-match snapshot."""
    return {
        "round": match.round,
        "phase": match.phase.value,
        "phase_code": match.phase.code,
        "current_player": match.current_player,
        "terminal": match.is_terminal(),
        "c1": match.c1,
        "players": [_player_snapshot(match, p) for p in range(match.num_players)],
    }


def seats_remaining(match: MatchState, player: int) -> int:
    """Seats bought minus seats sold so far; negative on backorder."""
    return match.bought_seats[player] - match.total_sold(player)


def _player_snapshot(match: MatchState, player: int) -> PlayerSnapshot:
    """Build snapshot for one player."""
    remaining = seats_remaining(match, player)
    return {
        "player": player,
        "bought_seats": match.bought_seats[player],
        "sold": list(match.sold[player]),
        "prices": list(match.prices[player]),
        "seats_remaining": remaining,
        "out_of_seats": remaining <= 0,
    }
