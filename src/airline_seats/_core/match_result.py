# Area: Core
"""
airline_seats._core.match_result — Final standings
==================================================

Defines the MatchResult and PlayerResult dataclasses built once a
match is terminal, and the builder that fills them from the state.
"""

from dataclasses import dataclass
from typing import List, Optional

from .constants import MAX_ROUNDS
from .scoring import breakdown
from .._state import MatchState


@dataclass
class PlayerResult:
    """
    One player's final accounts.

    Attributes:
        player: Player index
        bought_seats: Seats bought up front
        seats_sold: Total seats sold over all rounds
        revenue: Sum of price * sold over all rounds
        purchase_cost: bought_seats * initial purchase price
        late_units: Seats sold beyond bought_seats
        late_penalty: late_units * late purchase price
        pnl: revenue - purchase_cost - late_penalty
    """

    player: int
    bought_seats: int
    seats_sold: int
    revenue: float
    purchase_cost: float
    late_units: int
    late_penalty: float
    pnl: float


@dataclass
class MatchResult:
    """
    Complete result of a finished match.

    Attributes:
        players: Per-player results in index order
        winner: Index of the player with the highest pnl, or None if tied
        is_draw: True if two or more players share the highest pnl
        rounds: Rounds played
    """

    players: List[PlayerResult]
    winner: Optional[int]
    is_draw: bool
    rounds: int = MAX_ROUNDS

    @property
    def returns(self) -> List[float]:
        return [p.pnl for p in self.players]


def build_match_result(match: MatchState) -> MatchResult:
    """Build MatchResult from a terminal match."""
    players = []
    for p in range(match.num_players):
        pnl = breakdown(match.bought_seats[p], match.sold[p], match.prices[p], match.round)
        players.append(PlayerResult(
            player=p,
            bought_seats=match.bought_seats[p],
            seats_sold=match.total_sold(p),
            revenue=pnl.revenue,
            purchase_cost=pnl.purchase_cost,
            late_units=pnl.late_units,
            late_penalty=pnl.late_penalty,
            pnl=pnl.pnl,
        ))

    best = max(p.pnl for p in players)
    leaders = [p.player for p in players if p.pnl == best]
    if len(leaders) == 1:
        winner, is_draw = leaders[0], False
    else:
        winner, is_draw = None, True

    return MatchResult(players=players, winner=winner, is_draw=is_draw, rounds=match.round)
