"""
airline_seats._state — Match state record
=========================================

The single mutable record of a match: round counter, phase, actor,
demand coefficient, and the per-player purchase, price, and sales
history. Only the transition logic in state.py mutates it.

Prices are appended as players set them, so within a round the
players that have already priced hold one pending entry more than
`round`. Sales are appended only by the demand simulation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
import logging

from ._core.constants import INITIAL_ROUND, MAX_ROUNDS
from ._core.phases import CHANCE_PLAYER_ID, GamePhase, can_advance

logger = logging.getLogger("airline_seats.match")


@dataclass
class MatchState:
    """
    Full state of one match.

    Two records compare equal when every field matches, which is what
    a lossless serialize/parse round trip must preserve.
    """
    num_players: int
    round: int = INITIAL_ROUND
    phase: GamePhase = GamePhase.INITIAL_CONDITIONS
    current_player: int = CHANCE_PLAYER_ID
    c1: float = 0.0
    bought_seats: List[int] = field(default_factory=list)
    sold: List[List[int]] = field(default_factory=list)
    prices: List[List[int]] = field(default_factory=list)

    def __post_init__(self):
        if not self.bought_seats:
            self.bought_seats = [0] * self.num_players
        if not self.sold:
            self.sold = [[] for _ in range(self.num_players)]
        if not self.prices:
            self.prices = [[] for _ in range(self.num_players)]

    # ── Derived views ────────────────────────────────────────

    def is_terminal(self) -> bool:
        return self.round >= MAX_ROUNDS

    def pending_price_count(self) -> int:
        """How many players have priced in the round in progress."""
        if self.phase == GamePhase.PRICE_SETTING and not self.is_terminal():
            return self.current_player
        if self.phase == GamePhase.DEMAND_SIMULATION:
            return self.num_players
        return 0

    def has_pending_price(self, player: int) -> bool:
        return len(self.prices[player]) > self.round

    def latest_prices(self) -> List[int]:
        return [history[-1] for history in self.prices]

    def total_sold(self, player: int) -> int:
        return sum(self.sold[player])

    # ── Mutation helpers ─────────────────────────────────────

    def advance_phase(self, new_phase: GamePhase) -> None:
        if new_phase == self.phase:
            return
        if not can_advance(self.phase, new_phase):
            raise RuntimeError(
                f"Illegal phase edge {self.phase.value} -> {new_phase.value}"
            )
        logger.debug(f"Phase: {self.phase.value} → {new_phase.value}")
        self.phase = new_phase

    def copy(self) -> "MatchState":
        return MatchState(
            num_players=self.num_players,
            round=self.round,
            phase=self.phase,
            current_player=self.current_player,
            c1=self.c1,
            bought_seats=list(self.bought_seats),
            sold=[list(history) for history in self.sold],
            prices=[list(history) for history in self.prices],
        )
