"""
airline_seats.state — Match state and phase state machine
=========================================================

AirlineSeatsState is what a driver holds while a match is played. It
answers who acts next and which actions are legal, applies one action
at a time, and exposes returns, player views, and serialization.

Phase flow per match:

    InitialConditions  chance samples the demand coefficient c1
    SeatBuying         players 0..N-1 each buy 0, 5, 10, 15 or 20 seats
    PriceSetting       players 0..N-1 each set a price of 50..70
    DemandSimulation   chance allocates demand, one round completes
    (PriceSetting / DemandSimulation repeat until round 10)

Every action is checked against the legal set of the current phase
before anything changes. An illegal action raises InvalidActionError
and leaves the state untouched.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

import numpy as np

from ._state import MatchState
from ._core import codec, scoring, views
from ._core.constants import C1_HIGH, C1_LOW, MAX_ROUNDS
from ._core.demand import simulate_demand
from ._core.match_result import MatchResult, build_match_result
from ._core.phases import CHANCE_PLAYER_ID, TERMINAL_PLAYER_ID, GamePhase
from ._core.serializer import serialize
from ._core.snapshot import build_match_snapshot
from ._core.snapshot import seats_remaining as _seats_remaining
from ._shared.logging_config import log_game_error
from .errors import AirlineSeatsError, NotChanceNodeError
from .rng import UniformSource
from .types import MatchSnapshot

if TYPE_CHECKING:
    from .game import AirlineSeatsGame

logger = logging.getLogger("airline_seats.state")


class AirlineSeatsState:
    """
    One match in progress.

    Created by AirlineSeatsGame.new_initial_state() or
    AirlineSeatsGame.deserialize_state(); not meant to be built directly.
    Not thread-safe: one control flow drives a match at a time.
    """

    def __init__(
        self,
        game: "AirlineSeatsGame",
        rng: UniformSource,
        match: Optional[MatchState] = None,
    ):
        self._game = game
        self._rng = rng
        self._match = match if match is not None else MatchState(num_players=game.num_players())
        self._history: List[int] = []
        self._handlers: Dict[GamePhase, Callable[[int], None]] = {
            GamePhase.INITIAL_CONDITIONS: self._apply_initial_conditions,
            GamePhase.SEAT_BUYING: self._apply_seat_buying,
            GamePhase.PRICE_SETTING: self._apply_price_setting,
            GamePhase.DEMAND_SIMULATION: self._apply_demand_simulation,
        }

    # ── Accessors ────────────────────────────────────────────

    @property
    def match(self) -> MatchState:
        """The underlying record. Read-only by convention."""
        return self._match

    @property
    def rng(self) -> UniformSource:
        return self._rng

    @property
    def round(self) -> int:
        return self._match.round

    @property
    def phase(self) -> GamePhase:
        return self._match.phase

    def get_game(self) -> "AirlineSeatsGame":
        return self._game

    def num_players(self) -> int:
        return self._match.num_players

    def current_player(self) -> int:
        return self._match.current_player

    def is_terminal(self) -> bool:
        return self._match.is_terminal()

    def is_chance_node(self) -> bool:
        return self._match.phase.is_chance and not self.is_terminal()

    def history(self) -> List[int]:
        """Actions applied to this object (not carried across serialization)."""
        return list(self._history)

    # ── Actions ──────────────────────────────────────────────

    def legal_actions(self, player: Optional[int] = None) -> List[int]:
        """
        Legal action ids for the current phase.

        Args:
            player: If given, returns [] unless `player` is the one to act
        """
        if player is not None and player != self._match.current_player:
            return []
        return codec.legal_actions(self._match.phase, self.is_terminal())

    def chance_outcomes(self) -> List[Tuple[int, float]]:
        """
        Outcomes of the current chance node.

        Chance is sampled internally, so there is a single placeholder
        outcome with probability 1.

        Raises:
            NotChanceNodeError: If a player is to act
        """
        if not self.is_chance_node():
            error = NotChanceNodeError(self._match.phase.value)
            log_game_error(error, logger.name)
            raise error
        return [(codec.CHANCE_ACTIONS[0], 1.0)]

    def action_to_string(self, player: int, action: int) -> str:
        return codec.action_to_string(self._match.phase, action)

    def apply_action(self, action: int) -> None:
        """
        Apply one action for the current actor.

        Raises:
            InvalidActionError: If `action` is not legal right now
        """
        match = self._match
        try:
            codec.check_action(match.phase, action, self.is_terminal(), match.current_player)
        except AirlineSeatsError as e:
            log_game_error(e, logger.name)
            raise

        action = int(action)
        logger.debug(
            f"Round {match.round} actor {views.actor_label(match.current_player)}: "
            f"{codec.action_to_string(match.phase, action)}"
        )
        self._handlers[match.phase](action)
        self._history.append(action)

    def _apply_initial_conditions(self, action: int) -> None:
        match = self._match
        match.c1 = self._rng.uniform() * (C1_HIGH - C1_LOW) + C1_LOW
        match.advance_phase(GamePhase.SEAT_BUYING)
        match.current_player = 0
        logger.debug(f"Demand coefficient c1={match.c1:.5f}")

    def _apply_seat_buying(self, action: int) -> None:
        match = self._match
        match.bought_seats[match.current_player] = codec.buy_quantity(action)
        match.current_player += 1

        # Once everyone has bought their seats, start setting prices
        if match.current_player >= match.num_players:
            match.current_player = 0
            match.advance_phase(GamePhase.PRICE_SETTING)

    def _apply_price_setting(self, action: int) -> None:
        match = self._match
        match.prices[match.current_player].append(codec.price_for(action))
        match.current_player += 1

        if match.current_player >= match.num_players:
            match.current_player = CHANCE_PLAYER_ID
            match.advance_phase(GamePhase.DEMAND_SIMULATION)

    def _apply_demand_simulation(self, action: int) -> None:
        match = self._match
        outcome = simulate_demand(match.latest_prices(), match.c1, self._rng)
        for player, seats in enumerate(outcome.sold):
            match.sold[player].append(seats)

        match.round += 1
        match.advance_phase(GamePhase.PRICE_SETTING)
        if match.is_terminal():
            match.current_player = TERMINAL_PLAYER_ID
            logger.info(f"Match finished after {match.round} rounds: returns={self.returns()}")
        else:
            match.current_player = 0

    # ── Scoring ──────────────────────────────────────────────

    def returns(self) -> List[float]:
        """Final pnl per player; all zeros until the match is terminal."""
        match = self._match
        if not match.is_terminal():
            return [0.0] * match.num_players
        return scoring.all_pnl(match.bought_seats, match.sold, match.prices, MAX_ROUNDS)

    def running_returns(self) -> List[float]:
        """Pnl per player over the rounds completed so far."""
        match = self._match
        return scoring.all_pnl(match.bought_seats, match.sold, match.prices, match.round)

    def rewards(self) -> List[float]:
        """
        Reward produced by the most recent transition.

        A buyer is charged their seat cost right after buying; each
        demand simulation pays out that round's pnl. Over a complete
        match the rewards sum to returns().
        """
        match = self._match
        n = match.num_players
        rewards = [0.0] * n

        just_simulated = match.is_terminal() or (
            match.phase == GamePhase.PRICE_SETTING
            and match.current_player == 0
            and match.round > 0
        )
        if just_simulated:
            return scoring.round_increment(match.bought_seats, match.sold, match.prices, match.round - 1)

        if match.phase == GamePhase.PRICE_SETTING and match.current_player == 0:
            buyer = n - 1
        elif match.phase == GamePhase.SEAT_BUYING and match.current_player > 0:
            buyer = match.current_player - 1
        else:
            return rewards
        rewards[buyer] = -scoring.purchase_cost(match.bought_seats[buyer])
        return rewards

    def result(self) -> Optional[MatchResult]:
        """Final standings, or None while the match is running."""
        if not self.is_terminal():
            return None
        return build_match_result(self._match)

    def seats_remaining(self, player: int) -> int:
        views.check_player(player, self._match.num_players)
        return _seats_remaining(self._match, player)

    def is_out_of_seats(self, player: int) -> bool:
        return self.seats_remaining(player) <= 0

    # ── Views ────────────────────────────────────────────────

    def information_state_string(self, player: int) -> str:
        return self._checked_view(views.information_state_string, player)

    def information_state_tensor(self, player: int) -> np.ndarray:
        return self._checked_view(views.information_state_tensor, player)

    def write_information_state_tensor(self, player: int, values: np.ndarray) -> None:
        self._checked_view(views.write_information_state_tensor, player, values)

    def observation_string(self, player: int) -> str:
        return self.information_state_string(player)

    def observation_tensor(self, player: int) -> np.ndarray:
        return self.information_state_tensor(player)

    def _checked_view(self, view, player: int, *args):
        try:
            return view(self._match, player, *args)
        except AirlineSeatsError as e:
            log_game_error(e, logger.name)
            raise

    def snapshot(self) -> MatchSnapshot:
        return build_match_snapshot(self._match)

    # ── Serialization ────────────────────────────────────────

    def serialize(self) -> str:
        """Single-line record of the match and its RNG position."""
        return serialize(self._match, self._rng)

    def clone(self) -> "AirlineSeatsState":
        """Independent copy, including an independent copy of the RNG stream."""
        clone = AirlineSeatsState(self._game, self._rng.copy(), self._match.copy())
        clone._history = list(self._history)
        return clone

    def to_string(self) -> str:
        match = self._match
        lines = [
            f"Round: {match.round} | Phase: {match.phase.value} | "
            f"Current player: {views.actor_label(match.current_player)}",
            f"Demand coefficient: {match.c1}",
        ]
        for p in range(match.num_players):
            lines.append(
                f"Player {p}: bought={match.bought_seats[p]} "
                f"sold={match.sold[p]} prices={match.prices[p]}"
            )
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        match = self._match
        return (
            f"AirlineSeatsState(round={match.round}, phase={match.phase.value}, "
            f"current_player={match.current_player})"
        )
