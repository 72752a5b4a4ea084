"""
airline_seats.game — Game definition
====================================

Static facts about the Airline Seats game and the factory for new
and deserialized matches.

    from airline_seats import AirlineSeatsGame

    game = AirlineSeatsGame(players=3, seed=42)
    state = game.new_initial_state()
    while not state.is_terminal():
        state.apply_action(state.legal_actions()[0])
    print(state.returns())

Each match created by new_initial_state() gets its own RNG stream,
seeded from the game's seed. Two matches from the same seeded game
driven with the same actions are identical.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import GameConfig
from .rng import MersenneTwisterSource, UniformSource
from .state import AirlineSeatsState
from ._core import views
from ._core.constants import (
    DEFAULT_PLAYERS,
    MAX_PLAYERS,
    MAX_ROUNDS,
    MAX_UTILITY,
    MIN_PLAYERS,
    MIN_UTILITY,
    NUM_DISTINCT_ACTIONS,
)
from ._core.serializer import parse
from ._shared.logging_config import log_game_error
from .errors import MalformedStateError

logger = logging.getLogger("airline_seats.game")


@dataclass(frozen=True)
class GameType:
    """Facts a hosting framework needs to register the game."""
    short_name: str
    long_name: str
    dynamics: str
    chance_mode: str
    information: str
    utility: str
    reward_model: str
    max_num_players: int
    min_num_players: int
    provides_information_state_string: bool
    provides_information_state_tensor: bool
    provides_observation_string: bool
    provides_observation_tensor: bool
    parameter_specification: Dict[str, Any] = field(default_factory=dict)


GAME_TYPE = GameType(
    short_name="airline_seats",
    long_name="Airline Seats",
    dynamics="sequential",
    chance_mode="sampled_stochastic",
    information="imperfect_information",
    utility="general_sum",
    reward_model="rewards",
    max_num_players=MAX_PLAYERS,
    min_num_players=MIN_PLAYERS,
    provides_information_state_string=True,
    provides_information_state_tensor=True,
    provides_observation_string=True,
    provides_observation_tensor=True,
    parameter_specification={"players": DEFAULT_PLAYERS},
)


class AirlineSeatsGame:
    """
    Airline Seats: players buy seats up front, then price them for
    ten rounds of stochastic demand.

    Args:
        config: Full configuration; built from `params` if omitted
        **params: Game parameters, `players` and `seed`

    Raises:
        pydantic.ValidationError: If the player count is outside 2..4
    """

    def __init__(self, config: Optional[GameConfig] = None, **params: Any):
        if config is not None and params:
            raise ValueError("Pass either a GameConfig or game parameters, not both")
        self._config = config if config is not None else GameConfig.from_parameters(params)
        logger.debug(
            f"Created game: players={self._config.num_players} seed={self._config.seed}"
        )

    @property
    def config(self) -> GameConfig:
        return self._config

    def get_type(self) -> GameType:
        return GAME_TYPE

    def get_parameters(self) -> Dict[str, Any]:
        return {"players": self._config.num_players}

    def num_players(self) -> int:
        return self._config.num_players

    def num_distinct_actions(self) -> int:
        return NUM_DISTINCT_ACTIONS

    def max_chance_outcomes(self) -> int:
        # Chance nodes have a single implicit outcome
        return 1

    def max_game_length(self) -> int:
        """Player decisions in a full match: one buy plus one price per round."""
        return self._config.num_players * MAX_ROUNDS + self._config.num_players

    def max_chance_nodes_in_history(self) -> int:
        return MAX_ROUNDS + 1

    def information_state_tensor_shape(self) -> List[int]:
        return views.tensor_shape(self._config.num_players)

    def observation_tensor_shape(self) -> List[int]:
        return self.information_state_tensor_shape()

    def min_utility(self) -> float:
        return MIN_UTILITY

    def max_utility(self) -> float:
        return MAX_UTILITY

    def make_rng(self) -> UniformSource:
        """Fresh RNG stream for one match."""
        return MersenneTwisterSource(self._config.seed)

    def new_initial_state(self, rng: Optional[UniformSource] = None) -> AirlineSeatsState:
        """
        Start a new match.

        Args:
            rng: Stream for this match; a fresh seeded stream if omitted
        """
        return AirlineSeatsState(self, rng if rng is not None else self.make_rng())

    def deserialize_state(self, text: str, rng: Optional[UniformSource] = None) -> AirlineSeatsState:
        """
        Rebuild a match from AirlineSeatsState.serialize() output.

        Args:
            text: Serialized record
            rng: Source of the same kind the match was played with; a fresh
                Mersenne Twister if omitted

        Raises:
            MalformedStateError: If the record cannot be parsed
        """
        if rng is None:
            rng = self.make_rng()
        try:
            match = parse(text, self._config.num_players, rng)
        except MalformedStateError as e:
            log_game_error(e, logger.name)
            raise
        logger.debug(f"Deserialized state at round {match.round}, phase {match.phase.value}")
        return AirlineSeatsState(self, rng, match)

    def __repr__(self) -> str:
        return f"AirlineSeatsGame(players={self._config.num_players}, seed={self._config.seed})"
