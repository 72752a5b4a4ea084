"""
airline_seats — Airline Seats Pricing Game
==========================================

A deterministic, replayable, multi-player economic game. Airlines
buy seats up front, then set prices for ten rounds while a stochastic
demand model allocates sales between them. Selling beyond the seats
bought is allowed but charged at a late-purchase price.

Quick Start:
    from airline_seats import AirlineSeatsGame

    game = AirlineSeatsGame(players=2, seed=42)
    state = game.new_initial_state()
    while not state.is_terminal():
        state.apply_action(state.legal_actions()[0])
    print(state.returns())

Pause and resume:
    text = state.serialize()
    resumed = game.deserialize_state(text)   # identical future draws

Action ids (0-based in every phase):
    SeatBuying:    0..4 -> buy 0, 5, 10, 15, 20 seats
    PriceSetting:  0..4 -> price 50, 55, 60, 65, 70
    Chance phases: 0 only

Logging
-------
The package logs on the `airline_seats` logger and installs no
handlers of its own. Call setup_logging() for colored terminal output
and an optional JSON-lines file.
"""

from .config import GameConfig, load_config
from .errors import (
    AirlineSeatsError,
    InvalidActionError,
    MalformedStateError,
    NotChanceNodeError,
    PlayerIndexError,
)
from .game import GAME_TYPE, AirlineSeatsGame, GameType
from .rng import MersenneTwisterSource, UniformSource
from .state import AirlineSeatsState
from .types import MatchSnapshot, PlayerSnapshot
from ._core.constants import MAX_ROUNDS
from ._core.match_result import MatchResult, PlayerResult
from ._core.phases import CHANCE_PLAYER_ID, TERMINAL_PLAYER_ID, GamePhase
from ._shared.logging_config import setup_logging

__all__ = [
    # Main classes
    "AirlineSeatsGame",
    "AirlineSeatsState",
    "GameConfig",
    "GameType",
    "GAME_TYPE",
    "load_config",
    # Phases and markers
    "GamePhase",
    "CHANCE_PLAYER_ID",
    "TERMINAL_PLAYER_ID",
    "MAX_ROUNDS",
    # Randomness
    "UniformSource",
    "MersenneTwisterSource",
    # Results
    "MatchResult",
    "PlayerResult",
    "MatchSnapshot",
    "PlayerSnapshot",
    # Errors
    "AirlineSeatsError",
    "InvalidActionError",
    "MalformedStateError",
    "NotChanceNodeError",
    "PlayerIndexError",
    # Logging
    "setup_logging",
]
__version__ = "1.0.0"
