"""
airline_seats.config — Game configuration
=========================================

GameConfig is the immutable set of parameters a game is built from.
load_config() builds one from a .env file and environment variables,
for drivers that want to configure matches outside of code:

    AIRLINE_SEATS_PLAYERS=3
    AIRLINE_SEATS_SEED=1234

Explicit keyword overrides win over the environment, which wins over
the .env file. The game itself never reads the environment.
"""

from __future__ import annotations
import logging
import os
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from ._core.constants import DEFAULT_PLAYERS, MAX_PLAYERS, MIN_PLAYERS

logger = logging.getLogger("airline_seats.config")

# Environment variable -> GameConfig field
ENV_MAPPINGS = {
    "AIRLINE_SEATS_PLAYERS": "num_players",
    "AIRLINE_SEATS_SEED": "seed",
}


class GameConfig(BaseModel):
    """
    Parameters of one game.

    Attributes:
        num_players: Number of airlines competing (2..4)
        seed: Seed for each match's RNG stream; None seeds from OS entropy
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    num_players: int = Field(default=DEFAULT_PLAYERS, ge=MIN_PLAYERS, le=MAX_PLAYERS)
    seed: Optional[int] = Field(default=None, ge=0)

    @classmethod
    def from_parameters(cls, params: Dict[str, Any]) -> "GameConfig":
        """Build from game parameters, e.g. {"players": 3, "seed": 7}."""
        values: Dict[str, Any] = {}
        if "players" in params:
            values["num_players"] = params["players"]
        if "seed" in params:
            values["seed"] = params["seed"]
        unknown = set(params) - {"players", "seed"}
        if unknown:
            raise ValueError(f"Unknown game parameters: {sorted(unknown)}")
        return cls(**values)


def load_config(env_file: Optional[str] = None, **overrides: Any) -> GameConfig:
    """
    Load a GameConfig from a .env file, the environment, and overrides.

    Args:
        env_file: Path to a .env file; searched for from the working directory if omitted
        **overrides: GameConfig fields that take precedence

    Raises:
        pydantic.ValidationError: If a value has the wrong type or is out of range
    """
    if env_file is None:
        env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(dotenv_path=env_file, override=False)

    values: Dict[str, Any] = {}
    for env_key, field_name in ENV_MAPPINGS.items():
        if env_key in os.environ:
            values[field_name] = os.environ[env_key]

    values.update(overrides)
    config = GameConfig(**values)
    logger.debug(f"Loaded config: players={config.num_players} seed={config.seed}")
    return config
