# Area: Core
"""
airline_seats._core.codec — Action codec
========================================

Maps the small integer action ids to their meaning in each phase.

    SeatBuying:        id i -> buy i * 5 seats       (0, 5, 10, 15, 20)
    PriceSetting:      id j -> set price 50 + j * 5   (50, 55, 60, 65, 70)
    InitialConditions: id 0 only (chance sentinel)
    DemandSimulation:  id 0 only (chance sentinel)

Ids are 0-based in every phase; the phase disambiguates them.
"""

from typing import List, Optional

import numpy as np

from .constants import (
    BASE_PRICE,
    CHANCE_ACTION,
    NUM_BUY_ACTIONS,
    NUM_PRICE_ACTIONS,
    PRICE_STEP,
    SEAT_LOT_SIZE,
)
from .phases import GamePhase
from ..errors import InvalidActionError

BUY_ACTIONS = tuple(range(NUM_BUY_ACTIONS))
PRICE_ACTIONS = tuple(range(NUM_PRICE_ACTIONS))
CHANCE_ACTIONS = (CHANCE_ACTION,)


def legal_actions(phase: GamePhase, terminal: bool = False) -> List[int]:
    """Return the legal action ids for `phase`, or [] once terminal."""
    if terminal:
        return []
    if phase == GamePhase.SEAT_BUYING:
        return list(BUY_ACTIONS)
    if phase == GamePhase.PRICE_SETTING:
        return list(PRICE_ACTIONS)
    return list(CHANCE_ACTIONS)


def is_legal(phase: GamePhase, action: int, terminal: bool = False) -> bool:
    """Integer ids only; floats and bools never match an id."""
    if isinstance(action, bool) or not isinstance(action, (int, np.integer)):
        return False
    return action in legal_actions(phase, terminal)


def check_action(
    phase: GamePhase,
    action: int,
    terminal: bool = False,
    current_player: Optional[int] = None,
) -> None:
    """
    Validate an action against the phase's legal set.

    Raises:
        InvalidActionError: If the action is not legal
    """
    if not is_legal(phase, action, terminal):
        raise InvalidActionError(
            action=action,
            phase=phase.value,
            legal_actions=legal_actions(phase, terminal),
            current_player=current_player,
        )


def buy_quantity(action: int) -> int:
    """Seats purchased by a SeatBuying action."""
    return action * SEAT_LOT_SIZE


def price_for(action: int) -> int:
    """Sale price chosen by a PriceSetting action."""
    return BASE_PRICE + action * PRICE_STEP


def action_to_string(phase: GamePhase, action: int) -> str:
    """Human-readable label for `action` in `phase`."""
    if phase == GamePhase.SEAT_BUYING:
        return f"Buy:{buy_quantity(action)}"
    if phase == GamePhase.PRICE_SETTING:
        return f"SetPrice:{price_for(action)}"
    return phase.value
