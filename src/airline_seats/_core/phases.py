# Area: Core
"""
airline_seats._core.phases — Phase enum and transition table
============================================================

Defines the four phases of a match, their short serialization codes,
the special actor markers, and the table of allowed phase edges.

Phase transitions:
InitialConditions -> SeatBuying        (chance samples c1)
SeatBuying        -> SeatBuying        (next buyer)
SeatBuying        -> PriceSetting      (last buyer done)
PriceSetting      -> PriceSetting      (next pricer)
PriceSetting      -> DemandSimulation  (last pricer done)
DemandSimulation  -> PriceSetting      (round complete, or match over)
"""

from enum import Enum
from typing import Dict, FrozenSet

# Actor markers
CHANCE_PLAYER_ID = -1
TERMINAL_PLAYER_ID = -4


class GamePhase(Enum):
    """Current stage of a round."""
    INITIAL_CONDITIONS = "InitialConditions"
    SEAT_BUYING = "SeatBuying"
    PRICE_SETTING = "PriceSetting"
    DEMAND_SIMULATION = "DemandSimulation"

    @property
    def code(self) -> str:
        return PHASE_CODES[self]

    @property
    def is_chance(self) -> bool:
        return self in CHANCE_PHASES

    @classmethod
    def from_code(cls, code: str) -> "GamePhase":
        """
        Look up a phase by its serialization code.

        Raises:
            KeyError: If the code is unknown
        """
        return _PHASES_BY_CODE[code]


PHASE_CODES: Dict[GamePhase, str] = {
    GamePhase.INITIAL_CONDITIONS: "IC",
    GamePhase.SEAT_BUYING: "SB",
    GamePhase.PRICE_SETTING: "PS",
    GamePhase.DEMAND_SIMULATION: "DS",
}

_PHASES_BY_CODE: Dict[str, GamePhase] = {code: phase for phase, code in PHASE_CODES.items()}

CHANCE_PHASES: FrozenSet[GamePhase] = frozenset({
    GamePhase.INITIAL_CONDITIONS,
    GamePhase.DEMAND_SIMULATION,
})

# Valid phase edges: {current_phase: {next_phase, ...}}
NEXT_PHASE: Dict[GamePhase, FrozenSet[GamePhase]] = {
    GamePhase.INITIAL_CONDITIONS: frozenset({GamePhase.SEAT_BUYING}),
    GamePhase.SEAT_BUYING: frozenset({GamePhase.SEAT_BUYING, GamePhase.PRICE_SETTING}),
    GamePhase.PRICE_SETTING: frozenset({GamePhase.PRICE_SETTING, GamePhase.DEMAND_SIMULATION}),
    GamePhase.DEMAND_SIMULATION: frozenset({GamePhase.PRICE_SETTING}),
}


def can_advance(current: GamePhase, new: GamePhase) -> bool:
    """Check if moving from `current` to `new` is an allowed edge."""
    return new in NEXT_PHASE.get(current, frozenset())
