"""
airline_seats.types — TypedDict schemas for match snapshots
===========================================================

This module documents the exact structure of the dictionaries
returned by `AirlineSeatsState.snapshot()`. Snapshots are plain
JSON-compatible data, intended for logging, dashboards, and tests.
They are not a persistence format: use `serialize()` to pause and
resume a match.

    from airline_seats import MatchSnapshot, PlayerSnapshot

Use __annotations__ to inspect fields:

    >>> PlayerSnapshot.__annotations__
    {'player': int, 'bought_seats': int, 'sold': List[int], ...}
"""

from typing import List, TypedDict


class PlayerSnapshot(TypedDict):
    """One player's position in the match.

    Fields
    ------
    player : int
        Player index, 0-based.
    bought_seats : int
        Seats bought in the SeatBuying phase (0, 5, 10, 15 or 20).
    sold : List[int]
        Seats sold per completed round.
    prices : List[int]
        Prices set per round, including a pending price for the round
        in progress if this player has already priced.
    seats_remaining : int
        bought_seats minus total seats sold; negative once the player
        has sold on backorder.
    out_of_seats : bool
        True once total seats sold reaches bought_seats.
    """
    player: int
    bought_seats: int
    sold: List[int]
    prices: List[int]
    seats_remaining: int
    out_of_seats: bool


class MatchSnapshot(TypedDict):
    """Whole-match view.

    Fields
    ------
    round : int
        Completed rounds (0..10).
    phase : str
        Phase name, e.g. "PriceSetting".
    phase_code : str
        Short phase code: "IC", "SB", "PS" or "DS".
    current_player : int
        Player to act, -1 for chance, -4 once terminal.
    terminal : bool
        True once all rounds have been simulated.
    c1 : float
        Demand coefficient sampled at the start of the match.
    players : List[PlayerSnapshot]
        One entry per player, in index order.
    """
    round: int
    phase: str
    phase_code: str
    current_player: int
    terminal: bool
    c1: float
    players: List[PlayerSnapshot]
