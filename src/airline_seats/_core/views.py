# Area: Core
"""
airline_seats._core.views — Player-scoped projections
=====================================================

What a player may see: their own purchase, the round counter, the
current actor, and the public sales and price history of completed
rounds. Other players' purchases and their pending prices for the
round in progress stay hidden; a player's own pending price is shown
to them.

Tensor layout (float32), N players, R = MAX_ROUNDS:

    [0, N+2)            actor one-hot: players 0..N-1, chance, terminal
    [N+2, N+2+R+1)      round one-hot: 0..R
    next 1              own bought seats
    next N*R            sold history, round-major, zero beyond round
    next N*R            price history, same layout
"""

from __future__ import annotations
from typing import List, Tuple

import numpy as np

from .constants import MAX_ROUNDS
from .phases import CHANCE_PLAYER_ID, TERMINAL_PLAYER_ID
from .._state import MatchState
from ..errors import PlayerIndexError


def tensor_shape(num_players: int) -> List[int]:
    actor_slots = num_players + 2
    round_slots = MAX_ROUNDS + 1
    history_slots = 2 * num_players * MAX_ROUNDS
    return [actor_slots + round_slots + 1 + history_slots]


def check_player(player: int, num_players: int) -> None:
    """
    Raises:
        PlayerIndexError: If `player` is not a seat in this match
    """
    if not 0 <= player < num_players:
        raise PlayerIndexError(player, num_players)


def actor_label(actor: int) -> str:
    if actor == CHANCE_PLAYER_ID:
        return "chance"
    if actor == TERMINAL_PLAYER_ID:
        return "terminal"
    return str(actor)


def information_state_string(match: MatchState, player: int) -> str:
    check_player(player, match.num_players)
    lines = [
        f"Player {player} | Round {match.round} | "
        f"Phase {match.phase.value} | Actor {actor_label(match.current_player)}",
        f"Bought seats: {match.bought_seats[player]}",
    ]
    for round_index in range(match.round):
        sold = [match.sold[p][round_index] for p in range(match.num_players)]
        prices = [match.prices[p][round_index] for p in range(match.num_players)]
        lines.append(f"Round {round_index}: sold={sold} prices={prices}")
    if match.has_pending_price(player):
        lines.append(f"Pending price: {match.prices[player][match.round]}")
    return "\n".join(lines)


def write_information_state_tensor(match: MatchState, player: int, values: np.ndarray) -> None:
    """
    Fill `values` in place with `player`'s view.

    Raises:
        PlayerIndexError: If `player` is out of range
        ValueError: If `values` has the wrong size
    """
    check_player(player, match.num_players)
    n = match.num_players
    (size,) = tensor_shape(n)
    if values.size != size:
        raise ValueError(f"Tensor buffer has {values.size} slots, expected {size}")

    flat = values.reshape(-1)
    flat.fill(0.0)

    actor_offset, round_offset, bought_offset, sold_offset, price_offset = _offsets(n)

    if match.current_player == CHANCE_PLAYER_ID:
        flat[actor_offset + n] = 1.0
    elif match.current_player == TERMINAL_PLAYER_ID:
        flat[actor_offset + n + 1] = 1.0
    else:
        flat[actor_offset + match.current_player] = 1.0

    flat[round_offset + min(match.round, MAX_ROUNDS)] = 1.0
    flat[bought_offset] = match.bought_seats[player]

    for round_index in range(match.round):
        for p in range(n):
            flat[sold_offset + round_index * n + p] = match.sold[p][round_index]
            flat[price_offset + round_index * n + p] = match.prices[p][round_index]
    if match.has_pending_price(player):
        flat[price_offset + match.round * n + player] = match.prices[player][match.round]


def information_state_tensor(match: MatchState, player: int) -> np.ndarray:
    values = np.zeros(tensor_shape(match.num_players), dtype=np.float32)
    write_information_state_tensor(match, player, values)
    return values


def _offsets(num_players: int) -> Tuple[int, int, int, int, int]:
    actor_offset = 0
    round_offset = actor_offset + num_players + 2
    bought_offset = round_offset + MAX_ROUNDS + 1
    sold_offset = bought_offset + 1
    price_offset = sold_offset + num_players * MAX_ROUNDS
    return actor_offset, round_offset, bought_offset, sold_offset, price_offset
