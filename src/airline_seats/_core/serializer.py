# Area: Core
"""
airline_seats._core.serializer — Single-line state record
=========================================================

Renders a match as one pipe-delimited record and parses it back:

    rng_snapshot|round|c1|current_player|phase_code|bought|sold|prices

`bought`, `sold`, and `prices` are comma-separated integers. History
blocks are flattened round-major, player-minor. `prices` carries the
completed rounds followed by the pending prices of the round in
progress (players 0..actor-1 while pricing, every player while the
demand simulation is pending).

The RNG position is restored before anything else so that sampling
after a resume continues the original stream.
"""

from __future__ import annotations
import logging
import math
import re
from typing import List, Sequence

from .codec import BUY_ACTIONS, PRICE_ACTIONS, buy_quantity, price_for
from .constants import MAX_ROUNDS
from .phases import CHANCE_PLAYER_ID, TERMINAL_PLAYER_ID, GamePhase
from .._state import MatchState
from ..errors import MalformedStateError
from ..rng import UniformSource

logger = logging.getLogger("airline_seats.serializer")

FIELD_SEPARATOR = "|"
VALUE_SEPARATOR = ","
NUM_FIELDS = 8

_INTEGER = re.compile(r"-?[0-9]+")
VALID_BOUGHT = frozenset(buy_quantity(a) for a in BUY_ACTIONS)
VALID_PRICES = frozenset(price_for(a) for a in PRICE_ACTIONS)


def serialize(match: MatchState, rng: UniformSource) -> str:
    """Render `match` and the RNG position as a single record."""
    sold = [
        match.sold[player][round_index]
        for round_index in range(match.round)
        for player in range(match.num_players)
    ]
    prices = [
        match.prices[player][round_index]
        for round_index in range(match.round)
        for player in range(match.num_players)
    ]
    prices.extend(
        match.prices[player][match.round]
        for player in range(match.pending_price_count())
    )
    fields = [
        rng.get_state(),
        str(match.round),
        repr(float(match.c1)),
        str(match.current_player),
        match.phase.code,
        _join(match.bought_seats),
        _join(sold),
        _join(prices),
    ]
    return FIELD_SEPARATOR.join(fields)


def parse(record: str, num_players: int, rng: UniformSource) -> MatchState:
    """
    Rebuild a MatchState from `record`, restoring `rng` first.

    Raises:
        MalformedStateError: On any field count, type, or consistency error
    """
    fields = record.split(FIELD_SEPARATOR)
    if len(fields) != NUM_FIELDS:
        raise MalformedStateError(
            record, f"expected {NUM_FIELDS} fields, got {len(fields)}"
        )
    rng_text, round_text, c1_text, actor_text, phase_text, bought_text, sold_text, prices_text = fields

    try:
        rng.set_state(rng_text)
    except ValueError as e:
        raise MalformedStateError(record, f"bad RNG snapshot: {e}") from e

    round_index = _parse_int(record, round_text, "round")
    c1 = _parse_float(record, c1_text, "c1")
    actor = _parse_int(record, actor_text, "current_player")
    try:
        phase = GamePhase.from_code(phase_text)
    except KeyError:
        raise MalformedStateError(record, f"unknown phase code {phase_text!r}") from None

    bought = _parse_csv(record, bought_text, "bought_seats")
    sold = _parse_csv(record, sold_text, "sold")
    prices = _parse_csv(record, prices_text, "prices")

    if not 0 <= round_index <= MAX_ROUNDS:
        raise MalformedStateError(record, f"round {round_index} outside 0..{MAX_ROUNDS}")
    if len(bought) != num_players:
        raise MalformedStateError(
            record, f"expected {num_players} bought-seat entries, got {len(bought)}"
        )
    _check_values(record, "bought_seats", bought, VALID_BOUGHT)
    _check_values(record, "prices", prices, VALID_PRICES)
    if any(value < 0 for value in sold):
        raise MalformedStateError(record, "sold entries must be non-negative")
    _check_actor(record, phase, actor, round_index, num_players)

    match = MatchState(
        num_players=num_players,
        round=round_index,
        phase=phase,
        current_player=actor,
        c1=c1,
        bought_seats=bought,
    )

    completed = round_index * num_players
    pending = match.pending_price_count()
    if len(sold) != completed:
        raise MalformedStateError(
            record, f"expected {completed} sold entries for round {round_index}, got {len(sold)}"
        )
    if len(prices) != completed + pending:
        raise MalformedStateError(
            record,
            f"expected {completed + pending} price entries in phase {phase.code}, got {len(prices)}",
        )

    for offset, value in enumerate(sold):
        match.sold[offset % num_players].append(value)
    for offset, value in enumerate(prices[:completed]):
        match.prices[offset % num_players].append(value)
    for player, value in enumerate(prices[completed:]):
        match.prices[player].append(value)

    logger.debug(f"Parsed state: round={round_index} phase={phase.code} actor={actor}")
    return match


def _check_actor(record: str, phase: GamePhase, actor: int, round_index: int, num_players: int) -> None:
    """The actor must be consistent with the phase and round."""
    if round_index >= MAX_ROUNDS:
        if actor != TERMINAL_PLAYER_ID or phase != GamePhase.PRICE_SETTING:
            raise MalformedStateError(
                record, f"round {round_index} is terminal but actor={actor} phase={phase.code}"
            )
        return
    if phase.is_chance:
        ok = actor == CHANCE_PLAYER_ID
    else:
        ok = 0 <= actor < num_players
    if not ok:
        raise MalformedStateError(record, f"actor {actor} is not valid in phase {phase.code}")
    if phase in (GamePhase.INITIAL_CONDITIONS, GamePhase.SEAT_BUYING) and round_index != 0:
        raise MalformedStateError(record, f"phase {phase.code} cannot occur in round {round_index}")


def _join(values: Sequence[int]) -> str:
    return VALUE_SEPARATOR.join(str(int(v)) for v in values)


def _parse_csv(record: str, text: str, name: str) -> List[int]:
    if not text:
        return []
    return [_parse_int(record, part, name) for part in text.split(VALUE_SEPARATOR)]


def _check_values(record: str, name: str, values: Sequence[int], allowed: frozenset) -> None:
    bad = sorted(set(values) - allowed)
    if bad:
        raise MalformedStateError(record, f"{name} values {bad} are not reachable (allowed: {sorted(allowed)})")


def _parse_int(record: str, text: str, name: str) -> int:
    # int() alone would also accept whitespace and "1_0"
    if not _INTEGER.fullmatch(text):
        raise MalformedStateError(record, f"{name} is not an integer: {text!r}")
    return int(text)


def _parse_float(record: str, text: str, name: str) -> float:
    if text != text.strip():
        raise MalformedStateError(record, f"{name} is not a number: {text!r}")
    try:
        value = float(text)
    except ValueError:
        raise MalformedStateError(record, f"{name} is not a number: {text!r}") from None
    if not math.isfinite(value):
        raise MalformedStateError(record, f"{name} is not finite: {text!r}")
    return value
