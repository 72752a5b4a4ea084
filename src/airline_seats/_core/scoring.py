# Area: Core
"""
airline_seats._core.scoring — Profit and loss accounting
========================================================

Each player pays for their seats up front, earns price * sold every
round, and pays a late-purchase price for every seat sold beyond the
seats they bought. Sales are never capped: selling past inventory is
an unlimited backorder charged at the late price.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from .constants import INITIAL_PURCHASE_PRICE, LATE_PURCHASE_PRICE


@dataclass(frozen=True)
class PnlBreakdown:
    """Components of one player's pnl over a number of rounds."""
    purchase_cost: float
    revenue: float
    late_units: int
    late_penalty: float
    pnl: float


def breakdown(
    bought: int,
    sold: Sequence[int],
    prices: Sequence[int],
    rounds: int,
) -> PnlBreakdown:
    """
    Accumulate one player's pnl over the first `rounds` rounds.

    Args:
        bought: Seats bought in the SeatBuying phase
        sold: Seats sold per round
        prices: Price set per round
        rounds: Number of rounds to include (<= len(sold))
    """
    purchase_cost = float(bought * INITIAL_PURCHASE_PRICE)
    pnl = -purchase_cost
    revenue = 0.0
    late_units = 0
    seats_left = bought

    for round_index in range(rounds):
        units = sold[round_index]
        income = float(units * prices[round_index])
        revenue += income
        pnl += income
        if seats_left > 0:
            seats_left -= units
            if seats_left < 0:
                late_units += -seats_left
                pnl -= -seats_left * LATE_PURCHASE_PRICE
        else:
            late_units += units
            pnl -= units * LATE_PURCHASE_PRICE

    return PnlBreakdown(
        purchase_cost=purchase_cost,
        revenue=revenue,
        late_units=late_units,
        late_penalty=float(late_units * LATE_PURCHASE_PRICE),
        pnl=pnl,
    )


def player_pnl(bought: int, sold: Sequence[int], prices: Sequence[int], rounds: int) -> float:
    return breakdown(bought, sold, prices, rounds).pnl


def all_pnl(
    bought_seats: Sequence[int],
    sold: Sequence[Sequence[int]],
    prices: Sequence[Sequence[int]],
    rounds: int,
) -> List[float]:
    """Pnl of every player over the first `rounds` rounds."""
    return [
        player_pnl(bought_seats[p], sold[p], prices[p], rounds)
        for p in range(len(bought_seats))
    ]


def round_increment(
    bought_seats: Sequence[int],
    sold: Sequence[Sequence[int]],
    prices: Sequence[Sequence[int]],
    round_index: int,
) -> List[float]:
    """
    Pnl earned by each player in round `round_index` alone.

    The up-front purchase cost is not part of any round.
    """
    before = all_pnl(bought_seats, sold, prices, round_index)
    after = all_pnl(bought_seats, sold, prices, round_index + 1)
    return [a - b for a, b in zip(after, before)]


def purchase_cost(bought: int) -> float:
    return float(bought * INITIAL_PURCHASE_PRICE)
