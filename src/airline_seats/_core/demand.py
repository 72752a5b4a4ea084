# Area: Core
"""
airline_seats._core.demand — Stochastic demand allocation
=========================================================

Turns one round of prices into seats sold per player.

    power[p]      = price[p] ** -K
    total_demand  = C0 + power_sum ** (1 / -K) * c1
    share[p]      = power[p] / power_sum
    noise[p]      = ((u[p] - 0.5) * R) / 100        one draw per player
    sold[p]       = round(total_demand * (1 + noise[p]) * share[p])

`power_sum ** (1 / -K)` is a price index between the lowest and the
highest price, and c1 is negative, so cheaper markets are larger.
The cheapest player takes the largest share.

Draw order: the power terms are draw-free; then exactly one uniform
draw per player, in player-index order.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

from .constants import DEMAND_BASELINE, DEMAND_NOISE_SPREAD, PRICE_EXPONENT
from ..rng import UniformSource

logger = logging.getLogger("airline_seats.demand")


@dataclass(frozen=True)
class DemandOutcome:
    """Everything computed for one demand simulation."""
    total_demand: float
    shares: List[float]
    noise: List[float]
    sold: List[int]


def signed_pow(base: float, exponent: float) -> float:
    """
    Raise a positive base to a possibly negative exponent.

    Negative exponents are computed as 1 / base ** |exponent| so the
    power is always taken on a positive exponent.
    """
    if exponent < 0:
        return 1.0 / math.pow(base, -exponent)
    return math.pow(base, exponent)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def attractiveness(prices: Sequence[int], exponent: int = PRICE_EXPONENT) -> List[float]:
    """Weight of each price; lower price means higher weight."""
    return [signed_pow(float(price), -exponent) for price in prices]


def total_demand(power_sum: float, c1: float, exponent: int = PRICE_EXPONENT) -> float:
    """Market size for a given aggregate attractiveness."""
    price_index = signed_pow(power_sum, 1.0 / -exponent)
    return DEMAND_BASELINE + price_index * c1


def noise_from_uniform(u: float, spread: int = DEMAND_NOISE_SPREAD) -> float:
    """Map a uniform draw in [0, 1) to a relative share perturbation."""
    return ((u - 0.5) * spread) / 100.0


def simulate_demand(prices: Sequence[int], c1: float, rng: UniformSource) -> DemandOutcome:
    """
    Allocate one round of demand across players.

    Args:
        prices: Each player's price for this round, in player order
        c1: Match demand coefficient
        rng: Stream to draw the per-player noise from

    Returns:
        DemandOutcome with per-player seats sold (may exceed inventory)
    """
    powers = attractiveness(prices)
    power_sum = sum(powers)
    demand = total_demand(power_sum, c1)
    shares = [power / power_sum for power in powers]

    noise = [noise_from_uniform(rng.uniform()) for _ in prices]

    sold = [
        round_half_up(demand * (1.0 + n) * share)
        for n, share in zip(noise, shares)
    ]
    logger.debug(
        f"Demand: prices={list(prices)} total={demand:.3f} "
        f"shares={[round(s, 4) for s in shares]} sold={sold}"
    )
    return DemandOutcome(total_demand=demand, shares=shares, noise=noise, sold=sold)
