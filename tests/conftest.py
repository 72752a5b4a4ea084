# Area: Tests
"""Shared fixtures for airline_seats tests."""

import random

import pytest

from airline_seats import AirlineSeatsGame
from airline_seats.rng import UniformSource


class ScriptedSource(UniformSource):
    """UniformSource that replays a fixed list of uniforms in [0, 1)."""

    MAX = 2 ** 32 - 1

    def __init__(self, uniforms):
        self._draws = [int(u * (self.MAX + 1)) for u in uniforms]
        self.position = 0

    def draw(self) -> int:
        value = self._draws[self.position]
        self.position += 1
        return value

    def max_value(self) -> int:
        return self.MAX

    def get_state(self) -> str:
        return str(self.position)

    def set_state(self, text: str) -> None:
        self.position = int(text)

    def copy(self) -> "ScriptedSource":
        clone = ScriptedSource([])
        clone._draws = list(self._draws)
        clone.position = self.position
        return clone


@pytest.fixture
def scripted_source():
    """Factory for sources that return the given uniforms in order."""
    return ScriptedSource


@pytest.fixture
def game():
    """Two-player game with a fixed seed."""
    return AirlineSeatsGame(players=2, seed=1234)


@pytest.fixture
def play():
    """
    Drive a state with a per-phase policy until `stop(state)` is true.

    `buy` and `price` are action ids, or callables (state) -> action id.
    """

    def _play(state, buy=2, price=0, stop=None):
        while not state.is_terminal():
            if stop is not None and stop(state):
                break
            if state.is_chance_node():
                state.apply_action(0)
                continue
            choice = buy if state.phase.value == "SeatBuying" else price
            state.apply_action(choice(state) if callable(choice) else choice)
        return state

    return _play


@pytest.fixture
def random_policy():
    """Seeded policy that picks uniformly among the legal actions."""

    def _make(seed):
        picker = random.Random(seed)
        return lambda state: picker.choice(state.legal_actions())

    return _make
