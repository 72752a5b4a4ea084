"""
airline_seats.rng — Uniform random source with text save/restore
================================================================

The match never touches global random state. Each match owns a
UniformSource that it samples in a fixed order and whose position
can be captured as text and restored verbatim, so a paused match
resumes with exactly the same future draws.

    >>> source = MersenneTwisterSource(seed=7)
    >>> saved = source.get_state()
    >>> a = source.uniform()
    >>> source.set_state(saved)
    >>> source.uniform() == a
    True
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

_KEY_WORDS = 624
_WORD_MAX = 2 ** 32 - 1


class UniformSource(ABC):
    """
    Source of raw integer draws with a known maximum value.

    Subclasses must make get_state()/set_state() an exact round trip:
    after set_state(get_state()) the following draws are unchanged.
    """

    @abstractmethod
    def draw(self) -> int:
        """Return the next raw integer in [0, max_value()]."""

    @abstractmethod
    def max_value(self) -> int:
        """Largest value draw() can return."""

    @abstractmethod
    def get_state(self) -> str:
        """Textual snapshot of the current position. Never contains '|'."""

    @abstractmethod
    def set_state(self, text: str) -> None:
        """
        Restore a position captured by get_state().

        Raises:
            ValueError: If the text is not a valid snapshot
        """

    @abstractmethod
    def copy(self) -> "UniformSource":
        """Independent source positioned at the same point in the stream."""

    def uniform(self) -> float:
        """Next draw normalized to [0, 1)."""
        return self.draw() / (self.max_value() + 1)


class MersenneTwisterSource(UniformSource):
    """
    32-bit Mersenne Twister backed by numpy's MT19937 bit generator.

    The text snapshot is the 624 state words followed by the position
    index, separated by single spaces.
    """

    def __init__(self, seed: Optional[int] = None):
        self._bit_generator = np.random.MT19937(seed)

    def draw(self) -> int:
        return int(self._bit_generator.random_raw())

    def max_value(self) -> int:
        return _WORD_MAX

    def get_state(self) -> str:
        state = self._bit_generator.state["state"]
        words = [str(int(word)) for word in state["key"]]
        words.append(str(int(state["pos"])))
        return " ".join(words)

    def set_state(self, text: str) -> None:
        parts = text.split()
        if len(parts) != _KEY_WORDS + 1:
            raise ValueError(
                f"Expected {_KEY_WORDS + 1} integers in RNG snapshot, got {len(parts)}"
            )
        values = [int(part) for part in parts]
        key, pos = values[:_KEY_WORDS], values[_KEY_WORDS]
        if any(word < 0 or word > _WORD_MAX for word in key):
            raise ValueError("RNG snapshot word outside the 32-bit range")
        if not 0 <= pos <= _KEY_WORDS:
            raise ValueError(f"RNG snapshot position {pos} outside 0..{_KEY_WORDS}")
        self._bit_generator.state = {
            "bit_generator": "MT19937",
            "state": {"key": np.array(key, dtype=np.uint32), "pos": pos},
        }

    def copy(self) -> "MersenneTwisterSource":
        clone = MersenneTwisterSource.__new__(MersenneTwisterSource)
        clone._bit_generator = np.random.MT19937()
        clone._bit_generator.state = self._bit_generator.state
        return clone
