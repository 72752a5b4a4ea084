# Area: RNG Tests
"""Tests for the Mersenne Twister uniform source."""

import numpy as np
import pytest

from airline_seats.rng import MersenneTwisterSource


class TestDraws:
    """Tests for raw and normalized draws."""

    def test_max_value_is_32_bit(self):
        assert MersenneTwisterSource(seed=1).max_value() == 2 ** 32 - 1

    def test_matches_numpy_mt19937_stream(self):
        source = MersenneTwisterSource(seed=99)
        reference = np.random.MT19937(99)
        assert [source.draw() for _ in range(5)] == [int(reference.random_raw()) for _ in range(5)]

    def test_uniform_in_unit_interval(self):
        source = MersenneTwisterSource(seed=3)
        values = [source.uniform() for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_same_seed_same_stream(self):
        a = MersenneTwisterSource(seed=42)
        b = MersenneTwisterSource(seed=42)
        assert [a.draw() for _ in range(10)] == [b.draw() for _ in range(10)]

    def test_different_seeds_diverge(self):
        a = MersenneTwisterSource(seed=1)
        b = MersenneTwisterSource(seed=2)
        assert [a.draw() for _ in range(10)] != [b.draw() for _ in range(10)]


class TestStateRoundTrip:
    """Tests for textual save/restore of the stream position."""

    def test_restore_replays_draws(self):
        source = MersenneTwisterSource(seed=5)
        source.draw()
        saved = source.get_state()
        first = [source.draw() for _ in range(700)]
        source.set_state(saved)
        assert [source.draw() for _ in range(700)] == first

    def test_restore_into_other_source(self):
        a = MersenneTwisterSource(seed=5)
        a.draw()
        b = MersenneTwisterSource(seed=6)
        b.set_state(a.get_state())
        assert a.draw() == b.draw()

    def test_state_text_format(self):
        text = MersenneTwisterSource(seed=5).get_state()
        parts = text.split(" ")
        assert len(parts) == 625
        assert "|" not in text and "," not in text

    def test_copy_is_independent(self):
        a = MersenneTwisterSource(seed=8)
        b = a.copy()
        assert a.draw() == b.draw()
        a.draw()
        assert a.get_state() != b.get_state()


class TestMalformedState:
    """Tests for rejected snapshots."""

    def test_wrong_word_count(self):
        with pytest.raises(ValueError):
            MersenneTwisterSource(seed=1).set_state("1 2 3")

    def test_non_integer_word(self):
        words = MersenneTwisterSource(seed=1).get_state().split()
        words[0] = "abc"
        with pytest.raises(ValueError):
            MersenneTwisterSource(seed=1).set_state(" ".join(words))

    def test_word_out_of_range(self):
        words = MersenneTwisterSource(seed=1).get_state().split()
        words[3] = str(2 ** 32)
        with pytest.raises(ValueError):
            MersenneTwisterSource(seed=1).set_state(" ".join(words))

    def test_position_out_of_range(self):
        words = MersenneTwisterSource(seed=1).get_state().split()
        words[-1] = "625"
        with pytest.raises(ValueError):
            MersenneTwisterSource(seed=1).set_state(" ".join(words))
