import time

import numpy as np
import pytest

from evomerge.core.rng import A, C, M, LCG, default_seed, make_rng


def test_first_draw_follows_recurrence():
    rng = LCG(123)
    assert rng.next_bits(48) == (A * 123 + C) % M
    assert rng.state == (A * 123 + C) % M


def test_state_stays_below_modulus():
    rng = LCG(2**64 - 1)
    for _ in range(100):
        rng.next_bits(32)
        assert 0 <= rng.state < M


def test_same_seed_same_stream():
    a, b = make_rng(42), make_rng(42)
    seq_a = [a.next_bits(17), a.next_double(), a.next_range(-3.0, 9.0)] + list(a.next_values(5, 0.0, 1.0))
    seq_b = [b.next_bits(17), b.next_double(), b.next_range(-3.0, 9.0)] + list(b.next_values(5, 0.0, 1.0))
    assert seq_a == seq_b


def test_different_seeds_diverge():
    assert LCG(1).next_bits(48) != LCG(2).next_bits(48)


def test_top_bits():
    a, b = LCG(7), LCG(7)
    full = a.next_bits(48)
    assert b.next_bits(16) == full >> 32
    assert LCG(7).next_bits(0) == 0


@pytest.mark.parametrize("bits", [-1, 49, 64, 3.0, True])
def test_bits_out_of_range_rejected(bits):
    rng = LCG(5)
    with pytest.raises(ValueError):
        rng.next_bits(bits)
    assert rng.state == 5


def test_double_in_unit_interval():
    rng = LCG(99)
    for _ in range(1000):
        d = rng.next_double()
        assert 0.0 <= d < 1.0


def test_range_property():
    rng = LCG(123)
    for _ in range(1000):
        v = rng.next_range(0.05, 0.3)
        assert 0.05 <= v <= 0.3
    for _ in range(1000):
        assert -10.0 <= rng.next_range(-10.0, -2.5) <= -2.5


def test_int_bounds_truncate():
    rng = LCG(3)
    vals = [rng.next_range(0, 10) for _ in range(200)]
    assert all(isinstance(v, int) and 0 <= v < 10 for v in vals)


def test_next_values_matches_sequential_draws():
    a, b = LCG(11), LCG(11)
    arr = a.next_values(8, 0.0, 1000.0)
    assert arr.dtype == np.float64
    assert list(arr) == [b.next_range(0.0, 1000.0) for _ in range(8)]
    assert a.state == b.state
    assert LCG(11).next_values(4, 0, 6).dtype == np.int64


def test_default_seed_is_seconds_of_day():
    t = time.strptime("12:34:56", "%H:%M:%S")
    assert default_seed(t) == 12 * 3600 + 34 * 60 + 56
    assert 0 <= default_seed() < 24 * 3600
    assert LCG().state == default_seed()
