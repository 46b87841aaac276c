import numpy as np

from color_wheel.random_palette import generate_random


def assert_even_spacing(result):
    for i, c in enumerate(result.colors):
        d = (c.hsl.h - result.base_hue - 72 * i) % 360
        assert min(d, 360 - d) < 1e-9


def assert_valid(result):
    assert 0 <= result.base_hue < 360
    assert len(result.colors) == 5
    assert [c.position for c in result.colors] == [0, 1, 2, 3, 4]
    assert_even_spacing(result)
    for c in result.colors:
        assert 0.6 <= c.hsl.s < 1.0
        assert 0.4 <= c.hsl.l < 0.8


def test_seeded():
    a = generate_random(np.random.default_rng(1234))
    b = generate_random(np.random.default_rng(1234))
    assert_valid(a)
    assert [c.hex for c in a.colors] == [c.hex for c in b.colors]


def test_unseeded_runs():
    for _ in range(20):
        assert_valid(generate_random())


class _Ceiling:
    """Always returns the exclusive upper bound."""

    def uniform(self, lo, hi):
        return hi


def test_upper_bounds_stay_exclusive():
    result = generate_random(_Ceiling())
    assert result.base_hue == 0.0
    assert [c.hsl.h for c in result.colors] == [0, 72, 144, 216, 288]
    assert all(c.hsl.s == 0.6 and c.hsl.l == 0.4 for c in result.colors)
