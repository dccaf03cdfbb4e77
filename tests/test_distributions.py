import math

import pytest

from queuesim.distributions import (
    base_time, mean_variance, normalized, random_time, time_bounds, time_distribution
)
from queuesim.generator import SequenceGenerator


@pytest.mark.parametrize("rate, expected", [(1, 60), (4, 15), (7, 9), (10, 6), (60, 1), (120, 1)])
def test_base_time(rate, expected):
    assert base_time(rate) == expected


def test_normalized_covers_endpoints(scripted):
    gen = scripted([0, 1, 2], mod=3)
    assert normalized(gen) == -0.5
    assert normalized(gen) == 0.0
    assert normalized(gen) == 0.5


def test_random_time_extremes(scripted):
    gen = scripted([0, 1, 2], mod=3)
    assert random_time(15, gen) == 8     # ceil(7.5)
    assert random_time(15, gen) == 15
    assert random_time(15, gen) == 23    # ceil(22.5)


def test_random_time_known_values():
    gen = SequenceGenerator(1, 3, 5, 13)
    assert random_time(15, gen) == 18   # draw 8
    assert random_time(6, gen) == 5     # draw 3
    assert random_time(15, gen) == 9    # draw 1


@pytest.mark.parametrize("base", [1, 2, 3, 6, 9, 15, 60])
def test_random_time_stays_in_bounds(base):
    gen = SequenceGenerator(seed=12345, multiplier=1103515245, increment=12345, mod=2 ** 31)
    lo, hi = time_bounds(base)
    for _ in range(2000):
        t = random_time(base, gen)
        assert lo <= t <= hi
        assert t >= 1


def test_time_bounds():
    assert time_bounds(15) == (8, 23)
    assert time_bounds(1) == (1, 2)


def test_time_distribution_sums_to_one_within_bounds():
    for base in (1, 2, 3, 6, 15, 60):
        probs = time_distribution(base)
        assert sum(probs.values()) == 1
        lo, hi = time_bounds(base)
        # lo itself is reachable only from the single raw value 0
        assert lo <= min(probs) <= lo + 1
        assert max(probs) == hi


@pytest.mark.parametrize(
    "base, mean, var",
    [(1, 1.5, 0.25), (2, 2.5, 0.25), (6, 6.5, 35 / 12), (5, 5.5, 2.25)],
)
def test_mean_variance_of_rounded_draw(base, mean, var):
    m, v = mean_variance(base)
    assert math.isclose(m, mean)
    assert math.isclose(v, var)


def test_mean_variance_matches_long_lcg_run():
    gen = SequenceGenerator(seed=12345, multiplier=1103515245, increment=12345, mod=2 ** 31)
    for base in (1, 2, 3, 9):
        draws = [random_time(base, gen) for _ in range(20000)]
        mean, _ = mean_variance(base)
        assert sum(draws) / len(draws) == pytest.approx(mean, abs=0.05)
