import math
from fractions import Fraction
from typing import Dict, Tuple

from .generator import SequenceGenerator


def base_time(rate_per_minute: int) -> int:
    # seconds between events at the given per-minute rate, rounded up
    return math.ceil(60 / rate_per_minute)


def normalized(gen: SequenceGenerator) -> float:
    """Advance the generator and map its value onto [-0.5, 0.5]."""
    return gen.next() / (gen.mod - 1) - 0.5


def random_time(base: int, gen: SequenceGenerator) -> int:
    """
    Perturb `base` uniformly by up to +/-50% and round up.
    Never below 1 for base >= 1 since the factor is at least 0.5.
    """
    return math.ceil(base * (1 + normalized(gen)))


def time_bounds(base: int) -> Tuple[int, int]:
    return math.ceil(base * 0.5), math.ceil(base * 1.5)


def time_distribution(base: int) -> Dict[int, Fraction]:
    """
    Exact law of `random_time(base)` when the perturbation is uniform.

    ceil(X) == k for X in (k-1, k], with X uniform on [base/2, 3*base/2],
    so each k gets the overlap of that interval divided by `base`.
    """
    lo = Fraction(base, 2)
    hi = Fraction(3 * base, 2)
    probs = {}
    for k in range(math.ceil(lo), math.ceil(hi) + 1):
        overlap = min(Fraction(k), hi) - max(Fraction(k - 1), lo)
        if overlap > 0:
            probs[k] = overlap / base
    return probs


def mean_variance(base: int) -> Tuple[float, float]:
    # of the rounded-up draw, not of the continuous perturbation
    probs = time_distribution(base)
    mean = sum(k * p for k, p in probs.items())
    var = sum((k - mean) ** 2 * p for k, p in probs.items())
    return float(mean), float(var)
