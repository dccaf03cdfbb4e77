import pytest

from queuesim.models import SimulationConfig


class ScriptedGenerator:
    """Stands in for the LCG with a fixed list of raw values."""

    def __init__(self, values, mod=3):
        self.values = list(values)
        self.mod = mod
        self.calls = 0

    def next(self):
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def scripted():
    return ScriptedGenerator


@pytest.fixture
def example_config():
    # seed, multiplier, increment, mod, clients, servers, arrivals/min, services/min
    return SimulationConfig.from_values([1, 3, 5, 13, 2, 1, 4, 10])


def make_config(clients, servers, arrival_rate, service_rate, seed=1, multiplier=1, increment=0, mod=3):
    """Defaults give a constant generator (always 1 of mod 3): every draw equals its base."""
    return SimulationConfig(seed, multiplier, increment, mod, clients, servers, arrival_rate, service_rate)
