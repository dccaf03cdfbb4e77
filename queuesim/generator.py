from typing import Iterator, List

from .errors import InvalidGeneratorParameters


class SequenceGenerator:
    """
    Linear congruential generator:

      x_{n+1} = (multiplier * x_n + increment) mod mod

    The first value is the seed itself; `next()` is the only call that
    advances the state, so a run is fully reproducible from the four
    parameters.
    """

    def __init__(self, seed: int, multiplier: int, increment: int, mod: int):
        if mod <= 0:
            raise InvalidGeneratorParameters("mod must be > 0")
        if multiplier <= 0 or multiplier >= mod:
            raise InvalidGeneratorParameters("multiplier must be in range (0, mod)")
        if increment < 0 or increment >= mod:
            raise InvalidGeneratorParameters("increment must be in range [0, mod)")
        if seed < 0 or seed >= mod:
            raise InvalidGeneratorParameters("seed must be in range [0, mod)")

        self._seed = seed
        self._multiplier = multiplier
        self._increment = increment
        self._mod = mod
        self.current = seed

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def multiplier(self) -> int:
        return self._multiplier

    @property
    def increment(self) -> int:
        return self._increment

    @property
    def mod(self) -> int:
        return self._mod

    def peek(self) -> int:
        return (self._multiplier * self.current + self._increment) % self._mod

    def next(self) -> int:
        self.current = self.peek()
        return self.current

    def generate_batch(self, n: int) -> List[int]:
        """
        Current value followed by the next n-1 values.
        Advances the state by n-1 steps.
        """
        if n <= 0:
            return []
        nums = [self.current]
        for _ in range(1, n):
            nums.append(self.next())
        return nums

    def reset(self) -> None:
        self.current = self._seed

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()

    def __repr__(self) -> str:
        return (
            f"SequenceGenerator(seed={self._seed}, multiplier={self._multiplier}, "
            f"increment={self._increment}, mod={self._mod}, current={self.current})"
        )
