"""Signal sources for the simulated measurements.

Several categories (Core Web Vitals, competitors, accessibility, mobile,
schema detection and some security/local flags) are not measured yet; their
values come from a SignalSource so tests and replays can pin them down.
"""

import random
from abc import ABC, abstractmethod
from collections.abc import Mapping


class SignalSource(ABC):
    """Strategy supplying every simulated value by name."""

    @abstractmethod
    def flag(self, name: str, probability: float) -> bool:
        """Return a boolean that is True with the given probability."""
        pass

    @abstractmethod
    def uniform(self, name: str, low: float, high: float) -> float:
        """Return a float in [low, high)."""
        pass


class RandomSignalSource(SignalSource):
    """Production source backed by its own random generator."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def flag(self, name: str, probability: float) -> bool:
        return self._rng.random() < probability

    def uniform(self, name: str, low: float, high: float) -> float:
        return low + self._rng.random() * (high - low)


class FixedSignalSource(SignalSource):
    """
    Deterministic source returning preset values.

    Unknown flags fall back to ``default_flag``; unknown numeric signals
    fall back to the low end of their range.
    """

    def __init__(
        self,
        values: Mapping[str, bool | float] | None = None,
        default_flag: bool = True,
    ):
        self.values = dict(values or {})
        self.default_flag = default_flag

    def flag(self, name: str, probability: float) -> bool:
        return bool(self.values.get(name, self.default_flag))

    def uniform(self, name: str, low: float, high: float) -> float:
        return float(self.values.get(name, low))
