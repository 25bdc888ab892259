"""One-pole low-pass / high-pass filter."""

import enum
import math
from typing import Iterable, List

__all__ = ["OnePoleMode", "OnePole"]


class OnePoleMode(enum.Enum):
    """Response of a :class:`OnePole` filter."""

    LOW_PASS = enum.auto()
    HIGH_PASS = enum.auto()


class OnePole:
    """One-pole filter with a normalised cutoff frequency (0..0.497)."""

    _MAX_FREQUENCY = 0.497

    def __init__(self) -> None:
        self._state = 0.0
        self._frequency = 0.0
        self._g = 0.0
        self._gi = 1.0
        self.mode = OnePoleMode.LOW_PASS

    def reset(self) -> None:
        """Clear the filter state, keeping frequency and mode."""
        self._state = 0.0

    @property
    def frequency(self) -> float:
        """Cutoff as a fraction of the sample rate, clipped at 0.497."""
        return self._frequency

    @frequency.setter
    def frequency(self, value: float) -> None:
        value = min(value, self._MAX_FREQUENCY)
        self._frequency = value
        self._g = math.tan(math.pi * value)
        self._gi = 1.0 / (1.0 + self._g)

    def process(self, value: float) -> float:
        """Filter one sample."""
        lp = (self._g * value + self._state) * self._gi
        self._state = self._g * (value - lp) + lp
        if self.mode is OnePoleMode.HIGH_PASS:
            return value - lp
        return lp

    def process_block(self, samples: Iterable[float]) -> List[float]:
        """Filter a block of samples and return the results."""
        return [self.process(value) for value in samples]