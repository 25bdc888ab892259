"""Random impulse train through a resonant filter."""

import math
import random
from typing import Optional

from .svf import Svf

__all__ = ["Particle"]

_RATIO_FRAC = 1.0 / 12.0
_DENSITY_SCALE = 0.3


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class Particle:
    """Random impulses filtered by a band-pass whose frequency is re-randomised.

    ``rng`` is any object with a ``random()`` method.
    """

    def __init__(self, sample_rate: float, rng: Optional[random.Random] = None) -> None:
        self.sample_rate = float(sample_rate)
        self._rng = rng if rng is not None else random.Random()

        self.sync = False
        self._aux = 0.0
        self._frequency = 0.0
        self.frequency = 440.0
        self._resonance = 0.9
        self._density = 0.5
        self._gain = 1.0
        self._spread = 1.0

        self._rand_freq = 0.0
        self.random_freq = self.sample_rate / 48.0
        self._rand_phase = 0.0

        self._pre_gain = 0.0
        self._filter = Svf(self.sample_rate)
        self._filter.drive = 0.7

    @property
    def frequency(self) -> float:
        """Centre frequency of the filter in Hz, clamped to 0..sample_rate."""
        return self._frequency * self.sample_rate

    @frequency.setter
    def frequency(self, value: float) -> None:
        self._frequency = _clamp(value / self.sample_rate, 0.0, 1.0)

    @property
    def resonance(self) -> float:
        """Filter resonance, clamped to 0..1."""
        return self._resonance

    @resonance.setter
    def resonance(self, value: float) -> None:
        self._resonance = _clamp(value, 0.0, 1.0)

    @property
    def random_freq(self) -> float:
        """Rate in Hz at which the filter frequency is re-randomised."""
        return self._rand_freq * self.sample_rate

    @random_freq.setter
    def random_freq(self, value: float) -> None:
        self._rand_freq = _clamp(value / self.sample_rate, 0.0, 1.0)

    @property
    def density(self) -> float:
        """Impulse density; works 0..1, impulse probability is 0.3 times it."""
        return self._density / _DENSITY_SCALE

    @density.setter
    def density(self, value: float) -> None:
        self._density = _clamp(value * _DENSITY_SCALE, 0.0, 1.0)

    @property
    def gain(self) -> float:
        """Impulse gain, clamped to 0..1."""
        return self._gain

    @gain.setter
    def gain(self, value: float) -> None:
        self._gain = _clamp(value, 0.0, 1.0)

    @property
    def spread(self) -> float:
        """Random spread of the filter frequency in semitones, at least 0."""
        return self._spread

    @spread.setter
    def spread(self, value: float) -> None:
        self._spread = 0.0 if value < 0.0 else value

    @property
    def noise(self) -> float:
        """Raw impulse value of the last processed sample."""
        return self._aux

    def process(self) -> float:
        """Return the next filtered sample."""
        u = self._rng.random()
        s = 0.0

        if u <= self._density or self.sync:
            if u <= self._density:
                s = u * self._gain
            self._rand_phase += self._rand_freq

            if self._rand_phase >= 1.0 or self.sync:
                if self._rand_phase >= 1.0:
                    self._rand_phase -= 1.0
                spread = 2.0 * self._rng.random() - 1.0
                f = min(2.0 ** (_RATIO_FRAC * self._spread * spread) * self._frequency, 0.25)
                denominator = math.sqrt(self._resonance * f * math.sqrt(self._density))
                self._pre_gain = 0.5 / denominator if denominator > 0.0 else math.inf
                self._filter.frequency = f * self.sample_rate
                self._filter.resonance = self._resonance
        self._aux = s

        self._filter.process(self._pre_gain * s)
        return self._filter.band