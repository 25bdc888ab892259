"""Normalised ramp generator."""

import math

__all__ = ["Phasor"]

_TWO_PI = 2.0 * math.pi


class Phasor:
    """Ramp moving from 0 to 1 at ``freq`` Hz; the initial phase is in radians."""

    def __init__(
        self, sample_rate: float, freq: float = 1.0, initial_phase: float = 0.0
    ) -> None:
        self.sample_rate = float(sample_rate)
        self._phase = initial_phase
        self._freq = 0.0
        self._inc = 0.0
        self.freq = freq

    @property
    def freq(self) -> float:
        """Frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, value: float) -> None:
        self._freq = value
        self._inc = _TWO_PI * value / self.sample_rate

    def process(self) -> float:
        """Return the current ramp value and advance one sample."""
        out = self._phase / _TWO_PI
        self._phase += self._inc
        if self._phase > _TWO_PI:
            self._phase -= _TWO_PI
        if self._phase < 0.0:
            self._phase = 0.0
        return out