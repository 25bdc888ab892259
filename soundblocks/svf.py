"""Double-sampled, stable state variable filter."""

import math

__all__ = ["Svf"]


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class Svf:
    """State variable filter producing low, high, band, notch and peak outputs.

    Call :meth:`process` once per sample, then read the output attributes.
    """

    def __init__(self, sample_rate: float) -> None:
        self._sr = float(sample_rate)
        self._fc = 200.0
        self._res = 0.5
        self._drive = 0.5
        self._pre_drive = 0.5
        self._freq = 0.25
        self._damp = 0.0
        self._fc_max = self._sr / 3.0

        self._notch = 0.0
        self._low = 0.0
        self._high = 0.0
        self._band = 0.0

        self.low = 0.0
        self.high = 0.0
        self.band = 0.0
        self.notch = 0.0
        self.peak = 0.0

    @property
    def frequency(self) -> float:
        """Cutoff frequency in Hz, clamped to (0, sample_rate / 3]."""
        return self._fc

    @frequency.setter
    def frequency(self, value: float) -> None:
        self._fc = _clamp(value, 1.0e-6, self._fc_max)
        # The filter runs twice per sample, hence the doubled rate.
        self._freq = 2.0 * math.sin(math.pi * min(0.25, self._fc / (self._sr * 2.0)))
        self._update_damp()

    @property
    def resonance(self) -> float:
        """Resonance in the range 0..1."""
        return self._res

    @resonance.setter
    def resonance(self, value: float) -> None:
        self._res = _clamp(value, 0.0, 1.0)
        self._update_damp()
        self._drive = self._pre_drive * self._res

    @property
    def drive(self) -> float:
        """Drive amount; shapes the resonance response. Clamped to 0..10."""
        return self._pre_drive * 10.0

    @drive.setter
    def drive(self, value: float) -> None:
        self._pre_drive = _clamp(value * 0.1, 0.0, 1.0)
        self._drive = self._pre_drive * self._res

    def _update_damp(self) -> None:
        self._damp = min(
            2.0 * (1.0 - self._res ** 0.25),
            min(2.0, 2.0 / self._freq - self._freq * 0.5),
        )

    def _step(self, value: float) -> None:
        self._notch = value - self._damp * self._band
        self._low = self._low + self._freq * self._band
        self._high = self._notch - self._low
        self._band = (
            self._freq * self._high
            + self._band
            - self._drive * self._band * self._band * self._band
        )

    def process(self, value: float) -> None:
        """Filter one input sample, updating every output attribute."""
        self._step(value)
        low = 0.5 * self._low
        high = 0.5 * self._high
        band = 0.5 * self._band
        peak = 0.5 * (self._low - self._high)
        notch = 0.5 * self._notch

        self._step(value)
        self.low = low + 0.5 * self._low
        self.high = high + 0.5 * self._high
        self.band = band + 0.5 * self._band
        self.peak = peak + 0.5 * (self._low - self._high)
        self.notch = notch + 0.5 * self._notch