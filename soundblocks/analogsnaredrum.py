"""808-style analog snare drum model."""

import math
import random
from typing import List, Optional

from .overdrive import soft_clip
from .svf import Svf

__all__ = ["AnalogSnareDrum"]

_ONE_TWELFTH = 1.0 / 12.0
_TWO_PI = 2.0 * math.pi
_MODE_FREQUENCIES = (1.00, 2.00, 3.18, 4.16, 5.62)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class AnalogSnareDrum:
    """Snare drum: five pulse-excited resonant modes plus filtered noise.

    ``rng`` is any object with a ``random()`` method.
    """

    NUM_MODES = len(_MODE_FREQUENCIES)

    def __init__(self, sample_rate: float, rng: Optional[random.Random] = None) -> None:
        self.sample_rate = float(sample_rate)
        self._rng = rng if rng is not None else random.Random()
        self._trig = False

        self._pulse_remaining = 0
        self._pulse = 0.0
        self._pulse_height = 0.0
        self._pulse_lp = 0.0
        self._noise_envelope = 0.0

        self.sustain = False
        self.accent = 0.6
        self.freq = 200.0
        self.decay = 0.3
        self.snappy = 0.7
        self.tone = 0.5

        self._resonators: List[Svf] = [Svf(self.sample_rate) for _ in _MODE_FREQUENCIES]
        self._phases: List[float] = [0.0] * self.NUM_MODES
        self._noise_filter = Svf(self.sample_rate)

    @property
    def accent(self) -> float:
        """Accent, clamped to 0..1."""
        return self._accent

    @accent.setter
    def accent(self, value: float) -> None:
        self._accent = _clamp(value, 0.0, 1.0)

    @property
    def freq(self) -> float:
        """Root frequency in Hz, clamped to 0..0.4 * sample_rate."""
        return self._f0 * self.sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._f0 = _clamp(value / self.sample_rate, 0.0, 0.4)

    @property
    def tone(self) -> float:
        """Brightness, clamped to 0..1; 1 is bright, 0 is dark."""
        return self._tone / 2.0

    @tone.setter
    def tone(self, value: float) -> None:
        self._tone = _clamp(value, 0.0, 1.0) * 2.0

    @property
    def decay(self) -> float:
        """Length of the decay; works with positive numbers."""
        return self._decay

    @decay.setter
    def decay(self, value: float) -> None:
        self._decay = value

    @property
    def snappy(self) -> float:
        """Mix between snare and drum, clamped to 0..1; 1 is just snare."""
        return self._snappy

    @snappy.setter
    def snappy(self, value: float) -> None:
        self._snappy = _clamp(value, 0.0, 1.0)

    def trig(self) -> None:
        """Strike the drum on the next sample."""
        self._trig = True

    def _mode_gains(self) -> List[float]:
        tone = self._tone
        if tone < 0.666667:
            tone *= 1.5
            gains = [1.5 + (1.0 - tone) * (1.0 - tone) * 4.5, 2.0 * tone + 0.15]
            gains.extend([0.0] * (self.NUM_MODES - 2))
            return gains
        tone = (tone - 0.666667) * 3.0
        gains = [1.5 - tone * 0.5, 2.15 - tone * 0.7]
        for _ in range(2, self.NUM_MODES):
            gains.append(tone)
            tone *= tone
        return gains

    def process(self, trigger: bool = False) -> float:
        """Return the next sample; ``trigger`` strikes the drum."""
        sr = self.sample_rate
        decay = self._decay
        decay_xt = decay * (1.0 + decay * (decay - 1.0))
        trigger_duration = int(1.0e-3 * sr)
        pulse_decay_time = 0.1e-3 * sr
        q = 2000.0 * 2.0 ** (_ONE_TWELFTH * decay_xt * 84.0)
        noise_envelope_decay = 1.0 - 0.0017 * 2.0 ** (
            _ONE_TWELFTH * (-decay * (50.0 + self._snappy * 10.0))
        )
        exciter_leak = self._snappy * (2.0 - self._snappy) * 0.1
        snappy = _clamp(self._snappy * 1.1 - 0.05, 0.0, 1.0)

        if trigger or self._trig:
            self._trig = False
            self._pulse_remaining = trigger_duration
            self._pulse_height = 3.0 + 7.0 * self._accent
            self._noise_envelope = 2.0

        freqs = []
        for i, (ratio, resonator) in enumerate(zip(_MODE_FREQUENCIES, self._resonators)):
            f = min(self._f0 * ratio, 0.499)
            freqs.append(f)
            resonator.frequency = f * sr
            resonator.resonance = f * (q if i == 0 else q * 0.25) * 0.2

        gains = self._mode_gains()

        f_noise = self._f0 * 16.0
        self._noise_filter.frequency = f_noise * sr
        self._noise_filter.resonance = f_noise * 1.5

        if self._pulse_remaining:
            self._pulse_remaining -= 1
            pulse = (
                self._pulse_height if self._pulse_remaining else self._pulse_height - 1.0
            )
            self._pulse = pulse
        else:
            self._pulse *= 1.0 - 1.0 / pulse_decay_time
            pulse = self._pulse

        sustain_gain = self._accent * decay

        self._pulse_lp = min(max(self._pulse_lp, pulse), 0.75)

        shell = 0.0
        for i, (f, gain, resonator) in enumerate(zip(freqs, gains, self._resonators)):
            if i == 0:
                excitation = (pulse - self._pulse_lp) + 0.006 * pulse
            else:
                excitation = 0.026 * pulse

            phase = self._phases[i] + f
            if phase >= 1.0:
                phase -= 1.0
            self._phases[i] = phase

            resonator.process(excitation)

            if self.sustain:
                shell += gain * math.sin(phase * _TWO_PI) * sustain_gain * 0.25
            else:
                shell += gain * (resonator.band + excitation * exciter_leak)
        shell = soft_clip(shell)

        noise = 2.0 * self._rng.random() - 1.0
        if noise < 0.0:
            noise = 0.0
        self._noise_envelope *= noise_envelope_decay
        level = sustain_gain if self.sustain else self._noise_envelope
        noise *= level * snappy * 2.0

        self._noise_filter.process(noise)
        noise = self._noise_filter.band

        return noise + shell * (1.0 - snappy)