"""Synthetic snare drum: two coupled oscillators plus filtered noise."""

import math
import random
from typing import Optional

from .svf import Svf

__all__ = ["SyntheticSnareDrum"]

_ONE_TWELFTH = 1.0 / 12.0


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _distorted_sine(phase: float) -> float:
    triangle = (phase if phase < 0.5 else 1.0 - phase) * 4.0 - 1.3
    return 2.0 * triangle / (1.0 + abs(triangle))


class SyntheticSnareDrum:
    """Naive snare model with 909-style mode ratio, coupling and noise shaping.

    ``rng`` is any object with a ``random()`` method.
    """

    def __init__(self, sample_rate: float, rng: Optional[random.Random] = None) -> None:
        self.sample_rate = float(sample_rate)
        self._rng = rng if rng is not None else random.Random()

        self._phase = [0.0, 0.0]
        self._drum_amplitude = 0.0
        self._snare_amplitude = 0.0
        self._fm = 0.0
        self._hold_counter = 0
        self._even = True

        self.sustain = False
        self.accent = 0.6
        self.freq = 200.0
        self.fm_amount = 0.1
        self.decay = 0.3
        self.snappy = 0.7

        self._trig = False

        self._drum_lp = Svf(self.sample_rate)
        self._snare_hp = Svf(self.sample_rate)
        self._snare_lp = Svf(self.sample_rate)

    @property
    def accent(self) -> float:
        """Accent, clamped to 0..1."""
        return self._accent

    @accent.setter
    def accent(self, value: float) -> None:
        self._accent = _clamp(value, 0.0, 1.0)

    @property
    def freq(self) -> float:
        """Root frequency in Hz, clamped to 0..sample_rate."""
        return self._f0 * self.sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._f0 = _clamp(value / self.sample_rate, 0.0, 1.0)

    @property
    def fm_amount(self) -> float:
        """Amount of FM sweep, clamped to 0..1."""
        return self._fm_amount_setting

    @fm_amount.setter
    def fm_amount(self, value: float) -> None:
        value = _clamp(value, 0.0, 1.0)
        self._fm_amount_setting = value
        self._fm_amount = value * value

    @property
    def decay(self) -> float:
        """Length of the decay, at least 0."""
        return self._decay

    @decay.setter
    def decay(self, value: float) -> None:
        self._decay = max(value, 0.0)

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

    def process(self, trigger: bool = False) -> float:
        """Return the next sample; ``trigger`` strikes the drum."""
        sr = self.sample_rate
        decay = self._decay
        f0 = self._f0
        fm_amount = self._fm_amount

        decay_xt = decay * (1.0 + decay * (decay - 1.0))
        drum_decay = 1.0 - 1.0 / (0.015 * sr) * 2.0 ** (
            _ONE_TWELFTH * (-decay_xt * 72.0 - fm_amount * 12.0 + self._snappy * 7.0)
        )
        snare_decay = 1.0 - 1.0 / (0.01 * sr) * 2.0 ** (
            _ONE_TWELFTH * (-decay * 60.0 - self._snappy * 7.0)
        )
        fm_decay = 1.0 - 1.0 / (0.007 * sr)

        snappy = _clamp(self._snappy * 1.1 - 0.05, 0.0, 1.0)
        drum_level = math.sqrt(1.0 - snappy)
        snare_level = math.sqrt(snappy)

        snare_f_min = min(10.0 * f0, 0.5)
        snare_f_max = min(35.0 * f0, 0.5)

        self._snare_hp.frequency = snare_f_min * sr
        self._snare_lp.frequency = snare_f_max * sr
        self._snare_lp.resonance = 0.5 + 2.0 * snappy
        self._drum_lp.frequency = 3.0 * f0 * sr

        if trigger or self._trig:
            self._trig = False
            self._snare_amplitude = self._drum_amplitude = 0.3 + 0.7 * self._accent
            self._fm = 1.0
            self._phase = [0.0, 0.0]
            self._hold_counter = int((0.04 + decay * 0.03) * sr)

        self._even = not self._even
        if self.sustain:
            self._snare_amplitude = self._accent * decay
            self._drum_amplitude = self._snare_amplitude
            self._fm = 0.0
        else:
            if self._drum_amplitude > 0.03 or self._even:
                self._drum_amplitude *= drum_decay
            if self._hold_counter:
                self._hold_counter -= 1
            else:
                self._snare_amplitude *= snare_decay
            self._fm *= fm_decay

        # Oscillator resets in the 909 circuit leak into one another.
        reset_noise_amount = _clamp((0.125 - f0) * 8.0, 0.0, 1.0)
        reset_noise_amount *= reset_noise_amount
        reset_noise_amount *= fm_amount
        reset_noise = sum(-1.0 if p > 0.5 else 1.0 for p in self._phase)
        reset_noise *= reset_noise_amount * 0.025

        f = f0 * (1.0 + fm_amount * (4.0 * self._fm))
        phases = [self._phase[0] + f, self._phase[1] + f * 1.47]
        if reset_noise_amount > 0.1:
            phases = [1.0 - p if p >= 1.0 + reset_noise else p for p in phases]
        else:
            phases = [p - 1.0 if p >= 1.0 else p for p in phases]
        self._phase = phases

        drum = -0.1
        drum += _distorted_sine(phases[0]) * 0.60
        drum += _distorted_sine(phases[1]) * 0.25
        drum *= self._drum_amplitude * drum_level

        self._drum_lp.process(drum)
        drum = self._drum_lp.low

        noise = self._rng.random()
        self._snare_lp.process(noise)
        self._snare_hp.process(self._snare_lp.low)
        snare = self._snare_hp.high
        snare = (snare + 0.1) * (self._snare_amplitude + self._fm) * snare_level

        return snare + drum