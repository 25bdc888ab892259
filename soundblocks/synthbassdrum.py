"""Synthetic bass drum: an FM-swept oscillator with envelopes and a click."""

import math
import random
from typing import Optional

from .svf import Svf

__all__ = ["SyntheticBassDrumClick", "SyntheticBassDrumAttackNoise", "SyntheticBassDrum"]

_ONE_TWELFTH = 1.0 / 12.0
_TWO_PI = 2.0 * math.pi


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _distorted_sine(phase: float, phase_noise: float, dirtiness: float) -> float:
    phase += phase_noise * dirtiness
    phase -= math.trunc(phase)
    triangle = (phase if phase < 0.5 else 1.0 - phase) * 4.0 - 1.0
    sine = 2.0 * triangle / (1.0 + abs(triangle))
    clean_sine = math.sin(_TWO_PI * (phase + 0.75))
    return sine + (1.0 - dirtiness) * (clean_sine - sine)


def _transistor_vca(s: float, gain: float) -> float:
    s = (s - 0.6) * gain
    return 3.0 * s / (2.0 + abs(s)) + gain * 0.3


class SyntheticBassDrumClick:
    """Click generator: slewed, high-passed and low-pass filtered input."""

    def __init__(self, sample_rate: float) -> None:
        self._lp = 0.0
        self._hp = 0.0
        self._filter = Svf(sample_rate)
        self._filter.frequency = 5000.0
        self._filter.resonance = 1.0

    def process(self, value: float) -> float:
        """Return the click output for one input sample."""
        error = value - self._lp
        self._lp += (0.5 if error > 0 else 0.1) * error
        self._hp += 0.04 * (self._lp - self._hp)
        self._filter.process(self._lp - self._hp)
        return self._filter.low


class SyntheticBassDrumAttackNoise:
    """Band-limited noise for the drum's attack.

    ``rng`` is any object with a ``random()`` method.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._lp = 0.0
        self._hp = 0.0

    def process(self) -> float:
        """Return the next noise sample."""
        sample = self._rng.random()
        self._lp += 0.05 * (sample - self._lp)
        self._hp += 0.005 * (self._lp - self._hp)
        return self._lp - self._hp


class SyntheticBassDrum:
    """Naive bass drum: modulated oscillator with FM and amplitude envelopes.

    ``rng`` is any object with a ``random()`` method.
    """

    def __init__(self, sample_rate: float, rng: Optional[random.Random] = None) -> None:
        self.sample_rate = float(sample_rate)
        self._rng = rng if rng is not None else random.Random()
        self._trig = False

        self._phase = 0.0
        self._phase_noise = 0.0
        self._f0 = 0.0
        self._fm = 0.0
        self._fm_lp = 0.0
        self._body_env = 0.0
        self._body_env_lp = 0.0
        self._transient_env = 0.0
        self._transient_env_lp = 0.0
        self._body_env_pulse_width = 0
        self._fm_pulse_width = 0
        self._tone_lp = 0.0

        self.freq = 100.0
        self.sustain = False
        self.accent = 0.2
        self.tone = 0.6
        self.decay = 0.7
        self.dirtiness = 0.3
        self.fm_envelope_amount = 0.6
        self.fm_envelope_decay = 0.3

        self._click = SyntheticBassDrumClick(self.sample_rate)
        self._noise = SyntheticBassDrumAttackNoise(self._rng)

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
        return self._new_f0 * self.sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._new_f0 = _clamp(value / self.sample_rate, 0.0, 1.0)

    @property
    def tone(self) -> float:
        """Brightness, clamped to 0..1."""
        return self._tone

    @tone.setter
    def tone(self, value: float) -> None:
        self._tone = _clamp(value, 0.0, 1.0)

    @property
    def decay(self) -> float:
        """Decay length, clamped to 0..1."""
        return self._decay_setting

    @decay.setter
    def decay(self, value: float) -> None:
        value = _clamp(value, 0.0, 1.0)
        self._decay_setting = value
        self._decay = value * value

    @property
    def dirtiness(self) -> float:
        """Amount of grime, clamped to 0..1."""
        return self._dirtiness

    @dirtiness.setter
    def dirtiness(self, value: float) -> None:
        self._dirtiness = _clamp(value, 0.0, 1.0)

    @property
    def fm_envelope_amount(self) -> float:
        """Depth of the pitch sweep on a hit, clamped to 0..1."""
        return self._fm_envelope_amount

    @fm_envelope_amount.setter
    def fm_envelope_amount(self, value: float) -> None:
        self._fm_envelope_amount = _clamp(value, 0.0, 1.0)

    @property
    def fm_envelope_decay(self) -> float:
        """Length of the pitch sweep, clamped to 0..1."""
        return self._fm_envelope_decay_setting

    @fm_envelope_decay.setter
    def fm_envelope_decay(self, value: float) -> None:
        value = _clamp(value, 0.0, 1.0)
        self._fm_envelope_decay_setting = value
        self._fm_envelope_decay = value * value

    def trig(self) -> None:
        """Strike the drum on the next sample."""
        self._trig = True

    def process(self, trigger: bool = False) -> float:
        """Return the next sample; ``trigger`` strikes the drum."""
        sr = self.sample_rate
        new_f0 = self._new_f0
        dirtiness = self._dirtiness * max(1.0 - 8.0 * new_f0, 0.0)

        fm_decay = 1.0 - 1.0 / (0.008 * (1.0 + self._fm_envelope_decay * 4.0) * sr)
        body_env_decay = 1.0 - 1.0 / (0.02 * sr) * 2.0 ** (
            (-self._decay * 60.0) * _ONE_TWELFTH
        )
        transient_env_decay = 1.0 - 1.0 / (0.005 * sr)
        tone_f = min(4.0 * new_f0 * 2.0 ** ((self._tone * 108.0) * _ONE_TWELFTH), 1.0)
        transient_level = self._tone

        if trigger or self._trig:
            self._trig = False
            self._fm = 1.0
            self._body_env = self._transient_env = 0.3 + 0.7 * self._accent
            self._body_env_pulse_width = int(sr * 0.001)
            self._fm_pulse_width = int(sr * 0.0013)

        sustain_gain = self._accent * self._decay

        self._phase_noise += 0.002 * (self._rng.random() - 0.5 - self._phase_noise)

        mix = 0.0
        if self.sustain:
            self._f0 = new_f0
            self._phase += self._f0
            if self._phase >= 1.0:
                self._phase -= 1.0
            body = _distorted_sine(self._phase, self._phase_noise, dirtiness)
            mix -= _transistor_vca(body, sustain_gain)
        else:
            if self._fm_pulse_width:
                self._fm_pulse_width -= 1
                self._phase = 0.25
            else:
                self._fm *= fm_decay
                fm = 1.0 + self._fm_envelope_amount * 3.5 * self._fm_lp
                self._f0 = new_f0
                self._phase += min(self._f0 * fm, 0.5)
                if self._phase >= 1.0:
                    self._phase -= 1.0

            if self._body_env_pulse_width:
                self._body_env_pulse_width -= 1
            else:
                self._body_env *= body_env_decay
                self._transient_env *= transient_env_decay

            envelope_lp_f = 0.1
            self._body_env_lp += envelope_lp_f * (self._body_env - self._body_env_lp)
            self._transient_env_lp += envelope_lp_f * (
                self._transient_env - self._transient_env_lp
            )
            self._fm_lp += envelope_lp_f * (self._fm - self._fm_lp)

            body = _distorted_sine(self._phase, self._phase_noise, dirtiness)
            transient = self._click.process(
                0.0 if self._body_env_pulse_width else 1.0
            ) + self._noise.process()

            mix -= _transistor_vca(body, self._body_env_lp)
            mix -= transient * self._transient_env_lp * transient_level

        self._tone_lp += tone_f * (mix - self._tone_lp)
        return self._tone_lp