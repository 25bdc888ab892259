"""808-style hi-hat built from metallic noise, a band-pass and a VCA."""

import math
import random
from typing import Any, Callable, List, Optional

from .svf import Svf

__all__ = ["swing_vca", "linear_vca", "SquareNoise", "HiHat"]

_ONE_TWELFTH = 1.0 / 12.0
_RATIOS = (1.0, 1.304, 1.466, 1.787, 1.932, 2.536)
_PHASE_SCALE = 4294967296.0
_MASK32 = 0xFFFFFFFF


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _semitones_to_ratio(semitones: float) -> float:
    return 2.0 ** (semitones * _ONE_TWELFTH)


def swing_vca(s: float, gain: float) -> float:
    """Asymmetric, saturating VCA."""
    s *= 10.0 if s > 0.0 else 0.1
    s = s / (1.0 + abs(s))
    return (s + 1.0) * gain


def linear_vca(s: float, gain: float) -> float:
    """Plain multiplying VCA."""
    return s * gain


class SquareNoise:
    """Metallic noise from six square oscillators at inharmonic ratios.

    ``f0`` passed to :meth:`process` is a fraction of the sample rate; each
    oscillator frequency is limited to 0.499.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self._phases: List[int] = [0] * len(_RATIOS)

    def process(self, f0: float) -> float:
        """Return the next sample, one of seven levels between -1 and 0.98."""
        noise = 0
        phases = []
        for ratio, phase in zip(_RATIOS, self._phases):
            f = min(f0 * ratio, 0.499)
            increment = int(f * _PHASE_SCALE) & _MASK32
            phase = (phase + increment) & _MASK32
            phases.append(phase)
            noise += phase >> 31
        self._phases = phases
        return 0.33 * noise - 1.0


class HiHat:
    """808 hi-hat with extra parameters reaching into cymbal territory.

    ``noise_source`` is called with the sample rate and must return an object
    whose ``process(f0)`` yields metallic noise. ``vca`` maps a sample and a
    gain to an output sample. ``resonance`` enables the resonant colouring
    filter. ``rng`` is any object with a ``random()`` method.
    """

    def __init__(
        self,
        sample_rate: float,
        noise_source: Callable[[float], Any] = SquareNoise,
        vca: Callable[[float, float], float] = linear_vca,
        resonance: bool = True,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.sample_rate = float(sample_rate)
        self._vca = vca
        self._resonance = bool(resonance)
        self._rng = rng if rng is not None else random.Random()
        self._trig = False

        self._envelope = 0.0
        self._noise_clock = 0.0
        self._noise_sample = 0.0

        self.freq = 3000.0
        self.tone = 0.5
        self.decay = 0.2
        self.noisiness = 0.8
        self.accent = 0.8
        self.sustain = False

        self._metallic_noise = noise_source(self.sample_rate)
        self._noise_coloration = Svf(self.sample_rate)
        self._hpf = Svf(self.sample_rate)

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
    def tone(self) -> float:
        """Brightness, clamped to 0..1."""
        return self._tone

    @tone.setter
    def tone(self, value: float) -> None:
        self._tone = _clamp(value, 0.0, 1.0)

    @property
    def decay(self) -> float:
        """Decay length, at least 0; tuned for 0..1."""
        return self._decay_setting

    @decay.setter
    def decay(self, value: float) -> None:
        self._decay_setting = max(value, 0.0)
        self._decay = self._decay_setting * 1.7 - 1.2

    @property
    def noisiness(self) -> float:
        """Mix between tone and noise, clamped to 0..1; 1 is just noise."""
        return self._noisiness_setting

    @noisiness.setter
    def noisiness(self, value: float) -> None:
        value = _clamp(value, 0.0, 1.0)
        self._noisiness_setting = value
        self._noisiness = value * value

    def trig(self) -> None:
        """Strike the hi-hat on the next sample."""
        self._trig = True

    def process(self, trigger: bool = False) -> float:
        """Return the next sample; ``trigger`` strikes the hi-hat."""
        sr = self.sample_rate
        decay = self._decay
        envelope_decay = 1.0 - 0.003 * _semitones_to_ratio(-decay * 84.0)
        cut_decay = 1.0 - 0.0025 * _semitones_to_ratio(-decay * 36.0)

        if trigger or self._trig:
            self._trig = False
            self._envelope = (1.5 + 0.5 * (1.0 - decay)) * (0.3 + 0.7 * self._accent)

        out = self._metallic_noise.process(2.0 * self._f0)

        cutoff = 150.0 / sr * _semitones_to_ratio(self._tone * 72.0)
        cutoff = _clamp(cutoff, 0.0, 16000.0 / sr)

        self._noise_coloration.frequency = cutoff * sr
        self._noise_coloration.resonance = (
            3.0 + 6.0 * self._tone if self._resonance else 1.0
        )
        self._noise_coloration.process(out)
        out = self._noise_coloration.band

        # Clocked noise mixed in for extra variety; not part of the 808 circuit.
        noise_f = _clamp(self._f0 * (16.0 + 16.0 * (1.0 - self._noisiness)), 0.0, 0.5)
        self._noise_clock += noise_f
        if self._noise_clock >= 1.0:
            self._noise_clock -= 1.0
            self._noise_sample = self._rng.random() - 0.5
        out += self._noisiness * (self._noise_sample - out)

        sustain_gain = self._accent * decay
        self._envelope *= envelope_decay if self._envelope > 0.5 else cut_decay
        out = self._vca(out, sustain_gain if self.sustain else self._envelope)

        self._hpf.frequency = cutoff * sr
        self._hpf.resonance = 0.5
        self._hpf.process(out)
        result = self._hpf.high
        return result if math.isfinite(result) or not math.isfinite(out) else result