"""808-style analog bass drum model."""

import math

from .svf import Svf

__all__ = ["AnalogBassDrum"]

_ONE_TWELFTH = 1.0 / 12.0
_TWO_PI = 2.0 * math.pi


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _diode(x: float) -> float:
    if x >= 0.0:
        return x
    x *= 2.0
    return 0.7 * x / (1.0 + abs(x))


class AnalogBassDrum:
    """Bass drum: a pulse-excited resonant filter with attack and self FM."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self._trig = False

        self._pulse_remaining = 0
        self._fm_pulse_remaining = 0
        self._pulse = 0.0
        self._pulse_height = 0.0
        self._pulse_lp = 0.0
        self._fm_pulse_lp = 0.0
        self._retrig_pulse = 0.0
        self._lp_out = 0.0
        self._tone_lp = 0.0
        self._phase = 0.0

        self.sustain = False
        self.accent = 0.1
        self.freq = 50.0
        self.tone = 0.1
        self.decay = 0.3
        self.self_fm_amount = 1.0
        self.attack_fm_amount = 0.5

        self._resonator = Svf(self.sample_rate)

    @property
    def accent(self) -> float:
        """Accent, clamped to 0..1."""
        return self._accent

    @accent.setter
    def accent(self, value: float) -> None:
        self._accent = _clamp(value, 0.0, 1.0)

    @property
    def freq(self) -> float:
        """Root frequency in Hz, clamped to 0..sample_rate / 2."""
        return self._f0 * self.sample_rate

    @freq.setter
    def freq(self, value: float) -> None:
        self._f0 = _clamp(value / self.sample_rate, 0.0, 0.5)

    @property
    def tone(self) -> float:
        """Amount of click, clamped to 0..1."""
        return self._tone

    @tone.setter
    def tone(self, value: float) -> None:
        self._tone = _clamp(value, 0.0, 1.0)

    @property
    def decay(self) -> float:
        """Decay length; works best 0..1."""
        return self._decay_setting

    @decay.setter
    def decay(self, value: float) -> None:
        self._decay_setting = value
        self._decay = value * 0.1 - 0.1

    @property
    def attack_fm_amount(self) -> float:
        """Amount of FM on the attack; works best 0..1."""
        return self._attack_fm_setting

    @attack_fm_amount.setter
    def attack_fm_amount(self, value: float) -> None:
        self._attack_fm_setting = value
        self._attack_fm = value * 50.0

    @property
    def self_fm_amount(self) -> float:
        """Amount of self FM; works best 0..1."""
        return self._self_fm_setting

    @self_fm_amount.setter
    def self_fm_amount(self, value: float) -> None:
        self._self_fm_setting = value
        self._self_fm = value * 50.0

    def trig(self) -> None:
        """Strike the drum on the next sample."""
        self._trig = True

    def process(self, trigger: bool = False) -> float:
        """Return the next sample; ``trigger`` strikes the drum."""
        sr = self.sample_rate
        trigger_duration = int(1.0e-3 * sr)
        fm_duration = int(6.0e-3 * sr)
        pulse_decay_time = 0.2e-3 * sr
        pulse_filter_time = 0.1e-3 * sr
        retrig_duration = 0.05 * sr

        f0 = self._f0
        scale = 0.001 / f0 if f0 else math.inf
        q = 1500.0 * 2.0 ** (_ONE_TWELFTH * self._decay * 80.0)
        tone_f = min(4.0 * f0 * 2.0 ** (_ONE_TWELFTH * self._tone * 108.0), 1.0)
        exciter_leak = 0.08 * (self._tone + 0.25)

        if trigger or self._trig:
            self._trig = False
            self._pulse_remaining = trigger_duration
            self._fm_pulse_remaining = fm_duration
            self._pulse_height = 3.0 + 7.0 * self._accent
            self._lp_out = 0.0

        if self._pulse_remaining:
            self._pulse_remaining -= 1
            pulse = (
                self._pulse_height if self._pulse_remaining else self._pulse_height - 1.0
            )
            self._pulse = pulse
        else:
            self._pulse *= 1.0 - 1.0 / pulse_decay_time
            pulse = self._pulse
        if self.sustain:
            pulse = 0.0

        self._pulse_lp += (pulse - self._pulse_lp) / pulse_filter_time
        pulse = _diode((pulse - self._pulse_lp) + pulse * 0.044)

        fm_pulse = 0.0
        if self._fm_pulse_remaining:
            self._fm_pulse_remaining -= 1
            fm_pulse = 1.0
            self._retrig_pulse = 0.0 if self._fm_pulse_remaining else -0.8
        else:
            self._retrig_pulse *= 1.0 - 1.0 / retrig_duration
        if self.sustain:
            fm_pulse = 0.0
        self._fm_pulse_lp += (fm_pulse - self._fm_pulse_lp) / pulse_filter_time

        punch = 0.7 + _diode(10.0 * self._lp_out - 1.0)

        attack_fm = self._fm_pulse_lp * 1.7 * self._attack_fm
        self_fm = punch * 0.08 * self._self_fm
        f = _clamp(f0 * (1.0 + attack_fm + self_fm), 0.0, 0.4)

        if self.sustain:
            sustain_gain = self._accent * self._decay
            self._phase += f
            if self._phase >= 1.0:
                self._phase -= 1.0
            resonator_out = math.sin(_TWO_PI * self._phase) * sustain_gain
            self._lp_out = math.cos(_TWO_PI * self._phase) * sustain_gain
        else:
            self._resonator.frequency = f * sr
            self._resonator.resonance = 0.4 * q * f
            self._resonator.process((pulse - self._retrig_pulse * 0.2) * scale)
            resonator_out = self._resonator.band
            self._lp_out = self._resonator.low

        self._tone_lp += tone_f * (pulse * exciter_leak + resonator_out - self._tone_lp)
        return self._tone_lp