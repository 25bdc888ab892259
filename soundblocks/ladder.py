"""Four-pole ladder filter with selectable response."""

import enum
import math
from typing import Iterable, List, Sequence

__all__ = ["LadderMode", "LadderFilter"]

_INTERPOLATION = 4
_INTERPOLATION_RECIP = 1.0 / _INTERPOLATION
_MAX_RESONANCE = 1.8


def _fast_tanh(x: float) -> float:
    if x > 3.0:
        return 1.0
    if x < -3.0:
        return -1.0
    x2 = x * x
    return x * (27.0 + x2) / (27.0 + 9.0 * x2)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class LadderMode(enum.Enum):
    """Filter response: low, band or high pass at 12 or 24 dB/octave."""

    LP24 = enum.auto()
    LP12 = enum.auto()
    BP24 = enum.auto()
    BP12 = enum.auto()
    HP24 = enum.auto()
    HP12 = enum.auto()


def _mix(mode: LadderMode, s: Sequence[float]) -> float:
    if mode is LadderMode.LP24:
        return s[4]
    if mode is LadderMode.LP12:
        return s[2]
    if mode is LadderMode.BP24:
        return (s[2] + s[4]) * 4.0 - s[3] * 8.0
    if mode is LadderMode.BP12:
        return (s[1] - s[2]) * 2.0
    if mode is LadderMode.HP24:
        return s[0] + s[4] - (s[1] + s[3]) * 4.0 + s[2] * 6.0
    if mode is LadderMode.HP12:
        return s[0] + s[2] - s[1] * 2.0
    return 0.0


class LadderFilter:
    """Huovilainen-style ladder filter with drive, passband gain and 4x oversampling."""

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = float(sample_rate)
        self._sr_int_recip = 1.0 / (self._sample_rate * _INTERPOLATION)
        self._alpha = 1.0
        self._k = 1.0
        self._fbase = 1000.0
        self._qadjust = 1.0
        self._old_input = 0.0
        self._z0 = [0.0] * 4
        self._z1 = [0.0] * 4
        self._pbg = 0.0
        self._drive = 0.0
        self._drive_scaled = 0.0
        self.mode = LadderMode.LP24

        self.passband_gain = 0.5
        self.input_drive = 0.5
        self.frequency = 5000.0
        self.resonance = 0.2

    @property
    def frequency(self) -> float:
        """Cutoff in Hz; effective range 5 Hz to 0.425 * sample rate."""
        return self._fbase

    @frequency.setter
    def frequency(self, value: float) -> None:
        self._fbase = value
        freq = _clamp(value, 5.0, self._sample_rate * 0.425)
        wc = freq * 2.0 * math.pi * self._sr_int_recip
        wc2 = wc * wc
        self._alpha = 0.9892 * wc - 0.4324 * wc2 + 0.1381 * wc * wc2 - 0.0202 * wc2 * wc2
        self._qadjust = 1.006 + 0.0536 * wc - 0.095 * wc2 - 0.05 * wc2 * wc2

    @property
    def resonance(self) -> float:
        """Resonance, clamped to 0..1.8; self-oscillates at high values."""
        return self._k / 4.0

    @resonance.setter
    def resonance(self, value: float) -> None:
        self._k = 4.0 * _clamp(value, 0.0, _MAX_RESONANCE)

    @property
    def passband_gain(self) -> float:
        """Passband gain compensation, clamped to 0..0.5."""
        return self._pbg

    @passband_gain.setter
    def passband_gain(self, value: float) -> None:
        self._pbg = _clamp(value, 0.0, 0.5)
        self.input_drive = self._drive

    @property
    def input_drive(self) -> float:
        """Drive into the input clipper, clamped to 0..4."""
        return self._drive

    @input_drive.setter
    def input_drive(self, value: float) -> None:
        drive = max(value, 0.0)
        if drive > 1.0:
            drive = min(drive, 4.0)
            self._drive_scaled = 1.0 + (drive - 1.0) * (1.0 - self._pbg)
        else:
            self._drive_scaled = drive
        self._drive = drive

    def _lpf(self, s: float, i: int) -> float:
        ft = s * 0.76923077 + 0.23076923 * self._z0[i] - self._z1[i]
        ft = ft * self._alpha + self._z1[i]
        self._z1[i] = ft
        self._z0[i] = s
        return ft

    def process(self, value: float) -> float:
        """Filter one sample."""
        inp = value * self._drive_scaled
        total = 0.0
        interp = 0.0
        for _ in range(_INTERPOLATION):
            in_interp = interp * self._old_input + (1.0 - interp) * inp
            u = in_interp - (self._z1[3] - self._pbg * in_interp) * self._k * self._qadjust
            u = _fast_tanh(u)
            stages = [u]
            for i in range(4):
                stages.append(self._lpf(stages[-1], i))
            total += _mix(self.mode, stages) * _INTERPOLATION_RECIP
            interp += _INTERPOLATION_RECIP
        self._old_input = inp
        return total

    def process_block(self, samples: Iterable[float]) -> List[float]:
        """Filter a block of samples and return the results."""
        return [self.process(value) for value in samples]