"""Triggerable attack/decay envelope."""

import enum
import math

__all__ = ["AdEnvSegment", "AdEnv"]

_FLOAT_EPSILON = 1.1920929e-07


class AdEnvSegment(enum.IntEnum):
    """Stages of an :class:`AdEnv`."""

    IDLE = 0
    ATTACK = 1
    DECAY = 2


def _expf_fast(x: float) -> float:
    x = 1.0 + x / 1024.0
    for _ in range(10):
        x *= x
    return x


def _divide(a: float, b: float) -> float:
    """Float division following IEEE rules for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a)


class AdEnv:
    """Attack/decay envelope with adjustable output range and curve.

    ``curve`` 0 is linear; other values bend the segments. Output is scaled
    to the range ``min``..``max``.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self._segment = AdEnvSegment.IDLE
        self._prev_segment = AdEnvSegment.IDLE
        self.curve = 0.0
        self.min = 0.0
        self.max = 1.0
        self._output = 0.0001
        self._trigger = False
        self._phase = 0
        self._curve_x = 0.0
        self._retrig_val = 0.0
        self._segment_time = {segment: 0.05 for segment in AdEnvSegment}

    def trigger(self) -> None:
        """Start or restart the envelope at the next sample."""
        self._trigger = True

    def set_time(self, segment: AdEnvSegment, time: float) -> None:
        """Set the length of a segment in seconds."""
        self._segment_time[AdEnvSegment(segment)] = time

    @property
    def value(self) -> float:
        """Current output without advancing the envelope."""
        return self._output * (self.max - self.min) + self.min

    @property
    def current_segment(self) -> AdEnvSegment:
        """Segment the envelope is in."""
        return self._segment

    @property
    def is_running(self) -> bool:
        """True while the envelope is not idle."""
        return self._segment is not AdEnvSegment.IDLE

    def process(self) -> float:
        """Advance one sample and return the envelope value."""
        if self._trigger:
            self._trigger = False
            self._segment = AdEnvSegment.ATTACK
            self._phase = 0
            self._curve_x = 0.0
            self._retrig_val = self._output

        time_samps = max(int(self._segment_time[self._segment] * self.sample_rate), 0)

        if self._segment is AdEnvSegment.ATTACK:
            beg, end = self._retrig_val, 1.0
        elif self._segment is AdEnvSegment.DECAY:
            beg, end = 1.0, 0.0
        else:
            beg, end = 0.0, 0.0

        if self._prev_segment is not self._segment:
            self._curve_x = 0.0
            self._phase = 0

        if self.curve == 0.0:
            c_inc = _divide(end - beg, time_samps)
        else:
            c_inc = _divide(end - beg, 1.0 - _expf_fast(self.curve))

        if c_inc >= 0.0:
            c_inc = max(c_inc, _FLOAT_EPSILON)
        elif c_inc < 0.0:
            c_inc = min(c_inc, -_FLOAT_EPSILON)

        val = self._output
        out = val
        if self.curve == 0.0:
            val += c_inc
        else:
            self._curve_x += _divide(self.curve, time_samps)
            val = beg + c_inc * (1.0 - _expf_fast(self._curve_x))
            if math.isnan(val):
                val = 0.0

        self._phase += 1
        self._prev_segment = self._segment
        if self._segment is not AdEnvSegment.IDLE:
            if (out >= 1.0 and self._segment is AdEnvSegment.ATTACK) or (
                out <= 0.0 and self._segment is AdEnvSegment.DECAY
            ):
                if self._segment is AdEnvSegment.ATTACK:
                    self._segment = AdEnvSegment.DECAY
                else:
                    self._segment = AdEnvSegment.IDLE
        if self._segment is AdEnvSegment.IDLE:
            val = out = 0.0
        self._output = val

        return out * (self.max - self.min) + self.min