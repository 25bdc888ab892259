"""Crossfade between two signals with a selectable curve."""

import enum
import math

__all__ = ["CrossFadeCurve", "CrossFade"]

_LOG_MIN = math.log(0.000001)
_LOG_MAX = math.log(1.0)


class CrossFadeCurve(enum.Enum):
    """Shape of the crossfade: linear, constant power, logarithmic, exponential."""

    LIN = 0
    CPOW = 1
    LOG = 2
    EXP = 3


class CrossFade:
    """Mixes two inputs; ``pos`` 0 selects the first, 1 the second."""

    def __init__(self, curve: CrossFadeCurve = CrossFadeCurve.LIN) -> None:
        self.pos = 0.5
        self.curve = CrossFadeCurve(curve)

    def process(self, in1: float, in2: float) -> float:
        """Return the mix of the two input samples."""
        pos = self.pos
        if self.curve is CrossFadeCurve.CPOW:
            s1 = math.sin(pos * math.pi / 2.0)
            s2 = math.sin((1.0 - pos) * math.pi / 2.0)
            return in1 * s2 + in2 * s1
        if self.curve is CrossFadeCurve.LOG:
            scalar = math.exp(pos * (_LOG_MAX - _LOG_MIN) + _LOG_MIN)
        elif self.curve is CrossFadeCurve.EXP:
            scalar = pos * pos
        else:
            scalar = pos
        return in1 * (1.0 - scalar) + in2 * scalar