"""Envelope-following auto-wah."""

import math

__all__ = ["Autowah"]


class Autowah:
    """Auto-wah; ``wah`` and ``level`` work 0..1, ``dry_wet`` 0..100."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self._const1 = 1413.72 / self.sample_rate
        self._const2 = math.exp(-100.0 / self.sample_rate)
        self._const4 = math.exp(-10.0 / self.sample_rate)

        self.dry_wet = 100.0
        self.level = 0.1
        self.wah = 0.0

        self._rec0 = [0.0, 0.0, 0.0]
        self._rec1 = 0.0
        self._rec2 = 0.0
        self._rec3 = 0.0
        self._rec4 = 0.0
        self._rec5 = 0.0

    def process(self, value: float) -> float:
        """Process one sample."""
        slow2 = 0.01 * (self.dry_wet * self.level)
        slow3 = (1.0 - 0.01 * self.dry_wet) + (1.0 - self.wah)

        magnitude = abs(value)
        self._rec3 = max(
            magnitude, self._const4 * self._rec3 + (1.0 - self._const4) * magnitude
        )
        self._rec2 = self._const2 * self._rec2 + (1.0 - self._const2) * self._rec3
        env = min(1.0, self._rec2)
        t3 = 2.0 ** (2.3 * env)
        t4 = 1.0 - self._const1 * t3 / 2.0 ** (1.0 + 2.0 * (1.0 - env))
        self._rec1 = 0.999 * self._rec1 + 0.001 * (
            -(2.0 * (t4 * math.cos(self._const1 * 2.0 * t3)))
        )
        self._rec4 = 0.999 * self._rec4 + 0.001 * t4 * t4
        self._rec5 = 0.999 * self._rec5 + 0.0001 * 4.0 ** env

        r0, r1, r2 = self._rec0
        r0 = -((self._rec1 * r1 + self._rec4 * r2) - slow2 * (self._rec5 * value))
        out = self.wah * (r0 - r1) + slow3 * value
        self._rec0 = [r0, r0, r1]
        return out