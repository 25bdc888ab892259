"""Simple peak limiter."""

from typing import Iterable, List

__all__ = ["soft_limit", "Limiter"]


def soft_limit(x: float) -> float:
    """Rational approximation of tanh, accurate for |x| <= 3."""
    return x * (27.0 + x * x) / (27.0 + 9.0 * x * x)


class Limiter:
    """Peak-following limiter with soft saturation."""

    def __init__(self) -> None:
        self._peak = 0.5

    def process_block(self, samples: Iterable[float], pre_gain: float) -> List[float]:
        """Apply ``pre_gain`` and limit a block of samples."""
        out = []
        for value in samples:
            pre = value * pre_gain
            error = abs(pre) - self._peak
            self._peak += (0.05 if error > 0 else 0.00002) * error
            gain = 1.0 if self._peak <= 1.0 else 1.0 / self._peak
            out.append(soft_limit(pre * gain * 0.7))
        return out