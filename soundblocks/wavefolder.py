"""Basic wavefolder."""

import math

__all__ = ["Wavefolder"]


class Wavefolder:
    """Folds samples whose magnitude exceeds 1 back into -1..1.

    ``offset`` is added before ``gain`` is applied; negative gains are allowed.
    """

    def __init__(self, gain: float = 1.0, offset: float = 0.0) -> None:
        self.gain = gain
        self.offset = offset

    def process(self, value: float) -> float:
        """Fold one sample."""
        x = (value + self.offset) * self.gain
        ft = math.floor((x + 1.0) * 0.5)
        sign = 1.0 if int(ft) % 2 == 0 else -1.0
        return sign * (x - 2.0 * ft)