"""Distortion / overdrive."""

from .limiter import soft_limit

__all__ = ["soft_clip", "Overdrive"]


def soft_clip(x: float) -> float:
    """Soft saturation clipped to -1..1 outside |x| <= 3."""
    if x < -3.0:
        return -1.0
    if x > 3.0:
        return 1.0
    return soft_limit(x)


class Overdrive:
    """Overdrive whose gain staging follows a single drive amount (0..1)."""

    def __init__(self, drive: float = 0.5) -> None:
        self._drive = 0.0
        self._pre_gain = 0.0
        self._post_gain = 1.0
        self.drive = drive

    @property
    def drive(self) -> float:
        """Drive amount, clamped to 0..1."""
        return self._drive

    @drive.setter
    def drive(self, value: float) -> None:
        value = min(max(value, 0.0), 1.0)
        self._drive = value
        d = 2.0 * value
        d2 = d * d
        pre_a = d * 0.5
        pre_b = d2 * d2 * d * 24.0
        self._pre_gain = pre_a + (pre_b - pre_a) * d2
        squashed = d * (2.0 - d)
        self._post_gain = 1.0 / soft_clip(0.33 + squashed * (self._pre_gain - 0.33))

    def process(self, value: float) -> float:
        """Distort one sample."""
        return soft_clip(self._pre_gain * value) * self._post_gain