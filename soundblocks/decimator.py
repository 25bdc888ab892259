"""Downsampling and bitcrushing effect."""

__all__ = ["Decimator"]

_MAX_BITS_TO_CRUSH = 16


def _to_int32(value: float) -> int:
    """Truncate toward zero and wrap into a signed 32-bit integer."""
    n = int(value) & 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


class Decimator:
    """Sample-and-hold downsampler followed by a bit crusher.

    ``downsample_factor`` sets the hold length: each input is held for
    ``int(factor ** 2 * 96) + 1`` samples. ``bitcrush_factor`` (0..1) sets the
    crushing smoothly; ``bits_to_crush`` (0..16) sets it in whole bits.
    """

    def __init__(self) -> None:
        self.downsample_factor = 1.0
        self._bitcrush_factor = 0.0
        self._bits_to_crush = 0
        self._bit_overflow = 1.0
        self.smooth_crushing = False
        self._downsampled = 0.0
        self._inc = 0

    @property
    def bitcrush_factor(self) -> float:
        """Amount of bitcrushing, 0..1."""
        return self._bitcrush_factor

    @bitcrush_factor.setter
    def bitcrush_factor(self, value: float) -> None:
        self._bitcrush_factor = value
        self._bits_to_crush = max(int(value * _MAX_BITS_TO_CRUSH), 0)
        self._bit_overflow = 2.0 - value * 16.0 + float(self._bits_to_crush)

    @property
    def bits_to_crush(self) -> int:
        """Number of low bits removed; setting it disables smooth crushing."""
        return self._bits_to_crush

    @bits_to_crush.setter
    def bits_to_crush(self, bits: int) -> None:
        if bits < 0:
            raise ValueError("bits_to_crush must not be negative")
        self._bits_to_crush = min(int(bits), _MAX_BITS_TO_CRUSH)
        self.smooth_crushing = False

    def process(self, value: float) -> float:
        """Downsample and bitcrush one sample."""
        threshold = max(int(self.downsample_factor * self.downsample_factor * 96.0), 0)
        self._inc += 1
        if self._inc > threshold:
            self._inc = 0
            self._downsampled = value

        if self.smooth_crushing:
            scale = 65536.0 * self._bit_overflow
            shift = self._bits_to_crush + 1
        else:
            scale = 65536.0
            shift = self._bits_to_crush
        temp = _to_int32(self._downsampled * scale)
        temp = _to_int32((temp >> shift) << shift)
        return temp / scale