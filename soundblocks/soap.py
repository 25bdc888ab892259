"""Second-order all-pass filter configured as band-pass or band-reject."""

import math

__all__ = ["Soap"]


class Soap:
    """Second-order all-pass filter with band-pass and band-reject outputs.

    Call :meth:`process` once per sample, then read ``bandpass`` or
    ``bandreject``.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self.center_freq = 400.0
        self.bandwidth = 50.0
        self._din_1 = 0.0
        self._din_2 = 0.0
        self._dout_1 = 0.0
        self._dout_2 = 0.0
        self.bandpass = 0.0
        self.bandreject = 0.0

    def process(self, value: float) -> None:
        """Filter one input sample, updating both outputs."""
        d = -math.cos(2.0 * math.pi * (self.center_freq / self.sample_rate))
        tf = math.tan(math.pi * (self.bandwidth / self.sample_rate))
        c = (tf - 1.0) / (tf + 1.0)
        a = d - d * c

        all_output = (
            -c * value
            + a * self._din_1
            + self._din_2
            - a * self._dout_1
            + c * self._dout_2
        )

        self._din_2 = self._din_1
        self._din_1 = value
        self._dout_2 = self._dout_1
        self._dout_1 = all_output

        self.bandpass = (value - all_output) * 0.5
        self.bandreject = (value + all_output * 0.99) * 0.5