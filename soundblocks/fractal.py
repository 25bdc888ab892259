"""Fractal noise built by stacking octaves of a noise source."""

from typing import Any, Callable, List

__all__ = ["FractalNoise"]


class FractalNoise:
    """Sums ``order`` noise generators, each an octave above the previous.

    ``generator_factory`` is called with the sample rate and must return an
    object with a settable ``frequency`` attribute (Hz) and a ``process()``
    method. ``color`` (0..1) sets how much each higher octave contributes.
    """

    def __init__(
        self,
        generator_factory: Callable[[float], Any],
        order: int,
        sample_rate: float,
    ) -> None:
        if order < 0:
            raise ValueError("order must not be negative")
        self.sample_rate = float(sample_rate)
        self._frequency = 0.0
        self._decay = 0.0
        self.color = 0.5
        self.frequency = 440.0
        self.generators: List[Any] = [
            generator_factory(self.sample_rate) for _ in range(order)
        ]

    @property
    def frequency(self) -> float:
        """Frequency of the lowest octave in Hz, clamped to 0..sample_rate."""
        return self._frequency

    @frequency.setter
    def frequency(self, value: float) -> None:
        self._frequency = min(max(value, 0.0), self.sample_rate)

    @property
    def color(self) -> float:
        """Brightness, clamped to 0..1; 1 is brightest."""
        return self._decay

    @color.setter
    def color(self, value: float) -> None:
        self._decay = min(max(value, 0.0), 1.0)

    def process(self) -> float:
        """Return the next sample."""
        gain = 0.5
        total = 0.0
        frequency = self._frequency
        for generator in self.generators:
            generator.frequency = frequency
            total += generator.process() * gain
            gain *= self._decay
            frequency *= 2.0
        return total