"""Direct-form FIR filter."""

from typing import Iterable, List, Optional, Sequence

__all__ = ["FirFilter"]


class FirFilter:
    """FIR filter with tail-first coefficients.

    The last coefficient weights the newest input sample. ``max_size`` limits
    the filter length and longer impulse responses are silently truncated.
    ``max_block`` limits how many samples :meth:`process_block` accepts at once.
    """

    latency = 0

    def __init__(
        self,
        coefficients: Sequence[float],
        max_size: Optional[int] = None,
        max_block: Optional[int] = None,
        reverse: bool = False,
    ) -> None:
        if max_size is not None and max_size < 0:
            raise ValueError("max_size must not be negative")
        if max_block is not None and max_block < 0:
            raise ValueError("max_block must not be negative")
        self.max_size = max_size
        self.max_block = max_block
        self._coefs: List[float] = []
        self._history: List[float] = []
        self.set_ir(coefficients, reverse)

    @property
    def coefficients(self) -> List[float]:
        """Active coefficients in tail-first order."""
        return list(self._coefs)

    def set_ir(self, coefficients: Sequence[float], reverse: bool = False) -> None:
        """Load a new impulse response and clear the filter state.

        With ``reverse`` the response is given head-first and is reversed;
        truncation to ``max_size`` then keeps the end of the given sequence.
        """
        coefs = [float(c) for c in coefficients]
        size = len(coefs) if self.max_size is None else min(len(coefs), self.max_size)
        if reverse:
            self._coefs = list(reversed(coefs))[:size]
        else:
            self._coefs = coefs[:size]
        self.reset()

    def reset(self) -> None:
        """Clear the delay line, keeping the coefficients."""
        self._history = [0.0] * max(len(self._coefs) - 1, 0)

    def process(self, value: float) -> float:
        """Filter one sample."""
        if not self._coefs:
            raise ValueError("the filter has no coefficients")
        acc = sum(s * c for s, c in zip(self._history, self._coefs))
        acc += value * self._coefs[-1]
        if self._history:
            self._history.pop(0)
            self._history.append(value)
        return acc

    def process_block(self, samples: Iterable[float]) -> List[float]:
        """Filter a block of samples, no longer than ``max_block``."""
        block = list(samples)
        if self.max_block is not None and len(block) > self.max_block:
            raise ValueError(
                f"block of {len(block)} samples exceeds max_block {self.max_block}"
            )
        return [self.process(value) for value in block]