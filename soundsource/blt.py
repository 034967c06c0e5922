"""Biquad low-pass filter built with the bilinear transform."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .base import FilterSource, Source


@dataclass(frozen=True)
class _Applier:
    """Normalised biquad coefficients."""

    b0: float
    b1: float
    b2: float
    a1: float
    a2: float

    def apply(self, x_n: float, x_n1: float, x_n2: float, y_n1: float, y_n2: float) -> float:
        return (
            self.b0 * x_n
            + self.b1 * x_n1
            + self.b2 * x_n2
            - self.a1 * y_n1
            - self.a2 * y_n2
        )


@dataclass(frozen=True)
class _LowPass:
    """Low-pass formula with a cutoff frequency and a quality factor."""

    freq: int
    q: float = 0.5

    def to_applier(self, sampling_frequency: int) -> _Applier:
        w0 = 2.0 * math.pi * self.freq / sampling_frequency
        alpha = math.sin(w0) / (2.0 * self.q)
        b1 = 1.0 - math.cos(w0)
        b0 = b1 / 2.0
        b2 = b0
        a0 = 1.0 + alpha
        a1 = -2.0 * math.cos(w0)
        a2 = 1.0 - alpha
        return _Applier(b0 / a0, b1 / a0, b2 / a0, a1 / a0, a2 / a0)


class BltFilter(FilterSource):
    """Low-pass filter over a source of float samples."""

    def __init__(self, inner: Source, freq: int) -> None:
        super().__init__(inner)
        self._formula = _LowPass(freq)
        self._applier: Optional[_Applier] = None
        self._x_n1 = 0.0
        self._x_n2 = 0.0
        self._y_n1 = 0.0
        self._y_n2 = 0.0

    def to_low_pass(self, freq: int) -> None:
        """Turn this filter into a low-pass filter with the given cutoff."""
        self._formula = _LowPass(freq)
        self._applier = None

    def __next__(self) -> float:
        last_in_frame = self.inner.current_frame_len() == 1

        if self._applier is None:
            self._applier = self._formula.to_applier(self.inner.sample_rate())

        sample = next(self.inner)
        result = self._applier.apply(sample, self._x_n1, self._x_n2, self._y_n1, self._y_n2)

        self._y_n2 = self._y_n1
        self._x_n2 = self._x_n1
        self._y_n1 = result
        self._x_n1 = sample

        if last_in_frame:
            # The sample rate may change at the next frame.
            self._applier = None

        return result