"""Simple filters that wrap a source and change its samples or timing."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Optional

from .base import NANOS_PER_SEC, FilterSource, Sample, Source, amplify_sample

_ZERO: Sample = 0
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


def _saturating_cast(value: float, upper: int) -> int:
    """Truncate a float to an unsigned integer, clamping to ``[0, upper]``."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= upper:
        return upper
    return int(value)


class Amplify(FilterSource):
    """Multiplies every sample by a factor."""

    def __init__(self, inner: Source, factor: float) -> None:
        super().__init__(inner)
        self.factor = factor

    def set_factor(self, factor: float) -> None:
        """Change the amplification factor."""
        self.factor = factor

    def __next__(self) -> Sample:
        return amplify_sample(next(self.inner), self.factor)


class Speed(FilterSource):
    """Changes the play speed by scaling the reported sample rate."""

    def __init__(self, inner: Source, factor: float) -> None:
        super().__init__(inner)
        self.factor = factor

    def __next__(self) -> Sample:
        return next(self.inner)

    def sample_rate(self) -> int:
        return _saturating_cast(self.inner.sample_rate() * self.factor, _U32_MAX)

    def total_duration(self) -> Optional[int]:
        duration = self.inner.total_duration()
        if duration is None:
            return None
        try:
            scaled = duration / self.factor
        except ZeroDivisionError:
            scaled = math.inf if duration > 0 else math.nan
        return _saturating_cast(scaled, _U64_MAX)


class Stoppable(FilterSource):
    """A source that ends as soon as ``stop`` is called."""

    def __init__(self, inner: Source) -> None:
        super().__init__(inner)
        self.stopped = False

    def stop(self) -> None:
        """Stop the sound."""
        self.stopped = True

    def __next__(self) -> Sample:
        if self.stopped:
            raise StopIteration
        return next(self.inner)


class Pausable(FilterSource):
    """A source that emits whole frames of silence while paused."""

    def __init__(self, inner: Source, paused: bool) -> None:
        super().__init__(inner)
        self._paused_channels: Optional[int] = inner.channels() if paused else None
        self._remaining_paused_samples = 0

    @property
    def paused(self) -> bool:
        return self._paused_channels is not None

    def set_paused(self, paused: bool) -> None:
        """Pause or resume; while paused nothing is read from the inner source."""
        if paused and self._paused_channels is None:
            self._paused_channels = self.inner.channels()
        elif not paused and self._paused_channels is not None:
            self._paused_channels = None

    def __next__(self) -> Sample:
        if self._remaining_paused_samples > 0:
            self._remaining_paused_samples -= 1
            return _ZERO
        if self._paused_channels is not None:
            self._remaining_paused_samples = self._paused_channels - 1
            return _ZERO
        return next(self.inner)


class Done(FilterSource):
    """Calls ``signal`` once, the first time the inner source runs out."""

    def __init__(self, inner: Source, signal: Callable[[], None]) -> None:
        super().__init__(inner)
        self._signal = signal
        self._signal_sent = False

    def __next__(self) -> Sample:
        try:
            return next(self.inner)
        except StopIteration:
            if not self._signal_sent:
                self._signal_sent = True
                self._signal()
            raise


class FadeIn(FilterSource):
    """Raises the volume linearly from silence over a duration in nanoseconds."""

    def __init__(self, inner: Source, duration: int) -> None:
        super().__init__(inner)
        self._remaining_ns = float(duration)
        self._total_ns = float(duration)

    def __next__(self) -> Sample:
        if self._remaining_ns <= 0.0:
            return next(self.inner)
        factor = 1.0 - self._remaining_ns / self._total_ns
        self._remaining_ns -= NANOS_PER_SEC / (
            float(self.inner.sample_rate()) * float(self.channels())
        )
        return amplify_sample(next(self.inner), factor)


class Delay(FilterSource):
    """Precedes the inner source with silence lasting ``duration`` nanoseconds."""

    def __init__(self, inner: Source, duration: int) -> None:
        super().__init__(inner)
        self._remaining_samples = (
            duration * inner.sample_rate() // NANOS_PER_SEC * inner.channels()
        )
        self._requested_duration = duration

    def __next__(self) -> Sample:
        if self._remaining_samples >= 1:
            self._remaining_samples -= 1
            return _ZERO
        return next(self.inner)

    def size_hint(self) -> tuple[int, Optional[int]]:
        low, high = self.inner.size_hint()
        extra = self._remaining_samples
        return (low + extra, None if high is None else high + extra)

    def current_frame_len(self) -> Optional[int]:
        frame_len = self.inner.current_frame_len()
        return None if frame_len is None else frame_len + self._remaining_samples

    def total_duration(self) -> Optional[int]:
        duration = self.inner.total_duration()
        return None if duration is None else duration + self._requested_duration