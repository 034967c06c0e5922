"""A filter that skips a leading duration of its inner source."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Optional

from .base import NANOS_PER_SEC, FilterSource, Sample, Source


def _skip_samples(source: Source, count: int) -> None:
    deque(islice(source, count), maxlen=0)


def _skip_duration_unchecked(source: Source, duration: int) -> None:
    samples_per_channel = duration * source.sample_rate() // NANOS_PER_SEC
    _skip_samples(source, samples_per_channel * source.channels())


def _skip_duration(source: Source, duration: int) -> None:
    while duration > 0:
        frame_len = source.current_frame_len()
        if frame_len is None:
            # Format stays the same until the end.
            _skip_duration_unchecked(source, duration)
            return
        if frame_len == 0:
            return

        ns_per_sample = NANOS_PER_SEC // source.sample_rate() // source.channels()
        if frame_len * ns_per_sample > duration:
            _skip_samples(source, duration // ns_per_sample)
            return

        _skip_samples(source, frame_len)
        duration -= frame_len * ns_per_sample


class SkipDuration(FilterSource):
    """Skips ``duration`` nanoseconds of the inner source from its current position."""

    def __init__(self, inner: Source, duration: int) -> None:
        super().__init__(inner)
        _skip_duration(inner, duration)
        self._skipped_duration = duration

    def __next__(self) -> Sample:
        return next(self.inner)

    def total_duration(self) -> Optional[int]:
        duration = self.inner.total_duration()
        if duration is None:
            return None
        return max(0, duration - self._skipped_duration)