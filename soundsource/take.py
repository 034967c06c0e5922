"""A filter that truncates a source to a given duration."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

from .base import NANOS_PER_SEC, FilterSource, Sample, Source, amplify_sample

_NANOS_PER_MILLI = 1_000_000


class DurationFilter(Enum):
    """Effects that a ``TakeDuration`` can apply while it plays."""

    FADE_OUT = "fade_out"


def _duration_per_sample(source: Source) -> int:
    return NANOS_PER_SEC // source.sample_rate() * source.channels()


class TakeDuration(FilterSource):
    """Plays only the first ``duration`` nanoseconds of the inner source."""

    def __init__(self, inner: Source, duration: int) -> None:
        super().__init__(inner)
        self._current_frame_len: Optional[int] = inner.current_frame_len()
        self._duration_per_sample = _duration_per_sample(inner)
        self._remaining_duration = duration
        self._requested_duration = duration
        self._filter: Optional[DurationFilter] = None

    def set_filter_fadeout(self) -> None:
        """Fade the sound out linearly over the taken duration."""
        self._filter = DurationFilter.FADE_OUT

    def clear_filter(self) -> None:
        """Remove any filter applied to the samples."""
        self._filter = None

    def _apply_filter(self, sample: Sample) -> Sample:
        if self._filter is DurationFilter.FADE_OUT:
            remaining = float(self._remaining_duration // _NANOS_PER_MILLI)
            total = float(self._requested_duration // _NANOS_PER_MILLI)
            if total == 0.0:
                factor = math.nan if remaining == 0.0 else math.inf
            else:
                factor = remaining / total
            return amplify_sample(sample, factor)
        return sample

    def __next__(self) -> Sample:
        if self._current_frame_len is not None:
            if self._current_frame_len > 0:
                self._current_frame_len -= 1
            else:
                self._current_frame_len = self.inner.current_frame_len()
                # The sample rate may have changed at the frame boundary.
                self._duration_per_sample = _duration_per_sample(self.inner)

        if self._remaining_duration <= self._duration_per_sample:
            raise StopIteration
        sample = self._apply_filter(next(self.inner))
        self._remaining_duration -= self._duration_per_sample
        return sample

    def size_hint(self) -> tuple[int, Optional[int]]:
        return (0, None)

    def current_frame_len(self) -> Optional[int]:
        remaining_samples = self._remaining_duration // self._duration_per_sample
        frame_len = self.inner.current_frame_len()
        if frame_len is not None and frame_len < remaining_samples:
            return frame_len
        return remaining_samples

    def total_duration(self) -> Optional[int]:
        duration = self.inner.total_duration()
        if duration is None:
            return None
        return min(duration, self._requested_duration)