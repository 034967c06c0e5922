"""A filter that hands its inner source to a callback at a fixed period."""

from __future__ import annotations

from collections.abc import Callable

from .base import FilterSource, Sample, Source

_NANOS_PER_MILLI = 1_000_000


class PeriodicAccess(FilterSource):
    """Calls ``modifier(inner)`` on the first read and then every period.

    The period is in nanoseconds and is converted to a sample count once,
    from the inner source's format at construction time.
    """

    def __init__(
        self, inner: Source, period: int, modifier: Callable[[Source], None]
    ) -> None:
        super().__init__(inner)
        update_ms = period // _NANOS_PER_MILLI
        update_frequency = update_ms * inner.sample_rate() // 1000 * inner.channels()
        self._modifier = modifier
        self._update_frequency = update_frequency or 1
        self._samples_until_update = 1

    def __next__(self) -> Sample:
        self._samples_until_update -= 1
        if self._samples_until_update == 0:
            self._modifier(self.inner)
            self._samples_until_update = self._update_frequency
        return next(self.inner)