"""Core sample-source protocol shared by every generator and filter.

Samples are either ``int`` values in the signed 16-bit range or ``float``
values (nominally between -1.0 and 1.0). Durations are integer nanoseconds.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Optional, Union

Sample = Union[int, float]

I16_MIN = -32768
I16_MAX = 32767
NANOS_PER_SEC = 1_000_000_000


def _to_i16(value: float) -> int:
    """Convert a float to a 16-bit integer, truncating and saturating."""
    if math.isnan(value):
        return 0
    if value >= I16_MAX:
        return I16_MAX
    if value <= I16_MIN:
        return I16_MIN
    return int(value)


def amplify_sample(value: Sample, factor: float) -> Sample:
    """Multiply a sample by ``factor``, keeping integer samples in 16-bit range."""
    if isinstance(value, int):
        return _to_i16(value * factor)
    return value * factor


def saturating_add(a: Sample, b: Sample) -> Sample:
    """Add two samples; integer sums are clamped to the 16-bit range."""
    if isinstance(a, int) and isinstance(b, int):
        return max(I16_MIN, min(I16_MAX, a + b))
    return a + b


class Source(ABC):
    """An iterator of interleaved samples with format information.

    ``current_frame_len`` gives the number of samples left before ``channels``
    or ``sample_rate`` may change; ``None`` means until the sound ends.
    """

    def __iter__(self) -> Source:
        return self

    @abstractmethod
    def __next__(self) -> Sample:
        """Return the next sample or raise ``StopIteration``."""

    def size_hint(self) -> tuple[int, Optional[int]]:
        """Lower and optional upper bound of the samples remaining."""
        return (0, None)

    @abstractmethod
    def current_frame_len(self) -> Optional[int]:
        """Samples remaining in the current frame, or ``None``."""

    @abstractmethod
    def channels(self) -> int:
        """Number of interleaved channels."""

    @abstractmethod
    def sample_rate(self) -> int:
        """Samples per second per channel."""

    @abstractmethod
    def total_duration(self) -> Optional[int]:
        """Total duration in nanoseconds, or ``None`` if infinite or unknown."""

    def buffered(self):
        """Store the samples as they are read so the result can be copied."""
        from .buffered import Buffered

        return Buffered(self)

    def repeat_infinite(self):
        """Repeat this source forever."""
        from .buffered import Repeat

        return Repeat(self)

    def take_duration(self, duration: int):
        """Play only the first ``duration`` nanoseconds."""
        from .take import TakeDuration

        return TakeDuration(self, duration)

    def delay(self, duration: int):
        """Precede the sound with ``duration`` nanoseconds of silence."""
        from .filters import Delay

        return Delay(self, duration)

    def skip_duration(self, duration: int):
        """Immediately skip ``duration`` nanoseconds of this source."""
        from .skip import SkipDuration

        return SkipDuration(self, duration)

    def amplify(self, value: float):
        """Multiply every sample by ``value``."""
        from .filters import Amplify

        return Amplify(self, value)

    def fade_in(self, duration: int):
        """Raise the volume from silence over ``duration`` nanoseconds."""
        from .filters import FadeIn

        return FadeIn(self, duration)

    def periodic_access(self, period: int, access: Callable[[Source], None]):
        """Call ``access`` on this source at first read and every ``period`` nanoseconds."""
        from .periodic import PeriodicAccess

        return PeriodicAccess(self, period, access)

    def speed(self, ratio: float):
        """Change the playback speed without touching the samples."""
        from .filters import Speed

        return Speed(self, ratio)

    def pausable(self, initially_paused: bool):
        """Make the sound pausable."""
        from .filters import Pausable

        return Pausable(self, initially_paused)

    def stoppable(self):
        """Make the sound stoppable."""
        from .filters import Stoppable

        return Stoppable(self)

    def low_pass(self, freq: int):
        """Apply a low-pass filter; the samples must be floats."""
        from .blt import BltFilter

        return BltFilter(self, freq)


class FilterSource(Source):
    """A source wrapping another, passing its format information through."""

    def __init__(self, inner: Source) -> None:
        self.inner = inner

    def size_hint(self) -> tuple[int, Optional[int]]:
        return self.inner.size_hint()

    def current_frame_len(self) -> Optional[int]:
        return self.inner.current_frame_len()

    def channels(self) -> int:
        return self.inner.channels()

    def sample_rate(self) -> int:
        return self.inner.sample_rate()

    def total_duration(self) -> Optional[int]:
        return self.inner.total_duration()