"""Basic generators: silence, an empty sound, a sine wave and a fixed buffer."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional

from .base import NANOS_PER_SEC, Sample, Source

_U64_MAX = 2**64 - 1


class Empty(Source):
    """A source with no samples."""

    def __next__(self) -> Sample:
        raise StopIteration

    def current_frame_len(self) -> Optional[int]:
        return None

    def channels(self) -> int:
        return 1

    def sample_rate(self) -> int:
        return 48000

    def total_duration(self) -> Optional[int]:
        return 0


class Zero(Source):
    """An infinite source of silence."""

    def __init__(self, channels: int, sample_rate: int) -> None:
        self._channels = channels
        self._sample_rate = sample_rate

    def __next__(self) -> Sample:
        return 0.0

    def current_frame_len(self) -> Optional[int]:
        return None

    def channels(self) -> int:
        return self._channels

    def sample_rate(self) -> int:
        return self._sample_rate

    def total_duration(self) -> Optional[int]:
        return None


class SineWave(Source):
    """An infinite mono sine wave at 48 kHz."""

    def __init__(self, freq: int) -> None:
        self.freq = float(freq)
        self._num_sample = 0

    def __next__(self) -> float:
        self._num_sample += 1
        return math.sin(2.0 * math.pi * self.freq * self._num_sample / 48000.0)

    def current_frame_len(self) -> Optional[int]:
        return None

    def channels(self) -> int:
        return 1

    def sample_rate(self) -> int:
        return 48000

    def total_duration(self) -> Optional[int]:
        return None


class StaticSamplesBuffer(Source):
    """A fixed sequence of samples played as a source."""

    def __init__(self, channels: int, sample_rate: int, data: Sequence[Sample]) -> None:
        if channels == 0:
            raise ValueError("channels must not be zero")
        if sample_rate == 0:
            raise ValueError("sample_rate must not be zero")
        scaled = NANOS_PER_SEC * len(data)
        if scaled > _U64_MAX:
            raise OverflowError("buffer too long for its duration to be computed")
        self._channels = channels
        self._sample_rate = sample_rate
        self._duration = scaled // sample_rate // channels
        self._data = iter(tuple(data))
        self._remaining = len(data)

    def __next__(self) -> Sample:
        value = next(self._data)
        self._remaining -= 1
        return value

    def size_hint(self) -> tuple[int, Optional[int]]:
        return (self._remaining, self._remaining)

    def current_frame_len(self) -> Optional[int]:
        return None

    def channels(self) -> int:
        return self._channels

    def sample_rate(self) -> int:
        return self._sample_rate

    def total_duration(self) -> Optional[int]:
        return self._duration