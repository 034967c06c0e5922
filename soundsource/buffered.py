"""Sources that keep what they read so that they can be copied or replayed."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from itertools import islice
from typing import Optional, Union

from .base import Sample, Source

_MAX_FRAME_LEN = 32768


class _EndFrame:
    """Marks that the buffered source has no more data."""


_END = _EndFrame()


@dataclass
class _Pending:
    """Input that has not been read yet."""

    source: Source


@dataclass
class _DataFrame:
    data: list
    channels: int
    rate: int
    next: Union[_DataFrame, _EndFrame, _Pending]
    lock: threading.Lock = field(default_factory=threading.Lock)


_Frame = Union[_DataFrame, _EndFrame]


def _extract(source: Source) -> _Frame:
    """Read the next frame of ``source`` into memory."""
    frame_len = source.current_frame_len()
    if frame_len == 0:
        return _END
    channels = source.channels()
    rate = source.sample_rate()
    limit = _MAX_FRAME_LEN if frame_len is None else min(frame_len, _MAX_FRAME_LEN)
    data = list(islice(source, limit))
    if not data:
        return _END
    return _DataFrame(data, channels, rate, _Pending(source))


class Buffered(Source):
    """Reads the inner source frame by frame, storing the data for all copies."""

    def __init__(self, inner: Source) -> None:
        self._total_duration = inner.total_duration()
        self._current: _Frame = _extract(inner)
        self._position = 0

    def _advance_frame(self) -> None:
        frame = self._current
        assert isinstance(frame, _DataFrame)
        with frame.lock:
            following = frame.next
            if isinstance(following, _Pending):
                following = _extract(following.source)
                frame.next = following
        self._current = following
        self._position = 0

    def __next__(self) -> Sample:
        frame = self._current
        if not isinstance(frame, _DataFrame):
            raise StopIteration
        sample = frame.data[self._position]
        self._position += 1
        if self._position >= len(frame.data):
            self._advance_frame()
        return sample

    def copy(self) -> Buffered:
        """Return an independent reader starting at the current position."""
        clone = object.__new__(Buffered)
        clone._total_duration = self._total_duration
        clone._current = self._current
        clone._position = self._position
        return clone

    __copy__ = copy

    def size_hint(self) -> tuple[int, Optional[int]]:
        return (0, None)

    def current_frame_len(self) -> Optional[int]:
        frame = self._current
        if isinstance(frame, _DataFrame):
            return len(frame.data) - self._position
        return 0

    def channels(self) -> int:
        frame = self._current
        return frame.channels if isinstance(frame, _DataFrame) else 1

    def sample_rate(self) -> int:
        frame = self._current
        return frame.rate if isinstance(frame, _DataFrame) else 44100

    def total_duration(self) -> Optional[int]:
        return self._total_duration


class Repeat(Source):
    """Plays the inner source over and over, buffering it on the first pass."""

    def __init__(self, inner: Source) -> None:
        start = Buffered(inner)
        self._inner = start.copy()
        self._next = start

    def __next__(self) -> Sample:
        try:
            return next(self._inner)
        except StopIteration:
            self._inner = self._next.copy()
            return next(self._inner)

    def copy(self) -> Repeat:
        """Return an independent reader at the same position."""
        clone = object.__new__(Repeat)
        clone._inner = self._inner.copy()
        clone._next = self._next.copy()
        return clone

    __copy__ = copy

    def size_hint(self) -> tuple[int, Optional[int]]:
        return (0, None)

    def current_frame_len(self) -> Optional[int]:
        frame_len = self._inner.current_frame_len()
        if frame_len == 0:
            return self._next.current_frame_len()
        return frame_len

    def channels(self) -> int:
        if self._inner.current_frame_len() == 0:
            return self._next.channels()
        return self._inner.channels()

    def sample_rate(self) -> int:
        if self._inner.current_frame_len() == 0:
            return self._next.sample_rate()
        return self._inner.sample_rate()

    def total_duration(self) -> Optional[int]:
        return None