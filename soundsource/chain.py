"""Sources that play a sequence of other sources one after another."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Optional

from .base import Sample, Source

# Maximum frame length reported when the current source gives no better bound.
_THRESHOLD = 10240


class FromIter(Source):
    """Plays the sources produced by an iterable one after another."""

    def __init__(self, sources: Iterable[Source]) -> None:
        self._sources: Iterator[Source] = iter(sources)
        self._current: Optional[Source] = next(self._sources, None)

    def __next__(self) -> Sample:
        while True:
            if self._current is not None:
                try:
                    return next(self._current)
                except StopIteration:
                    pass
            self._current = next(self._sources)

    def size_hint(self) -> tuple[int, Optional[int]]:
        if self._current is None:
            return (0, None)
        return (self._current.size_hint()[0], None)

    def current_frame_len(self) -> Optional[int]:
        # The boundary between two sources must also be a frame boundary.
        current = self._current
        if current is not None:
            frame_len = current.current_frame_len()
            if frame_len:
                return frame_len
            upper = current.size_hint()[1]
            if upper is not None and 0 < upper < _THRESHOLD:
                return upper
        return _THRESHOLD

    def channels(self) -> int:
        return self._current.channels() if self._current is not None else 2

    def sample_rate(self) -> int:
        return self._current.sample_rate() if self._current is not None else 44100

    def total_duration(self) -> Optional[int]:
        return None


class _FactoryIterator:
    """Iterator that asks ``factory`` for a new source on every step."""

    def __init__(self, factory: Callable[[], Optional[Source]]) -> None:
        self._factory = factory

    def __iter__(self) -> _FactoryIterator:
        return self

    def __next__(self) -> Source:
        source = self._factory()
        if source is None:
            raise StopIteration
        return source


def from_iter(sources: Iterable[Source]) -> FromIter:
    """Chain the sources produced by ``sources``."""
    return FromIter(sources)


def from_factory(factory: Callable[[], Optional[Source]]) -> FromIter:
    """Chain sources built by ``factory`` until it returns ``None``."""
    return FromIter(_FactoryIterator(factory))