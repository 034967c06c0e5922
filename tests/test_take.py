from itertools import islice

import pytest

from soundsource.base import Source
from soundsource.sources import StaticSamplesBuffer, Zero
from soundsource.take import TakeDuration


class FramedSource(Source):
    """A finite source made of frames with their own format."""

    def __init__(self, frames):
        self._frames = [(c, r, list(s)) for c, r, s in frames if s]

    def __next__(self):
        if not self._frames:
            raise StopIteration
        samples = self._frames[0][2]
        value = samples.pop(0)
        if not samples:
            self._frames.pop(0)
        return value

    def current_frame_len(self):
        return len(self._frames[0][2]) if self._frames else 0

    def channels(self):
        return self._frames[0][0] if self._frames else 1

    def sample_rate(self):
        return self._frames[0][1] if self._frames else 44100

    def total_duration(self):
        return None


def counting(length):
    return StaticSamplesBuffer(1, 1, [float(n) for n in range(1, length + 1)])


def test_take_stops_before_duration():
    taken = TakeDuration(counting(10), 5 * 10**9 + 1)
    assert list(taken) == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_take_from_method():
    taken = counting(10).take_duration(5 * 10**9 + 1)
    assert list(taken) == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_take_shorter_source_ends_early():
    taken = TakeDuration(counting(3), 10 * 10**9)
    assert list(taken) == [1.0, 2.0, 3.0]


def test_fadeout_filter():
    taken = TakeDuration(counting(10), 5 * 10**9 + 1)
    taken.set_filter_fadeout()
    assert list(taken) == [1.0 * 1.0, 2.0 * 0.8, 3.0 * 0.6, 4.0 * 0.4, 5.0 * 0.2]


def test_clear_filter_restores_samples():
    taken = TakeDuration(counting(10), 5 * 10**9 + 1)
    taken.set_filter_fadeout()
    taken.clear_filter()
    assert list(taken) == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_total_duration_is_minimum():
    assert TakeDuration(counting(10), 3 * 10**9).total_duration() == 3 * 10**9
    assert TakeDuration(counting(10), 20 * 10**9).total_duration() == 10 * 10**9


def test_total_duration_unknown_for_infinite():
    assert TakeDuration(Zero(1, 1), 3 * 10**9).total_duration() is None


def test_infinite_source_is_truncated():
    taken = TakeDuration(Zero(1, 1), 5 * 10**9 + 1)
    assert list(islice(taken, 100)) == [0.0] * 5


def test_current_frame_len_from_remaining_duration():
    taken = TakeDuration(counting(10), 3 * 10**9)
    assert taken.current_frame_len() == 3
    next(taken)
    assert taken.current_frame_len() == 2


def test_current_frame_len_limited_by_inner_frame():
    source = FramedSource([(1, 1, [1, 2]), (1, 1, [3, 4, 5, 6])])
    taken = TakeDuration(source, 5 * 10**9)
    assert taken.current_frame_len() == 2


def test_size_hint_is_unknown():
    assert TakeDuration(counting(10), 3 * 10**9).size_hint() == (0, None)


def test_format_passes_through():
    taken = TakeDuration(StaticSamplesBuffer(2, 44100, [0, 0]), 10**9)
    assert (taken.channels(), taken.sample_rate()) == (2, 44100)


def test_zero_duration_yields_nothing():
    with pytest.raises(StopIteration):
        next(TakeDuration(counting(10), 0))