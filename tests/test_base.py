import math

import pytest

from soundsource.base import (
    I16_MAX,
    I16_MIN,
    FilterSource,
    Source,
    amplify_sample,
    saturating_add,
)
from soundsource.sources import Empty, StaticSamplesBuffer


class Doubler(FilterSource):
    def __next__(self):
        return next(self.inner) * 2


def test_source_is_abstract():
    with pytest.raises(TypeError):
        Source()


def test_filter_source_requires_next():
    with pytest.raises(TypeError):
        FilterSource(StaticSamplesBuffer(1, 44100, [1]))


def test_iteration_yields_all_samples():
    assert list(StaticSamplesBuffer(1, 44100, [1, 2, 3])) == [1, 2, 3]


def test_default_size_hint_is_unbounded():
    assert Empty().size_hint() == (0, None)


def test_filter_delegates_metadata():
    inner = StaticSamplesBuffer(3, 22050, [1, 2, 3])
    wrapped = Doubler(inner)
    assert wrapped.channels() == 3
    assert wrapped.sample_rate() == 22050
    assert wrapped.total_duration() == inner.total_duration()
    assert wrapped.current_frame_len() == inner.current_frame_len()
    assert wrapped.size_hint() == inner.size_hint()
    assert wrapped.inner is inner


def test_filter_tracks_inner_progress():
    inner = StaticSamplesBuffer(1, 44100, [1, 2, 3])
    wrapped = Doubler(inner)
    assert next(wrapped) == 2
    assert wrapped.size_hint() == inner.size_hint()
    assert list(wrapped) == [4, 6]


def test_amplify_float_sample():
    assert amplify_sample(0.5, 2.0) == pytest.approx(1.0)


def test_amplify_int_sample_halves():
    assert amplify_sample(100, 0.5) == 50


def test_amplify_int_truncates_toward_zero():
    assert amplify_sample(-7, 0.5) == -3


def test_amplify_int_saturates():
    assert amplify_sample(30000, 2.0) == I16_MAX
    assert amplify_sample(-30000, 2.0) == I16_MIN


def test_amplify_int_nan_gives_zero():
    assert amplify_sample(100, math.nan) == 0


def test_saturating_add_ints_clamps():
    assert saturating_add(I16_MAX, 1) == I16_MAX
    assert saturating_add(I16_MIN, -1) == I16_MIN
    assert saturating_add(10, -4) == 6


def test_saturating_add_floats_unclamped():
    assert saturating_add(0.75, 0.5) == pytest.approx(1.25)