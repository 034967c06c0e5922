from soundsource.base import NANOS_PER_SEC
from soundsource.periodic import PeriodicAccess
from soundsource.sources import StaticSamplesBuffer

MILLI = 1_000_000


def test_stereo_access():
    inner = StaticSamplesBuffer(2, 1, [10, -10, 10, -10, 20, -20])
    count = [0]

    def bump(_src):
        count[0] += 1

    source = inner.periodic_access(1000 * MILLI, bump)
    assert count[0] == 0
    assert next(source) == 10
    assert count[0] == 1
    assert next(source) == -10
    assert count[0] == 1
    assert next(source) == 10
    assert count[0] == 2
    assert next(source) == -10
    assert count[0] == 2
    assert next(source) == 20
    assert count[0] == 3
    assert next(source) == -20
    assert count[0] == 3


def test_fast_access_overflow():
    inner = StaticSamplesBuffer(1, 1, [10, -10, 10, -10, 20, -20])
    calls = []
    source = PeriodicAccess(inner, 5 * MILLI, lambda src: calls.append(src))
    assert next(source) == 10
    assert next(source) == -10
    assert len(calls) == 2
    assert calls[0] is inner


def test_passes_format_and_samples_through():
    inner = StaticSamplesBuffer(2, 1, [1, 2, 3, 4])
    source = PeriodicAccess(inner, NANOS_PER_SEC, lambda _src: None)
    assert source.channels() == 2
    assert source.sample_rate() == 1
    assert source.total_duration() == inner.total_duration()
    assert list(source) == [1, 2, 3, 4]


def test_modifier_can_change_inner():
    inner = StaticSamplesBuffer(1, 1, [1.0, 1.0, 1.0]).amplify(1.0)
    source = PeriodicAccess(inner, NANOS_PER_SEC, lambda src: src.set_factor(0.0))
    assert list(source) == [0.0, 0.0, 0.0]