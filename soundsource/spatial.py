"""Per-channel volume mixing and simple 3D positioning of a sound."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional

from .base import FilterSource, Sample, Source, amplify_sample, saturating_add

Position = Sequence[float]


def _mix_down(source: Source) -> Optional[Sample]:
    """Read one frame of ``source`` and sum its channels."""
    total: Optional[Sample] = None
    for _ in range(source.channels()):
        try:
            value = next(source)
        except StopIteration:
            continue
        total = value if total is None else saturating_add(total, value)
    return total


class ChannelVolume(FilterSource):
    """Mixes the input down to mono and plays it on each channel at its own volume."""

    def __init__(self, inner: Source, channel_volumes: Sequence[float]) -> None:
        super().__init__(inner)
        self._channel_volumes = list(channel_volumes)
        self._current_channel = 0
        self._current_sample: Optional[Sample] = _mix_down(inner)

    def set_volume(self, channel: int, volume: float) -> None:
        """Set the volume of a channel; raises ``IndexError`` if there is no such channel."""
        if not 0 <= channel < len(self._channel_volumes):
            raise IndexError(f"no channel {channel}")
        self._channel_volumes[channel] = volume

    def __next__(self) -> Sample:
        current = self._current_sample
        result = (
            None
            if current is None
            else amplify_sample(current, self._channel_volumes[self._current_channel])
        )
        self._current_channel += 1
        if self._current_channel >= len(self._channel_volumes):
            self._current_channel = 0
            self._current_sample = _mix_down(self.inner)
        if result is None:
            raise StopIteration
        return result

    def channels(self) -> int:
        return len(self._channel_volumes)


def _dist_sq(a: Position, b: Position) -> float:
    return sum((x - y) * (x - y) for x, y in zip(a, b))


def _div(a: float, b: float) -> float:
    """Float division following IEEE rules for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _fmin(a: float, b: float) -> float:
    """Minimum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


class Spatial(FilterSource):
    """Plays a sound in stereo according to an emitter and two ear positions."""

    def __init__(
        self,
        inner: Source,
        emitter_position: Position,
        left_ear: Position,
        right_ear: Position,
    ) -> None:
        super().__init__(ChannelVolume(inner, [0.0, 0.0]))
        self.set_positions(emitter_position, left_ear, right_ear)

    def set_positions(
        self, emitter_pos: Position, left_ear: Position, right_ear: Position
    ) -> None:
        """Set the position of the emitter and of both ears."""
        left_dist_sq = _dist_sq(left_ear, emitter_pos)
        right_dist_sq = _dist_sq(right_ear, emitter_pos)
        max_diff = math.sqrt(_dist_sq(left_ear, right_ear))
        left_dist = math.sqrt(left_dist_sq)
        right_dist = math.sqrt(right_dist_sq)
        left_diff_modifier = (_div(left_dist - right_dist, max_diff) + 1.0) / 4.0 + 0.5
        right_diff_modifier = (_div(right_dist - left_dist, max_diff) + 1.0) / 4.0 + 0.5
        left_dist_modifier = _fmin(_div(1.0, left_dist_sq), 1.0)
        right_dist_modifier = _fmin(_div(1.0, right_dist_sq), 1.0)
        self.inner.set_volume(0, left_diff_modifier * left_dist_modifier)
        self.inner.set_volume(1, right_diff_modifier * right_dist_modifier)

    def __next__(self) -> Sample:
        return next(self.inner)