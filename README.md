# soundsource

Composable sources of audio samples and the filters that transform them.
Every source is a Python iterator that yields interleaved samples. A source
also reports its channel count, its sample rate, its total duration and the
length of its current frame (the number of samples left before the channel
count or sample rate may change).

Samples are `int` values in the signed 16-bit range or `float` values
(nominally between -1.0 and 1.0). Integer samples are kept in the 16-bit
range when amplified or added. All durations are integer nanoseconds.

## Installation

From a checkout of the project:

```
pip install .
```

The package has no dependencies outside the standard library.

## Sources

In `soundsource.sources`:

- `Empty()`: yields nothing. It is mono, runs at 48 kHz, and lasts zero nanoseconds.
- `Zero(channels, sample_rate)`: endless silence (`0.0`).
- `SineWave(freq)`: an endless mono sine wave at 48 kHz.
- `StaticSamplesBuffer(channels, sample_rate, data)`: plays a fixed sequence
  of samples. It raises `ValueError` if `channels` or `sample_rate` is zero.

In `soundsource.chain`:

- `from_iter(sources)`: plays the sources from an iterable one after another.
- `from_factory(factory)`: calls `factory()` for each next source until it returns `None`.

## Filters

Filters are chained from any `Source`:

```python
from soundsource.sources import SineWave

tone = (
    SineWave(440)
    .amplify(0.5)
    .fade_in(200_000_000)          # 200 ms
    .take_duration(1_000_000_000)  # 1 s
)

samples = list(tone)
print(tone.channels(), tone.sample_rate(), len(samples))
```

Methods available on every source:

- `amplify(value)`: multiplies every sample by `value`.
- `fade_in(duration)`: raises the volume linearly from silence.
- `take_duration(duration)`: plays only the start of the source. The result
  has `set_filter_fadeout()` and `clear_filter()` to fade out over that span.
- `skip_duration(duration)`: drops the start of the source at once.
- `delay(duration)`: plays silence first, then the source.
- `speed(ratio)`: scales the reported sample rate and duration; the samples are unchanged.
- `pausable(initially_paused)`: the result has `set_paused(paused)`; while
  paused it yields whole frames of silence and reads nothing from the source.
- `stoppable()`: the result has `stop()`; after it the source yields nothing more.
- `periodic_access(period, access)`: calls `access(inner)` on the first read
  and then once every `period`.
- `buffered()`: stores samples as they are read; `copy()` gives an
  independent reader from the current position.
- `repeat_infinite()`: plays the source over and over.
- `low_pass(freq)`: applies a biquad low-pass filter to float samples.

Further classes:

- `soundsource.filters.Done(inner, signal)`: calls `signal()` once when the inner source runs out.
- `soundsource.spatial.ChannelVolume(inner, channel_volumes)`: mixes the input
  down to mono and plays it on each channel at its own volume.
- `soundsource.spatial.Spatial(inner, emitter_position, left_ear, right_ear)`:
  stereo output whose channel volumes follow the positions given in 3D;
  `set_positions(...)` moves them.

## Writing your own source

Subclass `soundsource.base.Source` and implement `__next__`,
`current_frame_len`, `channels`, `sample_rate` and `total_duration`.
Override `size_hint` if the number of remaining samples is known.

To write a filter that passes the format of an inner source through and only
changes the samples, subclass `soundsource.base.FilterSource` and override
`__next__`.

## What it does not do

The package only produces and transforms samples in memory. It does not play
sound on an output device, does not decode or write audio files, and does not
mix two sources together or resample between formats.