# tremolo_fx

A tremolo audio effect for NumPy sample buffers. A low-frequency oscillator
(sine or triangle) modulates the amplitude of every channel with a depth of 0.4.

- Modulation rate from 0.1 Hz to 20 Hz in steps of 0.01 Hz (default 5 Hz).
- Switching the LFO waveform crossfades between the shapes over 25 ms.
- Turning bypass on or off crossfades between the dry and the processed
  signal (10 ms by default).
- Parameters are saved to and restored from JSON.
- The LFO samples that were generated can be read back and turned into a
  curve to draw (`LfoCurve`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Processing audio

Buffers are NumPy float arrays of shape `(channels, samples)`, or a single
channel, and are processed in place.

```python
import numpy as np
from tremolo_fx.processor import PluginProcessor

processor = PluginProcessor()              # stereo in, stereo out
processor.prepare_to_play(48000.0, 512)

params = processor.parameters
params.rate.value = 8.0
params.waveform.index = 1                  # "Triangle"

block = np.ones((2, 512), dtype=np.float32)
processor.process_block(block)
```

Setting `params.bypassed.value = True` fades the effect out over the
following blocks; once the fade is complete, `process_block` leaves the
buffer untouched. While fully bypassed, rate and waveform changes take effect
at once instead of being ramped.

`is_buses_layout_supported(input_set, output_set)` accepts mono or stereo
(`ChannelSet.MONO`, `ChannelSet.STEREO`) with the input matching the output.

## Using the parts directly

```python
from tremolo_fx.tremolo import ApplySmoothing, LfoWaveform, Tremolo

tremolo = Tremolo()
tremolo.prepare(48000.0, 1024)
tremolo.set_lfo_waveform(LfoWaveform.TRIANGLE, ApplySmoothing.NO)
tremolo.process(buffer)                    # or process_channelwise(buffer)
lfo = tremolo.read_all_lfo_samples()
```

- `tremolo_fx.bypass.BypassTransitionSmoother` crossfades any effect: call
  `prepare`, then per block `set_bypass`, `set_dry_buffer` before processing
  and `mix_to_wet_buffer` after it.
- `tremolo_fx.smoothing.LinearSmoothedValue` ramps a value linearly to a
  target and can apply itself as a gain to a buffer.
- `tremolo_fx.sample_fifo.SampleFifo` queues LFO samples (about one second at
  the prepared sample rate); `pop_all` returns them.
- `tremolo_fx.strided_queue.StridedQueue` keeps the latest samples of a stream
  taken every n-th sample.
- `tremolo_fx.lfo_curve.LfoCurve` turns the LFO samples into `points` and
  gives the `transform` that fits them into a view of a given size; during
  bypass the curve scrolls on with zeros.

## Saving and restoring state

```python
state = processor.get_state_information()   # UTF-8 JSON bytes
processor.set_state_information(state)
```

A saved document looks like:

```json
{
  "__version__": 1,
  "pluginName": "Tremolo",
  "modulationRateHz": 10.0,
  "bypassed": true,
  "modulationWaveform": "Triangle"
}
```

`serialize` and `deserialize` in `tremolo_fx.json_serializer` work on the
text directly. `deserialize` raises `DeserializationError` when the text
cannot be used (invalid JSON, wrong field types, an unknown waveform name,
or a document of another version or plugin); no parameter is changed then.
`set_state_information` logs such errors and keeps the current parameters.

## Interface models

`tremolo_fx.editor.PluginEditor` holds the state of the controls bound to a
processor: `layout(width, height)` gives each control's `Rectangle`,
`toggle_bypass`, `select_waveform` and `set_rate` change the parameters, and
`about.on_double_click()` shows the about message once.
`tremolo_fx.look_and_feel` provides the colours, gradients and geometry of
the controls. `tremolo_fx.examples` holds small layout helpers and a prime
number search (`find_largest_prime`, `PrimeSearch`) that runs on a background
thread and reports progress.

## What this package does not do

There is no audio I/O, no plugin host integration and no command-line tool:
audio comes in and goes out as NumPy arrays. Nothing is drawn on screen; the
editor, look-and-feel and examples modules only compute state, text,
colours and geometry for a user interface to render.