"""Tremolo effect: amplitude modulation driven by a low-frequency oscillator."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable

import numpy as np

from tremolo_fx.sample_fifo import SampleFifo
from tremolo_fx.smoothing import LinearSmoothedValue

_f32 = np.float32

_TWO_PI = 2.0 * math.pi
_HALF_PI = 0.5 * math.pi

_DEFAULT_OSCILLATOR_FREQUENCY = 440.0
_DEFAULT_OSCILLATOR_SAMPLE_RATE = 48000.0
_FREQUENCY_RAMP_SECONDS = 0.05

_DEFAULT_MODULATION_RATE_HZ = 5.0
_MODULATION_DEPTH = _f32(0.4)
_WAVEFORM_TRANSITION_SECONDS = 0.025


class ApplySmoothing(enum.Enum):
    """Whether a parameter change is ramped or applied at once."""

    NO = 0
    YES = 1


class LfoWaveform(enum.IntEnum):
    """Shapes available for the modulating oscillator."""

    SINE = 0
    TRIANGLE = 1


def triangle(phase: float) -> float:
    """Triangle wave over a phase in radians, 0 at phase 0 like the sine."""
    # shifted by a quarter period so the wave starts at 0 instead of 1
    offset_phase = phase - _HALF_PI
    ft = offset_phase / _TWO_PI
    return 4.0 * abs(ft - math.floor(ft + 0.5)) - 1.0


def _sine(phase: float) -> float:
    # the oscillator hands over phases starting at -pi; shift to start at 0
    return math.sin(phase + math.pi)


class Oscillator:
    """Phase-accumulating oscillator with a linearly smoothed frequency.

    The generating function receives phases in the range [-pi, pi).
    """

    def __init__(self, function: Callable[[float], float]) -> None:
        self._function = function
        self._sample_rate = _DEFAULT_OSCILLATOR_SAMPLE_RATE
        self._frequency = LinearSmoothedValue(_DEFAULT_OSCILLATOR_FREQUENCY)
        self._phase = 0.0

    def prepare(self, sample_rate: float) -> None:
        """Set the sample rate and restart the oscillator."""
        if not sample_rate > 0:
            raise ValueError("sample rate must be positive")
        self._sample_rate = float(sample_rate)
        self.reset()

    def set_frequency(self, frequency: float, force: bool = False) -> None:
        """Change the frequency, ramping to it unless ``force`` is set."""
        if force:
            self._frequency.set_current_and_target_value(frequency)
        else:
            self._frequency.set_target_value(frequency)

    def process_sample(self, value: float) -> float:
        """Return ``value`` plus the next generated sample."""
        increment = _TWO_PI * self._frequency.get_next_value() / self._sample_rate
        phase = self._phase
        following = phase + increment
        if following >= _TWO_PI:
            following = math.fmod(following, _TWO_PI)
        self._phase = following
        return value + self._function(phase - math.pi)

    def reset(self) -> None:
        """Restart the phase and finish any frequency ramp."""
        self._phase = 0.0
        if self._sample_rate > 0:
            self._frequency.reset(self._sample_rate, _FREQUENCY_RAMP_SECONDS)


class Tremolo:
    """Modulates the amplitude of every channel with a shared LFO."""

    def __init__(self) -> None:
        self._lfos = {
            LfoWaveform.SINE: Oscillator(_sine),
            LfoWaveform.TRIANGLE: Oscillator(triangle),
        }
        self._current_lfo = LfoWaveform.SINE
        self._lfo_to_set = LfoWaveform.SINE
        self._lfo_transition = LinearSmoothedValue(0.0)
        self._lfo_samples = np.zeros(0, dtype=np.float32)
        self._lfo_fifo = SampleFifo()
        self.set_modulation_rate_hz(_DEFAULT_MODULATION_RATE_HZ, ApplySmoothing.NO)

    def prepare(self, sample_rate: float, expected_max_frames_per_block: int) -> None:
        """Configure the oscillators and buffers for playback."""
        for lfo in self._lfos.values():
            lfo.prepare(sample_rate)
        self._lfo_fifo.prepare(sample_rate)
        self._lfo_transition.reset(sample_rate, _WAVEFORM_TRANSITION_SECONDS)
        # allocate defensively, in case the host sends larger blocks
        self._lfo_samples = np.zeros(4 * int(expected_max_frames_per_block), dtype=np.float32)

    def set_modulation_rate_hz(
        self, rate_hz: float, apply_smoothing: ApplySmoothing = ApplySmoothing.YES
    ) -> None:
        """Set the LFO frequency in hertz."""
        force = apply_smoothing is ApplySmoothing.NO
        for lfo in self._lfos.values():
            lfo.set_frequency(rate_hz, force)

    def set_lfo_waveform(
        self, waveform: LfoWaveform, apply_smoothing: ApplySmoothing = ApplySmoothing.YES
    ) -> None:
        """Select the LFO shape; with smoothing, the switch happens on the next block."""
        try:
            waveform = LfoWaveform(waveform)
        except ValueError as error:
            raise ValueError(f"unknown LFO waveform: {waveform!r}") from error

        self._lfo_to_set = waveform
        if apply_smoothing is ApplySmoothing.NO:
            self._current_lfo = waveform

    def process(self, buffer: np.ndarray) -> None:
        """Apply the tremolo in place to a (channels, samples) or mono buffer."""
        channels = self._as_channels(buffer)
        # the waveform switch is applied here so that set_lfo_waveform stays idempotent
        self._update_lfo_waveform()
        num_samples = channels.shape[1]
        lfo = np.empty(num_samples, dtype=np.float32)
        self._fill_lfo(lfo)
        channels *= _MODULATION_DEPTH * lfo + _f32(1.0)

    def process_channelwise(self, buffer: np.ndarray) -> None:
        """Apply the tremolo in place, generating the LFO block first.

        At most four times the block size given to ``prepare`` is processed.
        """
        channels = self._as_channels(buffer)
        self._update_lfo_waveform()
        count = min(len(self._lfo_samples), channels.shape[1])
        lfo = self._lfo_samples[:count]
        self._fill_lfo(lfo)
        lfo *= _MODULATION_DEPTH
        lfo += _f32(1.0)
        channels[:, :count] *= lfo

    def reset(self) -> None:
        """Restart the oscillators and drop queued LFO samples."""
        for lfo in self._lfos.values():
            lfo.reset()
        self._lfo_fifo.reset()

    def read_all_lfo_samples(self) -> np.ndarray:
        """Return every LFO sample generated since the last call."""
        return self._lfo_fifo.pop_all()

    def _fill_lfo(self, destination: np.ndarray) -> None:
        for position in range(len(destination)):
            value = self._next_lfo_value()
            self._lfo_fifo.push(value)
            destination[position] = value

    def _update_lfo_waveform(self) -> None:
        if self._lfo_to_set != self._current_lfo:
            self._lfo_transition.set_current_and_target_value(self._next_lfo_value())
            self._current_lfo = self._lfo_to_set
            self._lfo_transition.set_target_value(self._next_lfo_value())

    def _next_lfo_value(self) -> float:
        if self._lfo_transition.is_smoothing():
            return self._lfo_transition.get_next_value()
        return self._lfos[self._current_lfo].process_sample(0.0)

    @staticmethod
    def _as_channels(buffer: np.ndarray) -> np.ndarray:
        if not isinstance(buffer, np.ndarray):
            raise TypeError("buffer must be a numpy array to be modified in place")
        if not np.issubdtype(buffer.dtype, np.floating):
            raise TypeError("buffer must hold floating-point samples")
        if buffer.ndim > 2:
            raise ValueError("buffer must be indexed as (channels, samples) or be mono")
        return np.atleast_2d(buffer)