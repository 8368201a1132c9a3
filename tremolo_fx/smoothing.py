"""Linear ramping of a control value towards a target."""

from __future__ import annotations

import math

import numpy as np

# Values are kept in single precision, like the audio path they control, so
# that ramp positions and derived ramp lengths match sample-exactly.
_f32 = np.float32


class LinearSmoothedValue:
    """A value that moves linearly to its target over a set number of samples."""

    def __init__(self, initial_value: float = 0.0) -> None:
        self._current = _f32(initial_value)
        self._target = self._current
        self._countdown = 0
        self._steps_to_target = 0
        self._step = _f32(0.0)

    def reset(self, sample_rate: float, ramp_length_seconds: float) -> None:
        """Set the ramp length and jump to the current target."""
        if sample_rate < 0 or ramp_length_seconds < 0:
            raise ValueError("sample rate and ramp length must not be negative")
        self._steps_to_target = math.floor(ramp_length_seconds * sample_rate)
        self.set_current_and_target_value(self._target)

    def set_current_and_target_value(self, value: float) -> None:
        """Jump to ``value`` immediately, ending any ramp."""
        self._current = _f32(value)
        self._target = self._current
        self._countdown = 0

    def set_target_value(self, value: float) -> None:
        """Start ramping towards ``value`` from the current value."""
        new_target = _f32(value)
        if new_target == self._target:
            return
        if self._steps_to_target <= 0:
            self.set_current_and_target_value(new_target)
            return
        self._target = new_target
        self._countdown = self._steps_to_target
        self._step = _f32((self._target - self._current) / _f32(self._countdown))

    def get_next_value(self) -> float:
        """Advance the ramp by one sample and return the new value."""
        if not self.is_smoothing():
            return float(self._target)
        self._countdown -= 1
        if self.is_smoothing():
            self._current = _f32(self._current + self._step)
        else:
            self._current = self._target
        return float(self._current)

    def is_smoothing(self) -> bool:
        return self._countdown > 0

    @property
    def current_value(self) -> float:
        return float(self._current)

    @property
    def target_value(self) -> float:
        return float(self._target)

    def apply_gain(self, buffer: np.ndarray, num_samples: int) -> None:
        """Multiply the first ``num_samples`` frames of ``buffer`` in place.

        ``buffer`` is indexed as (channels, samples) or as a single channel.
        """
        if not 0 <= num_samples <= buffer.shape[-1]:
            raise ValueError("num_samples exceeds the buffer length")
        if self.is_smoothing():
            gains = np.fromiter(
                (self.get_next_value() for _ in range(num_samples)),
                dtype=np.float32,
                count=num_samples,
            )
            buffer[..., :num_samples] *= gains
        else:
            buffer[..., :num_samples] *= self._target