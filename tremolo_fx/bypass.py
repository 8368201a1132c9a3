"""Crossfading between processed and unprocessed audio on bypass changes."""

from __future__ import annotations

import numpy as np

from tremolo_fx.smoothing import LinearSmoothedValue

_f32 = np.float32


class BypassTransitionSmoother:
    """Crossfades dry and wet signals when the bypass state changes.

    Typical use in a block callback::

        smoother.set_bypass(bypassed)
        if bypassed and not smoother.is_transitioning():
            return
        smoother.set_dry_buffer(buffer)
        effect.process(buffer)
        smoother.mix_to_wet_buffer(buffer)

    Call ``prepare`` before processing, ``set_bypass_forced`` when restoring
    state, and ``reset`` when playback stops.
    """

    def __init__(self, crossfade_length_seconds: float = 0.01) -> None:
        if not crossfade_length_seconds > 0.0:
            raise ValueError("crossfade length must be positive")
        self._crossfade_length_seconds = float(crossfade_length_seconds)
        self._sample_rate = 0.0
        self._dry_gain = LinearSmoothedValue(0.0)
        self._wet_gain = LinearSmoothedValue(1.0)
        self._dry_buffer = np.zeros((0, 0), dtype=np.float32)
        self.reset()

    def prepare(self, sample_rate: float, maximum_block_size: int, num_channels: int) -> None:
        """Allocate the dry buffer and configure the crossfade for ``sample_rate``."""
        self._sample_rate = float(sample_rate)
        self._dry_buffer = np.zeros((int(num_channels), int(maximum_block_size)), dtype=np.float32)
        self._dry_gain.reset(sample_rate, self._crossfade_length_seconds)
        self._wet_gain.reset(sample_rate, self._crossfade_length_seconds)
        self.reset()

    def set_bypass(self, bypass: bool) -> None:
        """Start a crossfade towards the requested bypass state."""
        bypass = bool(bypass)
        if bypass == self._is_bypassed():
            return

        current = _f32(self._dry_gain.current_value)
        target = _f32(1.0 if bypass else 0.0)
        # a transition reversed mid-way only takes as long as the way back
        duration = self._crossfade_length_seconds * float(abs(target - current))

        self._dry_gain.reset(self._sample_rate, duration)
        self._wet_gain.reset(self._sample_rate, duration)

        self._dry_gain.set_current_and_target_value(current)
        self._dry_gain.set_target_value(target)

        self._wet_gain.set_current_and_target_value(_f32(1.0) - current)
        self._wet_gain.set_target_value(_f32(1.0) - target)

    def set_bypass_forced(self, bypass: bool) -> None:
        """Switch the bypass state at once, without a crossfade."""
        self._dry_gain.set_current_and_target_value(1.0 if bypass else 0.0)
        self._wet_gain.set_current_and_target_value(_f32(1.0) - _f32(self._dry_gain.target_value))

    def is_transitioning(self) -> bool:
        return self._dry_gain.is_smoothing() or self._wet_gain.is_smoothing()

    def set_dry_buffer(self, buffer: np.ndarray) -> None:
        """Store the unprocessed block, scaled by the dry gain."""
        if self._should_avoid_processing():
            return

        channels = np.atleast_2d(np.asarray(buffer))
        self._check_fits(channels)
        num_channels, num_samples = channels.shape
        self._dry_buffer[:num_channels, :num_samples] = channels
        self._dry_gain.apply_gain(self._dry_buffer, num_samples)

    def mix_to_wet_buffer(self, buffer: np.ndarray) -> None:
        """Scale the processed block by the wet gain and add the stored dry block, in place."""
        if self._should_avoid_processing():
            return

        if not isinstance(buffer, np.ndarray):
            raise TypeError("buffer must be a numpy array to be modified in place")
        channels = np.atleast_2d(buffer)
        self._check_fits(channels)
        num_channels, num_samples = channels.shape
        self._wet_gain.apply_gain(channels, num_samples)
        channels += self._dry_buffer[:num_channels, :num_samples]

    def reset(self) -> None:
        """Return to the unbypassed state and clear the dry buffer."""
        self.set_bypass_forced(False)
        self._dry_buffer.fill(0.0)

    def _is_bypassed(self) -> bool:
        return self._dry_gain.target_value == 1.0

    def _should_avoid_processing(self) -> bool:
        return not self.is_transitioning() and not self._is_bypassed()

    def _check_fits(self, channels: np.ndarray) -> None:
        num_channels, num_samples = channels.shape
        max_channels, max_samples = self._dry_buffer.shape
        if num_samples > max_samples or num_channels > max_channels:
            raise ValueError("buffer exceeds the prepared block size or channel count")