"""Audio processor that runs the tremolo effect with bypass crossfading and state saving."""

from __future__ import annotations

import enum
import logging

import numpy as np

from tremolo_fx.bypass import BypassTransitionSmoother
from tremolo_fx.json_serializer import DeserializationError, PLUGIN_NAME, deserialize, serialize
from tremolo_fx.parameters import Parameters
from tremolo_fx.tremolo import ApplySmoothing, LfoWaveform, Tremolo

_log = logging.getLogger(__name__)


class ChannelSet(enum.IntEnum):
    """Channel layout of a bus; the value is its channel count."""

    DISABLED = 0
    MONO = 1
    STEREO = 2


class PluginProcessor:
    """Runs the tremolo on blocks of audio according to its parameters."""

    def __init__(
        self,
        input_channels: ChannelSet = ChannelSet.STEREO,
        output_channels: ChannelSet = ChannelSet.STEREO,
    ) -> None:
        self._input_channels = ChannelSet(input_channels)
        self._output_channels = ChannelSet(output_channels)
        self._parameters = Parameters()
        self._tremolo = Tremolo()
        self._bypass_smoother = BypassTransitionSmoother()
        self._sample_rate = 0.0

    @property
    def name(self) -> str:
        return PLUGIN_NAME

    @property
    def parameters(self) -> Parameters:
        return self._parameters

    @property
    def sample_rate(self) -> float:
        """The sample rate most recently given to ``prepare_to_play``."""
        return self._sample_rate

    def prepare_to_play(self, sample_rate: float, expected_max_frames_per_block: int) -> None:
        """Prepare the effect for playback at ``sample_rate``."""
        self._sample_rate = float(sample_rate)
        self._tremolo.prepare(sample_rate, expected_max_frames_per_block)
        self._bypass_smoother.prepare(
            sample_rate,
            int(expected_max_frames_per_block),
            max(int(self._input_channels), int(self._output_channels)),
        )

    def release_resources(self) -> None:
        """Reset the effect when playback stops."""
        self._tremolo.reset()
        self._bypass_smoother.reset()

    def is_buses_layout_supported(self, input_set: ChannelSet, output_set: ChannelSet) -> bool:
        """Only mono or stereo, with the input matching the output, is supported."""
        if output_set not in (ChannelSet.MONO, ChannelSet.STEREO):
            return False
        return output_set == input_set

    def process_block(self, buffer: np.ndarray) -> None:
        """Process a (channels, samples) or mono buffer in place."""
        if not isinstance(buffer, np.ndarray):
            raise TypeError("buffer must be a numpy array to be modified in place")
        channels = np.atleast_2d(buffer)

        # output channels without input data may hold garbage
        channels[int(self._input_channels):int(self._output_channels)] = 0.0

        bypassed = self._parameters.bypassed.value
        bypassed_and_not_transitioning = (
            bypassed and not self._bypass_smoother.is_transitioning()
        )
        # under full bypass, changes are applied at once so the LFO does not
        # morph between shapes when bypass is later turned off
        apply_smoothing = (
            ApplySmoothing.NO if bypassed_and_not_transitioning else ApplySmoothing.YES
        )

        self._tremolo.set_modulation_rate_hz(self._parameters.rate.value, apply_smoothing)
        self._tremolo.set_lfo_waveform(
            LfoWaveform(self._parameters.waveform.index), apply_smoothing
        )

        self._bypass_smoother.set_bypass(bypassed)

        if bypassed_and_not_transitioning:
            return

        self._bypass_smoother.set_dry_buffer(channels)
        self._tremolo.process(channels)
        self._bypass_smoother.mix_to_wet_buffer(channels)

    def get_state_information(self) -> bytes:
        """Return the parameters as a UTF-8 JSON document."""
        return serialize(self._parameters).encode("utf-8")

    def set_state_information(self, data: bytes | str) -> None:
        """Restore the parameters from saved state, skipping all smoothing.

        Invalid state is logged and leaves the parameters unchanged.
        """
        try:
            deserialize(data, self._parameters)
        except DeserializationError as error:
            _log.debug("%s", error)

        self._bypass_smoother.set_bypass_forced(self._parameters.bypassed.value)
        self._tremolo.set_lfo_waveform(
            LfoWaveform(self._parameters.waveform.index), ApplySmoothing.NO
        )
        self._tremolo.set_modulation_rate_hz(self._parameters.rate.value, ApplySmoothing.NO)

    def read_all_lfo_samples(self) -> np.ndarray:
        """Return the LFO samples generated since the last call."""
        return self._tremolo.read_all_lfo_samples()