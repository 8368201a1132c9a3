import math

import numpy as np
import pytest

from tremolo_fx.tremolo import (
    ApplySmoothing,
    LfoWaveform,
    Oscillator,
    Tremolo,
    triangle,
)

SAMPLE_RATE = 48000.0
DEPTH = 0.4


def extract_lfo(tremolo: Tremolo, buffer: np.ndarray) -> None:
    buffer.fill(1.0)
    tremolo.process(buffer)
    buffer -= 1.0


@pytest.mark.parametrize("waveform", [LfoWaveform.SINE, LfoWaveform.TRIANGLE])
def test_extract_lfo(waveform):
    testee = Tremolo()
    testee.set_lfo_waveform(waveform)
    testee.prepare(SAMPLE_RATE, int(SAMPLE_RATE))
    buffer = np.zeros((1, int(SAMPLE_RATE)), dtype=np.float32)

    extract_lfo(testee, buffer)

    lfo = buffer[0]
    assert lfo[0] == pytest.approx(0.0, abs=1e-6)
    assert np.all(np.abs(lfo) <= DEPTH + 1e-5)
    # quarter period of the default 5 Hz rate is the positive peak
    assert lfo[2400] == pytest.approx(DEPTH, abs=1e-4)
    assert lfo[7200] == pytest.approx(-DEPTH, abs=1e-4)


def test_lfo_waveform_transition_is_smooth():
    testee = Tremolo()
    block = int(SAMPLE_RATE)
    testee.prepare(SAMPLE_RATE, block)
    first = np.zeros((1, block), dtype=np.float32)
    second = np.zeros((1, block), dtype=np.float32)

    testee.set_lfo_waveform(LfoWaveform.SINE)
    extract_lfo(testee, first)
    testee.set_lfo_waveform(LfoWaveform.TRIANGLE)
    extract_lfo(testee, second)

    output = np.concatenate([first[0], second[0]])
    assert np.max(np.abs(np.diff(output))) < 1e-3


def test_waveform_switch_at_peak_is_ramped_not_jumped():
    smoothed = Tremolo()
    smoothed.prepare(SAMPLE_RATE, 2400)
    forced = Tremolo()
    forced.prepare(SAMPLE_RATE, 2400)

    outputs = []
    lfos = []
    for testee, smoothing in ((smoothed, ApplySmoothing.YES), (forced, ApplySmoothing.NO)):
        first = np.zeros((1, 2400), dtype=np.float32)
        second = np.zeros((1, 2400), dtype=np.float32)
        extract_lfo(testee, first)
        testee.set_lfo_waveform(LfoWaveform.TRIANGLE, smoothing)
        extract_lfo(testee, second)
        outputs.append(np.concatenate([first[0], second[0]]))
        lfos.append(testee.read_all_lfo_samples())

    assert len(lfos[0]) == 4800
    assert len(lfos[1]) == 4800
    assert np.max(np.abs(np.diff(lfos[0]))) < 2.5e-3
    assert np.max(np.abs(np.diff(lfos[1]))) > 0.75
    assert np.max(np.abs(np.diff(outputs[0]))) < 1e-3
    assert np.max(np.abs(np.diff(outputs[1]))) > 0.3


def test_samplewise_and_channelwise_processing_yield_identical_results():
    rng = np.random.default_rng(0)
    signal = rng.uniform(-1.0, 1.0, int(SAMPLE_RATE)).astype(np.float32)
    samplewise_buffer = signal.reshape(1, -1).copy()
    channelwise_buffer = samplewise_buffer.copy()

    samplewise = Tremolo()
    channelwise = Tremolo()
    samplewise.prepare(SAMPLE_RATE, len(signal))
    channelwise.prepare(SAMPLE_RATE, len(signal))

    samplewise.process(samplewise_buffer)
    channelwise.process_channelwise(channelwise_buffer)

    np.testing.assert_allclose(samplewise_buffer, channelwise_buffer, atol=1e-5)
    assert not np.allclose(samplewise_buffer, signal)


def test_all_channels_receive_the_same_modulation():
    testee = Tremolo()
    testee.prepare(SAMPLE_RATE, 512)
    buffer = np.ones((2, 512), dtype=np.float32)
    buffer[1] *= 2.0

    testee.process(buffer)

    np.testing.assert_allclose(buffer[1], 2.0 * buffer[0], rtol=1e-6)


def test_mono_buffer_is_modified_in_place():
    testee = Tremolo()
    testee.prepare(SAMPLE_RATE, 4800)
    buffer = np.ones(4800, dtype=np.float32)

    testee.process(buffer)

    assert buffer[2400] == pytest.approx(1.0 + DEPTH, abs=1e-4)


def test_read_all_lfo_samples_matches_modulation():
    testee = Tremolo()
    testee.prepare(SAMPLE_RATE, 512)
    buffer = np.ones((1, 100), dtype=np.float32)

    testee.process(buffer)
    lfo = testee.read_all_lfo_samples()

    assert len(lfo) == 100
    np.testing.assert_allclose(buffer[0] - 1.0, DEPTH * lfo, atol=1e-6)
    assert len(testee.read_all_lfo_samples()) == 0


def test_forced_waveform_matches_fresh_instance():
    switched = Tremolo()
    switched.prepare(SAMPLE_RATE, 1000)
    switched.process(np.ones((1, 1000), dtype=np.float32))
    switched.set_lfo_waveform(LfoWaveform.TRIANGLE, ApplySmoothing.NO)

    fresh = Tremolo()
    fresh.set_lfo_waveform(LfoWaveform.TRIANGLE, ApplySmoothing.NO)
    fresh.prepare(SAMPLE_RATE, 1000)

    a = np.ones((1, 1000), dtype=np.float32)
    b = np.ones((1, 1000), dtype=np.float32)
    switched.process(a)
    fresh.process(b)

    np.testing.assert_allclose(a, b, atol=1e-6)


def test_forced_rate_change_sets_lfo_period():
    testee = Tremolo()
    testee.prepare(SAMPLE_RATE, 4800)
    testee.set_modulation_rate_hz(10.0, ApplySmoothing.NO)
    buffer = np.zeros((1, 4800), dtype=np.float32)

    extract_lfo(testee, buffer)
    lfo = testee.read_all_lfo_samples()

    assert len(lfo) == 4800
    assert lfo[1200] == pytest.approx(1.0, abs=1e-4)
    assert lfo[3600] == pytest.approx(-1.0, abs=1e-4)
    assert buffer[0, 1200] == pytest.approx(DEPTH, abs=1e-4)


def test_reset_restarts_lfo_and_clears_fifo():
    testee = Tremolo()
    testee.prepare(SAMPLE_RATE, 512)
    testee.process(np.ones((1, 300), dtype=np.float32))

    testee.reset()

    assert len(testee.read_all_lfo_samples()) == 0
    buffer = np.zeros((1, 10), dtype=np.float32)
    extract_lfo(testee, buffer)
    assert buffer[0, 0] == pytest.approx(0.0, abs=1e-6)


def test_channelwise_before_prepare_leaves_buffer_unchanged():
    testee = Tremolo()
    buffer = np.full((1, 16), 0.5, dtype=np.float32)

    testee.process_channelwise(buffer)

    np.testing.assert_array_equal(buffer, np.full((1, 16), 0.5, dtype=np.float32))


def test_invalid_waveform_is_rejected():
    testee = Tremolo()
    with pytest.raises(ValueError):
        testee.set_lfo_waveform(5)


def test_integer_buffer_is_rejected():
    testee = Tremolo()
    with pytest.raises(TypeError):
        testee.process(np.ones((1, 4), dtype=np.int32))


def test_triangle_shape():
    assert triangle(0.0) == pytest.approx(0.0, abs=1e-12)
    assert triangle(math.pi / 2) == pytest.approx(1.0)
    assert triangle(3 * math.pi / 2) == pytest.approx(-1.0)
    assert triangle(math.pi) == pytest.approx(0.0, abs=1e-12)


def test_oscillator_passes_phase_and_adds_input():
    oscillator = Oscillator(lambda phase: phase)
    oscillator.prepare(SAMPLE_RATE)
    oscillator.set_frequency(440.0, True)

    first = oscillator.process_sample(1.0)
    second = oscillator.process_sample(0.0)

    assert first == pytest.approx(1.0 - math.pi)
    assert second == pytest.approx(2 * math.pi * 440.0 / SAMPLE_RATE - math.pi)


def test_oscillator_rejects_non_positive_sample_rate():
    oscillator = Oscillator(math.sin)
    with pytest.raises(ValueError):
        oscillator.prepare(0.0)