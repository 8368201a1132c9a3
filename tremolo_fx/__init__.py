"""Tremolo audio effect for NumPy buffers, with bypass crossfades, LFO waveform switching and JSON state."""

__version__ = "1.0.0"