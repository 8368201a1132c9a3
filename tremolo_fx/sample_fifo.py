"""Single-channel sample queue between the audio and display sides."""

from __future__ import annotations

from collections import deque

import numpy as np

_INITIAL_CAPACITY = 1024


class SampleFifo:
    """Bounded FIFO of samples; new samples are dropped while it is full.

    Like a classic ring buffer, one slot of the capacity is kept free, so a
    FIFO of capacity ``n`` holds at most ``n - 1`` samples.
    """

    def __init__(self) -> None:
        self._capacity = _INITIAL_CAPACITY
        self._samples: deque[float] = deque()

    def prepare(self, sample_rate: float) -> None:
        """Size the FIFO to hold about one second of samples and empty it."""
        capacity = int(sample_rate)
        if capacity < 1:
            raise ValueError("sample rate must give a capacity of at least one sample")
        self._capacity = capacity
        self._samples.clear()

    def push(self, sample: float) -> None:
        """Append a sample unless the FIFO is full."""
        if len(self._samples) < self._capacity - 1:
            self._samples.append(sample)

    def pop_all(self) -> np.ndarray:
        """Remove and return every queued sample, oldest first."""
        result = np.fromiter(self._samples, dtype=np.float32, count=len(self._samples))
        self._samples.clear()
        return result

    def reset(self) -> None:
        """Discard all queued samples."""
        self._samples.clear()