"""Fixed-size queue that keeps every n-th sample of a stream."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any


class StridedQueue:
    """Holds the most recent ``size`` samples taken every ``stride`` samples.

    The stride phase is carried over between pushes, so a stream split into
    blocks of any length is decimated the same way as the whole stream.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._elements: list[Any] = [0.0] * size
        self._element_index = 0
        self._stride = 1

    def set_stride(self, stride: int) -> None:
        """Set the decimation step; values below 1 are clamped to 1."""
        self._stride = max(1, int(stride))

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> Any:
        position = operator.index(index)
        if not 0 <= position < len(self._elements):
            raise IndexError(f"index {position} out of range")
        return self._elements[position]

    def front(self) -> Any:
        """Return the oldest kept sample."""
        return self._elements[0]

    def push_back(self, samples: Sequence[Any]) -> None:
        """Append every ``stride``-th sample of ``samples``, dropping the oldest."""
        count = len(samples)
        size = len(self._elements)
        available = self._new_elements_count(count)

        if available < size:
            self._rotate(available)

        added = min(available, size)
        if added:
            end = self._element_index + (available - 1) * self._stride
            start = end - (added - 1) * self._stride
            self._elements[size - added:] = list(samples[start:end + 1:self._stride])

        self._element_index = (
            self._element_index + (count // self._stride + 1) * self._stride - count
        ) % self._stride

    def push_back_zeros(self, count: int) -> None:
        """Append as many zeros as ``count`` samples would yield at the current stride."""
        # the stride phase restarts: the zeros break the stream's continuity
        self._element_index = 0

        size = len(self._elements)
        available = self._new_elements_count(count)
        if available < size:
            self._rotate(available)

        begin = max(0, size - available)
        self._elements[begin:] = [0.0] * (size - begin)

    def _new_elements_count(self, sample_count: int) -> int:
        lower_bound = sample_count // self._stride
        if lower_bound * self._stride + self._element_index < sample_count:
            return lower_bound + 1
        return lower_bound

    def _rotate(self, shift: int) -> None:
        self._elements = self._elements[shift:] + self._elements[:shift]