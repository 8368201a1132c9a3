"""Rolling plot data for the LFO that drives the tremolo."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

from tremolo_fx.strided_queue import StridedQueue

POINTS_ON_PATH = 22050
PERIODS_TO_PLOT_OF_1HZ_WAVEFORM = 4
Y_LIMIT = 1.1


class LfoCurve:
    """Keeps the most recent LFO samples, decimated, as a curve to draw.

    ``read_samples`` returns every LFO sample produced since its last call,
    ``get_sample_rate`` the current sample rate and ``is_bypassed`` whether
    the effect is bypassed, in which case the curve scrolls on with zeros.
    """

    def __init__(
        self,
        read_samples: Callable[[], np.ndarray],
        get_sample_rate: Callable[[], float],
        is_bypassed: Callable[[], bool],
    ) -> None:
        self._read_samples = read_samples
        self._get_sample_rate = get_sample_rate
        self._is_bypassed = is_bypassed
        self.curve_width = 4.0
        self.curve_colour = 0xFF000000
        self.background_colour = 0xFFFFFFFF
        self._queue = StridedQueue(POINTS_ON_PATH)
        self._last_timestamp: float | None = None
        self._points: tuple[tuple[float, float], ...] = ()
        self._samples_to_path()

    @property
    def stride(self) -> int:
        """How many LFO samples one point of the curve stands for."""
        return int(self._get_sample_rate() * PERIODS_TO_PLOT_OF_1HZ_WAVEFORM / POINTS_ON_PATH)

    def update(self, timestamp_seconds: float) -> None:
        """Take in the samples produced since the previous frame at ``timestamp_seconds``."""
        self._update_samples_queue(float(timestamp_seconds))
        self._samples_to_path()

    @property
    def points(self) -> tuple[tuple[float, float], ...]:
        """The curve as (x, y) points, x counting points from the oldest."""
        return self._points

    def transform(self, width: float, height: float) -> tuple[float, float, float, float, float, float]:
        """Return the affine map ``(a, b, c, d, e, f)`` from curve to view coordinates.

        A point (x, y) maps to (a*x + b*y + c, d*x + e*y + f) so that the
        value range [-Y_LIMIT, Y_LIMIT] fills the height, top to bottom, and
        the curve's last point lands on the right edge.
        """
        end_x = self._points[-1][0] if self._points else 0.0
        scale_x = width / end_x if end_x else 0.0
        scale_y = -height / (2.0 * Y_LIMIT)
        return (scale_x, 0.0, 0.0, 0.0, scale_y, height / 2.0)

    def _update_samples_queue(self, timestamp_seconds: float) -> None:
        if self._last_timestamp is None:
            self._last_timestamp = timestamp_seconds
            return

        samples = np.asarray(self._read_samples(), dtype=np.float32).ravel()
        self._queue.set_stride(self.stride)

        if self._is_bypassed():
            seconds_passed = timestamp_seconds - self._last_timestamp
            samples_passed = max(0, int(self._get_sample_rate() * seconds_passed))
            self._queue.push_back_zeros(samples_passed)
        elif len(samples) > 0:
            self._queue.push_back(samples.tolist())

        self._last_timestamp = timestamp_seconds

    def _samples_to_path(self) -> None:
        self._points = tuple(
            (float(position), float(self._queue[position])) for position in range(len(self._queue))
        )