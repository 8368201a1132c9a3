"""Small interface examples: layouts, label justifications and a long-running task."""

from __future__ import annotations

import enum
import math
import threading
from collections.abc import Callable

from tremolo_fx.look_and_feel import Rectangle

LIMIT = 10_000_000


class Justification(enum.IntFlag):
    """Placement of content within a rectangle."""

    LEFT = 1
    RIGHT = 2
    HORIZONTALLY_CENTRED = 4
    TOP = 8
    BOTTOM = 16
    VERTICALLY_CENTRED = 32
    HORIZONTALLY_JUSTIFIED = 64
    CENTRED = HORIZONTALLY_CENTRED | VERTICALLY_CENTRED
    CENTRED_LEFT = LEFT | VERTICALLY_CENTRED
    CENTRED_RIGHT = RIGHT | VERTICALLY_CENTRED
    CENTRED_TOP = HORIZONTALLY_CENTRED | TOP
    CENTRED_BOTTOM = HORIZONTALLY_CENTRED | BOTTOM
    TOP_LEFT = LEFT | TOP
    TOP_RIGHT = RIGHT | TOP
    BOTTOM_LEFT = LEFT | BOTTOM
    BOTTOM_RIGHT = RIGHT | BOTTOM


def split_coordinates(width: float, height: float) -> tuple[Rectangle, Rectangle]:
    """Split an area into its upper and lower halves."""
    half = height / 2
    return Rectangle(0.0, 0.0, float(width), half), Rectangle(0.0, half, float(width), half)


def justification_labels() -> list[tuple[str, Justification]]:
    """The labels drawn on top of each other, one per non-conflicting justification."""
    return [
        ("centred", Justification.CENTRED),
        ("centredLeft", Justification.CENTRED_LEFT),
        ("centredRight", Justification.CENTRED_RIGHT),
        ("centredTop", Justification.CENTRED_TOP),
        ("centredBottom", Justification.CENTRED_BOTTOM),
        ("topLeft", Justification.TOP_LEFT),
        ("topRight", Justification.TOP_RIGHT),
        ("bottomLeft", Justification.BOTTOM_LEFT),
        ("bottomRight", Justification.BOTTOM_RIGHT),
    ]


def label_bounds(width: float, height: float) -> Rectangle:
    """The area shared by all justification labels."""
    return Rectangle(0, 0, width, height).reduced(20)


def find_largest_prime(
    limit: int = LIMIT,
    on_progress: Callable[[float], None] | None = None,
    should_exit: Callable[[], bool] | None = None,
) -> int | None:
    """Return the largest prime below ``limit`` by trial division.

    Progress in [0, 1] is reported whenever it grows by a whole percent, and
    1.0 at the end. Returns None if ``should_exit`` asks to stop early.
    """
    largest = 2
    percent = 0
    for candidate in range(3, limit, 2):
        if should_exit is not None and should_exit():
            return None
        if all(candidate % divisor for divisor in range(3, math.isqrt(candidate) + 1)):
            largest = candidate
        new_percent = int(candidate * 100 / limit)
        if new_percent > percent:
            percent = new_percent
            if on_progress is not None:
                on_progress(min(percent / 100, 1.0))
    if on_progress is not None:
        on_progress(1.0)
    return largest


def result_text(limit: int, prime: int) -> str:
    return f"Largest prime number < {limit} found: {prime}"


def long_running_layout(width: float, height: float) -> tuple[Rectangle, Rectangle, Rectangle]:
    """Bounds of the start button, progress bar and result label, top to bottom."""
    bounds = Rectangle(0, 0, width, height)
    button = bounds.remove_from_top(100).reduced(20)
    progress = bounds.remove_from_top(100).reduced(20)
    label = bounds.remove_from_top(100).reduced(20)
    return button, progress, label


def thread_id_hex(thread_id: int) -> str:
    """A thread identifier as lower-case hex of its 64-bit two's-complement value."""
    return format(thread_id & 0xFFFF_FFFF_FFFF_FFFF, "x")


def button_bounds(width: float, height: float) -> Rectangle:
    """The single button of the thread-printing and event-handler examples."""
    return Rectangle(0, 0, width, height).reduced(50)


class PrimeSearch:
    """Runs ``find_largest_prime`` on a background thread."""

    def __init__(
        self,
        limit: int = LIMIT,
        on_progress: Callable[[float], None] | None = None,
        on_result: Callable[[int], None] | None = None,
    ) -> None:
        self.limit = limit
        self._on_progress = on_progress
        self._on_result = on_result
        self._progress = 0.0
        self._lock = threading.Lock()
        self._exit = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def progress(self) -> float:
        with self._lock:
            return self._progress

    def start(self) -> bool:
        """Start the search; return False if one is already running."""
        if self._thread is not None and self._thread.is_alive():
            return False
        with self._lock:
            self._progress = 0.0
        self._exit.clear()
        self._thread = threading.Thread(target=self._run, name="LongRunningTask", daemon=True)
        self._thread.start()
        return True

    def stop(self, timeout: float = 0.1) -> bool:
        """Ask the search to stop and wait; return whether it has stopped."""
        self._exit.set()
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _set_progress(self, value: float) -> None:
        with self._lock:
            self._progress = value
        if self._on_progress is not None:
            self._on_progress(value)

    def _run(self) -> None:
        result = find_largest_prime(self.limit, self._set_progress, self._exit.is_set)
        if result is not None and self._on_result is not None:
            self._on_result(result)