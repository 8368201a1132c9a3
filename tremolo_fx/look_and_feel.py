"""Colours, geometry and styling of the tremolo's user interface."""

from __future__ import annotations

import bisect
import enum
from dataclasses import dataclass, field
from typing import NamedTuple

BUTTON_INSET_WIDTH = 2.0
BUTTON_CORNER_RADIUS = 4.0
INSET_CORNER_RADIUS = 6.0
POPUP_ITEM_HEIGHT = 24
POPUP_MIN_WIDTH = 128
LABEL_BORDER = 0

_DARK_BLUE = 0xFF153245


class Colors(enum.Enum):
    """Named colours of the interface."""

    ORANGE = 0xFFFFAA00
    PALE_BLUE = 0xFFDDECFF


def get_color(name: Colors) -> int:
    """Return the ARGB value of a named colour."""
    return Colors(name).value


@dataclass
class Rectangle:
    """An axis-aligned rectangle; ``remove_from_*`` cut a slice off in place."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def reduced(self, dx: float, dy: float | None = None) -> Rectangle:
        """Return a copy shrunk by ``dx`` on the left and right and ``dy`` on top and bottom."""
        dy = dx if dy is None else dy
        return Rectangle(
            self.x + dx,
            self.y + dy,
            max(0.0, self.width - 2 * dx),
            max(0.0, self.height - 2 * dy),
        )

    def remove_from_top(self, amount: float) -> Rectangle:
        amount = min(_non_negative(amount), self.height)
        removed = Rectangle(self.x, self.y, self.width, amount)
        self.y += amount
        self.height -= amount
        return removed

    def remove_from_bottom(self, amount: float) -> Rectangle:
        amount = min(_non_negative(amount), self.height)
        removed = Rectangle(self.x, self.y + self.height - amount, self.width, amount)
        self.height -= amount
        return removed

    def remove_from_left(self, amount: float) -> Rectangle:
        amount = min(_non_negative(amount), self.width)
        removed = Rectangle(self.x, self.y, amount, self.height)
        self.x += amount
        self.width -= amount
        return removed

    def remove_from_right(self, amount: float) -> Rectangle:
        amount = min(_non_negative(amount), self.width)
        removed = Rectangle(self.x + self.width - amount, self.y, amount, self.height)
        self.width -= amount
        return removed

    @property
    def centre_x(self) -> float:
        return self.x + self.width / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height


def _non_negative(amount: float) -> float:
    if amount < 0:
        raise ValueError("amount to remove must not be negative")
    return amount


@dataclass
class Gradient:
    """A colour gradient between two points with optional intermediate stops."""

    colour1: int
    point1: tuple[float, float]
    colour2: int
    point2: tuple[float, float]
    radial: bool = False
    stops: list[tuple[float, int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.stops:
            self.stops = [(0.0, self.colour1), (1.0, self.colour2)]

    @classmethod
    def vertical(cls, top: int, bottom: int, bounds: Rectangle) -> Gradient:
        """A linear gradient from the top edge of ``bounds`` to its bottom edge."""
        return cls(top, (bounds.x, bounds.y), bottom, (bounds.x, bounds.bottom))

    def add_colour(self, position: float, colour: int) -> None:
        """Insert a colour stop at ``position`` between 0 and 1."""
        if not 0.0 <= position <= 1.0:
            raise ValueError("gradient position must be between 0 and 1")
        positions = [stop for stop, _ in self.stops]
        self.stops.insert(bisect.bisect_right(positions, position), (float(position), colour))

    def colour_at(self, position: float) -> int:
        """The ARGB colour at ``position``, interpolated between neighbouring stops."""
        first_position, first_colour = self.stops[0]
        if position <= first_position:
            return first_colour
        for (start, start_colour), (end, end_colour) in zip(self.stops, self.stops[1:]):
            if position <= end:
                if end == start:
                    return end_colour
                return _interpolate(start_colour, end_colour, (position - start) / (end - start))
        return self.stops[-1][1]


def _interpolate(colour1: int, colour2: int, proportion: float) -> int:
    result = 0
    for shift in (24, 16, 8, 0):
        a = (colour1 >> shift) & 0xFF
        b = (colour2 >> shift) & 0xFF
        result |= (a + round((b - a) * proportion)) << shift
    return result


class RotaryArc(NamedTuple):
    """The value arc of a rotary slider."""

    bounds: Rectangle
    start_angle: float
    end_angle: float


class ButtonStyle(NamedTuple):
    """How a button is filled and labelled in one of its states."""

    inset_stops: tuple[tuple[float, int], ...]
    fill_stops: tuple[tuple[float, int], ...]
    text_colour: int
    bold: bool
    font_height: float


_INSET_STOPS = ((0.0, 0xFF22232C), (0.35, 0xFF303538), (1.0, 0xFF263235))
_BLUE_BUTTON_STOPS = ((0.0, 0xFF4A7090), (0.73, 0xFF315160), (1.0, 0xFF324258))
_ORANGE_BUTTON_STOPS = ((0.0, 0xFFFF901A), (1.0, 0xFFFFC300))
_TOGGLED_TEXT_COLOUR = 0xFF501A0B


class LookAndFeel:
    """Colour scheme and drawing geometry of the tremolo's controls."""

    def __init__(self) -> None:
        pale_blue = get_color(Colors.PALE_BLUE)
        self._colours = {
            "combo_box.text": pale_blue,
            "label.text": pale_blue,
            "popup_menu.background": _DARK_BLUE,
            "popup_menu.text": pale_blue,
            "popup_menu.highlighted_text": 0xFF0C131E,
            "popup_menu.highlighted_background": get_color(Colors.ORANGE),
            "bubble.background": _DARK_BLUE,
            "bubble.outline": 0xFF0C0E16,
        }

    def colour(self, colour_id: str) -> int:
        """Return the ARGB colour set for ``colour_id``; raises KeyError if none is."""
        return self._colours[colour_id]

    def side_labels_font_height(self) -> float:
        return 10.0

    def rate_label_font_height(self) -> float:
        return 12.0

    def rotary_arc(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        slider_pos: float,
        start_angle: float,
        end_angle: float,
    ) -> RotaryArc:
        """The arc showing a rotary slider's value, ``slider_pos`` being in [0, 1]."""
        canal = Rectangle(x, y, width, height).reduced(3.75)
        to_angle = start_angle + slider_pos * (end_angle - start_angle)
        return RotaryArc(canal.reduced(0.25), start_angle, to_angle)

    def knob_gradient(self, bounds: Rectangle) -> Gradient:
        """The fill of a knob body occupying ``bounds``."""
        gradient = Gradient.vertical(0xFF4A7090, 0xFF060F1C, bounds)
        gradient.add_colour(0.29, 0xFF396086)
        gradient.add_colour(0.75, 0xFF2C3648)
        return gradient

    def combo_box_arrow(
        self, width: float, height: float
    ) -> tuple[tuple[float, float], tuple[float, float], tuple[float, float]]:
        """The drop-down arrow as its top-left, bottom apex and top-right points."""
        arrow = Rectangle(0.0, 0.0, width, height).reduced(10.0, 11.0)
        arrow.remove_from_left(104.0)
        return (
            (arrow.x, arrow.y),
            (arrow.centre_x, arrow.bottom),
            (arrow.x + arrow.width, arrow.y),
        )

    def combo_box_text_bounds(self, width: float, height: float) -> Rectangle:
        """Where a combo box's text goes, leaving room for the arrow."""
        bounds = Rectangle(0.0, 0.0, width, height).reduced(10.0, 6.0)
        bounds.remove_from_right(12.0)
        return bounds

    def toggle_button_style(self, toggled: bool) -> ButtonStyle:
        """Blue with pale text when off, orange with bold dark text when on."""
        if toggled:
            return ButtonStyle(_INSET_STOPS, _ORANGE_BUTTON_STOPS, _TOGGLED_TEXT_COLOUR, True, 12.0)
        return ButtonStyle(
            _INSET_STOPS, _BLUE_BUTTON_STOPS, get_color(Colors.PALE_BLUE), False, 12.0
        )