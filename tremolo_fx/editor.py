"""Editor model of the tremolo: control state, layout and the about popup."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from datetime import datetime

from tremolo_fx.lfo_curve import LfoCurve
from tremolo_fx.look_and_feel import Colors, LookAndFeel, Rectangle, get_color
from tremolo_fx.processor import PluginProcessor

EDITOR_WIDTH = 540
EDITOR_HEIGHT = 270

MANUFACTURER = "Tremolo FX"
VERSION = "0.0.0"

WAVEFORM_LABEL_TEXT = "WAVEFORM"
RATE_LABEL_TEXT = "RATE"
BYPASS_LABEL_TEXT = "BYPASS"
RATE_SUFFIX = " Hz"

SIDE_FONT_COLOUR = 0xFF6EA0C7
TRANSPARENT_BLACK = 0x00000000
LFO_CURVE_WIDTH = 2.0

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_BUILT = datetime.now()


def bypass_button_text(toggled: bool) -> str:
    """The bypass button caption for its toggle state."""
    return "Bypassed" if toggled else "Off"


def about_message(manufacturer: str, name: str, version: str, built: datetime) -> str:
    """The about text: manufacturer, name, build date and time, and version."""
    date = f"{_MONTHS[built.month - 1]} {built.day:2d} {built.year}"
    time = f"{built.hour:02d}:{built.minute:02d}:{built.second:02d}"
    return f"{manufacturer}\n{name}\n{date}\n{time}\nv{version}"


class MessageOnClick:
    """Shows a message when its target is double-clicked, unless already shown."""

    def __init__(self, message: str, show: Callable[[str], None]) -> None:
        self.message = message
        self._show = show
        self.visible = False

    def on_double_click(self) -> bool:
        """Display the message if it is not visible; return whether it was displayed."""
        if self.visible:
            return False
        self.visible = True
        self._show(self.message)
        return True


class PluginEditor:
    """The state and layout of the tremolo's controls, bound to a processor."""

    def __init__(self, processor: PluginProcessor) -> None:
        self.processor = processor
        self.look_and_feel = LookAndFeel()
        self.width = EDITOR_WIDTH
        self.height = EDITOR_HEIGHT
        self.waveform_items = tuple(processor.parameters.waveform.choices)
        self.label_texts = {
            "waveform_label": WAVEFORM_LABEL_TEXT,
            "rate_label": RATE_LABEL_TEXT,
            "bypass_label": BYPASS_LABEL_TEXT,
        }
        self.side_label_colour = SIDE_FONT_COLOUR
        self.displayed_message: str | None = None

        self.lfo_curve = LfoCurve(
            processor.read_all_lfo_samples,
            lambda: processor.sample_rate,
            lambda: processor.parameters.bypassed.value,
        )
        self.lfo_curve.curve_width = LFO_CURVE_WIDTH
        self.lfo_curve.curve_colour = get_color(Colors.ORANGE)
        self.lfo_curve.background_colour = TRANSPARENT_BLACK

        self.about = MessageOnClick(
            about_message(MANUFACTURER, processor.name, VERSION, _BUILT),
            self._display,
        )

    @property
    def bypass_text(self) -> str:
        """The bypass button caption for the current bypass parameter."""
        return bypass_button_text(self.processor.parameters.bypassed.value)

    @property
    def rate_text(self) -> str:
        """The rate popup text, value followed by its unit."""
        return f"{self.processor.parameters.rate.value:g}{RATE_SUFFIX}"

    def layout(self, width: float = EDITOR_WIDTH, height: float = EDITOR_HEIGHT) -> dict[str, Rectangle]:
        """Bounds of every control for an editor of the given size."""
        bounds = Rectangle(0, 0, width, height)

        lfo = bounds.reduced(18, 27)
        lfo.remove_from_top(122)

        rate = bounds.reduced(230, 40)
        rate.remove_from_bottom(110)

        waveform_box = dataclasses.replace(bounds)
        waveform_box.remove_from_top(66)
        waveform_box.remove_from_right(392)
        waveform_box.remove_from_bottom(176)
        waveform_box.remove_from_left(16)

        waveform_label = dataclasses.replace(bounds)
        waveform_label.remove_from_top(48)
        # wider than the design to avoid an ellipsis in the text
        waveform_label.remove_from_right(461)
        waveform_label.remove_from_bottom(206)
        waveform_label.remove_from_left(20)

        bypass_button = dataclasses.replace(bounds)
        bypass_button.remove_from_top(66)
        bypass_button.remove_from_right(16)
        bypass_button.remove_from_bottom(176)
        bypass_button.remove_from_left(392)

        bypass_label = dataclasses.replace(bounds)
        bypass_label.remove_from_top(48)
        bypass_label.remove_from_right(104)
        bypass_label.remove_from_bottom(206)
        bypass_label.remove_from_left(396)

        return {
            "background": dataclasses.replace(bounds),
            "logo": Rectangle(16, 16, 105, 24),
            "lfo_visualizer": lfo,
            "rate_slider": rate,
            "rate_label": dataclasses.replace(rate),
            "waveform_combo_box": waveform_box,
            "waveform_label": waveform_label,
            "bypass_button": bypass_button,
            "bypass_label": bypass_label,
        }

    def toggle_bypass(self) -> str:
        """Flip the bypass parameter and return the new button caption."""
        bypassed = self.processor.parameters.bypassed
        bypassed.value = not bypassed.value
        return self.bypass_text

    def select_waveform(self, index: int) -> str:
        """Select an LFO waveform by its item index and return its name."""
        if not 0 <= index < len(self.waveform_items):
            raise ValueError(f"no waveform at index {index}")
        waveform = self.processor.parameters.waveform
        waveform.index = index
        return waveform.current_choice_name

    def set_rate(self, rate_hz: float) -> float:
        """Set the modulation rate and return the value the parameter took."""
        rate = self.processor.parameters.rate
        rate.value = rate_hz
        return rate.value

    def _display(self, message: str) -> None:
        self.displayed_message = message