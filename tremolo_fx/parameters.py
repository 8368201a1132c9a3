"""Automatable parameters of the tremolo effect."""

from __future__ import annotations

import math
from collections.abc import Sequence

VERSION_HINT = 1


class FloatParameter:
    """A continuous parameter on a range, optionally snapped and skewed."""

    def __init__(
        self,
        parameter_id: str,
        name: str,
        minimum: float,
        maximum: float,
        interval: float = 0.0,
        skew: float = 1.0,
        default: float | None = None,
        label: str = "",
    ) -> None:
        if not minimum < maximum:
            raise ValueError("minimum must be below maximum")
        if interval < 0:
            raise ValueError("interval must not be negative")
        if not skew > 0:
            raise ValueError("skew must be positive")
        self.parameter_id = parameter_id
        self.version_hint = VERSION_HINT
        self.name = name
        self.minimum = float(minimum)
        self.maximum = float(maximum)
        self.interval = float(interval)
        self.skew = float(skew)
        self.label = label
        self.default = self._snap(self.minimum if default is None else float(default))
        self._value = self.default

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, new_value: float) -> None:
        self._value = self._snap(float(new_value))

    @property
    def normalised(self) -> float:
        """The value mapped to [0, 1], taking the skew into account."""
        proportion = (self._value - self.minimum) / (self.maximum - self.minimum)
        proportion = min(max(proportion, 0.0), 1.0)
        return proportion if self.skew == 1.0 else proportion**self.skew

    def _snap(self, candidate: float) -> float:
        if self.interval > 0:
            steps = math.floor((candidate - self.minimum) / self.interval + 0.5)
            candidate = self.minimum + self.interval * steps
        return min(max(candidate, self.minimum), self.maximum)

    def __repr__(self) -> str:
        return f"FloatParameter({self.parameter_id!r}, value={self._value!r})"


class BoolParameter:
    """An on/off parameter."""

    def __init__(self, parameter_id: str, name: str, default: bool = False) -> None:
        self.parameter_id = parameter_id
        self.version_hint = VERSION_HINT
        self.name = name
        self.default = bool(default)
        self._value = self.default

    @property
    def value(self) -> bool:
        return self._value

    @value.setter
    def value(self, new_value: bool) -> None:
        self._value = bool(new_value)

    def __repr__(self) -> str:
        return f"BoolParameter({self.parameter_id!r}, value={self._value!r})"


class ChoiceParameter:
    """A parameter selecting one of a fixed list of names."""

    def __init__(
        self, parameter_id: str, name: str, choices: Sequence[str], default: int = 0
    ) -> None:
        if not choices:
            raise ValueError("choices must not be empty")
        self.parameter_id = parameter_id
        self.version_hint = VERSION_HINT
        self.name = name
        self.choices = tuple(choices)
        self.default = self._clamp(default)
        self._index = self.default

    @property
    def index(self) -> int:
        return self._index

    @index.setter
    def index(self, new_index: int) -> None:
        self._index = self._clamp(new_index)

    @property
    def current_choice_name(self) -> str:
        return self.choices[self._index]

    def _clamp(self, candidate: float) -> int:
        return min(max(int(math.floor(candidate + 0.5)), 0), len(self.choices) - 1)

    def __repr__(self) -> str:
        return f"ChoiceParameter({self.parameter_id!r}, index={self._index!r})"


class Parameters:
    """The tremolo's parameter set: modulation rate, bypass and LFO waveform."""

    def __init__(self) -> None:
        self.rate = FloatParameter(
            "modulation.rate",
            "Modulation rate",
            minimum=0.1,
            maximum=20.0,
            interval=0.01,
            skew=0.4,
            default=5.0,
            label="Hz",
        )
        self.bypassed = BoolParameter("bypassed", "Bypass", default=False)
        self.waveform = ChoiceParameter(
            "modulation.waveform", "Modulation waveform", ("Sine", "Triangle"), default=0
        )

    def all(self) -> tuple[FloatParameter, BoolParameter, ChoiceParameter]:
        """Return the parameters in the order they are published to a host."""
        return (self.rate, self.bypassed, self.waveform)