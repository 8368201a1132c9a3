"""Saving and restoring the tremolo parameters as JSON."""

from __future__ import annotations

import json
from typing import Any, NamedTuple

from tremolo_fx.parameters import Parameters

PLUGIN_NAME = "Tremolo"
MARSHALLING_VERSION = 1
_MAX_DECIMAL_PLACES = 2


class DeserializationError(ValueError):
    """Raised when saved parameters cannot be restored."""


class _SavedState(NamedTuple):
    rate: float
    bypassed: bool
    waveform: str


# what a document of another version or another plugin yields
_EMPTY_STATE = _SavedState(rate=0.0, bypassed=False, waveform="")


def serialize(parameters: Parameters) -> str:
    """Return the parameters as a multi-line JSON document."""
    document = {
        "__version__": MARSHALLING_VERSION,
        "pluginName": PLUGIN_NAME,
        "modulationRateHz": round(float(parameters.rate.value), _MAX_DECIMAL_PLACES),
        "bypassed": bool(parameters.bypassed.value),
        "modulationWaveform": parameters.waveform.current_choice_name,
    }
    return json.dumps(document, indent=2, ensure_ascii=False)


def deserialize(text: str | bytes, parameters: Parameters) -> None:
    """Update ``parameters`` from a JSON document.

    Raises DeserializationError on failure, in which case no parameter is changed.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as error:
            raise DeserializationError(f"saved state is not valid UTF-8: {error}") from error

    try:
        document = json.loads(text)
    except json.JSONDecodeError as error:
        raise DeserializationError(f"invalid JSON: {error}") from error

    state = _read_state(document)

    choices = parameters.waveform.choices
    if state.waveform not in choices:
        raise DeserializationError(
            "invalid modulation waveform name; supported values are: " + ", ".join(choices)
        )

    parameters.waveform.index = choices.index(state.waveform)
    parameters.rate.value = state.rate
    parameters.bypassed.value = state.bypassed


def _read_state(document: Any) -> _SavedState:
    failure = DeserializationError("failed to parse parameters from JSON representation")
    if not isinstance(document, dict):
        raise failure

    version = document.get("__version__")
    if isinstance(version, bool) or version != MARSHALLING_VERSION:
        return _EMPTY_STATE

    plugin_name = document.get("pluginName")
    if not isinstance(plugin_name, str):
        raise failure
    if plugin_name != PLUGIN_NAME:
        return _EMPTY_STATE

    rate = document.get("modulationRateHz")
    bypassed = document.get("bypassed")
    waveform = document.get("modulationWaveform")
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        raise failure
    if not isinstance(bypassed, bool) or not isinstance(waveform, str):
        raise failure

    return _SavedState(rate=float(rate), bypassed=bypassed, waveform=waveform)