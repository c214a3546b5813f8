"""Render tire records back into the compact telemetry text form.

Canonical single-record form::

    T<key>=<actual>[/<preferred>][,<temperature>]

``<key>`` is the two-digit flat index (``T09``) or, per axle, the
two-digit axle and the position (``T02-1``). Values use one decimal place.
"""

from __future__ import annotations

from pytpms._constants import CANONICAL_AXLE_SEPARATOR, KEY_PREFIX
from pytpms.config import TireLayout, resolve_layout
from pytpms.indexing import get_axle_index, get_axle_tire_index
from pytpms.models.collection import TireStates, iter_states
from pytpms.models.tire import TireState


def _format_value(value: float) -> str:
    return f"{value:.1f}"


def to_key_string(
    state: TireState,
    per_axle: bool = True,
    default_index: int = -1,
    layout: TireLayout | None = None,
) -> str:
    """Return the ``T...`` key for *state*.

    *default_index* is used when the record has no index; with neither, or
    with a default beyond the layout's maximum tire count, the key is a
    bare ``"T"``.
    """
    if state.tire_index is not None:
        tire_index = state.tire_index
        layout = layout or state.layout
    elif 0 <= default_index < resolve_layout(layout).max_tires:
        tire_index = default_index
    else:
        return KEY_PREFIX

    if per_axle:
        axle = get_axle_index(tire_index, layout)
        position = get_axle_tire_index(tire_index, layout)
        return f"{KEY_PREFIX}{axle:02d}{CANONICAL_AXLE_SEPARATOR}{position}"
    return f"{KEY_PREFIX}{tire_index:02d}"


def pressure_string(state: TireState, prefix: str | None = None) -> str:
    """Return ``<actual>[/<preferred>]``, or ``""`` with no pressure at all."""
    if not (state.has_actual_pressure or state.has_preferred_pressure):
        return ""
    text = prefix or ""
    if state.actual_pressure is not None:
        text += _format_value(state.actual_pressure)
    if state.preferred_pressure is not None:
        text += "/" + _format_value(state.preferred_pressure)
    return text


def temperature_string(state: TireState, prefix: str | None = None) -> str:
    if state.temperature is None:
        return ""
    return (prefix or "") + _format_value(state.temperature)


def to_canonical_string(state: TireState, per_axle: bool = True, layout: TireLayout | None = None) -> str:
    """Return ``key=pressure[,temperature]``, or the key alone with no readings."""
    key = to_key_string(state, per_axle, layout=layout)
    if not state.is_valid:
        return key
    return f"{key}={pressure_string(state)}{temperature_string(state, prefix=',')}"


def to_property_string(
    states: TireStates | None,
    per_axle: bool = True,
    layout: TireLayout | None = None,
) -> str:
    """Join the canonical form of every valid record with single spaces.

    Maps are rendered in ascending tire index, sequences in their own
    order. Records without readings are left out.
    """
    return " ".join(
        to_canonical_string(state, per_axle, layout) for state in iter_states(states) if state.is_valid
    )
