"""Compact tire telemetry text parser.

Two whole-string forms are recognized (case-insensitive)::

    T01=25/30,10 T02=27/30,11 T01-2=26     key/value form
    25,27,30,35                           positional form (index 0, 1, 2, ...)

Each value is ``<actual>[/<preferred>][,<temperature>]`` with pressures in
kPa and temperatures in degrees C. Keys are ``T<dd>`` (flat index),
``T<aa><p>`` (two-digit axle + one-digit position) or ``T<aa>-<p>`` /
``T<aa>_<p>``.

Parsing is permissive: malformed fragments are skipped and reported, never
raised.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import MutableMapping
from enum import StrEnum

from pytpms._constants import AXLE_SEPARATORS, KEY_PREFIX, UNSET_INDEX
from pytpms.config import TireLayout, resolve_layout
from pytpms.indexing import get_tire_index
from pytpms.ingestion.normalize import is_blank, safe_float, safe_int
from pytpms.ingestion.properties import parse_properties
from pytpms.models.collection import TireStateMap
from pytpms.models.tire import TireState
from pytpms.units import is_valid_pressure, is_valid_temperature

_logger = logging.getLogger(__name__)


class SkipReason(StrEnum):
    UNPARSEABLE_KEY = "unparseable_key"
    NO_VALID_VALUE = "no_valid_value"
    UNRECOGNIZED_FORMAT = "unrecognized_format"
    BEYOND_MAX_TIRES = "beyond_max_tires"


@dataclasses.dataclass(frozen=True)
class SkippedFragment:
    fragment: str
    reason: SkipReason
    tire_index: int | None = None


@dataclasses.dataclass
class ParseResult:
    """Parsed records plus the fragments that were dropped."""

    states: MutableMapping[int, TireState]
    skipped: list[SkippedFragment] = dataclasses.field(default_factory=list)

    def skip(self, fragment: str, reason: SkipReason, tire_index: int | None = None) -> None:
        _logger.debug("Skipping tire fragment %r: %s", fragment, reason)
        self.skipped.append(SkippedFragment(fragment, reason, tire_index))


# ------------------------------------------------------------------
# Fragments
# ------------------------------------------------------------------


def parse_tire_index(key: str | None, layout: TireLayout | None = None) -> int:
    """Parse a tire key into a flat tire index, or ``-1`` if unparseable."""
    if is_blank(key):
        return UNSET_INDEX
    key = key.upper()  # type: ignore[union-attr]
    tx = key[1:].strip() if key.startswith(KEY_PREFIX) else key

    axle: int | None
    position: int | None
    if len(tx) in (1, 2):
        # "[T]x", "[T]xx"
        tire_index = safe_int(tx)
        return tire_index if tire_index is not None else UNSET_INDEX
    if len(tx) == 3:
        # "[T]aap"
        axle, position = safe_int(tx[:2]), safe_int(tx[2:])
    elif len(tx) >= 4 and tx[2] in AXLE_SEPARATORS:
        # "[T]aa-p", "[T]aa_p"
        axle, position = safe_int(tx[:2]), safe_int(tx[3:])
    else:
        return UNSET_INDEX
    if axle is None or position is None:
        return UNSET_INDEX
    return get_tire_index(axle, position, layout)


def update_tire_state(
    state: TireState | None,
    text: str | None,
    temp_only: bool = False,
    layout: TireLayout | None = None,
) -> TireState | None:
    """Apply a ``<actual>[/<preferred>][,<temperature>]`` fragment to *state*.

    Values that are missing or fail validation leave the existing field
    untouched. When *state* is ``None`` a new, unindexed record is created
    only if the fragment carries at least one valid value; otherwise
    ``None`` is returned.

    With *temp_only* a single-part value is read as a temperature. If a
    second, comma-separated part is present anyway, the first part is still
    read as pressure.
    """
    if is_blank(text):
        return state

    parts = [part.strip() for part in text.split(",")]  # type: ignore[union-attr]
    pressure_text: str | None = parts[0]
    temperature_text = parts[1] if len(parts) > 1 else None

    if temp_only and is_blank(temperature_text):
        temperature_text, pressure_text = pressure_text, None

    def _target() -> TireState:
        nonlocal state
        if state is None:
            state = TireState(layout=layout) if layout is not None else TireState()
        return state

    if not is_blank(pressure_text):
        pressures = pressure_text.split("/")  # type: ignore[union-attr]
        actual = safe_float(pressures[0].strip())
        if is_valid_pressure(actual):
            _target().actual_pressure = actual
        if len(pressures) > 1:
            preferred = safe_float(pressures[1].strip())
            if is_valid_pressure(preferred):
                _target().preferred_pressure = preferred

    if not is_blank(temperature_text):
        temperature = safe_float(temperature_text)
        if is_valid_temperature(temperature):
            _target().temperature = temperature

    return state


# ------------------------------------------------------------------
# Whole strings
# ------------------------------------------------------------------


def _apply_fragment(
    result: ParseResult,
    tire_index: int,
    value: str,
    fragment: str,
    temp_only: bool,
    layout: TireLayout,
) -> None:
    parsed = update_tire_state(None, value, temp_only, layout)
    if parsed is None:
        result.skip(fragment, SkipReason.NO_VALID_VALUE, tire_index)
        return
    existing = result.states.get(tire_index)
    if existing is None:
        result.states[tire_index] = parsed.set_tire_index(tire_index)
    else:
        update_tire_state(existing, value, temp_only, layout)


def parse_tire_states_report(
    text: str | None,
    temp_only: bool = False,
    states: MutableMapping[int, TireState] | None = None,
    layout: TireLayout | None = None,
) -> ParseResult:
    """Parse a telemetry string into *states*, reporting skipped fragments.

    Existing records in *states* are updated in place; new records are
    added only for fragments with at least one valid value. A fresh
    :class:`TireStateMap` is used when *states* is ``None``.
    """
    layout = resolve_layout(layout)
    result = ParseResult(states if states is not None else TireStateMap())
    if is_blank(text):
        return result
    text = text.strip().upper()  # type: ignore[union-attr]

    if text.startswith(KEY_PREFIX) or "=" in text:
        for key, value in parse_properties(text).items():
            fragment = f"{key}={value}"
            tire_index = parse_tire_index(key, layout)
            if tire_index < 0:
                result.skip(fragment, SkipReason.UNPARSEABLE_KEY)
                continue
            if tire_index >= layout.max_tires:
                result.skip(fragment, SkipReason.BEYOND_MAX_TIRES, tire_index)
                continue
            _apply_fragment(result, tire_index, value, fragment, temp_only, layout)
    elif "," in text:
        for tire_index, value in enumerate(text.split(",")):
            if tire_index >= layout.max_tires:
                result.skip(value, SkipReason.BEYOND_MAX_TIRES, tire_index)
                continue
            _apply_fragment(result, tire_index, value, value, temp_only, layout)
    else:
        result.skip(text, SkipReason.UNRECOGNIZED_FORMAT)

    return result


def parse_tire_states(
    text: str | None,
    temp_only: bool = False,
    states: MutableMapping[int, TireState] | None = None,
    layout: TireLayout | None = None,
) -> MutableMapping[int, TireState]:
    """Parse a telemetry string and return the (possibly updated) collection."""
    return parse_tire_states_report(text, temp_only, states, layout).states
