"""Threshold classification of tire records.

The pressure ratio is ``actual / preferred - 1``: ``-0.10`` means 10% under
the preferred pressure. A ratio that cannot be computed is NaN, and every
predicate answers ``False`` for it.
"""

from __future__ import annotations

import math

from pytpms.config import TpmsConfig
from pytpms.models.alerts import TireAlerts
from pytpms.models.collection import TireStates, iter_states
from pytpms.models.tire import TireState
from pytpms.units import is_valid_pressure, is_valid_temperature


def pressure_ratio(state: TireState, default_preferred: float | None = None) -> float:
    """Return ``actual / preferred - 1``, or NaN when indeterminate.

    *default_preferred* stands in when the record carries no preferred
    pressure.
    """
    actual = state.actual_pressure
    if actual is None:
        return math.nan

    preferred = state.preferred_pressure
    if preferred is None or preferred <= 0.0:
        if default_preferred is not None and is_valid_pressure(default_preferred):
            preferred = default_preferred
        else:
            return math.nan

    return (actual / preferred) - 1.0


def _reaches(ratio: float, pct: float) -> bool:
    # Inclusive boundary; 90/100 - 1 is -0.09999999999999998, not -0.1.
    deviation, limit = abs(ratio), abs(pct)
    return deviation >= limit or math.isclose(deviation, limit, rel_tol=1e-9)


def is_pressure_low(state: TireState, pct: float, default_preferred: float | None = None) -> bool:
    """Whether the pressure is at least ``abs(pct)`` under the preferred pressure."""
    ratio = pressure_ratio(state, default_preferred)
    if math.isnan(ratio) or ratio >= 0.0:
        return False
    return _reaches(ratio, pct)


def is_pressure_high(state: TireState, pct: float, default_preferred: float | None = None) -> bool:
    """Whether the pressure is at least ``abs(pct)`` over the preferred pressure."""
    ratio = pressure_ratio(state, default_preferred)
    if math.isnan(ratio) or ratio <= 0.0:
        return False
    return _reaches(ratio, pct)


def is_temperature_high(state: TireState, high_c: float | None) -> bool:
    """Whether the temperature is strictly above *high_c* degrees C."""
    if not is_valid_temperature(high_c) or state.temperature is None:
        return False
    return state.temperature > high_c  # type: ignore[operator]


# ------------------------------------------------------------------
# Bulk queries
# ------------------------------------------------------------------


def low_pressure_states(
    states: TireStates | None,
    pct: float,
    default_preferred: float | None = None,
) -> list[TireState]:
    return [state for state in iter_states(states) if is_pressure_low(state, pct, default_preferred)]


def high_pressure_states(
    states: TireStates | None,
    pct: float,
    default_preferred: float | None = None,
) -> list[TireState]:
    return [state for state in iter_states(states) if is_pressure_high(state, pct, default_preferred)]


def high_temperature_states(states: TireStates | None, high_c: float | None) -> list[TireState]:
    return [state for state in iter_states(states) if is_temperature_high(state, high_c)]


def _indices(states: list[TireState]) -> tuple[int, ...]:
    return tuple(sorted(state.tire_index for state in states if state.tire_index is not None))


def classify(states: TireStates | None, config: TpmsConfig | None = None) -> TireAlerts:
    """Run every threshold query from *config* over *states*."""
    config = config or TpmsConfig()
    return TireAlerts(
        low_pressure=_indices(low_pressure_states(states, config.low_pressure_pct, config.default_preferred_kpa)),
        high_pressure=_indices(high_pressure_states(states, config.high_pressure_pct, config.default_preferred_kpa)),
        high_temperature=_indices(high_temperature_states(states, config.high_temperature_c)),
    )
