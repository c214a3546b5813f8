"""Data models for tire telemetry."""

from pytpms.models._base import TpmsBaseModel
from pytpms.models.alerts import TireAlerts
from pytpms.models.collection import (
    TireStateMap,
    TireStates,
    get_tire_state,
    get_tire_state_at,
    iter_states,
)
from pytpms.models.tire import TireState, is_valid_state

__all__ = [
    "TireAlerts",
    "TireState",
    "TireStateMap",
    "TireStates",
    "TpmsBaseModel",
    "get_tire_state",
    "get_tire_state_at",
    "is_valid_state",
    "iter_states",
]
