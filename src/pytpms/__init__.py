"""pytpms - Compact-text codec and classifier for tire pressure telemetry."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytpms")
except PackageNotFoundError:
    __version__ = "0+local"
from pytpms.classifier import (
    classify,
    high_pressure_states,
    high_temperature_states,
    is_pressure_high,
    is_pressure_low,
    is_temperature_high,
    low_pressure_states,
    pressure_ratio,
)
from pytpms.config import (
    TireLayout,
    TpmsConfig,
    get_layout,
    get_maximum_axles,
    get_maximum_tires,
    get_tires_per_axle,
    set_tires_per_axle,
)
from pytpms.exceptions import TpmsConfigError, TpmsError
from pytpms.indexing import get_axle_index, get_axle_tire_index, get_tire_index
from pytpms.ingestion.parser import (
    ParseResult,
    SkippedFragment,
    SkipReason,
    parse_tire_index,
    parse_tire_states,
    parse_tire_states_report,
    update_tire_state,
)
from pytpms.models import (
    TireAlerts,
    TireState,
    TireStateMap,
    get_tire_state,
    get_tire_state_at,
    is_valid_state,
)
from pytpms.serializer import to_canonical_string, to_key_string, to_property_string
from pytpms.units import PressureUnit, TemperatureUnit, is_valid_pressure, is_valid_temperature

__all__ = [
    "__version__",
    "ParseResult",
    "PressureUnit",
    "SkipReason",
    "SkippedFragment",
    "TemperatureUnit",
    "TireAlerts",
    "TireLayout",
    "TireState",
    "TireStateMap",
    "TpmsConfig",
    "TpmsConfigError",
    "TpmsError",
    "classify",
    "get_axle_index",
    "get_axle_tire_index",
    "get_layout",
    "get_maximum_axles",
    "get_maximum_tires",
    "get_tire_index",
    "get_tire_state",
    "get_tire_state_at",
    "get_tires_per_axle",
    "high_pressure_states",
    "high_temperature_states",
    "is_pressure_high",
    "is_pressure_low",
    "is_temperature_high",
    "is_valid_pressure",
    "is_valid_state",
    "is_valid_temperature",
    "low_pressure_states",
    "parse_tire_index",
    "parse_tire_states",
    "parse_tire_states_report",
    "pressure_ratio",
    "set_tires_per_axle",
    "to_canonical_string",
    "to_key_string",
    "to_property_string",
    "update_tire_state",
]
