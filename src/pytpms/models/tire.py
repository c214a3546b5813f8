"""Single-tire pressure/temperature record."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, ValidationInfo, field_validator

from pytpms._constants import INVALID_PRESSURE, INVALID_TEMPERATURE, UNSET_INDEX
from pytpms.config import TireLayout, get_layout
from pytpms.indexing import get_axle_index, get_axle_tire_index, get_tire_index
from pytpms.ingestion.normalize import safe_float, safe_int
from pytpms.models._base import TpmsBaseModel
from pytpms.units import (
    PressureUnit,
    TemperatureUnit,
    celsius_to_temperature,
    is_valid_pressure,
    is_valid_temperature,
    kpa_to_pressure,
    pressure_to_kpa,
    temperature_to_celsius,
)


class TireState(TpmsBaseModel):
    """Pressure and temperature state of one tire.

    Absent readings are ``None``. Assigning a value that fails its validity
    predicate (out of range, NaN, unparseable, or one of the legacy
    sentinels ``-999.0`` / ``-9999.0``) stores ``None`` instead; assignment
    never raises.

    The axle and axle-position indices are derived from ``tire_index``
    using the layout captured when the record was created.
    """

    model_config = ConfigDict(validate_assignment=True)

    layout: TireLayout = Field(default_factory=get_layout, exclude=True)
    tire_index: int | None = None
    """Flat tire index in ``[0, layout.max_tires)``, ``None`` when not yet assigned."""
    actual_pressure: float | None = None
    """Measured pressure in kPa."""
    preferred_pressure: float | None = None
    """Target pressure in kPa."""
    temperature: float | None = None
    """Measured temperature in degrees C."""

    @field_validator("tire_index", mode="before")
    @classmethod
    def _coerce_tire_index(cls, value: Any, info: ValidationInfo) -> int | None:
        if isinstance(value, str):
            value = safe_int(value.strip())
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        # Keys carry at most two axle or index digits, so the layout bounds the index.
        layout = info.data.get("layout") or get_layout()
        return value if 0 <= value < layout.max_tires else None

    @field_validator("actual_pressure", "preferred_pressure", mode="before")
    @classmethod
    def _coerce_pressure(cls, value: Any) -> float | None:
        kpa = safe_float(value)
        return kpa if is_valid_pressure(kpa) else None

    @field_validator("temperature", mode="before")
    @classmethod
    def _coerce_temperature(cls, value: Any) -> float | None:
        celsius = safe_float(value)
        return celsius if is_valid_temperature(celsius) else None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def for_axle(cls, axle_index: int, axle_tire_index: int, *, layout: TireLayout | None = None) -> TireState:
        """Create an empty record for the tire at *axle_index* / *axle_tire_index*."""
        state = cls(layout=layout) if layout is not None else cls()
        return state.set_axle_tire_index(axle_index, axle_tire_index)

    @classmethod
    def from_readings(
        cls,
        tire_index: int | None = None,
        *,
        actual_pressure: float | None = None,
        preferred_pressure: float | None = None,
        temperature: float | None = None,
        pressure_unit: PressureUnit = PressureUnit.KPA,
        temperature_unit: TemperatureUnit = TemperatureUnit.CELSIUS,
        layout: TireLayout | None = None,
    ) -> TireState:
        """Create a record from readings in arbitrary units.

        Values are converted to kPa / Celsius; an unknown unit drops the
        corresponding reading.
        """

        def _kpa(value: float | None) -> float | None:
            return None if value is None else pressure_to_kpa(value, pressure_unit)

        kwargs: dict[str, Any] = {
            "tire_index": tire_index,
            "actual_pressure": _kpa(actual_pressure),
            "preferred_pressure": _kpa(preferred_pressure),
            "temperature": None if temperature is None else temperature_to_celsius(temperature, temperature_unit),
        }
        if layout is not None:
            kwargs["layout"] = layout
        return cls(**kwargs)

    # ------------------------------------------------------------------
    # Index
    # ------------------------------------------------------------------

    def clear_tire_index(self) -> TireState:
        self.tire_index = None
        return self

    def set_tire_index(self, tire_index: int) -> TireState:
        self.tire_index = tire_index
        return self

    def set_axle_tire_index(self, axle_index: int, axle_tire_index: int) -> TireState:
        """Set the index from an axle/position pair.

        A negative *axle_index* treats *axle_tire_index* as a flat index.
        """
        self.tire_index = get_tire_index(axle_index, axle_tire_index, self.layout)
        return self

    @property
    def has_tire_index(self) -> bool:
        return self.tire_index is not None

    @property
    def tire_index_value(self) -> int:
        """Tire index, or ``-1`` when unset."""
        return self.tire_index if self.tire_index is not None else UNSET_INDEX

    @property
    def axle_index(self) -> int:
        """Axle holding this tire, or ``-1`` when the index is unset."""
        return get_axle_index(self.tire_index_value, self.layout)

    @property
    def has_axle_index(self) -> bool:
        return self.axle_index >= 0

    @property
    def axle_tire_index(self) -> int:
        """Position of this tire on its axle, or ``-1`` when the index is unset."""
        return get_axle_tire_index(self.tire_index_value, self.layout)

    @property
    def has_axle_tire_index(self) -> bool:
        return self.axle_tire_index >= 0

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def clear_state(self) -> TireState:
        self.actual_pressure = None
        self.preferred_pressure = None
        self.temperature = None
        return self

    def update_state(self, text: str | None, temp_only: bool = False) -> TireState:
        """Merge a ``<actual>[/<preferred>][,<temperature>]`` fragment into this record."""
        # Import lazily; the parser builds on this model.
        from pytpms.ingestion.parser import update_tire_state

        update_tire_state(self, text, temp_only)
        return self

    @property
    def has_actual_pressure(self) -> bool:
        return self.actual_pressure is not None

    @property
    def has_preferred_pressure(self) -> bool:
        return self.preferred_pressure is not None

    @property
    def has_temperature(self) -> bool:
        return self.temperature is not None

    @property
    def is_valid(self) -> bool:
        """Whether this record carries at least one reading."""
        return self.has_actual_pressure or self.has_preferred_pressure or self.has_temperature

    # ------------------------------------------------------------------
    # Sentinel views (for consumers expecting the legacy numeric form)
    # ------------------------------------------------------------------

    @property
    def actual_pressure_value(self) -> float:
        return self.actual_pressure if self.actual_pressure is not None else INVALID_PRESSURE

    @property
    def preferred_pressure_value(self) -> float:
        return self.preferred_pressure if self.preferred_pressure is not None else INVALID_PRESSURE

    @property
    def temperature_value(self) -> float:
        return self.temperature if self.temperature is not None else INVALID_TEMPERATURE

    # ------------------------------------------------------------------
    # Unit conversion
    # ------------------------------------------------------------------

    def pressure_in(self, unit: PressureUnit) -> float | None:
        if self.actual_pressure is None:
            return None
        return kpa_to_pressure(self.actual_pressure, unit)

    def preferred_pressure_in(self, unit: PressureUnit) -> float | None:
        if self.preferred_pressure is None:
            return None
        return kpa_to_pressure(self.preferred_pressure, unit)

    def temperature_in(self, unit: TemperatureUnit) -> float | None:
        if self.temperature is None:
            return None
        return celsius_to_temperature(self.temperature, unit)

    def __str__(self) -> str:
        from pytpms.serializer import to_canonical_string

        return to_canonical_string(self)


def is_valid_state(state: TireState | None) -> bool:
    """Return ``True`` if *state* exists and carries at least one reading."""
    return state is not None and state.is_valid
