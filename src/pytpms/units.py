"""Pressure and temperature conversion and validity predicates.

Pressures are stored in kPa and temperatures in Celsius. The validity
predicates gate every assignment in the library: a value that fails them is
treated as "no reading" rather than rejected with an error.
"""

from __future__ import annotations

import enum
import math

from pytpms._constants import (
    BAR_PER_KPA,
    BAR_PER_PSI,
    KPA_PER_BAR,
    KPA_PER_PSI,
    PRESSURE_LIMIT_HI,
    PSI_PER_BAR,
    PSI_PER_KPA,
    TEMP_LIMIT_HI,
    TEMP_LIMIT_LO,
)

__all__ = [
    "PressureUnit",
    "TemperatureUnit",
    "bar_to_kpa",
    "bar_to_psi",
    "celsius_to_fahrenheit",
    "celsius_to_temperature",
    "fahrenheit_to_celsius",
    "is_valid_pressure",
    "is_valid_temperature",
    "kpa_to_bar",
    "kpa_to_pressure",
    "kpa_to_psi",
    "pressure_to_kpa",
    "psi_to_bar",
    "psi_to_kpa",
    "temperature_to_celsius",
]


class UnitEnum(enum.IntEnum):
    """Base for unit code enums.

    Every subclass defines ``UNKNOWN = -1``; codes without a mapped member
    resolve to ``UNKNOWN`` instead of raising ``ValueError``.
    """

    @classmethod
    def _missing_(cls, value: object) -> UnitEnum:
        unknown: UnitEnum = cls.UNKNOWN  # type: ignore[attr-defined]
        return unknown


class PressureUnit(UnitEnum):
    """Unit used for tire pressure readings."""

    UNKNOWN = -1
    BAR = 1
    PSI = 2
    KPA = 3


class TemperatureUnit(UnitEnum):
    """Unit used for tire temperature readings."""

    UNKNOWN = -1
    CELSIUS = 1
    FAHRENHEIT = 2


# ------------------------------------------------------------------
# Validity
# ------------------------------------------------------------------


def is_valid_pressure(kpa: float | None) -> bool:
    """Return ``True`` for a pressure in ``(0, 999]`` kPa.

    Zero and negative pressures are treated as "no reading".
    """
    if kpa is None or math.isnan(kpa):
        return False
    return 0.0 < kpa <= PRESSURE_LIMIT_HI


def is_valid_temperature(celsius: float | None) -> bool:
    """Return ``True`` for a temperature in ``[-273.15, 500]`` degrees C."""
    if celsius is None or math.isnan(celsius):
        return False
    return TEMP_LIMIT_LO <= celsius <= TEMP_LIMIT_HI


# ------------------------------------------------------------------
# Pressure
# ------------------------------------------------------------------


def kpa_to_psi(kpa: float) -> float:
    return kpa * PSI_PER_KPA


def psi_to_kpa(psi: float) -> float:
    return psi * KPA_PER_PSI


def kpa_to_bar(kpa: float) -> float:
    return kpa * BAR_PER_KPA


def bar_to_kpa(bar: float) -> float:
    return bar * KPA_PER_BAR


def psi_to_bar(psi: float) -> float:
    return psi * BAR_PER_PSI


def bar_to_psi(bar: float) -> float:
    return bar * PSI_PER_BAR


def pressure_to_kpa(value: float, unit: PressureUnit) -> float | None:
    """Convert *value* in *unit* to kPa; ``None`` for an unknown unit."""
    if unit == PressureUnit.KPA:
        return value
    if unit == PressureUnit.PSI:
        return psi_to_kpa(value)
    if unit == PressureUnit.BAR:
        return bar_to_kpa(value)
    return None


def kpa_to_pressure(kpa: float, unit: PressureUnit) -> float | None:
    """Convert *kpa* to *unit*; ``None`` for an unknown unit."""
    if unit == PressureUnit.KPA:
        return kpa
    if unit == PressureUnit.PSI:
        return kpa_to_psi(kpa)
    if unit == PressureUnit.BAR:
        return kpa_to_bar(kpa)
    return None


# ------------------------------------------------------------------
# Temperature
# ------------------------------------------------------------------


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(celsius: float) -> float:
    return (celsius * 9.0 / 5.0) + 32.0


def temperature_to_celsius(value: float, unit: TemperatureUnit) -> float | None:
    """Convert *value* in *unit* to Celsius; ``None`` for an unknown unit."""
    if unit == TemperatureUnit.CELSIUS:
        return value
    if unit == TemperatureUnit.FAHRENHEIT:
        return fahrenheit_to_celsius(value)
    return None


def celsius_to_temperature(celsius: float, unit: TemperatureUnit) -> float | None:
    """Convert *celsius* to *unit*; ``None`` for an unknown unit."""
    if unit == TemperatureUnit.CELSIUS:
        return celsius
    if unit == TemperatureUnit.FAHRENHEIT:
        return celsius_to_fahrenheit(celsius)
    return None
