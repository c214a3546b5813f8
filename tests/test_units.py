from __future__ import annotations

import math

import pytest

from pytpms.units import (
    PressureUnit,
    TemperatureUnit,
    bar_to_kpa,
    bar_to_psi,
    celsius_to_fahrenheit,
    celsius_to_temperature,
    fahrenheit_to_celsius,
    is_valid_pressure,
    is_valid_temperature,
    kpa_to_bar,
    kpa_to_pressure,
    kpa_to_psi,
    pressure_to_kpa,
    psi_to_bar,
    psi_to_kpa,
    temperature_to_celsius,
)


class TestPressureValidity:
    @pytest.mark.parametrize("kpa", [0.001, 1.0, 250.0, 999.0])
    def test_valid(self, kpa: float) -> None:
        assert is_valid_pressure(kpa)

    @pytest.mark.parametrize("kpa", [0.0, -1.0, -999.0, 999.1, 1000.0, math.nan, None])
    def test_invalid(self, kpa: float | None) -> None:
        assert not is_valid_pressure(kpa)


class TestTemperatureValidity:
    @pytest.mark.parametrize("celsius", [-273.15, -40.0, 0.0, 25.5, 500.0])
    def test_valid(self, celsius: float) -> None:
        assert is_valid_temperature(celsius)

    @pytest.mark.parametrize("celsius", [-273.16, 500.1, -9999.0, math.nan, None])
    def test_invalid(self, celsius: float | None) -> None:
        assert not is_valid_temperature(celsius)


def test_pressure_conversions() -> None:
    assert kpa_to_psi(100.0) == pytest.approx(14.503773773020923)
    assert psi_to_kpa(14.503773773020923) == pytest.approx(100.0)
    assert psi_to_kpa(1.0) == pytest.approx(6.89475729316836)
    assert kpa_to_bar(240.0) == pytest.approx(2.4)
    assert bar_to_kpa(2.4) == pytest.approx(240.0)
    assert bar_to_psi(1.0) == pytest.approx(14.50377377302092)
    assert psi_to_bar(14.50377377302092) == pytest.approx(1.0)


def test_temperature_conversions() -> None:
    assert fahrenheit_to_celsius(212.0) == pytest.approx(100.0)
    assert fahrenheit_to_celsius(-40.0) == pytest.approx(-40.0)
    assert celsius_to_fahrenheit(0.0) == pytest.approx(32.0)
    assert celsius_to_fahrenheit(37.0) == pytest.approx(98.6)


def test_unit_enums_fall_back_to_unknown() -> None:
    assert PressureUnit(1) == PressureUnit.BAR
    assert PressureUnit(99) == PressureUnit.UNKNOWN
    assert TemperatureUnit(7) == TemperatureUnit.UNKNOWN


def test_unit_dispatch() -> None:
    assert pressure_to_kpa(2.4, PressureUnit.BAR) == pytest.approx(240.0)
    assert pressure_to_kpa(35.0, PressureUnit.PSI) == pytest.approx(241.3165052608926)
    assert pressure_to_kpa(240.0, PressureUnit.KPA) == 240.0
    assert pressure_to_kpa(240.0, PressureUnit.UNKNOWN) is None
    assert kpa_to_pressure(240.0, PressureUnit.BAR) == pytest.approx(2.4)
    assert kpa_to_pressure(240.0, PressureUnit.UNKNOWN) is None
    assert temperature_to_celsius(212.0, TemperatureUnit.FAHRENHEIT) == pytest.approx(100.0)
    assert temperature_to_celsius(20.0, TemperatureUnit.UNKNOWN) is None
    assert celsius_to_temperature(100.0, TemperatureUnit.FAHRENHEIT) == pytest.approx(212.0)
    assert celsius_to_temperature(20.0, TemperatureUnit.CELSIUS) == 20.0
