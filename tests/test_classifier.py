"""Tests for threshold classification."""

from __future__ import annotations

import math

import pytest

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
from pytpms.config import TpmsConfig
from pytpms.ingestion.parser import parse_tire_states
from pytpms.models import TireState, TireStateMap


class TestPressureRatio:
    def test_ratio(self) -> None:
        state = TireState(actual_pressure=110.0, preferred_pressure=100.0)
        assert pressure_ratio(state) == pytest.approx(0.10)

    def test_no_actual_pressure(self) -> None:
        assert math.isnan(pressure_ratio(TireState(preferred_pressure=100.0), 100.0))

    def test_default_preferred_fallback(self) -> None:
        state = TireState(actual_pressure=80.0)
        assert pressure_ratio(state, 100.0) == pytest.approx(-0.20)

    @pytest.mark.parametrize("default", [None, 0.0, -5.0, 1000.0, math.nan])
    def test_unusable_default_preferred(self, default: float | None) -> None:
        assert math.isnan(pressure_ratio(TireState(actual_pressure=80.0), default))

    def test_record_preferred_wins_over_default(self) -> None:
        state = TireState(actual_pressure=90.0, preferred_pressure=90.0)
        assert pressure_ratio(state, 100.0) == 0.0


class TestPressureLow:
    def test_boundary_is_inclusive(self) -> None:
        state = TireState(actual_pressure=90.0, preferred_pressure=100.0)
        assert is_pressure_low(state, 0.10)

    def test_not_low_enough(self) -> None:
        assert not is_pressure_low(TireState(actual_pressure=91.0, preferred_pressure=100.0), 0.10)

    def test_sign_of_pct_ignored(self) -> None:
        assert is_pressure_low(TireState(actual_pressure=80.0, preferred_pressure=100.0), -0.10)

    def test_at_or_above_preferred(self) -> None:
        assert not is_pressure_low(TireState(actual_pressure=100.0, preferred_pressure=100.0), 0.0)
        assert not is_pressure_low(TireState(actual_pressure=150.0, preferred_pressure=100.0), 0.10)

    def test_indeterminate(self) -> None:
        assert not is_pressure_low(TireState(actual_pressure=50.0), 0.10)
        assert is_pressure_low(TireState(actual_pressure=50.0), 0.10, default_preferred=100.0)

    def test_flips_as_deviation_grows(self) -> None:
        flags = [
            is_pressure_low(TireState(actual_pressure=actual, preferred_pressure=200.0), 0.25)
            for actual in (200.0, 180.0, 160.0, 150.0, 140.0)
        ]
        assert flags == [False, False, False, True, True]


class TestPressureHigh:
    def test_boundary_is_inclusive(self) -> None:
        assert is_pressure_high(TireState(actual_pressure=110.0, preferred_pressure=100.0), 0.10)

    def test_below_threshold(self) -> None:
        assert not is_pressure_high(TireState(actual_pressure=109.0, preferred_pressure=100.0), 0.10)

    def test_at_or_below_preferred(self) -> None:
        assert not is_pressure_high(TireState(actual_pressure=100.0, preferred_pressure=100.0), 0.0)
        assert not is_pressure_high(TireState(actual_pressure=50.0, preferred_pressure=100.0), 0.10)

    def test_indeterminate(self) -> None:
        assert not is_pressure_high(TireState(preferred_pressure=100.0), 0.10)


class TestTemperatureHigh:
    def test_strictly_above(self) -> None:
        assert is_temperature_high(TireState(temperature=80.1), 80.0)
        assert not is_temperature_high(TireState(temperature=80.0), 80.0)

    def test_invalid_threshold_or_missing_reading(self) -> None:
        assert not is_temperature_high(TireState(temperature=80.0), 600.0)
        assert not is_temperature_high(TireState(temperature=80.0), None)
        assert not is_temperature_high(TireState(temperature=80.0), math.nan)
        assert not is_temperature_high(TireState(actual_pressure=200.0), 50.0)


def _fleet() -> TireStateMap:
    return parse_tire_states("T00=180/200,40 T01=200/200,85 T02=230/200,60 T03=150,90 T04=,20")


class TestBulkQueries:
    def test_low_pressure(self) -> None:
        assert [s.tire_index for s in low_pressure_states(_fleet(), 0.10)] == [0]
        assert [s.tire_index for s in low_pressure_states(_fleet(), 0.10, 200.0)] == [0, 3]

    def test_high_pressure(self) -> None:
        assert [s.tire_index for s in high_pressure_states(_fleet(), 0.10)] == [2]

    def test_high_temperature(self) -> None:
        assert [s.tire_index for s in high_temperature_states(_fleet(), 80.0)] == [1, 3]
        assert high_temperature_states(_fleet(), 9999.0) == []

    def test_sequence_keeps_own_order(self) -> None:
        states = list(reversed(_fleet().as_list()))
        assert [s.tire_index for s in high_temperature_states(states, 80.0)] == [3, 1]

    @pytest.mark.parametrize("empty", [None, [], TireStateMap()])
    def test_empty_collections(self, empty: object) -> None:
        assert low_pressure_states(empty, 0.1, 100.0) == []  # type: ignore[arg-type]
        assert high_pressure_states(empty, 0.1, 100.0) == []  # type: ignore[arg-type]
        assert high_temperature_states(empty, 50.0) == []  # type: ignore[arg-type]


def test_classify_with_config() -> None:
    config = TpmsConfig(
        low_pressure_pct=0.10,
        high_pressure_pct=0.10,
        default_preferred_kpa=200.0,
        high_temperature_c=80.0,
    )
    alerts = classify(_fleet(), config)
    assert alerts.low_pressure == (0, 3)
    assert alerts.high_pressure == (2,)
    assert alerts.high_temperature == (1, 3)
    assert alerts.alerted_tires == (0, 1, 2, 3)
    assert alerts.to_payload() == {"lowPressure": [0, 3], "highPressure": [2], "highTemperature": [1, 3]}


def test_classify_defaults() -> None:
    alerts = classify(_fleet())
    assert alerts.low_pressure == (0,)
    assert alerts.high_temperature == (1, 3)
    assert not classify(None).has_alerts
