"""Classification summary consumed by display layers."""

from __future__ import annotations

from pydantic import ConfigDict

from pytpms.models._base import TpmsBaseModel


class TireAlerts(TpmsBaseModel):
    """Tire indices that crossed a threshold, each in ascending order."""

    model_config = ConfigDict(frozen=True)

    low_pressure: tuple[int, ...] = ()
    high_pressure: tuple[int, ...] = ()
    high_temperature: tuple[int, ...] = ()

    @property
    def has_alerts(self) -> bool:
        return bool(self.low_pressure or self.high_pressure or self.high_temperature)

    @property
    def alerted_tires(self) -> tuple[int, ...]:
        """Every tire index with at least one alert."""
        return tuple(sorted(set(self.low_pressure) | set(self.high_pressure) | set(self.high_temperature)))
