"""Layout and threshold configuration for pytpms.

The tire layout (tires per axle) drives all index math. It is modelled as
an immutable :class:`TireLayout` snapshot. A process-wide handle holds the
snapshot used when callers don't pass one explicitly; replacing it is a
single reference assignment, so readers that capture the snapshot once per
operation never see a half-updated layout.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from pytpms._constants import ABSOLUTE_MAX_TIRES, DEFAULT_TIRES_PER_AXLE, MAX_TIRES_PER_AXLE
from pytpms.exceptions import TpmsConfigError

_logger = logging.getLogger(__name__)


def normalize_tires_per_axle(value: int) -> int:
    """Constrain *value* to an even tires-per-axle count in ``[2, 6]``.

    Out-of-range values fall back to the default (4) and odd values are
    rounded up to the next even number. Never raises.
    """
    tpa = int(value)
    if tpa <= 0 or tpa > MAX_TIRES_PER_AXLE:
        tpa = DEFAULT_TIRES_PER_AXLE
    if tpa & 1:
        tpa += 1
    return tpa


@dataclasses.dataclass(frozen=True)
class TireLayout:
    """Immutable tire layout snapshot.

    Parameters
    ----------
    tires_per_axle : int
        Number of tires on each axle. Normalized on construction, so
        ``TireLayout(5).tires_per_axle == 6`` and ``TireLayout(9)`` falls
        back to the default of 4.
    """

    tires_per_axle: int = DEFAULT_TIRES_PER_AXLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "tires_per_axle", normalize_tires_per_axle(self.tires_per_axle))

    @property
    def max_axles(self) -> int:
        return ABSOLUTE_MAX_TIRES // self.tires_per_axle

    @property
    def max_tires(self) -> int:
        return self.max_axles * self.tires_per_axle


_current_layout = TireLayout()


def get_layout() -> TireLayout:
    """Return the process-wide layout snapshot."""
    return _current_layout


def resolve_layout(layout: TireLayout | None) -> TireLayout:
    """Return *layout* if given, otherwise the process-wide snapshot."""
    return layout if layout is not None else _current_layout


def set_tires_per_axle(tires_per_axle: int) -> TireLayout:
    """Replace the process-wide layout and return the new snapshot.

    Intended to be called once at startup, before any parsing or
    serialization begins.
    """
    global _current_layout
    layout = TireLayout(tires_per_axle)
    _current_layout = layout
    _logger.debug(
        "Tire layout set tires_per_axle=%d max_axles=%d max_tires=%d",
        layout.tires_per_axle,
        layout.max_axles,
        layout.max_tires,
    )
    return layout


def get_tires_per_axle() -> int:
    return _current_layout.tires_per_axle


def get_maximum_tires() -> int:
    return _current_layout.max_tires


def get_maximum_axles() -> int:
    return _current_layout.max_axles


# ------------------------------------------------------------------
# Threshold / codec configuration
# ------------------------------------------------------------------


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_number(env_key: str, value: str, cast: type) -> Any:
    try:
        return cast(value.strip())
    except ValueError as exc:
        raise TpmsConfigError(f"{env_key} must be a number, got {value!r}", key=env_key, value=value) from exc


@dataclasses.dataclass(frozen=True)
class TpmsConfig:
    """Codec and classifier configuration.

    Parameters
    ----------
    tires_per_axle : int
        Tires on each axle; normalized through :class:`TireLayout`.
    per_axle_keys : bool
        Serialize keys as ``Taa-p`` instead of the flat ``Tnn`` form.
    temperature_only : bool
        Treat single-part values as temperatures rather than pressures.
    low_pressure_pct : float
        Fractional drop below the preferred pressure that counts as low
        (``0.10`` means 10% under).
    high_pressure_pct : float
        Fractional rise above the preferred pressure that counts as high.
    default_preferred_kpa : float or None
        Preferred pressure used when a reading carries none.
    high_temperature_c : float or None
        Temperatures strictly above this value count as high.
    """

    tires_per_axle: int = DEFAULT_TIRES_PER_AXLE
    per_axle_keys: bool = True
    temperature_only: bool = False
    low_pressure_pct: float = 0.10
    high_pressure_pct: float = 0.10
    default_preferred_kpa: float | None = None
    high_temperature_c: float | None = 75.0

    @property
    def layout(self) -> TireLayout:
        return TireLayout(self.tires_per_axle)

    @classmethod
    def from_env(cls, **overrides: Any) -> TpmsConfig:
        """Create configuration from ``TPMS_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        TpmsConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_NUMBER_MAP: dict[str, tuple[str, type]] = {
            "TPMS_TIRES_PER_AXLE": ("tires_per_axle", int),
            "TPMS_LOW_PRESSURE_PCT": ("low_pressure_pct", float),
            "TPMS_HIGH_PRESSURE_PCT": ("high_pressure_pct", float),
            "TPMS_DEFAULT_PREFERRED_KPA": ("default_preferred_kpa", float),
            "TPMS_HIGH_TEMPERATURE_C": ("high_temperature_c", float),
        }
        for env_key, (field_name, cast) in _ENV_NUMBER_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_number(env_key, val, cast)

        if "per_axle_keys" not in overrides:
            config_kwargs["per_axle_keys"] = _env_bool(env.get("TPMS_PER_AXLE_KEYS"), True)
        if "temperature_only" not in overrides:
            config_kwargs["temperature_only"] = _env_bool(env.get("TPMS_TEMPERATURE_ONLY"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
