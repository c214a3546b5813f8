"""Decode a telemetry string into a JSON-ready diagnostic report."""

from __future__ import annotations

from typing import Any

from pytpms.classifier import classify
from pytpms.config import TpmsConfig
from pytpms.ingestion.parser import parse_tire_states_report
from pytpms.models.collection import iter_states
from pytpms.serializer import to_property_string


def decode_report(text: str, config: TpmsConfig | None = None) -> dict[str, Any]:
    """Parse *text* with *config* and describe the outcome.

    The report lists each record (camelCase fields plus axle position),
    the canonical re-encoding, threshold alerts and skipped fragments.
    """
    config = config or TpmsConfig()
    layout = config.layout
    result = parse_tire_states_report(text, config.temperature_only, layout=layout)

    records: list[dict[str, Any]] = []
    for state in iter_states(result.states):
        record = state.to_payload()
        record["axleIndex"] = state.axle_index
        record["axleTireIndex"] = state.axle_tire_index
        records.append(record)

    return {
        "tiresPerAxle": layout.tires_per_axle,
        "records": records,
        "canonical": to_property_string(result.states, config.per_axle_keys, layout),
        "alerts": classify(result.states, config).to_payload(),
        "skipped": [
            {"fragment": item.fragment, "reason": str(item.reason), "tireIndex": item.tire_index}
            for item in result.skipped
        ],
    }
