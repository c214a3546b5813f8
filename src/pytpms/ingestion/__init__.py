"""Ingestion layer.

Turns telemetry text into :class:`~pytpms.models.TireState` records.
"""

__all__: list[str] = []
