"""Custom exception hierarchy for pytpms.

The codec and classifier never raise for malformed telemetry; they skip
fragments and report them instead. These exceptions cover configuration
problems only.
"""

from __future__ import annotations


class TpmsError(Exception):
    """Base exception for all pytpms errors."""


class TpmsConfigError(TpmsError):
    """Invalid configuration value."""

    def __init__(self, message: str, *, key: str = "", value: str = "") -> None:
        self.key = key
        self.value = value
        super().__init__(message)
