"""Normalization helpers.

Centralizes defensive parsing of numeric text fragments. None of these
helpers raise; they return a default instead.
"""

from __future__ import annotations

import math
import re
from typing import Any

_DIGITS_RE = re.compile(r"[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def safe_float(value: Any, default: float | None = None) -> float | None:
    """Parse *value* as a float, returning *default* on failure or NaN.

    Text must be plain ASCII decimal notation with an optional exponent;
    underscores, non-ASCII digits and ``inf``/``nan`` spellings are rejected.
    """
    if value is None or value == "":
        return default
    if isinstance(value, str) and not _DECIMAL_RE.fullmatch(value.strip()):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(result):
        return default
    return result


def safe_int(value: Any, default: int | None = None) -> int | None:
    """Parse an unsigned run of ASCII digits, returning *default* otherwise.

    Signs, whitespace, underscores and non-ASCII digits are all rejected,
    which is stricter than :func:`int`.
    """
    if not isinstance(value, str) or not _DIGITS_RE.fullmatch(value):
        return default
    return int(value)
