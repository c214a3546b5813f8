"""Whitespace-separated ``KEY=VALUE`` property strings.

Only the subset needed for telemetry payloads is supported: tokens are
split on whitespace and then on the first ``=``. A token without ``=`` is a
key with an empty value. Later duplicates overwrite earlier ones but keep
the position of the first occurrence.
"""

from __future__ import annotations


def parse_properties(text: str | None) -> dict[str, str]:
    props: dict[str, str] = {}
    if not text:
        return props
    for token in text.split():
        key, _, value = token.partition("=")
        if not key:
            continue
        props[key] = value
    return props
