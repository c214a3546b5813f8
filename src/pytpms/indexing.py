"""Flat tire index <-> (axle, position-on-axle) mapping.

Axles are numbered front to back and tires left to right, both from zero.
With four tires per axle, tire ``6`` is the third tire on the second axle::

    >>> get_tire_index(1, 2)
    6
    >>> get_axle_index(6), get_axle_tire_index(6)
    (1, 2)
"""

from __future__ import annotations

from pytpms._constants import UNSET_INDEX
from pytpms.config import TireLayout, resolve_layout


def get_tire_index(axle_index: int, axle_tire_index: int, layout: TireLayout | None = None) -> int:
    """Return the flat tire index for an axle/position pair.

    A negative *axle_index* means *axle_tire_index* is already a flat index
    and it is returned unchanged.
    """
    if axle_index < 0:
        return axle_tire_index
    return axle_index * resolve_layout(layout).tires_per_axle + axle_tire_index


def get_axle_index(tire_index: int, layout: TireLayout | None = None) -> int:
    """Return the axle holding *tire_index*, or ``-1`` for an unset index."""
    if tire_index < 0:
        return UNSET_INDEX
    return tire_index // resolve_layout(layout).tires_per_axle


def get_axle_tire_index(tire_index: int, layout: TireLayout | None = None) -> int:
    """Return the position of *tire_index* on its axle, or ``-1`` for an unset index."""
    if tire_index < 0:
        return UNSET_INDEX
    return tire_index % resolve_layout(layout).tires_per_axle
