from __future__ import annotations

from collections.abc import Iterator

import pytest

from pytpms.config import set_tires_per_axle


@pytest.fixture(autouse=True)
def _default_layout() -> Iterator[None]:
    """Every test starts and ends with the default four-tires-per-axle layout."""
    set_tires_per_axle(4)
    yield
    set_tires_per_axle(4)
