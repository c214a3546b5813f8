"""Collections of tire records.

:class:`TireStateMap` is the canonical container: a mapping from tire index
to :class:`TireState`, iterated in ascending tire index. Plain sequences of
records are accepted wherever a collection is read; they keep their own
order and are searched by scanning ``tire_index``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping, Sequence
from typing import TypeAlias

from pytpms.config import TireLayout
from pytpms.indexing import get_tire_index
from pytpms.models.tire import TireState

TireStates: TypeAlias = "Mapping[int, TireState] | Sequence[TireState | None]"


class TireStateMap(MutableMapping[int, TireState]):
    """Tire records keyed by flat tire index."""

    def __init__(self, states: Mapping[int, TireState] | None = None) -> None:
        self._states: dict[int, TireState] = {}
        if states:
            self.update(states)

    @classmethod
    def from_states(cls, states: Iterable[TireState | None]) -> TireStateMap:
        """Build a map from a sequence of records.

        Records without a tire index are skipped; a later record with a
        duplicate index replaces the earlier one.
        """
        result = cls()
        for state in states:
            if state is not None and state.tire_index is not None:
                result[state.tire_index] = state
        return result

    def __getitem__(self, tire_index: int) -> TireState:
        return self._states[tire_index]

    def __setitem__(self, tire_index: int, state: TireState) -> None:
        if tire_index < 0:
            raise KeyError(tire_index)
        self._states[tire_index] = state

    def __delitem__(self, tire_index: int) -> None:
        del self._states[tire_index]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._states))

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return f"TireStateMap({self.as_list()!r})"

    def as_list(self) -> list[TireState]:
        """Return the records in ascending tire index."""
        return [self._states[index] for index in self]


def iter_states(states: TireStates | None) -> Iterator[TireState]:
    """Yield the records of a map (ascending index) or a sequence (own order)."""
    if not states:
        return
    if isinstance(states, Mapping):
        for index in sorted(states):
            state = states[index]
            if state is not None:
                yield state
        return
    for state in states:
        if state is not None:
            yield state


def get_tire_state(states: TireStates | None, tire_index: int) -> TireState | None:
    """Return the record for *tire_index*, or ``None``."""
    if not states or tire_index < 0:
        return None
    if isinstance(states, Mapping):
        return states.get(tire_index)
    for state in states:
        if state is not None and state.tire_index == tire_index:
            return state
    return None


def get_tire_state_at(
    states: TireStates | None,
    axle_index: int,
    axle_tire_index: int,
    layout: TireLayout | None = None,
) -> TireState | None:
    """Return the record for the tire at *axle_index* / *axle_tire_index*, or ``None``."""
    return get_tire_state(states, get_tire_index(axle_index, axle_tire_index, layout))
