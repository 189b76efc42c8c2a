"""In-memory registry of Malaysian states and federal territories."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from operator import attrgetter
from typing import Iterable, Iterator

NAME_LIMIT = 49


@dataclass
class State:
    """One state or federal territory."""

    name: str
    year: int
    area: float
    population: int

    def __post_init__(self) -> None:
        self.name = self.name[:NAME_LIMIT]


class SortField(IntEnum):
    """Fields a registry can be sorted on."""

    NAME = 1
    YEAR = 2
    AREA = 3
    POPULATION = 4


_SORT_KEYS = {
    SortField.NAME: attrgetter("name"),
    SortField.YEAR: attrgetter("year"),
    SortField.AREA: attrgetter("area"),
    SortField.POPULATION: attrgetter("population"),
}


class StateRegistry:
    """An ordered collection of states."""

    def __init__(self, states: Iterable[State] = ()) -> None:
        self._states: list[State] = list(states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def insert(self, name: str, year: int, area: float, population: int) -> State:
        """Append a new record and return it."""
        state = State(name, year, area, population)
        self._states.append(state)
        return state

    def delete(self, name: str) -> bool:
        """Remove the first record whose name matches exactly; report success."""
        for index, state in enumerate(self._states):
            if state.name == name:
                del self._states[index]
                return True
        return False

    def sort(self, field: int, ascending: bool = True) -> None:
        """Stable sort on a field; an unknown field leaves the order as it is."""
        try:
            key = _SORT_KEYS[SortField(field)]
        except ValueError:
            return
        self._states.sort(key=key, reverse=not ascending)

    def search(self, name: str) -> State | None:
        """Find the first record whose name matches, ignoring case."""
        wanted = name.lower()
        return next((s for s in self._states if s.name.lower() == wanted), None)

    def clear(self) -> None:
        """Remove every record."""
        self._states.clear()


_DEFAULT_STATES = (
    ("Johor", 1528, 19166.0, 4009670),
    ("Kedah", 1136, 9425.0, 2071900),
    ("Kelantan", 1267, 15040.0, 1812300),
    ("Melaka", 1400, 1660.0, 933000),
    ("Pahang", 1470, 35825.0, 1688000),
    ("Perak", 1528, 21005.0, 2503000),
    ("Selangor", 1766, 8104.0, 6412000),
    ("Negeri Sembilan", 1773, 6624.0, 1117000),
    ("Pulau Pinang", 1786, 1048.0, 1767000),
    ("Terengganu", 1724, 13035.0, 1149000),
    ("Sabah", 1963, 73631.0, 3580000),
    ("Sarawak", 1841, 124450.0, 2818000),
    ("Kuala Lumpur", 1974, 243.0, 1793000),
    ("Labuan", 1984, 92.0, 99000),
    ("Putrajaya", 2001, 49.0, 109000),
    ("Perlis", 1947, 810.0, 255000),
)


def default_registry() -> StateRegistry:
    """A registry holding the 13 states and 3 federal territories."""
    return StateRegistry(State(*row) for row in _DEFAULT_STATES)