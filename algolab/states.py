"""Sharing cities between states, each growing from its capital along roads."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Road:
    """An undirected road between two cities."""

    city1: int
    city2: int
    length: int

    def other_end(self, city: int) -> int | None:
        """Return the city across the road from ``city``, or None if it does not touch it."""
        if self.city1 == city:
            return self.city2
        if self.city2 == city:
            return self.city1
        return None


@dataclass
class State:
    """A state: its capital and the cities it owns, capital first."""

    capital: int
    cities: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cities:
            self.cities = [self.capital]


def _may_claim(states: Sequence[State], state_index: int, city: int) -> bool:
    # Only the first state in the list is checked for ownership of the city.
    if not states:
        return False
    return state_index == 0 or city not in states[0].cities


def nearest_city(
    states: Sequence[State],
    roads: Sequence[Road],
    state_index: int,
    visited: set[int],
) -> int | None:
    """Return the city reached by the shortest road during a search from the state's capital.

    Every city the breadth-first search reaches is added to ``visited`` and is
    not reached again by later searches. None is returned if nothing new is found.
    """
    capital = states[state_index].capital
    queue = deque([capital])
    visited.add(capital)
    nearest: int | None = None
    shortest: int | None = None
    while queue:
        current = queue.popleft()
        for road in roads:
            city = road.other_end(current)
            if city is None or city in visited:
                continue
            queue.append(city)
            visited.add(city)
            if _may_claim(states, state_index, city) and (
                shortest is None or road.length < shortest
            ):
                shortest = road.length
                nearest = city
    return nearest


def distribute_cities(
    city_count: int, roads: Sequence[Road], capitals: Sequence[int]
) -> list[State]:
    """Let the states take turns claiming cities, starting from their capitals."""
    states = [State(capital) for capital in capitals]
    visited: set[int] = set()
    for _ in range(city_count - len(capitals)):
        for index, state in enumerate(states):
            city = nearest_city(states, roads, index, visited)
            if city is not None:
                state.cities.append(city)
    return states


def parse_input(text: str) -> tuple[int, list[Road], list[int]]:
    """Read the city count, the roads and the capitals from whitespace-separated integers.

    The layout is ``n m``, then ``m`` triples ``city1 city2 length``, then ``k``
    and ``k`` capitals.
    """
    numbers = iter(int(token) for token in text.split())
    try:
        city_count = next(numbers)
        road_count = next(numbers)
        roads = [Road(next(numbers), next(numbers), next(numbers)) for _ in range(road_count)]
        capital_count = next(numbers)
        capitals = [next(numbers) for _ in range(capital_count)]
    except StopIteration:
        raise ValueError("input ends too early") from None
    return city_count, roads, capitals


def main(argv: list[str] | None = None) -> int:
    """Read the map from a file and print every state's cities."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "10.1.txt"
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as error:
        print(f"Ошибка открытия файла: {error}", file=sys.stderr)
        return 1
    city_count, roads, capitals = parse_input(text)
    for state in distribute_cities(city_count, roads, capitals):
        cities = "".join(f"{city} " for city in state.cities)
        print(f"Государство {state.capital}: {cities}")
    return 0