"""Nearest-neighbour approximation for the travelling salesman problem."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Tour:
    """A closed tour: the visiting order (back to the start) and its cost."""

    path: tuple[int, ...]
    cost: int

    def render(self) -> str:
        """Show the path as ``0 -> 2 -> 1 -> 0`` followed by the cost."""
        route = " -> ".join(str(city) for city in self.path)
        return f"Path: {route}\nApproximate TSP cost: {self.cost}"


def nearest_neighbor_tour(distances: Sequence[Sequence[int]]) -> Tour:
    """Build a tour from city 0 by always moving to the closest unvisited city.

    Ties go to the city with the lowest index. The tour returns to city 0.
    """
    size = len(distances)
    if size == 0:
        raise ValueError("at least one city is needed")
    if any(len(row) != size for row in distances):
        raise ValueError("the distance matrix must be square")

    current = 0
    visited = {current}
    path = [current]
    cost = 0
    for _ in range(size - 1):
        next_city = min(
            (city for city in range(size) if city not in visited),
            key=lambda city: distances[current][city],
        )
        cost += distances[current][next_city]
        visited.add(next_city)
        path.append(next_city)
        current = next_city
    cost += distances[current][0]
    path.append(0)
    return Tour(tuple(path), cost)