"""In-memory catalogue of stops, buses and road distances between stops."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import pairwise

from .domain import Bus, BusStat, Coordinates, Stop, compute_distance

__all__ = ["TransportCatalogue"]


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-style division: a zero denominator yields inf or nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


class TransportCatalogue:
    """Stores stops and bus routes and answers questions about them."""

    def __init__(self) -> None:
        self._stops: list[Stop] = []
        self._stop_by_name: dict[str, Stop] = {}
        self._buses: list[Bus] = []
        self._bus_by_name: dict[str, Bus] = {}
        self._buses_by_stop: dict[Stop, set[Bus]] = {}
        self._distances: dict[tuple[Stop, Stop], int] = {}

    def add_stop(self, name: str, coordinates: Coordinates) -> Stop:
        """Register a stop and return it."""
        stop = Stop(name, coordinates)
        self._stops.append(stop)
        self._stop_by_name[name] = stop
        return stop

    def add_distance(self, stop_from: Stop, stop_to: Stop, distance: int) -> None:
        """Record the road distance in metres from one stop to another."""
        self._distances[(stop_from, stop_to)] = distance

    def add_bus(self, name: str, stops: Iterable[Stop], is_roundtrip: bool) -> Bus:
        """Register a bus over the full ordered list of stops it visits."""
        bus = Bus(name, list(stops), is_roundtrip)
        self._buses.append(bus)
        self._bus_by_name[name] = bus
        for stop in bus.stops:
            self._buses_by_stop.setdefault(stop, set()).add(bus)
        return bus

    def bus_stat(self, name: str) -> BusStat:
        """Statistics of a bus; an all-zero BusStat if the bus is unknown."""
        bus = self._bus_by_name.get(name)
        if bus is None or not bus.stops:
            return BusStat()
        legs = list(pairwise(bus.stops))
        route_length = float(sum(self.get_distance(a, b) for a, b in legs))
        geo_distance = sum(compute_distance(a.coordinates, b.coordinates) for a, b in legs)
        return BusStat(
            total_stops=len(bus.stops),
            unique_stops=len({stop.name for stop in bus.stops}),
            route_length=route_length,
            curvature=_divide(route_length, geo_distance),
        )

    def buses_by_stop(self, stop: Stop | None) -> frozenset[Bus]:
        """Buses passing through ``stop``; empty if none do."""
        return frozenset(self._buses_by_stop.get(stop, ()))

    def get_stop(self, name: str) -> Stop | None:
        return self._stop_by_name.get(name)

    def get_bus(self, name: str) -> Bus | None:
        return self._bus_by_name.get(name)

    def get_distance(self, stop_from: Stop, stop_to: Stop) -> int:
        """Road distance, falling back to the reverse direction, else 0."""
        distance = self._distances.get((stop_from, stop_to))
        if distance is None:
            distance = self._distances.get((stop_to, stop_from), 0)
        return distance

    def stops(self) -> tuple[Stop, ...]:
        """All stops in the order they were added."""
        return tuple(self._stops)

    def buses(self) -> tuple[Bus, ...]:
        """All buses in the order they were added."""
        return tuple(self._buses)