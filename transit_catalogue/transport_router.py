"""Fastest journeys through the catalogue, with waits and bus rides."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import pairwise

from .catalogue import TransportCatalogue
from .domain import RouteSettings, Stop, StopId
from .graph import DirectedWeightedGraph, Edge, RouteInfo, Router

__all__ = ["RouteWeight", "TransportRouter"]

_KMH_TO_M_PER_MIN = 1000.0 / 60.0


@dataclass(frozen=True)
class RouteWeight:
    """One step of a journey: a wait at a stop or a ride on a bus."""

    is_stop: bool = True
    name: str = ""
    route_time: float = 0.0
    span_count: int = 0

    def __lt__(self, other: RouteWeight) -> bool:
        return self.route_time < other.route_time

    def __gt__(self, other: RouteWeight) -> bool:
        return self.route_time > other.route_time

    def __add__(self, other: RouteWeight) -> RouteWeight:
        return RouteWeight(self.is_stop, self.name, self.route_time + other.route_time, self.span_count)


class TransportRouter:
    """Builds a time-weighted graph of the catalogue and finds fastest routes."""

    def __init__(self, catalogue: TransportCatalogue, settings: RouteSettings) -> None:
        self._settings = settings
        self._catalogue = catalogue
        stops = catalogue.stops()
        self._graph: DirectedWeightedGraph[RouteWeight] = DirectedWeightedGraph(2 * len(stops))
        self._stop_ids: dict[str, StopId] = {}
        self._add_stops(stops)
        for bus in catalogue.buses():
            if bus.is_roundtrip:
                self._add_spans(bus.name, bus.stops, both_ways=False)
            else:
                forward = bus.stops[: (len(bus.stops) + 1) // 2]
                self._add_spans(bus.name, forward, both_ways=True)
        self._router = Router(self._graph, zero=RouteWeight())

    @property
    def graph(self) -> DirectedWeightedGraph[RouteWeight]:
        return self._graph

    def _add_stops(self, stops: Sequence[Stop]) -> None:
        for index, stop in enumerate(stops):
            stop_id = StopId(2 * index, 2 * index + 1)
            self._stop_ids.setdefault(stop.name, stop_id)
            self._graph.add_edge(
                Edge(stop_id.input_id, stop_id.output_id,
                     RouteWeight(True, stop.name, self._settings.bus_wait_time, 0))
            )

    def _ride_time(self, distance: float) -> float:
        return distance / (self._settings.bus_velocity * _KMH_TO_M_PER_MIN)

    def _add_ride(self, bus_name: str, origin: Stop, target: Stop, distance: float, span: int) -> None:
        self._graph.add_edge(
            Edge(self._stop_ids[origin.name].output_id, self._stop_ids[target.name].input_id,
                 RouteWeight(False, bus_name, self._ride_time(distance), span))
        )

    def _add_spans(self, bus_name: str, stops: Sequence[Stop], both_ways: bool) -> None:
        distance_of = self._catalogue.get_distance
        for start, origin in enumerate(stops[:-1]):
            forward = 0.0
            backward = 0.0
            for span, (prev, stop) in enumerate(pairwise(stops[start:]), start=1):
                forward += distance_of(prev, stop)
                self._add_ride(bus_name, origin, stop, forward, span)
                if both_ways:
                    backward += distance_of(stop, prev)
                    self._add_ride(bus_name, stop, origin, backward, span)

    def build_route(
        self, from_: str, to: str
    ) -> tuple[RouteInfo[RouteWeight], list[RouteWeight]] | None:
        """Fastest route between two stop names and its steps, or None.

        Raises KeyError for an unknown stop name.
        """
        info = self._router.build_route(self._stop_ids[from_].input_id, self._stop_ids[to].input_id)
        if info is None:
            return None
        return info, [self._graph.edge(edge_id).weight for edge_id in info.edges]