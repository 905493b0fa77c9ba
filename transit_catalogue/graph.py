"""Directed weighted graph and an all-pairs shortest route finder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, NamedTuple, Optional, TypeVar

__all__ = ["Edge", "DirectedWeightedGraph", "RouteInfo", "Router"]

W = TypeVar("W")


@dataclass(frozen=True)
class Edge(Generic[W]):
    """An edge from one vertex to another carrying a weight."""

    from_: int
    to: int
    weight: W


class DirectedWeightedGraph(Generic[W]):
    """A graph with a fixed vertex count and edges added one by one."""

    def __init__(self, vertex_count: int = 0) -> None:
        self._edges: list[Edge[W]] = []
        self._incidence: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check_vertex(self, vertex: int) -> int:
        if not 0 <= vertex < len(self._incidence):
            raise IndexError(f"vertex {vertex} is out of range")
        return vertex

    def add_edge(self, edge: Edge[W]) -> int:
        """Add an edge and return its id."""
        incidence = self._incidence[self._check_vertex(edge.from_)]
        self._edges.append(edge)
        edge_id = len(self._edges) - 1
        incidence.append(edge_id)
        return edge_id

    def vertex_count(self) -> int:
        return len(self._incidence)

    def edge_count(self) -> int:
        return len(self._edges)

    def edge(self, edge_id: int) -> Edge[W]:
        if not 0 <= edge_id < len(self._edges):
            raise IndexError(f"edge {edge_id} is out of range")
        return self._edges[edge_id]

    def incident_edges(self, vertex: int) -> tuple[int, ...]:
        """Ids of the edges leaving ``vertex``, in insertion order."""
        return tuple(self._incidence[self._check_vertex(vertex)])


@dataclass(frozen=True)
class RouteInfo(Generic[W]):
    """Total weight of a route and the ids of its edges in order."""

    weight: W
    edges: list[int] = field(default_factory=list)


class _RouteData(NamedTuple):
    weight: object
    prev_edge: Optional[int]


class Router(Generic[W]):
    """Precomputes shortest routes between all pairs of vertices.

    Weights must support ``+``, ``<`` and ``>``. ``zero`` is the weight of an
    empty route; by default it is the weight type's default value.
    """

    def __init__(self, graph: DirectedWeightedGraph[W], zero: W | None = None) -> None:
        self._graph = graph
        if zero is None:
            zero = type(graph.edge(0).weight)() if graph.edge_count() else 0
        count = graph.vertex_count()
        self._data: list[list[_RouteData | None]] = [[None] * count for _ in range(count)]
        self._initialize(zero)
        for through in range(count):
            self._relax_through(through)

    def _initialize(self, zero: W) -> None:
        graph = self._graph
        for vertex, row in enumerate(self._data):
            row[vertex] = _RouteData(zero, None)
            for edge_id in graph.incident_edges(vertex):
                edge = graph.edge(edge_id)
                if edge.weight < zero:
                    raise ValueError("Edges' weights should be non-negative")
                current = row[edge.to]
                if current is None or current.weight > edge.weight:
                    row[edge.to] = _RouteData(edge.weight, edge_id)

    def _relax_through(self, through: int) -> None:
        through_row = self._data[through]
        for row in self._data:
            route_from = row[through]
            if route_from is None:
                continue
            for to, route_to in enumerate(through_row):
                if route_to is None:
                    continue
                candidate = route_from.weight + route_to.weight
                current = row[to]
                if current is None or candidate < current.weight:
                    prev = route_to.prev_edge if route_to.prev_edge is not None else route_from.prev_edge
                    row[to] = _RouteData(candidate, prev)

    def build_route(self, from_: int, to: int) -> RouteInfo[W] | None:
        """Shortest route from ``from_`` to ``to``, or None if unreachable."""
        count = len(self._data)
        if not (0 <= from_ < count and 0 <= to < count):
            raise IndexError(f"vertex pair ({from_}, {to}) is out of range")
        row = self._data[from_]
        route = row[to]
        if route is None:
            return None
        edges = []
        edge_id = route.prev_edge
        while edge_id is not None:
            edges.append(edge_id)
            edge_id = row[self._graph.edge(edge_id).from_].prev_edge
        edges.reverse()
        return RouteInfo(route.weight, edges)