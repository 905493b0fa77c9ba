"""Reading catalogue input documents and answering their statistic requests."""

from __future__ import annotations

from typing import TextIO, Union

from .builder import Builder
from .catalogue import TransportCatalogue
from .domain import BusStat, Coordinates, RouteSettings, Stop
from .jsonnode import Document, Node, load, loads
from .transport_router import TransportRouter

__all__ = ["JsonReader"]

_NOT_FOUND = "not found"
_MIN_SETTING = 1
_MAX_SETTING = 1000

Source = Union[Document, Node, str, TextIO, None]


def _require_stop(catalogue: TransportCatalogue, name: str) -> Stop:
    stop = catalogue.get_stop(name)
    if stop is None:
        raise KeyError(f"unknown stop {name!r}")
    return stop


def _not_found(request_id: int) -> Node:
    return (
        Builder()
        .start_dict()
        .key("request_id").value(request_id)
        .key("error_message").value(_NOT_FOUND)
        .end_dict()
        .build()
    )


class JsonReader:
    """Holds an input document and turns it into a catalogue and responses.

    The source may be a Document, a root Node, JSON text or a text stream.
    """

    def __init__(self, source: Source = None) -> None:
        if source is None:
            document = Document()
        elif isinstance(source, Document):
            document = source
        elif isinstance(source, Node):
            document = Document(source)
        elif isinstance(source, str):
            document = loads(source)
        else:
            document = load(source)
        self._document = document

    @property
    def document(self) -> Document:
        return self._document

    def _section(self, name: str) -> Node:
        return self._document.root.as_map()[name]

    def _base_requests(self, kind: str) -> list[dict[str, Node]]:
        requests = (node.as_map() for node in self._section("base_requests").as_array())
        return [request for request in requests if request["type"].as_string() == kind]

    def make_catalogue(self, catalogue: TransportCatalogue) -> None:
        """Fill ``catalogue`` with the stops, distances and buses of the input."""
        stop_requests = self._base_requests("Stop")
        for request in stop_requests:
            catalogue.add_stop(
                request["name"].as_string(),
                Coordinates(request["latitude"].as_double(), request["longitude"].as_double()),
            )

        for request in stop_requests:
            stop_from = catalogue.get_stop(request["name"].as_string())
            for name, distance in request["road_distances"].as_map().items():
                catalogue.add_distance(stop_from, catalogue.get_stop(name), distance.as_int())

        for request in self._base_requests("Bus"):
            names = [node.as_string() for node in request["stops"].as_array()]
            is_roundtrip = request["is_roundtrip"].as_bool()
            if not is_roundtrip:
                names += names[-2::-1]
            stops = [_require_stop(catalogue, name) for name in names]
            catalogue.add_bus(request["name"].as_string(), stops, is_roundtrip)

    def route_settings(self) -> RouteSettings:
        """Routing settings of the input; both values must lie in [1, 1000]."""
        settings = self._section("routing_settings").as_map()
        velocity = settings["bus_velocity"].as_double()
        wait_time = settings["bus_wait_time"].as_double()
        if not (_MIN_SETTING <= velocity <= _MAX_SETTING and _MIN_SETTING <= wait_time <= _MAX_SETTING):
            raise ValueError("Non correct velocity or bus wait time")
        return RouteSettings(bus_wait_time=wait_time, bus_velocity=velocity)

    def request_document(self, catalogue: TransportCatalogue, router: TransportRouter) -> Document:
        """Answer every Bus, Stop and Route request; other types are skipped."""
        responses: list[Node] = []
        for node in self._section("stat_requests").as_array():
            request = node.as_map()
            kind = request["type"].as_string()
            if kind == "Bus":
                stat = catalogue.bus_stat(request["name"].as_string())
                responses.append(self._bus_response(stat, request))
            elif kind == "Stop":
                responses.append(self._stop_response(catalogue, request))
            elif kind == "Route":
                responses.append(self._route_response(router, request))
        return Document(Node(responses))

    @staticmethod
    def _bus_response(stat: BusStat, request: dict[str, Node]) -> Node:
        request_id = request["id"].as_int()
        if stat.total_stops == 0:
            return _not_found(request_id)
        return (
            Builder()
            .start_dict()
            .key("curvature").value(stat.curvature)
            .key("request_id").value(request_id)
            .key("route_length").value(stat.route_length)
            .key("stop_count").value(int(stat.total_stops))
            .key("unique_stop_count").value(int(stat.unique_stops))
            .end_dict()
            .build()
        )

    @staticmethod
    def _stop_response(catalogue: TransportCatalogue, request: dict[str, Node]) -> Node:
        request_id = request["id"].as_int()
        stop = catalogue.get_stop(request["name"].as_string())
        if stop is None:
            return _not_found(request_id)
        bus_names = sorted(bus.name for bus in catalogue.buses_by_stop(stop))
        return (
            Builder()
            .start_dict()
            .key("buses").value(bus_names)
            .key("request_id").value(request_id)
            .end_dict()
            .build()
        )

    @staticmethod
    def _route_response(router: TransportRouter, request: dict[str, Node]) -> Node:
        request_id = request["id"].as_int()
        route = router.build_route(request["from"].as_string(), request["to"].as_string())
        if route is None:
            return _not_found(request_id)
        info, steps = route

        builder = Builder()
        (
            builder.start_dict()
            .key("request_id").value(request_id)
            .key("total_time").value(info.weight.route_time)
            .key("items").start_array()
        )
        for step in steps:
            if step.is_stop:
                (
                    builder.start_dict()
                    .key("type").value("Wait")
                    .key("stop_name").value(step.name)
                    .key("time").value(step.route_time)
                    .end_dict()
                )
            else:
                (
                    builder.start_dict()
                    .key("type").value("Bus")
                    .key("bus").value(step.name)
                    .key("span_count").value(step.span_count)
                    .key("time").value(step.route_time)
                    .end_dict()
                )
        builder.end_array().end_dict()
        return builder.build()