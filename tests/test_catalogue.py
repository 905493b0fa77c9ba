import math

import pytest

from transit_catalogue.catalogue import TransportCatalogue
from transit_catalogue.domain import BusStat, Coordinates, compute_distance


@pytest.fixture
def catalogue():
    cat = TransportCatalogue()
    a = cat.add_stop("A", Coordinates(55.611087, 37.20829))
    b = cat.add_stop("B", Coordinates(55.595884, 37.209755))
    c = cat.add_stop("C", Coordinates(55.632761, 37.333324))
    cat.add_distance(a, b, 3900)
    cat.add_distance(b, c, 9900)
    return cat


def test_get_stop_returns_added_stop(catalogue):
    stop = catalogue.get_stop("B")
    assert stop.name == "B"
    assert stop.coordinates == Coordinates(55.595884, 37.209755)
    assert catalogue.get_stop("missing") is None


def test_distance_forward_reverse_and_default(catalogue):
    a, b, c = (catalogue.get_stop(n) for n in "ABC")
    assert catalogue.get_distance(a, b) == 3900
    assert catalogue.get_distance(b, a) == 3900
    assert catalogue.get_distance(a, c) == 0


def test_explicit_reverse_distance_takes_priority(catalogue):
    a, b = catalogue.get_stop("A"), catalogue.get_stop("B")
    catalogue.add_distance(b, a, 4100)
    assert catalogue.get_distance(b, a) == 4100
    assert catalogue.get_distance(a, b) == 3900


def test_unknown_bus_stat_is_empty(catalogue):
    assert catalogue.bus_stat("nope") == BusStat()


def test_bus_stat_two_stops(catalogue):
    a, b = catalogue.get_stop("A"), catalogue.get_stop("B")
    catalogue.add_bus("1", [a, b], True)
    stat = catalogue.bus_stat("1")
    assert stat.total_stops == 2
    assert stat.unique_stops == 2
    assert stat.route_length == 3900
    geo = compute_distance(a.coordinates, b.coordinates)
    assert stat.curvature * geo == pytest.approx(stat.route_length)


def test_bus_stat_counts_unique_names(catalogue):
    a, b, c = (catalogue.get_stop(n) for n in "ABC")
    stops = [a, b, c, b, a]
    catalogue.add_bus("2", stops, False)
    stat = catalogue.bus_stat("2")
    assert stat.total_stops == len(stops)
    assert stat.unique_stops == len({"A", "B", "C"})
    assert stat.route_length == 2 * (3900 + 9900)


def test_curvature_infinite_when_stops_coincide():
    cat = TransportCatalogue()
    x = cat.add_stop("X", Coordinates(1.0, 1.0))
    y = cat.add_stop("Y", Coordinates(1.0, 1.0))
    cat.add_distance(x, y, 100)
    cat.add_bus("b", [x, y], True)
    stat = cat.bus_stat("b")
    assert stat.route_length == 100
    assert stat.curvature == math.inf


def test_buses_by_stop(catalogue):
    a, b, c = (catalogue.get_stop(n) for n in "ABC")
    bus1 = catalogue.add_bus("1", [a, b], True)
    bus2 = catalogue.add_bus("2", [b, c, b], False)
    assert catalogue.buses_by_stop(b) == {bus1, bus2}
    assert catalogue.buses_by_stop(a) == {bus1}
    assert catalogue.buses_by_stop(None) == frozenset()


def test_stop_without_buses_has_empty_set(catalogue):
    assert catalogue.buses_by_stop(catalogue.get_stop("C")) == frozenset()


def test_insertion_order_and_lookup(catalogue):
    assert [s.name for s in catalogue.stops()] == ["A", "B", "C"]
    a = catalogue.get_stop("A")
    bus_x = catalogue.add_bus("x", [a], True)
    bus_y = catalogue.add_bus("y", [a], True)
    assert catalogue.buses() == (bus_x, bus_y)
    assert catalogue.get_bus("y") is bus_y
    assert catalogue.get_bus("z") is None