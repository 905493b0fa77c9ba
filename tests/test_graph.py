import pytest

from transit_catalogue.graph import DirectedWeightedGraph, Edge, Router


def make_graph():
    graph = DirectedWeightedGraph(4)
    ids = {
        "01": graph.add_edge(Edge(0, 1, 1.0)),
        "12": graph.add_edge(Edge(1, 2, 2.0)),
        "02": graph.add_edge(Edge(0, 2, 5.0)),
        "23": graph.add_edge(Edge(2, 3, 1.0)),
    }
    return graph, ids


def test_edge_ids_are_sequential():
    graph, ids = make_graph()
    assert list(ids.values()) == list(range(graph.edge_count()))
    assert graph.vertex_count() == 4


def test_incident_edges_and_lookup():
    graph, ids = make_graph()
    assert graph.incident_edges(0) == (ids["01"], ids["02"])
    assert graph.incident_edges(3) == ()
    assert graph.edge(ids["12"]) == Edge(1, 2, 2.0)


def test_out_of_range_access():
    graph, _ = make_graph()
    with pytest.raises(IndexError):
        graph.edge(graph.edge_count())
    with pytest.raises(IndexError):
        graph.incident_edges(4)
    with pytest.raises(IndexError):
        graph.add_edge(Edge(4, 0, 1.0))
    assert graph.edge_count() == 4


def test_shortest_route_prefers_cheaper_path():
    graph, ids = make_graph()
    route = Router(graph).build_route(0, 3)
    assert route.edges == [ids["01"], ids["12"], ids["23"]]
    assert route.weight == pytest.approx(sum(graph.edge(e).weight for e in route.edges))


def test_route_to_self_is_empty():
    graph, _ = make_graph()
    route = Router(graph).build_route(2, 2)
    assert route.edges == []
    assert route.weight == 0


def test_unreachable_is_none():
    graph, _ = make_graph()
    assert Router(graph).build_route(3, 0) is None


def test_parallel_edges_pick_lighter():
    graph = DirectedWeightedGraph(2)
    graph.add_edge(Edge(0, 1, 7))
    light = graph.add_edge(Edge(0, 1, 3))
    route = Router(graph).build_route(0, 1)
    assert route.edges == [light]
    assert route.weight == 3


def test_negative_weight_rejected():
    graph = DirectedWeightedGraph(2)
    graph.add_edge(Edge(0, 1, -1))
    with pytest.raises(ValueError):
        Router(graph)


def test_build_route_out_of_range():
    graph, _ = make_graph()
    with pytest.raises(IndexError):
        Router(graph).build_route(0, 9)


def test_route_edges_form_a_chain():
    graph, _ = make_graph()
    router = Router(graph)
    for start in range(4):
        for end in range(4):
            route = router.build_route(start, end)
            if route is None or not route.edges:
                continue
            chain = [graph.edge(e) for e in route.edges]
            assert chain[0].from_ == start
            assert chain[-1].to == end
            assert all(a.to == b.from_ for a, b in zip(chain, chain[1:]))