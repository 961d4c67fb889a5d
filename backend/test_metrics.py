"""Tests for graph metrics"""

import pytest

from cyclegraph.graph import Edge, GraphData, Node, calculate_metrics


def make_graph(node_ids, pairs) -> GraphData:
    return GraphData(
        nodes=[Node(id=n, label=n) for n in node_ids],
        edges=[Edge(id=f"e{i}", source=s, target=t) for i, (s, t) in enumerate(pairs)],
    )


def test_empty_graph():
    metrics = calculate_metrics(GraphData())

    assert metrics.node_count == 0
    assert metrics.edge_count == 0
    assert metrics.avg_degree == 0
    assert metrics.max_degree == 0
    assert metrics.density == 0
    assert metrics.strongly_connected_components == []


def test_single_self_loop():
    metrics = calculate_metrics(make_graph(["S"], [("S", "S")]))

    assert metrics.self_loops == 1
    assert metrics.in_degrees == {"S": 1}
    assert metrics.out_degrees == {"S": 1}
    assert metrics.max_degree == 2
    assert metrics.density == 0
    assert metrics.strongly_connected_components == []


def test_parallel_edges_count_as_multi_edges():
    metrics = calculate_metrics(make_graph(["P", "Q"], [("P", "Q"), ("P", "Q")]))

    assert metrics.multi_edges == 1
    assert metrics.edge_count == 2
    assert metrics.density == 1.0
    assert metrics.strongly_connected_components == []


def test_multi_edges_sum_per_ordered_pair():
    pairs = [("a", "b")] * 3 + [("b", "a")] * 2 + [("a", "c")]
    metrics = calculate_metrics(make_graph(["a", "b", "c"], pairs))

    assert metrics.multi_edges == 2 + 1


def test_simple_graph_has_no_multi_edges():
    metrics = calculate_metrics(make_graph(["a", "b", "c"], [("a", "b"), ("b", "a"), ("b", "c")]))

    assert metrics.multi_edges == 0


def test_ring_degrees_and_density():
    metrics = calculate_metrics(
        make_graph(["A", "B", "C", "D"], [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")])
    )

    assert metrics.node_count == 4
    assert metrics.edge_count == 4
    assert metrics.avg_degree == 2
    assert metrics.max_degree == 2
    assert metrics.density == pytest.approx(4 / 12)
    assert [set(c) for c in metrics.strongly_connected_components] == [{"A", "B", "C", "D"}]


def test_density_counts_self_loops_and_multi_edges():
    pairs = [("a", "a"), ("a", "b"), ("a", "b"), ("b", "c")]
    metrics = calculate_metrics(make_graph(["a", "b", "c"], pairs))

    assert metrics.density == pytest.approx(4 / 6)
    assert metrics.self_loops == 1
    assert metrics.multi_edges == 1
    assert metrics.out_degrees == {"a": 3, "b": 1, "c": 0}
    assert metrics.in_degrees == {"a": 1, "b": 2, "c": 1}
    assert metrics.max_degree == 4
    assert metrics.avg_degree == pytest.approx(8 / 3)


def test_density_can_exceed_one():
    pairs = [("a", "b")] * 3
    metrics = calculate_metrics(make_graph(["a", "b"], pairs))

    assert metrics.density == pytest.approx(1.5)


def test_dangling_edge_is_counted_but_not_analyzed():
    metrics = calculate_metrics(make_graph(["a", "b"], [("a", "b"), ("b", "a"), ("a", "ghost")]))

    assert metrics.edge_count == 3
    assert metrics.out_degrees["a"] == 2
    assert metrics.in_degrees["ghost"] == 1
    assert metrics.max_degree == 3
    assert [set(c) for c in metrics.strongly_connected_components] == [{"a", "b"}]


def test_to_dict_uses_api_field_names():
    metrics = calculate_metrics(make_graph(["X", "Y"], [("X", "Y"), ("Y", "X")]))
    payload = metrics.to_dict()

    assert set(payload) == {
        "nodeCount",
        "edgeCount",
        "avgDegree",
        "maxDegree",
        "density",
        "selfLoops",
        "multiEdges",
        "stronglyConnectedComponents",
        "inDegrees",
        "outDegrees",
    }
    assert payload["inDegrees"] == {"X": 1, "Y": 1}
    assert sorted(payload["stronglyConnectedComponents"][0]) == ["X", "Y"]
