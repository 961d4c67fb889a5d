"""Tests for the graph document model and adjacency building"""

from cyclegraph.graph import Edge, GraphData, Node, build_adjacency, restrict_adjacency


def make_graph(node_ids, pairs) -> GraphData:
    return GraphData(
        nodes=[Node(id=n, label=n.upper()) for n in node_ids],
        edges=[Edge(id=f"e{i}", source=s, target=t) for i, (s, t) in enumerate(pairs)],
    )


def test_every_node_is_a_key():
    graph = make_graph(["a", "b", "c"], [("a", "b")])
    adjacency = build_adjacency(graph)

    assert adjacency == {"a": ["b"], "b": [], "c": []}


def test_parallel_edges_and_self_loops_are_kept():
    graph = make_graph(["a", "b"], [("a", "b"), ("a", "b"), ("b", "b")])
    adjacency = build_adjacency(graph)

    assert adjacency["a"] == ["b", "b"]
    assert adjacency["b"] == ["b"]


def test_dangling_edges_are_ignored():
    graph = make_graph(["a", "b"], [("a", "ghost"), ("ghost", "b"), ("a", "b")])
    adjacency = build_adjacency(graph)

    assert adjacency == {"a": ["b"], "b": []}
    assert "ghost" not in adjacency


def test_restrict_adjacency_keeps_only_members():
    graph = make_graph(["a", "b", "c"], [("a", "b"), ("a", "c"), ("b", "a"), ("c", "a")])
    restricted = restrict_adjacency(build_adjacency(graph), ["a", "b", "missing"])

    assert restricted == {"a": ["b"], "b": ["a"], "missing": []}


def test_from_dict_reads_editor_document():
    document = {
        "nodes": [
            {"id": "svc_a", "type": "default", "position": {"x": 10, "y": 20}, "data": {"label": "Orders"}},
            {"id": "svc_b"},
        ],
        "edges": [
            {"id": "e1", "source": "svc_a", "target": "svc_b", "label": "calls"},
        ],
    }
    graph = GraphData.from_dict(document)

    assert graph.node_ids == ["svc_a", "svc_b"]
    assert graph.nodes[0].label == "Orders"
    assert graph.nodes[0].position == {"x": 10, "y": 20}
    assert graph.nodes[1].label == "svc_b"
    assert graph.edges[0].label == "calls"
    assert graph.to_dict()["nodes"][0] == document["nodes"][0]
    assert graph.to_dict()["edges"][0] == document["edges"][0]


def test_from_dict_tolerates_empty_document():
    graph = GraphData.from_dict(None)

    assert graph.nodes == []
    assert graph.edges == []
    assert build_adjacency(graph) == {}


def test_label_of_falls_back_to_id():
    graph = make_graph(["a"], [])

    assert graph.label_of("a") == "A"
    assert graph.label_of("zzz") == "zzz"


def test_from_dict_ignores_non_dict_node_data():
    graph = GraphData.from_dict({
        "nodes": [{"id": "a", "data": "Orders"}, {"id": "b", "data": None}],
        "edges": [],
    })

    assert [n.label for n in graph.nodes] == ["a", "b"]
