"""
Aggregate statistics for a dependency graph.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List

from cyclegraph.graph.model import GraphData
from cyclegraph.graph.scc import find_strongly_connected_components


@dataclass
class GraphMetrics:
    node_count: int
    edge_count: int
    avg_degree: float
    max_degree: int
    density: float
    self_loops: int
    multi_edges: int
    in_degrees: Dict[str, int] = field(default_factory=dict)
    out_degrees: Dict[str, int] = field(default_factory=dict)
    strongly_connected_components: List[List[str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodeCount": self.node_count,
            "edgeCount": self.edge_count,
            "avgDegree": self.avg_degree,
            "maxDegree": self.max_degree,
            "stronglyConnectedComponents": [list(c) for c in self.strongly_connected_components],
            "density": self.density,
            "inDegrees": dict(self.in_degrees),
            "outDegrees": dict(self.out_degrees),
            "selfLoops": self.self_loops,
            "multiEdges": self.multi_edges,
        }


def calculate_metrics(graph: GraphData) -> GraphMetrics:
    node_count = len(graph.nodes)
    edge_count = len(graph.edges)

    in_degrees: Dict[str, int] = {node.id: 0 for node in graph.nodes}
    out_degrees: Dict[str, int] = {node.id: 0 for node in graph.nodes}
    pair_counts: Counter = Counter()
    self_loops = 0

    for edge in graph.edges:
        out_degrees[edge.source] = out_degrees.get(edge.source, 0) + 1
        in_degrees[edge.target] = in_degrees.get(edge.target, 0) + 1
        if edge.is_self_loop:
            self_loops += 1
        pair_counts[(edge.source, edge.target)] += 1

    multi_edges = sum(count - 1 for count in pair_counts.values() if count > 1)

    # Degree statistics cover declared nodes only
    total_degrees = [
        in_degrees[node_id] + out_degrees[node_id]
        for node_id in dict.fromkeys(graph.node_ids)
    ]
    max_degree = max(total_degrees) if total_degrees else 0
    avg_degree = sum(total_degrees) / len(total_degrees) if total_degrees else 0

    # Denominator ignores self-loops and multi-edges, the numerator does not
    max_possible_edges = node_count * (node_count - 1)
    density = edge_count / max_possible_edges if max_possible_edges > 0 else 0

    return GraphMetrics(
        node_count=node_count,
        edge_count=edge_count,
        avg_degree=avg_degree,
        max_degree=max_degree,
        density=density,
        self_loops=self_loops,
        multi_edges=multi_edges,
        in_degrees=in_degrees,
        out_degrees=out_degrees,
        strongly_connected_components=find_strongly_connected_components(graph),
    )
