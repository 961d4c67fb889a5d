"""
GraphAnalyzer - entry point used by the API layer.

    analyzer = GraphAnalyzer()
    result = analyzer.analyze(graph)                       # metrics + graph
    cycles = analyzer.find_cycles(graph, ["a", "b", "c"])  # one component
    tiny = analyzer.detect_tiny_cycles(graph, ["a", "b"])

The analyzer keeps no traversal state between calls; one instance can be
shared by concurrent requests.
"""

import copy
import logging
from typing import Any, Dict, Iterable, List, Union

from cyclegraph.graph.cycles import Cycle, find_elementary_cycles
from cyclegraph.graph.metrics import GraphMetrics, calculate_metrics
from cyclegraph.graph.model import GraphData
from cyclegraph.graph.scc import find_strongly_connected_components
from cyclegraph.graph.tiny_cycles import TinyCycle, find_tiny_cycles

logger = logging.getLogger(__name__)

GraphInput = Union[GraphData, Dict[str, Any]]


def _as_graph(graph: GraphInput) -> GraphData:
    if isinstance(graph, GraphData):
        return graph
    return GraphData.from_dict(graph)


class GraphAnalyzer:

    def calculate_metrics(self, graph: GraphInput) -> GraphMetrics:
        return calculate_metrics(_as_graph(graph))

    def find_strongly_connected_components(self, graph: GraphInput) -> List[List[str]]:
        return find_strongly_connected_components(_as_graph(graph))

    def find_elementary_cycles(self, graph: GraphInput, component_nodes: Iterable[str]) -> List[Cycle]:
        return find_elementary_cycles(_as_graph(graph), component_nodes)

    def find_tiny_cycles(self, graph: GraphInput, component_nodes: Iterable[str]) -> List[TinyCycle]:
        return find_tiny_cycles(_as_graph(graph), component_nodes)

    # ============================================================
    # API CALL SHAPES
    # ============================================================

    def analyze(self, graph: GraphInput) -> Dict[str, Any]:
        # A stored document is handed back as-is, editor styling included
        if isinstance(graph, GraphData):
            graph_data = graph.to_dict()
        else:
            graph_data = copy.deepcopy(graph)

        metrics = calculate_metrics(_as_graph(graph))
        logger.debug(
            "[Analyzer] %d nodes, %d edges, %d components",
            metrics.node_count,
            metrics.edge_count,
            len(metrics.strongly_connected_components),
        )
        return {"metrics": metrics.to_dict(), "graphData": graph_data}

    def find_cycles(self, graph: GraphInput, component_nodes: Iterable[str]) -> Dict[str, Any]:
        cycles = self.find_elementary_cycles(graph, component_nodes)
        return {"cycles": [c.to_dict() for c in cycles]}

    def detect_tiny_cycles(self, graph: GraphInput, component_nodes: Iterable[str]) -> Dict[str, Any]:
        tiny = self.find_tiny_cycles(graph, component_nodes)
        return {"tinyCycles": [t.to_dict() for t in tiny]}
