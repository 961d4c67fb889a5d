"""
Dependency graph analysis: components, cycles, tiny cycles and metrics.
"""

from cyclegraph.graph.model import (
    Node,
    Edge,
    GraphData,
    build_adjacency,
    restrict_adjacency,
)
from cyclegraph.graph.scc import (
    strongly_connected_components,
    find_strongly_connected_components,
)
from cyclegraph.graph.cycles import (
    MAX_CYCLES,
    Cycle,
    elementary_cycles,
    find_elementary_cycles,
    normalize_cycle,
)
from cyclegraph.graph.tiny_cycles import (
    TinyCycle,
    VisitStatus,
    find_tiny_cycles,
    tiny_cycles,
)
from cyclegraph.graph.metrics import GraphMetrics, calculate_metrics
from cyclegraph.graph.analyzer import GraphAnalyzer

__all__ = [
    "Node",
    "Edge",
    "GraphData",
    "build_adjacency",
    "restrict_adjacency",
    "strongly_connected_components",
    "find_strongly_connected_components",
    "MAX_CYCLES",
    "Cycle",
    "elementary_cycles",
    "find_elementary_cycles",
    "normalize_cycle",
    "TinyCycle",
    "VisitStatus",
    "find_tiny_cycles",
    "tiny_cycles",
    "GraphMetrics",
    "calculate_metrics",
    "GraphAnalyzer",
]
