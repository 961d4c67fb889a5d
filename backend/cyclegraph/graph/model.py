"""
Graph model for dependency documents.

The editor stores a graph as a flat list of nodes and a flat list of edges.
Edges carry their own ids, so several edges may share one (source, target)
pair and an edge may point back at its own source.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional


@dataclass
class Node:
    id: str
    label: str = ""
    type: str = "default"
    position: Dict[str, float] = field(default_factory=lambda: {"x": 0, "y": 0})  # opaque to the engine

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        node_id = str(data.get("id", ""))
        node_data = data.get("data")
        label = node_data.get("label", node_id) if isinstance(node_data, dict) else node_id
        return cls(
            id=node_id,
            label=str(label),
            type=data.get("type") or "default",
            position=dict(data.get("position") or {"x": 0, "y": 0}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "position": dict(self.position),
            "data": {"label": self.label},
        }


@dataclass
class Edge:
    id: str
    source: str
    target: str
    label: Optional[str] = None
    type: Optional[str] = None

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        source = str(data.get("source", ""))
        target = str(data.get("target", ""))
        return cls(
            id=str(data.get("id") or f"{source}->{target}"),
            source=source,
            target=target,
            label=data.get("label"),
            type=data.get("type"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "source": self.source,
            "target": self.target,
        }
        if self.label is not None:
            result["label"] = self.label
        if self.type is not None:
            result["type"] = self.type
        return result


@dataclass
class GraphData:
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GraphData":
        data = data or {}
        return cls(
            nodes=[Node.from_dict(n) for n in data.get("nodes", []) if isinstance(n, dict)],
            edges=[Edge.from_dict(e) for e in data.get("edges", []) if isinstance(e, dict)],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @property
    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def label_of(self, node_id: str) -> str:
        """Display label for a node id, falling back to the id itself."""
        for node in self.nodes:
            if node.id == node_id:
                return node.label or node_id
        return node_id


Adjacency = Dict[str, List[str]]


def build_adjacency(graph: GraphData) -> Adjacency:
    """
    Map every node id to the ids its edges point at.

    - Every declared node is a key, even with no outgoing edges.
    - Parallel edges produce duplicate entries.
    - Edges touching an undeclared node are skipped.
    """
    adjacency: Adjacency = {node.id: [] for node in graph.nodes}

    for edge in graph.edges:
        if edge.source not in adjacency or edge.target not in adjacency:
            continue
        adjacency[edge.source].append(edge.target)

    return adjacency


def restrict_adjacency(adjacency: Adjacency, component_nodes: Iterable[str]) -> Adjacency:
    """Adjacency limited to one component: only members as keys and as neighbors."""
    members = list(dict.fromkeys(component_nodes))
    member_set = set(members)
    return {
        node: [n for n in adjacency.get(node, []) if n in member_set]
        for node in members
    }
