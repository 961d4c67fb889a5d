"""
Tiny cycles: two services that depend on each other directly (A -> B and B -> A).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Set, Tuple

from cyclegraph.graph.model import Adjacency, GraphData, build_adjacency, restrict_adjacency


class VisitStatus(Enum):
    NOT_VISITED = "not_visited"
    CURRENTLY_VISITING = "currently_visiting"
    VISITED = "visited"


@dataclass
class TinyCycle:
    node1: str
    node2: str

    def to_dict(self) -> Dict[str, str]:
        return {"node1": self.node1, "node2": self.node2}


def tiny_cycles(adjacency: Adjacency) -> List[TinyCycle]:
    """
    Reciprocal edge pairs found through back edges of a coloured DFS.

    A back edge u -> v only counts when v also points straight back at u, so
    longer cycles closed by the same back edge are not reported here.
    """
    status: Dict[str, VisitStatus] = {node: VisitStatus.NOT_VISITED for node in adjacency}
    found: List[TinyCycle] = []
    pairs: Set[frozenset] = set()

    for root in adjacency:
        if status[root] != VisitStatus.NOT_VISITED:
            continue

        status[root] = VisitStatus.CURRENTLY_VISITING
        work: List[Tuple[str, Iterator[str]]] = [(root, iter(adjacency[root]))]

        while work:
            node, neighbors = work[-1]
            neighbor = next(neighbors, None)

            if neighbor is None:
                status[node] = VisitStatus.VISITED
                work.pop()
                continue

            if status[neighbor] == VisitStatus.NOT_VISITED:
                status[neighbor] = VisitStatus.CURRENTLY_VISITING
                work.append((neighbor, iter(adjacency[neighbor])))
            elif status[neighbor] == VisitStatus.CURRENTLY_VISITING and neighbor != node:
                if node in adjacency[neighbor]:
                    pair = frozenset((node, neighbor))
                    if pair not in pairs:
                        pairs.add(pair)
                        found.append(TinyCycle(node1=node, node2=neighbor))

    return found


def find_tiny_cycles(graph: GraphData, component_nodes: Iterable[str]) -> List[TinyCycle]:
    adjacency = restrict_adjacency(build_adjacency(graph), component_nodes)
    return tiny_cycles(adjacency)
