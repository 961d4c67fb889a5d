"""
Elementary cycle enumeration inside one strongly connected component.

A depth-first search is started from every member; a path closes into a cycle
when it reaches its start node again. Enumeration is exponential in the worst
case, so it stops once MAX_CYCLES cycles have been captured. Every cycle
returned is still a complete elementary cycle, the set is just not exhaustive.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Set, Tuple

from cyclegraph.graph.model import Adjacency, GraphData, build_adjacency, restrict_adjacency

logger = logging.getLogger(__name__)

MAX_CYCLES = 100


@dataclass
class Cycle:
    nodes: List[str]

    @property
    def length(self) -> int:
        return len(self.nodes)

    def to_dict(self) -> Dict:
        return {"nodes": list(self.nodes), "length": self.length}


def normalize_cycle(nodes: List[str]) -> Tuple[str, ...]:
    """Rotate a cycle so it starts at its smallest node id."""
    if not nodes:
        return ()
    start = nodes.index(min(nodes))
    return tuple(nodes[start:] + nodes[:start])


def _cycles_from(start: str, adjacency: Adjacency, found: List[List[str]], limit: int) -> None:
    path: List[str] = [start]
    on_path: Set[str] = {start}
    work: List[Iterator[str]] = [iter(adjacency.get(start, []))]

    while work and len(found) < limit:
        try:
            neighbor = next(work[-1])
        except StopIteration:
            work.pop()
            on_path.discard(path.pop())
            continue

        if neighbor == start and len(path) > 1:
            found.append(list(path))
        elif neighbor not in on_path:
            path.append(neighbor)
            on_path.add(neighbor)
            work.append(iter(adjacency.get(neighbor, [])))


def elementary_cycles(adjacency: Adjacency, limit: int = MAX_CYCLES) -> List[Cycle]:
    """
    Unique elementary cycles of `adjacency`, shortest first.

    Rotations of the same cycle collapse to the first one discovered; ties in
    length keep discovery order.
    """
    found: List[List[str]] = []
    for start in adjacency:
        if len(found) >= limit:
            logger.debug("[Cycles] cap of %d cycles reached", limit)
            break
        _cycles_from(start, adjacency, found, limit)

    seen: Set[Tuple[str, ...]] = set()
    unique: List[Cycle] = []
    for nodes in found:
        key = normalize_cycle(nodes)
        if key in seen:
            continue
        seen.add(key)
        unique.append(Cycle(nodes=nodes))

    return sorted(unique, key=lambda c: c.length)


def find_elementary_cycles(graph: GraphData, component_nodes: Iterable[str]) -> List[Cycle]:
    adjacency = restrict_adjacency(build_adjacency(graph), component_nodes)
    return elementary_cycles(adjacency)
