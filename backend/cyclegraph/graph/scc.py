"""
Strongly connected components (Tarjan's algorithm).

Each returned component is a group of node ids that are mutually reachable,
i.e. a circular dependency. Components of a single node are dropped, even when
that node has a self-loop.

The traversal keeps its own work stack instead of recursing, so deep
dependency chains are bounded by heap rather than interpreter stack depth.
All bookkeeping lives in a `_TarjanState` created per call.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set, Tuple

from cyclegraph.graph.model import Adjacency, GraphData, build_adjacency

logger = logging.getLogger(__name__)


@dataclass
class _TarjanState:
    counter: int = 0
    index: Dict[str, int] = field(default_factory=dict)
    lowlink: Dict[str, int] = field(default_factory=dict)
    stack: List[str] = field(default_factory=list)
    on_stack: Set[str] = field(default_factory=set)
    components: List[List[str]] = field(default_factory=list)

    def discover(self, node: str) -> None:
        self.index[node] = self.lowlink[node] = self.counter
        self.counter += 1
        self.stack.append(node)
        self.on_stack.add(node)

    def pop_component(self, root: str) -> List[str]:
        component: List[str] = []
        while True:
            w = self.stack.pop()
            self.on_stack.discard(w)
            component.append(w)
            if w == root:
                return component


def strongly_connected_components(adjacency: Adjacency) -> List[List[str]]:
    """
    All components of `adjacency` with two or more members.

    Components come out in the order their roots are completed (reverse
    topological order of the condensation), which callers should not rely on.
    """
    state = _TarjanState()

    for root in adjacency:
        if root in state.index:
            continue

        state.discover(root)
        work: List[Tuple[str, Iterator[str]]] = [(root, iter(adjacency[root]))]

        while work:
            node, neighbors = work[-1]
            descended = False

            for w in neighbors:
                if w not in adjacency:
                    continue
                if w not in state.index:
                    state.discover(w)
                    work.append((w, iter(adjacency[w])))
                    descended = True
                    break
                if w in state.on_stack:
                    state.lowlink[node] = min(state.lowlink[node], state.index[w])

            if descended:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                state.lowlink[parent] = min(state.lowlink[parent], state.lowlink[node])

            if state.lowlink[node] == state.index[node]:
                state.components.append(state.pop_component(node))

    return [c for c in state.components if len(c) >= 2]


def find_strongly_connected_components(graph: GraphData) -> List[List[str]]:
    components = strongly_connected_components(build_adjacency(graph))
    logger.debug("[SCC] %d components with a cycle", len(components))
    return components
