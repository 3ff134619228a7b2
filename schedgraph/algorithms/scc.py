"""Strongly connected components via Tarjan's algorithm.

The traversal is iterative: each frame on the work stack holds a vertex and
the position of the next outgoing edge to examine. Low-link updates happen in
the same order as in the recursive formulation, so results are identical
while deep graphs no longer hit the interpreter recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from schedgraph.algorithms.base import (
    Adjacency,
    ensure_metrics,
    require_directed,
    snapshot_adjacency,
)
from schedgraph.errors import SCCNotComputedError
from schedgraph.graph.digraph import Graph, VertexID
from schedgraph.logging import get_logger
from schedgraph.metrics import Counter, Metrics

logger = get_logger(__name__)

Component = List[VertexID]


@dataclass
class _TarjanState:
    """Per-call traversal state."""

    adj: Adjacency
    index: List[Optional[int]]
    low: List[int]
    on_stack: List[bool]
    stack: List[VertexID] = field(default_factory=list)
    next_index: int = 0
    components: List[Component] = field(default_factory=list)
    component_of: List[int] = field(default_factory=list)


class TarjanSCC:
    """Decompose a directed graph into strongly connected components.

    Components are reported in the order they close. A component closes only
    after every component reachable from it has closed, so the list is in
    reverse topological order of the condensation DAG.

    Attributes:
        graph: The analyzed graph (read-only).
        metrics: Counters for the most recent ``find_sccs()`` run.
    """

    def __init__(self, graph: Graph, metrics: Optional[Metrics] = None) -> None:
        require_directed(graph, "SCC")
        self.graph = graph
        self.metrics = ensure_metrics(metrics)
        self._components: Optional[List[Component]] = None
        self._component_of: Optional[List[int]] = None

    @property
    def sccs(self) -> Optional[List[Component]]:
        """Result of the last ``find_sccs()`` call, or None."""
        return self._components

    def find_sccs(self) -> List[Component]:
        """Compute all strongly connected components.

        Returns:
            Components in closing order, each sorted ascending.
        """
        n = self.graph.vertex_count
        state = _TarjanState(
            adj=snapshot_adjacency(self.graph),
            index=[None] * n,
            low=[0] * n,
            on_stack=[False] * n,
            component_of=[-1] * n,
        )

        self.metrics.start_timer()
        for root in range(n):
            if state.index[root] is None:
                self._strongconnect(state, root)
        self.metrics.stop_timer()

        self._components = state.components
        self._component_of = state.component_of
        logger.debug(
            f"Tarjan SCC: {len(state.components)} components over {n} vertices "
            f"in {self.metrics.elapsed_ms:.3f} ms"
        )
        return state.components

    def _enter(self, state: _TarjanState, v: VertexID) -> None:
        state.index[v] = state.next_index
        state.low[v] = state.next_index
        state.next_index += 1
        state.stack.append(v)
        state.on_stack[v] = True
        self.metrics.increment(Counter.VISITS)

    def _strongconnect(self, state: _TarjanState, root: VertexID) -> None:
        index, low, on_stack = state.index, state.low, state.on_stack

        self._enter(state, root)
        # Each frame: [vertex, position of next outgoing edge]
        work: List[List[int]] = [[root, 0]]

        while work:
            frame = work[-1]
            v, pos = frame
            out_edges = state.adj[v]

            if pos < len(out_edges):
                frame[1] = pos + 1
                w = out_edges[pos].to
                self.metrics.increment(Counter.EDGES_EXPLORED)

                w_index = index[w]
                if w_index is None:
                    self._enter(state, w)
                    work.append([w, 0])
                elif on_stack[w]:
                    low[v] = min(low[v], w_index)
                continue

            # All edges of v examined
            work.pop()
            if low[v] == index[v]:
                self._close_component(state, v)
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[v])

    def _close_component(self, state: _TarjanState, root: VertexID) -> None:
        comp_id = len(state.components)
        component: Component = []
        while True:
            w = state.stack.pop()
            state.on_stack[w] = False
            state.component_of[w] = comp_id
            component.append(w)
            if w == root:
                break
        component.sort()
        state.components.append(component)
        self.metrics.increment(Counter.COMPONENTS_FOUND)

    def component_of(self, vertex: VertexID) -> int:
        """Return the component id of ``vertex``.

        Raises:
            SCCNotComputedError: If ``find_sccs()`` has not run.
        """
        if self._component_of is None:
            raise SCCNotComputedError("Must call find_sccs() first")
        if not 0 <= vertex < len(self._component_of):
            raise IndexError(f"Vertex {vertex} is out of range.")
        return self._component_of[vertex]

    def build_condensation_graph(self) -> Graph:
        """Collapse each component into a single vertex.

        Every original edge between different components becomes one edge
        between their component vertices. Parallel condensation edges are
        dropped; the first weight seen (vertex order, then adjacency order)
        is kept.

        Raises:
            SCCNotComputedError: If ``find_sccs()`` has not run.
        """
        if self._components is None or self._component_of is None:
            raise SCCNotComputedError("Must call find_sccs() first")

        comp_of = self._component_of
        condensation = Graph(
            len(self._components), directed=True, weight_model=self.graph.weight_model
        )
        added: Set[Tuple[int, int]] = set()

        for u, v, w in self.graph.edges():
            cu, cv = comp_of[u], comp_of[v]
            if cu == cv or (cu, cv) in added:
                continue
            condensation.add_edge(cu, cv, w)
            added.add((cu, cv))

        logger.debug(
            f"Condensation graph: {condensation.vertex_count} vertices, "
            f"{condensation.edge_count} edges"
        )
        return condensation
