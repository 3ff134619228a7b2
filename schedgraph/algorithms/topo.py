"""Topological ordering: Kahn in-degree elimination and DFS post-order.

Both strategies return a list of all vertices in which every edge source
precedes its target, or None when the graph has a cycle. A cycle is an
expected input class here, so it is reported as data rather than raised.
The two strategies can legitimately produce different valid orders.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from schedgraph.algorithms.base import (
    Adjacency,
    ensure_metrics,
    require_directed,
    snapshot_adjacency,
)
from schedgraph.graph.digraph import Graph, VertexID
from schedgraph.logging import get_logger
from schedgraph.metrics import Counter, Metrics

logger = get_logger(__name__)


class KahnTopologicalSort:
    """Kahn's algorithm over a FIFO frontier of zero in-degree vertices.

    The frontier is seeded by scanning vertices in ascending order; ties
    among simultaneously-ready vertices follow enqueue order.
    """

    def __init__(self, graph: Graph, metrics: Optional[Metrics] = None) -> None:
        require_directed(graph, "Topological sort")
        self.graph = graph
        self.metrics = ensure_metrics(metrics)

    def sort(self) -> Optional[List[VertexID]]:
        """Return a topological order, or None if the graph has a cycle."""
        n = self.graph.vertex_count
        adj = snapshot_adjacency(self.graph)

        in_degree = [0] * n
        for out_edges in adj:
            for edge in out_edges:
                in_degree[edge.to] += 1

        frontier: Deque[VertexID] = deque()
        for v in range(n):
            if in_degree[v] == 0:
                frontier.append(v)
                self.metrics.increment(Counter.PUSHES)

        order: List[VertexID] = []

        self.metrics.start_timer()
        while frontier:
            u = frontier.popleft()
            self.metrics.increment(Counter.POPS)
            order.append(u)

            for edge in adj[u]:
                in_degree[edge.to] -= 1
                if in_degree[edge.to] == 0:
                    frontier.append(edge.to)
                    self.metrics.increment(Counter.PUSHES)
        self.metrics.stop_timer()

        if len(order) != n:
            logger.debug(
                f"Kahn sort: cycle detected ({len(order)} of {n} vertices ordered)"
            )
            return None
        return order


class DFSTopologicalSort:
    """Depth-first post-order with on-path marking for cycle detection.

    Uses an explicit stack of ``[vertex, next-edge-position]`` frames. An
    edge into a vertex still on the current path aborts the whole sort.
    """

    def __init__(self, graph: Graph, metrics: Optional[Metrics] = None) -> None:
        require_directed(graph, "Topological sort")
        self.graph = graph
        self.metrics = ensure_metrics(metrics)

    def sort(self) -> Optional[List[VertexID]]:
        """Return a topological order, or None if the graph has a cycle."""
        n = self.graph.vertex_count
        adj = snapshot_adjacency(self.graph)
        visited = [False] * n
        on_path = [False] * n
        finished: List[VertexID] = []

        self.metrics.start_timer()
        for root in range(n):
            if visited[root]:
                continue
            if not self._visit(root, adj, visited, on_path, finished):
                self.metrics.stop_timer()
                logger.debug(f"DFS sort: cycle detected from root {root}")
                return None
        self.metrics.stop_timer()

        finished.reverse()
        return finished

    def _visit(
        self,
        root: VertexID,
        adj: Adjacency,
        visited: List[bool],
        on_path: List[bool],
        finished: List[VertexID],
    ) -> bool:
        """Explore from ``root``; return False as soon as a cycle is seen."""
        visited[root] = True
        on_path[root] = True
        self.metrics.increment(Counter.VISITS)
        work: List[List[int]] = [[root, 0]]

        while work:
            frame = work[-1]
            u, pos = frame
            out_edges = adj[u]

            if pos < len(out_edges):
                frame[1] = pos + 1
                v = out_edges[pos].to
                self.metrics.increment(Counter.EDGES_EXPLORED)

                if not visited[v]:
                    visited[v] = True
                    on_path[v] = True
                    self.metrics.increment(Counter.VISITS)
                    work.append([v, 0])
                elif on_path[v]:
                    return False
                continue

            work.pop()
            on_path[u] = False
            finished.append(u)

        return True


def topological_sort(
    graph: Graph, strategy: str = "kahn", metrics: Optional[Metrics] = None
) -> Optional[List[VertexID]]:
    """Sort ``graph`` with the named strategy (``"kahn"`` or ``"dfs"``)."""
    if strategy == "kahn":
        return KahnTopologicalSort(graph, metrics).sort()
    if strategy == "dfs":
        return DFSTopologicalSort(graph, metrics).sort()
    raise ValueError(f"Unknown topological sort strategy '{strategy}'")


def has_cycle(graph: Graph) -> bool:
    """Return True if the directed graph contains a cycle."""
    return KahnTopologicalSort(graph).sort() is None
