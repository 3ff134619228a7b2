"""Shortest and longest paths on directed acyclic graphs.

Distances are computed by dynamic programming over a topological order
(Kahn). Because vertices are processed in that order, each distance is final
the first time its vertex is reached by the scan: no vertex is revisited.
Negative weights are allowed since there are no cycles to exploit.

Unreached vertices carry ``None`` distances and parents instead of integer
sentinels, so extreme edge weights cannot collide with "unreached".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional

from schedgraph.algorithms.base import (
    Adjacency,
    ensure_metrics,
    require_directed,
    snapshot_adjacency,
)
from schedgraph.algorithms.topo import KahnTopologicalSort
from schedgraph.errors import NotADAGError
from schedgraph.graph.digraph import Graph, VertexID
from schedgraph.logging import get_logger
from schedgraph.metrics import Counter, Metrics

logger = get_logger(__name__)


class PathMode(IntEnum):
    """Optimization direction for DAG path search."""

    SHORTEST = 1
    LONGEST = 2


def _trace_back(parent: List[Optional[VertexID]], dest: VertexID) -> List[VertexID]:
    path: List[VertexID] = []
    v: Optional[VertexID] = dest
    while v is not None:
        path.append(v)
        v = parent[v]
    path.reverse()
    return path


@dataclass
class PathResult:
    """Single-source distances and predecessor pointers.

    Attributes:
        source: Source vertex.
        mode: Whether distances are minimized or maximized.
        dist: Best distance per vertex, None when unreached.
        parent: Predecessor on the best path, None for the source and for
            unreached vertices.
    """

    source: VertexID
    mode: PathMode
    dist: List[Optional[int]]
    parent: List[Optional[VertexID]]

    def _check_dest(self, dest: VertexID) -> None:
        if not 0 <= dest < len(self.dist):
            raise IndexError(f"Vertex {dest} out of range [0, {len(self.dist)})")

    def is_reachable(self, dest: VertexID) -> bool:
        self._check_dest(dest)
        return self.dist[dest] is not None

    def reachable(self) -> List[VertexID]:
        """Reached vertices in ascending order."""
        return [v for v, d in enumerate(self.dist) if d is not None]

    def reconstruct_path(self, dest: VertexID) -> Optional[List[VertexID]]:
        """Return the vertex sequence from the source to ``dest``.

        Returns:
            The path, or None if ``dest`` was not reached.

        Raises:
            IndexError: If ``dest`` is not a vertex of the graph.
        """
        self._check_dest(dest)
        if self.dist[dest] is None:
            return None
        return _trace_back(self.parent, dest)


@dataclass(frozen=True)
class CriticalPathResult:
    """Longest path found anywhere in the DAG.

    Attributes:
        path: Vertices from ``source`` to ``target``.
        length: Sum of edge weights along ``path``.
    """

    path: List[VertexID]
    length: int

    @property
    def source(self) -> VertexID:
        return self.path[0]

    @property
    def target(self) -> VertexID:
        return self.path[-1]


class DAGPathFinder:
    """Shortest/longest paths and critical path on a DAG.

    Every operation re-derives a topological order with Kahn's algorithm and
    raises NotADAGError if the graph has a cycle, even when the caller has
    already checked acyclicity.
    """

    def __init__(self, graph: Graph, metrics: Optional[Metrics] = None) -> None:
        require_directed(graph, "DAG path search")
        self.graph = graph
        self.metrics = ensure_metrics(metrics)

    def _topological_order(self) -> List[VertexID]:
        # Sorting metrics are not part of this engine's counters
        order = KahnTopologicalSort(self.graph, Metrics()).sort()
        if order is None:
            raise NotADAGError("Graph contains a cycle - not a DAG")
        return order

    def _check_source(self, source: VertexID) -> None:
        if isinstance(source, bool) or not isinstance(source, int):
            raise TypeError(f"Source vertex must be an integer, got {source!r}.")
        if not 0 <= source < self.graph.vertex_count:
            raise IndexError(
                f"Source vertex {source} is out of range for a graph with "
                f"{self.graph.vertex_count} vertices."
            )

    def _relax(
        self,
        order: List[VertexID],
        adj: Adjacency,
        source: VertexID,
        mode: PathMode,
    ) -> PathResult:
        n = self.graph.vertex_count
        dist: List[Optional[int]] = [None] * n
        parent: List[Optional[VertexID]] = [None] * n
        dist[source] = 0
        longest = mode is PathMode.LONGEST

        for u in order:
            du = dist[u]
            if du is None:
                continue
            for edge in adj[u]:
                self.metrics.increment(Counter.RELAXATIONS)
                candidate = du + edge.weight
                current = dist[edge.to]
                if (
                    current is None
                    or (longest and candidate > current)
                    or (not longest and candidate < current)
                ):
                    dist[edge.to] = candidate
                    parent[edge.to] = u

        return PathResult(source=source, mode=mode, dist=dist, parent=parent)

    def _single_source(self, source: VertexID, mode: PathMode) -> PathResult:
        self._check_source(source)
        order = self._topological_order()
        adj = snapshot_adjacency(self.graph)

        self.metrics.start_timer()
        result = self._relax(order, adj, source, mode)
        self.metrics.stop_timer()

        logger.debug(
            f"DAG {mode.name.lower()} paths from {source}: "
            f"{len(result.reachable())} reachable vertices"
        )
        return result

    def shortest_paths(self, source: VertexID) -> PathResult:
        """Minimum-weight distances from ``source``.

        Raises:
            NotADAGError: If the graph has a cycle.
            IndexError: If ``source`` is not a vertex.
        """
        return self._single_source(source, PathMode.SHORTEST)

    def longest_paths(self, source: VertexID) -> PathResult:
        """Maximum-weight distances from ``source``.

        Raises:
            NotADAGError: If the graph has a cycle.
            IndexError: If ``source`` is not a vertex.
        """
        return self._single_source(source, PathMode.LONGEST)

    def find_critical_path(self) -> Optional[CriticalPathResult]:
        """Return the longest positive-length path in the whole DAG.

        Runs longest paths from every vertex. Ties keep the first maximum
        found, scanning sources in ascending order and destinations in
        ascending order for each source.

        Returns:
            The critical path, or None if the graph is empty or no path has
            positive length.

        Raises:
            NotADAGError: If the graph has a cycle.
        """
        n = self.graph.vertex_count
        order = self._topological_order()
        if n == 0:
            return None
        adj = snapshot_adjacency(self.graph)

        best_length = 0
        best: Optional[PathResult] = None
        best_target: Optional[VertexID] = None

        self.metrics.start_timer()
        for source in range(n):
            result = self._relax(order, adj, source, PathMode.LONGEST)
            for dest, d in enumerate(result.dist):
                if d is not None and d > best_length:
                    best_length = d
                    best = result
                    best_target = dest
        self.metrics.stop_timer()

        if best is None or best_target is None:
            logger.debug("Critical path: no positive-length path")
            return None

        path = _trace_back(best.parent, best_target)
        logger.debug(f"Critical path {path} with length {best_length}")
        return CriticalPathResult(path=path, length=best_length)
