from __future__ import annotations

from typing import List, Optional, Tuple

from schedgraph.errors import NotDirectedError
from schedgraph.graph.digraph import Edge, Graph
from schedgraph.metrics import Metrics

#: Adjacency snapshot: outgoing edges for each vertex, indexed by vertex.
Adjacency = List[Tuple[Edge, ...]]


def require_directed(graph: Graph, algorithm: str) -> None:
    """Raise NotDirectedError unless ``graph`` is directed.

    Args:
        graph: Graph handed to an engine constructor.
        algorithm: Human-readable engine name used in the message.
    """
    if not graph.directed:
        raise NotDirectedError(f"{algorithm} requires a directed graph")


def snapshot_adjacency(graph: Graph) -> Adjacency:
    """Return the adjacency lists of ``graph`` for a single traversal."""
    return [graph.adjacent(u) for u in graph.vertices()]


def ensure_metrics(metrics: Optional[Metrics]) -> Metrics:
    return metrics if metrics is not None else Metrics()
