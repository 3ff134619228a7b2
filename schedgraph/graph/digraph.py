"""Integer-indexed weighted graph used by all schedgraph algorithms.

`Graph` stores a fixed number of vertices ``0..n-1`` and an insertion-ordered
adjacency list per vertex. Edges carry integer weights. The shape is fixed at
construction; edges are only appended. Derived graphs (transpose,
condensation) are always new instances.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, NamedTuple, Tuple

from schedgraph.errors import NotDirectedError

VertexID = int
Weight = int

#: Weight model tags. Descriptive only: weights always live on edges.
WEIGHT_MODELS: Tuple[str, ...] = ("edge", "node")


class Edge(NamedTuple):
    """Outgoing edge stored in an adjacency list."""

    to: VertexID
    weight: Weight

    def __repr__(self) -> str:
        return f"({self.to}, w={self.weight})"


class Graph:
    """Directed or undirected graph over dense integer vertices.

    This class enforces:
      - A fixed vertex count; adding an edge never grows the graph.
      - Edge endpoints within ``[0, n)`` (raises IndexError otherwise).
      - Integer weights only (raises TypeError otherwise).
      - Symmetric storage for undirected graphs.
    """

    def __init__(
        self, n: int, directed: bool = True, weight_model: str = "edge"
    ) -> None:
        """Initialize an empty graph.

        Args:
            n: Number of vertices.
            directed: Whether edges are one-way.
            weight_model: ``"edge"`` or ``"node"``.

        Raises:
            ValueError: If ``n`` is negative or the weight model is unknown.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Vertex count must be an integer, got {n!r}.")
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}.")
        if weight_model not in WEIGHT_MODELS:
            raise ValueError(
                f"Unknown weight model '{weight_model}'; expected one of {WEIGHT_MODELS}."
            )
        self._n = n
        self._directed = bool(directed)
        self._weight_model = weight_model
        self._adj: List[List[Edge]] = [[] for _ in range(n)]

    def _check_vertex(self, v: Any, role: str) -> None:
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"{role} vertex must be an integer, got {v!r}.")
        if not 0 <= v < self._n:
            raise IndexError(
                f"{role} vertex {v} is out of range for a graph with {self._n} vertices."
            )

    #
    # Construction
    #
    def add_edge(self, u: VertexID, v: VertexID, weight: Weight = 1) -> None:
        """Add an edge from ``u`` to ``v``.

        For undirected graphs the reverse edge is stored as well.

        Raises:
            IndexError: If an endpoint is outside ``[0, n)``.
            TypeError: If an endpoint or the weight is not an integer.
        """
        self._check_vertex(u, "Source")
        self._check_vertex(v, "Target")
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise TypeError(f"Edge weight must be an integer, got {weight!r}.")

        self._adj[u].append(Edge(v, weight))
        if not self._directed:
            self._adj[v].append(Edge(u, weight))

    #
    # Queries
    #
    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def edge_count(self) -> int:
        """Number of logical edges (stored entries halved when undirected)."""
        count = sum(len(edges) for edges in self._adj)
        return count if self._directed else count // 2

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weight_model(self) -> str:
        return self._weight_model

    def adjacent(self, u: VertexID) -> Tuple[Edge, ...]:
        """Return the outgoing edges of ``u`` in insertion order."""
        self._check_vertex(u, "Query")
        return tuple(self._adj[u])

    def vertices(self) -> range:
        return range(self._n)

    def edges(self) -> Iterator[Tuple[VertexID, VertexID, Weight]]:
        """Iterate stored edges as ``(u, v, weight)`` in adjacency order."""
        for u, out_edges in enumerate(self._adj):
            for edge in out_edges:
                yield u, edge.to, edge.weight

    def out_degree(self, u: VertexID) -> int:
        self._check_vertex(u, "Query")
        return len(self._adj[u])

    def __len__(self) -> int:
        return self._n

    #
    # Derived graphs
    #
    def transpose(self) -> Graph:
        """Return a new graph with every edge reversed.

        Raises:
            NotDirectedError: If the graph is undirected.
        """
        if not self._directed:
            raise NotDirectedError("Cannot transpose an undirected graph.")
        transposed = Graph(self._n, directed=True, weight_model=self._weight_model)
        for u, v, w in self.edges():
            transposed.add_edge(v, u, w)
        return transposed

    def to_dict(self, source: int = 0) -> Dict[str, Any]:
        """Return the graph as a description record (see ``graph.io``)."""
        # Import here to avoid circular import
        from schedgraph.graph.io import graph_to_description

        return graph_to_description(self, source=source)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph(n={self._n}, edges={self.edge_count}, {kind}, weight_model='{self._weight_model}')"

    def __str__(self) -> str:
        lines = [f"Graph (n={self._n}, edges={self.edge_count}):"]
        for u, out_edges in enumerate(self._adj):
            lines.append(f"  {u} -> {list(out_edges)}")
        return "\n".join(lines)
