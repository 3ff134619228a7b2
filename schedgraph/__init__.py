"""schedgraph: structural and path analysis of dependency graphs.

schedgraph decomposes directed graphs into strongly connected components,
computes topological orders, and finds shortest, longest and critical paths
on DAGs. It targets offline analysis of task and service dependency graphs.

Primary API:
    Graph - Integer-indexed weighted graph
    TarjanSCC - SCC decomposition and condensation DAG
    KahnTopologicalSort, DFSTopologicalSort - Topological ordering
    DAGPathFinder - Shortest/longest/critical paths on DAGs
    Metrics - Per-run operation counters and timing
    load_graph_file() - Read a JSON/YAML graph description

Example:
    from schedgraph import Graph, DAGPathFinder, TarjanSCC

    g = Graph(3)
    g.add_edge(0, 1, 5)
    g.add_edge(1, 2, 3)

    sccs = TarjanSCC(g).find_sccs()
    dist = DAGPathFinder(g).shortest_paths(0).dist  # [0, 5, 8]
"""

from __future__ import annotations

from schedgraph import cli, logging
from schedgraph._version import __version__
from schedgraph.algorithms import (
    CriticalPathResult,
    DAGPathFinder,
    DFSTopologicalSort,
    KahnTopologicalSort,
    PathMode,
    PathResult,
    TarjanSCC,
    has_cycle,
    topological_sort,
)
from schedgraph.errors import NotADAGError, NotDirectedError, SCCNotComputedError
from schedgraph.graph import Edge, Graph
from schedgraph.graph.convert import from_networkx, to_digraph, to_networkx
from schedgraph.graph.io import (
    GraphDescription,
    dump_graph_description,
    load_graph_description,
    load_graph_file,
)
from schedgraph.metrics import Counter, Metrics

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Edge",
    "Metrics",
    "Counter",
    # Algorithms
    "TarjanSCC",
    "KahnTopologicalSort",
    "DFSTopologicalSort",
    "topological_sort",
    "has_cycle",
    "DAGPathFinder",
    "PathResult",
    "CriticalPathResult",
    "PathMode",
    # Errors
    "NotDirectedError",
    "NotADAGError",
    "SCCNotComputedError",
    # I/O
    "GraphDescription",
    "load_graph_description",
    "load_graph_file",
    "dump_graph_description",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    "to_digraph",
    # Utilities
    "cli",
    "logging",
]
