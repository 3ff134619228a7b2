"""Graph algorithms: SCC decomposition, topological sort, DAG paths."""

from schedgraph.algorithms.dag_paths import (
    CriticalPathResult,
    DAGPathFinder,
    PathMode,
    PathResult,
)
from schedgraph.algorithms.scc import TarjanSCC
from schedgraph.algorithms.topo import (
    DFSTopologicalSort,
    KahnTopologicalSort,
    has_cycle,
    topological_sort,
)

__all__ = [
    "TarjanSCC",
    "KahnTopologicalSort",
    "DFSTopologicalSort",
    "topological_sort",
    "has_cycle",
    "DAGPathFinder",
    "PathResult",
    "CriticalPathResult",
    "PathMode",
]
