"""Per-dataset analysis driver and text report.

`analyze_graph` runs every engine on one graph and collects results and
metrics into a `GraphReport`. `analyze_files` does the same for a batch of
description files; a dataset that fails is logged and recorded as an error
entry instead of aborting the batch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from schedgraph.algorithms.dag_paths import CriticalPathResult, DAGPathFinder, PathResult
from schedgraph.algorithms.scc import TarjanSCC
from schedgraph.algorithms.topo import DFSTopologicalSort, KahnTopologicalSort
from schedgraph.config import REPORT_CONFIG
from schedgraph.graph.digraph import Graph
from schedgraph.graph.io import load_graph_file
from schedgraph.logging import get_logger
from schedgraph.metrics import Metrics

logger = get_logger(__name__)


@dataclass
class SCCSection:
    components: List[List[int]]
    condensation_vertices: int
    condensation_edges: int
    metrics: Metrics


@dataclass
class TopoSection:
    kahn_order: Optional[List[int]]
    dfs_order: Optional[List[int]]
    kahn_metrics: Metrics
    dfs_metrics: Metrics

    @property
    def is_dag(self) -> bool:
        return self.kahn_order is not None


@dataclass
class PathSection:
    shortest: PathResult
    longest: PathResult
    critical: Optional[CriticalPathResult]
    shortest_metrics: Metrics
    longest_metrics: Metrics


@dataclass
class GraphReport:
    """Everything computed for one dataset.

    Attributes:
        name: Dataset label.
        graph: The analyzed graph, None if loading failed.
        source: Source vertex used for path analysis.
        scc: SCC results (directed graphs only).
        topo: Topological sort results (directed graphs only).
        paths: Path results, only for DAGs with at least one vertex.
        error: Message when the dataset could not be analyzed.
    """

    name: str
    graph: Optional[Graph] = None
    source: int = 0
    scc: Optional[SCCSection] = None
    topo: Optional[TopoSection] = None
    paths: Optional[PathSection] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable summary."""
        data: Dict[str, Any] = {"name": self.name}
        if self.error is not None:
            data["error"] = self.error
        if self.graph is not None:
            data["graph"] = {
                "vertices": self.graph.vertex_count,
                "edges": self.graph.edge_count,
                "directed": self.graph.directed,
                "weight_model": self.graph.weight_model,
                "source": self.source,
            }
        if self.scc is not None:
            data["scc"] = {
                "components": self.scc.components,
                "condensation": {
                    "vertices": self.scc.condensation_vertices,
                    "edges": self.scc.condensation_edges,
                },
                "metrics": self.scc.metrics.as_dict(),
            }
        if self.topo is not None:
            data["topological_sort"] = {
                "kahn": {
                    "order": self.topo.kahn_order,
                    "metrics": self.topo.kahn_metrics.as_dict(),
                },
                "dfs": {
                    "order": self.topo.dfs_order,
                    "metrics": self.topo.dfs_metrics.as_dict(),
                },
            }
        if self.paths is not None:
            data["paths"] = {
                "shortest": _path_entries(self.paths.shortest),
                "longest": _path_entries(self.paths.longest),
                "critical": (
                    None
                    if self.paths.critical is None
                    else {
                        "path": self.paths.critical.path,
                        "length": self.paths.critical.length,
                    }
                ),
            }
        return data


def _path_entries(result: PathResult) -> Dict[str, Any]:
    return {
        "source": result.source,
        "distances": {
            str(v): {"dist": result.dist[v], "path": result.reconstruct_path(v)}
            for v in result.reachable()
        },
    }


def analyze_graph(graph: Graph, source: int = 0, name: str = "<graph>") -> GraphReport:
    """Run SCC, both topological sorts and, for DAGs, path analysis.

    Raises:
        NotDirectedError: If the graph is undirected.
    """
    report = GraphReport(name=name, graph=graph, source=source)

    scc_metrics = Metrics()
    tarjan = TarjanSCC(graph, scc_metrics)
    components = tarjan.find_sccs()
    condensation = tarjan.build_condensation_graph()
    report.scc = SCCSection(
        components=components,
        condensation_vertices=condensation.vertex_count,
        condensation_edges=condensation.edge_count,
        metrics=scc_metrics,
    )

    kahn_metrics, dfs_metrics = Metrics(), Metrics()
    report.topo = TopoSection(
        kahn_order=KahnTopologicalSort(graph, kahn_metrics).sort(),
        dfs_order=DFSTopologicalSort(graph, dfs_metrics).sort(),
        kahn_metrics=kahn_metrics,
        dfs_metrics=dfs_metrics,
    )

    if not report.topo.is_dag:
        logger.info(f"{name}: graph contains cycles, skipping path analysis")
        return report
    if graph.vertex_count == 0:
        return report

    shortest_metrics, longest_metrics = Metrics(), Metrics()
    shortest = DAGPathFinder(graph, shortest_metrics).shortest_paths(source)
    longest = DAGPathFinder(graph, longest_metrics).longest_paths(source)
    # Critical path runs on its own metrics so per-source counters stay readable
    critical = DAGPathFinder(graph, Metrics()).find_critical_path()
    report.paths = PathSection(
        shortest=shortest,
        longest=longest,
        critical=critical,
        shortest_metrics=shortest_metrics,
        longest_metrics=longest_metrics,
    )
    return report


def analyze_files(paths: Iterable[Union[str, Path]]) -> List[GraphReport]:
    """Analyze every description file; failures become error entries."""
    reports: List[GraphReport] = []
    for path in paths:
        path = Path(path)
        try:
            loaded = load_graph_file(path)
            reports.append(
                analyze_graph(loaded.graph, loaded.source, name=loaded.name or path.name)
            )
        except (OSError, ValueError) as exc:
            logger.error(f"Error processing dataset {path.name}: {exc}")
            reports.append(GraphReport(name=path.name, error=str(exc)))
    return reports


def _indent_block(text: str, prefix: str) -> List[str]:
    return [prefix + line for line in text.splitlines()]


def format_report(report: GraphReport) -> str:
    """Render a report as plain text."""
    ind = REPORT_CONFIG.indent
    rule = "-" * REPORT_CONFIG.rule_width
    lines = [rule, f"Dataset: {report.name}", rule]

    graph = report.graph
    if report.error is not None or graph is None:
        lines.append(f"Error: {report.error or 'graph not available'}")
        return "\n".join(lines)

    lines += [
        "Graph Info:",
        f"{ind}Nodes: {graph.vertex_count}",
        f"{ind}Edges: {graph.edge_count}",
        f"{ind}Directed: {graph.directed}",
        f"{ind}Weight Model: {graph.weight_model}",
        f"{ind}Source Node: {report.source}",
        "",
    ]

    if report.scc is not None:
        scc = report.scc
        lines.append("### Strongly Connected Components (Tarjan) ###")
        lines.append(f"{ind}Number of SCCs: {len(scc.components)}")
        for idx, comp in enumerate(scc.components):
            lines.append(f"{ind * 2}SCC {idx} (size {len(comp)}): {comp}")
        lines.append(f"{ind}Condensation Graph:")
        lines.append(f"{ind * 2}Nodes: {scc.condensation_vertices}")
        lines.append(f"{ind * 2}Edges: {scc.condensation_edges}")
        lines.append(f"{ind}Metrics:")
        lines += _indent_block(scc.metrics.summary(indent=ind), ind * 2)
        lines.append("")

    if report.topo is not None:
        lines.append("### Topological Sort ###")
        for label, order, metrics in (
            ("Kahn", report.topo.kahn_order, report.topo.kahn_metrics),
            ("DFS", report.topo.dfs_order, report.topo.dfs_metrics),
        ):
            lines.append(f"{label}:")
            if order is None:
                lines.append(f"{ind}Result: Graph contains a cycle (not a DAG)")
                continue
            lines.append(f"{ind}Topological Order: {order}")
            lines.append(f"{ind}Metrics:")
            lines += _indent_block(metrics.summary(indent=ind), ind * 2)
        lines.append("")

    if report.paths is not None:
        paths = report.paths
        lines.append("### DAG Shortest/Longest Paths ###")
        for label, result, metrics in (
            ("Shortest", paths.shortest, paths.shortest_metrics),
            ("Longest", paths.longest, paths.longest_metrics),
        ):
            lines.append(f"{label} Paths from source {result.source}:")
            for v in result.reachable():
                lines.append(
                    f"{ind * 2}To {v}: {result.dist[v]} (path: {result.reconstruct_path(v)})"
                )
            lines.append(f"{ind}Metrics:")
            lines += _indent_block(metrics.summary(indent=ind), ind * 2)
        lines.append("Critical Path (Longest Path in entire DAG):")
        if paths.critical is None:
            lines.append(f"{ind}None")
        else:
            lines.append(f"{ind}Path: {paths.critical.path}")
            lines.append(f"{ind}Length: {paths.critical.length}")
    elif report.topo is not None and not report.topo.is_dag:
        lines.append("### DAG Shortest/Longest Paths ###")
        lines.append(f"{ind}Skipped: Graph contains cycles (not a DAG)")

    return "\n".join(lines)
