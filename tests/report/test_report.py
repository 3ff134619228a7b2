import json
from pathlib import Path

from schedgraph.graph import Graph
from schedgraph.metrics import Counter
from schedgraph.report import (
    GraphReport,
    analyze_files,
    analyze_graph,
    format_report,
)


def schedule_graph() -> Graph:
    g = Graph(5)
    for u, v, w in [(0, 1, 3), (0, 2, 2), (1, 3, 4), (2, 3, 1), (3, 4, 5)]:
        g.add_edge(u, v, w)
    return g


def cyclic_graph() -> Graph:
    g = Graph(4)
    for u, v in [(0, 1), (1, 0), (1, 2), (2, 3), (3, 2)]:
        g.add_edge(u, v, 1)
    return g


def test_analyze_dag():
    report = analyze_graph(schedule_graph(), source=0, name="schedule")
    assert report.error is None
    assert len(report.scc.components) == 5
    assert report.scc.condensation_vertices == 5
    assert report.scc.condensation_edges == 5
    assert report.topo.is_dag
    assert report.topo.kahn_order == [0, 1, 2, 3, 4]
    assert report.paths.shortest.dist == [0, 3, 2, 3, 8]
    assert report.paths.longest.dist == [0, 3, 2, 7, 12]
    assert report.paths.critical.path == [0, 1, 3, 4]
    assert report.paths.shortest_metrics.get(Counter.RELAXATIONS) == 5


def test_analyze_cyclic_skips_paths():
    report = analyze_graph(cyclic_graph(), name="cyclic")
    assert report.scc.components == [[2, 3], [0, 1]]
    assert report.scc.condensation_edges == 1
    assert report.topo.kahn_order is None
    assert report.topo.dfs_order is None
    assert report.paths is None


def test_format_report_sections():
    text = format_report(analyze_graph(schedule_graph(), name="schedule"))
    assert "Dataset: schedule" in text
    assert "Number of SCCs: 5" in text
    assert "Topological Order: [0, 1, 2, 3, 4]" in text
    assert "To 4: 12 (path: [0, 1, 3, 4])" in text
    assert "Length: 12" in text

    cyclic = format_report(analyze_graph(cyclic_graph(), name="cyclic"))
    assert "Graph contains a cycle (not a DAG)" in cyclic
    assert "Skipped: Graph contains cycles" in cyclic



def test_format_report_without_graph():
    failed = format_report(GraphReport(name="bad.json", error="boom"))
    assert "Error: boom" in failed
    assert "Graph Info" not in failed

    missing = format_report(GraphReport(name="empty.json"))
    assert "Error: graph not available" in missing

def test_to_dict_is_json_serializable():
    data = analyze_graph(schedule_graph(), name="schedule").to_dict()
    payload = json.loads(json.dumps(data))
    assert payload["graph"]["vertices"] == 5
    assert payload["paths"]["critical"] == {"path": [0, 1, 3, 4], "length": 12}
    assert payload["paths"]["shortest"]["distances"]["4"]["dist"] == 8
    assert "elapsed_ms" in payload["scc"]["metrics"]


def test_batch_continues_after_failure(tmp_path: Path, caplog):
    good = tmp_path / "good.json"
    good.write_text(json.dumps({"directed": True, "n": 2, "edges": [{"u": 0, "v": 1}]}))
    undirected = tmp_path / "undirected.json"
    undirected.write_text(json.dumps({"directed": False, "n": 2, "edges": []}))
    broken = tmp_path / "broken.json"
    broken.write_text(json.dumps({"directed": True}))
    missing = tmp_path / "missing.json"

    reports = analyze_files([good, undirected, broken, missing])
    assert [r.name for r in reports] == [
        "good.json",
        "undirected.json",
        "broken.json",
        "missing.json",
    ]
    assert reports[0].error is None
    assert "directed graph" in reports[1].error
    assert "'n'" in reports[2].error
    assert reports[3].error is not None
    assert "Error processing dataset" in caplog.text
    assert "Error:" in format_report(reports[2])
