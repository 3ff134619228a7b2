import json
from pathlib import Path

import pytest

from schedgraph.graph import Graph
from schedgraph.graph.io import (
    description_to_graph,
    dump_graph_description,
    graph_to_description,
    load_graph_description,
    load_graph_file,
)


def test_load_json_with_defaults():
    text = json.dumps(
        {"directed": True, "n": 3, "edges": [{"u": 0, "v": 1}, {"u": 1, "v": 2, "w": 4}]}
    )
    loaded = load_graph_description(text)
    assert loaded.source == 0
    assert loaded.graph.weight_model == "edge"
    assert list(loaded.graph.edges()) == [(0, 1, 1), (1, 2, 4)]


def test_load_json_with_comment_line():
    text = '# Small DAG\n{"directed": true, "n": 2, "edges": [{"u": 0, "v": 1, "w": 3}], "source": 1}'
    loaded = load_graph_description(text, name="small.json")
    assert loaded.name == "small.json"
    assert loaded.source == 1
    assert list(loaded.graph.edges()) == [(0, 1, 3)]


def test_load_yaml():
    text = """
directed: true
n: 3
weight_model: node
edges:
  - {u: 0, v: 2, w: 5}
  - {u: 2, v: 1}
"""
    loaded = load_graph_description(text)
    assert loaded.graph.weight_model == "node"
    assert list(loaded.graph.edges()) == [(0, 2, 5), (2, 1, 1)]


def test_undirected_description():
    loaded = description_to_graph(
        {"directed": False, "n": 2, "edges": [{"u": 0, "v": 1, "w": 2}]}
    )
    assert not loaded.graph.directed
    assert loaded.graph.edge_count == 1


@pytest.mark.parametrize(
    "data, message",
    [
        ([1, 2], "mapping"),
        ({"n": 2}, "directed"),
        ({"directed": True}, "'n'"),
        ({"directed": "yes", "n": 2}, "boolean"),
        ({"directed": True, "n": -1}, "non-negative"),
        ({"directed": True, "n": 2, "edges": {}}, "list"),
        ({"directed": True, "n": 2, "edges": [{"u": 0}]}, "'u' and 'v'"),
        ({"directed": True, "n": 2, "edges": [{"u": 0, "v": 5}]}, "Edge #0"),
        ({"directed": True, "n": 2, "edges": [{"u": 0, "v": 1, "w": 1.5}]}, "integer"),
        ({"directed": True, "n": 2, "source": 3}, "source"),
        ({"directed": True, "n": 2, "weight_model": "other"}, "weight model"),
    ],
)
def test_invalid_descriptions(data, message):
    with pytest.raises(ValueError, match=message):
        description_to_graph(data)


def test_empty_document_rejected():
    with pytest.raises(ValueError, match="empty"):
        load_graph_description("")


def test_malformed_document_rejected():
    with pytest.raises(ValueError, match="parse"):
        load_graph_description("{directed: [")


def test_dump_and_load_file(tmp_path: Path):
    g = Graph(3)
    g.add_edge(0, 1, 2)
    g.add_edge(1, 2, 3)
    path = tmp_path / "g.json"
    path.write_text(dump_graph_description(g, source=0, description="tiny"))

    assert path.read_text().startswith("# tiny\n")
    loaded = load_graph_file(path)
    assert loaded.name == "g.json"
    assert list(loaded.graph.edges()) == list(g.edges())


def test_undirected_edges_emitted_once():
    g = Graph(3, directed=False)
    g.add_edge(0, 1, 2)
    g.add_edge(2, 1, 3)
    g.add_edge(1, 1, 4)
    data = graph_to_description(g)
    assert len(data["edges"]) == 3
    reloaded = description_to_graph(data).graph
    assert reloaded.edge_count == g.edge_count
