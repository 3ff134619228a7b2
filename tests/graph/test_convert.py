import networkx as nx
import pytest

from schedgraph.graph import Graph
from schedgraph.graph.convert import from_networkx, to_digraph, to_networkx


def build_sample_graph() -> Graph:
    graph = Graph(3, weight_model="node")
    graph.add_edge(0, 1, 1)
    graph.add_edge(0, 1, 3)
    graph.add_edge(1, 2, 2)
    return graph


def test_to_networkx_keeps_parallel_edges():
    nxg = to_networkx(build_sample_graph())
    assert isinstance(nxg, nx.MultiDiGraph)
    assert sorted(nxg.nodes) == [0, 1, 2]
    assert nxg.number_of_edges(0, 1) == 2
    assert sorted(d["weight"] for _, _, d in nxg.edges(0, data=True)) == [1, 3]
    assert nxg.graph["weight_model"] == "node"


def test_to_networkx_undirected():
    g = Graph(2, directed=False)
    g.add_edge(0, 1, 4)
    nxg = to_networkx(g)
    assert not nxg.is_directed()
    assert nxg.number_of_edges() == 1


def test_to_digraph_first_weight_wins():
    nxg = to_digraph(build_sample_graph())
    assert isinstance(nxg, nx.DiGraph)
    assert nxg.edges[0, 1]["weight"] == 1
    assert nxg.number_of_edges() == 2


def test_from_networkx_roundtrip():
    original = build_sample_graph()
    graph, node_map = from_networkx(to_networkx(original))
    assert node_map == {0: 0, 1: 1, 2: 2}
    assert graph.weight_model == "node"
    assert sorted(graph.edges()) == sorted(original.edges())


def test_from_networkx_relabels_and_defaults():
    nxg = nx.DiGraph()
    nxg.add_edge("a", "b", weight=5)
    nxg.add_edge("b", "c")
    graph, node_map = from_networkx(nxg, default_weight=2)
    assert node_map == {"a": 0, "b": 1, "c": 2}
    assert list(graph.edges()) == [(0, 1, 5), (1, 2, 2)]
    assert graph.directed


def test_from_networkx_rejects_float_weights():
    nxg = nx.DiGraph()
    nxg.add_edge(0, 1, weight=1.5)
    with pytest.raises(TypeError):
        from_networkx(nxg)
