"""Graph conversion utilities between `Graph` and NetworkX graphs.

`to_networkx` keeps parallel edges (MultiDiGraph / MultiGraph); `to_digraph`
consolidates them, keeping the first weight seen. `from_networkx` accepts
any NetworkX graph and maps its nodes onto dense integer indices.
"""

from typing import Dict, Hashable, Optional, Tuple

import networkx as nx

from schedgraph.graph.digraph import Graph
from schedgraph.graph.io import graph_to_description


def to_networkx(graph: Graph, weight: str = "weight") -> nx.MultiGraph:
    """Convert a Graph to a NetworkX multigraph.

    Directed graphs become ``nx.MultiDiGraph``; undirected graphs become
    ``nx.MultiGraph`` with each logical edge added once.

    Args:
        graph: The Graph to convert.
        weight: Edge attribute name that receives the integer weight.

    Returns:
        A NetworkX multigraph with nodes ``0..n-1``.
    """
    nx_graph: nx.MultiGraph = nx.MultiDiGraph() if graph.directed else nx.MultiGraph()
    nx_graph.graph["weight_model"] = graph.weight_model
    nx_graph.add_nodes_from(graph.vertices())

    if graph.directed:
        for u, v, w in graph.edges():
            nx_graph.add_edge(u, v, **{weight: w})
    else:
        for entry in graph_to_description(graph)["edges"]:
            nx_graph.add_edge(entry["u"], entry["v"], **{weight: entry["w"]})
    return nx_graph


def to_digraph(graph: Graph, weight: str = "weight") -> nx.DiGraph:
    """Convert a directed Graph to a NetworkX DiGraph.

    Parallel edges collapse into one; the first weight in adjacency order wins.
    """
    nx_graph = nx.DiGraph()
    nx_graph.graph["weight_model"] = graph.weight_model
    nx_graph.add_nodes_from(graph.vertices())
    for u, v, w in graph.edges():
        if not nx_graph.has_edge(u, v):
            nx_graph.add_edge(u, v, **{weight: w})
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    weight: str = "weight",
    default_weight: int = 1,
    weight_model: Optional[str] = None,
) -> Tuple[Graph, Dict[Hashable, int]]:
    """Convert a NetworkX graph to a Graph.

    Nodes are assigned indices in NetworkX iteration order. Edge weights are
    read from ``weight``; missing values use ``default_weight``.

    Args:
        nx_graph: Any NetworkX graph (directed or not, multi or not).
        weight: Edge attribute holding the weight.
        default_weight: Weight for edges without the attribute.
        weight_model: Overrides ``nx_graph.graph["weight_model"]``.

    Returns:
        The Graph and the mapping from original node to vertex index.

    Raises:
        TypeError: If an edge weight is not an integer.
    """
    node_map = {node: idx for idx, node in enumerate(nx_graph.nodes)}
    model = weight_model or nx_graph.graph.get("weight_model", "edge")
    graph = Graph(len(node_map), directed=nx_graph.is_directed(), weight_model=model)

    for u, v, data in nx_graph.edges(data=True):
        graph.add_edge(node_map[u], node_map[v], data.get(weight, default_weight))
    return graph, node_map
