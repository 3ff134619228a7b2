"""Graph description records: parse, validate, and serialize.

A description is a mapping with the following fields::

    {
        "directed": true,
        "n": 8,
        "edges": [{"u": 0, "v": 1, "w": 3}, ...],
        "source": 0,
        "weight_model": "edge"
    }

``w``, ``source`` and ``weight_model`` are optional. Documents are parsed with
``yaml.safe_load`` so JSON, YAML, and JSON preceded by ``# comment`` lines all
load the same way.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from schedgraph.config import LOADER_CONFIG
from schedgraph.graph.digraph import Graph
from schedgraph.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GraphDescription:
    """A loaded graph with its default source vertex.

    Attributes:
        graph: The constructed graph.
        source: Default source vertex for path analysis.
        name: Optional label (file name when loaded from disk).
    """

    graph: Graph
    source: int = 0
    name: Optional[str] = None


def _require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{field_name}' must be an integer, got {value!r}")
    return value


def description_to_graph(
    data: Dict[str, Any], name: Optional[str] = None
) -> GraphDescription:
    """Build a graph from an already-parsed description mapping.

    Edges are added in list order, which fixes adjacency iteration order.

    Args:
        data: Parsed description.
        name: Optional label for the result.

    Returns:
        GraphDescription with the graph and its source vertex.

    Raises:
        ValueError: If a field is missing, mistyped, or out of range.
    """
    if not isinstance(data, dict):
        raise ValueError("Graph description must be a mapping at top-level.")

    for required in ("directed", "n"):
        if required not in data:
            raise ValueError(f"Graph description is missing '{required}'")

    directed = data["directed"]
    if not isinstance(directed, bool):
        raise ValueError(f"'directed' must be a boolean, got {directed!r}")

    n = _require_int(data["n"], "n")
    if n < 0:
        raise ValueError(f"'n' must be non-negative, got {n}")

    weight_model = data.get("weight_model", LOADER_CONFIG.default_weight_model)
    try:
        graph = Graph(n, directed=directed, weight_model=weight_model)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid graph header: {exc}") from exc

    edges = data.get("edges", [])
    if edges is None:
        edges = []
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")

    for idx, entry in enumerate(edges):
        if not isinstance(entry, dict):
            raise ValueError(f"Edge #{idx} must be a mapping with 'u' and 'v'")
        if "u" not in entry or "v" not in entry:
            raise ValueError(f"Edge #{idx} must include 'u' and 'v'")
        u = _require_int(entry["u"], f"edges[{idx}].u")
        v = _require_int(entry["v"], f"edges[{idx}].v")
        w = _require_int(
            entry.get("w", LOADER_CONFIG.default_weight), f"edges[{idx}].w"
        )
        try:
            graph.add_edge(u, v, w)
        except IndexError as exc:
            raise ValueError(f"Edge #{idx} ({u}->{v}): {exc}") from exc

    source = _require_int(data.get("source", LOADER_CONFIG.default_source), "source")
    if n > 0 and not 0 <= source < n:
        raise ValueError(f"'source' {source} is out of range for n={n}")

    logger.debug(
        f"Loaded graph {name or '<inline>'}: n={n}, edges={graph.edge_count}, "
        f"directed={directed}"
    )
    return GraphDescription(graph=graph, source=source, name=name)


def load_graph_description(
    text: str, name: Optional[str] = None
) -> GraphDescription:
    """Parse a JSON or YAML graph description string."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Could not parse graph description: {exc}") from exc
    if data is None:
        raise ValueError("Graph description is empty.")
    return description_to_graph(data, name=name)


def load_graph_file(path: Union[str, Path]) -> GraphDescription:
    """Load a graph description from a file on disk."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return load_graph_description(text, name=path.name)


def graph_to_description(graph: Graph, source: int = 0) -> Dict[str, Any]:
    """Convert a graph into a description mapping.

    Undirected graphs are emitted with each logical edge once, in the order
    the first endpoint stores it.
    """
    if graph.directed:
        edge_list = [{"u": u, "v": v, "w": w} for u, v, w in graph.edges()]
    else:
        # Each logical edge is stored twice; pair entries up to emit it once.
        pending: Dict[tuple, int] = {}
        edge_list = []
        for u, v, w in graph.edges():
            mirror = (v, u, w)
            if pending.get(mirror, 0) > 0:
                pending[mirror] -= 1
                continue
            pending[(u, v, w)] = pending.get((u, v, w), 0) + 1
            edge_list.append({"u": u, "v": v, "w": w})

    return {
        "directed": graph.directed,
        "n": graph.vertex_count,
        "edges": edge_list,
        "source": source,
        "weight_model": graph.weight_model,
    }


def dump_graph_description(
    graph: Graph, source: int = 0, description: Optional[str] = None
) -> str:
    """Serialize a graph as JSON, optionally preceded by a ``# comment`` line."""
    body = json.dumps(graph_to_description(graph, source=source), indent=2)
    if description:
        return f"# {description}\n{body}\n"
    return body + "\n"
