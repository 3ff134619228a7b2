"""Reproducible random dataset generation.

Produces graph description records (see ``schedgraph.graph.io``) for
exercising the algorithms: graphs with a chosen number of cyclic SCC blocks,
random sparse/dense graphs, and random DAGs. The same seed always yields the
same record.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple, Union

from schedgraph.config import GENERATOR_CONFIG, GeneratorConfig
from schedgraph.graph.io import description_to_graph, dump_graph_description
from schedgraph.logging import get_logger

logger = get_logger(__name__)


class _EdgeCollector:
    """Accumulates edges, skipping repeated ordered pairs."""

    def __init__(self) -> None:
        self.edges: List[Dict[str, int]] = []
        self._seen: Set[Tuple[int, int]] = set()

    def add(self, u: int, v: int, w: int) -> None:
        if (u, v) in self._seen:
            return
        self._seen.add((u, v))
        self.edges.append({"u": u, "v": v, "w": w})

    def __len__(self) -> int:
        return len(self.edges)


def generate_dataset(
    n: int,
    edge_count: int,
    includes_cycle: bool = False,
    num_sccs: int = 1,
    seed: Optional[int] = None,
    acyclic: bool = False,
    config: GeneratorConfig = GENERATOR_CONFIG,
) -> Dict[str, Any]:
    """Generate a graph description record.

    With ``includes_cycle`` and ``num_sccs > 1`` the vertices are split into
    ``num_sccs`` equal blocks (the last takes the remainder). Each block gets
    a ring ``start -> ... -> end-1 -> start`` and adjacent blocks are joined by
    one forward bridge edge, giving a chain of SCCs. With ``num_sccs <= 1`` a
    single ring over the first ``config.single_cycle_len`` vertices is added.
    Remaining edges are random non-self-loop pairs until ``edge_count`` edges
    exist or the attempt budget runs out. Repeated ordered pairs are skipped.

    Args:
        n: Number of vertices.
        edge_count: Target number of edges.
        includes_cycle: Seed cyclic structure as described above.
        num_sccs: Number of cyclic blocks when ``includes_cycle`` is set.
        seed: Random seed; defaults to ``config.seed``.
        acyclic: Orient every random edge from lower to higher index, so the
            result is a DAG when ``includes_cycle`` is False.
        config: Generator defaults.

    Returns:
        A description mapping accepted by ``description_to_graph``.

    Raises:
        ValueError: If the parameters are inconsistent.
    """
    if n < 0 or edge_count < 0:
        raise ValueError("'n' and 'edge_count' must be non-negative")
    if includes_cycle and acyclic:
        raise ValueError("'includes_cycle' and 'acyclic' are mutually exclusive")
    if includes_cycle and num_sccs > 1 and num_sccs > n:
        raise ValueError(f"Cannot split {n} vertices into {num_sccs} SCCs")

    rng = random.Random(config.seed if seed is None else seed)
    low, high = config.weight_range()

    def weight() -> int:
        return rng.randint(low, high)

    collector = _EdgeCollector()

    if includes_cycle and n > 0:
        if num_sccs > 1:
            per_block = n // num_sccs
            for block in range(num_sccs):
                start = block * per_block
                end = n if block == num_sccs - 1 else (block + 1) * per_block
                for i in range(start, end - 1):
                    collector.add(i, i + 1, weight())
                if end - start > 1:
                    collector.add(end - 1, start, weight())

            for block in range(num_sccs - 1):
                src = block * per_block + rng.randrange(per_block)
                dst = (block + 1) * per_block
                collector.add(src, dst, weight())
        else:
            ring = min(n, config.single_cycle_len)
            for i in range(ring):
                collector.add(i, (i + 1) % ring, weight())

    attempts = 0
    max_attempts = edge_count * config.attempt_multiplier
    while n > 1 and len(collector) < edge_count and attempts < max_attempts:
        u = rng.randrange(n)
        v = rng.randrange(n)
        if u != v:
            if acyclic and u > v:
                u, v = v, u
            collector.add(u, v, weight())
        attempts += 1

    logger.debug(
        f"Generated dataset: n={n}, edges={len(collector)}, "
        f"cycle={includes_cycle}, sccs={num_sccs}"
    )
    return {
        "directed": True,
        "n": n,
        "edges": collector.edges,
        "source": 0,
        "weight_model": config.weight_model,
    }


def write_dataset(
    path: Union[str, Path],
    n: int,
    edge_count: int,
    includes_cycle: bool = False,
    num_sccs: int = 1,
    seed: Optional[int] = None,
    acyclic: bool = False,
    description: Optional[str] = None,
) -> Path:
    """Generate a dataset and write it as ``# description`` + JSON.

    Returns:
        The written path.
    """
    data = generate_dataset(
        n,
        edge_count,
        includes_cycle=includes_cycle,
        num_sccs=num_sccs,
        seed=seed,
        acyclic=acyclic,
    )
    loaded = description_to_graph(data)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        dump_graph_description(loaded.graph, source=loaded.source, description=description),
        encoding="utf-8",
    )
    logger.info(f"Generated {path}: {n} vertices, {loaded.graph.edge_count} edges")
    return path
