"""Sample graphs shared by the algorithm tests."""

import pytest

from schedgraph.graph import Graph


def build(n, edges, directed=True):
    g = Graph(n, directed=directed)
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


@pytest.fixture
def line3():
    #    [5]    [3]
    #  0────►1────►2
    return build(3, [(0, 1, 5), (1, 2, 3)])


@pytest.fixture
def diamond():
    #        [1]
    #   ┌────────►1───┐
    #   │             │[2]
    #   0             ▼
    #   │        [4]  3
    #   └────────►2───┘
    #                 [1]
    return build(4, [(0, 1, 1), (0, 2, 4), (1, 3, 2), (2, 3, 1)])


@pytest.fixture
def triangle_cycle():
    #  0────►1
    #  ▲     │
    #  └──2◄─┘
    return build(3, [(0, 1, 1), (1, 2, 1), (2, 0, 1)])


@pytest.fixture
def two_sccs():
    #  0◄──►1────►2◄──►3
    return build(4, [(0, 1, 1), (1, 0, 1), (1, 2, 7), (2, 3, 1), (3, 2, 1)])


@pytest.fixture
def disconnected():
    #  0────►1     2────►3
    return build(4, [(0, 1, 1), (2, 3, 1)])


@pytest.fixture
def schedule():
    #        [3]       [4]
    #   0────────►1────────►3────►4
    #   │                   ▲  [5]
    #   └────────►2─────────┘
    #        [2]       [1]
    return build(5, [(0, 1, 3), (0, 2, 2), (1, 3, 4), (2, 3, 1), (3, 4, 5)])


@pytest.fixture
def mixed():
    # Cycle {1, 2, 3} fed by 0 and draining into the cycle {4, 5}, plus an
    # isolated vertex 6 and a self-loop on 7.
    return build(
        8,
        [
            (0, 1, 2),
            (1, 2, 1),
            (2, 3, 1),
            (3, 1, 1),
            (3, 4, 9),
            (2, 4, 6),
            (4, 5, 1),
            (5, 4, 1),
            (7, 7, 1),
        ],
    )
