"""Exception types raised by schedgraph.

Each violated precondition has its own type. All of them derive from a
builtin exception so callers can also catch ``ValueError`` or
``RuntimeError`` broadly.
"""


class NotDirectedError(ValueError):
    """A directed-only operation was requested on an undirected graph."""


class NotADAGError(ValueError):
    """A DAG-only operation was requested on a graph that contains a cycle."""


class SCCNotComputedError(RuntimeError):
    """SCC-derived data was requested before ``find_sccs()`` ran."""
