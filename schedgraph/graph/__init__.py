"""Graph primitives and helpers.

This package provides the integer-indexed `Graph` type and helper modules for
NetworkX conversion (`convert`) and description files (`io`).
"""

from schedgraph.graph.digraph import WEIGHT_MODELS, Edge, Graph, VertexID, Weight

__all__ = ["Edge", "Graph", "VertexID", "Weight", "WEIGHT_MODELS"]
