"""Graph model for grid-like topologies.

Public API:
    Direction: Hop direction with an opposite() mapping.
    NodeKind: Neighbor capability of a node.
    GraphNode: Arena-resident node referencing neighbors by handle.
    Graph: Undirected graph keyed by value.
    OrientationalGraph: Graph with one neighbor per direction per node.
"""

from __future__ import annotations

from .graph import Graph
from .orientational import OrientationalGraph
from .types import Direction, GraphNode, NodeKind

__all__ = [
    "Direction",
    "NodeKind",
    "GraphNode",
    "Graph",
    "OrientationalGraph",
]
