"""gridpath-lib: Directional graphs and turn-aware path finding."""

__version__ = "0.1.0"

from .exceptions import (
    GridPathError,
    NodeNotFoundError,
    UnsupportedNodeOperationError,
)
from .graph import Direction, Graph, GraphNode, NodeKind, OrientationalGraph
from .grid import build_grid_graph
from .pathfinding import (
    BFSPathFinder,
    Path,
    PathFinder,
    PathFindingStrategy,
    SearchState,
    TurnPriorityPathFinder,
    create_strategy,
    find_path,
)

__all__ = [
    # Graph model
    "Direction",
    "NodeKind",
    "GraphNode",
    "Graph",
    "OrientationalGraph",
    "build_grid_graph",
    # Path finding
    "Path",
    "SearchState",
    "PathFindingStrategy",
    "BFSPathFinder",
    "TurnPriorityPathFinder",
    "PathFinder",
    "find_path",
    "create_strategy",
    # Exceptions
    "GridPathError",
    "NodeNotFoundError",
    "UnsupportedNodeOperationError",
]
