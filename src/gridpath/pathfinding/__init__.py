"""Turn-aware path finding over orientational graphs.

Public API:
    Path: Immutable search result.
    SearchState: Frontier record.
    PathFindingStrategy: Protocol every strategy implements.
    BFSPathFinder: FIFO breadth-first strategy (first discovered path).
    TurnPriorityPathFinder: Strategy returning a turn-minimal path.
    PathFinder: Facade delegating to a strategy.
    find_path: Alias of PathFinder.find_path.
    create_strategy: Factory selecting a strategy by name.
"""

from __future__ import annotations

from .bfs import BFSPathFinder
from .finder import PathFinder, create_strategy, find_path
from .protocol import PathFindingStrategy
from .turn_priority import TurnPriorityPathFinder
from .types import Path, SearchState

__all__ = [
    "Path",
    "SearchState",
    "PathFindingStrategy",
    "BFSPathFinder",
    "TurnPriorityPathFinder",
    "PathFinder",
    "find_path",
    "create_strategy",
]
