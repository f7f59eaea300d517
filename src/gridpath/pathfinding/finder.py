"""PathFinder facade and strategy factory.

Call sites go through ``PathFinder.find_path`` (or the module-level
``find_path``) and pick an algorithm by instance or by name, so adding a
strategy never changes them.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from ..graph.orientational import OrientationalGraph
from .bfs import BFSPathFinder
from .protocol import GoalPredicate, PassablePredicate, PathFindingStrategy
from .turn_priority import TurnPriorityPathFinder
from .types import Path

_STRATEGIES: dict[str, type] = {
    "bfs": BFSPathFinder,
    "turn_priority": TurnPriorityPathFinder,
}


def create_strategy(name: str = "bfs") -> PathFindingStrategy:
    """Factory for path-finding strategies.

    Args:
        name: ``"bfs"`` (first-discovered, FIFO) or ``"turn_priority"``
            (fewest turns).

    Raises:
        ValueError: If *name* is unrecognised.
    """
    try:
        return _STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown strategy: {name!r}.  "
            f"Choose from: {', '.join(repr(k) for k in _STRATEGIES)}"
        ) from None


class PathFinder:
    """Stateless facade delegating to a PathFindingStrategy."""

    @staticmethod
    def find_path(
        graph: OrientationalGraph,
        start: Hashable,
        goal: Any,
        is_goal: GoalPredicate,
        is_passable: PassablePredicate,
        strategy: PathFindingStrategy | None = None,
    ) -> Path | None:
        if strategy is None:
            strategy = BFSPathFinder()
        elif not isinstance(strategy, PathFindingStrategy):
            raise TypeError("strategy must implement PathFindingStrategy")
        return strategy.find_path(graph, start, goal, is_goal, is_passable)


find_path = PathFinder.find_path

__all__ = ["PathFinder", "create_strategy", "find_path"]
