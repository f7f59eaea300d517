"""PathFindingStrategy protocol -- the interface every search algorithm implements.

Public API:
    GoalPredicate: ``(candidate, goal) -> bool``.
    PassablePredicate: ``(candidate) -> bool``.
    PathFindingStrategy: Runtime-checkable protocol for search strategies.
    validate_search_arguments: Fail-fast checks shared by all strategies.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any, Protocol, runtime_checkable

from ..graph.orientational import OrientationalGraph
from .types import Path

GoalPredicate = Callable[[Any, Any], bool]
PassablePredicate = Callable[[Any], bool]


@runtime_checkable
class PathFindingStrategy(Protocol):
    """Common interface for path-finding algorithms.

    Call sites depend on this protocol rather than a concrete algorithm, so
    strategies can be swapped without touching them.
    """

    def find_path(
        self,
        graph: OrientationalGraph,
        start: Hashable,
        goal: Any,
        is_goal: GoalPredicate,
        is_passable: PassablePredicate,
    ) -> Path | None:
        """Search *graph* from *start* for a node satisfying *is_goal*.

        Args:
            graph: Graph to search. Never mutated.
            start: Value of the start node.
            goal: Opaque goal passed through to *is_goal*.
            is_goal: ``is_goal(candidate_value, goal)``; may match
                approximately, not only by equality.
            is_passable: Evaluated per candidate at traversal time. The
                start node is never tested.

        Returns:
            The discovered Path, or None when no node satisfies *is_goal*.

        Raises:
            ValueError: If *graph* or a predicate is None.
            TypeError: If *graph* is not orientational or a predicate is
                some other non-callable object.
        """
        ...


def validate_search_arguments(
    graph: Any,
    is_goal: Any,
    is_passable: Any,
) -> None:
    """Reject malformed search input before any expansion happens."""
    if graph is None:
        raise ValueError("graph cannot be None")
    if not isinstance(graph, OrientationalGraph):
        raise TypeError("graph must be an OrientationalGraph")
    if is_goal is None or is_passable is None:
        raise ValueError("is_goal and is_passable cannot be None")
    if not callable(is_goal):
        raise TypeError("is_goal must be callable")
    if not callable(is_passable):
        raise TypeError("is_passable must be callable")


__all__ = [
    "GoalPredicate",
    "PassablePredicate",
    "PathFindingStrategy",
    "validate_search_arguments",
]
