"""TurnPriorityPathFinder -- minimum-turn search over an OrientationalGraph.

Same state keying as BFSPathFinder, but the frontier is a heap ordered by
(turn count, discovery sequence) and the goal test happens when a state is
popped. The returned path therefore has the fewest turns among all
discoverable paths; ties go to the path discovered first.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Hashable
from typing import Any

from ..graph.orientational import OrientationalGraph
from ..graph.types import Direction, GraphNode
from .protocol import GoalPredicate, PassablePredicate, validate_search_arguments
from .types import Path, SearchState

logger = logging.getLogger(__name__)


class TurnPriorityPathFinder:
    """Strategy returning a turn-minimal path."""

    def find_path(
        self,
        graph: OrientationalGraph,
        start: Hashable,
        goal: Any,
        is_goal: GoalPredicate,
        is_passable: PassablePredicate,
    ) -> Path | None:
        validate_search_arguments(graph, is_goal, is_passable)

        start_node = graph.get_node(start)
        if start_node is None:
            logger.debug("Start %r is not in the graph", start)
            return None

        initial = SearchState.initial(start_node)
        if is_goal(start, goal):
            return initial.to_path()

        sequence = itertools.count()
        best_turns: dict[tuple[GraphNode, Direction], int] = {}
        heap: list[tuple[int, int, SearchState]] = [(0, next(sequence), initial)]

        while heap:
            turns, _, current = heapq.heappop(heap)
            if best_turns.get((current.node, current.arrival_direction), turns) < turns:
                continue  # stale: a cheaper state for this key was pushed later

            if current is not initial and is_goal(current.node.value, goal):
                logger.debug("Goal %r found with %d turns", current.node.value, turns)
                return current.to_path()

            for direction, neighbor in graph.directed_neighbors(current.node.value).items():
                if not is_passable(neighbor.value):
                    continue

                next_turns = current.turn_cost(direction)
                next_key = (neighbor, direction)
                known = best_turns.get(next_key)
                if known is not None and next_turns >= known:
                    continue

                best_turns[next_key] = next_turns
                heapq.heappush(
                    heap,
                    (next_turns, next(sequence), current.extend(neighbor, direction, next_turns)),
                )

        logger.debug("No path from %r to %r", start, goal)
        return None


__all__ = ["TurnPriorityPathFinder"]
