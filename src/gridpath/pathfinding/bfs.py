"""BFSPathFinder -- turn-aware breadth-first search over an OrientationalGraph.

States are keyed by (node, arrival direction) rather than by node alone:
continuing straight from a node is cheaper than turning, so the same node
reached from two directions is two different states.

The frontier is plain FIFO. The first path that reaches the goal is
returned, which is the first one *discovered*. It has the fewest hops
among discoverable paths but not necessarily the fewest turns; use
``TurnPriorityPathFinder`` when the turn count must be minimal.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Hashable
from typing import Any

from ..graph.orientational import OrientationalGraph
from ..graph.types import Direction, GraphNode
from .protocol import GoalPredicate, PassablePredicate, validate_search_arguments
from .types import Path, SearchState

logger = logging.getLogger(__name__)


class BFSPathFinder:
    """Breadth-first strategy with per-(node, direction) best-turn bookkeeping."""

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
            logger.debug("Start %r already satisfies the goal", start)
            return initial.to_path()

        best_turns: dict[tuple[GraphNode, Direction], int] = {}
        queue: deque[SearchState] = deque([initial])
        logger.debug("Enqueued start node: %r", start)

        while queue:
            current = queue.popleft()
            logger.debug(
                "Dequeued %r (arrived %s, turns=%d, depth=%d)",
                current.node.value,
                current.arrival_direction.name,
                current.turn_count,
                len(current.path_so_far) - 1,
            )

            for direction, neighbor in graph.directed_neighbors(current.node.value).items():
                if not is_passable(neighbor.value):
                    logger.debug("  Skipped %r: not passable", neighbor.value)
                    continue

                turns = current.turn_cost(direction)
                key = (neighbor, direction)
                known = best_turns.get(key)
                if known is not None and turns >= known:
                    logger.debug("  Skipped %r via %s: already reached with %d turns",
                                 neighbor.value, direction.name, known)
                    continue

                best_turns[key] = turns
                state = current.extend(neighbor, direction, turns)

                if is_goal(neighbor.value, goal):
                    logger.debug("Goal %r found after %d hops, %d turns",
                                 neighbor.value, len(state.path_so_far) - 1, turns)
                    return state.to_path()

                queue.append(state)

        logger.debug("No path from %r to %r", start, goal)
        return None


__all__ = ["BFSPathFinder"]
