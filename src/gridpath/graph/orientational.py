"""OrientationalGraph -- graph whose nodes hold one neighbor per direction.

A directed edge ``A --RIGHT--> B`` may be mirrored as ``B --LEFT--> A``.
The two records are independent; they are kept in sync only when callers
pass ``bidirectional=True``.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable

from .graph import Graph
from .types import Direction, GraphNode, NodeKind

logger = logging.getLogger(__name__)


class OrientationalGraph(Graph):
    """Graph of orientational nodes connected by direction-keyed edges."""

    node_kind = NodeKind.ORIENTATIONAL

    def add_directed_edge(
        self,
        from_value: Hashable,
        to_value: Hashable,
        direction: Direction,
        bidirectional: bool = True,
    ) -> None:
        """Set ``from --direction--> to``, materializing both endpoints.

        An occupied slot is overwritten. With *bidirectional* the mirrored
        edge ``to --opposite--> from`` is written as well.
        """
        from_node = self.get_or_create_node(from_value)
        to_node = self.get_or_create_node(to_value)

        if not from_node.set_directed_neighbor(direction, to_node.handle):
            logger.debug("Ignored directed self-loop on %r (%s)", from_value, direction.name)
            return

        if bidirectional:
            to_node.set_directed_neighbor(direction.opposite(), from_node.handle)

    def remove_directed_edge(
        self,
        from_value: Hashable,
        direction: Direction,
        bidirectional: bool = True,
    ) -> None:
        """Clear the *direction* slot of *from_value*.

        No-op if the value is unknown or the slot is empty. With
        *bidirectional* the neighbor's opposite slot is cleared too.
        """
        from_node = self.get_node(from_value)
        if from_node is None:
            return

        handle = from_node.remove_directed_neighbor(direction)
        if handle is None:
            return

        if bidirectional:
            self.node_at(handle).remove_directed_neighbor(direction.opposite())

    def neighbor_in(self, value: Hashable, direction: Direction) -> GraphNode | None:
        """Return the neighbor of *value* at *direction*, or None."""
        node = self.get_node(value)
        if node is None:
            return None
        handle = node.directed_neighbor(direction)
        return None if handle is None else self.node_at(handle)

    def directed_neighbors(self, value: Hashable) -> dict[Direction, GraphNode]:
        """Return the direction -> neighbor map of *value* (empty if unknown).

        Iteration order follows the order in which slots were first set.
        """
        node = self.get_node(value)
        if node is None:
            return {}
        return {d: self.node_at(h) for d, h in node.directed_handles.items()}

    def __str__(self) -> str:
        lines = ["OrientationalGraph:"]
        for node in self.get_all_nodes():
            links = ", ".join(
                f"{d.name}→{n.value}" for d, n in self.directed_neighbors(node.value).items()
            )
            lines.append(f"Node: {node.value} | Neighbors: {links}".rstrip())
        return "\n".join(lines)


__all__ = ["OrientationalGraph"]
