"""Graph -- undirected graph keyed by value, backed by a node arena.

Nodes are materialized lazily on first use and live in a single list owned
by the graph. Edges reference nodes by arena handle.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable

from ..exceptions import NodeNotFoundError
from .types import GraphNode, NodeKind

logger = logging.getLogger(__name__)


class Graph:
    """Undirected graph with exactly one node per distinct value.

    Subclasses choose the node capability through ``node_kind``; every node
    the graph creates carries that kind.

    Example:
        >>> g = Graph()
        >>> g.add_edge("a", "b")
        >>> [n.value for n in g.neighbors("a")]
        ['b']
    """

    node_kind: NodeKind = NodeKind.UNDIRECTED

    def __init__(self) -> None:
        self._nodes: list[GraphNode] = []
        self._index: dict[Hashable, int] = {}  # value -> handle

    # ── nodes ─────────────────────────────────────────────────

    def get_or_create_node(self, value: Hashable) -> GraphNode:
        """Return the node for *value*, creating and registering it if absent."""
        handle = self._index.get(value)
        if handle is not None:
            return self._nodes[handle]

        node = GraphNode(handle=len(self._nodes), value=value, kind=self.node_kind)
        self._nodes.append(node)
        self._index[value] = node.handle
        return node

    def get_node(self, value: Hashable) -> GraphNode | None:
        """Fetch the node for *value*, or None if it was never materialized."""
        handle = self._index.get(value)
        return None if handle is None else self._nodes[handle]

    def node_at(self, handle: int) -> GraphNode:
        """Resolve an arena handle.

        Raises:
            NodeNotFoundError: If *handle* is not a node of this graph.
        """
        if not 0 <= handle < len(self._nodes):
            raise NodeNotFoundError(handle)
        return self._nodes[handle]

    def get_all_nodes(self) -> tuple[GraphNode, ...]:
        return tuple(self._nodes)

    def __contains__(self, value: object) -> bool:
        try:
            return value in self._index
        except TypeError:  # unhashable
            return False

    def __len__(self) -> int:
        return len(self._nodes)

    # ── undirected edges ──────────────────────────────────────

    def add_edge(self, from_value: Hashable, to_value: Hashable) -> None:
        """Connect two values symmetrically, materializing them as needed.

        Self-loops are ignored.
        """
        from_node = self.get_or_create_node(from_value)
        to_node = self.get_or_create_node(to_value)
        if not from_node.add_neighbor(to_node.handle):
            logger.debug("Ignored self-loop on %r", from_value)
            return
        to_node.add_neighbor(from_node.handle)

    def remove_edge(self, from_value: Hashable, to_value: Hashable) -> None:
        """Disconnect two values. No-op if either value is unknown."""
        from_node = self.get_node(from_value)
        to_node = self.get_node(to_value)
        if from_node is None or to_node is None:
            return
        from_node.remove_neighbor(to_node.handle)
        to_node.remove_neighbor(from_node.handle)

    def neighbors(self, value: Hashable) -> list[GraphNode]:
        """Return the undirected neighbors of *value* (empty if unknown)."""
        node = self.get_node(value)
        if node is None:
            return []
        return [self._nodes[h] for h in sorted(node.neighbor_handles)]


__all__ = ["Graph"]
