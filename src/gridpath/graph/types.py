"""Graph data structures shared by the undirected and orientational graphs.

Public API:
    Direction: The four grid directions plus the NONE sentinel.
    NodeKind: Capability of a node (undirected neighbor set only, or
        additionally a direction-keyed neighbor map).
    GraphNode: Arena-resident node that references neighbors by handle.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..exceptions import UnsupportedNodeOperationError


class Direction(Enum):
    """Direction of a hop between two orientational nodes."""

    NONE = "none"  # no prior direction (start state)
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    def opposite(self) -> Direction:
        """Return the mirrored direction. NONE maps to itself."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NONE: Direction.NONE,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
}


class NodeKind(Enum):
    """Which neighbor storage a node carries."""

    UNDIRECTED = "undirected"
    ORIENTATIONAL = "orientational"


@dataclass(eq=False)
class GraphNode:
    """A node stored in a graph's arena.

    Nodes never hold references to other nodes. Neighbors are recorded by
    their arena handle and resolved through the owning graph, so cyclic
    topologies carry no ownership cycles.

    Attributes:
        handle: Stable index of this node in the owning graph's arena.
        value: The hashable value identifying this node.
        kind: Neighbor capability, fixed by the graph that created the node.
    """

    handle: int
    value: Hashable
    kind: NodeKind = NodeKind.UNDIRECTED
    _neighbors: set[int] = field(default_factory=set, init=False, repr=False)
    _directed: dict[Direction, int] = field(default_factory=dict, init=False, repr=False)

    # ── undirected neighbors ──────────────────────────────────

    @property
    def neighbor_handles(self) -> frozenset[int]:
        """Handles of undirected neighbors."""
        return frozenset(self._neighbors)

    def add_neighbor(self, handle: int) -> bool:
        """Record an undirected neighbor. Returns False for a self-loop."""
        if handle == self.handle:
            return False
        self._neighbors.add(handle)
        return True

    def remove_neighbor(self, handle: int) -> None:
        self._neighbors.discard(handle)

    # ── directed neighbors ────────────────────────────────────

    @property
    def is_orientational(self) -> bool:
        return self.kind is NodeKind.ORIENTATIONAL

    @property
    def directed_handles(self) -> Mapping[Direction, int]:
        """Read-only view of the direction -> neighbor handle map."""
        self._require_orientational()
        return MappingProxyType(self._directed)

    def set_directed_neighbor(self, direction: Direction, handle: int) -> bool:
        """Point *direction* at *handle*, overwriting any previous neighbor.

        Returns:
            False if *handle* is this node (the slot is left untouched).
        """
        self._require_orientational()
        if handle == self.handle:
            return False
        self._directed[direction] = handle
        return True

    def remove_directed_neighbor(self, direction: Direction) -> int | None:
        """Clear *direction* and return the handle it held, if any."""
        self._require_orientational()
        return self._directed.pop(direction, None)

    def directed_neighbor(self, direction: Direction) -> int | None:
        self._require_orientational()
        return self._directed.get(direction)

    def _require_orientational(self) -> None:
        if self.kind is not NodeKind.ORIENTATIONAL:
            raise UnsupportedNodeOperationError(
                f"Node {self.value!r} is {self.kind.value}; "
                "directed neighbors require an orientational node"
            )


__all__ = ["Direction", "NodeKind", "GraphNode"]
