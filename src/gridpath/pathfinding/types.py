"""Value types produced and consumed by path-finding strategies.

Public API:
    Path: Immutable search result (node sequence plus turn count).
    SearchState: Frontier record tracked during expansion.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass

from ..graph.types import Direction, GraphNode


@dataclass(frozen=True)
class Path:
    """An ordered node sequence from the start to the matched goal.

    Attributes:
        nodes: Nodes visited, start first.
        turn_count: Number of direction changes along the path.
    """

    nodes: Iterable[GraphNode] | None = ()
    turn_count: int = 0

    def __post_init__(self):
        """Freeze the node sequence and validate the turn count."""
        if (
            isinstance(self.turn_count, bool)
            or not isinstance(self.turn_count, int)
            or self.turn_count < 0
        ):
            raise ValueError("turn_count must be a non-negative integer")
        nodes = tuple(self.nodes) if self.nodes is not None else ()
        object.__setattr__(self, "nodes", nodes)

    @property
    def is_valid(self) -> bool:
        return len(self.nodes) > 0

    @property
    def values(self) -> tuple[Hashable, ...]:
        return tuple(node.value for node in self.nodes)

    @property
    def hop_count(self) -> int:
        return max(len(self.nodes) - 1, 0)

    def __len__(self) -> int:
        return len(self.nodes)

    def __str__(self) -> str:
        return f"Path (Turns: {self.turn_count}, Length: {len(self.nodes)})"


@dataclass(frozen=True)
class SearchState:
    """One frontier entry: where we are, how we got here, and at what cost.

    ``path_so_far`` is copied into a tuple on construction, so sibling
    states sharing a prefix never observe each other's extensions.
    """

    node: GraphNode
    arrival_direction: Direction
    turn_count: int
    path_so_far: tuple[GraphNode, ...]

    def __post_init__(self):
        object.__setattr__(self, "path_so_far", tuple(self.path_so_far))

    @property
    def is_start(self) -> bool:
        return len(self.path_so_far) == 1

    @classmethod
    def initial(cls, node: GraphNode) -> SearchState:
        return cls(node, Direction.NONE, 0, (node,))

    def turn_cost(self, direction: Direction) -> int:
        """Turn count after hopping along *direction* from this state.

        The first hop out of the start state never counts as a turn. Any
        later hop counts when its direction differs from the arrival one,
        including hops into or out of a NONE-keyed edge.
        """
        if self.is_start or direction is self.arrival_direction:
            return self.turn_count
        return self.turn_count + 1

    def extend(self, neighbor: GraphNode, direction: Direction, turn_count: int) -> SearchState:
        return SearchState(neighbor, direction, turn_count, self.path_so_far + (neighbor,))

    def to_path(self) -> Path:
        return Path(self.path_so_far, self.turn_count)


__all__ = ["Path", "SearchState"]
