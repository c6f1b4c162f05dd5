"""Search-tree node used by the hybrid A* planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from carpath.geometry import Vec3, Vec3i

__all__ = ["NodeStatus", "Direction", "StateNode"]


class NodeStatus(IntEnum):
    """Where a node currently sits in the search."""

    NOT_VISITED = 0
    IN_OPENSET = 1
    IN_CLOSESET = 2


class Direction(IntEnum):
    """Driving direction used to reach a node."""

    FORWARD = 0
    BACKWARD = 1
    NO = 3


@dataclass(eq=False)
class StateNode:
    """A discretised vehicle state with its costs and parent link."""

    grid_index: Vec3i
    status: NodeStatus = NodeStatus.NOT_VISITED
    direction: Direction = Direction.FORWARD
    state: Vec3 = (0.0, 0.0, 0.0)
    g_cost: float = 0.0
    f_cost: float = 0.0
    steering_grade: int = 0
    parent: Optional["StateNode"] = None
    intermediate_states: list[Vec3] = field(default_factory=list)

    def reset(self) -> None:
        """Mark the node unvisited and drop its parent link."""
        self.status = NodeStatus.NOT_VISITED
        self.parent = None