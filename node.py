"""
Per-cell state holder with generation-scoped search state.

A Node carries its fixed coordinates, its walkable value, and the mutable
fields search algorithms write while expanding it (costs, list membership,
parent link). Those search fields belong to a generation: reading the node
through get() with a newer generation resets them first, so one grid can
serve many independent searches without being rebuilt.
"""

from __future__ import annotations

from grid_types import Walkable, coerce_walkable


class Node:
    """A single grid cell."""

    def __init__(self, x: int, y: int, walkable: Walkable | str = True):
        self._x = x
        self._y = y
        self.walkable = coerce_walkable(walkable)
        self.generation = 0
        self.reset()

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def reset(self) -> None:
        """Clear search state without changing the generation."""
        self.g = 0.0
        self.h = 0.0
        self.f = 0.0
        self.opened = False
        self.closed = False
        self.parent: Node | None = None

    def get(self, generation: int) -> Node:
        """
        Return this node as seen at the given generation.

        Search state written under an earlier generation is discarded. The
        walkable value is not generation-scoped and is always current.

        Raises:
            ValueError: If generation is older than the current one
        """
        if generation < self.generation:
            raise ValueError(
                f"Generation {generation} is older than current generation {self.generation}"
            )
        if generation != self.generation:
            self.reset()
            self.generation = generation
        return self

    def __repr__(self) -> str:
        return f"Node(x={self._x}, y={self._y}, walkable={self.walkable!r})"
