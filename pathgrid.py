"""
Walkability grid for grid-based pathfinding.

Owns a row-major array of Nodes and answers the questions a search algorithm
asks while expanding a cell: is a position inside, is it walkable (optionally
from a given side), and which cells can be reached from here under the
diagonal and corner-cutting rules in effect.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from grid_types import (
    MovementRules,
    OutOfBounds,
    ShapeMismatch,
    Side,
    Walkable,
    coerce_walkable,
)
from node import Node

logger = logging.getLogger(__name__)

__all__ = ["Grid"]


Matrix = Sequence[Sequence[Any]]

# Enumeration order for orthogonal moves: up, right, down, left
ORTHOGONAL = (Side.TOP, Side.RIGHT, Side.BOTTOM, Side.LEFT)

# Diagonals as (horizontal side, vertical side), in enumeration order:
# up-left, up-right, down-right, down-left
DIAGONAL = (
    (Side.LEFT, Side.TOP),
    (Side.RIGHT, Side.TOP),
    (Side.RIGHT, Side.BOTTOM),
    (Side.LEFT, Side.BOTTOM),
)


class Grid:
    """
    A fixed-size grid of walkable, blocked, or border-tagged cells.

    Matrix convention: any truthy value is an obstacle, while 0, False and
    None are walkable. If no matrix is given every cell is walkable.

    Per-node search state is scoped to the grid's iteration. Call increment()
    between independent searches to reuse the layout with fresh search state.

        offsets          diagonals
      +---+---+---+    +---+---+---+
      |   | 0 |   |    | 0 |   | 1 |
      +---+---+---+    +---+---+---+
      | 3 |   | 1 |    |   |   |   |
      +---+---+---+    +---+---+---+
      |   | 2 |   |    | 3 |   | 2 |
      +---+---+---+    +---+---+---+

    Diagonal i is framed by orthogonal moves (i - 1) % 4 and i.
    """

    def __init__(
        self,
        width: int,
        height: int,
        matrix: Matrix | None = None,
        rules: MovementRules = MovementRules(),
    ):
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got width={width}, height={height}"
            )
        self._width = width
        self._height = height
        self.rules = rules
        self.nodes = self._build_nodes(width, height, matrix)
        self.iteration = 0
        logger.debug("Built %dx%d grid (matrix=%s)", width, height, matrix is not None)

    @staticmethod
    def _build_nodes(width: int, height: int, matrix: Matrix | None) -> list[list[Node]]:
        if matrix is not None:
            _check_shape(width, height, matrix)

        nodes = [[Node(x, y) for x in range(width)] for y in range(height)]

        if matrix is not None:
            for y in range(height):
                for x in range(width):
                    if matrix[y][x]:
                        nodes[y][x].walkable = False

        return nodes

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        """Grid size as (width, height)."""
        return (self._width, self._height)

    # -------------------------------------------------------------------------
    # Bounds and walkability
    # -------------------------------------------------------------------------

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_node_at(self, x: int, y: int) -> Node:
        """
        Get the node at (x, y) as of the current iteration.

        Raises:
            OutOfBounds: If (x, y) is not inside the grid
        """
        if not self.is_inside(x, y):
            raise OutOfBounds(x, y, self._width, self._height)
        return self.nodes[y][x].get(self.iteration)

    def try_get_node_at(self, x: int, y: int) -> Node | None:
        """Like get_node_at(), but returns None outside the grid."""
        if not self.is_inside(x, y):
            return None
        return self.nodes[y][x].get(self.iteration)

    def is_walkable_at(self, x: int, y: int, border: Side | str | None = None) -> bool:
        """
        Determine whether the node at (x, y) is walkable.

        A border-tagged node is walkable unless the tag equals border, so it
        reads as walkable when no border is given. Positions outside the grid
        are never walkable.
        """
        if not self.is_inside(x, y):
            return False
        walkable = self.nodes[y][x].get(self.iteration).walkable
        if isinstance(walkable, Side):
            # Unknown strings match no tag
            if isinstance(border, str):
                return walkable.value != border
            return walkable != border
        return walkable

    def set_walkable_at(self, x: int, y: int, walkable: Walkable | str) -> None:
        """
        Overwrite the walkable value of the node at (x, y).

        Not iteration-scoped: the change is visible at every iteration.

        Raises:
            OutOfBounds: If (x, y) is not inside the grid
            ValueError: If walkable is an unknown tag string
        """
        if not self.is_inside(x, y):
            raise OutOfBounds(x, y, self._width, self._height)
        self.nodes[y][x].walkable = coerce_walkable(walkable)

    # -------------------------------------------------------------------------
    # Neighbors
    # -------------------------------------------------------------------------

    def _can_step(self, x: int, y: int, side: Side) -> bool:
        """Orthogonal move from (x, y) across side."""
        dx, dy = side.offset
        return self.is_walkable_at(x + dx, y + dy, side.opposite) and self.is_walkable_at(
            x, y, side
        )

    def _can_step_diagonal(self, x: int, y: int, horizontal: Side, vertical: Side) -> bool:
        """Border checks on the diagonal target and both cells it passes between."""
        dx = horizontal.offset[0]
        dy = vertical.offset[1]
        return (
            self.is_walkable_at(x + dx, y + dy, vertical.opposite)
            and self.is_walkable_at(x + dx, y, vertical)
            and self.is_walkable_at(x + dx, y + dy, horizontal.opposite)
            and self.is_walkable_at(x, y + dy, horizontal)
        )

    def get_neighbors(
        self,
        node: Node,
        allow_diagonal: bool | None = None,
        dont_cross_corners: bool | None = None,
    ) -> list[Node]:
        """
        Get the nodes reachable in one move from node.

        Order is up, right, down, left, then up-left, up-right, down-right,
        down-left. Unreachable directions are omitted.

        Args:
            node: The origin node
            allow_diagonal: Include diagonal moves (default from self.rules)
            dont_cross_corners: Require both framing orthogonal moves for a
                diagonal instead of either one (default from self.rules)

        Returns:
            Neighbor nodes as of the current iteration
        """
        if allow_diagonal is None:
            allow_diagonal = self.rules.allow_diagonal
        if dont_cross_corners is None:
            dont_cross_corners = self.rules.dont_cross_corners

        x, y = node.x, node.y
        neighbors: list[Node] = []
        steps: list[bool] = []

        for side in ORTHOGONAL:
            ok = self._can_step(x, y, side)
            if ok:
                dx, dy = side.offset
                neighbors.append(self.nodes[y + dy][x + dx].get(self.iteration))
            steps.append(ok)

        if not allow_diagonal:
            return neighbors

        for i, (horizontal, vertical) in enumerate(DIAGONAL):
            before, after = steps[(i - 1) % 4], steps[i]
            if dont_cross_corners:
                eligible = before and after
            else:
                eligible = before or after

            if eligible and self._can_step_diagonal(x, y, horizontal, vertical):
                dx = horizontal.offset[0]
                dy = vertical.offset[1]
                neighbors.append(self.nodes[y + dy][x + dx].get(self.iteration))

        return neighbors

    # -------------------------------------------------------------------------
    # Cloning and generations
    # -------------------------------------------------------------------------

    def clone(self) -> Grid:
        """
        Get an independent copy of this grid.

        Only walkable values are copied. The clone starts at iteration 0 with
        fresh search state and shares no nodes with this grid.
        """
        new_grid = Grid(self._width, self._height, rules=self.rules)
        new_grid.nodes = [
            [Node(x, y, node.walkable) for x, node in enumerate(row)]
            for y, row in enumerate(self.nodes)
        ]
        logger.debug("Cloned %dx%d grid at iteration %d", self._width, self._height, self.iteration)
        return new_grid

    def increment(self) -> None:
        """Start a new iteration: search state from earlier ones is no longer visible."""
        self.iteration += 1

    def walkable_matrix(self) -> list[list[int]]:
        """Obstacle matrix in construction polarity (1 = blocked). Border tags read as 0."""
        return [[1 if node.walkable is False else 0 for node in row] for row in self.nodes]

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, iteration={self.iteration})"


def _check_shape(width: int, height: int, matrix: Matrix) -> None:
    if len(matrix) != height:
        raise ShapeMismatch(
            f"Matrix size does not fit\n"
            f"  Expected: {height} rows\n"
            f"  Got: {len(matrix)} rows"
        )
    mismatched = [(i, len(row)) for i, row in enumerate(matrix) if len(row) != width]
    if mismatched:
        error_msg = (
            f"Matrix size does not fit\n"
            f"  Expected: {width} columns\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
        raise ShapeMismatch(error_msg.rstrip("\n"))
