"""
Demonstration script for the walkgrid neighbor rules.
"""

import logging

from ascii_render import render
from grid_parser import parse_grid
from grid_types import MovementRules
from pathgrid import Grid


def show(title: str, grid: Grid, x: int, y: int, **kwargs: bool) -> None:
    origin = grid.get_node_at(x, y)
    neighbors = grid.get_neighbors(origin, **kwargs)
    print(f"=== {title} ===")
    print(render(grid, origin=origin, neighbors=neighbors))
    print(f"Neighbors of ({x}, {y}): {[(n.x, n.y) for n in neighbors]}")
    print()


def demo() -> None:
    """Walk through construction, neighbor rules, cloning and iterations."""
    open_grid = Grid(5, 5)
    show("Orthogonal only", open_grid, 2, 2)
    show("With diagonals", open_grid, 2, 2, allow_diagonal=True)

    # Matrix polarity: 1 is an obstacle
    walled = Grid(
        5,
        5,
        [
            [0, 0, 0, 0, 0],
            [0, 0, 1, 0, 0],
            [0, 1, 0, 0, 0],
            [0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
        ],
    )
    show("Corners, crossing allowed", walled, 2, 2, allow_diagonal=True)
    show(
        "Corners, no crossing",
        walled,
        2,
        2,
        allow_diagonal=True,
        dont_cross_corners=True,
    )

    # A top border on the origin blocks the move up but not the diagonals
    bordered = parse_grid(
        """
        .....
        .....
        ..^..
        .....
        .....
        """,
        rules=MovementRules(allow_diagonal=True),
    )
    show("Top border on origin", bordered, 2, 2)
    show("Top border on origin, no crossing", bordered, 2, 2, dont_cross_corners=True)

    # Reusing one layout across searches
    node = open_grid.get_node_at(0, 0)
    node.closed = True
    node.g = 4.0
    open_grid.increment()
    fresh = open_grid.get_node_at(0, 0)
    print(f"After increment: iteration={open_grid.iteration} closed={fresh.closed} g={fresh.g}")

    copy = walled.clone()
    copy.set_walkable_at(2, 1, True)
    print(
        f"Clone edited: clone (2, 1) walkable={copy.is_walkable_at(2, 1)}, "
        f"original walkable={walled.is_walkable_at(2, 1)}"
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    demo()
